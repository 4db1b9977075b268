"""Secondary provider: accepts English or Cyrillic case keys."""
from rualias.languages.russian.maps import CASE_ABBREVIATIONS_REV, PLURAL_KEY

from .base import DeclensionProvider, FieldTable

# English key first so it wins when both spellings are present
SKLONENIE_FIELDS = FieldTable(
    singular={case: (case, abbr) for case, abbr in CASE_ABBREVIATIONS_REV.items()},
    plural={case: (case, abbr) for case, abbr in CASE_ABBREVIATIONS_REV.items()},
    plural_containers=("plural", PLURAL_KEY),
)


class SklonenieProvider(DeclensionProvider):
    name = "sklonenie"
    fields = SKLONENIE_FIELDS
