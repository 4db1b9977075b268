"""Primary provider: the Morpher declension web service."""
from rualias.languages.russian.maps import CASE_ABBREVIATIONS_REV, PLURAL_KEY

from .base import DeclensionProvider, FieldTable

MORPHER_FIELDS = FieldTable(
    singular={case: (abbr,) for case, abbr in CASE_ABBREVIATIONS_REV.items()},
    plural={case: (abbr,) for case, abbr in CASE_ABBREVIATIONS_REV.items()},
    plural_containers=(PLURAL_KEY,),
)


class MorpherProvider(DeclensionProvider):
    """Answers with Cyrillic case abbreviations; HTTP 496 means an unknown word."""

    name = "morpher"
    fields = MORPHER_FIELDS
    not_recognized_status = 496
