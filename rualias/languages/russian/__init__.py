"""Russian offline declension."""
from .morph import (
    Classification,
    RussianDeclensionEngine,
    WordClass,
    alternate,
    classify,
    is_indeclinable,
)
from .number import is_plural_form, singular_form

__all__ = [
    "Classification",
    "RussianDeclensionEngine",
    "WordClass",
    "alternate",
    "classify",
    "is_indeclinable",
    "is_plural_form",
    "singular_form",
]
