"""Network-facing collaborators: connectivity probe and remote declension providers."""
from .base import DeclensionProvider, FieldTable
from .morpher import MORPHER_FIELDS, MorpherProvider
from .probe import ConnectivityProbe
from .sklonenie import SKLONENIE_FIELDS, SklonenieProvider

__all__ = [
    "ConnectivityProbe",
    "DeclensionProvider",
    "FieldTable",
    "MORPHER_FIELDS",
    "MorpherProvider",
    "SKLONENIE_FIELDS",
    "SklonenieProvider",
]
