"""Language support: shared grammatical types and per-language engines."""
from .types import CASES, GrammaticalCase, GrammaticalNumber, Gender

__all__ = [
    "CASES",
    "GrammaticalCase",
    "GrammaticalNumber",
    "Gender",
]
