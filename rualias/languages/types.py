"""Shared grammatical type definitions."""
from typing import Literal

GrammaticalCase = Literal[
    "nominative", "genitive", "dative", "accusative", "instrumental", "prepositional",
]

GrammaticalNumber = Literal["singular", "plural"]

Gender = Literal["masculine", "feminine", "neuter", "plural"]

# Russian grammatical cases (ordered)
CASES: tuple[GrammaticalCase, ...] = (
    "nominative", "genitive", "dative", "accusative", "instrumental", "prepositional",
)
