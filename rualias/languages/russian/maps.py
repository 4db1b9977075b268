"""Russian orthographic and response-key mappings."""
from rualias.languages.types import Gender

# Cyrillic single-letter case abbreviations used by declension web services
CASE_ABBREVIATIONS = {
    "И": "nominative",
    "Р": "genitive",
    "Д": "dative",
    "В": "accusative",
    "Т": "instrumental",
    "П": "prepositional",
}
CASE_ABBREVIATIONS_REV = {v: k for k, v in CASE_ABBREVIATIONS.items()}

# Key under which those services nest the plural paradigm
PLURAL_KEY = "множественное"

VOWELS = frozenset("аеиоуыэюя")

# Velar (and ц) softening before front-vowel endings
ALTERNATIONS = {
    "к": "ч",
    "г": "ж",
    "х": "ш",
    "ц": "ч",
}

# Endings that trigger the alternation
FRONT_VOWEL_ENDINGS = ("и", "е")

# Stem-final consonants that take soft endings in the masculine paradigm
SOFT_MASCULINE_FINALS = frozenset("жшчщй")

# Loanwords that never change form
INDECLINABLE_WORDS = frozenset({"метро", "кино", "пальто", "кофе", "такси", "шоссе", "депо"})

# Adjective ending -> gender, checked in this order
ADJECTIVE_ENDINGS: dict[str, Gender] = {
    "ый": "masculine",
    "ий": "masculine",
    "ой": "masculine",
    "ая": "feminine",
    "яя": "feminine",
    "ое": "neuter",
    "ее": "neuter",
    "ые": "plural",
    "ие": "plural",
}

# First letters of adjective endings that mark a soft stem
SOFT_ADJECTIVE_MARKERS = ("и", "я", "е")

# Action nouns whose -ие ending must not be read as a plural adjective
VERBAL_NOUN_SUFFIXES = ("ние", "тие")
