"""Russian declension patterns for the offline engine.

Each pattern lists, per case, the ending attached to the stem for the
singular and plural. An ending of None means the input word itself is used
unchanged. `stem_cut` is how many trailing letters are removed from the
input word to obtain the stem.
"""

DECLENSION_PATTERNS = {
    "neuter_ie": {  # здание
        "stem_cut": 2,
        "endings": {
            "nominative": {"singular": None, "plural": "ия"},
            "genitive": {"singular": "ия", "plural": "ий"},
            "dative": {"singular": "ию", "plural": "иям"},
            "accusative": {"singular": None, "plural": "ия"},
            "instrumental": {"singular": "ием", "plural": "иями"},
            "prepositional": {"singular": "ии", "plural": "иях"},
        },
    },
    "fem_a": {  # книга, армия
        "stem_cut": 1,
        "endings": {
            "nominative": {"singular": None, "plural": "ы"},
            "genitive": {"singular": "ы", "plural": ""},
            "dative": {"singular": "е", "plural": "ам"},
            "accusative": {"singular": "у", "plural": "ы"},
            "instrumental": {"singular": "ой", "plural": "ами"},
            "prepositional": {"singular": "е", "plural": "ах"},
        },
        "soft_endings": {
            "nominative": {"singular": None, "plural": "и"},
            "genitive": {"singular": "и", "plural": ""},
            "dative": {"singular": "е", "plural": "ам"},
            "accusative": {"singular": "ю", "plural": "и"},
            "instrumental": {"singular": "ей", "plural": "ами"},
            "prepositional": {"singular": "е", "plural": "ах"},
        },
    },
    "neut_o": {  # окно
        "stem_cut": 1,
        "endings": {
            "nominative": {"singular": None, "plural": "а"},
            "genitive": {"singular": "а", "plural": ""},
            "dative": {"singular": "у", "plural": "ам"},
            "accusative": {"singular": None, "plural": "а"},
            "instrumental": {"singular": "ом", "plural": "ами"},
            "prepositional": {"singular": "е", "plural": "ах"},
        },
    },
    "soft_sign": {  # тетрадь
        "stem_cut": 1,
        "endings": {
            "nominative": {"singular": None, "plural": "и"},
            "genitive": {"singular": "и", "plural": "ей"},
            "dative": {"singular": "и", "plural": "ям"},
            "accusative": {"singular": None, "plural": "и"},
            "instrumental": {"singular": "ью", "plural": "ями"},
            "prepositional": {"singular": "и", "plural": "ях"},
        },
    },
    "masc_hard": {  # стол, нож
        "stem_cut": 0,
        "endings": {
            "nominative": {"singular": None, "plural": "ы"},
            "genitive": {"singular": "а", "plural": "ов"},
            "dative": {"singular": "у", "plural": "ам"},
            "accusative": {"singular": None, "plural": "ы"},
            "instrumental": {"singular": "ом", "plural": "ами"},
            "prepositional": {"singular": "е", "plural": "ах"},
        },
        "soft_endings": {
            "nominative": {"singular": None, "plural": "и"},
            "genitive": {"singular": "а", "plural": "ов"},
            "dative": {"singular": "у", "plural": "ам"},
            "accusative": {"singular": None, "plural": "и"},
            "instrumental": {"singular": "ем", "plural": "ами"},
            "prepositional": {"singular": "е", "plural": "ах"},
        },
    },
    "plural_surface": {  # столы, книги
        "stem_cut": 1,
        "endings": {
            "nominative": {"plural": None},
            "genitive": {"plural": ""},
            "dative": {"plural": "ам"},
            "accusative": {"plural": None},
            "instrumental": {"plural": "ами"},
            "prepositional": {"plural": "ах"},
        },
    },
}

# Adjective endings keyed by gender; singular only, plural is shared
ADJECTIVE_PATTERNS = {
    "masculine": {
        "nominative": None,
        "genitive": "ого",
        "dative": "ому",
        "accusative": None,
        "instrumental": "ым",
        "prepositional": "ом",
    },
    "feminine": {
        "nominative": None,
        "genitive": "ой",
        "dative": "ой",
        "accusative": "ую",
        "instrumental": "ой",
        "prepositional": "ой",
    },
    "feminine_soft": {
        "nominative": None,
        "genitive": "ей",
        "dative": "ей",
        "accusative": "ую",
        "instrumental": "ей",
        "prepositional": "ей",
    },
    "plural": {
        "nominative": "ые",
        "genitive": "ых",
        "dative": "ым",
        "accusative": "ые",
        "instrumental": "ыми",
        "prepositional": "ых",
    },
    "plural_soft": {
        "nominative": "ие",
        "genitive": "ых",
        "dative": "ым",
        "accusative": "ие",
        "instrumental": "ыми",
        "prepositional": "ых",
    },
}
ADJECTIVE_PATTERNS["neuter"] = ADJECTIVE_PATTERNS["masculine"]
