"""Offline Russian Declension Engine

Deterministic, rule-based declension of single Russian words, used when
no remote provider can answer. Words are classified by their ending into
one of a handful of productive paradigms and declined from the pattern
tables in `declension`, with velar alternation applied to -а/-я stems.

It is not a general morphological analyzer: proper-noun exceptions and
irregular paradigms are out of reach, and multi-word input is refused.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from rualias.core.errors import AppError, Err, Ok, Result, unsupported_input
from rualias.core.logging import engine_logger
from rualias.languages.types import CASES, Gender, GrammaticalNumber
from rualias.models import CaseSet, DeclensionResult

from .declension import ADJECTIVE_PATTERNS, DECLENSION_PATTERNS
from .maps import (
    ADJECTIVE_ENDINGS,
    ALTERNATIONS,
    FRONT_VOWEL_ENDINGS,
    INDECLINABLE_WORDS,
    SOFT_ADJECTIVE_MARKERS,
    SOFT_MASCULINE_FINALS,
    VERBAL_NOUN_SUFFIXES,
    VOWELS,
)
from .number import singular_form

log = engine_logger()

# Two or more uppercase Cyrillic letters: an abbreviation such as МГУ
ABBREVIATION_RE = re.compile(r"^[А-ЯЁ]{2,}$")


class WordClass(Enum):
    """Declension classes, listed in classification priority order."""
    INDECLINABLE = "indeclinable"
    ADJECTIVE = "adjective"
    NOUN_NEUTER_IE = "noun_neuter_ie"
    NOUN_TYPE_A = "noun_type_a"
    NOUN_TYPE_O = "noun_type_o"
    NOUN_TYPE_SOFT = "noun_type_soft"
    NOUN_TYPE_PLURAL = "noun_type_plural"
    NOUN_MASCULINE = "noun_masculine"


@dataclass(frozen=True, slots=True)
class Classification:
    """Word class plus, for adjectives, the recognized ending and gender."""
    word_class: WordClass
    ending: str | None = None
    gender: Gender | None = None


def is_indeclinable(word: str) -> bool:
    if ABBREVIATION_RE.match(word):
        return True
    return word.lower() in INDECLINABLE_WORDS


def adjective_ending(word: str) -> str | None:
    """Return the adjective ending the word carries, if any.

    -ые/-ие only count for words longer than four letters that are not
    verbal nouns in -ние/-тие (здание, развитие).
    """
    lower = word.lower()
    for ending, gender in ADJECTIVE_ENDINGS.items():
        if not lower.endswith(ending):
            continue
        if gender == "plural" and (len(lower) <= 4 or lower.endswith(VERBAL_NOUN_SUFFIXES)):
            return None
        return ending
    return None


def classify(word: str) -> Classification:
    """Assign a single word to its declension class."""
    if is_indeclinable(word):
        return Classification(WordClass.INDECLINABLE)

    ending = adjective_ending(word)
    if ending:
        return Classification(WordClass.ADJECTIVE, ending=ending, gender=ADJECTIVE_ENDINGS[ending])

    lower = word.lower()
    if lower.endswith("ие"):
        return Classification(WordClass.NOUN_NEUTER_IE)
    if lower.endswith(("а", "я")):
        return Classification(WordClass.NOUN_TYPE_A)
    if lower.endswith(("о", "е")):
        return Classification(WordClass.NOUN_TYPE_O)
    if lower.endswith("ь"):
        return Classification(WordClass.NOUN_TYPE_SOFT)
    if lower.endswith(("ы", "и")):
        return Classification(WordClass.NOUN_TYPE_PLURAL)
    return Classification(WordClass.NOUN_MASCULINE)


def alternate(stem: str, ending: str) -> str:
    """Soften a stem-final к/г/х/ц before an ending starting with и or е.

    к and г after a vowel are left alone (рука -> руке, not руче).
    """
    if not stem:
        return stem

    last = stem[-1].lower()
    prev = stem[-2].lower() if len(stem) > 1 else ""

    if prev in VOWELS and last in ("к", "г"):
        return stem

    if ending.startswith(FRONT_VOWEL_ENDINGS) and last in ALTERNATIONS:
        softened = stem[:-1] + ALTERNATIONS[last]
        if stem[0] == stem[0].upper():
            return softened[0].upper() + softened[1:]
        return softened

    return stem


def _stem(word: str, pattern_id: str) -> str:
    return word[:len(word) - DECLENSION_PATTERNS[pattern_id]["stem_cut"]]


def _pattern_endings(
    pattern_id: str, number: GrammaticalNumber, soft: bool = False
) -> dict[str, str | None]:
    pattern = DECLENSION_PATTERNS[pattern_id]
    table = pattern["soft_endings"] if soft and "soft_endings" in pattern else pattern["endings"]
    return {case: table[case][number] for case in CASES}


def _build(word: str, stem: str, endings: Mapping[str, str | None]) -> CaseSet:
    """Attach endings to a stem; a None ending keeps the word as given."""
    return CaseSet.from_mapping({
        case: word if endings[case] is None else stem + endings[case]
        for case in CASES
    })


class RussianDeclensionEngine:
    """Offline decliner producing the same DeclensionResult shape as remote providers."""

    __slots__ = ()

    def decline(self, text: str) -> DeclensionResult | None:
        """Decline a single word; None for phrases (or empty input)."""
        match self.decline_result(text):
            case Ok(result):
                return result
            case Err(error):
                log.info("offline_declension_refused", word=text, reason=error.message)
                return None

    def decline_result(self, text: str) -> Result[DeclensionResult, AppError]:
        tokens = text.split()
        if len(tokens) > 1:
            return unsupported_input(text, "phrase declension needs a remote provider", origin="offline_engine")
        if not tokens:
            return unsupported_input(text, "nothing to decline", origin="offline_engine")
        return Ok(self.decline_word(tokens[0]))

    def decline_word(self, word: str) -> DeclensionResult:
        classification = classify(word)
        log.debug("word_classified", word=word, word_class=classification.word_class.value)

        match classification.word_class:
            case WordClass.INDECLINABLE:
                return DeclensionResult(singular=CaseSet.uniform(word), plural=None)
            case WordClass.ADJECTIVE:
                return self._decline_adjective(word, classification)
            case WordClass.NOUN_NEUTER_IE:
                return self._decline_neuter_ie(word)
            case WordClass.NOUN_TYPE_A:
                return self._decline_type_a(word)
            case WordClass.NOUN_TYPE_O:
                return self._decline_type_o(word)
            case WordClass.NOUN_TYPE_SOFT:
                return self._decline_soft(word)
            case WordClass.NOUN_TYPE_PLURAL:
                return self._decline_plural(word)
            case _:
                return self._decline_masculine(word)

    def _decline_adjective(self, word: str, classification: Classification) -> DeclensionResult:
        ending = classification.ending or ""
        gender = classification.gender
        stem = word[:-2]
        soft = ending.startswith(SOFT_ADJECTIVE_MARKERS)

        if gender == "plural":
            # Plural input: a masculine form stands in for the singular
            nominative = stem + ("ий" if soft else "ый")
            singular = _build(nominative, stem, ADJECTIVE_PATTERNS["masculine"])
        elif gender == "feminine":
            singular = _build(word, stem, ADJECTIVE_PATTERNS["feminine_soft" if soft else "feminine"])
        else:
            singular = _build(word, stem, ADJECTIVE_PATTERNS[gender])

        plural = _build(word, stem, ADJECTIVE_PATTERNS["plural_soft" if soft else "plural"])
        return DeclensionResult(singular=singular, plural=plural)

    def _decline_neuter_ie(self, word: str) -> DeclensionResult:
        stem = _stem(word, "neuter_ie")
        return DeclensionResult(
            singular=_build(word, stem, _pattern_endings("neuter_ie", "singular")),
            plural=_build(word, stem, _pattern_endings("neuter_ie", "plural")),
        )

    def _decline_type_a(self, word: str) -> DeclensionResult:
        stem = _stem(word, "fem_a")
        soft = word[-1].lower() == "я"
        iya = word.lower().endswith("ия")
        singular_endings = _pattern_endings("fem_a", "singular", soft)
        plural_endings = _pattern_endings("fem_a", "plural", soft)

        genitive_ending = singular_endings["genitive"]
        dative_ending = singular_endings["dative"]
        stem_genitive = alternate(stem, genitive_ending)
        stem_dative = alternate(stem, dative_ending)
        # -ия nouns take и in dative/prepositional and й in genitive plural
        dative = stem + "и" if iya else stem_dative + dative_ending
        plural_nominative = stem_genitive + plural_endings["nominative"]

        singular = CaseSet(
            nominative=word,
            genitive=stem_genitive + genitive_ending,
            dative=dative,
            accusative=stem + singular_endings["accusative"],
            instrumental=stem + singular_endings["instrumental"],
            prepositional=dative,
        )
        plural = CaseSet(
            nominative=plural_nominative,
            genitive=stem + ("й" if iya else plural_endings["genitive"]),
            dative=stem + plural_endings["dative"],
            accusative=plural_nominative,
            instrumental=stem + plural_endings["instrumental"],
            prepositional=stem + plural_endings["prepositional"],
        )
        return DeclensionResult(singular=singular, plural=plural)

    def _decline_type_o(self, word: str) -> DeclensionResult:
        stem = _stem(word, "neut_o")
        return DeclensionResult(
            singular=_build(word, stem, _pattern_endings("neut_o", "singular")),
            plural=_build(word, stem, _pattern_endings("neut_o", "plural")),
        )

    def _decline_soft(self, word: str) -> DeclensionResult:
        stem = _stem(word, "soft_sign")
        return DeclensionResult(
            singular=_build(word, stem, _pattern_endings("soft_sign", "singular")),
            plural=_build(word, stem, _pattern_endings("soft_sign", "plural")),
        )

    def _decline_masculine(self, word: str, soft: bool | None = None) -> DeclensionResult:
        if soft is None:
            soft = word[-1].lower() in SOFT_MASCULINE_FINALS
        stem = _stem(word, "masc_hard")
        return DeclensionResult(
            singular=_build(word, stem, _pattern_endings("masc_hard", "singular", soft)),
            plural=_build(word, stem, _pattern_endings("masc_hard", "plural", soft)),
        )

    def _decline_plural(self, word: str) -> DeclensionResult:
        """Decline a word that already looks plural.

        The singular half comes from a reconstructed singular; the plural
        half is built directly on the given word minus its final vowel.
        """
        singular_word = singular_form(word)
        lower = singular_word.lower()
        stem = _stem(word, "plural_surface")
        plural_endings = _pattern_endings("plural_surface", "plural")

        if lower.endswith(("а", "я")):
            singular = self._decline_type_a(singular_word).singular
        elif lower.endswith("ие"):
            singular = self._decline_neuter_ie(singular_word).singular
        elif lower.endswith(("о", "е")):
            singular = self._decline_type_o(singular_word).singular
        else:
            # Consonant-final singular (столы -> стол): masculine, -ов genitive plural
            singular = self._decline_masculine(singular_word, soft=False).singular
            plural_endings = {**plural_endings, "genitive": "ов"}

        return DeclensionResult(singular=singular, plural=_build(word, stem, plural_endings))
