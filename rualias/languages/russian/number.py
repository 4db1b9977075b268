"""Grammatical number heuristics for bare surface forms.

Shared by the offline engine (already-plural input) and the orchestrator
(re-querying a remote provider with a singular form).
"""


def is_plural_form(word: str) -> bool:
    """Whether the word looks like a plural surface form."""
    lower = word.lower()
    return lower.endswith(("ы", "и", "ия", "ья"))


def singular_form(word: str) -> str:
    """Reconstruct a nominative singular from a plural-looking word.

    ы is dropped (столы -> стол), ии becomes ия (армии -> армия), a bare и
    becomes а (книги -> книга) and a trailing ия loses its final letter.
    Anything else is returned unchanged.
    """
    lower = word.lower()
    if lower.endswith("ы"):
        return word[:-1]
    if lower.endswith("ии"):
        return word[:-1] + "я"
    if lower.endswith("и"):
        return word[:-1] + "а"
    if lower.endswith("ия"):
        return word[:-1]
    return word
