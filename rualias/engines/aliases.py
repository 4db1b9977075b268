"""Alias extraction: every distinct surface form except the original word."""
from rualias.core.ordered import OrderedSet
from rualias.models import MergedResult


def extract_aliases(merged: MergedResult | None, original: str) -> list[str]:
    """Flatten a merged result into ordered, duplicate-free aliases.

    Forms are trimmed; blanks and the original word itself are skipped.
    """
    if merged is None:
        return []

    aliases: OrderedSet[str] = OrderedSet()
    for value in merged.values():
        if value is None:
            continue
        for form in value if isinstance(value, tuple) else (value,):
            candidate = form.strip()
            if candidate and candidate != original:
                aliases.add(candidate)
    return list(aliases)
