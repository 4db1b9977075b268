"""Cross-source reconciliation of declension results.

Sources are merged case by case: when every contributing source agrees the
case collapses to one string, otherwise the distinct forms are kept as a
tuple in the order the sources were given, so disagreements stay visible.
"""
from typing import Iterable

from rualias.core.logging import engine_logger
from rualias.core.ordered import OrderedSet
from rualias.languages.types import CASES
from rualias.models import CaseSet, DeclensionResult, MergedResult, ReconciledValue

log = engine_logger()


def reconcile_case(values: Iterable[str | None]) -> ReconciledValue | None:
    """Collapse one case's candidate forms; blank and missing forms are ignored."""
    variants = OrderedSet(v for v in values if v and v.strip())
    if not variants:
        return None
    if len(variants) == 1:
        return next(iter(variants))
    return tuple(variants)


def _reconcile_number(case_sets: list[CaseSet]) -> dict[str, ReconciledValue | None]:
    return {
        case: reconcile_case(case_set.get(case) for case_set in case_sets)
        for case in CASES
    }


def merge(results: Iterable[DeclensionResult | None]) -> MergedResult | None:
    """Merge zero or more results; None when no source produced anything."""
    survivors = [r for r in results if r is not None]
    if not survivors:
        return None
    if len(survivors) == 1:
        return MergedResult.from_result(survivors[0])

    singular = _reconcile_number([r.singular for r in survivors])
    plurals = [r.plural for r in survivors if r.plural is not None]
    plural = _reconcile_number(plurals) if plurals else None

    conflicts = [
        case for case, value in [*singular.items(), *(plural or {}).items()]
        if isinstance(value, tuple)
    ]
    if conflicts:
        log.info("sources_disagree", sources=len(survivors), cases=conflicts)

    return MergedResult(singular=singular, plural=plural)
