from rualias.models.declension import (
    AliasOutcome,
    CaseSet,
    DeclensionResult,
    MergedResult,
    ReconciledValue,
)

__all__ = [
    "AliasOutcome",
    "CaseSet",
    "DeclensionResult",
    "MergedResult",
    "ReconciledValue",
]
