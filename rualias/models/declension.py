"""Declension value types.

All values are immutable and built fresh for every resolution call.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator, Mapping, Union

from rualias.languages.types import CASES, GrammaticalCase

# A single agreed form, or the distinct forms sources disagreed on (first-seen order)
ReconciledValue = Union[str, tuple[str, ...]]


@dataclass(frozen=True, slots=True)
class CaseSet:
    """Surface forms for the six cases of one grammatical number.

    Every case is always present; an unresolved case holds None.
    """
    nominative: str | None = None
    genitive: str | None = None
    dative: str | None = None
    accusative: str | None = None
    instrumental: str | None = None
    prepositional: str | None = None

    @classmethod
    def from_mapping(cls, forms: Mapping[str, str | None]) -> CaseSet:
        return cls(**{case: forms.get(case) for case in CASES})

    @classmethod
    def uniform(cls, word: str) -> CaseSet:
        """Same surface form in every case (indeclinable words)."""
        return cls(*(word for _ in CASES))

    def get(self, case: GrammaticalCase) -> str | None:
        return getattr(self, case)

    def items(self) -> Iterator[tuple[GrammaticalCase, str | None]]:
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    def to_dict(self) -> dict[str, str | None]:
        return dict(self.items())


@dataclass(frozen=True, slots=True)
class DeclensionResult:
    """Singular and (optionally) plural paradigm of one word."""
    singular: CaseSet
    plural: CaseSet | None = None

    def to_dict(self) -> dict:
        return {
            "singular": self.singular.to_dict(),
            "plural": self.plural.to_dict() if self.plural else None,
        }


@dataclass(frozen=True, slots=True)
class MergedResult:
    """Per-case reconciliation of one or more DeclensionResults."""
    singular: dict[str, ReconciledValue | None]
    plural: dict[str, ReconciledValue | None] | None = None

    @classmethod
    def from_result(cls, result: DeclensionResult) -> MergedResult:
        return cls(
            singular=result.singular.to_dict(),
            plural=result.plural.to_dict() if result.plural else None,
        )

    def values(self) -> Iterator[ReconciledValue | None]:
        """Every case value, singular first, in case order."""
        yield from self.singular.values()
        if self.plural:
            yield from self.plural.values()

    def to_dict(self) -> dict:
        def _plain(forms: dict | None) -> dict | None:
            if forms is None:
                return None
            return {
                case: list(value) if isinstance(value, tuple) else value
                for case, value in forms.items()
            }

        return {"singular": _plain(self.singular), "plural": _plain(self.plural)}


@dataclass(frozen=True, slots=True)
class AliasOutcome:
    """Terminal outcome of one resolution run."""
    aliases: tuple[str, ...] = ()
    needs_internet: bool = False
    is_offline: bool = False

    @classmethod
    def empty(cls) -> AliasOutcome:
        return cls()

    def to_dict(self) -> dict:
        return {
            "aliases": list(self.aliases),
            "needs_internet": self.needs_internet,
            "is_offline": self.is_offline,
        }
