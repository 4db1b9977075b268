"""Stage events emitted by the alias pipeline.

The pipeline reports each stage it runs (name, outcome, elapsed time) to an
EventSink instead of printing progress notices; where the events end up is
the sink's business.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from rualias.core.logging import pipeline_logger

log = pipeline_logger()


class Stage(Enum):
    PROBE = "probe"
    PRIMARY = "primary"
    SINGULAR_PATCH = "singular_patch"
    SECONDARY = "secondary"
    OFFLINE = "offline"
    MERGE = "merge"
    EXTRACT = "extract"


@dataclass(frozen=True, slots=True)
class StageEvent:
    stage: Stage
    outcome: str
    elapsed_ms: float
    detail: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "stage": self.stage.value,
            "outcome": self.outcome,
            "elapsed_ms": round(self.elapsed_ms, 2),
            **self.detail,
        }


class EventSink(Protocol):
    def emit(self, event: StageEvent) -> None: ...


class LoggingEventSink:
    """Writes every stage event to the pipeline logger."""

    def emit(self, event: StageEvent) -> None:
        log.info("stage_completed", **event.to_dict())
