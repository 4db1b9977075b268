from rualias.engines.aliases import extract_aliases
from rualias.engines.events import EventSink, LoggingEventSink, Stage, StageEvent
from rualias.engines.frontmatter import render_frontmatter
from rualias.engines.pipeline import AliasPipeline, generate_aliases
from rualias.engines.reconcile import merge, reconcile_case
from rualias.engines.titles import title_from_path

__all__ = [
    "AliasPipeline",
    "EventSink",
    "LoggingEventSink",
    "Stage",
    "StageEvent",
    "extract_aliases",
    "generate_aliases",
    "merge",
    "reconcile_case",
    "render_frontmatter",
    "title_from_path",
]
