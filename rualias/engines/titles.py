"""Subject word source: a note's title is its file name without extension."""
from pathlib import Path


def title_from_path(path: str | Path) -> str:
    return Path(path).stem.strip()
