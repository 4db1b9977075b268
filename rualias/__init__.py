"""Declension-based alias generation for Russian words."""
from rualias.engines import generate_aliases, render_frontmatter
from rualias.models import AliasOutcome

__version__ = "0.1.0"

__all__ = ["AliasOutcome", "generate_aliases", "render_frontmatter", "__version__"]
