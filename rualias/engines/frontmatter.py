"""Render an AliasOutcome as a front-matter `aliases:` line."""
from rualias.models import AliasOutcome

OFFLINE_NOTICE = "# ℹ️ Склонение выполнено офлайн (могут быть неточности)"
NEEDS_INTERNET_NOTICE = "# ⚠️ Для склонения словосочетаний требуется подключение к интернету"


def _quote(alias: str) -> str:
    escaped = alias.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_frontmatter(outcome: AliasOutcome) -> str:
    if outcome.aliases:
        line = f"aliases: [{', '.join(_quote(a) for a in outcome.aliases)}]"
        if outcome.is_offline:
            line += "\n" + OFFLINE_NOTICE
        return line
    if outcome.needs_internet:
        return "aliases: []\n" + NEEDS_INTERNET_NOTICE
    return "aliases: []"
