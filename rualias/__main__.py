"""Command-line entry point.

Prints the front-matter `aliases:` line for a word, or for a note whose
file name is the word.
"""
import argparse
import asyncio
import json

from rualias.core.config import get_settings
from rualias.core.logging import configure_logging
from rualias.engines import generate_aliases, render_frontmatter, title_from_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rualias",
        description="Generate declension aliases for a Russian word",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 -m rualias стол                    # aliases: ["стола", "столу", ...]
  python3 -m rualias --file "Notes/Книги.md" # title taken from the file name
  python3 -m rualias --offline --json метро  # offline engine only, JSON output
        """,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("word", nargs="?", help="Word or phrase to decline")
    source.add_argument("--file", "-f", help="Note path; its file name is the subject")
    parser.add_argument("--offline", action="store_true", help="Skip remote providers")
    parser.add_argument("--json", action="store_true", help="Print the outcome as JSON")
    parser.add_argument("--log-level", default=None, help="Log level (default: from settings)")
    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(level=args.log_level or settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    subject = title_from_path(args.file) if args.file else args.word
    outcome = await generate_aliases(subject, settings, force_offline=args.offline)

    if args.json:
        print(json.dumps({"word": subject, **outcome.to_dict()}, ensure_ascii=False))
    else:
        print(render_frontmatter(outcome))
    return 0


def cli() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
