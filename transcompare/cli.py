"""Command line report of translation completeness.

Usage:
    transcompare path/to/locales --primary en --status incomplete
"""

import argparse
import json
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from transcompare.config import settings
from transcompare.engine.classifier import count_statuses
from transcompare.exceptions import TranslationRootError
from transcompare.models.enums import MISSING, Status, StatusFilter
from transcompare.models.record import Record
from transcompare.models.session import ComparisonSession
from transcompare.services.loader import load_session
from transcompare.services.search import MatchEngine

console = Console()

STATUS_STYLES = {
    Status.TRANSLATED: "green",
    Status.INCOMPLETE: "yellow",
    Status.ERROR: "red",
    Status.UNCLASSIFIED: "dim",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="transcompare",
        description="Compare translation.json files across language folders",
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=settings.default_root,
        help="Folder holding one subfolder per language",
    )
    parser.add_argument(
        "--primary",
        default=settings.primary_language,
        help="Primary language (defaults to the first language that loads)",
    )
    parser.add_argument(
        "--status",
        choices=[s.value for s in StatusFilter],
        default=StatusFilter.ALL.value,
        help="Only show records with this status",
    )
    parser.add_argument("--query", default="", help="Fuzzy search over keys and values")
    parser.add_argument("--json", action="store_true", help="Print records as JSON")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any key is incomplete or in error",
    )
    return parser


def _cell(record: Record, language: str) -> str:
    value = record.value_for(language)
    if value is MISSING:
        return "[dim italic]Missing[/dim italic]"
    text = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
    return escape(text)


def print_report(
    session: ComparisonSession,
    records: Sequence[Record],
    counts: dict[Status, int],
) -> None:
    """Print load errors, the records table and the status counts."""
    for entry in session.languages.values():
        if entry.has_error:
            console.print(f"[red]{entry.name}: {entry.error}[/red]")

    table = Table(title=f"Translations in {session.root} (primary: {session.primary_language})")
    table.add_column("Key", style="cyan")
    for language in session.language_names:
        table.add_column(language)
    table.add_column("Status")

    for record in records:
        style = STATUS_STYLES[record.status]
        table.add_row(
            escape(record.key),
            *(_cell(record, language) for language in session.language_names),
            f"[{style}]{record.status.value or '-'}[/{style}]",
        )

    console.print(table)

    console.print()
    console.print(f"  Translated: [green]{counts[Status.TRANSLATED]}[/green]")
    console.print(f"  Incomplete: [yellow]{counts[Status.INCOMPLETE]}[/yellow]")
    console.print(f"  Error: [red]{counts[Status.ERROR]}[/red]")


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.root:
        parser.error("a translation root folder is required")

    try:
        session = load_session(args.root, primary_language=args.primary)
    except TranslationRootError as e:
        console.print(f"[red]{e}[/red]")
        return 2

    all_records = session.records()
    records = MatchEngine(all_records, session.language_names).find(args.query, args.status)

    if args.json:
        payload = {
            "root": session.root,
            "primary_language": session.primary_language,
            "errors": {e.name: e.error for e in session.languages.values() if e.has_error},
            "records": [record.to_dict() for record in records],
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print_report(session, records, count_statuses(all_records))

    if args.strict:
        counts = count_statuses(all_records)
        if counts[Status.INCOMPLETE] or counts[Status.ERROR]:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
