"""Command-line interface for German noun form generation."""

import argparse
import json
import logging
import sys
from pathlib import Path

from german_forms.data.noun_rules import DEFAULT_RULES
from german_forms.db import (
    DEFAULT_DB_PATH,
    form_lookup,
    get_connection,
    get_engine,
    init_db,
    words,
)
from german_forms.forms import get_forms
from german_forms.index import build_form_index, lookup_form
from german_forms.normalize import tokenize
from german_forms.rules import RuleData, load_rule_data


def _load_rules(rules_path: str | None) -> RuleData | None:
    """Return the rule data to use, or None (after printing an error) if the file is missing."""
    if rules_path is None:
        return DEFAULT_RULES

    path = Path(rules_path)
    if not path.exists():
        print(f"Error: Rules file not found: {path}", file=sys.stderr)
        return None
    return load_rule_data(path)


def cmd_forms(args: argparse.Namespace) -> int:
    """Print the generated forms of each word."""
    rule_data = _load_rules(args.rules)
    if rule_data is None:
        return 1

    results = [get_forms(word, rule_data) for word in args.words]

    if args.json:
        payload = [
            {
                "word": word,
                "stem": result.stem,
                "origin": str(result.origin),
                "forms": list(result.forms),
            }
            for word, result in zip(args.words, results, strict=True)
        ]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    for word, result in zip(args.words, results, strict=True):
        print(f"{word} (stem: {result.stem}, {result.origin})")
        for form in result.forms:
            print(f"  {form}")
    return 0


def _print_progress(current: int, total: int, desc: str = "Indexing") -> None:
    """Print progress in-place using carriage return."""
    if total == 0:
        return
    pct = current * 100 // total
    print(f"\r  {desc}... {pct}% ({current:,} / {total:,})", end="", flush=True)
    if current >= total:
        print()  # newline when done


def cmd_index(args: argparse.Namespace) -> int:
    """Build the form lookup table from a text file."""
    input_path = Path(args.input)
    db_path = Path(args.database)

    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    rule_data = _load_rules(args.rules)
    if rule_data is None:
        return 1

    with input_path.open(encoding="utf-8") as f:
        word_list = tokenize(f.read())

    print(f"Initializing database: {db_path}")
    engine = get_engine(db_path)
    init_db(engine)

    print(f"Indexing words from: {input_path}")
    print()

    with get_connection(db_path) as conn:
        stats = build_form_index(conn, word_list, rule_data, progress_callback=_print_progress)

    print()
    print(f"  Words:      {stats.total:,}")
    print(f"  Indexed:    {stats.indexed:,}")
    print(f"  Replaced:   {stats.replaced:,}")
    print(f"  Duplicates: {stats.duplicates:,}")
    print(f"  Forms:      {stats.forms:,}")
    print()
    print("Index complete!")
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    """Print the indexed words a form belongs to."""
    db_path = Path(args.database)

    if not db_path.exists():
        print(f"Error: Database not found: {db_path}", file=sys.stderr)
        print("Run 'index' first to create the database.", file=sys.stderr)
        return 1

    with get_connection(db_path) as conn:
        matches = lookup_form(conn, args.form)

    if not matches:
        print(f"No indexed word has the form {args.form!r}")
        return 1

    for match in matches:
        print(f"{match.word} (stem: {match.stem}, {match.origin})")
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Print database statistics."""
    from sqlalchemy import func, select

    db_path = Path(args.database)

    if not db_path.exists():
        print(f"Error: Database not found: {db_path}", file=sys.stderr)
        return 1

    with get_connection(db_path) as conn:
        n_words = conn.execute(select(func.count()).select_from(words)).scalar() or 0
        n_forms = conn.execute(select(func.count()).select_from(form_lookup)).scalar() or 0
        by_origin = conn.execute(
            select(words.c.origin, func.count()).group_by(words.c.origin).order_by(words.c.origin)
        ).all()

    print(f"Database: {db_path}")
    print()
    print(f"Words: {n_words:,}")
    for origin, count in by_origin:
        print(f"  {origin + ':':<30} {count:,}")
    print()
    print(f"Forms: {n_forms:,}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="german-forms",
        description="Generate inflected and derived forms of German nouns",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log which rules matched",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # forms subcommand
    forms_parser = subparsers.add_parser(
        "forms",
        help="Print the forms generated for one or more words",
    )
    forms_parser.add_argument("words", nargs="+", help="Words to generate forms for")
    forms_parser.add_argument(
        "--rules",
        type=str,
        default=None,
        help="Path to a morphology JSON file (default: built-in German noun rules)",
    )
    forms_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    forms_parser.set_defaults(func=cmd_forms)

    # index subcommand
    index_parser = subparsers.add_parser(
        "index",
        help="Index the forms of every word in a text file",
    )
    index_parser.add_argument(
        "-i",
        "--input",
        type=str,
        required=True,
        help="Path to a UTF-8 text file or word list",
    )
    index_parser.add_argument(
        "-d",
        "--database",
        type=str,
        default=str(DEFAULT_DB_PATH),
        help=f"Path to SQLite database (default: {DEFAULT_DB_PATH})",
    )
    index_parser.add_argument(
        "--rules",
        type=str,
        default=None,
        help="Path to a morphology JSON file (default: built-in German noun rules)",
    )
    index_parser.set_defaults(func=cmd_index)

    # lookup subcommand
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Find the indexed words a form belongs to",
    )
    lookup_parser.add_argument("form", help="Surface form to look up")
    lookup_parser.add_argument(
        "-d",
        "--database",
        type=str,
        default=str(DEFAULT_DB_PATH),
        help=f"Path to SQLite database (default: {DEFAULT_DB_PATH})",
    )
    lookup_parser.set_defaults(func=cmd_lookup)

    # stats subcommand
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show index statistics",
    )
    stats_parser.add_argument(
        "-d",
        "--database",
        type=str,
        default=str(DEFAULT_DB_PATH),
        help=f"Path to SQLite database (default: {DEFAULT_DB_PATH})",
    )
    stats_parser.set_defaults(func=cmd_stats)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
