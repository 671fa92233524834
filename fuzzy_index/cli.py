"""
cli.py - command line front end for the fuzzy index
Commands:
- match:    load a word list and show every word within N edits of a query
- contains: exact membership check (exit status 0 / 1)
- distance: reference edit distance between two strings
Uses Rich for tables and formatting, settings come from a JSON config.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from fuzzy_index.core.distance import levenshtein
from fuzzy_index.core.trie import FuzzyIndex
from fuzzy_index.utils.config_manager import DEFAULT_PATH, Config
from fuzzy_index.utils.corpus_loader import CorpusLoadError, index_file
from fuzzy_index.utils.logger_utils import setup_logging

logger = logging.getLogger(__name__)

# initialise console for rich output
console = Console()
err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_MISS = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzy-index",
        description="Typo tolerant lookups against a word list.",
    )
    parser.add_argument("--config", default=DEFAULT_PATH, help="JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    match = sub.add_parser("match", help="list indexed words close to a query")
    match.add_argument("corpus", help="word list, one word per line")
    match.add_argument("query")
    match.add_argument("-d", "--distance", type=int, default=None, help="edit budget")
    match.add_argument("--limit", type=int, default=None, help="max rows to show")

    contains = sub.add_parser("contains", help="exact membership check")
    contains.add_argument("corpus", help="word list, one word per line")
    contains.add_argument("word")

    distance = sub.add_parser("distance", help="edit distance between two strings")
    distance.add_argument("a")
    distance.add_argument("b")
    return parser


def _load(path: str) -> FuzzyIndex:
    index = FuzzyIndex()
    index_file(index, path)
    return index


def cmd_match(args, cfg: Config) -> int:
    max_distance = args.distance if args.distance is not None else cfg.get("max_distance")
    limit = args.limit if args.limit is not None else cfg.get("limit")
    if max_distance < 0:
        err_console.print("[red]distance must be >= 0[/red]")
        return EXIT_ERROR

    index = _load(args.corpus)
    found = index.closest(args.query, max_distance, limit=limit)

    table = Table(title=escape(f"within {max_distance} of {args.query!r}"), box=box.SIMPLE)
    table.add_column("word", style="cyan")
    table.add_column("distance", justify="right", style="magenta")
    for word, dist in found:
        table.add_row(escape(word), str(dist))
    console.print(table)
    console.print(f"[dim]{len(found)} shown, {len(index):,} words indexed[/dim]")
    return EXIT_OK


def cmd_contains(args, cfg: Config) -> int:
    index = _load(args.corpus)
    if args.word in index:
        console.print(f"[green]yes[/green] {escape(repr(args.word))} is indexed")
        return EXIT_OK
    console.print(f"[yellow]no[/yellow] {escape(repr(args.word))} is not indexed")
    return EXIT_MISS


def cmd_distance(args, cfg: Config) -> int:
    console.print(str(levenshtein(args.a, args.b)))
    return EXIT_OK


COMMANDS = {
    "match": cmd_match,
    "contains": cmd_contains,
    "distance": cmd_distance,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    level = "DEBUG" if args.verbose else cfg.get("log_level", "INFO")
    setup_logging(level, cfg.get("log_file"))
    logger.debug("config %s: %s", cfg.path, cfg.as_dict())

    try:
        return COMMANDS[args.command](args, cfg)
    except CorpusLoadError as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
