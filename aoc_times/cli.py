#!/usr/bin/env python3
"""
Command-line interface for aoc-times.

Usage:
    aoc-times https://adventofcode.com/2025/leaderboard/private/view/12345?view_key=abc123
    aoc-times 12345 abc123
    ADVENT_OF_CODE_LEADERBOARD_ID=12345 ADVENT_OF_CODE_VIEW_KEY=abc123 aoc-times
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from aoc_times.client import fetch_leaderboard
from aoc_times.config import USAGE, resolve_config
from aoc_times.display import render_leaderboard
from aoc_times.errors import FetchFailure, ParseFailure, UsageError
from aoc_times.stats import summarize

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc-times",
        description="Advent of Code private leaderboard solve times",
    )
    parser.add_argument(
        "target",
        nargs="*",
        help="Leaderboard URL, or leaderboard id followed by view key (at most two values)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only print the tables"
    )
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if len(args.target) > 2:
        print("Too many arguments.", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    try:
        config = resolve_config(args.target)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1

    if console is None:
        console = Console()

    if not args.quiet:
        console.print(f"Fetching Advent of Code {config.year} leaderboard...")
        console.print()

    try:
        snapshot = fetch_leaderboard(config)
    except FetchFailure as e:
        print(f"Failed to fetch: {e.status_code} {e.reason}", file=sys.stderr)
        return 1
    except ParseFailure as e:
        print(f"Malformed leaderboard payload: {e}", file=sys.stderr)
        return 1

    render_leaderboard(summarize(snapshot), console=console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
