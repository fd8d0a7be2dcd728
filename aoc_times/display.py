"""
Rich terminal display for a leaderboard report.

Renders two kinds of tables:
  1. The overall leaderboard (rank, name, score, star progress)
  2. One breakdown per day that has completions (part 1 / part 2 times
     plus the day's averages)
"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from aoc_times.stats import DayAverages, DayEntry, LeaderboardReport

NAME_WIDTH = 24
STARS_WIDTH = 14
TIME_WIDTH = 11

FILLED_STAR = "★"
HOLLOW_STAR = "☆"
PLACEHOLDER = "-"


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: Optional[int]) -> str:
    """
    Human-readable duration showing the coarsest unit and the next two.

    90000 -> "1d 1h 0m", 3661 -> "1h 1m 1s", 65 -> "1m 5s", 0 -> "0s".
    Negative or missing input renders as "N/A".
    """
    if seconds is None or seconds < 0:
        return "N/A"

    days, rest = divmod(seconds, 86400)
    hours, rest = divmod(rest, 3600)
    mins, secs = divmod(rest, 60)

    if days > 0:
        return f"{days}d {hours}h {mins}m"
    if hours > 0:
        return f"{hours}h {mins}m {secs}s"
    if mins > 0:
        return f"{mins}m {secs}s"
    return f"{secs}s"


def _optional_duration(seconds: Optional[int]) -> str:
    return PLACEHOLDER if seconds is None else format_duration(seconds)


def _name(name: str) -> Text:
    # Text, not markup: member names may contain brackets
    return Text(name[:NAME_WIDTH])


def star_progress(stars: int, num_days: int) -> str:
    """Filled stars earned, hollow stars still available, clipped for display."""
    glyphs = FILLED_STAR * stars + HOLLOW_STAR * (num_days * 2 - stars)
    return glyphs[:STARS_WIDTH]


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def build_overall_table(report: LeaderboardReport) -> Table:
    table = Table(
        box=box.DOUBLE,
        show_header=True,
        header_style="bold",
        title="[bold]LEADERBOARD[/]",
    )
    table.add_column("Rank", width=4, justify="right", no_wrap=True)
    table.add_column("Name", width=NAME_WIDTH, no_wrap=True, overflow="crop")
    table.add_column("Score", width=7, justify="right", no_wrap=True)
    table.add_column("Stars", width=STARS_WIDTH, no_wrap=True, overflow="crop")

    for rank, m in enumerate(report.members, start=1):
        table.add_row(
            str(rank),
            _name(m.name),
            str(m.score),
            star_progress(m.stars, report.num_days),
        )

    return table


def build_day_table(day: int, entries: List[DayEntry], averages: DayAverages) -> Table:
    table = Table(
        box=box.SQUARE,
        show_header=True,
        header_style="bold",
        title=f"[bold]DAY {day}[/]",
    )
    table.add_column("Rank", width=4, justify="right", no_wrap=True)
    table.add_column("Name", width=NAME_WIDTH, no_wrap=True, overflow="crop")
    table.add_column("Part 1", width=TIME_WIDTH, justify="right", no_wrap=True)
    table.add_column("Part 2", width=TIME_WIDTH, justify="right", no_wrap=True)

    for e in entries:
        table.add_row(
            str(e.rank),
            _name(e.name),
            format_duration(e.part1),
            _optional_duration(e.part2),
        )

    table.add_section()
    table.add_row(
        "",
        Text("AVERAGE", style="bold"),
        _optional_duration(averages.part1),
        _optional_duration(averages.part2),
    )
    return table


# ---------------------------------------------------------------------------
# Main renderer
# ---------------------------------------------------------------------------


def render_leaderboard(
    report: LeaderboardReport,
    console: Optional[Console] = None,
) -> None:
    """Render the overall table followed by every non-empty day."""
    if console is None:
        console = Console()

    console.print(Text(
        f"Advent of Code {report.event} · {len(report.members)} members · "
        f"{report.num_days} days",
        style="bold",
    ))
    console.print()

    console.print(build_overall_table(report))

    for day, entries in report.days.items():
        console.print()
        console.print(build_day_table(day, entries, report.averages[day]))
