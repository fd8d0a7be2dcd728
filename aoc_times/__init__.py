"""
aoc-times — solve-time statistics for Advent of Code private leaderboards.

Usage
-----
    aoc-times <leaderboard-url>
    python -m aoc_times <leaderboard-id> <view-key>

Programmatic
------------
    from aoc_times import fetch_leaderboard, resolve_config, summarize, render_leaderboard

    snapshot = fetch_leaderboard(resolve_config(["12345", "abc123"]))
    render_leaderboard(summarize(snapshot))
"""

from aoc_times.client import fetch_leaderboard
from aoc_times.config import LeaderboardConfig, resolve_config
from aoc_times.display import format_duration, render_leaderboard
from aoc_times.errors import FetchFailure, LeaderboardError, ParseFailure, UsageError
from aoc_times.models import LeaderboardSnapshot, Member, parse_snapshot
from aoc_times.stats import (
    DAY_1_UNLOCK,
    SECONDS_PER_DAY,
    DayAverages,
    DayEntry,
    DayTimes,
    LeaderboardReport,
    ParticipantStats,
    summarize,
    unlock_instant,
)

__all__ = [
    "fetch_leaderboard",
    "LeaderboardConfig",
    "resolve_config",
    "format_duration",
    "render_leaderboard",
    "FetchFailure",
    "LeaderboardError",
    "ParseFailure",
    "UsageError",
    "LeaderboardSnapshot",
    "Member",
    "parse_snapshot",
    "DAY_1_UNLOCK",
    "SECONDS_PER_DAY",
    "DayAverages",
    "DayEntry",
    "DayTimes",
    "LeaderboardReport",
    "ParticipantStats",
    "summarize",
    "unlock_instant",
]
