"""
Solve-time statistics derived from a leaderboard snapshot.

Every offset is measured from the unlock instant of its day:

  1. Each member's star timestamps become signed offsets per day and part.
  2. Members are ranked by local score, stars, then last star time.
  3. Per-day means are taken over the offsets that exist.
  4. Each day is ranked by part-1 offset among members who solved it.

Nothing here touches the network or the console.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from aoc_times.models import LeaderboardSnapshot, Member, StarCompletion

logger = logging.getLogger(__name__)


# Day 1 unlocks at midnight EST = 05:00 UTC on Dec 1, 2025
DAY_1_UNLOCK = 1764565200
SECONDS_PER_DAY = 86400


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DayTimes:
    """Offsets in seconds since unlock; None = part not solved."""

    part1: Optional[int]
    part2: Optional[int]


@dataclass(frozen=True)
class ParticipantStats:
    """One member with their offsets, in overall leaderboard order."""

    name: str
    score: int
    stars: int
    times: Dict[int, DayTimes]


@dataclass(frozen=True)
class DayAverages:
    """Rounded mean offsets for one day; None when nobody solved the part."""

    day: int
    part1: Optional[int]
    part2: Optional[int]


@dataclass(frozen=True)
class DayEntry:
    """A row of a per-day table."""

    rank: int
    name: str
    part1: int
    part2: Optional[int]


@dataclass(frozen=True)
class LeaderboardReport:
    """Everything the renderer needs."""

    event: str
    num_days: int
    members: List[ParticipantStats]
    averages: Dict[int, DayAverages]
    days: Dict[int, List[DayEntry]]  # only days with at least one completion


# ---------------------------------------------------------------------------
# Offsets
# ---------------------------------------------------------------------------


def unlock_instant(day: int, day1_unlock: int = DAY_1_UNLOCK) -> int:
    """Epoch seconds at which *day* becomes available."""
    return day1_unlock + (day - 1) * SECONDS_PER_DAY


def compute_offsets(
    member: Member,
    num_days: int,
    day1_unlock: int = DAY_1_UNLOCK,
) -> Dict[int, DayTimes]:
    """Map each day the member has a completion record for to its offsets."""
    times: Dict[int, DayTimes] = {}
    for day in range(1, num_days + 1):
        completion = member.completion_day_level.get(day)
        if completion is None:
            continue

        unlock = unlock_instant(day, day1_unlock)
        times[day] = DayTimes(
            part1=_offset(completion.part1, unlock),
            part2=_offset(completion.part2, unlock),
        )
    return times


def _offset(star: Optional[StarCompletion], unlock: int) -> Optional[int]:
    return None if star is None else star.get_star_ts - unlock


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------


def rank_members(members: Iterable[Member]) -> List[Member]:
    """
    Overall leaderboard order.

    Higher local score first, then more stars, then the earlier last star.
    Member id breaks exact ties so the order does not depend on input order.
    """
    return sorted(
        members,
        key=lambda m: (-m.local_score, -m.stars, m.last_star_ts, m.id),
    )


def rank_day(stats: List[ParticipantStats], day: int) -> List[DayEntry]:
    """
    Members who solved part 1 of *day*, fastest first.

    *stats* must already be in overall order; equal part-1 offsets keep it.
    """
    solved = [
        (s, s.times[day]) for s in stats
        if day in s.times and s.times[day].part1 is not None
    ]
    solved.sort(key=lambda pair: pair[1].part1)

    return [
        DayEntry(rank=i + 1, name=s.name, part1=t.part1, part2=t.part2)
        for i, (s, t) in enumerate(solved)
    ]


# ---------------------------------------------------------------------------
# Averages
# ---------------------------------------------------------------------------


def mean_seconds(values: Iterable[int]) -> Optional[int]:
    """
    Mean of integer seconds, rounded half away from zero.

    Returns None for an empty input. 1.5 rounds to 2 and -1.5 to -2.
    """
    total = 0
    count = 0
    for v in values:
        total += v
        count += 1

    if count == 0:
        return None

    magnitude = (2 * abs(total) + count) // (2 * count)
    return magnitude if total >= 0 else -magnitude


def day_averages(stats: List[ParticipantStats], num_days: int) -> Dict[int, DayAverages]:
    averages: Dict[int, DayAverages] = {}
    for day in range(1, num_days + 1):
        day_times = [s.times[day] for s in stats if day in s.times]
        averages[day] = DayAverages(
            day=day,
            part1=mean_seconds(t.part1 for t in day_times if t.part1 is not None),
            part2=mean_seconds(t.part2 for t in day_times if t.part2 is not None),
        )
    return averages


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


def build_stats(
    snapshot: LeaderboardSnapshot,
    day1_unlock: int = DAY_1_UNLOCK,
) -> List[ParticipantStats]:
    """Per-member stats in overall leaderboard order."""
    return [
        ParticipantStats(
            name=m.display_name,
            score=m.local_score,
            stars=m.stars,
            times=compute_offsets(m, snapshot.num_days, day1_unlock),
        )
        for m in rank_members(snapshot.member_list())
    ]


def summarize(
    snapshot: LeaderboardSnapshot,
    day1_unlock: int = DAY_1_UNLOCK,
) -> LeaderboardReport:
    """Compute every statistic shown by the renderer."""
    stats = build_stats(snapshot, day1_unlock)

    days: Dict[int, List[DayEntry]] = {}
    for day in range(1, snapshot.num_days + 1):
        entries = rank_day(stats, day)
        if entries:
            days[day] = entries

    logger.debug(
        "%d of %d days have completions", len(days), snapshot.num_days
    )

    return LeaderboardReport(
        event=snapshot.event,
        num_days=snapshot.num_days,
        members=stats,
        averages=day_averages(stats, snapshot.num_days),
        days=days,
    )
