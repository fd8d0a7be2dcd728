"""Tests for offset computation, ranking and day averages.

Coverage:
- Unlock instants and offset arithmetic (absent vs. zero, negative offsets)
- Overall ranking keys and independence from input order
- Per-day ranking (exclusions, ordering, renumbering)
- Mean rounding at exact .5 boundaries
- Report assembly and omission of empty days
"""

import pytest

from aoc_times.models import parse_snapshot
from aoc_times.stats import (
    DAY_1_UNLOCK,
    SECONDS_PER_DAY,
    DayTimes,
    ParticipantStats,
    build_stats,
    compute_offsets,
    day_averages,
    mean_seconds,
    rank_day,
    rank_members,
    summarize,
    unlock_instant,
)


# ── helpers ───────────────────────────────────────────────────────────────────


def _member(mid, *, name=None, score=0, stars=0, last=0, days=None):
    """Raw member dict; *days* maps day -> (part1 offset, part2 offset)."""
    completion = {}
    for day, (p1, p2) in (days or {}).items():
        unlock = unlock_instant(day)
        parts = {}
        if p1 is not None:
            parts["1"] = {"get_star_ts": unlock + p1, "star_index": 0}
        if p2 is not None:
            parts["2"] = {"get_star_ts": unlock + p2, "star_index": 1}
        completion[str(day)] = parts
    return {
        "id": mid,
        "name": name,
        "stars": stars,
        "local_score": score,
        "last_star_ts": last,
        "completion_day_level": completion,
    }


def _snapshot(members, num_days=1):
    return parse_snapshot({
        "event": "2025",
        "num_days": num_days,
        "members": {str(m["id"]): m for m in members},
    })


def _stats(name, times):
    return ParticipantStats(name=name, score=0, stars=0, times=times)


# ── TestUnlock ────────────────────────────────────────────────────────────────


class TestUnlock:
    def test_day_one_is_constant(self):
        assert unlock_instant(1) == DAY_1_UNLOCK

    def test_consecutive_days_one_day_apart(self):
        for day in range(1, 25):
            assert unlock_instant(day + 1) - unlock_instant(day) == SECONDS_PER_DAY

    def test_custom_day_one(self):
        assert unlock_instant(3, day1_unlock=1000) == 1000 + 2 * 86400


# ── TestOffsets ───────────────────────────────────────────────────────────────


class TestOffsets:
    def test_both_parts(self):
        snap = _snapshot([_member(1, days={1: (65, 130)})])
        times = compute_offsets(snap.members["1"], 1)
        assert times == {1: DayTimes(part1=65, part2=130)}

    def test_missing_part_is_none_not_zero(self):
        snap = _snapshot([_member(1, days={1: (0, None)})])
        times = compute_offsets(snap.members["1"], 1)
        assert times[1].part1 == 0
        assert times[1].part2 is None

    def test_day_without_record_absent(self):
        snap = _snapshot([_member(1, days={2: (5, 6)})], num_days=2)
        times = compute_offsets(snap.members["1"], 2)
        assert 1 not in times
        assert times[2] == DayTimes(part1=5, part2=6)

    def test_negative_offset_kept(self):
        snap = _snapshot([_member(1, days={1: (-30, None)})])
        assert compute_offsets(snap.members["1"], 1)[1].part1 == -30

    def test_days_beyond_num_days_ignored(self):
        snap = _snapshot([_member(1, days={1: (1, 2), 3: (1, 2)})], num_days=2)
        assert set(compute_offsets(snap.members["1"], 2)) == {1}

    def test_later_day_measured_from_its_own_unlock(self):
        snap = _snapshot([_member(1, days={5: (42, None)})], num_days=5)
        assert compute_offsets(snap.members["1"], 5)[5].part1 == 42


# ── TestRanking ───────────────────────────────────────────────────────────────


class TestRanking:
    def test_score_then_stars_then_last_star(self):
        members = [
            _member(1, score=10, stars=2, last=500),
            _member(2, score=20, stars=1, last=900),
            _member(3, score=10, stars=4, last=900),
            _member(4, score=10, stars=2, last=100),
        ]
        ranked = rank_members(_snapshot(members).member_list())
        assert [m.id for m in ranked] == [2, 3, 4, 1]

    def test_input_order_does_not_matter(self):
        members = [
            _member(i, score=s, stars=st, last=l)
            for i, s, st, l in [(1, 5, 1, 10), (2, 5, 1, 10), (3, 7, 0, 0), (4, 5, 2, 99)]
        ]
        forward = rank_members(_snapshot(members).member_list())
        backward = rank_members(_snapshot(list(reversed(members))).member_list())
        assert [m.id for m in forward] == [m.id for m in backward] == [3, 4, 1, 2]

    def test_anonymous_name(self):
        stats = build_stats(_snapshot([_member(77, name=None), _member(8, name="")]))
        assert {s.name for s in stats} == {"Anonymous #77", "Anonymous #8"}

    def test_rank_day_orders_by_part1(self):
        stats = [
            _stats("slow", {1: DayTimes(300, None)}),
            _stats("fast", {1: DayTimes(10, 20)}),
            _stats("mid", {1: DayTimes(100, 400)}),
        ]
        entries = rank_day(stats, 1)
        assert [(e.rank, e.name) for e in entries] == [(1, "fast"), (2, "mid"), (3, "slow")]

    def test_rank_day_excludes_unsolved(self):
        stats = [
            _stats("none", {}),
            _stats("only_p2", {1: DayTimes(None, 50)}),
            _stats("solved", {1: DayTimes(70, None)}),
        ]
        entries = rank_day(stats, 1)
        assert [e.name for e in entries] == ["solved"]
        assert entries[0].part2 is None

    def test_rank_day_ties_keep_overall_order(self):
        stats = [_stats("first", {1: DayTimes(5, None)}), _stats("second", {1: DayTimes(5, None)})]
        assert [e.name for e in rank_day(stats, 1)] == ["first", "second"]


# ── TestAverages ──────────────────────────────────────────────────────────────


class TestAverages:
    def test_exact_mean(self):
        assert mean_seconds([10, 20, 21]) == 17

    @pytest.mark.parametrize(
        "values, expected",
        [([1, 2], 2), ([65, 10], 38), ([0, 1], 1), ([-1, -2], -2), ([1, 2, 3, 4], 3)],
    )
    def test_half_rounds_away_from_zero(self, values, expected):
        assert mean_seconds(values) == expected

    def test_rounds_down_below_half(self):
        assert mean_seconds([1, 1, 1, 1, 3]) == 1  # 1.4

    def test_empty_is_none(self):
        assert mean_seconds([]) is None

    def test_parts_averaged_independently(self):
        stats = [
            _stats("a", {1: DayTimes(65, 130)}),
            _stats("b", {1: DayTimes(10, None)}),
            _stats("c", {}),
        ]
        avg = day_averages(stats, 2)
        assert (avg[1].part1, avg[1].part2) == (38, 130)
        assert (avg[2].part1, avg[2].part2) == (None, None)


# ── TestSummarize ─────────────────────────────────────────────────────────────


class TestSummarize:
    def test_two_member_scenario(self):
        snap = _snapshot([
            _member(1, name="Alice", score=4, stars=2, last=2, days={1: (65, 130)}),
            _member(2, name="Bob", score=3, stars=1, last=1, days={1: (10, None)}),
        ])
        report = summarize(snap)

        assert [m.name for m in report.members] == ["Alice", "Bob"]
        day1 = report.days[1]
        assert [(e.rank, e.name, e.part1, e.part2) for e in day1] == [
            (1, "Bob", 10, None),
            (2, "Alice", 65, 130),
        ]
        assert report.averages[1].part1 == 38
        assert report.averages[1].part2 == 130

    def test_empty_days_omitted(self):
        snap = _snapshot(
            [_member(1, name="A", score=1, stars=1, days={2: (5, None)})],
            num_days=3,
        )
        report = summarize(snap)
        assert list(report.days) == [2]
        assert set(report.averages) == {1, 2, 3}

    def test_member_without_completions_still_ranked(self):
        snap = _snapshot([
            _member(1, name="Idle", score=0),
            _member(2, name="Busy", score=2, stars=1, days={1: (9, None)}),
        ])
        report = summarize(snap)
        assert [m.name for m in report.members] == ["Busy", "Idle"]
        assert [e.name for e in report.days[1]] == ["Busy"]

    def test_no_members(self):
        report = summarize(_snapshot([], num_days=2))
        assert report.members == []
        assert report.days == {}
