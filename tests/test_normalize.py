"""Tests for collection normalization and subtraction."""

from __future__ import annotations

import random
from datetime import date, timedelta

import pytest

from calspan import DateRange, cleanup_sort, join_ranges, subtract_ranges

BASE = date(2023, 1, 1)


def dr(start: str, end: str) -> DateRange:
    return DateRange(start, end)


def random_ranges(seed: int, count: int = 12, span: int = 90) -> list[DateRange]:
    rng = random.Random(seed)
    out: list[DateRange] = []
    for _ in range(count):
        start = BASE + timedelta(days=rng.randint(0, span))
        out.append(DateRange(start, start + timedelta(days=rng.randint(0, 10))))
    return out


def covered_days(ranges: list[DateRange]) -> set[date]:
    return {day for r in ranges for day in r.as_period()}


class TestCleanupSort:
    """Test removal of empty slots and sorting."""

    def test_drops_none_and_sorts(self) -> None:
        ranges = [None, dr("2023-01-05", "2023-01-06"), None, dr("2023-01-01", "2023-01-02")]
        assert cleanup_sort(ranges) == [dr("2023-01-01", "2023-01-02"), dr("2023-01-05", "2023-01-06")]

    def test_input_not_mutated(self) -> None:
        ranges = [dr("2023-01-05", "2023-01-06"), None]
        cleanup_sort(ranges)
        assert ranges == [dr("2023-01-05", "2023-01-06"), None]

    def test_empty(self) -> None:
        assert cleanup_sort([]) == []
        assert cleanup_sort([None, None]) == []


class TestJoinRanges:
    """Test reduction to a minimal disjoint cover."""

    def test_merges_overlapping_and_adjacent(self) -> None:
        ranges = [
            dr("2023-01-10", "2023-01-15"),
            dr("2023-01-01", "2023-01-05"),
            dr("2023-01-06", "2023-01-08"),
            dr("2023-01-14", "2023-01-20"),
            dr("2023-02-01", "2023-02-01"),
        ]
        assert join_ranges(ranges) == [
            dr("2023-01-01", "2023-01-08"),
            dr("2023-01-10", "2023-01-20"),
            dr("2023-02-01", "2023-02-01"),
        ]

    def test_bridging_range_merges_earlier_neighbours(self) -> None:
        """Test a late range joining two ranges seen before it."""
        ranges = [
            dr("2023-01-01", "2023-01-03"),
            dr("2023-01-10", "2023-01-12"),
            dr("2023-01-04", "2023-01-09"),
        ]
        assert join_ranges(ranges) == [dr("2023-01-01", "2023-01-12")]

    def test_ignores_none_slots(self) -> None:
        ranges = [None, dr("2023-01-01", "2023-01-02"), None, dr("2023-01-03", "2023-01-04")]
        assert join_ranges(ranges) == [dr("2023-01-01", "2023-01-04")]

    def test_empty_input(self) -> None:
        assert join_ranges([]) == []
        assert join_ranges([None]) == []

    def test_duplicates_collapse(self) -> None:
        r = dr("2023-01-01", "2023-01-02")
        assert join_ranges([r, r, r]) == [r]

    def test_accepts_generator(self) -> None:
        gen = (dr(f"2023-01-{d:02d}", f"2023-01-{d:02d}") for d in range(1, 8))
        assert join_ranges(gen) == [dr("2023-01-01", "2023-01-07")]

    def test_input_not_mutated(self) -> None:
        ranges = [dr("2023-01-01", "2023-01-02"), dr("2023-01-03", "2023-01-04")]
        join_ranges(ranges)
        assert ranges == [dr("2023-01-01", "2023-01-02"), dr("2023-01-03", "2023-01-04")]

    @pytest.mark.parametrize("seed", range(20))
    def test_idempotent(self, seed: int) -> None:
        once = join_ranges(random_ranges(seed))
        assert join_ranges(once) == once

    @pytest.mark.parametrize("seed", range(20))
    def test_output_sorted_and_separated(self, seed: int) -> None:
        out = join_ranges(random_ranges(seed))
        for a, b in zip(out, out[1:]):
            assert a.end + timedelta(days=1) < b.start

    @pytest.mark.parametrize("seed", range(20))
    def test_covers_same_days(self, seed: int) -> None:
        ranges = random_ranges(seed)
        assert covered_days(join_ranges(ranges)) == covered_days(ranges)

    @pytest.mark.parametrize("seed", range(5))
    def test_order_independent(self, seed: int) -> None:
        ranges = random_ranges(seed)
        shuffled = list(ranges)
        random.Random(seed + 100).shuffle(shuffled)
        assert join_ranges(shuffled) == join_ranges(ranges)


class TestSubtractRanges:
    """Test collection-level subtraction."""

    def test_free_windows(self) -> None:
        period = [dr("2024-03-01", "2024-03-31")]
        booked = [dr("2024-03-05", "2024-03-09"), dr("2024-03-20", "2024-03-31")]
        assert subtract_ranges(period, booked) == [
            dr("2024-03-01", "2024-03-04"),
            dr("2024-03-10", "2024-03-19"),
        ]

    def test_disjoint_subtrahend_keeps_everything(self) -> None:
        period = [dr("2024-03-01", "2024-03-10")]
        assert subtract_ranges(period, [dr("2024-04-01", "2024-04-02")]) == period

    def test_nothing_to_subtract(self) -> None:
        period = [dr("2024-03-06", "2024-03-10"), dr("2024-03-01", "2024-03-05")]
        assert subtract_ranges(period, []) == [dr("2024-03-01", "2024-03-10")]

    def test_everything_removed(self) -> None:
        period = [dr("2024-03-01", "2024-03-10"), dr("2024-03-15", "2024-03-20")]
        assert subtract_ranges(period, [dr("2024-02-01", "2024-04-01")]) == []

    def test_subtrahend_spanning_several_pieces(self) -> None:
        minuends = [dr("2024-03-01", "2024-03-05"), dr("2024-03-10", "2024-03-15")]
        assert subtract_ranges(minuends, [dr("2024-03-04", "2024-03-11")]) == [
            dr("2024-03-01", "2024-03-03"),
            dr("2024-03-12", "2024-03-15"),
        ]

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_day_sets(self, seed: int) -> None:
        left = random_ranges(seed)
        right = random_ranges(seed + 1000, count=6)
        result = subtract_ranges(left, right)
        assert covered_days(result) == covered_days(left) - covered_days(right)
        assert join_ranges(result) == result
