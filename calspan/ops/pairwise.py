"""Operators combining two DateRanges.

Each operator is a pure function: inputs are never modified and the result is
either a new range, one of the inputs, or an empty result (``None`` / ``[]``)
when no range exists. Empty results are normal outcomes, not errors.
"""

from __future__ import annotations

from itertools import dropwhile, takewhile

from ..core.models import ONE_DAY, DateRange


def intersect(left: DateRange, right: DateRange) -> DateRange | None:
    """Return the overlap of two ranges, or None when they are disjoint."""
    # Walk the shorter range; the containment check below also relies on it
    if left.count_days() > right.count_days():
        left, right = right, left

    if left.end < right.start or left.start > right.end:
        return None

    if left.start >= right.start and left.end <= right.end:
        return left

    inside = takewhile(
        lambda day: day <= right.end,
        dropwhile(lambda day: day < right.start, left.as_period()),
    )
    first = last = None
    for day in inside:
        if first is None:
            first = day
        last = day
    return DateRange(first, last)


def join(left: DateRange, right: DateRange) -> DateRange | None:
    """Merge two ranges that overlap or touch.

    Ranges touch when one ends the day before the other starts. Returns None
    when at least one full day separates them.
    """
    if left.start > right.start:
        left, right = right, left

    # gap of at least one full day
    if (right.start - left.end).days > 1:
        return None
    if left.end >= right.end:
        return left
    return DateRange(left.start, right.end)


def subtract(minuend: DateRange, subtrahend: DateRange) -> list[DateRange]:
    """Remove the days of ``subtrahend`` from ``minuend``.

    Returns:
        [] when nothing remains or the ranges do not overlap, one range when
        the subtrahend clips the head or the tail, two ranges (head then tail)
        when it lies strictly inside the minuend.
    """
    if minuend.end < subtrahend.start or minuend.start > subtrahend.end:
        return []

    covers_head = subtrahend.start <= minuend.start
    covers_tail = subtrahend.end >= minuend.end

    if covers_head and covers_tail:
        return []
    if covers_tail:
        return [DateRange(minuend.start, subtrahend.start - ONE_DAY)]
    if covers_head:
        return [DateRange(subtrahend.end + ONE_DAY, minuend.end)]
    return [
        DateRange(minuend.start, subtrahend.start - ONE_DAY),
        DateRange(subtrahend.end + ONE_DAY, minuend.end),
    ]
