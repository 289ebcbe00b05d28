"""Reduce collections of DateRanges to their minimal disjoint cover."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.logging_config import get_logger
from ..core.models import DateRange
from .pairwise import join, subtract

logger = get_logger(__name__)


def cleanup_sort(ranges: Iterable[DateRange | None]) -> list[DateRange]:
    """Drop empty slots and sort the remaining ranges by (start, end)."""
    return sorted(r for r in ranges if r is not None)


def join_ranges(ranges: Iterable[DateRange | None]) -> list[DateRange]:
    """Merge overlapping and touching ranges.

    The result is sorted, and no two of its ranges overlap or touch, so it is
    the smallest list of ranges covering exactly the same days as the input.
    ``None`` entries are ignored.

    Args:
        ranges: Any iterable of ranges, in any order, possibly with None slots

    Returns:
        New list of disjoint ranges in ascending order
    """
    live = cleanup_sort(ranges)
    merged: list[DateRange] = []
    for current in live:
        if merged:
            joined = join(merged[-1], current)
            if joined is not None:
                merged[-1] = joined
                continue
        merged.append(current)
    logger.debug(
        "Joined date ranges", extra={"input_count": len(live), "output_count": len(merged)}
    )
    return merged


def subtract_ranges(
    minuends: Iterable[DateRange | None],
    subtrahends: Iterable[DateRange | None],
) -> list[DateRange]:
    """Return the days covered by ``minuends`` but by none of ``subtrahends``.

    Example:
        >>> subtract_ranges(
        ...     [DateRange("2024-03-01", "2024-03-31")],
        ...     [DateRange("2024-03-05", "2024-03-09"), DateRange("2024-03-20", "2024-03-31")],
        ... )
        [DateRange('2024-03-01', '2024-03-04'), DateRange('2024-03-10', '2024-03-19')]
    """
    remaining = join_ranges(minuends)
    for cut in join_ranges(subtrahends):
        pieces: list[DateRange] = []
        for piece in remaining:
            if piece.end < cut.start or piece.start > cut.end:
                # subtract() yields nothing for disjoint pairs; the piece survives
                pieces.append(piece)
            else:
                pieces.extend(subtract(piece, cut))
        remaining = pieces
    return join_ranges(remaining)
