"""Set intersection over whole collections of DateRanges."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import product

from ..core.logging_config import get_logger
from ..core.models import DateRange
from .normalize import join_ranges
from .pairwise import intersect

logger = get_logger(__name__)


def intersect_ranges(
    left_ranges: Iterable[DateRange | None],
    right_ranges: Iterable[DateRange | None],
) -> list[DateRange]:
    """Return the days present in both collections as a normalized list.

    Every left range is intersected with every right range and the overlaps
    are joined, so the result is sorted and disjoint whatever the input shape.
    """
    lefts = [r for r in left_ranges if r is not None]
    rights = [r for r in right_ranges if r is not None]
    overlaps = [intersect(a, b) for a, b in product(lefts, rights)]
    logger.debug(
        "Intersected date range collections",
        extra={"left_count": len(lefts), "right_count": len(rights)},
    )
    return join_ranges(overlaps)
