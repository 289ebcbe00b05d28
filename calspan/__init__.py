"""Set arithmetic over closed calendar date ranges.

calspan provides the DateRange value type and the operations scheduling,
availability and reporting code needs to combine and compare date spans:

    - intersect / join / subtract on two ranges
    - join_ranges: minimal sorted disjoint cover of a collection
    - intersect_ranges / subtract_ranges: set operations on collections
    - preset_to_range / chunks: relative reporting windows and fixed-size slices

Usage:
    from calspan import DateRange, join_ranges

    booked = [DateRange("2024-05-01", "2024-05-03"), DateRange("2024-05-04", "2024-05-09")]
    join_ranges(booked)  # [DateRange('2024-05-01', '2024-05-09')]

Empty results (None or []) mean "no such range" and are never errors; the
only construction error is InvalidRange.
"""

from .core.enums import DatePreset
from .core.errors import CalspanError, InvalidRange
from .core.models import DateRange
from .core.presets import chunks, preset_to_range
from .ops.combine import intersect_ranges
from .ops.normalize import cleanup_sort, join_ranges, subtract_ranges
from .ops.pairwise import intersect, join, subtract

__all__ = [
    "CalspanError",
    "DatePreset",
    "DateRange",
    "InvalidRange",
    "chunks",
    "cleanup_sort",
    "intersect",
    "intersect_ranges",
    "join",
    "join_ranges",
    "preset_to_range",
    "subtract",
    "subtract_ranges",
]
