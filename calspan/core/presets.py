"""Relative calendar ranges and fixed-size chunking for reporting windows."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, date, datetime, timedelta

from .config import get_settings
from .enums import DatePreset
from .models import ONE_DAY, DateRange

_TRAILING_DAYS: dict[DatePreset, int] = {
    DatePreset.LAST_3D: 3,
    DatePreset.LAST_7D: 7,
    DatePreset.LAST_14D: 14,
    DatePreset.LAST_28D: 28,
}


def preset_to_range(preset: DatePreset | str, today: date | None = None) -> DateRange:
    """Resolve a preset against ``today`` (current UTC date by default).

    ``last_Nd`` presets end yesterday; weeks start on Monday.
    """
    preset = DatePreset(preset)
    d = today or datetime.now(UTC).date()
    if preset is DatePreset.TODAY:
        return DateRange(d, d)
    if preset is DatePreset.YESTERDAY:
        y = d - ONE_DAY
        return DateRange(y, y)
    if preset in _TRAILING_DAYS:
        return DateRange(d - timedelta(days=_TRAILING_DAYS[preset]), d - ONE_DAY)
    if preset is DatePreset.THIS_WEEK:
        return DateRange(d - timedelta(days=d.weekday()), d)
    if preset is DatePreset.LAST_WEEK:
        monday = d - timedelta(days=d.weekday() + 7)
        return DateRange(monday, monday + timedelta(days=6))
    if preset is DatePreset.THIS_MONTH:
        return DateRange(d.replace(day=1), d)
    if preset is DatePreset.LAST_MONTH:
        last_prev = d.replace(day=1) - ONE_DAY
        return DateRange(last_prev.replace(day=1), last_prev)
    if preset is DatePreset.THIS_YEAR:
        return DateRange(date(d.year, 1, 1), d)
    # LAST_YEAR
    return DateRange(date(d.year - 1, 1, 1), date(d.year - 1, 12, 31))


def chunks(dr: DateRange, *, chunk_days: int | None = None) -> Iterator[DateRange]:
    """Split ``dr`` into consecutive ranges of at most ``chunk_days`` days.

    ``chunk_days`` defaults to ``Settings.default_chunk_days``.
    """
    if chunk_days is None:
        chunk_days = get_settings().default_chunk_days
    if chunk_days < 1:
        raise ValueError(f"chunk_days must be at least 1, got {chunk_days}")
    step = timedelta(days=chunk_days)
    cursor = dr.start
    while True:
        remaining = (dr.end - cursor).days + 1
        if remaining <= chunk_days:
            yield DateRange(cursor, dr.end)
            return
        end = cursor + step - ONE_DAY
        yield DateRange(cursor, end)
        cursor = end + ONE_DAY
