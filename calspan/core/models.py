from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .errors import InvalidRange

ONE_DAY = timedelta(days=1)


def _to_date(value: date | str, field: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidRange(
                f"{field} is not a valid YYYY-MM-DD date: {value!r}"
            ) from e
    raise TypeError(
        f"{field} must be a date or a YYYY-MM-DD string, got {type(value).__name__}"
    )


def _to_step(step: timedelta | int) -> timedelta:
    if isinstance(step, int):
        step = timedelta(days=step)
    if step <= timedelta(0):
        raise ValueError(f"Period step must be positive, got {step}")
    return step


@dataclass(frozen=True, order=True)
class DateRange:
    """Closed calendar interval [start, end], both days included.

    Bounds may be given as ``date`` objects or ``YYYY-MM-DD`` strings.
    Instances are immutable and sort by ``(start, end)``.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        start = _to_date(self.start, "start")
        end = _to_date(self.end, "end")
        if start > end:
            raise InvalidRange(
                f"start must not be after end: {start.isoformat()} > {end.isoformat()}",
                start=start,
                end=end,
            )
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    def __str__(self) -> str:
        return f"{self.start.isoformat()}<->{self.end.isoformat()}"

    def __repr__(self) -> str:
        return f"DateRange({self.start.isoformat()!r}, {self.end.isoformat()!r})"

    def __contains__(self, day: object) -> bool:
        if isinstance(day, datetime):
            day = day.date()
        if not isinstance(day, date):
            return False
        return self.start <= day <= self.end

    def is_equivalent_to(self, other: DateRange) -> bool:
        return self.start == other.start and self.end == other.end

    def count_days(self) -> int:
        """Number of days in the range, both bounds included."""
        return (self.end - self.start).days + 1

    def as_period(self, step: timedelta | int = ONE_DAY) -> Iterator[date]:
        """Lazily yield dates from ``start`` up to ``end`` every ``step``.

        Each call starts a fresh walk. ``step`` may be a timedelta or a number
        of days and must be positive.
        """
        delta = _to_step(step)

        def _walk() -> Iterator[date]:
            cursor = self.start
            while cursor <= self.end:
                yield cursor
                try:
                    cursor += delta
                except OverflowError:
                    # stepped past date.max
                    return

        return _walk()
