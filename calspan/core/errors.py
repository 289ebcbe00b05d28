"""Exception hierarchy for calspan."""

from __future__ import annotations

from typing import Any


class CalspanError(Exception):
    """Base exception for calspan errors."""
    pass


class InvalidRange(CalspanError, ValueError):
    """A DateRange could not be built from the given bounds."""

    def __init__(self, message: str, *, start: Any = None, end: Any = None):
        super().__init__(message)
        self.start = start
        self.end = end
