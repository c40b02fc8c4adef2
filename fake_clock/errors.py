"""Exceptions raised by the virtual and monotonic clocks."""

from __future__ import annotations

__all__ = [
    "ClockError",
    "CounterRangeError",
    "DurationRangeError",
    "TimeOrderError",
]


class ClockError(Exception):
    """Base class for all clock related failures."""


class CounterRangeError(ClockError, OverflowError):
    """Raised when a counter would leave its representable range."""


class DurationRangeError(ClockError, ValueError):
    """Raised when a duration is negative or exceeds :attr:`Duration.MAX`."""


class TimeOrderError(ClockError, ValueError):
    """Raised when the "earlier" instant is actually later than ``self``."""
