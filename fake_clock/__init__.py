"""Virtual monotonic clock for deterministic tests."""

from .clock import FakeClock
from .duration import U64_MAX, Duration
from .errors import ClockError, CounterRangeError, DurationRangeError, TimeOrderError
from .instant import Instant
from .monotonic import MonotonicClock
from .runtime import resolve_instant
from .store import TimeStore, advance_time, reset_time, set_time, time

__all__ = [
    "ClockError",
    "CounterRangeError",
    "Duration",
    "DurationRangeError",
    "FakeClock",
    "Instant",
    "MonotonicClock",
    "TimeOrderError",
    "TimeStore",
    "U64_MAX",
    "advance_time",
    "reset_time",
    "resolve_instant",
    "set_time",
    "time",
]
