"""Instant backed by the host's monotonic clock."""

from __future__ import annotations

import time

from .instant import TickInstant

__all__ = ["MonotonicClock"]


class MonotonicClock(TickInstant):
    """Production counterpart of :class:`~fake_clock.clock.FakeClock`.

    The clock reads :func:`time.monotonic_ns` so it is immune to changes of
    the system time. Its epoch is arbitrary; only differences between two
    instants are meaningful.
    """

    _TICK_NANOS = 1
    _REPR_FIELD = "nanos"

    @classmethod
    def now(cls) -> "MonotonicClock":
        return cls(time.monotonic_ns())

    @property
    def nanos(self) -> int:
        return self._ticks
