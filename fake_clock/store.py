"""Per-thread virtual time store.

Each thread sees its own millisecond counter, starting at zero on first
access. The counter is only changed through :func:`set_time`,
:func:`advance_time` and :func:`reset_time` (or the equivalent
:class:`TimeStore` methods), and backward jumps are allowed so tests can
simulate clock resets.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from .duration import U64_MAX
from .errors import CounterRangeError

__all__ = [
    "TimeStore",
    "advance_time",
    "check_counter",
    "default_store",
    "reset_time",
    "set_time",
    "time",
]

log = logging.getLogger(__name__)


def check_counter(name: str, value: Any) -> int:
    """Validate that *value* fits in an unsigned 64-bit counter."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > U64_MAX:
        raise CounterRangeError(f"{name}={value} is outside [0, {U64_MAX}]")
    return value


class TimeStore(threading.local):
    """Millisecond counter scoped to the calling thread.

    Instances may be created and injected into :meth:`FakeClock.now` when a
    test needs a clock that is independent of the module-level default.
    Sharing one store between threads does not share its value: every thread
    starts from zero.
    """

    def __init__(self) -> None:
        self._millis = 0

    def get(self) -> int:
        return self._millis

    def set(self, value: int) -> None:
        """Overwrite the counter with *value* milliseconds."""

        check_counter("value", value)
        previous = self._millis
        self._millis = value
        if value < previous:
            log.debug("Fake time moved backwards from %d ms to %d ms", previous, value)
        else:
            log.debug("Fake time set to %d ms", value)

    def advance(self, delta: int) -> None:
        """Add *delta* milliseconds to the counter.

        Raises
        ------
        CounterRangeError
            If *delta* is negative or the counter would overflow. The counter
            is left unchanged in that case.
        """

        check_counter("delta", delta)
        updated = self._millis + delta
        if updated > U64_MAX:
            raise CounterRangeError(
                f"Advancing fake time at {self._millis} ms by {delta} ms overflows the counter"
            )
        self._millis = updated
        log.debug("Fake time advanced by %d ms to %d ms", delta, updated)

    def reset(self) -> None:
        self._millis = 0


_default_store = TimeStore()


def default_store() -> TimeStore:
    """Return the store backing the module-level functions."""

    return _default_store


def set_time(value: int) -> None:
    """Set the calling thread's fake time to *value* milliseconds."""

    _default_store.set(value)


def advance_time(delta: int) -> None:
    """Advance the calling thread's fake time by *delta* milliseconds."""

    _default_store.advance(delta)


def time() -> int:
    """Return the calling thread's fake time in milliseconds."""

    return _default_store.get()


def reset_time() -> None:
    """Reset the calling thread's fake time to zero."""

    _default_store.reset()
