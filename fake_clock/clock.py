"""Virtual instant backed by the per-thread :mod:`fake_clock.store`."""

from __future__ import annotations

from typing import Optional

from . import store as _store
from .duration import Duration
from .instant import TickInstant
from .store import TimeStore

__all__ = ["FakeClock"]


class FakeClock(TickInstant):
    """Snapshot of the fake time at the moment it was created.

    The value never changes after construction, so moving the store with
    :meth:`set_time` or :meth:`advance_time` only affects instants created
    afterwards. Offsets are truncated to whole milliseconds.
    """

    _TICK_NANOS = 1_000_000
    _REPR_FIELD = "time_created"

    set_time = staticmethod(_store.set_time)
    advance_time = staticmethod(_store.advance_time)
    time = staticmethod(_store.time)

    @classmethod
    def now(cls, store: Optional[TimeStore] = None) -> "FakeClock":
        """Return an instant for the current fake time of *store* (default: the global store)."""

        if store is None:
            store = _store.default_store()
        return cls(store.get())

    @property
    def time_created(self) -> int:
        """Fake time, in milliseconds, captured when this instant was created."""

        return self._ticks

    def elapsed(self, store: Optional[TimeStore] = None) -> Duration:
        """Return how much fake time has passed since this instant was created."""

        return type(self).now(store).duration_since(self)
