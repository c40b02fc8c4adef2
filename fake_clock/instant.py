"""Capability interface shared by the fake and the real monotonic clock.

Code that measures time should be written against :class:`Instant` and
receive the concrete type (``FakeClock`` in tests, ``MonotonicClock`` in
production) from its caller or from :func:`fake_clock.runtime.resolve_instant`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, ClassVar, Optional, Protocol, Type, TypeVar, runtime_checkable

from .duration import U64_MAX, Duration, DurationLike, as_duration
from .errors import CounterRangeError, TimeOrderError
from .store import check_counter

__all__ = ["Instant", "TickInstant"]

_I = TypeVar("_I", bound="Instant")
_T = TypeVar("_T", bound="TickInstant")


@runtime_checkable
class Instant(Protocol):
    """A point on a monotonic timeline.

    Instants are immutable, hashable and totally ordered. Subtracting two
    instants of the same type yields a :class:`Duration`; adding or
    subtracting a :class:`Duration` yields another instant.
    """

    @classmethod
    def now(cls: Type[_I]) -> _I:
        ...

    def duration_since(self: _I, earlier: _I) -> Duration:
        """Return the span since *earlier*; raise :class:`TimeOrderError` if it is later."""
        ...

    def checked_duration_since(self: _I, earlier: _I) -> Optional[Duration]:
        ...

    def saturating_duration_since(self: _I, earlier: _I) -> Duration:
        ...

    def elapsed(self) -> Duration:
        ...

    def checked_add(self: _I, duration: DurationLike) -> Optional[_I]:
        ...

    def checked_sub(self: _I, duration: DurationLike) -> Optional[_I]:
        ...

    def __add__(self: _I, duration: DurationLike) -> _I:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __lt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...

    def __gt__(self, other: Any) -> bool:
        ...

    def __ge__(self, other: Any) -> bool:
        ...

    def __eq__(self, other: object) -> bool:
        ...

    def __hash__(self) -> int:
        ...

    def __repr__(self) -> str:
        ...


@dataclass(frozen=True, order=True, repr=False)
class TickInstant:
    """Instant stored as an unsigned 64-bit count of ticks.

    Subclasses set ``_TICK_NANOS`` to the length of one tick and implement
    :meth:`now`. Offsets are truncated to whole ticks. Checked operations
    return ``None`` when the result leaves ``[0, 2**64 - 1]``; the operators
    raise :class:`CounterRangeError` instead. Instants of different
    subclasses never compare equal and cannot be subtracted from each other.
    """

    _ticks: int

    _TICK_NANOS: ClassVar[int] = 1
    _REPR_FIELD: ClassVar[str] = "ticks"

    def __post_init__(self) -> None:
        check_counter(self._REPR_FIELD, self._ticks)

    @classmethod
    def now(cls: Type[_T]) -> _T:
        raise NotImplementedError

    # ------------------------------------------------------------------
    def _require_same_kind(self, other: Any) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )

    def _ticks_of(self, duration: DurationLike) -> int:
        return as_duration(duration).as_nanos() // self._TICK_NANOS

    def _to_duration(self, ticks: int) -> Duration:
        return Duration.from_nanos(ticks * self._TICK_NANOS)

    def checked_duration_since(self: _T, earlier: _T) -> Optional[Duration]:
        self._require_same_kind(earlier)
        if earlier._ticks > self._ticks:
            return None
        return self._to_duration(self._ticks - earlier._ticks)

    def saturating_duration_since(self: _T, earlier: _T) -> Duration:
        result = self.checked_duration_since(earlier)
        return Duration.ZERO if result is None else result

    def duration_since(self: _T, earlier: _T) -> Duration:
        result = self.checked_duration_since(earlier)
        if result is None:
            raise TimeOrderError(f"{earlier!r} is later than {self!r}")
        return result

    def elapsed(self) -> Duration:
        return type(self).now().duration_since(self)

    def checked_add(self: _T, duration: DurationLike) -> Optional[_T]:
        total = self._ticks + self._ticks_of(duration)
        if total > U64_MAX:
            return None
        return type(self)(total)

    def checked_sub(self: _T, duration: DurationLike) -> Optional[_T]:
        total = self._ticks - self._ticks_of(duration)
        if total < 0:
            return None
        return type(self)(total)

    def __add__(self: _T, other: Any) -> _T:
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise CounterRangeError(f"{self!r} + {other!r} overflows the counter")
        return result

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, TickInstant):
            return self.duration_since(other)
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise CounterRangeError(f"{self!r} - {other!r} underflows the counter")
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._REPR_FIELD}={self._ticks})"
