"""Non-negative time spans shared by the fake and monotonic clocks.

:class:`datetime.timedelta` cannot represent ``2**64 - 1`` milliseconds and
permits negative values, so clock arithmetic is expressed in terms of
:class:`Duration`: an immutable, nanosecond-resolution span bounded by
:attr:`Duration.MAX`. Wherever a :class:`Duration` is accepted, a
non-negative :class:`~datetime.timedelta` is accepted as well.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, ClassVar, Final, Optional, Union

from .errors import DurationRangeError

__all__ = ["Duration", "DurationLike", "U64_MAX", "as_duration"]

U64_MAX: Final[int] = 2**64 - 1

_NANOS_PER_SEC: Final[int] = 1_000_000_000
_NANOS_PER_MILLI: Final[int] = 1_000_000
_NANOS_PER_MICRO: Final[int] = 1_000
_MAX_NANOS: Final[int] = U64_MAX * _NANOS_PER_SEC + (_NANOS_PER_SEC - 1)
_ONE_MICROSECOND = timedelta(microseconds=1)


def _require_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


@dataclass(frozen=True, order=True, init=False, repr=False)
class Duration:
    """A span of time with nanosecond resolution.

    Parameters
    ----------
    secs:
        Whole seconds.
    nanos:
        Additional nanoseconds. Values of one second or more carry over into
        the seconds component.

    Raises
    ------
    DurationRangeError
        If either component is negative or the total exceeds :attr:`MAX`.

    A :class:`~datetime.timedelta` may be added to or subtracted from a
    duration on either side of the operator, but it never compares equal to
    one; convert with :meth:`from_timedelta` first.
    """

    _nanos: int

    ZERO: ClassVar["Duration"]
    MAX: ClassVar["Duration"]

    def __init__(self, secs: int = 0, nanos: int = 0) -> None:
        _require_int("secs", secs)
        _require_int("nanos", nanos)
        if secs < 0 or nanos < 0:
            raise DurationRangeError(
                f"Duration components must be non-negative (secs={secs}, nanos={nanos})"
            )
        total = secs * _NANOS_PER_SEC + nanos
        if total > _MAX_NANOS:
            raise DurationRangeError(f"Duration of {total} ns exceeds Duration.MAX")
        object.__setattr__(self, "_nanos", total)

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_secs(cls, secs: int) -> "Duration":
        return cls(secs, 0)

    @classmethod
    def from_millis(cls, millis: int) -> "Duration":
        return cls(0, _require_int("millis", millis) * _NANOS_PER_MILLI)

    @classmethod
    def from_micros(cls, micros: int) -> "Duration":
        return cls(0, _require_int("micros", micros) * _NANOS_PER_MICRO)

    @classmethod
    def from_nanos(cls, nanos: int) -> "Duration":
        return cls(0, nanos)

    @classmethod
    def from_secs_float(cls, secs: float) -> "Duration":
        """Build a duration from fractional seconds, rounded to the nearest nanosecond."""

        if isinstance(secs, bool) or not isinstance(secs, (int, float)):
            raise TypeError(f"secs must be a number, got {type(secs).__name__}")
        if math.isnan(secs) or math.isinf(secs):
            raise DurationRangeError(f"Cannot build a Duration from {secs!r}")
        return cls(0, round(secs * _NANOS_PER_SEC))

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Duration":
        """Convert a non-negative :class:`~datetime.timedelta`."""

        if value < timedelta(0):
            raise DurationRangeError(f"Cannot convert negative timedelta {value!r}")
        return cls(0, (value // _ONE_MICROSECOND) * _NANOS_PER_MICRO)

    # ------------------------------------------------------------------
    # Accessors
    def as_secs(self) -> int:
        return self._nanos // _NANOS_PER_SEC

    def subsec_nanos(self) -> int:
        return self._nanos % _NANOS_PER_SEC

    def subsec_micros(self) -> int:
        return self.subsec_nanos() // _NANOS_PER_MICRO

    def subsec_millis(self) -> int:
        return self.subsec_nanos() // _NANOS_PER_MILLI

    def as_millis(self) -> int:
        """Return the whole milliseconds in this span, truncating the remainder."""

        return self._nanos // _NANOS_PER_MILLI

    def as_micros(self) -> int:
        return self._nanos // _NANOS_PER_MICRO

    def as_nanos(self) -> int:
        return self._nanos

    def as_secs_float(self) -> float:
        return self._nanos / _NANOS_PER_SEC

    def is_zero(self) -> bool:
        return self._nanos == 0

    def to_timedelta(self) -> timedelta:
        """Return the span as a :class:`~datetime.timedelta`, truncated to microseconds.

        Raises :class:`OverflowError` for spans beyond ``timedelta.max``.
        """

        return timedelta(microseconds=self._nanos // _NANOS_PER_MICRO)

    # ------------------------------------------------------------------
    # Arithmetic
    def checked_add(self, other: "DurationLike") -> Optional["Duration"]:
        total = self._nanos + as_duration(other)._nanos
        if total > _MAX_NANOS:
            return None
        return Duration(0, total)

    def checked_sub(self, other: "DurationLike") -> Optional["Duration"]:
        rhs = as_duration(other)._nanos
        if rhs > self._nanos:
            return None
        return Duration(0, self._nanos - rhs)

    def saturating_add(self, other: "DurationLike") -> "Duration":
        result = self.checked_add(other)
        return Duration.MAX if result is None else result

    def saturating_sub(self, other: "DurationLike") -> "Duration":
        result = self.checked_sub(other)
        return Duration.ZERO if result is None else result

    def checked_mul(self, factor: int) -> Optional["Duration"]:
        _require_int("factor", factor)
        if factor < 0:
            return None
        total = self._nanos * factor
        if total > _MAX_NANOS:
            return None
        return Duration(0, total)

    def __add__(self, other: Any) -> "Duration":
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise DurationRangeError(f"Overflow when adding {other!r} to {self!r}")
        return result

    def __sub__(self, other: Any) -> "Duration":
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise DurationRangeError(f"Subtracting {other!r} from {self!r} would be negative")
        return result

    def __mul__(self, factor: Any) -> "Duration":
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        result = self.checked_mul(factor)
        if result is None:
            raise DurationRangeError(f"Cannot multiply {self!r} by {factor}")
        return result

    __radd__ = __add__
    __rmul__ = __mul__

    def __rsub__(self, other: Any) -> "Duration":
        if not isinstance(other, timedelta):
            return NotImplemented
        return as_duration(other) - self

    def __bool__(self) -> bool:
        return self._nanos != 0

    def __repr__(self) -> str:
        return f"Duration(secs={self.as_secs()}, nanos={self.subsec_nanos()})"


Duration.ZERO = Duration()
Duration.MAX = Duration(U64_MAX, _NANOS_PER_SEC - 1)

DurationLike = Union[Duration, timedelta]


def as_duration(value: DurationLike) -> Duration:
    """Return *value* as a :class:`Duration`."""

    if isinstance(value, Duration):
        return value
    if isinstance(value, timedelta):
        return Duration.from_timedelta(value)
    raise TypeError(f"Expected Duration or timedelta, got {type(value).__name__}")
