"""Tests for the virtual instant."""

from __future__ import annotations

import copy
import pickle
from datetime import timedelta

import pytest

from fake_clock import (
    U64_MAX,
    CounterRangeError,
    Duration,
    DurationRangeError,
    FakeClock,
    MonotonicClock,
    TimeOrderError,
    TimeStore,
    advance_time,
    set_time,
)


def test_now_captures_current_time() -> None:
    set_time(1234)
    instant = FakeClock.now()

    assert instant.time_created == 1234
    assert FakeClock.time() == 1234


def test_instant_is_not_affected_by_later_store_changes() -> None:
    set_time(100)
    instant = FakeClock.now()
    advance_time(50)
    set_time(0)

    assert instant.time_created == 100


def test_static_helpers_drive_the_store() -> None:
    FakeClock.set_time(10)
    FakeClock.advance_time(5)

    assert FakeClock.time() == 15
    assert FakeClock.now() == FakeClock(15)


def test_duration_since_matches_store_difference() -> None:
    set_time(1_000)
    first = FakeClock.now()
    advance_time(250)
    advance_time(750)
    second = FakeClock.now()

    assert second.duration_since(first) == Duration.from_millis(1_000)
    assert second - first == Duration.from_secs(1)
    assert first.duration_since(first) == Duration.ZERO


def test_duration_since_raises_when_earlier_is_later() -> None:
    set_time(1)
    later = FakeClock.now()
    set_time(0)
    earlier = FakeClock.now()

    with pytest.raises(TimeOrderError):
        earlier.duration_since(later)
    with pytest.raises(TimeOrderError):
        earlier - later


def test_checked_duration_since_full_range() -> None:
    set_time(0)
    inst0 = FakeClock.now()
    set_time(U64_MAX)
    inst_max = FakeClock.now()

    assert inst_max.checked_duration_since(inst0) == Duration.from_millis(U64_MAX)
    assert inst0.checked_duration_since(inst_max) is None


def test_checked_and_saturating_duration_since_on_underflow() -> None:
    set_time(1)
    inst1 = FakeClock.now()
    set_time(0)
    inst0 = FakeClock.now()

    assert inst0.checked_duration_since(inst1) is None
    assert inst0.saturating_duration_since(inst1) == Duration.ZERO
    assert inst1.saturating_duration_since(inst0) == Duration.from_millis(1)


def test_elapsed_tracks_store() -> None:
    set_time(40)
    instant = FakeClock.now()
    assert instant.elapsed() == Duration.ZERO

    advance_time(60)
    assert instant.elapsed() == Duration.from_millis(60)


def test_elapsed_raises_after_clock_reset() -> None:
    set_time(40)
    instant = FakeClock.now()
    set_time(0)

    with pytest.raises(TimeOrderError):
        instant.elapsed()


def test_now_and_elapsed_with_injected_store() -> None:
    custom = TimeStore()
    custom.set(900)
    set_time(5)

    instant = FakeClock.now(custom)
    assert instant.time_created == 900

    custom.advance(100)
    assert instant.elapsed(custom) == Duration.from_millis(100)


def test_checked_add_overflow_boundary() -> None:
    set_time(U64_MAX)
    instant = FakeClock.now()

    assert instant.checked_add(Duration.from_millis(1)) is None
    assert instant.checked_add(Duration.from_nanos(999_999)) == instant


def test_checked_sub_underflow_boundary() -> None:
    instant = FakeClock.now()

    assert instant.time_created == 0
    assert instant.checked_sub(Duration.from_millis(1)) is None
    assert instant.checked_sub(Duration.ZERO) == instant


@pytest.mark.parametrize("start", [0, 1, 10_000, U64_MAX - 3_000])
@pytest.mark.parametrize(
    "offset",
    [Duration.ZERO, Duration.from_millis(7), Duration.from_secs(3), Duration(2, 500_000_123)],
)
def test_checked_add_then_sub_round_trips(start: int, offset: Duration) -> None:
    set_time(start)
    instant = FakeClock.now()

    moved = instant.checked_add(offset)
    assert moved is not None
    assert moved.checked_sub(offset) == instant


def test_offsets_truncate_to_whole_milliseconds() -> None:
    set_time(100)
    instant = FakeClock.now()

    assert (instant + Duration.from_nanos(1_999_999)).time_created == 101
    assert (instant - Duration.from_micros(2_500)).time_created == 98
    assert (instant + Duration(1, 250_000_000)).time_created == 1_350


def test_operators_accept_timedelta() -> None:
    set_time(1_000)
    instant = FakeClock.now()

    assert (instant + timedelta(seconds=2)).time_created == 3_000
    assert (instant - timedelta(milliseconds=400)).time_created == 600
    assert instant.checked_add(timedelta(milliseconds=1)) == FakeClock(1_001)


def test_negative_timedelta_is_rejected() -> None:
    instant = FakeClock.now()

    with pytest.raises(DurationRangeError):
        instant + timedelta(milliseconds=-1)


def test_operators_raise_instead_of_wrapping() -> None:
    set_time(U64_MAX)
    top = FakeClock.now()
    with pytest.raises(CounterRangeError):
        top + Duration.from_millis(1)

    bottom = FakeClock(0)
    with pytest.raises(CounterRangeError):
        bottom - Duration.from_millis(1)


def test_unsupported_operands_raise_type_error() -> None:
    instant = FakeClock.now()

    with pytest.raises(TypeError):
        instant + 5  # type: ignore[operator]
    with pytest.raises(TypeError):
        instant - 5  # type: ignore[operator]
    with pytest.raises(TypeError):
        instant - MonotonicClock.now()


def test_ordering_follows_time_created() -> None:
    instants = [FakeClock(value) for value in (5, 0, U64_MAX, 17, 5)]

    assert sorted(instants) == [FakeClock(v) for v in (0, 5, 5, 17, U64_MAX)]
    assert FakeClock(3) < FakeClock(4)
    assert FakeClock(4) >= FakeClock(4)
    assert max(instants) == FakeClock(U64_MAX)
    assert FakeClock(4) != FakeClock(5)


def test_equal_instants_hash_equally() -> None:
    set_time(8)
    first = FakeClock.now()
    second = FakeClock.now()

    assert first == second
    assert len({first, second, FakeClock(9)}) == 2


def test_fake_and_monotonic_instants_are_not_mixed() -> None:
    fake = FakeClock(0)
    real = MonotonicClock(0)

    assert fake != real
    with pytest.raises(TypeError):
        fake < real  # noqa: B015
    with pytest.raises(TypeError):
        fake.duration_since(real)  # type: ignore[arg-type]


def test_repr() -> None:
    assert repr(FakeClock(42)) == "FakeClock(time_created=42)"


def test_instants_are_immutable() -> None:
    instant = FakeClock(1)

    with pytest.raises(AttributeError):
        instant._ticks = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        instant.time_created = 2  # type: ignore[misc]


def test_instants_copy_and_pickle() -> None:
    instant = FakeClock(99)

    assert copy.copy(instant) == instant
    assert copy.deepcopy(instant) == instant
    assert pickle.loads(pickle.dumps(instant)) == instant


@pytest.mark.parametrize("value", [-1, U64_MAX + 1])
def test_constructor_rejects_out_of_range(value: int) -> None:
    with pytest.raises(CounterRangeError):
        FakeClock(value)
