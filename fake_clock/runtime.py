"""Select the instant implementation used by the running process."""

from __future__ import annotations

import logging
from typing import Optional, Type, Union

from .clock import FakeClock
from .config import is_fake_clock_enabled
from .monotonic import MonotonicClock

__all__ = ["resolve_instant"]

log = logging.getLogger(__name__)


def resolve_instant(
    use_fake: Optional[bool] = None,
) -> Union[Type[FakeClock], Type[MonotonicClock]]:
    """Return :class:`FakeClock` or :class:`MonotonicClock`.

    When *use_fake* is ``None`` the choice follows the ``FAKE_CLOCK_ENABLED``
    environment variable, read at call time.
    """

    if use_fake is None:
        use_fake = is_fake_clock_enabled()
    instant_type = FakeClock if use_fake else MonotonicClock
    log.debug("Using %s as instant implementation", instant_type.__name__)
    return instant_type
