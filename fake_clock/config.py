"""Central configuration constants with environment overrides."""

from __future__ import annotations

import os
from typing import Final

_FAKE_CLOCK_ENABLED_ENV: Final[str] = "FAKE_CLOCK_ENABLED"


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


FAKE_CLOCK_ENABLED: Final[bool] = _get_bool(_FAKE_CLOCK_ENABLED_ENV, False)


def is_fake_clock_enabled() -> bool:
    """Return whether the fake clock is the default instant implementation.

    The environment is re-read on every call so tests can toggle the setting;
    when the variable is unset or unparsable, :data:`FAKE_CLOCK_ENABLED`, captured
    at import time, applies.
    """

    return _get_bool(_FAKE_CLOCK_ENABLED_ENV, FAKE_CLOCK_ENABLED)


__all__ = ["FAKE_CLOCK_ENABLED", "is_fake_clock_enabled"]
