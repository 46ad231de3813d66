"""Global configuration and constants for the theme editor."""

from __future__ import annotations

import os
from typing import Final


def int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


# Built-in values used when the environment does not set (or mangles) one
DEFAULT_DEBOUNCE_MS: Final = 750
DEFAULT_TICK_INTERVAL_MS: Final = 1000
FALLBACK_THEME: Final = "Light"

# Input must be stable this long before a typed color is committed
DEBOUNCE_MS: Final = int_env("THEME_LAB_DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS)
# Cadence of the commit polling tick
TICK_INTERVAL_MS: Final = int_env("THEME_LAB_TICK_INTERVAL_MS", DEFAULT_TICK_INTERVAL_MS)
DEFAULT_THEME: Final = os.environ.get("THEME_LAB_DEFAULT_THEME", FALLBACK_THEME)
LOG_LEVEL: Final = os.environ.get("THEME_LAB_LOG_LEVEL", "INFO").upper()

WINDOW_WIDTH: Final = 720
WINDOW_HEIGHT: Final = 720
INPUT_PLACEHOLDER: Final = "rgb or hex"
