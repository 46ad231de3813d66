"""Runtime settings for the editor.

Values default to the process constants in ``theme_lab.config.settings``
(which in turn honor ``THEME_LAB_*`` environment variables). Tests build
their own instance with short intervals instead of touching the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar

from theme_lab.config import settings

__all__ = ["SettingsService"]


@dataclass
class SettingsService:
    """Runtime settings.

    Attributes:
        debounce_ms: Minimum time typed text must sit unchanged before a tick
            commits it.
        tick_interval_ms: Period of the commit polling timer. Actual commit
            latency falls between ``debounce_ms`` and ``debounce_ms`` plus one
            tick period.
        default_theme: Base theme id selected at startup.
        window_width / window_height: Fixed editor window size.
        input_placeholder: Placeholder shown in empty role fields.
    """

    instance: ClassVar["SettingsService"]

    debounce_ms: int = settings.DEBOUNCE_MS
    tick_interval_ms: int = settings.TICK_INTERVAL_MS
    default_theme: str = settings.DEFAULT_THEME
    window_width: int = settings.WINDOW_WIDTH
    window_height: int = settings.WINDOW_HEIGHT
    input_placeholder: str = settings.INPUT_PLACEHOLDER

    @classmethod
    def from_environment(cls) -> "SettingsService":
        """Re-read the ``THEME_LAB_*`` variables (the module constants are fixed at import)."""
        return cls(
            debounce_ms=settings.int_env("THEME_LAB_DEBOUNCE_MS", settings.DEFAULT_DEBOUNCE_MS),
            tick_interval_ms=settings.int_env(
                "THEME_LAB_TICK_INTERVAL_MS", settings.DEFAULT_TICK_INTERVAL_MS
            ),
            default_theme=os.environ.get("THEME_LAB_DEFAULT_THEME", settings.FALLBACK_THEME),
        )

    @property
    def debounce_s(self) -> float:
        return self.debounce_ms / 1000.0


SettingsService.instance = SettingsService()
