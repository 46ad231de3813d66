"""Built-in base theme catalog.

Each preset is declared as a five-color seed (background, text, primary,
success, danger) and expanded into a full ExtendedPalette on first access.
The catalog order is the pick-list order shown to the user.

Guiding principles:
 - Pure data + lazy expansion (no Qt dependency)
 - Both light and dark families
 - Theme ids are the display names and are unique
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple

from .color import ColorValue
from .palette import ExtendedPalette, SeedPalette, generate_extended

__all__ = [
    "BaseTheme",
    "UnknownThemeError",
    "DEFAULT_THEME_ID",
    "list_base_themes",
    "available_theme_ids",
    "get_base_theme",
]

DEFAULT_THEME_ID = "Light"

_hex = ColorValue.from_packed

# id -> (background, text, primary, success, danger)
_SEEDS: Tuple[Tuple[str, Tuple[ColorValue, ...]], ...] = (
    ("Light", (_hex(0xFFFFFF), _hex(0x000000), _hex(0x5865F2), _hex(0x12664F), _hex(0xC3423F))),
    ("Dark", (_hex(0x2B2D31), ColorValue(0.9, 0.9, 0.9), _hex(0x5865F2), _hex(0x12664F), _hex(0xC3423F))),
    ("Dracula", (_hex(0x282A36), _hex(0xF8F8F2), _hex(0xBD93F9), _hex(0x50FA7B), _hex(0xFF5555))),
    ("Nord", (_hex(0x2E3440), _hex(0xECEFF4), _hex(0x8FBCBB), _hex(0xA3BE8C), _hex(0xBF616A))),
    ("Solarized Light", (_hex(0xFDF6E3), _hex(0x657B83), _hex(0x2AA198), _hex(0x859900), _hex(0xDC322F))),
    ("Solarized Dark", (_hex(0x002B36), _hex(0x839496), _hex(0x2AA198), _hex(0x859900), _hex(0xDC322F))),
    ("Gruvbox Light", (_hex(0xFBF1C7), _hex(0x282828), _hex(0x458588), _hex(0x98971A), _hex(0xCC241D))),
    ("Gruvbox Dark", (_hex(0x282828), _hex(0xFBF1C7), _hex(0x458588), _hex(0x98971A), _hex(0xCC241D))),
    ("Catppuccin Latte", (_hex(0xEFF1F5), _hex(0x4C4F69), _hex(0x1E66F5), _hex(0x40A02B), _hex(0xD20F39))),
    ("Catppuccin Frappé", (_hex(0x303446), _hex(0xC6D0F5), _hex(0x8CAAEE), _hex(0xA6D189), _hex(0xE78284))),
    ("Catppuccin Macchiato", (_hex(0x24273A), _hex(0xCAD3F5), _hex(0x8AADF4), _hex(0xA6DA95), _hex(0xED8796))),
    ("Catppuccin Mocha", (_hex(0x1E1E2E), _hex(0xCDD6F4), _hex(0x89B4FA), _hex(0xA6E3A1), _hex(0xF38BA8))),
    ("Tokyo Night", (_hex(0x1A1B26), _hex(0x9AA5CE), _hex(0x2AC3DE), _hex(0x9ECE6A), _hex(0xF7768E))),
    ("Tokyo Night Storm", (_hex(0x24283B), _hex(0x9AA5CE), _hex(0x2AC3DE), _hex(0x9ECE6A), _hex(0xF7768E))),
    ("Tokyo Night Light", (_hex(0xD5D6DB), _hex(0x565A6E), _hex(0x166775), _hex(0x485E30), _hex(0x8C4351))),
    ("Kanagawa Wave", (_hex(0x363646), _hex(0xDCD7BA), _hex(0x2D4F67), _hex(0x76946A), _hex(0xC34043))),
    ("Kanagawa Dragon", (_hex(0x181616), _hex(0xC5C9C5), _hex(0x223249), _hex(0x8A9A7B), _hex(0xC4746E))),
    ("Kanagawa Lotus", (_hex(0xF2ECBC), _hex(0x545464), _hex(0x4D699B), _hex(0x6F894E), _hex(0xC84053))),
    ("Moonfly", (_hex(0x080808), _hex(0xBDBDBD), _hex(0x80A0FF), _hex(0x8CC85F), _hex(0xFF5454))),
    ("Nightfly", (_hex(0x011627), _hex(0xBDC1C6), _hex(0x82AAFF), _hex(0xA1CD5E), _hex(0xFC514E))),
    ("Oxocarbon", (_hex(0x232323), _hex(0xD0D0D0), _hex(0x00B4FF), _hex(0x00C15A), _hex(0xF62D0F))),
    ("Ferra", (_hex(0x2B292D), _hex(0xFECDB2), _hex(0xD1D1E0), _hex(0xB1B695), _hex(0xE06B75))),
)


class UnknownThemeError(KeyError):
    """Raised when a theme id is not part of the catalog."""


@dataclass(frozen=True)
class BaseTheme:
    id: str
    seed: SeedPalette
    palette: ExtendedPalette

    @property
    def name(self) -> str:
        return self.id

    def __str__(self) -> str:
        return self.id


@lru_cache(maxsize=1)
def list_base_themes() -> Tuple[BaseTheme, ...]:
    themes: List[BaseTheme] = []
    for theme_id, colors in _SEEDS:
        seed = SeedPalette(*colors)
        themes.append(BaseTheme(id=theme_id, seed=seed, palette=generate_extended(seed)))
    return tuple(themes)


def available_theme_ids() -> List[str]:
    return [theme_id for theme_id, _ in _SEEDS]


def get_base_theme(theme_id: str) -> BaseTheme:
    for theme in list_base_themes():
        if theme.id == theme_id:
            return theme
    raise UnknownThemeError(theme_id)
