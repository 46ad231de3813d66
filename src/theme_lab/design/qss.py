"""QSS generation from an ExtendedPalette.

Kept free of Qt imports so the generated text can be asserted in headless tests.
"""

from __future__ import annotations

from .contrast import ColorPair
from .palette import ExtendedPalette
from .roles import Role, Usage, Variant

__all__ = ["build_stylesheet", "field_stylesheet", "PLACEHOLDER_ALPHA"]

# Placeholder text is drawn with the field foreground at this opacity
PLACEHOLDER_ALPHA = 0.25


def build_stylesheet(palette: ExtendedPalette) -> str:
    """Generate the window-wide stylesheet for the effective palette."""
    bg = palette[Role(Usage.BACKGROUND, Variant.BASE)]
    bg_weak = palette[Role(Usage.BACKGROUND, Variant.WEAK)]
    bg_strong = palette[Role(Usage.BACKGROUND, Variant.STRONG)]
    primary = palette[Role(Usage.PRIMARY, Variant.BASE)]
    primary_strong = palette[Role(Usage.PRIMARY, Variant.STRONG)]
    secondary = palette[Role(Usage.SECONDARY, Variant.BASE)]
    txt = bg.foreground.to_hex()
    return f"""
/* THEME (auto-generated runtime) */
QMainWindow, QWidget#ThemeEditorRoot {{ background: {bg.background.to_hex()}; color: {txt}; }}
QLabel {{ color:{txt}; }}
QLabel#themeHeader {{ font-size: 24pt; }}
QComboBox {{ background:{bg_weak.background.to_hex()}; color:{bg_weak.foreground.to_hex()}; border:1px solid {bg_strong.background.to_hex()}; padding:4px 8px; }}
QComboBox QAbstractItemView {{ background:{bg_weak.background.to_hex()}; color:{bg_weak.foreground.to_hex()}; selection-background-color:{primary.background.to_hex()}; selection-color:{primary.foreground.to_hex()}; }}
QPushButton {{ background:{primary.background.to_hex()}; color:{primary.foreground.to_hex()}; border:none; padding:6px 12px; border-radius:4px; }}
QPushButton:hover {{ background:{primary_strong.background.to_hex()}; color:{primary_strong.foreground.to_hex()}; }}
QPushButton:disabled {{ background:{secondary.background.to_hex()}; color:{secondary.foreground.to_hex()}; }}
QStatusBar {{ background:{bg_weak.background.to_hex()}; color:{bg_weak.foreground.to_hex()}; }}
"""


def field_stylesheet(pair: ColorPair) -> str:
    """Style for one role's input field: its own pair drives the colors."""
    return (
        f"QLineEdit {{ background:{pair.background.to_hex()}; color:{pair.foreground.to_hex()}; "
        "border:none; border-radius:6px; padding:10px 8px; }"
    )
