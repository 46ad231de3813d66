"""Foreground selection and contrast utilities.

Two distinct tools live here:

- ``contrast_for``: the binary legibility rule used for user overrides. A fixed
  brightness threshold picks one of two constant foregrounds (no gamma, no gradient).
- ``relative_luminance`` / ``contrast_ratio`` / ``readable``: WCAG 2.1 contrast
  math used when expanding the built-in seed palettes.

Public API:
- brightness(color) -> float
- contrast_for(color) -> ColorValue
- make_pair(background) -> ColorPair
- relative_luminance(color) -> float
- contrast_ratio(fg, bg) -> float
- readable(background, text) -> ColorValue
"""

from __future__ import annotations

from dataclasses import dataclass

from .color import ColorValue

__all__ = [
    "BRIGHTNESS_WEIGHTS",
    "BRIGHTNESS_THRESHOLD",
    "NEAR_BLACK",
    "NEAR_WHITE",
    "ColorPair",
    "brightness",
    "contrast_for",
    "make_pair",
    "relative_luminance",
    "contrast_ratio",
    "readable",
]

# Luma weights (R, G, B) applied to 0..255 channels, divided by 1000
BRIGHTNESS_WEIGHTS: tuple[int, int, int] = (299, 587, 114)
BRIGHTNESS_THRESHOLD = 128.0

NEAR_BLACK = ColorValue.from_rgb8(10, 10, 10)
NEAR_WHITE = ColorValue.from_rgb8(235, 235, 235)

_WHITE = ColorValue(1.0, 1.0, 1.0)
_BLACK = ColorValue(0.0, 0.0, 0.0)
_READABLE_RATIO = 7.0


@dataclass(frozen=True)
class ColorPair:
    """A background color plus the foreground drawn on top of it."""

    background: ColorValue
    foreground: ColorValue


def brightness(color: ColorValue) -> float:
    wr, wg, wb = BRIGHTNESS_WEIGHTS
    r, g, b = color.r * 255, color.g * 255, color.b * 255
    return (wr * r + wg * g + wb * b) / 1000


def contrast_for(color: ColorValue) -> ColorValue:
    """Return NEAR_BLACK for light backgrounds and NEAR_WHITE for dark ones.

    The boundary is inclusive on the light side: brightness of exactly 128
    yields NEAR_BLACK.
    """
    if brightness(color) >= BRIGHTNESS_THRESHOLD:
        return NEAR_BLACK
    return NEAR_WHITE


def make_pair(background: ColorValue) -> ColorPair:
    return ColorPair(background=background, foreground=contrast_for(background))


def _linear_channel(c: float) -> float:
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorValue) -> float:
    # Rec. 709 coefficients used by WCAG
    return (
        0.2126 * _linear_channel(color.r)
        + 0.7152 * _linear_channel(color.g)
        + 0.0722 * _linear_channel(color.b)
    )


def contrast_ratio(fg: ColorValue, bg: ColorValue) -> float:
    l1 = relative_luminance(fg)
    l2 = relative_luminance(bg)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def readable(background: ColorValue, text: ColorValue) -> ColorValue:
    """Return ``text`` if legible on ``background``, else pure white or black.

    White wins when both extremes reach the same ratio.
    """
    if contrast_ratio(text, background) >= _READABLE_RATIO:
        return text
    white = contrast_ratio(_WHITE, background)
    black = contrast_ratio(_BLACK, background)
    return _WHITE if white >= black else _BLACK
