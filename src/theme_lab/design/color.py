"""Color value type and free-form color text parsing.

Accepted syntaxes (and nothing else):
 - ``R, G, B`` decimal channels 0..255, optionally wrapped as ``rgb(R, G, B)``
 - ``#RRGGBB`` hex (a single leading ``#`` is stripped)
 - ``RRGGBB`` bare hex

Hex input is read as a packed ``0xRRGGBB`` integer, so short inputs are
zero-extended on the left (``ff`` is pure blue, not ``#ffffff``).

Public API:
- ColorValue
- parse_color(text) -> ColorValue
- ColorParseError / ParseErrorKind
"""

from __future__ import annotations

import colorsys
import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

__all__ = [
    "ColorValue",
    "ColorParseError",
    "ParseErrorKind",
    "parse_color",
]

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_CHANNEL_DIGITS = re.compile(r"\+?[0-9]+")
_MAX_PACKED = 0xFFFFFF


class ParseErrorKind(str, Enum):
    EMPTY = "empty"
    INVALID_CHANNEL = "invalid_channel"
    INVALID_HEX = "invalid_hex"


class ColorParseError(ValueError):
    """Raised when color text cannot be turned into a ColorValue.

    Attributes
    ----------
    kind: ParseErrorKind
        Which rule rejected the input.
    text: str
        The raw text as typed.
    """

    def __init__(self, kind: ParseErrorKind, text: str) -> None:
        super().__init__(f"{kind.value}: {text!r}")
        self.kind = kind
        self.text = text


@dataclass(frozen=True)
class ColorValue:
    """RGB color with channels normalized to [0, 1]."""

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValueError(f"Channel {name} must be a real number: {value!r}")
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"Channel {name} out of range [0, 1]: {value!r}")

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> "ColorValue":
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise ValueError(f"8-bit channel out of range: {channel}")
        return cls(r / 255, g / 255, b / 255)

    @classmethod
    def from_packed(cls, value: int) -> "ColorValue":
        """Expand a packed 0xRRGGBB integer."""
        if not 0 <= value <= _MAX_PACKED:
            raise ValueError(f"Packed color out of range: {value:#x}")
        return cls.from_rgb8((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> "ColorValue":
        r, g, b = colorsys.hls_to_rgb(h, l, s)
        return cls(_clamp(r), _clamp(g), _clamp(b))

    def to_rgb8(self) -> Tuple[int, int, int]:
        return round(self.r * 255), round(self.g * 255), round(self.b * 255)

    def to_hex(self) -> str:
        r, g, b = self.to_rgb8()
        return f"#{r:02x}{g:02x}{b:02x}"

    def hsl(self) -> Tuple[float, float, float]:
        """Return (hue, saturation, lightness), each in [0, 1]."""
        h, l, s = colorsys.rgb_to_hls(self.r, self.g, self.b)
        return h, s, l


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def parse_color(text: str) -> ColorValue:
    """Parse user-typed color text.

    Raises ColorParseError with kind EMPTY, INVALID_CHANNEL or INVALID_HEX.
    """
    trimmed = text.strip()
    if not trimmed:
        raise ColorParseError(ParseErrorKind.EMPTY, text)
    if "," in trimmed:
        return _parse_channels(trimmed, text)
    if "#" in trimmed:
        digits = trimmed[1:] if trimmed.startswith("#") else trimmed
        return _parse_packed(digits, text)
    return _parse_packed(trimmed, text)


def _parse_channels(trimmed: str, text: str) -> ColorValue:
    body = trimmed
    if body.startswith("rgb("):
        body = body[len("rgb(") :]
    if body.endswith(")"):
        body = body[:-1]
    channels = []
    for part in body.split(","):
        part = part.strip()
        if not _CHANNEL_DIGITS.fullmatch(part):
            raise ColorParseError(ParseErrorKind.INVALID_CHANNEL, text)
        # More than 3 significant digits can never be <= 255
        if len(part.lstrip("+").lstrip("0")) > 3:
            raise ColorParseError(ParseErrorKind.INVALID_CHANNEL, text)
        value = int(part)
        if value > 255:
            raise ColorParseError(ParseErrorKind.INVALID_CHANNEL, text)
        channels.append(value)
    if len(channels) != 3:
        raise ColorParseError(ParseErrorKind.INVALID_CHANNEL, text)
    return ColorValue.from_rgb8(*channels)


def _parse_packed(digits: str, text: str) -> ColorValue:
    if not _HEX_DIGITS.fullmatch(digits):
        raise ColorParseError(ParseErrorKind.INVALID_HEX, text)
    value = int(digits, 16)
    if value > _MAX_PACKED:
        raise ColorParseError(ParseErrorKind.INVALID_HEX, text)
    return ColorValue.from_packed(value)
