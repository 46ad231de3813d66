"""Extended palette value type, single-slot overlay and seed expansion.

``ExtendedPalette`` is immutable: ``overlay`` returns a new palette that shares
every untouched ``ColorPair`` with its source. Palettes compare by value and are
hashable, so two overlays built from the same arguments are equal.

Public API:
- SeedPalette
- ExtendedPalette
- overlay(base, role, pair) -> ExtendedPalette
- diff_palettes(old, new) -> PaletteDiff
- generate_extended(seed) -> ExtendedPalette
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Mapping
from typing import Dict, Iterator, Optional, Tuple

from .color import ColorValue
from .contrast import ColorPair, readable
from .roles import ALL_ROLES, Role, Usage, Variant

__all__ = [
    "SeedPalette",
    "ExtendedPalette",
    "PaletteDiff",
    "overlay",
    "diff_palettes",
    "generate_extended",
    "mix",
    "deviate",
]


@dataclass(frozen=True)
class SeedPalette:
    """The five colors a built-in theme is declared with."""

    background: ColorValue
    text: ColorValue
    primary: ColorValue
    success: ColorValue
    danger: ColorValue


class ExtendedPalette(Mapping[Role, ColorPair]):
    """Immutable mapping of all 15 roles to their color pairs."""

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Mapping[Role, ColorPair]) -> None:
        missing = [role.key for role in ALL_ROLES if role not in pairs]
        if missing:
            raise ValueError(f"Palette is missing roles: {', '.join(missing)}")
        object.__setattr__(self, "_pairs", tuple(pairs[role] for role in ALL_ROLES))

    @classmethod
    def _from_slots(cls, slots: Tuple[ColorPair, ...]) -> "ExtendedPalette":
        palette = cls.__new__(cls)
        object.__setattr__(palette, "_pairs", slots)
        return palette

    def __setattr__(self, name, value):
        raise AttributeError("ExtendedPalette is immutable")

    def __getitem__(self, role: Role) -> ColorPair:
        return self._pairs[role.index]

    def __contains__(self, role: object) -> bool:
        return isinstance(role, Role)

    def __iter__(self) -> Iterator[Role]:
        return iter(ALL_ROLES)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtendedPalette):
            return NotImplemented
        return self._pairs == other._pairs

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        return f"ExtendedPalette({self.as_hex_map()!r})"

    def as_hex_map(self) -> Dict[str, str]:
        """Flatten to ``{"usage.variant": "#rrggbb"}`` (background colors)."""
        return {role.key: self[role].background.to_hex() for role in ALL_ROLES}


def overlay(base: ExtendedPalette, role: Role, pair: ColorPair) -> ExtendedPalette:
    """Return a copy of ``base`` with the slot at ``role`` replaced by ``pair``."""
    slots = list(base._pairs)
    slots[role.index] = pair
    return ExtendedPalette._from_slots(tuple(slots))


@dataclass
class PaletteDiff:
    """Changes between two palettes.

    Attributes
    ----------
    changed : dict[str, tuple[str|None, str|None]]
        Mapping of role key -> (old_hex, new_hex)
    """

    changed: Dict[str, Tuple[Optional[str], Optional[str]]]

    @property
    def no_changes(self) -> bool:
        return not self.changed


def diff_palettes(old: Optional[ExtendedPalette], new: ExtendedPalette) -> PaletteDiff:
    changed: Dict[str, Tuple[Optional[str], Optional[str]]] = {}
    for role in ALL_ROLES:
        new_pair = new[role]
        old_pair = old[role] if old is not None else None
        if old_pair != new_pair:
            old_hex = old_pair.background.to_hex() if old_pair is not None else None
            changed[role.key] = (old_hex, new_pair.background.to_hex())
    return PaletteDiff(changed)


# Seed expansion -------------------------------------------------------


def _to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _from_linear(c: float) -> float:
    if c <= 0.0031308:
        v = c * 12.92
    else:
        v = 1.055 * c ** (1 / 2.4) - 0.055
    return min(1.0, max(0.0, v))


def mix(a: ColorValue, b: ColorValue, factor: float) -> ColorValue:
    """Interpolate from ``a`` toward ``b`` in linear sRGB."""
    channels = []
    for ca, cb in ((a.r, b.r), (a.g, b.g), (a.b, b.b)):
        la, lb = _to_linear(ca), _to_linear(cb)
        channels.append(_from_linear(la + (lb - la) * factor))
    return ColorValue(*channels)


def _is_dark(color: ColorValue) -> bool:
    return color.hsl()[2] < 0.6


def deviate(color: ColorValue, amount: float) -> ColorValue:
    """Lighten dark colors and darken light ones by ``amount`` HSL lightness."""
    h, s, l = color.hsl()
    if _is_dark(color):
        l = min(1.0, l + amount)
    else:
        l = max(0.0, l - amount)
    return ColorValue.from_hsl(h, s, l)


def _pair(color: ColorValue, text: ColorValue) -> ColorPair:
    return ColorPair(background=color, foreground=readable(color, text))


def generate_extended(seed: SeedPalette) -> ExtendedPalette:
    bg, text = seed.background, seed.text
    slots: Dict[Role, ColorPair] = {}

    def put(usage: Usage, base: ColorValue, weak: ColorValue, strong: ColorValue) -> None:
        slots[Role(usage, Variant.BASE)] = _pair(base, text)
        slots[Role(usage, Variant.WEAK)] = _pair(weak, text)
        slots[Role(usage, Variant.STRONG)] = _pair(strong, text)

    put(Usage.BACKGROUND, bg, mix(bg, text, 0.15), mix(bg, text, 0.40))
    secondary = mix(bg, text, 0.2)
    put(Usage.SECONDARY, secondary, mix(secondary, text, 0.1), mix(secondary, text, 0.3))
    for usage, color in (
        (Usage.PRIMARY, seed.primary),
        (Usage.SUCCESS, seed.success),
        (Usage.DANGER, seed.danger),
    ):
        put(usage, color, mix(color, bg, 0.4), deviate(color, 0.1))
    return ExtendedPalette(slots)
