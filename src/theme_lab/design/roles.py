"""Role registry: the closed set of (usage, variant) color slots.

Every role has a dotted semantic key (``"primary.base"``, ``"danger.strong"``)
and a fixed index into an ExtendedPalette's slot tuple. Iterating ``ALL_ROLES``
is the only supported way to walk every slot.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Tuple

from .color import ColorValue

if TYPE_CHECKING:  # pragma: no cover
    from .palette import ExtendedPalette

__all__ = [
    "Usage",
    "Variant",
    "Role",
    "ALL_ROLES",
    "display_color",
    "display_text",
]


class Usage(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    BACKGROUND = "background"
    SUCCESS = "success"
    DANGER = "danger"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Variant(str, Enum):
    BASE = "base"
    WEAK = "weak"
    STRONG = "strong"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Role:
    usage: Usage
    variant: Variant

    @property
    def key(self) -> str:
        return f"{self.usage.value}.{self.variant.value}"

    @property
    def index(self) -> int:
        return _ROLE_INDEX[self]

    @classmethod
    def from_key(cls, key: str) -> "Role":
        """Resolve a dotted key such as ``"success.weak"``.

        Raises KeyError for anything outside the registry.
        """
        try:
            return _ROLES_BY_KEY[key]
        except KeyError:
            raise KeyError(f"Unknown role key: {key}") from None

    def __str__(self) -> str:
        return self.key


ALL_ROLES: Tuple[Role, ...] = tuple(Role(u, v) for u in Usage for v in Variant)
_ROLE_INDEX: Dict[Role, int] = {role: i for i, role in enumerate(ALL_ROLES)}
_ROLES_BY_KEY: Dict[str, Role] = {role.key: role for role in ALL_ROLES}


def display_color(palette: "ExtendedPalette", role: Role) -> ColorValue:
    """Background half of the role's pair (what a swatch renders)."""
    return palette[role].background


def display_text(palette: "ExtendedPalette", role: Role) -> str:
    r, g, b = display_color(palette, role).to_rgb8()
    return f"rgb({r}, {g}, {b})"
