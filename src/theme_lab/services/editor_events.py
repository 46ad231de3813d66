"""Inbound interaction events and the outcome returned for each.

The window translates widget signals into these small immutable records and
hands them to ``ThemeSelectionState.dispatch`` one at a time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from theme_lab.design.color import ColorParseError
from theme_lab.design.palette import ExtendedPalette, PaletteDiff
from theme_lab.design.roles import Role

__all__ = [
    "SelectBaseTheme",
    "ResetCustom",
    "RoleEdited",
    "Submit",
    "Tick",
    "EditorEvent",
    "OutcomeKind",
    "Outcome",
]


@dataclass(frozen=True)
class SelectBaseTheme:
    theme_id: str


@dataclass(frozen=True)
class ResetCustom:
    pass


@dataclass(frozen=True)
class RoleEdited:
    role: Role
    text: str


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class Tick:
    pass


EditorEvent = Union[SelectBaseTheme, ResetCustom, RoleEdited, Submit, Tick]


class OutcomeKind(str, Enum):
    NO_CHANGE = "no_change"
    AWAITING_INPUT = "awaiting_input"
    PALETTE_CHANGED = "palette_changed"


@dataclass(frozen=True)
class Outcome:
    """Result of handling one event.

    ``palette`` and ``diff`` are set for PALETTE_CHANGED; ``error`` is set for
    AWAITING_INPUT when a commit attempt rejected the pending text.
    """

    kind: OutcomeKind
    palette: Optional[ExtendedPalette] = None
    diff: Optional[PaletteDiff] = None
    error: Optional[ColorParseError] = None

    @classmethod
    def no_change(cls) -> "Outcome":
        return cls(OutcomeKind.NO_CHANGE)

    @classmethod
    def awaiting(cls, error: Optional[ColorParseError] = None) -> "Outcome":
        return cls(OutcomeKind.AWAITING_INPUT, error=error)

    @classmethod
    def changed(cls, palette: ExtendedPalette, diff: PaletteDiff) -> "Outcome":
        return cls(OutcomeKind.PALETTE_CHANGED, palette=palette, diff=diff)

    @property
    def palette_changed(self) -> bool:
        return self.kind is OutcomeKind.PALETTE_CHANGED
