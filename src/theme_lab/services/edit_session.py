"""Debounce / commit state machine for a single in-flight role edit.

States::

    IDLE --edit--> EDITING --(due tick | submit)--> COMMITTING --ok--> IDLE
                      ^                                  |
                      +------------- rejected -----------+

At most one ``PendingEdit`` exists. A new edit replaces the previous one
outright, whatever role it targets; nothing is merged. Rejected text stays
pending untouched so the user can keep correcting it, and every later due
tick retries it.

The session never reads the wall clock directly: ``clock`` returns monotonic
seconds and is injected so tests can step time explicitly.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from theme_lab.design.color import ColorParseError, parse_color
from theme_lab.design.contrast import make_pair
from theme_lab.design.palette import ExtendedPalette, diff_palettes, overlay
from theme_lab.design.roles import Role, display_text

from .editor_events import Outcome

__all__ = ["SessionState", "PendingEdit", "EditSession"]

_logger = logging.getLogger(__name__)

PaletteResolver = Callable[[], ExtendedPalette]


class SessionState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    COMMITTING = "committing"


@dataclass(frozen=True)
class PendingEdit:
    role: Role
    raw_text: str
    last_edited_at: float


class EditSession:
    def __init__(
        self,
        *,
        debounce_s: float = 0.75,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._debounce_s = debounce_s
        self._clock = clock
        self._pending: Optional[PendingEdit] = None
        self._state = SessionState.IDLE
        self._last_error: Optional[ColorParseError] = None

    # Accessors ---------------------------------------------------------
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def pending(self) -> Optional[PendingEdit]:
        return self._pending

    @property
    def last_error(self) -> Optional[ColorParseError]:
        return self._last_error

    @property
    def debounce_s(self) -> float:
        return self._debounce_s

    def display_text_for(self, palette: ExtendedPalette, role: Role) -> str:
        """Raw pending text for the role being edited, else the palette's rgb() text."""
        if self._pending is not None and self._pending.role == role:
            return self._pending.raw_text
        return display_text(palette, role)

    # Transitions -------------------------------------------------------
    def edit(self, role: Role, text: str) -> PendingEdit:
        superseded = self._pending
        if superseded is not None and superseded.role != role:
            _logger.debug("Edit of %s superseded by %s", superseded.role.key, role.key)
        self._pending = PendingEdit(role=role, raw_text=text, last_edited_at=self._clock())
        self._last_error = None
        self._state = SessionState.EDITING
        return self._pending

    def is_due(self) -> bool:
        if self._pending is None:
            return False
        return self._clock() - self._pending.last_edited_at >= self._debounce_s

    def tick(self, resolve_palette: PaletteResolver) -> Outcome:
        if self._pending is None:
            return Outcome.no_change()
        if not self.is_due():
            return Outcome.awaiting(self._last_error)
        return self.attempt_commit(resolve_palette)

    def submit(self, resolve_palette: PaletteResolver) -> Outcome:
        return self.attempt_commit(resolve_palette)

    def attempt_commit(self, resolve_palette: PaletteResolver) -> Outcome:
        """Validate the pending text and overlay it onto the current palette.

        ``resolve_palette`` is only called once the text has parsed, and must
        return the palette the override applies to (custom if present, else base).
        """
        pending = self._pending
        if pending is None:
            return Outcome.no_change()
        self._state = SessionState.COMMITTING
        try:
            color = parse_color(pending.raw_text)
        except ColorParseError as err:
            _logger.debug("Rejected %s input (%s): %r", pending.role.key, err.kind.value, err.text)
            self._last_error = err
            self._state = SessionState.EDITING
            return Outcome.awaiting(err)
        current = resolve_palette()
        updated = overlay(current, pending.role, make_pair(color))
        self.clear()
        _logger.info("Committed %s = %s", pending.role.key, color.to_hex())
        return Outcome.changed(updated, diff_palettes(current, updated))

    def clear(self) -> None:
        self._pending = None
        self._last_error = None
        self._state = SessionState.IDLE
