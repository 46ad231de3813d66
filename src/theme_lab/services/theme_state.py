"""Theme selection state: base theme, optional custom palette, pending edit.

``ThemeSelectionState`` is the single owner of the editor's mutable state.
Every interaction arrives through ``dispatch`` and is handled to completion
before the next one; the window then re-reads whatever it renders through
the query methods. No other object mutates the base selection, the custom
palette or the pending edit.

When an ``EventBus`` is supplied the state also publishes:

 - ``EDIT_PENDING``        role key + raw text after each edit
 - ``EDIT_REJECTED``       kind + text, once per distinct rejected text (empty input is silent)
 - ``PALETTE_CHANGED``     effective palette + diff whenever rendering colors change
 - ``BASE_THEME_SELECTED`` / ``CUSTOM_RESET``
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from theme_lab.design.color import ColorParseError, ParseErrorKind
from theme_lab.design.contrast import ColorPair
from theme_lab.design.palette import ExtendedPalette, diff_palettes
from theme_lab.design.roles import Role
from theme_lab.design.theme_presets import (
    DEFAULT_THEME_ID,
    BaseTheme,
    UnknownThemeError,
    list_base_themes,
)

from .edit_session import EditSession, PendingEdit
from .editor_events import (
    EditorEvent,
    Outcome,
    ResetCustom,
    RoleEdited,
    SelectBaseTheme,
    Submit,
    Tick,
)
from .event_bus import EventBus, ThemeEvent

__all__ = ["ThemeSelectionState", "CUSTOM_THEME_NAME"]

_logger = logging.getLogger(__name__)

CUSTOM_THEME_NAME = "Custom"


class ThemeSelectionState:
    def __init__(
        self,
        *,
        themes: Sequence[BaseTheme] | None = None,
        initial_theme_id: str = DEFAULT_THEME_ID,
        session: EditSession | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self._themes: Tuple[BaseTheme, ...] = tuple(themes) if themes is not None else list_base_themes()
        if not self._themes:
            raise ValueError("At least one base theme is required")
        self._base = self._lookup(initial_theme_id)
        self._custom: Optional[ExtendedPalette] = None
        self._session = session if session is not None else EditSession()
        self._bus = event_bus
        self._announced_error: Optional[ColorParseError] = None

    # Queries -----------------------------------------------------------
    def base_themes(self) -> Tuple[BaseTheme, ...]:
        return self._themes

    def selected_base_theme(self) -> BaseTheme:
        return self._base

    def selected_base_theme_id(self) -> str:
        return self._base.id

    def has_custom_palette(self) -> bool:
        return self._custom is not None

    def custom_palette(self) -> Optional[ExtendedPalette]:
        return self._custom

    def effective_palette(self) -> ExtendedPalette:
        return self._custom if self._custom is not None else self._base.palette

    def effective_theme_name(self) -> str:
        return CUSTOM_THEME_NAME if self._custom is not None else self._base.id

    def effective_pair(self, role: Role) -> ColorPair:
        return self.effective_palette()[role]

    def effective_display_text(self, role: Role) -> str:
        return self._session.display_text_for(self.effective_palette(), role)

    def pending_edit(self) -> Optional[PendingEdit]:
        return self._session.pending

    def last_error(self) -> Optional[ColorParseError]:
        return self._session.last_error

    @property
    def session(self) -> EditSession:
        return self._session

    # Event handling ----------------------------------------------------
    def dispatch(self, event: EditorEvent) -> Outcome:
        if isinstance(event, RoleEdited):
            return self._on_role_edited(event)
        if isinstance(event, Tick):
            return self._after_commit_attempt(self._session.tick(self.effective_palette))
        if isinstance(event, Submit):
            return self._after_commit_attempt(self._session.submit(self.effective_palette))
        if isinstance(event, SelectBaseTheme):
            return self._on_select(event.theme_id)
        if isinstance(event, ResetCustom):
            return self._on_reset()
        raise TypeError(f"Unsupported editor event: {event!r}")

    def _on_role_edited(self, event: RoleEdited) -> Outcome:
        pending = self._session.edit(event.role, event.text)
        self._announced_error = None
        self._publish(ThemeEvent.EDIT_PENDING, {"role": pending.role.key, "text": pending.raw_text})
        return Outcome.awaiting()

    def _after_commit_attempt(self, outcome: Outcome) -> Outcome:
        if outcome.palette_changed:
            self._custom = outcome.palette
            self._announced_error = None
            self._publish_palette(outcome)
            return outcome
        err = outcome.error
        if err is not None and err.kind is not ParseErrorKind.EMPTY and not self._same_error(err):
            self._announced_error = err
            self._publish(ThemeEvent.EDIT_REJECTED, {"kind": err.kind.value, "text": err.text})
        return outcome

    def _same_error(self, err: ColorParseError) -> bool:
        prev = self._announced_error
        return prev is not None and prev.kind is err.kind and prev.text == err.text

    def _on_select(self, theme_id: str) -> Outcome:
        theme = self._lookup(theme_id)
        before = self.effective_palette()
        self._session.clear()
        self._announced_error = None
        self._custom = None
        self._base = theme
        _logger.info("Selected base theme %s", theme.id)
        self._publish(ThemeEvent.BASE_THEME_SELECTED, {"theme_id": theme.id})
        return self._palette_outcome(before)

    def _on_reset(self) -> Outcome:
        before = self.effective_palette()
        had_custom = self._custom is not None
        self._session.clear()
        self._announced_error = None
        self._custom = None
        if had_custom:
            _logger.info("Custom palette discarded; back to %s", self._base.id)
        self._publish(ThemeEvent.CUSTOM_RESET, {"theme_id": self._base.id})
        return self._palette_outcome(before)

    def _palette_outcome(self, before: ExtendedPalette) -> Outcome:
        after = self.effective_palette()
        if after == before:
            return Outcome.no_change()
        outcome = Outcome.changed(after, diff_palettes(before, after))
        self._publish_palette(outcome)
        return outcome

    # Helpers -----------------------------------------------------------
    def _lookup(self, theme_id: str) -> BaseTheme:
        for theme in self._themes:
            if theme.id == theme_id:
                return theme
        raise UnknownThemeError(theme_id)

    def _publish_palette(self, outcome: Outcome) -> None:
        self._publish(
            ThemeEvent.PALETTE_CHANGED,
            {
                "theme": self.effective_theme_name(),
                "palette": outcome.palette,
                "changed": dict(outcome.diff.changed) if outcome.diff else {},
            },
        )

    def _publish(self, name: ThemeEvent, payload: dict) -> None:
        if self._bus is not None:
            self._bus.publish(name, payload)
