"""Theme editor main window.

Plays the UI collaborator role: every widget signal becomes one editor event
passed to ``ThemeSelectionState.dispatch``, after which the window re-reads
display text, field colors and the reset-button state from the selection
state. The 15 role fields are built by a single loop over the role registry.
"""

from __future__ import annotations

from typing import Dict, List

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from theme_lab.design.contrast import ColorPair
from theme_lab.design.qss import PLACEHOLDER_ALPHA, build_stylesheet, field_stylesheet
from theme_lab.design.roles import Role, Usage, Variant
from theme_lab.services.editor_events import (
    EditorEvent,
    Outcome,
    ResetCustom,
    RoleEdited,
    SelectBaseTheme,
    Submit,
    Tick,
)
from theme_lab.services.event_bus import Event, EventBus, Subscription, ThemeEvent
from theme_lab.services.settings_service import SettingsService
from theme_lab.services.theme_state import ThemeSelectionState
from theme_lab.services.tick_scheduler import TickScheduler

__all__ = ["ThemeEditorWindow", "DISPLAY_ORDER"]

# Row order on screen (differs from registry order on purpose: background first)
DISPLAY_ORDER = (Usage.BACKGROUND, Usage.PRIMARY, Usage.SECONDARY, Usage.SUCCESS, Usage.DANGER)
_FIELD_WIDTH = 168


class ThemeEditorWindow(QMainWindow):
    def __init__(
        self,
        state: ThemeSelectionState,
        *,
        settings: SettingsService | None = None,
        event_bus: EventBus | None = None,
        start_ticks: bool = True,
        parent=None,
    ):
        super().__init__(parent)
        self._state = state
        self._settings = settings or SettingsService.instance
        self._bus = event_bus
        self.fields: Dict[Role, QLineEdit] = {}
        self.setWindowTitle("Theme Editor")
        self.setFixedSize(self._settings.window_width, self._settings.window_height)

        root = QWidget(self)
        root.setObjectName("ThemeEditorRoot")
        layout = QVBoxLayout(root)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        self.header = QLabel("Default Themes")
        self.header.setObjectName("themeHeader")
        self.header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.header)

        self.theme_picker = QComboBox()
        self.theme_picker.setObjectName("themePicker")
        for theme in state.base_themes():
            self.theme_picker.addItem(theme.id)
        self.theme_picker.setCurrentText(state.selected_base_theme_id())
        self.theme_picker.currentTextChanged.connect(self._on_theme_picked)  # type: ignore[attr-defined]
        layout.addWidget(self.theme_picker, 0, Qt.AlignmentFlag.AlignHCenter)

        layout.addLayout(self._build_role_grid())
        layout.addStretch(1)

        self.reset_button = QPushButton("Reset Custom")
        self.reset_button.setObjectName("resetCustomButton")
        self.reset_button.clicked.connect(lambda: self.dispatch(ResetCustom()))  # type: ignore[attr-defined]
        layout.addWidget(self.reset_button, 0, Qt.AlignmentFlag.AlignHCenter)

        self.setCentralWidget(root)
        self.status = QStatusBar()
        self.setStatusBar(self.status)

        self._subs: List[Subscription] = []
        if self._bus is not None:
            self._subs = [
                self._bus.subscribe(ThemeEvent.PALETTE_CHANGED, self._on_palette_changed),
                self._bus.subscribe(ThemeEvent.EDIT_REJECTED, self._on_edit_rejected),
                self._bus.subscribe(ThemeEvent.LOG_RECORD_ADDED, self._on_log_record),
            ]
        self._apply_stylesheet()
        self._refresh()

        self.ticker = TickScheduler(
            lambda: self.dispatch(Tick()), interval_ms=self._settings.tick_interval_ms, parent=self
        )
        if start_ticks:
            self.ticker.start()

    # Construction --------------------------------------------------------
    def _build_role_grid(self) -> QGridLayout:
        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        grid.setVerticalSpacing(16)
        for col, variant in enumerate(Variant, start=1):
            label = QLabel(variant.label)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            grid.addWidget(label, 0, col)
        for row, usage in enumerate(DISPLAY_ORDER, start=1):
            grid.addWidget(QLabel(usage.label), row, 0)
            for col, variant in enumerate(Variant, start=1):
                role = Role(usage, variant)
                field = QLineEdit()
                field.setObjectName(f"roleField_{role.key}")
                field.setPlaceholderText(self._settings.input_placeholder)
                field.setFixedWidth(_FIELD_WIDTH)
                field.textEdited.connect(  # type: ignore[attr-defined]
                    lambda text, r=role: self.dispatch(RoleEdited(r, text))
                )
                field.returnPressed.connect(lambda: self.dispatch(Submit()))  # type: ignore[attr-defined]
                self.fields[role] = field
                grid.addWidget(field, row, col)
        return grid

    # Event plumbing ----------------------------------------------------------
    def dispatch(self, event: EditorEvent) -> Outcome:
        outcome = self._state.dispatch(event)
        if outcome.palette_changed and self._bus is None:
            self._apply_stylesheet()
        self._refresh()
        return outcome

    def _on_theme_picked(self, theme_id: str) -> None:
        if theme_id and theme_id != self._state.selected_base_theme_id():
            self.dispatch(SelectBaseTheme(theme_id))

    def _on_palette_changed(self, _event: Event) -> None:
        self._apply_stylesheet()

    def _on_edit_rejected(self, event: Event) -> None:
        self.status.showMessage(f"Not a color: {event.payload['text']}")

    def _on_log_record(self, event: Event) -> None:
        self.status.showMessage(event.payload["message"], 5000)

    def closeEvent(self, event):  # noqa: N802 - Qt override
        self.ticker.stop()
        for sub in self._subs:
            self._bus.unsubscribe(sub)  # type: ignore[union-attr]
        self._subs = []
        super().closeEvent(event)

    # Rendering ---------------------------------------------------------------
    def _apply_stylesheet(self) -> None:
        self.setStyleSheet(build_stylesheet(self._state.effective_palette()))
        for role, field in self.fields.items():
            self._style_field(field, self._state.effective_pair(role))

    @staticmethod
    def _style_field(field: QLineEdit, pair: ColorPair) -> None:
        field.setStyleSheet(field_stylesheet(pair))
        pal = field.palette()
        r, g, b = pair.foreground.to_rgb8()
        pal.setColor(QPalette.ColorRole.PlaceholderText, QColor(r, g, b, round(255 * PLACEHOLDER_ALPHA)))
        field.setPalette(pal)

    def _refresh(self) -> None:
        for role, field in self.fields.items():
            text = self._state.effective_display_text(role)
            if field.text() != text:
                field.setText(text)
        self.reset_button.setEnabled(self._state.has_custom_palette())
        if self.theme_picker.currentText() != self._state.selected_base_theme_id():
            self.theme_picker.blockSignals(True)
            self.theme_picker.setCurrentText(self._state.selected_base_theme_id())
            self.theme_picker.blockSignals(False)
