import pytest

from theme_lab.app.bootstrap import create_app
from theme_lab.design.roles import Role, Usage, Variant
from theme_lab.design.theme_presets import UnknownThemeError
from theme_lab.services.editor_events import RoleEdited, Tick
from theme_lab.services.logging_service import LoggingService
from theme_lab.services.settings_service import SettingsService
from theme_lab.services.theme_state import ThemeSelectionState


def test_headless_bootstrap_registers_services(clock):
    ctx = create_app(headless=True, clock=clock)
    assert ctx.headless and ctx.qt_app is None
    assert isinstance(ctx.state, ThemeSelectionState)
    assert ctx.services.try_get("theme_state") is None
    assert isinstance(ctx.services.get("logging_service"), LoggingService)
    assert ctx.services.get("settings") is ctx.settings
    assert ctx.services.try_get("error_handler") is None
    assert ctx.metadata["theme_count"] == 22


def test_settings_flow_into_state(clock):
    cfg = SettingsService(debounce_ms=200, default_theme="Dracula")
    ctx = create_app(headless=True, settings=cfg, clock=clock)
    state: ThemeSelectionState = ctx.state
    assert state.selected_base_theme_id() == "Dracula"
    assert state.session.debounce_s == 0.2
    state.dispatch(RoleEdited(Role(Usage.SUCCESS, Variant.WEAK), "10, 20, 30"))
    clock.advance(0.2)
    assert state.dispatch(Tick()).palette_changed


def test_unknown_default_theme_rejected():
    with pytest.raises(UnknownThemeError):
        create_app(headless=True, settings=SettingsService(default_theme="Nope"))


def test_bootstrap_reuses_logging_service():
    first = create_app(headless=True)
    second = create_app(headless=True)
    assert first.services.get("logging_service") is second.services.get("logging_service")
    assert first.event_bus is not second.event_bus
