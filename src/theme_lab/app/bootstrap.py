"""Application bootstrap utilities for the theme editor.

Responsibilities:
 - Optional headless bootstrap (tests / environments without a display)
 - Registering core services (event bus, logging service, settings)
 - Building the selection state the window is handed explicitly
 - Installing the global error hook for the GUI process
 - Returning a single context object with references

PyQt6 is imported lazily so headless callers never pay for it.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from theme_lab.services.edit_session import EditSession
from theme_lab.services.error_handling_service import ErrorHandlingService
from theme_lab.services.event_bus import EventBus
from theme_lab.services.logging_service import LoggingService
from theme_lab.services.service_locator import ServiceLocator, services
from theme_lab.services.settings_service import SettingsService
from theme_lab.services.theme_state import ThemeSelectionState

try:  # Lazy / optional Qt import
    from PyQt6.QtWidgets import QApplication  # type: ignore

    _QT_AVAILABLE = True
except ImportError:
    QApplication = None  # type: ignore
    _QT_AVAILABLE = False

__all__ = ["AppContext", "create_app"]

_logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Container with references created during bootstrap.

    Attributes
    ----------
    qt_app: The QApplication instance (None if headless)
    headless: Whether headless bootstrap was used
    settings: Runtime settings in effect
    state: The selection state that owns base theme / custom palette / pending edit
    event_bus: Bus the state publishes to
    services: Global service locator (post-initialization state)
    """

    qt_app: Optional[Any]
    headless: bool
    settings: SettingsService
    state: ThemeSelectionState
    event_bus: EventBus
    services: ServiceLocator
    metadata: dict[str, Any] = field(default_factory=dict)


def create_app(
    *,
    headless: bool | None = None,
    settings: SettingsService | None = None,
    clock: Callable[[], float] | None = None,
) -> AppContext:
    """Create and wire the application context.

    Parameters
    ----------
    headless: Skip QApplication creation. If None, inferred from Qt availability.
    settings: Explicit settings; defaults to ``SettingsService.instance``.
    clock: Monotonic clock for the edit session (tests inject a fake one).
    """
    if headless is None:
        headless = not _QT_AVAILABLE
    cfg = settings if settings is not None else SettingsService.instance

    qt_app = None
    if not headless:
        if not _QT_AVAILABLE:
            raise RuntimeError("PyQt6 is required for the editor window")
        qt_app = QApplication.instance() or QApplication(sys.argv[:1])

    # Fresh bus per bootstrap keeps tests isolated
    bus = EventBus()
    services.register("event_bus", bus, allow_override=True)
    services.register("settings", cfg, allow_override=True)

    log_svc = services.try_get("logging_service")
    if not isinstance(log_svc, LoggingService):
        log_svc = LoggingService()
        services.register("logging_service", log_svc, allow_override=True)
    log_svc.attach_root()

    session_kwargs: dict[str, Any] = {"debounce_s": cfg.debounce_s}
    if clock is not None:
        session_kwargs["clock"] = clock
    state = ThemeSelectionState(
        initial_theme_id=cfg.default_theme,
        session=EditSession(**session_kwargs),
        event_bus=bus,
    )

    if not headless:
        handler = services.try_get("error_handler")
        if not isinstance(handler, ErrorHandlingService):
            handler = ErrorHandlingService()
            services.register("error_handler", handler, allow_override=True)
        handler.install()

    _logger.debug("Bootstrap complete (headless=%s, theme=%s)", headless, cfg.default_theme)
    return AppContext(
        qt_app=qt_app,
        headless=headless,
        settings=cfg,
        state=state,
        event_bus=bus,
        services=services,
        metadata={"qt_available": _QT_AVAILABLE, "theme_count": len(state.base_themes())},
    )
