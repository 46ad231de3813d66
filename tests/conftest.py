# Headless Qt for every test module; must be set before PyQt6 creates a QApplication.
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from theme_lab.services.service_locator import services


class FakeClock:
    """Monotonic clock stand-in that only moves when told to."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(scope="module")
def qapp():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def _reset_services():
    yield
    log_svc = services.try_get("logging_service")
    if log_svc is not None:
        log_svc.detach_root()
    handler = services.try_get("error_handler")
    if handler is not None:
        handler.uninstall()
    services.clear()
