"""Periodic tick source feeding the commit polling loop.

A repeating ``QTimer`` calls the supplied callback on a fixed cadence for as
long as the window lives. The callback runs on the Qt event loop, so it is
serialized with every other widget signal and needs no locking.
"""

from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QObject, QTimer

__all__ = ["TickScheduler"]


class TickScheduler(QObject):
    def __init__(self, callback: Callable[[], None], *, interval_ms: int = 1000, parent=None):
        super().__init__(parent)
        self._callback = callback
        self._interval_ms = max(1, interval_ms)
        self._timer = QTimer(self)
        self._timer.setInterval(self._interval_ms)
        self._timer.timeout.connect(self.fire_now)  # type: ignore[attr-defined]

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def start(self) -> None:
        if not self._timer.isActive():
            self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def is_active(self) -> bool:
        return self._timer.isActive()

    def fire_now(self) -> None:
        self._callback()
