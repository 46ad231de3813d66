"""Global error hook for the editor window.

PyQt6 aborts the process when an exception escapes a slot and no custom
``sys.excepthook`` is installed. Installing this service turns such escapes
into an ERROR log record plus a bounded in-memory history instead.
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Deque, List

__all__ = ["ErrorRecord", "ErrorHandlingService"]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorRecord:
    """Structured capture of an uncaught exception.

    Attributes
    ----------
    exc_type: type
        Exception class.
    exc_value: BaseException
        Exception instance.
    traceback_str: str
        Formatted traceback text.
    iso_time: str
        ISO 8601 timestamp (UTC).
    """

    exc_type: type
    exc_value: BaseException
    traceback_str: str
    iso_time: str

    def summary(self, max_len: int = 120) -> str:
        msg = f"{self.exc_type.__name__}: {self.exc_value}"
        return msg if len(msg) <= max_len else msg[: max_len - 3] + "..."


class ErrorHandlingService:
    """Installable ``sys.excepthook`` replacement.

    Usage
    -----
    svc = ErrorHandlingService()
    svc.install()
    ... run application ...
    svc.uninstall()  # restore the previous hook
    """

    def __init__(self, *, capacity: int = 20) -> None:
        self._errors: Deque[ErrorRecord] = deque(maxlen=max(1, capacity))
        self._installed = False
        self._prev_sys_hook = None

    def install(self) -> None:
        if self._installed:
            return
        self._prev_sys_hook = sys.excepthook
        sys.excepthook = self._sys_hook
        self._installed = True

    def uninstall(self) -> None:
        if not self._installed:
            return
        if self._prev_sys_hook is not None:
            sys.excepthook = self._prev_sys_hook
        self._installed = False

    def _sys_hook(self, exc_type, exc_value, tb):  # pragma: no cover - delegate
        self.handle_exception(exc_type, exc_value, tb)

    def handle_exception(self, exc_type, exc_value, tb) -> ErrorRecord:
        """Record and log an uncaught exception. Public so tests can feed it directly."""
        record = ErrorRecord(
            exc_type=exc_type,
            exc_value=exc_value,
            traceback_str="".join(traceback.format_exception(exc_type, exc_value, tb)),
            iso_time=datetime.now(timezone.utc).isoformat(),
        )
        self._errors.append(record)
        _logger.error("Uncaught exception %s\n%s", record.summary(), record.traceback_str)
        return record

    def recent_errors(self) -> List[ErrorRecord]:
        return list(self._errors)

    @property
    def installed(self) -> bool:
        return self._installed

    def clear(self) -> None:
        self._errors.clear()
