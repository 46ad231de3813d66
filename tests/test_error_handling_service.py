import logging
import sys

from theme_lab.services.error_handling_service import ErrorHandlingService
from theme_lab.services.logging_service import LoggingService


def _raise_and_handle(svc, exc):
    try:
        raise exc
    except Exception as e:  # noqa: BLE001
        return svc.handle_exception(type(e), e, e.__traceback__)


def test_handle_exception_records_and_limits():
    svc = ErrorHandlingService(capacity=2)
    _raise_and_handle(svc, ValueError("boom1"))
    _raise_and_handle(svc, RuntimeError("boom2"))
    _raise_and_handle(svc, KeyError("boom3"))
    errs = svc.recent_errors()
    assert len(errs) == 2
    assert errs[-1].exc_type is KeyError
    assert errs[0].exc_type is RuntimeError
    assert "Traceback" in errs[0].traceback_str
    svc.clear()
    assert svc.recent_errors() == []


def test_summary_truncates():
    svc = ErrorHandlingService()
    record = _raise_and_handle(svc, ValueError("x" * 300))
    assert record.summary(max_len=20).endswith("...")
    assert len(record.summary(max_len=20)) == 20


def test_install_and_uninstall_restore_hook():
    previous = sys.excepthook
    svc = ErrorHandlingService()
    svc.install()
    try:
        assert svc.installed
        assert sys.excepthook is not previous
    finally:
        svc.uninstall()
    assert not svc.installed
    assert sys.excepthook is previous


def test_logging_integration():
    logging_svc = LoggingService(capacity=5)
    logging_svc.attach_root()
    try:
        _raise_and_handle(ErrorHandlingService(), AssertionError("failure"))
        recs = logging_svc.filter(level="ERROR", name_contains="error_handling")
        assert any("Uncaught exception" in r.message for r in recs)
    finally:
        logging_svc.detach_root()
