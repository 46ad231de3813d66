import logging

import pytest

from theme_lab.services.event_bus import EventBus, ThemeEvent
from theme_lab.services.logging_service import LoggingService, get_logging_service
from theme_lab.services.service_locator import services


@pytest.fixture()
def setup_logging():
    bus = EventBus()
    services.register("event_bus", bus, allow_override=True)
    svc = LoggingService(capacity=5, level=logging.DEBUG)
    services.register("logging_service", svc, allow_override=True)
    svc.attach_root()
    yield svc, bus
    svc.detach_root()


def test_logging_capture_and_retrieve(setup_logging):
    svc, _ = setup_logging
    logging.getLogger("theme_lab.test").info("Committed primary.base = #ff0000")
    assert any(e.message == "Committed primary.base = #ff0000" for e in svc.recent())
    assert get_logging_service() is svc


def test_logging_capacity_eviction(setup_logging):
    svc, _ = setup_logging
    for i in range(10):
        logging.getLogger("cap").info("M%d", i)
    recents = svc.recent()
    assert len(recents) == 5
    assert recents[0].message == "M5"
    assert [e.message for e in svc.recent(2)] == ["M8", "M9"]


def test_logging_filtering(setup_logging):
    svc, _ = setup_logging
    logging.getLogger("theme_lab.session").debug("Rejected input")
    logging.getLogger("theme_lab.state").info("Selected base theme Nord")
    info_only = svc.filter(level="INFO")
    assert info_only and all(e.level == "INFO" for e in info_only)
    session = svc.filter(name_contains="session")
    assert session and all("session" in e.name for e in session)
    svc.clear()
    assert svc.recent() == []


def test_logging_event_emission(setup_logging):
    svc, bus = setup_logging
    payloads = []
    bus.subscribe(ThemeEvent.LOG_RECORD_ADDED, lambda evt: payloads.append(evt.payload))
    logging.getLogger("evt").warning("Something happened")
    assert payloads and payloads[-1]["level"] == "WARNING"
    assert payloads[-1]["message"] == "Something happened"


def test_detach_stops_capture(setup_logging):
    svc, _ = setup_logging
    svc.detach_root()
    logging.getLogger("after").warning("not captured")
    assert not svc.filter(name_contains="after")
