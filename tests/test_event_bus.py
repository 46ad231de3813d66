from theme_lab.app.bootstrap import create_app
from theme_lab.services.event_bus import EventBus, ThemeEvent


def test_event_bus_service_registration():
    ctx = create_app(headless=True)
    assert ctx.services.get("event_bus") is ctx.event_bus
    assert isinstance(ctx.event_bus, EventBus)


def test_subscribe_publish_basic():
    bus = EventBus()
    received = []
    bus.subscribe(ThemeEvent.CUSTOM_RESET, lambda evt: received.append((evt.name, evt.payload)))
    bus.publish(ThemeEvent.CUSTOM_RESET, {"theme_id": "Light"})
    assert received == [("custom_reset", {"theme_id": "Light"})]


def test_enum_and_string_names_are_interchangeable():
    bus = EventBus()
    received = []
    bus.subscribe("palette_changed", lambda evt: received.append(evt.payload))
    bus.publish(ThemeEvent.PALETTE_CHANGED, 1)
    assert received == [1]
    assert bus.subscriber_count(ThemeEvent.PALETTE_CHANGED) == 1


def test_once_subscription():
    bus = EventBus()
    count = 0

    def incr(_):
        nonlocal count
        count += 1

    bus.subscribe(ThemeEvent.EDIT_PENDING, incr, once=True)
    bus.publish(ThemeEvent.EDIT_PENDING)
    bus.publish(ThemeEvent.EDIT_PENDING)
    assert count == 1
    assert bus.subscriber_count(ThemeEvent.EDIT_PENDING) == 0


def test_unsubscribe_and_cancel():
    bus = EventBus()
    received = []
    sub = bus.subscribe("x", received.append)
    other = bus.subscribe("x", received.append)
    other.cancel()
    bus.publish("x", 1)
    bus.unsubscribe(sub)
    bus.publish("x", 2)
    assert len(received) == 1


def test_error_isolation():
    bus = EventBus()
    order = []

    def bad(_):
        order.append("bad")
        raise RuntimeError("boom")

    bus.subscribe("custom", bad)
    bus.subscribe("custom", lambda _: order.append("good"))
    bus.publish("custom", 123)
    assert order == ["bad", "good"]
    assert len(bus.errors) == 1
    bus.clear()
    assert bus.errors == []
