from floodfill.events.bus import EventBus, EVENT_TILE_PRESS


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe(EVENT_TILE_PRESS, handler)
    bus.emit(EVENT_TILE_PRESS, row=2, col=5)

    assert received == {"row": 2, "col": 5}


def test_event_bus_emit_without_subscribers_is_silent():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_event_bus_keeps_unreferenced_handlers_alive():
    bus = EventBus()
    calls = []

    class Listener:
        def on_event(self, sender, **kwargs):
            calls.append(kwargs.get("value"))

    bus.subscribe("ping", Listener().on_event)
    bus.emit("ping", value=7)
    assert calls == [7]
