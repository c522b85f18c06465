import logging

from tickengine.core.events import EventBus, Event, EngineEvent


def test_event_bus_subscribe_publish(event_bus):
    received = []
    event_bus.subscribe(EngineEvent.SCENE_CHANGED, received.append)

    event = event_bus.publish(EngineEvent.SCENE_CHANGED, scene="home")

    assert received == [event]
    assert event.type is EngineEvent.SCENE_CHANGED
    assert event["scene"] == "home"
    assert event.get("previous") is None


def test_only_matching_type_is_called(event_bus):
    received = []
    event_bus.subscribe(EngineEvent.SCENE_RESET, received.append)
    event_bus.publish(EngineEvent.SCENE_CHANGED)
    assert received == []


def test_event_bus_unsubscribe(event_bus):
    received = []
    event_bus.subscribe(EngineEvent.APP_STARTED, received.append)
    event_bus.unsubscribe(EngineEvent.APP_STARTED, received.append)
    event_bus.unsubscribe(EngineEvent.APP_STOPPED, received.append)
    event_bus.publish(EngineEvent.APP_STARTED)
    assert received == []


def test_handlers_run_in_subscription_order(event_bus):
    order = []
    event_bus.subscribe(EngineEvent.TICK_COMPLETED, lambda e: order.append("first"))
    event_bus.subscribe(EngineEvent.TICK_COMPLETED, lambda e: order.append("second"))
    event_bus.publish(EngineEvent.TICK_COMPLETED, tick=1)
    assert order == ["first", "second"]


def test_handler_may_unsubscribe_itself(event_bus):
    calls = []

    def once(event):
        calls.append(event)
        event_bus.unsubscribe(EngineEvent.RESET_REQUESTED, once)

    event_bus.subscribe(EngineEvent.RESET_REQUESTED, once)
    event_bus.publish(EngineEvent.RESET_REQUESTED)
    event_bus.publish(EngineEvent.RESET_REQUESTED)
    assert len(calls) == 1


def test_failing_handler_is_logged(event_bus, caplog):
    received = []

    def broken(event):
        raise RuntimeError("boom")

    event_bus.subscribe(EngineEvent.SCENE_CHANGED, broken)
    event_bus.subscribe(EngineEvent.SCENE_CHANGED, received.append)

    with caplog.at_level(logging.ERROR, logger="tickengine.core.events"):
        event_bus.publish(EngineEvent.SCENE_CHANGED)

    assert len(received) == 1
    assert "Error in event handler" in caplog.text


def test_clear(event_bus):
    received = []
    event_bus.subscribe(EngineEvent.APP_STARTED, received.append)
    event_bus.subscribe(EngineEvent.APP_STOPPED, received.append)

    event_bus.clear(EngineEvent.APP_STARTED)
    event_bus.publish(EngineEvent.APP_STARTED)
    event_bus.publish(EngineEvent.APP_STOPPED)
    assert len(received) == 1

    event_bus.clear()
    event_bus.publish(EngineEvent.APP_STOPPED)
    assert len(received) == 1


def test_event_defaults():
    event = Event(type=EngineEvent.APP_STARTED)
    assert event.data == {}
