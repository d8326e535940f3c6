"""
Tests for the event system.

This module contains tests for the EventEmitter and EventBus classes
to ensure they provide the expected behavior for event handling.
"""

import pytest
import threading
from unittest.mock import MagicMock

from tennisgame.events import EventEmitter, EventBus, EngineEventType, EventPriority


def test_event_emitter_initialization():
    """Test that the EventEmitter initializes correctly."""
    emitter = EventEmitter()
    assert emitter._listeners is not None
    assert emitter._global_listeners == []


def test_on_with_string_event_type():
    """Test subscribing to an event with a string event type."""
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on("test_event", callback)

    test_data = {"value": "test"}
    emitter.emit("test_event", test_data)
    callback.assert_called_once_with(test_data)

    # Unsubscribe and emit again
    unsubscribe()
    emitter.emit("test_event", {"value": "test2"})
    assert callback.call_count == 1


def test_on_with_enum_event_type():
    """Test that enum members and their names address the same listeners."""
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.on(EngineEventType.POINT_WON, callback)

    emitter.emit(EngineEventType.POINT_WON, {"player_name": "Alice"})
    emitter.emit("POINT_WON", {"player_name": "Bob"})

    assert callback.call_count == 2
    callback.assert_called_with({"player_name": "Bob"})


def test_other_event_types_are_not_delivered():
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.on(EngineEventType.GAME_ENDED, callback)
    emitter.emit(EngineEventType.POINT_WON, {})

    callback.assert_not_called()


def test_once():
    """Test subscribing to an event once."""
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.once("test_event", callback)

    emitter.emit("test_event", {"value": "first"})
    emitter.emit("test_event", {"value": "second"})

    callback.assert_called_once_with({"value": "first"})


def test_once_unsubscribes_when_handler_fails():
    emitter = EventEmitter()
    callback = MagicMock(side_effect=RuntimeError("boom"))

    emitter.once("test_event", callback)
    emitter.emit("test_event", {})
    emitter.emit("test_event", {})

    assert callback.call_count == 1


def test_on_any():
    """Test subscribing to all events."""
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on_any(callback)

    emitter.emit("event1", {"value": 1})
    emitter.emit(EngineEventType.GAME_CREATED, {"value": 2})

    assert callback.call_count == 2
    callback.assert_any_call(("event1", {"value": 1}))
    callback.assert_any_call(("GAME_CREATED", {"value": 2}))

    unsubscribe()
    emitter.emit("event3", {"value": 3})
    assert callback.call_count == 2


def test_priority():
    """Test that handlers are called in priority order."""
    emitter = EventEmitter()
    call_order = []

    emitter.on("test_event", lambda data: call_order.append("low"), EventPriority.LOW)
    emitter.on(
        "test_event", lambda data: call_order.append("normal"), EventPriority.NORMAL
    )
    emitter.on(
        "test_event", lambda data: call_order.append("critical"), EventPriority.CRITICAL
    )
    emitter.on("test_event", lambda data: call_order.append("high"), EventPriority.HIGH)

    emitter.emit("test_event", {})

    assert call_order == ["critical", "high", "normal", "low"]


def test_equal_priority_keeps_subscription_order():
    emitter = EventEmitter()
    call_order = []

    for label in ("first", "second", "third"):
        emitter.on("test_event", lambda data, label=label: call_order.append(label))

    emitter.emit("test_event", {})

    assert call_order == ["first", "second", "third"]


def test_typed_listeners_run_before_global_listeners():
    emitter = EventEmitter()
    call_order = []

    emitter.on_any(lambda event: call_order.append("any"), EventPriority.CRITICAL)
    emitter.on("test_event", lambda data: call_order.append("typed"), EventPriority.LOW)

    emitter.emit("test_event", {})

    assert call_order == ["typed", "any"]


def test_remove_all_listeners():
    """Test removing all listeners."""
    emitter = EventEmitter()
    callback1 = MagicMock()
    callback2 = MagicMock()
    any_callback = MagicMock()

    emitter.on("event1", callback1)
    emitter.on("event2", callback2)
    emitter.on_any(any_callback)

    # Remove listeners for event1
    emitter.remove_all_listeners("event1")
    emitter.emit("event1", {})
    emitter.emit("event2", {})

    callback1.assert_not_called()
    callback2.assert_called_once()
    assert any_callback.call_count == 2

    # Remove every listener
    emitter.remove_all_listeners()
    emitter.emit("event2", {})

    assert callback2.call_count == 1
    assert any_callback.call_count == 2


def test_unsubscribe_twice_is_harmless():
    emitter = EventEmitter()
    unsubscribe = emitter.on("test_event", MagicMock())
    unsubscribe()
    unsubscribe()


def test_handler_exception_does_not_stop_other_handlers(caplog):
    """Test that an exception in a handler is logged and others still run."""
    emitter = EventEmitter()
    failing = MagicMock(side_effect=ValueError("bad handler"))
    working = MagicMock()

    emitter.on("test_event", failing, EventPriority.HIGH)
    emitter.on("test_event", working)

    with caplog.at_level("ERROR", logger="tennisgame.events"):
        emitter.emit("test_event", {"value": 1})

    working.assert_called_once_with({"value": 1})
    assert "bad handler" in caplog.text


def test_handler_may_subscribe_while_emitting():
    emitter = EventEmitter()
    late = MagicMock()

    def subscribe_late(data):
        emitter.on("test_event", late)

    emitter.once("test_event", subscribe_late)
    emitter.emit("test_event", {})
    late.assert_not_called()

    emitter.emit("test_event", {})
    late.assert_called_once()


@pytest.mark.asyncio
async def test_emit_async():
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.on(EngineEventType.SIMULATION_RESULT, callback)
    await emitter.emit_async(EngineEventType.SIMULATION_RESULT, {"games": 3})

    callback.assert_called_once_with({"games": 3})


def test_event_bus_singleton():
    """Test that EventBus is a singleton."""
    bus1 = EventBus.get_instance()
    bus2 = EventBus.get_instance()
    assert bus1 is bus2
    assert isinstance(bus1, EventEmitter)


def test_thread_safety():
    """Test that the event emitter is thread-safe."""
    emitter = EventEmitter()
    received = []
    lock = threading.Lock()

    def handler(data):
        with lock:
            received.append(data["n"])

    def subscribe_and_emit(n):
        emitter.on("test_event", handler)
        emitter.emit("other_event", {"n": n})

    threads = [
        threading.Thread(target=subscribe_and_emit, args=(i,)) for i in range(10)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    emitter.emit("test_event", {"n": 99})
    assert received == [99] * 10


def test_once_handler_that_emits_the_same_event_runs_once():
    emitter = EventEmitter()
    calls = []

    def reemit(data):
        calls.append(data["n"])
        emitter.emit("test_event", {"n": data["n"] + 1})

    emitter.once("test_event", reemit)
    emitter.emit("test_event", {"n": 0})

    assert calls == [0]
