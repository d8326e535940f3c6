"""
Event system for the tennisgame engine.

Games, engines and adapters publish what happens (a point won, a game decided,
an engine starting up) through an EventEmitter. Listeners subscribe to one
event type or to every event, ordered by priority. A failing listener is
logged and skipped, so it never breaks the game that emitted the event.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union
import threading
import logging
from enum import Enum

logger = logging.getLogger("tennisgame.events")


class EventPriority(Enum):
    """Priority levels for event handlers."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


@dataclass(eq=False)
class _Subscription:
    callback: Callable
    priority: int


def _event_name(event_type: Union[str, Enum]) -> str:
    return event_type.name if isinstance(event_type, Enum) else event_type


def _insert_by_priority(
    subscriptions: List[_Subscription], subscription: _Subscription
) -> None:
    # Higher priority first; equal priorities keep subscription order
    for index, existing in enumerate(subscriptions):
        if existing.priority < subscription.priority:
            subscriptions.insert(index, subscription)
            return
    subscriptions.append(subscription)


class EventEmitter:
    """
    Event emitter with priority-based subscriptions.

    Listeners registered with on() receive the event data; listeners
    registered with on_any() receive an (event_name, data) tuple. Enum event
    types are stored under their member name, so EngineEventType.POINT_WON and
    "POINT_WON" address the same listeners.
    """

    def __init__(self):
        self._listeners: Dict[str, List[_Subscription]] = defaultdict(list)
        self._global_listeners: List[_Subscription] = []
        self._listener_lock = threading.RLock()

    def on(
        self,
        event_type: Union[str, Enum],
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Function to call when the event occurs, fn(event_data)
            priority: Priority level for this handler

        Returns:
            Function that removes this subscription
        """
        name = _event_name(event_type)
        subscription = _Subscription(callback, priority.value)
        with self._listener_lock:
            _insert_by_priority(self._listeners[name], subscription)

        def unsubscribe():
            self._remove(self._listeners[name], subscription)

        return unsubscribe

    def once(
        self,
        event_type: Union[str, Enum],
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """
        Subscribe to the next occurrence of an event type only.

        Returns:
            Function that removes this subscription
        """
        unsubscribe: Optional[Callable] = None

        def handle_once(event_data):
            # Unsubscribe first so a nested emit of the same event skips us
            unsubscribe()
            callback(event_data)

        unsubscribe = self.on(event_type, handle_once, priority)
        return unsubscribe

    def on_any(
        self, callback: Callable, priority: EventPriority = EventPriority.NORMAL
    ) -> Callable:
        """
        Subscribe to all events.

        Args:
            callback: Function to call for any event, fn((event_name, event_data))
            priority: Priority level for this handler

        Returns:
            Function that removes this subscription
        """
        subscription = _Subscription(callback, priority.value)
        with self._listener_lock:
            _insert_by_priority(self._global_listeners, subscription)

        def unsubscribe():
            self._remove(self._global_listeners, subscription)

        return unsubscribe

    def _remove(
        self, subscriptions: List[_Subscription], subscription: _Subscription
    ) -> None:
        with self._listener_lock:
            if subscription in subscriptions:
                subscriptions.remove(subscription)

    def emit(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Emit an event to all registered listeners.

        Args:
            event_type: The type of event to emit
            data: The data to include with the event
        """
        name = _event_name(event_type)

        with self._listener_lock:
            calls = [(sub.callback, data) for sub in self._listeners.get(name, [])]
            calls.extend(
                (sub.callback, (name, data)) for sub in self._global_listeners
            )

        # Handlers run outside the lock so they may subscribe or emit themselves
        for callback, payload in calls:
            try:
                callback(payload)
            except Exception as e:
                logger.error(f"Error in event handler for {name}: {e}", exc_info=True)

    async def emit_async(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """Emit an event from a coroutine; handlers still run in order."""
        self.emit(event_type, data)

    def remove_all_listeners(
        self, event_type: Optional[Union[str, Enum]] = None
    ) -> None:
        """
        Remove all listeners for one event type, or for every event.

        Args:
            event_type: Event type to clear. If None, every listener is removed,
                        including those registered with on_any().
        """
        with self._listener_lock:
            if event_type is None:
                self._listeners.clear()
                self._global_listeners.clear()
            else:
                self._listeners.pop(_event_name(event_type), None)


class EventBus:
    """
    Process-wide event emitter.

    Games and engines publish through the shared instance so that a single
    subscription sees every game.
    """

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> EventEmitter:
        """
        Get the singleton instance of the EventBus.

        Returns:
            EventEmitter instance
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = EventEmitter()
        return cls._instance


class EngineEventType(Enum):
    """Event types emitted by games and engines."""

    # Core lifecycle events
    ENGINE_INIT = "engine_init"
    ENGINE_SHUTDOWN = "engine_shutdown"

    # Game lifecycle
    GAME_CREATED = "game_created"
    GAME_ENDED = "game_ended"

    # Scoring events
    POINT_WON = "point_won"
    POINT_REJECTED = "point_rejected"

    # Simulation events
    SIMULATION_RESULT = "simulation_result"
