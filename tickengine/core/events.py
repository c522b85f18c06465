"""
Application notifications.

The Application announces its lifecycle and every scene transition on
an EventBus. Listeners subscribe per EngineEvent member and receive an
Event carrying the keyword data given to publish().

Usage:
    def on_scene_changed(event: Event) -> None:
        print(event["scene"].name)

    app.event_bus.subscribe(EngineEvent.SCENE_CHANGED, on_scene_changed)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable


logger = logging.getLogger(__name__)


class EngineEvent(Enum):
    """Notifications published by the Application."""
    # Loop
    APP_STARTED = auto()
    APP_STOPPED = auto()
    TICK_COMPLETED = auto()

    # Scene
    SCENE_CHANGE_REQUESTED = auto()
    SCENE_CHANGED = auto()
    RESET_REQUESTED = auto()
    SCENE_RESET = auto()


@dataclass
class Event:
    """A published notification and its data."""
    type: EngineEvent
    data: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


EventHandler = Callable[[Event], None]


class EventBus:
    """
    Synchronous publish/subscribe keyed by EngineEvent.

    Handlers run in subscription order. A handler that raises is logged
    and the remaining handlers still run.
    """

    def __init__(self):
        self._handlers: dict[EngineEvent, list[EventHandler]] = {}

    def subscribe(self, event_type: EngineEvent, handler: EventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: EngineEvent, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, event_type: EngineEvent, **data: Any) -> Event:
        """Call every handler of event_type with a new Event."""
        event = Event(type=event_type, data=data)

        # Copy so handlers may (un)subscribe while being called
        for handler in list(self._handlers.get(event_type, ())):
            try:
                handler(event)
            except Exception:
                logger.exception("Error in event handler for %s", event_type)

        return event

    def clear(self, event_type: EngineEvent | None = None) -> None:
        """Drop handlers for one event type, or all of them."""
        if event_type is None:
            self._handlers.clear()
        else:
            self._handlers.pop(event_type, None)
