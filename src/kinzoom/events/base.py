"""Event system for decoupled camera notifications.

This module provides a small publish/subscribe bus so that code outside the
camera (HUDs, minimaps, analytics, tests) can react to what the camera does
without the controller knowing about it.

The event system consists of:
- Event: Base class for all events
- EventBus: Central hub for subscribing to and publishing events

Example usage:
    bus = EventBus()

    def on_stopped(event: KineticMotionStoppedEvent) -> None:
        print(f"Camera came to rest at {event.x}, {event.y}")

    bus.subscribe(KineticMotionStoppedEvent, on_stopped)
    controller = CameraController(node, screen, event_bus=bus)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """Base event class."""


class EventBus:
    """Central event bus for publish/subscribe event handling.

    Publishers emit events without knowing who (if anyone) handles them, and
    subscribers listen for event types without knowing who publishes them.

    Thread safety: This implementation is NOT thread-safe. All subscribe,
    publish, and unsubscribe calls should happen on the thread that runs the
    event loop.
    """

    def __init__(self) -> None:
        """Initialize the event bus with no registered listeners."""
        self.listeners: dict[type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Subscribe a handler to an event type.

        Handlers for the same event type are called in the order they were
        registered. Subscribing the same handler twice calls it twice.

        Args:
            event_type: The type of event to listen for.
            handler: Callback taking the event as its only argument.
        """
        self.listeners.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Remove every registration of a handler for an event type.

        Unknown handlers are ignored.
        """
        if event_type in self.listeners:
            self.listeners[event_type] = [h for h in self.listeners[event_type] if h != handler]

    def publish(self, event: Event) -> None:
        """Publish an event to all handlers subscribed to its exact type.

        Handlers run synchronously. An exception raised by a handler propagates
        to the publisher and the remaining handlers are not called.
        """
        handlers = self.listeners.get(type(event))
        if not handlers:
            return
        logger.debug("Publishing %s to %d handler(s)", type(event).__name__, len(handlers))
        for handler in list(handlers):
            handler(event)
