"""Module for events."""

from kinzoom.events.base import Event, EventBus

__all__ = [
    "Event",
    "EventBus",
]
