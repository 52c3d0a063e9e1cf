"""Unit tests for EventBus and touch events."""

import unittest
from dataclasses import dataclass
from unittest.mock import MagicMock

from kinzoom.events import Event, EventBus
from kinzoom.input import Touch, TouchEvent


@dataclass
class PingEvent(Event):
    """Test event."""

    value: int


@dataclass
class PongEvent(Event):
    """Another test event."""


class TestEventBus(unittest.TestCase):
    """Unit test class for EventBus."""

    def setUp(self) -> None:
        """Create an empty bus."""
        self.bus = EventBus()

    def test_publish_reaches_subscribers_of_type(self) -> None:
        """Test that handlers only receive their event type."""
        ping_handler = MagicMock()
        pong_handler = MagicMock()
        self.bus.subscribe(PingEvent, ping_handler)
        self.bus.subscribe(PongEvent, pong_handler)

        self.bus.publish(PingEvent(1))

        ping_handler.assert_called_once_with(PingEvent(1))
        pong_handler.assert_not_called()

    def test_publish_without_subscribers(self) -> None:
        """Test that unhandled events are silently ignored."""
        self.bus.publish(PingEvent(1))

    def test_unsubscribe(self) -> None:
        """Test removing a handler."""
        handler = MagicMock()
        self.bus.subscribe(PingEvent, handler)
        self.bus.unsubscribe(PingEvent, handler)

        self.bus.publish(PingEvent(1))

        handler.assert_not_called()


class TestTouchEvent(unittest.TestCase):
    """Unit test class for TouchEvent."""

    def test_all_touches_defaults_to_trigger(self) -> None:
        """Test that a bare event lists its own touch."""
        touch = Touch(1, 2, 7)
        event = TouchEvent(touch)

        assert event.all_touches == [touch]
        assert event.is_newest()

    def test_is_newest(self) -> None:
        """Test detection of the most recently added contact."""
        first = Touch(0, 0, 1)
        second = Touch(5, 5, 2)

        assert TouchEvent(second, [first, second]).is_newest()
        assert not TouchEvent(first, [first, second]).is_newest()

    def test_stop_propagation(self) -> None:
        """Test the propagation flag."""
        event = TouchEvent(Touch(0, 0, 1))
        assert not event.propagation_stopped

        event.stop_propagation()

        assert event.propagation_stopped
