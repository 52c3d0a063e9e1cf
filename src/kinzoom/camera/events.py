"""Events published by the camera controller."""

from dataclasses import dataclass

from kinzoom.events.base import Event
from kinzoom.types import GestureMode


@dataclass
class GestureModeChangedEvent(Event):
    """Fired when the controller switches between DRAG and SCALE.

    Attributes:
        previous: Mode before the switch.
        mode: Mode after the switch.
    """

    previous: GestureMode
    mode: GestureMode


@dataclass
class KineticMotionStartedEvent(Event):
    """Fired when a released drag hands over to kinetic motion.

    Attributes:
        velocity_x: Initial horizontal velocity in units per second.
        velocity_y: Initial vertical velocity in units per second.
    """

    velocity_x: float
    velocity_y: float


@dataclass
class KineticMotionStoppedEvent(Event):
    """Fired when kinetic motion ends, either settled by friction or via stop().

    Attributes:
        x: Camera x position when motion ended.
        y: Camera y position when motion ended.
    """

    x: float
    y: float
