"""Custom types and enumerations."""

from enum import Enum, auto
from typing import NamedTuple


class GestureMode(Enum):
    """Gesture modes of the camera controller."""

    IDLE = auto()  # No gesture has been processed yet
    DRAG = auto()  # Single contact, panning
    SCALE = auto()  # Two or more contacts, pinch zoom


class TouchSample(NamedTuple):
    """A recorded touch position and the time it was seen."""

    x: float
    y: float
    time: float
