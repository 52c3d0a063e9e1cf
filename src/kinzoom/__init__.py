"""kinzoom - A kinetic drag and pinch-zoom camera for 2D scenes.

This package provides:
- A camera controller that pans and zooms a scene node larger than the screen
- Boundary clamping so the content always covers the screen
- Kinetic scrolling that keeps a released drag moving and slows it by friction
- An arcade demo view (kinzoom.views) and launcher (kinzoom.helpers)

Quick start:
    from kinzoom import CameraController, FrameScheduler, Node, ScreenSize

    scheduler = FrameScheduler()
    controller = CameraController(Node(640, 960), ScreenSize(320, 480), scheduler=scheduler)

    # Forward touch events to controller.on_touches_begin/move/end/cancel
    # and call scheduler.tick() once per frame.

Settings:
    from kinzoom.conf import settings

    settings.configure(CAMERA_MAX_ZOOM=3.0, CAMERA_FRICTION=0.9)
"""

__version__ = "0.1.0"

from kinzoom.camera import (
    CameraConfig,
    CameraController,
    GestureModeChangedEvent,
    InertialMotion,
    KineticMotionStartedEvent,
    KineticMotionStoppedEvent,
    TouchHistory,
)
from kinzoom.conf import settings
from kinzoom.events import Event, EventBus
from kinzoom.input import Touch, TouchEvent
from kinzoom.scene import FrameScheduler, Node, ScreenSize
from kinzoom.types import GestureMode

__all__ = [
    "CameraConfig",
    "CameraController",
    "Event",
    "EventBus",
    "FrameScheduler",
    "GestureMode",
    "GestureModeChangedEvent",
    "InertialMotion",
    "KineticMotionStartedEvent",
    "KineticMotionStoppedEvent",
    "Node",
    "ScreenSize",
    "Touch",
    "TouchEvent",
    "TouchHistory",
    "__version__",
    "settings",
]
