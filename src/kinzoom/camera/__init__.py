"""Camera system for dragging and pinch-zooming a large scene node.

This package provides:
- CameraController: Gesture handling, boundary clamping and kinetic scrolling
- CameraConfig: Immutable camera tuning
- TouchHistory: Rolling buffer of touch samples for release velocity
- InertialMotion: Per-frame velocity decay after a drag is released
"""

from kinzoom.camera.base import FrameSchedulerBase, SceneNode, Screen
from kinzoom.camera.config import CameraConfig
from kinzoom.camera.controller import CameraController
from kinzoom.camera.events import (
    GestureModeChangedEvent,
    KineticMotionStartedEvent,
    KineticMotionStoppedEvent,
)
from kinzoom.camera.history import TouchHistory
from kinzoom.camera.inertia import InertialMotion

__all__ = [
    "CameraConfig",
    "CameraController",
    "FrameSchedulerBase",
    "GestureModeChangedEvent",
    "InertialMotion",
    "KineticMotionStartedEvent",
    "KineticMotionStoppedEvent",
    "SceneNode",
    "Screen",
    "TouchHistory",
]
