"""Kinetic zoom camera controller.

This module provides a camera that lets the user drag and pinch-zoom a scene
node that is larger than the screen. There is no camera object that moves:
the controller moves and scales the node itself, relative to the screen, and
keeps it covering the whole screen at all times. When the user lifts their
finger in the middle of a drag, the movement continues with some kinetic
energy and slows down based on simulated friction.

Gesture modes:
    DRAG: one contact pans the node.
    SCALE: two or more contacts pinch-zoom around the centre of the screen.
    The controller switches between them as contacts come and go, but never
    combines them.

Boundary system:
    Position is limited to [screen - node size, 0] on each axis. Scale is
    limited to [coverage minimum, max_zoom], where the coverage minimum is the
    smallest zoom at which the node still covers the screen on both axes.

Usage Example:
    node = Node(natural_width=640, natural_height=960)
    controller = CameraController(node, ScreenSize(320, 480), scheduler=scheduler)

    # Centre on a point of the content, e.g. the player
    controller.center_point(player_x, player_y)

    # Translate a touch into content coordinates
    x, y = controller.translate_event(event)

Integration:
    - Touch events are forwarded to on_touches_begin/move/end/cancel
    - The host ticks the scheduler once per frame while kinetic motion runs
"""

from __future__ import annotations

import logging
import math
import time
from typing import TYPE_CHECKING

from kinzoom.camera import bounds
from kinzoom.camera.config import CameraConfig
from kinzoom.camera.events import (
    GestureModeChangedEvent,
    KineticMotionStartedEvent,
    KineticMotionStoppedEvent,
)
from kinzoom.camera.history import TouchHistory
from kinzoom.camera.inertia import InertialMotion
from kinzoom.scene.scheduler import FrameScheduler
from kinzoom.types import GestureMode

if TYPE_CHECKING:
    from collections.abc import Callable

    from kinzoom.camera.base import FrameSchedulerBase, SceneNode, Screen
    from kinzoom.events.base import Event, EventBus
    from kinzoom.input.touches import Touch, TouchEvent

logger = logging.getLogger(__name__)


def get_distance(p1: Touch, p2: Touch) -> float:
    """Euclidean distance between two contacts."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


class CameraController:
    """Drag and pinch-zoom camera with kinetic scrolling.

    The controller composes a SceneNode and layers boundary clamping on top
    of its position and scale setters, so anything set through the controller
    is always clamped. An anchor (the content point at the centre of the
    screen) is kept in sync with every position change and is used to keep
    zooming centred on the screen rather than on the node's origin.

    Attributes:
        node: The scene node being moved and scaled.
        screen: Provides the on-screen viewport width and height.
        config: Immutable tuning (max zoom, friction, history sizes).
        mode: Current gesture mode.
        is_focus: Whether this camera owns the active gesture.
        anchor_x: Content x coordinate at the centre of the screen.
        anchor_y: Content y coordinate at the centre of the screen.
        history: Recent touch samples of the current drag.
        motion: Active kinetic motion, or None when the camera is at rest.
        is_ticking: Whether on_enter_frame is subscribed to the scheduler.
    """

    def __init__(
        self,
        node: SceneNode,
        screen: Screen,
        config: CameraConfig | None = None,
        *,
        clock: Callable[[], float] = time.perf_counter,
        scheduler: FrameSchedulerBase | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        """Initialize the camera controller.

        Args:
            node: Scene node to move and scale. Usually larger than the screen.
            screen: Object exposing the viewport width and height.
            config: Camera tuning. Defaults to CameraConfig.from_settings().
            clock: Returns the current time in seconds. Inject a fake clock
                for deterministic tests.
            scheduler: Delivers per-frame ticks for kinetic motion. A private
                FrameScheduler is created when omitted; the host must then
                tick controller.scheduler itself.
            event_bus: Optional bus receiving mode and motion events.
        """
        self.node = node
        self.screen = screen
        self.config = config if config is not None else CameraConfig.from_settings()
        self.clock = clock
        self.scheduler: FrameSchedulerBase = scheduler if scheduler is not None else FrameScheduler()
        self.event_bus = event_bus

        self.mode = GestureMode.IDLE
        self.is_focus = False
        self.x0 = 0.0
        self.y0 = 0.0

        # Captured when a pinch starts
        self.initial_distance: float | None = None
        self.initial_scale: tuple[float, float] = (1.0, 1.0)
        self.initial_x = 0.0
        self.initial_y = 0.0

        self.history = TouchHistory(self.config.max_points)
        self.motion: InertialMotion | None = None
        self.is_ticking = False

        self.anchor_x = 0.0
        self.anchor_y = 0.0
        self.update_anchor()

    def get_x(self) -> float:
        return self.node.get_x()

    def get_y(self) -> float:
        return self.node.get_y()

    def get_position(self) -> tuple[float, float]:
        return (self.node.get_x(), self.node.get_y())

    def get_scale(self) -> tuple[float, float]:
        return (self.node.get_scale_x(), self.node.get_scale_y())

    def set_x(self, x: float) -> None:
        """Set the node's x offset, clamped to the screen, and refresh the anchor."""
        self._apply_x(x)
        self.update_anchor()

    def set_y(self, y: float) -> None:
        """Set the node's y offset, clamped to the screen, and refresh the anchor."""
        self._apply_y(y)
        self.update_anchor()

    def set_position(self, x: float, y: float | None = None) -> None:
        """Set both offsets (y defaults to x), clamped, and refresh the anchor."""
        self._apply_x(x)
        self._apply_y(x if y is None else y)
        self.update_anchor()

    def set_scale(self, scale_x: float, scale_y: float | None = None) -> None:
        """Set the scale (scale_y defaults to scale_x), clamped.

        The view is then re-centred on the anchor captured before the change,
        so the zoom happens around the centre of the screen instead of the
        node's origin. The anchor is refreshed on the way out.
        """
        minimum = self.min_scale()
        clamped_x, clamped_y = bounds.clamp_scale(scale_x, scale_y, minimum, self.config.max_zoom)
        self.node.set_scale(clamped_x, clamped_y)
        self.center_anchor()

    def min_scale(self) -> float:
        """Smallest scale at which the node covers the screen on both axes."""
        natural_width = self.node.get_width() / self.node.get_scale_x()
        natural_height = self.node.get_height() / self.node.get_scale_y()
        return bounds.min_scale(self.screen.width, self.screen.height, natural_width, natural_height)

    def _apply_x(self, x: float) -> None:
        self.node.set_x(bounds.clamp_axis(x, self.screen.width, self.node.get_width()))

    def _apply_y(self, y: float) -> None:
        self.node.set_y(bounds.clamp_axis(y, self.screen.height, self.node.get_height()))

    def update_anchor(self) -> None:
        """Recompute the anchor from the current position and scale.

        Called whenever the position changes.
        """
        self.anchor_x = (self.screen.width / 2 - self.node.get_x()) / self.node.get_scale_x()
        self.anchor_y = (self.screen.height / 2 - self.node.get_y()) / self.node.get_scale_y()

    def center_anchor(self) -> None:
        """Re-centre the view on the stored anchor after a scale change."""
        self.center_point(self.anchor_x, self.anchor_y)

    def center_point(self, x: float, y: float) -> None:
        """Centre the view on a point in content coordinates (clamped)."""
        self._apply_x(self.screen.width / 2 - x * self.node.get_scale_x())
        self._apply_y(self.screen.height / 2 - y * self.node.get_scale_y())
        self.update_anchor()

    def translate_event(self, event: TouchEvent) -> tuple[float, float]:
        """Translate an event's screen coordinates into content coordinates.

        Takes both position and scale into account. The event's own x/y are
        preferred; the triggering touch is used when they are absent.
        """
        event_x = event.x if event.x is not None else event.touch.x
        event_y = event.y if event.y is not None else event.touch.y
        return (
            (event_x - self.node.get_x()) / self.node.get_scale_x(),
            (event_y - self.node.get_y()) / self.node.get_scale_y(),
        )

    @property
    def velocity(self) -> tuple[float, float] | None:
        """Current kinetic velocity, or None when the camera is at rest."""
        return self.motion.velocity if self.motion is not None else None

    def stop(self) -> None:
        """Stop the camera from moving any more. Safe to call repeatedly.

        Recorded touch samples are dropped too, so a later release cannot
        measure its velocity from before the stop.
        """
        was_moving = self.motion is not None
        if self.is_ticking:
            self.scheduler.unsubscribe(self.on_enter_frame)
            self.is_ticking = False
        self.motion = None
        self.history.clear()

        if was_moving:
            logger.debug("Kinetic motion stopped at (%.1f, %.1f)", self.get_x(), self.get_y())
            self._publish(KineticMotionStoppedEvent(self.get_x(), self.get_y()))

    def _start_motion(self, velocity_x: float, velocity_y: float, now: float) -> None:
        self.motion = InertialMotion(
            velocity_x,
            velocity_y,
            now,
            friction=self.config.friction,
            stop_threshold=self.config.stop_threshold,
        )
        if not self.is_ticking:
            self.scheduler.subscribe(self.on_enter_frame)
            self.is_ticking = True
        logger.debug("Kinetic motion started with velocity (%.1f, %.1f)", velocity_x, velocity_y)
        self._publish(KineticMotionStartedEvent(velocity_x, velocity_y))

    def on_enter_frame(self) -> None:
        """Continue a released drag, slowing it down by friction.

        Only moves the camera while in DRAG mode. Unsubscribes itself once the
        motion has settled.
        """
        if self.mode is not GestureMode.DRAG or self.motion is None:
            return

        dx, dy = self.motion.step(self.clock())
        if dx or dy:
            self._apply_x(self.node.get_x() + dx)
            self._apply_y(self.node.get_y() + dy)
            self.update_anchor()

        if self.motion.settled:
            self.stop()

    def on_touches_begin(self, event: TouchEvent) -> None:
        """A finger or mouse button is pressed."""
        touch = event.touch
        if not self.node.hit_test_point(touch.x, touch.y):
            return

        self.is_focus = True

        if len(event.all_touches) <= 1:
            self._set_mode(GestureMode.DRAG)
            self.stop()
            self._reset_drag(touch.x, touch.y)
        else:
            if self.mode is not GestureMode.SCALE:
                # A new pinch never measures against an earlier one
                self.initial_distance = None
            self._set_mode(GestureMode.SCALE)
            self.stop()

            # Only look at the last finger to touch, ignore intermediate fingers
            if event.is_newest():
                self.initial_distance = get_distance(touch, event.all_touches[0])
                self.initial_scale = self.get_scale()
                self.initial_x, self.initial_y = self.get_position()
                logger.debug("Pinch started at distance %.1f", self.initial_distance)

        event.stop_propagation()

    def on_touches_move(self, event: TouchEvent) -> None:
        """A pressed finger or mouse moved."""
        if not self.is_focus:
            return

        touch = event.touch
        if self.mode is GestureMode.DRAG:
            # Figure out how far we moved since last time
            dx = touch.x - self.x0
            dy = touch.y - self.y0
            self.set_position(self.get_x() + dx, self.get_y() + dy)

            self.x0 = touch.x
            self.y0 = touch.y
            self.history.append(touch.x, touch.y, self.clock())
        elif self.mode is GestureMode.SCALE and len(event.all_touches) > 1 and event.is_newest():
            self._pinch(get_distance(touch, event.all_touches[0]))

        event.stop_propagation()

    def on_touches_end(self, event: TouchEvent) -> None:
        """A finger or mouse button is released."""
        if not self.is_focus:
            return

        touch = event.touch
        if self.mode is GestureMode.DRAG:
            if len(self.history) > self.config.min_points:
                now = self.clock()
                velocity = self.history.velocity(touch.x, touch.y, now)
                if velocity is not None:
                    self._start_motion(velocity[0], velocity[1], now)
            self.is_focus = False
        elif self.mode is GestureMode.SCALE and len(event.all_touches) == 2:
            # Resume dragging with whichever finger is left
            remaining = event.all_touches[1] if event.all_touches[0].id == touch.id else event.all_touches[0]
            self._set_mode(GestureMode.DRAG)
            self.stop()
            self._reset_drag(remaining.x, remaining.y)

        event.stop_propagation()

    def on_touches_cancel(self, event: TouchEvent) -> None:
        """The windowing layer aborted the gesture."""
        if not self.is_focus:
            return
        logger.debug("Touches cancelled in mode %s", self.mode.name)
        self.is_focus = False
        event.stop_propagation()

    def _reset_drag(self, x: float, y: float) -> None:
        self.x0 = x
        self.y0 = y
        self.initial_distance = None
        self.history.reset(x, y, self.clock())

    def _pinch(self, current_distance: float) -> None:
        if not self.initial_distance:
            # Contacts started on the same point; nothing to scale against
            return
        ratio = current_distance / self.initial_distance
        self.set_scale(ratio * self.initial_scale[0], ratio * self.initial_scale[1])

    def _set_mode(self, mode: GestureMode) -> None:
        if mode is self.mode:
            return
        previous = self.mode
        self.mode = mode
        logger.debug("Gesture mode %s -> %s", previous.name, mode.name)
        self._publish(GestureModeChangedEvent(previous, mode))

    def _publish(self, event: Event) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event)
