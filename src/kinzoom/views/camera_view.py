"""Demo view that drives a CameraController from an arcade window.

The view builds a content area larger than the window (a checkerboard of solid
color tiles), wraps it in a Node and lets the user explore it:

- Press and drag with the mouse to pan; release mid-drag to throw the camera.
- Scroll the mouse wheel to zoom. Each scroll step is replayed as a two-finger
  pinch around the centre of the screen, so zooming goes through the same
  gesture handling as a touch screen would.

Coordinate systems:
    arcade reports mouse positions with the origin at the bottom-left. The
    controller works in y-down screen coordinates, so positions are flipped
    before they become touches. For drawing, the content lives in arcade world
    space (y-up) and an arcade Camera2D is pointed at the controller's anchor.

Example usage:
    window = arcade.Window(320, 480, "Kinetic Zoom Camera")
    window.show_view(CameraView())
    arcade.run()
"""

from __future__ import annotations

import logging
from itertools import count
from typing import TYPE_CHECKING

import arcade

from kinzoom.camera import CameraConfig, CameraController
from kinzoom.conf import settings
from kinzoom.events import EventBus
from kinzoom.input import Touch, TouchEvent
from kinzoom.scene import FrameScheduler, Node

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

MOUSE_TOUCH_ID = 0

# Half the distance between the two synthetic fingers of a scroll pinch
PINCH_HALF_SPAN = 50.0

# Zoom factor applied per mouse wheel step
SCROLL_ZOOM_STEP = 1.1

TILE_COLORS = (arcade.color.DARK_SLATE_GRAY, arcade.color.LIGHT_GRAY)


def replay_pinch(
    controller: CameraController,
    center_x: float,
    center_y: float,
    factor: float,
    touch_ids: Iterator[int],
) -> None:
    """Feed the controller a complete two-finger pinch that scales by factor.

    Two fingers land on either side of (center_x, center_y), the second one
    slides until their distance has changed by factor, then both lift.
    """
    first = Touch(center_x - PINCH_HALF_SPAN, center_y, next(touch_ids))
    second = Touch(center_x + PINCH_HALF_SPAN, center_y, next(touch_ids))
    moved = Touch(first.x + 2 * PINCH_HALF_SPAN * factor, center_y, second.id)

    controller.on_touches_begin(TouchEvent(first, [first]))
    controller.on_touches_begin(TouchEvent(second, [first, second]))
    controller.on_touches_move(TouchEvent(moved, [first, moved]))
    controller.on_touches_end(TouchEvent(moved, [first, moved]))
    controller.on_touches_end(TouchEvent(first, [first]))


class CameraView(arcade.View):
    """Arcade view hosting a kinetic zoom camera over a demo content area.

    Attributes:
        node: Scene node standing in for the content.
        scheduler: Ticked from on_update to drive kinetic motion.
        controller: The camera controller under test.
        camera: arcade camera used to render the content.
        tiles: Sprites making up the content.
    """

    def __init__(
        self,
        content_width: float | None = None,
        content_height: float | None = None,
        config: CameraConfig | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        """Create the view.

        Args:
            content_width: Natural width of the content. Defaults to DEMO_CONTENT_WIDTH.
            content_height: Natural height of the content. Defaults to DEMO_CONTENT_HEIGHT.
            config: Camera tuning. Defaults to the CAMERA_* settings.
            event_bus: Optional bus receiving camera events.
        """
        super().__init__()
        self.content_width = content_width if content_width is not None else settings.DEMO_CONTENT_WIDTH
        self.content_height = content_height if content_height is not None else settings.DEMO_CONTENT_HEIGHT

        self.node = Node(self.content_width, self.content_height)
        self.scheduler = FrameScheduler()
        self.controller = CameraController(
            self.node,
            self.window,
            config,
            scheduler=self.scheduler,
            event_bus=event_bus,
        )
        self.camera = arcade.camera.Camera2D()
        self.tiles = self._build_tiles(settings.DEMO_TILE_SIZE)
        self._touch_ids = count(MOUSE_TOUCH_ID + 1)

        self.controller.center_point(self.content_width / 2, self.content_height / 2)

    def _build_tiles(self, tile_size: int) -> arcade.SpriteList:
        tiles = arcade.SpriteList()
        columns = int(self.content_width // tile_size) + 1
        rows = int(self.content_height // tile_size) + 1
        for row in range(rows):
            for column in range(columns):
                tile = arcade.SpriteSolidColor(
                    tile_size,
                    tile_size,
                    center_x=column * tile_size + tile_size / 2,
                    center_y=row * tile_size + tile_size / 2,
                    color=TILE_COLORS[(row + column) % 2],
                )
                tiles.append(tile)
        logger.debug("Built %d demo tiles", len(tiles))
        return tiles

    def to_touch(self, x: float, y: float, touch_id: int = MOUSE_TOUCH_ID) -> Touch:
        """Convert an arcade (y-up) window position into a y-down touch."""
        return Touch(x, self.window.height - y, touch_id)

    def sync_camera(self) -> None:
        """Point the arcade camera at the controller's anchor."""
        scale_x, _ = self.controller.get_scale()
        self.camera.position = (self.controller.anchor_x, self.content_height - self.controller.anchor_y)
        self.camera.zoom = scale_x

    def on_show_view(self) -> None:
        """Called when this view becomes active (arcade lifecycle callback)."""
        self.window.background_color = arcade.color.BLACK

    def on_update(self, delta_time: float) -> None:
        """Tick kinetic motion once per frame (arcade lifecycle callback)."""
        self.scheduler.tick()

    def on_draw(self) -> None:
        """Render the content and a small status line (arcade lifecycle callback)."""
        self.clear()

        self.sync_camera()
        self.camera.use()
        self.tiles.draw()

        # Draw UI in screen coordinates
        arcade.camera.Camera2D().use()
        scale_x, _ = self.controller.get_scale()
        velocity = self.controller.velocity
        status = f"{self.controller.mode.name}  zoom {scale_x:.2f}"
        if velocity is not None:
            status += f"  v ({velocity[0]:.0f}, {velocity[1]:.0f})"
        arcade.draw_text(status, 8, 8, arcade.color.WHITE, 12)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        """Start a single-touch gesture."""
        touch = self.to_touch(x, y)
        self.controller.on_touches_begin(TouchEvent(touch, [touch]))

    def on_mouse_drag(self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int) -> None:
        """Move the single-touch gesture."""
        touch = self.to_touch(x, y)
        self.controller.on_touches_move(TouchEvent(touch, [touch]))

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int) -> None:
        """End the single-touch gesture."""
        touch = self.to_touch(x, y)
        self.controller.on_touches_end(TouchEvent(touch, [touch]))

    def on_mouse_scroll(self, x: int, y: int, scroll_x: float, scroll_y: float) -> None:
        """Zoom by replaying a two-finger pinch around the screen centre."""
        if self.controller.is_focus or not scroll_y:
            return
        factor = SCROLL_ZOOM_STEP**scroll_y
        replay_pinch(self.controller, self.window.width / 2, self.window.height / 2, factor, self._touch_ids)
        logger.debug("Scroll pinch by %.2f, scale now %.2f", factor, self.controller.get_scale()[0])

