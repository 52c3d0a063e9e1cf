"""Plain scene node and screen size used when no rendering engine is involved."""

from __future__ import annotations

from dataclasses import dataclass

from kinzoom.camera.base import SceneNode


@dataclass
class ScreenSize:
    """Fixed screen dimensions."""

    width: float
    height: float


class Node(SceneNode):
    """A rectangle of natural size that can be offset and scaled.

    The node does no clamping of its own. It is the base capability that
    CameraController wraps.

    Attributes:
        natural_width: Unscaled width of the content.
        natural_height: Unscaled height of the content.
    """

    def __init__(
        self,
        natural_width: float,
        natural_height: float,
        *,
        x: float = 0.0,
        y: float = 0.0,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
    ) -> None:
        """Create a node with the given natural size, offset and scale."""
        self.natural_width = natural_width
        self.natural_height = natural_height
        self._x = x
        self._y = y
        self._scale_x = scale_x
        self._scale_y = scale_y

    def get_x(self) -> float:
        return self._x

    def get_y(self) -> float:
        return self._y

    def set_x(self, x: float) -> None:
        self._x = x

    def set_y(self, y: float) -> None:
        self._y = y

    def get_scale_x(self) -> float:
        return self._scale_x

    def get_scale_y(self) -> float:
        return self._scale_y

    def set_scale(self, scale_x: float, scale_y: float) -> None:
        self._scale_x = scale_x
        self._scale_y = scale_y

    def get_width(self) -> float:
        return self.natural_width * self._scale_x

    def get_height(self) -> float:
        return self.natural_height * self._scale_y

    def hit_test_point(self, x: float, y: float) -> bool:
        return self._x <= x <= self._x + self.get_width() and self._y <= y <= self._y + self.get_height()

    def __repr__(self) -> str:
        return (
            f"Node({self.natural_width}x{self.natural_height}, "
            f"pos=({self._x}, {self._y}), scale=({self._scale_x}, {self._scale_y}))"
        )
