"""Interfaces the camera controller consumes from its collaborators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable


class Screen(Protocol):
    """On-screen viewport size. An arcade.Window satisfies this protocol."""

    @property
    def width(self) -> int | float: ...

    @property
    def height(self) -> int | float: ...


class SceneNode(ABC):
    """A movable, scalable scene node the camera is layered on top of.

    The controller never subclasses a node. It holds one and wraps its
    position and scale setters with boundary clamping.
    """

    @abstractmethod
    def get_x(self) -> float:
        """Return the x offset of the node's top-left corner on screen."""
        ...

    @abstractmethod
    def get_y(self) -> float:
        """Return the y offset of the node's top-left corner on screen."""
        ...

    @abstractmethod
    def set_x(self, x: float) -> None:
        """Set the x offset without any clamping."""
        ...

    @abstractmethod
    def set_y(self, y: float) -> None:
        """Set the y offset without any clamping."""
        ...

    @abstractmethod
    def get_scale_x(self) -> float:
        """Return the horizontal scale factor."""
        ...

    @abstractmethod
    def get_scale_y(self) -> float:
        """Return the vertical scale factor."""
        ...

    @abstractmethod
    def set_scale(self, scale_x: float, scale_y: float) -> None:
        """Set both scale factors without any clamping."""
        ...

    @abstractmethod
    def get_width(self) -> float:
        """Return the on-screen (scaled) width."""
        ...

    @abstractmethod
    def get_height(self) -> float:
        """Return the on-screen (scaled) height."""
        ...

    @abstractmethod
    def hit_test_point(self, x: float, y: float) -> bool:
        """Check whether a screen point falls inside the node's current bounds."""
        ...


class FrameSchedulerBase(ABC):
    """Delivers a callback once per rendered frame while subscribed."""

    @abstractmethod
    def subscribe(self, callback: Callable[[], None]) -> None:
        """Start calling callback every frame. Subscribing twice is a no-op."""
        ...

    @abstractmethod
    def unsubscribe(self, callback: Callable[[], None]) -> None:
        """Stop calling callback. Unknown callbacks are ignored."""
        ...
