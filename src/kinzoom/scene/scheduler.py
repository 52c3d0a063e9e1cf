"""Per-frame callback scheduler driven by the host's game loop."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kinzoom.camera.base import FrameSchedulerBase

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class FrameScheduler(FrameSchedulerBase):
    """Fans out one tick per frame to every subscribed callback.

    The host calls tick() once per frame (an arcade view does it from
    on_update). Callbacks may unsubscribe themselves while being ticked.

    Example:
        scheduler = FrameScheduler()
        controller = CameraController(node, screen, scheduler=scheduler)

        def on_update(self, delta_time):
            scheduler.tick()
    """

    def __init__(self) -> None:
        """Initialize an empty scheduler."""
        self._callbacks: list[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> None:
        if callback in self._callbacks:
            return
        self._callbacks.append(callback)
        logger.debug("Frame callback subscribed: %s", getattr(callback, "__qualname__", callback))

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        if callback not in self._callbacks:
            return
        self._callbacks.remove(callback)
        logger.debug("Frame callback unsubscribed: %s", getattr(callback, "__qualname__", callback))

    def tick(self) -> None:
        """Call every subscribed callback once."""
        for callback in list(self._callbacks):
            callback()

    def is_subscribed(self, callback: Callable[[], None]) -> bool:
        """Check whether callback currently receives ticks."""
        return callback in self._callbacks

    def __len__(self) -> int:
        return len(self._callbacks)
