"""Rolling touch history used to estimate the release velocity of a drag."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from kinzoom.types import TouchSample

if TYPE_CHECKING:
    from collections.abc import Iterator


class TouchHistory:
    """Bounded FIFO of recent touch samples, oldest first.

    Appending beyond capacity evicts the oldest sample, so the buffer always
    holds the most recent max_points samples.
    """

    def __init__(self, max_points: int) -> None:
        """Create an empty history holding at most max_points samples."""
        self.max_points = max_points
        self._samples: deque[TouchSample] = deque(maxlen=max_points)

    def reset(self, x: float, y: float, time: float) -> None:
        """Discard all samples and start over with a single one."""
        self._samples.clear()
        self._samples.append(TouchSample(x, y, time))

    def append(self, x: float, y: float, time: float) -> None:
        """Record a sample, evicting the oldest one when full."""
        self._samples.append(TouchSample(x, y, time))

    def clear(self) -> None:
        """Discard all samples."""
        self._samples.clear()

    @property
    def oldest(self) -> TouchSample | None:
        """The oldest retained sample, or None when empty."""
        return self._samples[0] if self._samples else None

    def velocity(self, x: float, y: float, time: float) -> tuple[float, float] | None:
        """Estimate velocity from the oldest sample to the given release point.

        Returns:
            (vx, vy) in units per second, or None when the history is empty or
            no time has passed since the oldest sample.
        """
        start = self.oldest
        if start is None:
            return None
        elapsed = time - start.time
        if elapsed <= 0:
            return None
        return ((x - start.x) / elapsed, (y - start.y) / elapsed)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[TouchSample]:
        return iter(self._samples)
