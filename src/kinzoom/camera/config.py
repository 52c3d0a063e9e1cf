"""Camera configuration record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from kinzoom.conf import settings


@dataclass(frozen=True)
class CameraConfig:
    """Immutable camera tuning, resolved once when a controller is built.

    Attributes:
        max_zoom: Upper bound for the scale. 1.0 is unzoomed. Full content
            coverage of the screen still wins if it needs a larger scale.
        friction: Per-frame velocity multiplier, strictly between 0 and 1.
            Lower values stop sooner.
        max_points: Capacity of the touch history used for velocity estimation.
        min_points: Kinetic motion only starts when the history holds more
            samples than this on release.
        stop_threshold: Velocity magnitude below which an axis snaps to zero.
    """

    max_zoom: float = 2.0
    friction: float = 0.85
    max_points: int = 10
    min_points: int = 3
    stop_threshold: float = 0.1

    def __post_init__(self) -> None:
        """Validate field domains."""
        if self.max_zoom <= 0:
            msg = f"max_zoom must be positive, got {self.max_zoom}"
            raise ValueError(msg)
        if not 0 < self.friction < 1:
            msg = f"friction must be between 0 and 1 (exclusive), got {self.friction}"
            raise ValueError(msg)
        if self.max_points < 1:
            msg = f"max_points must be at least 1, got {self.max_points}"
            raise ValueError(msg)
        if self.min_points < 0:
            msg = f"min_points cannot be negative, got {self.min_points}"
            raise ValueError(msg)
        if self.stop_threshold < 0:
            msg = f"stop_threshold cannot be negative, got {self.stop_threshold}"
            raise ValueError(msg)

    @classmethod
    def from_settings(cls, **overrides: Any) -> Self:  # noqa: ANN401
        """Build a config from the CAMERA_* settings, with keyword overrides.

        Example:
            config = CameraConfig.from_settings(friction=0.5)
        """
        values: dict[str, Any] = {
            "max_zoom": settings.CAMERA_MAX_ZOOM,
            "friction": settings.CAMERA_FRICTION,
            "max_points": settings.CAMERA_MAX_POINTS,
            "min_points": settings.CAMERA_MIN_POINTS,
            "stop_threshold": settings.CAMERA_STOP_THRESHOLD,
        }
        values.update(overrides)
        return cls(**values)
