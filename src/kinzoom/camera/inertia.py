"""Kinetic motion that keeps a released drag going and slows it down.

Each frame the camera moves by velocity * elapsed time, then the velocity is
multiplied by the friction factor. Once an axis drops below the stop threshold
it snaps to exactly zero, and once both axes are zero the motion is settled.
Because friction is strictly below one, every non-zero velocity settles after
a bounded number of frames.
"""

from __future__ import annotations


class InertialMotion:
    """Velocity decay and displacement integration for one kinetic throw.

    Attributes:
        velocity_x: Current horizontal velocity in units per second.
        velocity_y: Current vertical velocity in units per second.
        friction: Per-frame velocity multiplier.
        stop_threshold: Magnitude below which an axis snaps to zero.
        last_time: Clock reading of the previous step.
    """

    def __init__(
        self,
        velocity_x: float,
        velocity_y: float,
        start_time: float,
        *,
        friction: float,
        stop_threshold: float,
    ) -> None:
        """Seed the motion with a release velocity and the release time."""
        self.velocity_x = velocity_x
        self.velocity_y = velocity_y
        self.friction = friction
        self.stop_threshold = stop_threshold
        self.last_time = start_time

    @property
    def settled(self) -> bool:
        """Whether both axes have come to rest."""
        return self.velocity_x == 0 and self.velocity_y == 0

    @property
    def velocity(self) -> tuple[float, float]:
        """Current (vx, vy)."""
        return (self.velocity_x, self.velocity_y)

    def step(self, now: float) -> tuple[float, float]:
        """Advance the motion to now.

        Returns the displacement to apply this frame, computed with the velocity
        from before this step's decay. A settled motion returns (0, 0).
        """
        if self.settled:
            return (0.0, 0.0)

        # Ticks are expected in order; a clock going backwards moves nothing
        dt = max(now - self.last_time, 0.0)
        self.last_time = now

        dx = self.velocity_x * dt
        dy = self.velocity_y * dt

        self.velocity_x = self._decay(self.velocity_x)
        self.velocity_y = self._decay(self.velocity_y)

        return (dx, dy)

    def _decay(self, value: float) -> float:
        value *= self.friction
        if abs(value) < self.stop_threshold:
            return 0.0
        return value
