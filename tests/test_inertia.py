"""Unit tests for InertialMotion."""

import unittest

import pytest

from kinzoom.camera.inertia import InertialMotion


def make_motion(vx: float, vy: float, friction: float = 0.85) -> InertialMotion:
    return InertialMotion(vx, vy, 0.0, friction=friction, stop_threshold=0.1)


class TestInertialMotion(unittest.TestCase):
    """Unit test class for InertialMotion."""

    def test_step_returns_displacement_before_decay(self) -> None:
        """Test that displacement uses the velocity the frame started with."""
        motion = make_motion(100.0, -50.0, friction=0.5)

        dx, dy = motion.step(0.1)

        assert dx == pytest.approx(10.0)
        assert dy == pytest.approx(-5.0)
        assert motion.velocity == (50.0, -25.0)

    def test_uses_elapsed_time_between_steps(self) -> None:
        """Test that each step measures time since the previous one."""
        motion = make_motion(100.0, 0.0, friction=0.5)
        motion.step(0.1)

        dx, _ = motion.step(0.3)

        assert dx == pytest.approx(50.0 * 0.2)

    def test_axis_snaps_to_zero_below_threshold(self) -> None:
        """Test that a slow axis stops while the other keeps going."""
        motion = make_motion(0.11, 500.0)

        motion.step(0.016)

        assert motion.velocity_x == 0
        assert motion.velocity_y == pytest.approx(425.0)
        assert not motion.settled

    def test_decay_terminates(self) -> None:
        """Test that any velocity reaches exactly zero in bounded steps, monotonically."""
        motion = make_motion(-2500.0, 1200.0)
        previous = abs(motion.velocity_x) + abs(motion.velocity_y)

        now = 0.0
        for _ in range(200):
            now += 1 / 60
            motion.step(now)
            magnitude = abs(motion.velocity_x) + abs(motion.velocity_y)
            assert magnitude < previous or magnitude == 0
            previous = magnitude
            if motion.settled:
                break

        assert motion.settled
        assert motion.velocity == (0.0, 0.0)

    def test_settled_step_is_noop(self) -> None:
        """Test that stepping a settled motion moves nothing."""
        motion = make_motion(0.05, 0.05)
        motion.step(0.016)
        assert motion.settled

        assert motion.step(1.0) == (0.0, 0.0)

    def test_clock_going_backwards_moves_nothing(self) -> None:
        """Test that a non-monotonic clock does not reverse the motion."""
        motion = make_motion(100.0, 100.0)
        motion.last_time = 5.0

        assert motion.step(4.0) == (0.0, 0.0)
