"""Unit tests for TouchHistory."""

import unittest

import pytest

from kinzoom.camera.history import TouchHistory
from kinzoom.types import TouchSample


class TestTouchHistory(unittest.TestCase):
    """Unit test class for TouchHistory."""

    def setUp(self) -> None:
        """Create a history with room for four samples."""
        self.history = TouchHistory(max_points=4)

    def test_starts_empty(self) -> None:
        """Test that a new history holds nothing."""
        assert len(self.history) == 0
        assert self.history.oldest is None

    def test_reset_leaves_single_sample(self) -> None:
        """Test that reset discards previous samples."""
        self.history.append(1, 1, 0.0)
        self.history.append(2, 2, 0.1)

        self.history.reset(5, 6, 1.0)

        assert list(self.history) == [TouchSample(5, 6, 1.0)]

    def test_evicts_oldest_beyond_capacity(self) -> None:
        """Test FIFO eviction keeps the most recent samples."""
        self.history.reset(0, 0, 0.0)
        for i in range(1, 10):
            self.history.append(i, i * 2, i / 10)

        assert len(self.history) == 4
        assert [sample.x for sample in self.history] == [6, 7, 8, 9]
        assert self.history.oldest == TouchSample(6, 12, 0.6)

    def test_velocity_from_oldest_sample(self) -> None:
        """Test velocity is measured from the oldest retained sample."""
        self.history.reset(100, 100, 0.0)
        self.history.append(150, 120, 0.05)

        vx, vy = self.history.velocity(190, 150, 0.1)

        assert vx == pytest.approx(900.0)
        assert vy == pytest.approx(500.0)

    def test_velocity_none_when_empty(self) -> None:
        """Test that an empty history gives no velocity."""
        assert self.history.velocity(1, 1, 1.0) is None

    def test_velocity_none_without_elapsed_time(self) -> None:
        """Test that a zero time span gives no velocity instead of dividing by zero."""
        self.history.reset(0, 0, 2.0)
        assert self.history.velocity(10, 10, 2.0) is None

    def test_clear(self) -> None:
        """Test clearing the history."""
        self.history.reset(0, 0, 0.0)
        self.history.clear()
        assert len(self.history) == 0
