"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from kinzoom.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        CAMERA_MAX_ZOOM=2.0,
        CAMERA_FRICTION=0.85,
        CAMERA_MAX_POINTS=10,
        CAMERA_MIN_POINTS=3,
        CAMERA_STOP_THRESHOLD=0.1,
        SCREEN_WIDTH=320,
        SCREEN_HEIGHT=480,
        WINDOW_TITLE="Test",
        DEMO_CONTENT_WIDTH=640,
        DEMO_CONTENT_HEIGHT=960,
        DEMO_TILE_SIZE=64,
        LOG_LEVEL="DEBUG",
    )
    yield
    settings.reset()


class FakeClock:
    """Deterministic clock returning a settable time."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now
