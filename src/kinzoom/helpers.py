"""Helper functions for creating and running the kinzoom demo.

Users can choose between the simple run_demo() function or create_demo() for
more control over the window before the event loop starts.
"""

import logging

import arcade
from rich.logging import RichHandler

from kinzoom.conf import settings
from kinzoom.views import CameraView


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the demo.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_demo() -> arcade.Window:
    """Create a window showing the camera demo view.

    Uses SCREEN_WIDTH, SCREEN_HEIGHT and WINDOW_TITLE from settings (your
    project's settings.py or the module named by KINZOOM_SETTINGS_MODULE).

    Returns:
        The arcade.Window with a CameraView already shown.

    Example:
        >>> from kinzoom.helpers import create_demo
        >>> window = create_demo()
        >>> arcade.run()
    """
    setup_logging()

    window = arcade.Window(
        settings.SCREEN_WIDTH,
        settings.SCREEN_HEIGHT,
        settings.WINDOW_TITLE,
    )
    window.show_view(CameraView())
    return window


def run_demo() -> None:
    """Create the demo window and run the arcade event loop.

    Blocks until the window is closed.
    """
    create_demo()
    arcade.run()
