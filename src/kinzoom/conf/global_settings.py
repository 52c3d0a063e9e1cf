"""Default settings for kinzoom.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from kinzoom.conf import global_settings

    CAMERA_MAX_ZOOM = 1.5
    CAMERA_FRICTION = 0.5
    SCREEN_WIDTH = 640
"""

# Camera settings
CAMERA_MAX_ZOOM = 2.0
"""Maximum scale allowed. 1.0 is the natural, unzoomed size."""

CAMERA_FRICTION = 0.85
"""Multiplier applied to the kinetic velocity on every frame. Lower is less slippery."""

CAMERA_MAX_POINTS = 10
"""Number of touch samples kept for release velocity estimation."""

CAMERA_MIN_POINTS = 3
"""Kinetic motion only starts when more samples than this were recorded."""

CAMERA_STOP_THRESHOLD = 0.1
"""Velocity (units per second) below which an axis snaps to zero."""

# Window settings
SCREEN_WIDTH = 320
"""Width of the demo window in pixels."""

SCREEN_HEIGHT = 480
"""Height of the demo window in pixels."""

WINDOW_TITLE = "Kinetic Zoom Camera"
"""Title displayed in the demo window title bar."""

# Demo content settings
DEMO_CONTENT_WIDTH = 640
"""Natural width of the demo content in pixels."""

DEMO_CONTENT_HEIGHT = 960
"""Natural height of the demo content in pixels."""

DEMO_TILE_SIZE = 64
"""Size of the checkerboard tiles drawn as demo content."""

# Logging
LOG_LEVEL = "INFO"
"""Root log level used by setup_logging() when none is given."""
