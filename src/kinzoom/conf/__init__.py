"""Django-like settings system for kinzoom.

Usage:
    # In your project's settings.py
    from kinzoom.conf import global_settings

    # Override defaults
    CAMERA_MAX_ZOOM = 3.0
    CAMERA_FRICTION = 0.9

    # In your code
    from kinzoom.conf import settings

    print(settings.CAMERA_MAX_ZOOM)  # 3.0
"""

import importlib
import logging
import os
from typing import Any

from kinzoom.conf import global_settings

logger = logging.getLogger(__name__)


class LazySettings:
    """Lazy settings proxy that loads user settings on first access.

    Settings are loaded from:
    1. global_settings (library defaults)
    2. User's settings module (overrides)

    The settings module location is determined by:
    - KINZOOM_SETTINGS_MODULE environment variable, or
    - Convention: "settings" module in current directory
    """

    def __init__(self) -> None:
        """Initialize the lazy settings proxy."""
        self._wrapped: Settings | None = None

    def _setup(self) -> None:
        """Load settings from global_settings and user's settings module."""
        settings_module = os.environ.get("KINZOOM_SETTINGS_MODULE", "settings")

        self._wrapped = Settings()

        try:
            mod = importlib.import_module(settings_module)
        except ImportError:
            logger.debug("No settings module '%s' found, using defaults", settings_module)
            return

        overrides = [name for name in dir(mod) if name.isupper()]
        for name in overrides:
            setattr(self._wrapped, name, getattr(mod, name))
        logger.debug("Loaded %d setting(s) from '%s'", len(overrides), settings_module)

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        if self._wrapped is None:
            self._setup()
        if self._wrapped is None:
            msg = "Settings could not be loaded"
            raise RuntimeError(msg)
        return getattr(self._wrapped, name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a setting value."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            if self._wrapped is None:
                self._setup()
            if self._wrapped is None:
                msg = "Settings could not be loaded"
                raise RuntimeError(msg)
            setattr(self._wrapped, name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Manually configure settings (useful for testing).

        Example:
            settings.configure(
                CAMERA_MAX_ZOOM=4.0,
                CAMERA_FRICTION=0.5,
            )
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)

    def is_configured(self) -> bool:
        """Check if settings have been loaded."""
        return self._wrapped is not None

    def reset(self) -> None:
        """Drop loaded settings so the next access reloads them."""
        self._wrapped = None


class Settings:
    """Container for all settings with attribute access."""

    def __init__(self) -> None:
        """Initialize settings with defaults from global_settings."""
        for setting in dir(global_settings):
            if setting.isupper():
                setattr(self, setting, getattr(global_settings, setting))


# Global singleton instance
settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
