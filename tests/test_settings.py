"""Unit tests for settings and CameraConfig."""

import sys
import types
import unittest
from unittest.mock import patch

import pytest

from kinzoom.camera import CameraConfig
from kinzoom.conf import LazySettings, global_settings, settings


class TestLazySettings(unittest.TestCase):
    """Test the lazy settings proxy."""

    def test_defaults_without_user_module(self) -> None:
        """Test that global defaults are used when no settings module exists."""
        lazy = LazySettings()
        with patch.dict("os.environ", {"KINZOOM_SETTINGS_MODULE": "kinzoom_missing_settings"}):
            assert lazy.CAMERA_FRICTION == global_settings.CAMERA_FRICTION
        assert lazy.is_configured()

    def test_user_module_overrides(self) -> None:
        """Test that uppercase names of the user module override defaults."""
        module = types.ModuleType("kinzoom_test_settings")
        module.CAMERA_MAX_ZOOM = 4.0
        module.lowercase_ignored = 1
        lazy = LazySettings()

        with (
            patch.dict(sys.modules, {"kinzoom_test_settings": module}),
            patch.dict("os.environ", {"KINZOOM_SETTINGS_MODULE": "kinzoom_test_settings"}),
        ):
            assert lazy.CAMERA_MAX_ZOOM == 4.0
            assert lazy.CAMERA_MIN_POINTS == global_settings.CAMERA_MIN_POINTS
            assert not hasattr(lazy, "lowercase_ignored")

    def test_configure_and_reset(self) -> None:
        """Test manual configuration and reset."""
        lazy = LazySettings()
        lazy.configure(CAMERA_FRICTION=0.5)
        assert lazy.CAMERA_FRICTION == 0.5

        lazy.reset()
        assert not lazy.is_configured()

    def test_setattr(self) -> None:
        """Test assigning a setting directly."""
        settings.CAMERA_MAX_POINTS = 20
        assert settings.CAMERA_MAX_POINTS == 20


class TestCameraConfig(unittest.TestCase):
    """Test CameraConfig."""

    def test_defaults(self) -> None:
        """Test documented defaults."""
        config = CameraConfig()

        assert config.max_zoom == 2.0
        assert config.friction == 0.85
        assert config.max_points == 10
        assert config.min_points == 3
        assert config.stop_threshold == 0.1

    def test_from_settings_with_overrides(self) -> None:
        """Test that keyword overrides win over settings."""
        settings.configure(CAMERA_MAX_POINTS=5)

        config = CameraConfig.from_settings(friction=0.6)

        assert config.max_points == 5
        assert config.friction == 0.6

    def test_frozen(self) -> None:
        """Test that configuration cannot change after construction."""
        config = CameraConfig()
        with pytest.raises(AttributeError):
            config.friction = 0.5  # type: ignore[misc]

    def test_invalid_values_rejected(self) -> None:
        """Test domain validation."""
        for kwargs in (
            {"friction": 0.0},
            {"friction": 1.0},
            {"max_zoom": 0},
            {"max_points": 0},
            {"min_points": -1},
            {"stop_threshold": -0.1},
        ):
            with pytest.raises(ValueError, match="must|cannot"):
                CameraConfig(**kwargs)
