"""Arcade views."""

from kinzoom.views.camera_view import CameraView

__all__ = ["CameraView"]
