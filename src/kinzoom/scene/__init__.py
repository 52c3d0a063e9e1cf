"""Lightweight scene collaborators: a plain node, a screen size and a frame scheduler."""

from kinzoom.scene.node import Node, ScreenSize
from kinzoom.scene.scheduler import FrameScheduler

__all__ = ["FrameScheduler", "Node", "ScreenSize"]
