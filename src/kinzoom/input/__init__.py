"""Touch input types."""

from kinzoom.input.touches import Touch, TouchEvent

__all__ = ["Touch", "TouchEvent"]
