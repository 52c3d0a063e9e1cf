"""Touch and pointer events consumed by the camera controller.

Coordinates are screen coordinates with the origin at the top-left corner and
y growing downwards. Adapters for windowing toolkits that use a different
convention (arcade puts the origin at the bottom-left) convert before building
these events.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Touch:
    """A single contact point.

    Attributes:
        x: Screen x coordinate.
        y: Screen y coordinate.
        id: Identifier that stays stable for the lifetime of the contact.
    """

    x: float
    y: float
    id: int


@dataclass
class TouchEvent:
    """A touch lifecycle event.

    Attributes:
        touch: The contact that triggered the event.
        all_touches: Every active contact ordered by arrival, including the
            triggering one (for an end event, the released contact is still listed).
        x: Optional direct x coordinate. Takes precedence over touch.x in
            CameraController.translate_event().
        y: Optional direct y coordinate. Takes precedence over touch.y.
    """

    touch: Touch
    all_touches: list[Touch] = field(default_factory=list)
    x: float | None = None
    y: float | None = None
    propagation_stopped: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        """Default all_touches to the triggering touch alone."""
        if not self.all_touches:
            self.all_touches = [self.touch]

    def stop_propagation(self) -> None:
        """Prevent further listeners from handling this event."""
        self.propagation_stopped = True

    def is_newest(self) -> bool:
        """Check whether the triggering contact is the most recently added one."""
        return self.touch.id == self.all_touches[-1].id
