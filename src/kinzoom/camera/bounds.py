"""Boundary clamping for camera position and scale.

The camera moves a node that is larger than the screen. Its top-left offset is
therefore never positive and never further left (or up) than the point where
the node's far edge meets the screen's far edge:

    screen_extent - node_extent <= offset <= 0

The scale has a lower bound too: the smallest zoom at which the node still
covers the whole screen on both axes. That bound is applied to both axes so a
uniform zoom never exposes an edge on the tighter axis.
"""


def clamp_axis(value: float, screen_extent: float, node_extent: float) -> float:
    """Clamp an offset so the node keeps covering the screen on one axis.

    Args:
        value: Proposed offset of the node's leading edge.
        screen_extent: Screen width (or height).
        node_extent: Current on-screen node width (or height).

    Returns:
        The offset limited to [screen_extent - node_extent, 0].
    """
    value = max(value, screen_extent - node_extent)
    return min(value, 0.0)


def min_scale(screen_width: float, screen_height: float, natural_width: float, natural_height: float) -> float:
    """Return the smallest scale at which the node covers the screen on both axes."""
    return max(screen_width / natural_width, screen_height / natural_height)


def clamp_scale(
    scale_x: float,
    scale_y: float | None,
    minimum: float,
    max_zoom: float,
) -> tuple[float, float]:
    """Clamp a proposed scale pair into [minimum, max_zoom].

    scale_y defaults to scale_x. When max_zoom is below minimum the minimum
    wins, since exposing area outside the content is worse than exceeding the
    configured zoom.
    """
    if scale_y is None:
        scale_y = scale_x
    return (
        max(min(scale_x, max_zoom), minimum),
        max(min(scale_y, max_zoom), minimum),
    )
