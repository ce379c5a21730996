"""
State projector - reads camera scale and focus back out of bounds
"""

import math

from zoomline.models.geometry import Bounds
from zoomline.models.zoom_state import ZoomState

# Widths closer to 1 than this are treated as un-zoomed
IDENTITY_TOLERANCE = 1e-3


def to_zoom_state(bounds: Bounds) -> ZoomState:
    """
    Convert bounds to a ZoomState

    Bounds built by the region mapper satisfy top_left = -focus * (scale - 1),
    so the focus is recovered as -top_left / (scale - 1).
    """
    scale = bounds.width
    if not math.isfinite(scale) or abs(scale - 1.0) < IDENTITY_TOLERANCE:
        return ZoomState.identity()

    center_x = -bounds.top_left.x / (scale - 1.0)
    center_y = -bounds.top_left.y / (scale - 1.0)
    if not (math.isfinite(center_x) and math.isfinite(center_y)):
        return ZoomState.identity()

    return ZoomState(scale, center_x, center_y)
