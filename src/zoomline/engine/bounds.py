"""
Region bounds mapping

A region's bounds are the frame rectangle scaled by the region's zoom and
shifted so that its focus point lands on itself again. Reading the bounds
back through the projector therefore recovers both scale and focus.
"""

import math
from typing import Optional

from zoomline.models.enums import FocusMode
from zoomline.models.geometry import Bounds, NormalizedPoint
from zoomline.models.zoom_region import ZoomRegion


def default_bounds() -> Bounds:
    """Un-zoomed frame"""
    return Bounds(NormalizedPoint(0.0, 0.0), NormalizedPoint(1.0, 1.0))


def effective_scale(region: ZoomRegion) -> float:
    """Region scale clamped into the zoom-in domain (>= 1)"""
    scale = region.scale
    if not math.isfinite(scale) or scale < 1.0:
        return 1.0
    return scale


def resolve_focus(region: ZoomRegion, focus_point: Optional[NormalizedPoint]) -> NormalizedPoint:
    """Pick the point the region should keep stationary"""
    mode = region.focus_mode
    if mode is FocusMode.FOLLOW_POINTER:
        if focus_point is not None:
            return focus_point
        return NormalizedPoint(region.target_x, region.target_y)
    elif mode is FocusMode.FIXED:
        return NormalizedPoint(region.target_x, region.target_y)
    raise ValueError(f"Unhandled focus mode: {mode}")


def bounds_from_region(region: ZoomRegion, focus_point: Optional[NormalizedPoint] = None) -> Bounds:
    """
    Crop bounds for a fully zoomed region

    Args:
        region: Zoom region
        focus_point: Live pointer position, used by FOLLOW_POINTER regions

    Returns:
        Bounds of width region.scale positioned around the focus point
    """
    focus = resolve_focus(region, focus_point)
    scale = effective_scale(region)

    delta_x = focus.x * scale - focus.x
    delta_y = focus.y * scale - focus.y

    return Bounds(
        NormalizedPoint(0.0 - delta_x, 0.0 - delta_y),
        NormalizedPoint(scale - delta_x, scale - delta_y),
    )


def lerp_bounds(a: Bounds, b: Bounds, t: float) -> Bounds:
    return a.lerp(b, t)


def clamp01(value: float) -> float:
    if value != value:
        return 0.0
    return max(0.0, min(1.0, value))
