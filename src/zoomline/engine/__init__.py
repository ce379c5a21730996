"""
Zoom engine - easing, region bounds, interpolation and transforms
"""

from .bezier import CubicBezier, EASE_IN, EASE_OUT, evaluate, solve, ease_in, ease_out
from .bounds import default_bounds, bounds_from_region, resolve_focus, lerp_bounds
from .segment_locator import SegmentContext, locate, locate_ms
from .interpolator import interpolate, MAX_RESUME_DEPTH
from .projector import to_zoom_state
from .transform_builder import to_transform
from .cursor_track import CursorTrack
from .zoom_engine import (
    compute_zoom_state,
    compute_interpolated_zoom,
    build_transform,
    is_zoom_active,
    normalize_regions,
    ZoomTimeline,
)

__all__ = [
    'CubicBezier', 'EASE_IN', 'EASE_OUT', 'evaluate', 'solve', 'ease_in', 'ease_out',
    'default_bounds', 'bounds_from_region', 'resolve_focus', 'lerp_bounds',
    'SegmentContext', 'locate', 'locate_ms',
    'interpolate', 'MAX_RESUME_DEPTH',
    'to_zoom_state',
    'to_transform',
    'CursorTrack',
    'compute_zoom_state', 'compute_interpolated_zoom', 'build_transform',
    'is_zoom_active', 'normalize_regions', 'ZoomTimeline',
]
