"""
zoomline - zoom timeline interpolation engine

Turns a list of zoom regions on a video timeline plus a playback timestamp
into a camera state (scale + focus center) and a render-ready transform,
with eased transitions between regions.

Example:
    from zoomline import ZoomRegion, compute_zoom_state, build_transform

    regions = [ZoomRegion("r1", start_ms=1000, end_ms=3000, scale=2.0)]
    state = compute_zoom_state(regions, 2000)
    descriptor = build_transform(state)
"""

from .models import (
    FocusMode,
    TransitionCase,
    NormalizedPoint,
    Bounds,
    ZoomRegion,
    ZoomState,
    InterpolatedZoom,
    TransformOptions,
    TransformDescriptor,
    CursorEvent,
    CursorRecording,
    AutoZoomConfig,
    ZOOM_DURATION_S,
)
from .engine import (
    CubicBezier,
    EASE_IN,
    EASE_OUT,
    CursorTrack,
    ZoomTimeline,
    compute_zoom_state,
    compute_interpolated_zoom,
    build_transform,
    is_zoom_active,
)
from .services import generate_auto_zoom_regions, apply_auto_zoom

__version__ = "0.1.0"

__all__ = [
    'FocusMode',
    'TransitionCase',
    'NormalizedPoint',
    'Bounds',
    'ZoomRegion',
    'ZoomState',
    'InterpolatedZoom',
    'TransformOptions',
    'TransformDescriptor',
    'CursorEvent',
    'CursorRecording',
    'AutoZoomConfig',
    'ZOOM_DURATION_S',
    'CubicBezier',
    'EASE_IN',
    'EASE_OUT',
    'CursorTrack',
    'ZoomTimeline',
    'compute_zoom_state',
    'compute_interpolated_zoom',
    'build_transform',
    'is_zoom_active',
    'generate_auto_zoom_regions',
    'apply_auto_zoom',
]
