"""
Models package - Value types for the zoom timeline engine
"""

from .enums import FocusMode, TransitionCase, CursorEventType, LogLevel, LogCategory
from .geometry import NormalizedPoint, Bounds
from .zoom_region import ZoomRegion, ZOOM_DURATION_S, ABUT_TOLERANCE_MS
from .zoom_state import ZoomState, InterpolatedZoom, TransformOptions, TransformDescriptor
from .cursor import CursorEvent, CursorRecording
from .auto_zoom import AutoZoomConfig

__all__ = [
    'FocusMode',
    'TransitionCase',
    'CursorEventType',
    'LogLevel',
    'LogCategory',
    'NormalizedPoint',
    'Bounds',
    'ZoomRegion',
    'ZOOM_DURATION_S',
    'ABUT_TOLERANCE_MS',
    'ZoomState',
    'InterpolatedZoom',
    'TransformOptions',
    'TransformDescriptor',
    'CursorEvent',
    'CursorRecording',
    'AutoZoomConfig',
]
