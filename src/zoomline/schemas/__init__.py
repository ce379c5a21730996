"""Pydantic schemas for externally supplied payloads"""

from .zoom_region import ZoomRegionSchema, ZoomConfigSchema, parse_focus_mode
from .cursor import CursorEventTypeSchema, CursorEventSchema, CursorRecordingSchema

__all__ = [
    'ZoomRegionSchema',
    'ZoomConfigSchema',
    'parse_focus_mode',
    'CursorEventTypeSchema',
    'CursorEventSchema',
    'CursorRecordingSchema',
]
