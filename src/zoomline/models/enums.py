"""
Enums for the zoom timeline engine
"""

from enum import Enum, auto


class FocusMode(Enum):
    """
    Where a zoom region looks while it is active

    FIXED: Region targets its own (target_x, target_y)
    FOLLOW_POINTER: Region tracks the live pointer position, falling back
                    to its target when no pointer sample is available
    """
    FIXED = auto()
    FOLLOW_POINTER = auto()


class TransitionCase(Enum):
    """Which branch of the interpolator produced a zoom value"""
    IDLE = auto()           # No active region, nothing to zoom out from
    ZOOM_OUT = auto()       # After a region, easing back to the full frame
    FIRST_ZOOM_IN = auto()  # Active region with nothing before it
    CROSS_BLEND = auto()    # Abutting regions, direct scale change
    RESUME = auto()         # New region interrupted an in-flight zoom-out
    SEPARATE = auto()       # Gap long enough that the zoom-out had finished


class CursorEventType(Enum):
    """Cursor recording event kinds"""
    MOVE = auto()
    LEFT_CLICK = auto()
    RIGHT_CLICK = auto()
    MIDDLE_CLICK = auto()
    SCROLL = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()         # Configuration loading, validation
    ZOOM = auto()           # Region location, interpolation, transforms
    EASING = auto()         # Bezier solver fallbacks
    CURSOR = auto()         # Cursor recordings and tracks
    AUTO_ZOOM = auto()      # Region generation from clicks
    SERIALIZATION = auto()  # JSON payload parsing
    SYSTEM = auto()         # Everything else
