"""Zoom region domain model"""

import math
from dataclasses import dataclass

from zoomline.models.enums import FocusMode

# Fixed ease duration for every zoom-in / zoom-out. Also used as the gap
# below which a new region resumes an unfinished zoom-out.
ZOOM_DURATION_S = 1.0

# Regions whose boundaries are closer than this are treated as abutting
ABUT_TOLERANCE_MS = 10.0


@dataclass(frozen=True)
class ZoomRegion:
    """
    Immutable zoom region authored on the timeline

    The region owns the half-open interval (start_ms, end_ms]: it becomes
    active just after its start and stays active on its end instant.

    Attributes:
        id: Editor-assigned identifier
        start_ms: Region start on the timeline (milliseconds)
        end_ms: Region end on the timeline (milliseconds)
        scale: Zoom factor (1.0 = no zoom, 2.0 = 2x)
        focus_mode: FIXED or FOLLOW_POINTER
        target_x: Normalized focus x used by FIXED regions (0-1)
        target_y: Normalized focus y used by FIXED regions (0-1)
        is_auto: True for regions generated from cursor clicks
    """
    id: str
    start_ms: float
    end_ms: float
    scale: float = 2.0
    focus_mode: FocusMode = FocusMode.FIXED
    target_x: float = 0.5
    target_y: float = 0.5
    is_auto: bool = False

    @property
    def start_s(self) -> float:
        return self.start_ms / 1000

    @property
    def end_s(self) -> float:
        return self.end_ms / 1000

    @property
    def duration_ms(self) -> float:
        return self.end_ms - self.start_ms

    @property
    def is_valid(self) -> bool:
        """False for regions the engine must skip (empty, inverted or non-finite)"""
        return (
            math.isfinite(self.start_ms)
            and math.isfinite(self.end_ms)
            and self.start_ms < self.end_ms
        )

    def contains(self, time_ms: float) -> bool:
        """True if the region is active at time_ms"""
        return self.start_ms < time_ms <= self.end_ms
