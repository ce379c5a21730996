"""
Segment locator - finds the region context for a playback time

Regions are expected in ascending start order. Malformed regions
(empty, inverted or non-finite) are skipped as if absent.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from zoomline.models.zoom_region import ZoomRegion


@dataclass(frozen=True)
class SegmentContext:
    """
    Region context at one instant

    Attributes:
        time_ms: Playback time in milliseconds
        active: Region owning this instant, if any
        previous: Region before active, or the last region that ended
                  before this instant when nothing is active
    """
    time_ms: float
    active: Optional[ZoomRegion] = None
    previous: Optional[ZoomRegion] = None

    @property
    def time_s(self) -> float:
        return self.time_ms / 1000


def _previous_valid(regions: Sequence[ZoomRegion], index: int) -> Optional[ZoomRegion]:
    for i in range(index - 1, -1, -1):
        if regions[i].is_valid:
            return regions[i]
    return None


def locate_ms(regions: Sequence[ZoomRegion], time_ms: float) -> SegmentContext:
    """
    Find the active and previous regions at time_ms

    A region is active on (start_ms, end_ms]; two abutting regions hand
    over exactly at the shared boundary.
    """
    for index, region in enumerate(regions):
        if region.is_valid and region.contains(time_ms):
            return SegmentContext(time_ms, region, _previous_valid(regions, index))

    for region in reversed(regions):
        if region.is_valid and region.end_ms <= time_ms:
            return SegmentContext(time_ms, None, region)

    return SegmentContext(time_ms)


def locate(regions: Sequence[ZoomRegion], time_s: float) -> SegmentContext:
    """Same as locate_ms, for a time in seconds"""
    return locate_ms(regions, time_s * 1000)
