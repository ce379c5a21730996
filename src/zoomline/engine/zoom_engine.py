"""
Zoom Engine

Entry points used by the render loop. Everything here is a pure function
of its arguments: the playback time is always passed in explicitly, and
the focus provider is called at most once per call so that a single
evaluation sees one consistent pointer position.

ZoomTimeline bundles the per-playback inputs (normalized regions, focus
provider, transform options) so a render loop can hold one object and ask
it for each frame.
"""

from typing import Callable, Iterable, List, Optional, Sequence

from zoomline.engine.interpolator import interpolate
from zoomline.engine.projector import to_zoom_state
from zoomline.engine.segment_locator import locate_ms
from zoomline.engine.bounds import default_bounds
from zoomline.engine.transform_builder import MIN_VISIBLE_SCALE, to_transform
from zoomline.models.enums import LogCategory, TransitionCase
from zoomline.models.geometry import NormalizedPoint
from zoomline.models.zoom_region import ZoomRegion
from zoomline.models.zoom_state import InterpolatedZoom, TransformDescriptor, TransformOptions, ZoomState
from zoomline.utils.logger import get_category_logger

log = get_category_logger(LogCategory.ZOOM)

FocusProvider = Callable[[float], NormalizedPoint]


def compute_interpolated_zoom(
    regions: Optional[Sequence[ZoomRegion]],
    timestamp_ms: float,
    focus_provider: Optional[FocusProvider] = None
) -> InterpolatedZoom:
    """
    Interpolated bounds and progress at timestamp_ms

    Args:
        regions: Zoom regions in ascending start order
        timestamp_ms: Playback time in milliseconds
        focus_provider: Pointer position lookup for FOLLOW_POINTER regions
    """
    if not regions:
        return InterpolatedZoom(0.0, default_bounds(), TransitionCase.IDLE)

    focus_point = focus_provider(timestamp_ms) if focus_provider is not None else None
    return interpolate(locate_ms(regions, timestamp_ms), focus_point, regions)


def compute_zoom_state(
    regions: Optional[Sequence[ZoomRegion]],
    timestamp_ms: float,
    focus_provider: Optional[FocusProvider] = None
) -> ZoomState:
    """Camera state at timestamp_ms (identity when no region applies)"""
    if not regions:
        return ZoomState.identity()
    return to_zoom_state(compute_interpolated_zoom(regions, timestamp_ms, focus_provider).bounds)


def build_transform(state: ZoomState, options: Optional[TransformOptions] = None) -> TransformDescriptor:
    """Render-ready transform for a camera state"""
    return to_transform(state, options)


def is_zoom_active(regions: Optional[Sequence[ZoomRegion]], timestamp_ms: float) -> bool:
    """True if the camera is visibly zoomed at timestamp_ms"""
    return compute_zoom_state(regions, timestamp_ms).scale > MIN_VISIBLE_SCALE


def normalize_regions(regions: Iterable[ZoomRegion]) -> List[ZoomRegion]:
    """Drop malformed regions and sort the rest by start time"""
    valid = []
    for region in regions:
        if region.is_valid:
            valid.append(region)
        else:
            log.debug("Skipping malformed zoom region", region=region.id,
                      start_ms=region.start_ms, end_ms=region.end_ms)
    return sorted(valid, key=lambda r: r.start_ms)


class ZoomTimeline:
    """
    Playback context for the zoom engine

    Holds a sorted, validated copy of the regions together with the focus
    provider and transform options for one preview/export session. The
    timeline never reads a clock: each call takes the timestamp to render.

    Example:
        timeline = ZoomTimeline(regions, focus_provider=track,
                                options=TransformOptions(1920, 1080))

        for timestamp_ms in frame_times:
            descriptor = timeline.transform_at(timestamp_ms)
    """

    def __init__(
        self,
        regions: Iterable[ZoomRegion] = (),
        focus_provider: Optional[FocusProvider] = None,
        options: Optional[TransformOptions] = None
    ):
        self._regions = tuple(normalize_regions(regions))
        self.focus_provider = focus_provider
        self.options = options or TransformOptions()

    @property
    def regions(self) -> Sequence[ZoomRegion]:
        return self._regions

    def interpolated_at(self, timestamp_ms: float) -> InterpolatedZoom:
        return compute_interpolated_zoom(self._regions, timestamp_ms, self.focus_provider)

    def state_at(self, timestamp_ms: float) -> ZoomState:
        return compute_zoom_state(self._regions, timestamp_ms, self.focus_provider)

    def transform_at(self, timestamp_ms: float) -> TransformDescriptor:
        return to_transform(self.state_at(timestamp_ms), self.options)

    def is_zoomed_at(self, timestamp_ms: float) -> bool:
        return self.state_at(timestamp_ms).scale > MIN_VISIBLE_SCALE

    def active_region_at(self, timestamp_ms: float) -> Optional[ZoomRegion]:
        return locate_ms(self._regions, timestamp_ms).active

    def with_regions(self, regions: Iterable[ZoomRegion]) -> 'ZoomTimeline':
        """New timeline with the same provider and options"""
        return ZoomTimeline(regions, self.focus_provider, self.options)
