"""
Zoom interpolator - blends region bounds across transitions

Every zoom-in and zoom-out takes ZOOM_DURATION_S. The branch taken
depends on whether a region is active at the current instant and on the
region before it:

    previous only       -> zoom out to the full frame (EASE_OUT)
    active only         -> zoom in from the full frame (EASE_IN)
    both, abutting      -> cross-blend previous -> active, no un-zoom
    both, short gap     -> resume from wherever the zoom-out was when the
                           new region started
    both, long gap      -> zoom in from the full frame
    neither             -> full frame
"""

from typing import Optional, Sequence

from zoomline.engine.bezier import ease_in, ease_out
from zoomline.engine.bounds import bounds_from_region, clamp01, default_bounds
from zoomline.engine.segment_locator import SegmentContext, locate_ms
from zoomline.models.enums import LogCategory, TransitionCase
from zoomline.models.geometry import NormalizedPoint
from zoomline.models.zoom_region import ABUT_TOLERANCE_MS, ZOOM_DURATION_S, ZoomRegion
from zoomline.models.zoom_state import InterpolatedZoom
from zoomline.utils.logger import get_category_logger

log = get_category_logger(LogCategory.ZOOM)

# Regular region layouts need one level of lookback. The guard only
# matters for pathological (heavily overlapping) region lists.
MAX_RESUME_DEPTH = 4

ZOOM_DURATION_MS = ZOOM_DURATION_S * 1000


def _idle() -> InterpolatedZoom:
    return InterpolatedZoom(0.0, default_bounds(), TransitionCase.IDLE)


def _progress_since(time_ms: float, since_ms: float) -> float:
    return clamp01((time_ms - since_ms) / ZOOM_DURATION_MS)


def interpolate(
    context: SegmentContext,
    focus_point: Optional[NormalizedPoint],
    regions: Sequence[ZoomRegion],
    depth: int = 0
) -> InterpolatedZoom:
    """
    Interpolated bounds and progress for a located instant

    Args:
        context: Locator result for the instant
        focus_point: Live pointer position (FOLLOW_POINTER regions)
        regions: Full sorted region list, needed to look back when a region
                 interrupts a zoom-out
        depth: Current lookback depth

    Returns:
        InterpolatedZoom with progress in [0, 1]
    """
    if depth > MAX_RESUME_DEPTH:
        log.warn("Zoom lookback depth exceeded, using full frame",
                 time_ms=context.time_ms, depth=depth)
        return _idle()

    active, previous, time_ms = context.active, context.previous, context.time_ms

    if active is None and previous is None:
        return _idle()

    if active is None:
        eased = ease_out(_progress_since(time_ms, previous.end_ms))
        prev_bounds = bounds_from_region(previous, focus_point)
        return InterpolatedZoom(
            1.0 - eased,
            prev_bounds.lerp(default_bounds(), eased),
            TransitionCase.ZOOM_OUT,
        )

    t = ease_in(_progress_since(time_ms, active.start_ms))
    active_bounds = bounds_from_region(active, focus_point)

    if previous is None:
        return InterpolatedZoom(t, default_bounds().lerp(active_bounds, t), TransitionCase.FIRST_ZOOM_IN)

    if abs(active.start_ms - previous.end_ms) < ABUT_TOLERANCE_MS:
        prev_bounds = bounds_from_region(previous, focus_point)
        return InterpolatedZoom(1.0, prev_bounds.lerp(active_bounds, t), TransitionCase.CROSS_BLEND)

    if active.start_ms - previous.end_ms < ZOOM_DURATION_MS:
        resume = interpolate(locate_ms(regions, active.start_ms), focus_point, regions, depth + 1)
        return InterpolatedZoom(
            resume.progress * (1.0 - t) + t,
            resume.bounds.lerp(active_bounds, t),
            TransitionCase.RESUME,
        )

    return InterpolatedZoom(t, default_bounds().lerp(active_bounds, t), TransitionCase.SEPARATE)
