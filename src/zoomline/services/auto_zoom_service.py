"""
Auto-zoom Service

Generates zoom regions from the clicks of a cursor recording and merges
them into an existing region list. Generated regions follow the pointer,
so they pair with a CursorTrack focus provider at playback.
"""

import uuid
from dataclasses import replace
from typing import Iterable, List, Optional

from zoomline.models.auto_zoom import AutoZoomConfig
from zoomline.models.cursor import CursorEvent, CursorRecording
from zoomline.models.enums import CursorEventType, FocusMode, LogCategory
from zoomline.models.zoom_region import ZoomRegion
from zoomline.utils.logger import get_category_logger

log = get_category_logger(LogCategory.AUTO_ZOOM)


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def _is_trigger(event: CursorEvent, config: AutoZoomConfig) -> bool:
    if not event.is_press:
        return False
    return event.event_type == CursorEventType.LEFT_CLICK or not config.left_clicks_only


def _new_region_id(timestamp_ms: float) -> str:
    return f"auto_zoom_{int(timestamp_ms)}_{uuid.uuid4().hex[:8]}"


def generate_auto_zoom_regions(
    recording: CursorRecording,
    config: Optional[AutoZoomConfig] = None
) -> List[ZoomRegion]:
    """
    Build zoom regions from click events

    One region per pressed click, holding the zoom for
    config.hold_duration_ms at the click point. A click that lands less
    than config.min_gap_ms after the previous region ends extends that
    region instead of creating a new one.

    Args:
        recording: Cursor recording with normalized coordinates
        config: Generation settings (None = defaults)

    Returns:
        Regions sorted by start time
    """
    config = config or AutoZoomConfig()
    clicks = sorted(
        (e for e in recording.events if _is_trigger(e, config)),
        key=lambda e: e.timestamp_ms,
    )

    if not clicks:
        log.info("No click events found in cursor recording")
        return []

    log.info(f"Found {len(clicks)} click events", width=recording.width, height=recording.height)

    regions: List[ZoomRegion] = []
    for click in clicks:
        end_ms = click.timestamp_ms + config.hold_duration_ms

        if regions:
            last = regions[-1]
            gap = max(0.0, click.timestamp_ms - last.end_ms)
            if gap < config.min_gap_ms:
                regions[-1] = replace(last, end_ms=max(last.end_ms, end_ms))
                log.debug("Extended zoom region (merged close click)",
                          region=last.id, end_ms=regions[-1].end_ms)
                continue

        region = ZoomRegion(
            id=_new_region_id(click.timestamp_ms),
            start_ms=click.timestamp_ms,
            end_ms=end_ms,
            scale=config.scale,
            focus_mode=FocusMode.FOLLOW_POINTER,
            target_x=_clamp01(click.x),
            target_y=_clamp01(click.y),
            is_auto=True,
        )
        log.debug("Created zoom region", region=region.id,
                  start_ms=region.start_ms, target=f"({region.target_x:.2f}, {region.target_y:.2f})")
        regions.append(region)

    log.info(f"Generated {len(regions)} zoom regions")
    return regions


def apply_auto_zoom(regions: Iterable[ZoomRegion], generated: Iterable[ZoomRegion]) -> List[ZoomRegion]:
    """
    Replace previously generated regions with a new batch

    Manual regions are kept untouched; the result is sorted by start time.
    """
    manual = [r for r in regions if not r.is_auto]
    merged = manual + list(generated)
    merged.sort(key=lambda r: r.start_ms)
    return merged
