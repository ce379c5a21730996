"""
Tests for click-driven zoom region generation.
"""

import pytest

from zoomline.models.auto_zoom import AutoZoomConfig
from zoomline.models.cursor import CursorEvent, CursorRecording
from zoomline.models.enums import CursorEventType, FocusMode
from zoomline.services.auto_zoom_service import apply_auto_zoom, generate_auto_zoom_regions


def _click(ms, x=0.5, y=0.5, kind=CursorEventType.LEFT_CLICK, pressed=True):
    return CursorEvent(ms, x, y, kind, pressed)


def _recording(*events):
    return CursorRecording(1920, 1080, list(events))


class TestAutoZoomConfig:

    def test_defaults(self):
        config = AutoZoomConfig()
        assert config.scale == 2.0
        assert config.hold_duration_ms == 1500
        assert config.min_gap_ms == 500
        assert config.left_clicks_only is True

    def test_scale_clamped(self):
        assert AutoZoomConfig(scale=0.5).scale == 1.0

    @pytest.mark.parametrize("kwargs", [{"hold_duration_ms": 0}, {"min_gap_ms": -1}])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            AutoZoomConfig(**kwargs)


class TestGenerate:

    def test_no_clicks(self, quiet_logger):
        recording = _recording(CursorEvent(0, 0.1, 0.1), CursorEvent(100, 0.2, 0.2))
        assert generate_auto_zoom_regions(recording) == []
        assert "No click events" in quiet_logger.getvalue()

    def test_one_region_per_click(self):
        regions = generate_auto_zoom_regions(_recording(_click(1000, 0.2, 0.3), _click(5000)))
        assert len(regions) == 2

        first = regions[0]
        assert first.start_ms == 1000
        assert first.end_ms == 2500
        assert first.scale == 2.0
        assert first.focus_mode == FocusMode.FOLLOW_POINTER
        assert (first.target_x, first.target_y) == (0.2, 0.3)
        assert first.is_auto
        assert first.id.startswith("auto_zoom_1000_")
        assert len(first.id.rsplit("_", 1)[1]) == 8

    def test_releases_are_ignored(self):
        regions = generate_auto_zoom_regions(_recording(_click(1000, pressed=False)))
        assert regions == []

    def test_close_click_extends_previous(self):
        regions = generate_auto_zoom_regions(_recording(_click(1000), _click(2800)))
        assert len(regions) == 1
        assert regions[0].start_ms == 1000
        assert regions[0].end_ms == 4300

    def test_click_inside_region_extends(self):
        regions = generate_auto_zoom_regions(_recording(_click(1000), _click(1200)))
        assert len(regions) == 1
        assert regions[0].end_ms == 2700

    def test_distant_click_starts_new_region(self):
        regions = generate_auto_zoom_regions(_recording(_click(1000), _click(3000)))
        assert [r.start_ms for r in regions] == [1000, 3000]

    def test_right_clicks_follow_config(self):
        recording = _recording(_click(1000, kind=CursorEventType.RIGHT_CLICK))
        assert generate_auto_zoom_regions(recording) == []

        regions = generate_auto_zoom_regions(recording, AutoZoomConfig(left_clicks_only=False))
        assert len(regions) == 1

    def test_unsorted_clicks_and_clamped_target(self):
        regions = generate_auto_zoom_regions(_recording(_click(9000, 1.4, -0.2), _click(1000)))
        assert [r.start_ms for r in regions] == [1000, 9000]
        assert (regions[1].target_x, regions[1].target_y) == (1.0, 0.0)

    def test_custom_scale_and_hold(self):
        config = AutoZoomConfig(scale=3.0, hold_duration_ms=800)
        region = generate_auto_zoom_regions(_recording(_click(100)), config)[0]
        assert region.scale == 3.0
        assert region.end_ms == 900


class TestApplyAutoZoom:

    def test_replaces_auto_regions_keeps_manual(self, make_region):
        manual = make_region(4000, 6000)
        stale = make_region(0, 1000, is_auto=True)
        generated = generate_auto_zoom_regions(_recording(_click(7000), _click(500)))

        merged = apply_auto_zoom([stale, manual], generated)

        assert stale not in merged
        assert manual in merged
        assert [r.start_ms for r in merged] == [500, 4000, 7000]
