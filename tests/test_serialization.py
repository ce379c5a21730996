"""
Tests for editor/recording JSON conversion and the validation schemas.
"""

import json

import pytest
from pydantic import ValidationError

from zoomline.models.enums import CursorEventType, FocusMode
from zoomline.models.zoom_state import TransformDescriptor, ZoomState
from zoomline.schemas.zoom_region import ZoomRegionSchema, parse_focus_mode
from zoomline.utils.serialization import Serializer


REGION_PAYLOAD = {
    "id": "r1",
    "startMs": 1000,
    "endMs": 3000,
    "scale": 2.5,
    "targetX": 0.25,
    "targetY": 0.75,
    "mode": "manual",
    "isAuto": False,
}


class TestRegionPayloads:

    def test_dict_to_region(self):
        region = Serializer.dict_to_region(REGION_PAYLOAD)
        assert region.id == "r1"
        assert region.start_ms == 1000
        assert region.end_ms == 3000
        assert region.scale == 2.5
        assert region.focus_mode == FocusMode.FIXED
        assert (region.target_x, region.target_y) == (0.25, 0.75)
        assert region.is_auto is False

    def test_defaults_follow_pointer(self):
        region = Serializer.dict_to_region({"id": "a", "startMs": 0, "endMs": 500})
        assert region.focus_mode == FocusMode.FOLLOW_POINTER
        assert region.scale == 2.0

    def test_region_to_dict(self, make_region):
        region = make_region(100, 900, scale=3.0, x=0.1, y=0.2, id="z")
        data = Serializer.region_to_dict(region)
        assert data == {
            "id": "z",
            "startMs": 100,
            "endMs": 900,
            "scale": 3.0,
            "targetX": 0.1,
            "targetY": 0.2,
            "mode": "manual",
            "isAuto": False,
        }

    def test_scale_below_one_is_raised(self):
        region = Serializer.dict_to_region({**REGION_PAYLOAD, "scale": 0.4})
        assert region.scale == 1.0

    @pytest.mark.parametrize("override", [
        {"endMs": 1000},
        {"endMs": 500},
        {"startMs": -1},
        {"targetX": 1.5},
        {"mode": "sideways"},
        {"id": ""},
    ])
    def test_invalid_payloads_raise(self, override, quiet_logger):
        with pytest.raises(ValidationError):
            Serializer.dict_to_region({**REGION_PAYLOAD, **override})
        assert "Invalid zoom region payload" in quiet_logger.getvalue()

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            Serializer.dict_to_region({**REGION_PAYLOAD, "endMs": 0})


class TestFocusModeNames:

    @pytest.mark.parametrize("name,expected", [
        ("auto", FocusMode.FOLLOW_POINTER),
        ("followPointer", FocusMode.FOLLOW_POINTER),
        ("follow-pointer", FocusMode.FOLLOW_POINTER),
        ("manual", FocusMode.FIXED),
        ("FIXED", FocusMode.FIXED),
    ])
    def test_parse(self, name, expected):
        assert parse_focus_mode(name) == expected

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            parse_focus_mode("zoomy")

    def test_schema_accepts_field_names(self):
        schema = ZoomRegionSchema(id="x", start_ms=0, end_ms=10, mode="fixed")
        assert schema.to_domain().focus_mode == FocusMode.FIXED


class TestRegionsJson:

    def test_bare_list_is_sorted(self):
        payload = json.dumps([
            {"id": "b", "startMs": 2000, "endMs": 3000},
            {"id": "a", "startMs": 0, "endMs": 1000},
        ])
        regions = Serializer.regions_from_json(payload)
        assert [r.id for r in regions] == ["a", "b"]

    def test_wrapped_object(self):
        payload = json.dumps({"regions": [REGION_PAYLOAD]})
        assert Serializer.regions_from_json(payload)[0].id == "r1"

    def test_round_trip(self, make_region):
        regions = [make_region(0, 1000, id="a"), make_region(1500, 2500, id="b", is_auto=True)]
        assert Serializer.regions_from_json(Serializer.regions_to_json(regions)) == regions

    def test_malformed_json(self, quiet_logger):
        with pytest.raises(json.JSONDecodeError):
            Serializer.regions_from_json("{not json")
        assert "Failed to parse zoom regions" in quiet_logger.getvalue()


class TestCursorRecordings:

    RECORDING = {
        "sampleRate": 100,
        "width": 1920,
        "height": 1080,
        "videoStartOffsetMs": 40,
        "events": [
            {"timestampMs": 940, "x": 0.5, "y": 0.5,
             "eventType": {"type": "leftClick", "pressed": True}},
            {"timestampMs": 20, "x": 0.1, "y": 0.2, "eventType": {"type": "move"}},
            {"timestampMs": 540, "x": 0.4, "y": 0.6, "eventType": {"type": "move"}},
        ],
    }

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "cursor.json"
        path.write_text(json.dumps(self.RECORDING), encoding="utf-8")

        recording = Serializer.load_cursor_recording(path)

        assert (recording.width, recording.height) == (1920, 1080)
        assert [e.timestamp_ms for e in recording.events] == [0, 500, 900]
        click = recording.events[-1]
        assert click.event_type == CursorEventType.LEFT_CLICK
        assert click.is_press
        assert len(recording.moves()) == 2
        assert len(recording.clicks()) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Serializer.load_cursor_recording(tmp_path / "nope.json")

    def test_unknown_event_type(self):
        data = {"events": [{"timestampMs": 0, "x": 0, "y": 0, "eventType": {"type": "teleport"}}]}
        with pytest.raises(ValidationError):
            Serializer.dict_to_cursor_recording(data)


class TestZoomOutput:

    def test_zoom_state_to_dict(self):
        assert Serializer.zoom_state_to_dict(ZoomState(2.0, 0.25, 0.75)) == {
            "scale": 2.0, "centerX": 0.25, "centerY": 0.75,
        }

    def test_transform_to_dict(self):
        data = Serializer.transform_to_dict(TransformDescriptor(2.0, 10.0, -5.0, 30.0, 60.0))
        assert data == {
            "scaleFactor": 2.0,
            "translatePercentX": 10.0,
            "translatePercentY": -5.0,
            "originXPercent": 30.0,
            "originYPercent": 60.0,
        }

    def test_identity_css_is_explicit(self):
        css = Serializer.transform_to_css(TransformDescriptor.identity())
        assert css == {
            "transform": "scale(1.0) translate(0.0%, 0.0%)",
            "transformOrigin": "50.0% 50.0%",
        }

    def test_zoomed_css(self):
        css = Serializer.transform_to_css(TransformDescriptor(2.0, 10.0, -5.0, 30.0, 60.0))
        assert css["transform"] == "scale(2.0) translate(10.0%, -5.0%)"
        assert css["transformOrigin"] == "30.0% 60.0%"
