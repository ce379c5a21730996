"""
Serialization utilities - conversion between domain models and JSON

Provides bidirectional conversion between:
- Zoom regions ↔ editor dicts (camelCase)
- Cursor recording files → CursorRecording
- ZoomState / TransformDescriptor → dicts and CSS strings
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from zoomline.models.cursor import CursorRecording
from zoomline.models.enums import LogCategory
from zoomline.models.zoom_region import ZoomRegion
from zoomline.models.zoom_state import TransformDescriptor, ZoomState
from zoomline.schemas.cursor import CursorRecordingSchema
from zoomline.schemas.zoom_region import ZoomConfigSchema, ZoomRegionSchema
from zoomline.utils.logger import get_logger

log = get_logger().for_category(LogCategory.SERIALIZATION)


class Serializer:
    """Central model serialization for editor and recording JSON"""

    # ========================================================================
    # ZOOM REGIONS
    # ========================================================================

    @staticmethod
    def region_to_dict(region: ZoomRegion) -> Dict[str, Any]:
        """Serialize region to the editor's camelCase dict"""
        return ZoomRegionSchema.from_domain(region).model_dump(by_alias=True)

    @staticmethod
    def dict_to_region(data: Dict[str, Any]) -> ZoomRegion:
        """
        Deserialize an editor dict to ZoomRegion

        Raises:
            ValueError: If the payload is invalid (pydantic ValidationError)
        """
        try:
            return ZoomRegionSchema.model_validate(data).to_domain()
        except ValidationError as e:
            log.error("Invalid zoom region payload", region=data.get("id") if isinstance(data, dict) else None,
                      errors=e.error_count())
            raise

    @staticmethod
    def regions_from_json(payload: Union[str, bytes]) -> List[ZoomRegion]:
        """
        Parse regions from JSON

        Accepts either a bare array of regions or a zoom section object
        {"regions": [...]}. The result is sorted by start time.
        """
        try:
            raw = json.loads(payload)
            if isinstance(raw, list):
                raw = {"regions": raw}
            config = ZoomConfigSchema.model_validate(raw)
        except (json.JSONDecodeError, ValidationError) as e:
            log.error(f"Failed to parse zoom regions: {e}")
            raise

        regions = [r.to_domain() for r in config.regions]
        regions.sort(key=lambda r: r.start_ms)
        log.debug(f"Parsed {len(regions)} zoom regions")
        return regions

    @staticmethod
    def regions_to_json(regions: List[ZoomRegion]) -> str:
        return json.dumps({"regions": [Serializer.region_to_dict(r) for r in regions]})

    # ========================================================================
    # CURSOR RECORDINGS
    # ========================================================================

    @staticmethod
    def dict_to_cursor_recording(data: Dict[str, Any]) -> CursorRecording:
        try:
            return CursorRecordingSchema.model_validate(data).to_domain()
        except ValidationError as e:
            log.error("Invalid cursor recording", errors=e.error_count())
            raise

    @staticmethod
    def load_cursor_recording(path: Union[str, Path]) -> CursorRecording:
        """
        Load a cursor recording JSON file

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a valid recording
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        recording = Serializer.dict_to_cursor_recording(data)
        log.info(f"Loaded cursor recording {path.name}",
                 events=len(recording.events), size=f"{recording.width}x{recording.height}")
        return recording

    # ========================================================================
    # ZOOM OUTPUT
    # ========================================================================

    @staticmethod
    def zoom_state_to_dict(state: ZoomState) -> Dict[str, float]:
        return {"scale": state.scale, "centerX": state.center_x, "centerY": state.center_y}

    @staticmethod
    def transform_to_dict(descriptor: TransformDescriptor) -> Dict[str, float]:
        return {
            "scaleFactor": descriptor.scale_factor,
            "translatePercentX": descriptor.translate_percent_x,
            "translatePercentY": descriptor.translate_percent_y,
            "originXPercent": descriptor.origin_x_percent,
            "originYPercent": descriptor.origin_y_percent,
        }

    @staticmethod
    def transform_to_css(descriptor: TransformDescriptor) -> Dict[str, str]:
        """
        CSS transform properties for a descriptor

        The identity descriptor is still written out explicitly so a
        preview never toggles between "transform" and "no transform".
        """
        return {
            "transform": (
                f"scale({descriptor.scale_factor}) "
                f"translate({descriptor.translate_percent_x}%, {descriptor.translate_percent_y}%)"
            ),
            "transformOrigin": f"{descriptor.origin_x_percent}% {descriptor.origin_y_percent}%",
        }
