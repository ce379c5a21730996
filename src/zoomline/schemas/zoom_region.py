"""
Zoom region schemas - Pydantic models for editor region payloads

The editor stores regions in camelCase JSON:
    {"id": "r1", "startMs": 1000, "endMs": 3000, "scale": 2.0,
     "targetX": 0.5, "targetY": 0.5, "mode": "manual", "isAuto": false}

"mode" is "auto" (follow the pointer) or "manual" (fixed target).
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from zoomline.models.enums import FocusMode
from zoomline.models.zoom_region import ZoomRegion
from zoomline.utils.enum_helper import EnumHelper

MODE_ALIASES = {
    "AUTO": FocusMode.FOLLOW_POINTER,
    "FOLLOW_POINTER": FocusMode.FOLLOW_POINTER,
    "MANUAL": FocusMode.FIXED,
    "FIXED": FocusMode.FIXED,
}

MODE_NAMES = {
    FocusMode.FOLLOW_POINTER: "auto",
    FocusMode.FIXED: "manual",
}


def parse_focus_mode(value: str) -> FocusMode:
    try:
        return MODE_ALIASES[EnumHelper.normalize(value)]
    except KeyError:
        raise ValueError(f"Invalid zoom mode: {value!r} (expected 'auto' or 'manual')")


class ZoomRegionSchema(BaseModel):
    """Zoom region as sent by the timeline editor"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1, description="Region identifier")
    start_ms: float = Field(alias="startMs", ge=0, description="Region start (ms)")
    end_ms: float = Field(alias="endMs", ge=0, description="Region end (ms)")
    scale: float = Field(2.0, description="Zoom factor, values below 1 are raised to 1")
    target_x: float = Field(0.5, alias="targetX", ge=0, le=1, description="Normalized focus x")
    target_y: float = Field(0.5, alias="targetY", ge=0, le=1, description="Normalized focus y")
    mode: str = Field("auto", description="'auto' follows the pointer, 'manual' uses the target")
    is_auto: bool = Field(False, alias="isAuto", description="Generated from a click event")

    @field_validator("scale")
    @classmethod
    def clamp_scale(cls, value: float) -> float:
        return max(1.0, value)

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, value: str) -> str:
        parse_focus_mode(value)
        return value

    @model_validator(mode="after")
    def validate_interval(self):
        if self.end_ms <= self.start_ms:
            raise ValueError(f"endMs ({self.end_ms}) must be greater than startMs ({self.start_ms})")
        return self

    def to_domain(self) -> ZoomRegion:
        return ZoomRegion(
            id=self.id,
            start_ms=self.start_ms,
            end_ms=self.end_ms,
            scale=self.scale,
            focus_mode=parse_focus_mode(self.mode),
            target_x=self.target_x,
            target_y=self.target_y,
            is_auto=self.is_auto,
        )

    @classmethod
    def from_domain(cls, region: ZoomRegion) -> 'ZoomRegionSchema':
        return cls(
            id=region.id,
            start_ms=region.start_ms,
            end_ms=region.end_ms,
            scale=region.scale,
            target_x=region.target_x,
            target_y=region.target_y,
            mode=MODE_NAMES[region.focus_mode],
            is_auto=region.is_auto,
        )


class ZoomConfigSchema(BaseModel):
    """Project zoom section: {"regions": [...]}"""
    regions: List[ZoomRegionSchema] = Field(default_factory=list)
