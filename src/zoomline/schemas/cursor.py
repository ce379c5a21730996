"""
Cursor recording schemas - Pydantic models for cursor JSON files

Recordings are written by the capture backend in camelCase:
    {"sampleRate": 100, "width": 1920, "height": 1080,
     "videoStartOffsetMs": 40,
     "events": [{"timestampMs": 0, "x": 0.4, "y": 0.6,
                 "eventType": {"type": "move"}},
                {"timestampMs": 900, "x": 0.5, "y": 0.5,
                 "eventType": {"type": "leftClick", "pressed": true}}]}
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from zoomline.models.cursor import CursorEvent, CursorRecording
from zoomline.models.enums import CursorEventType
from zoomline.utils.enum_helper import EnumHelper


class CursorEventTypeSchema(BaseModel):
    """Tagged event kind: {"type": "leftClick", "pressed": true}"""
    type: str
    pressed: Optional[bool] = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        EnumHelper.from_string(CursorEventType, value)
        return value


class CursorEventSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    timestamp_ms: float = Field(alias="timestampMs", ge=0)
    x: float
    y: float
    event_type: CursorEventTypeSchema = Field(alias="eventType")
    cursor_id: Optional[str] = Field(None, alias="cursorId")

    def to_domain(self, offset_ms: float = 0.0) -> CursorEvent:
        return CursorEvent(
            timestamp_ms=max(0.0, self.timestamp_ms - offset_ms),
            x=self.x,
            y=self.y,
            event_type=EnumHelper.from_string(CursorEventType, self.event_type.type),
            pressed=bool(self.event_type.pressed),
        )


class CursorRecordingSchema(BaseModel):
    """Complete cursor recording for one video"""
    model_config = ConfigDict(populate_by_name=True)

    sample_rate: int = Field(100, alias="sampleRate", gt=0)
    width: int = Field(0, ge=0)
    height: int = Field(0, ge=0)
    video_start_offset_ms: float = Field(0.0, alias="videoStartOffsetMs", ge=0)
    events: List[CursorEventSchema] = Field(default_factory=list)

    def to_domain(self) -> CursorRecording:
        """Domain recording with timestamps shifted onto the video timeline"""
        events = [e.to_domain(self.video_start_offset_ms) for e in self.events]
        events.sort(key=lambda e: e.timestamp_ms)
        return CursorRecording(width=self.width, height=self.height, events=events)
