"""
Cursor recording models

Cursor events carry normalized coordinates relative to the captured
region. Values outside 0-1 mean the pointer left the capture area.
"""

from dataclasses import dataclass, field
from typing import List

from zoomline.models.enums import CursorEventType

CLICK_EVENT_TYPES = (
    CursorEventType.LEFT_CLICK,
    CursorEventType.RIGHT_CLICK,
    CursorEventType.MIDDLE_CLICK,
)


@dataclass(frozen=True)
class CursorEvent:
    """
    Single cursor sample

    Attributes:
        timestamp_ms: Milliseconds from recording start
        x: Normalized x (0 = left edge of the capture)
        y: Normalized y (0 = top edge of the capture)
        event_type: MOVE, *_CLICK or SCROLL
        pressed: Button state for click events (True = pressed)
    """
    timestamp_ms: float
    x: float
    y: float
    event_type: CursorEventType = CursorEventType.MOVE
    pressed: bool = False

    @property
    def is_click(self) -> bool:
        return self.event_type in CLICK_EVENT_TYPES

    @property
    def is_press(self) -> bool:
        return self.is_click and self.pressed


@dataclass
class CursorRecording:
    """Cursor data captured alongside a screen recording"""
    width: int = 0
    height: int = 0
    events: List[CursorEvent] = field(default_factory=list)

    def moves(self) -> List[CursorEvent]:
        return [e for e in self.events if e.event_type == CursorEventType.MOVE]

    def clicks(self) -> List[CursorEvent]:
        return [e for e in self.events if e.is_click]
