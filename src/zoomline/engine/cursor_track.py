"""
Cursor track - pointer position lookup over a cursor recording

A CursorTrack is the focus provider used by FOLLOW_POINTER regions: it is
callable with a timestamp in milliseconds and returns a NormalizedPoint.
Positions between samples are linearly interpolated; timestamps outside
the recording clamp to the nearest sample.
"""

from bisect import bisect_right
from typing import List, Optional

from zoomline.models.cursor import CursorEvent, CursorRecording
from zoomline.models.enums import LogCategory
from zoomline.models.geometry import NormalizedPoint
from zoomline.utils.logger import get_category_logger

log = get_category_logger(LogCategory.CURSOR)


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


class CursorTrack:
    """
    Time-indexed pointer positions

    Example:
        track = CursorTrack.from_recording(recording)
        point = track.position_at(1250)

        # Tracks are focus providers
        state = compute_zoom_state(regions, 1250, track)
    """

    def __init__(self, samples: Optional[List[CursorEvent]] = None):
        ordered = sorted(samples or [], key=lambda e: e.timestamp_ms)
        self._times = [e.timestamp_ms for e in ordered]
        self._points = [NormalizedPoint(_clamp01(e.x), _clamp01(e.y)) for e in ordered]

    @classmethod
    def from_recording(cls, recording: CursorRecording) -> 'CursorTrack':
        moves = recording.moves()
        log.debug("Cursor track built", samples=len(moves), events=len(recording.events))
        return cls(moves)

    def __len__(self) -> int:
        return len(self._times)

    def __call__(self, timestamp_ms: float) -> NormalizedPoint:
        return self.position_at(timestamp_ms)

    @property
    def duration_ms(self) -> float:
        if not self._times:
            return 0.0
        return self._times[-1] - self._times[0]

    def position_at(self, timestamp_ms: float) -> NormalizedPoint:
        """Pointer position at timestamp_ms (frame center if there are no samples)"""
        if not self._times:
            return NormalizedPoint.center()

        if timestamp_ms <= self._times[0]:
            return self._points[0]
        if timestamp_ms >= self._times[-1]:
            return self._points[-1]

        index = bisect_right(self._times, timestamp_ms)
        t0, t1 = self._times[index - 1], self._times[index]
        p0, p1 = self._points[index - 1], self._points[index]
        return p0.lerp(p1, (timestamp_ms - t0) / (t1 - t0))
