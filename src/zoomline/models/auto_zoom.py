"""
Auto-zoom configuration

Controls how zoom regions are generated from the clicks of a cursor
recording.
"""


class AutoZoomConfig:
    """
    Configuration for click-driven zoom region generation

    Attributes:
        scale: Zoom factor of generated regions (clamped to >= 1)
        hold_duration_ms: How long each region holds the zoom after a click
        min_gap_ms: Clicks closer than this to the previous region's end
                    extend that region instead of starting a new one
        left_clicks_only: Ignore right/middle clicks

    Examples:
        # Defaults: 2x zoom, 1.5s hold, merge clicks within 500ms
        config = AutoZoomConfig()

        # Tighter zoom that also reacts to right clicks
        config = AutoZoomConfig(scale=3.0, left_clicks_only=False)
    """

    def __init__(
        self,
        scale: float = 2.0,
        hold_duration_ms: int = 1500,
        min_gap_ms: int = 500,
        left_clicks_only: bool = True
    ):
        if hold_duration_ms <= 0:
            raise ValueError(f"hold_duration_ms must be positive, got {hold_duration_ms}")
        if min_gap_ms < 0:
            raise ValueError(f"min_gap_ms must be >= 0, got {min_gap_ms}")

        self.scale = max(1.0, float(scale))
        self.hold_duration_ms = hold_duration_ms
        self.min_gap_ms = min_gap_ms
        self.left_clicks_only = left_clicks_only

    def __repr__(self):
        return (
            f"AutoZoomConfig({self.scale}x, hold {self.hold_duration_ms}ms, "
            f"gap {self.min_gap_ms}ms, left_only={self.left_clicks_only})"
        )
