"""
Zoom output models

ZoomState is the camera (scale + focus center) derived from interpolated
bounds; TransformDescriptor is the render-ready form handed to whatever
draws the preview surface.
"""

from dataclasses import dataclass
from typing import Optional

from zoomline.models.enums import TransitionCase
from zoomline.models.geometry import Bounds


@dataclass(frozen=True)
class ZoomState:
    """Camera scale and normalized focus center"""
    scale: float = 1.0
    center_x: float = 0.5
    center_y: float = 0.5

    @classmethod
    def identity(cls) -> 'ZoomState':
        return cls(1.0, 0.5, 0.5)


@dataclass(frozen=True)
class InterpolatedZoom:
    """
    Raw interpolator output before projection

    Attributes:
        progress: How far into the zoomed state the timeline is (0-1)
        bounds: Blended crop bounds
        case: Interpolator branch that produced the value
    """
    progress: float
    bounds: Bounds
    case: TransitionCase = TransitionCase.IDLE


@dataclass(frozen=True)
class TransformOptions:
    """
    Edge clamping options for the transform builder

    Attributes:
        frame_width: Preview frame width in pixels
        frame_height: Preview frame height in pixels
        edge_padding_px: Padding around the frame (None or 0 = no padding)
        corner_radius_px: Rounded corner radius applied with padding
    """
    frame_width: float = 1920.0
    frame_height: float = 1080.0
    edge_padding_px: Optional[float] = None
    corner_radius_px: Optional[float] = None

    def __post_init__(self):
        if not self.frame_width > 0 or not self.frame_height > 0:
            raise ValueError(
                f"Frame dimensions must be positive, got {self.frame_width}x{self.frame_height}"
            )
        if self.edge_padding_px is not None and self.edge_padding_px < 0:
            raise ValueError(f"edge_padding_px must be >= 0, got {self.edge_padding_px}")
        if self.corner_radius_px is not None and self.corner_radius_px < 0:
            raise ValueError(f"corner_radius_px must be >= 0, got {self.corner_radius_px}")

    @property
    def has_padding(self) -> bool:
        return bool(self.edge_padding_px)

    @property
    def has_rounding(self) -> bool:
        return bool(self.corner_radius_px)


@dataclass(frozen=True)
class TransformDescriptor:
    """
    Render-ready 2D transform

    Applied as scale(scale_factor) translate(x%, y%) around the origin
    point (origin_x_percent, origin_y_percent).
    """
    scale_factor: float = 1.0
    translate_percent_x: float = 0.0
    translate_percent_y: float = 0.0
    origin_x_percent: float = 50.0
    origin_y_percent: float = 50.0

    @classmethod
    def identity(cls) -> 'TransformDescriptor':
        return cls()

    @property
    def is_identity(self) -> bool:
        return (
            self.scale_factor == 1.0
            and self.translate_percent_x == 0.0
            and self.translate_percent_y == 0.0
        )
