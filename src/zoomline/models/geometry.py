"""
Geometry models - normalized points and crop bounds

All coordinates are fractions of the source frame: (0, 0) is the top-left
corner, (1, 1) the bottom-right one.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizedPoint:
    """Point in normalized frame space"""
    x: float
    y: float

    @classmethod
    def center(cls) -> 'NormalizedPoint':
        return cls(0.5, 0.5)

    def lerp(self, other: 'NormalizedPoint', t: float) -> 'NormalizedPoint':
        """Componentwise linear interpolation towards other"""
        return NormalizedPoint(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
        )


@dataclass(frozen=True)
class Bounds:
    """
    Virtual crop window in normalized frame space

    The window's width encodes the zoom scale: the un-zoomed frame is
    {(0, 0), (1, 1)}, a 2x zoom has width 2. Bounds built from a region
    are square, so the x extent alone is enough to read the scale back.

    Attributes:
        top_left: Upper-left corner
        bottom_right: Lower-right corner
    """
    top_left: NormalizedPoint
    bottom_right: NormalizedPoint

    @property
    def width(self) -> float:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> float:
        return self.bottom_right.y - self.top_left.y

    def lerp(self, other: 'Bounds', t: float) -> 'Bounds':
        """Blend both corners towards other by fraction t"""
        return Bounds(
            self.top_left.lerp(other.top_left, t),
            self.bottom_right.lerp(other.bottom_right, t),
        )
