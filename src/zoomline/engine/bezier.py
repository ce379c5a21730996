"""
Cubic bezier easing

A canonical easing curve starts at (0, 0), ends at (1, 1) and is shaped by
two control points. Evaluating it for a progress fraction x means finding
the curve parameter t with X(t) = x, then returning Y(t).

X(t) and Y(t) are kept in polynomial form ((a*t + b)*t + c)*t with the
coefficients computed once per curve, so evaluation does not rebuild
anything per frame.
"""

import math
from dataclasses import dataclass, field
from typing import Callable

from zoomline.models.enums import LogCategory
from zoomline.utils.logger import get_category_logger

log = get_category_logger(LogCategory.EASING)

NEWTON_ITERATIONS = 8
BISECTION_ITERATIONS = 64
EPSILON = 1e-6


@dataclass(frozen=True)
class CubicBezier:
    """
    Easing curve defined by its two inner control points

    Attributes:
        x1, y1: First control point
        x2, y2: Second control point
    """
    x1: float
    y1: float
    x2: float
    y2: float

    _cx: float = field(init=False, repr=False, compare=False)
    _bx: float = field(init=False, repr=False, compare=False)
    _ax: float = field(init=False, repr=False, compare=False)
    _cy: float = field(init=False, repr=False, compare=False)
    _by: float = field(init=False, repr=False, compare=False)
    _ay: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        cx = 3.0 * self.x1
        bx = 3.0 * (self.x2 - self.x1) - cx
        cy = 3.0 * self.y1
        by = 3.0 * (self.y2 - self.y1) - cy
        object.__setattr__(self, "_cx", cx)
        object.__setattr__(self, "_bx", bx)
        object.__setattr__(self, "_ax", 1.0 - cx - bx)
        object.__setattr__(self, "_cy", cy)
        object.__setattr__(self, "_by", by)
        object.__setattr__(self, "_ay", 1.0 - cy - by)

    def sample_x(self, t: float) -> float:
        return ((self._ax * t + self._bx) * t + self._cx) * t

    def sample_y(self, t: float) -> float:
        return ((self._ay * t + self._by) * t + self._cy) * t

    def sample_dx(self, t: float) -> float:
        return (3.0 * self._ax * t + 2.0 * self._bx) * t + self._cx

    def __call__(self, x: float) -> float:
        return evaluate(self, x)


def _solve_t_bisection(curve: CubicBezier, x: float) -> float:
    lo, hi = 0.0, 1.0
    t = x
    for _ in range(BISECTION_ITERATIONS):
        current = curve.sample_x(t)
        if abs(current - x) < EPSILON:
            return t
        if current < x:
            lo = t
        else:
            hi = t
        t = (lo + hi) * 0.5
    return t


def _solve_t(curve: CubicBezier, x: float) -> float:
    """Find t in [0, 1] with X(t) ~= x (Newton first, bisection fallback)"""
    t = x
    for _ in range(NEWTON_ITERATIONS):
        error = curve.sample_x(t) - x
        if abs(error) < EPSILON:
            return t
        slope = curve.sample_dx(t)
        if abs(slope) < EPSILON:
            break
        t -= error / slope
        if not 0.0 <= t <= 1.0:
            break
    return _solve_t_bisection(curve, x)


def evaluate(curve: CubicBezier, x: float) -> float:
    """
    Eased output of curve for progress fraction x

    Boundaries short-circuit without iterating. The result is always a
    finite value in [0, 1]; a non-finite solver result is replaced by the
    boundary nearest to x.
    """
    if math.isnan(x) or x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0

    y = curve.sample_y(_solve_t(curve, x))
    if not math.isfinite(y):
        log.debug("Non-finite bezier output replaced", curve=curve, x=x)
        return 0.0 if x < 0.5 else 1.0
    return min(1.0, max(0.0, y))


def solve(curve: CubicBezier) -> Callable[[float], float]:
    """Return a function mapping progress x to the eased value of curve"""
    return lambda x: evaluate(curve, x)


# Zoom-in curve: quick start, long smooth landing
EASE_IN = CubicBezier(0.1, 0.0, 0.3, 1.0)

# Zoom-out curve: symmetric S-curve
EASE_OUT = CubicBezier(0.5, 0.0, 0.5, 1.0)


def ease_in(x: float) -> float:
    return evaluate(EASE_IN, x)


def ease_out(x: float) -> float:
    return evaluate(EASE_OUT, x)
