"""Cubic Bezier easing curves.

The curve runs from (0, 0) to (1, 1) through two control points. Easing a
progress value ``x`` means finding the parameter ``t`` where the curve's
x-coordinate equals ``x`` and returning the y-coordinate at that ``t``.

``t`` is found from an 11-entry table of x(t) samples, refined with
Newton-Raphson where the curve is steep enough, and with bisection where
the slope is too shallow for Newton to converge.
"""
from __future__ import annotations

from array import array
from dataclasses import dataclass, field

from tick_microtween.types import InvalidArgumentError

NEWTON_ITERATIONS = 4
NEWTON_MIN_SLOPE = 0.001
SUBDIVISION_PRECISION = 0.0000001
SUBDIVISION_MAX_ITERATIONS = 10

SPLINE_TABLE_SIZE = 11
SAMPLE_STEP_SIZE = 1.0 / (SPLINE_TABLE_SIZE - 1.0)


def _a(a1: float, a2: float) -> float:
    return 1.0 - 3.0 * a2 + 3.0 * a1


def _b(a1: float, a2: float) -> float:
    return 3.0 * a2 - 6.0 * a1


def _c(a1: float) -> float:
    return 3.0 * a1


def calc_bezier(t: float, a1: float, a2: float) -> float:
    """Coordinate at ``t`` for one axis with control values ``a1``, ``a2``."""
    return ((_a(a1, a2) * t + _b(a1, a2)) * t + _c(a1)) * t


def get_slope(t: float, a1: float, a2: float) -> float:
    """Derivative of :func:`calc_bezier` with respect to ``t``."""
    return 3.0 * _a(a1, a2) * t * t + 2.0 * _b(a1, a2) * t + _c(a1)


def _binary_subdivide(x: float, a: float, b: float, x1: float, x2: float) -> float:
    i = 0
    while True:
        current_t = a + (b - a) / 2.0
        current_x = calc_bezier(current_t, x1, x2) - x
        if current_x > 0.0:
            b = current_t
        else:
            a = current_t
        i += 1
        if abs(current_x) <= SUBDIVISION_PRECISION or i >= SUBDIVISION_MAX_ITERATIONS:
            return current_t


def _newton_raphson_iterate(x: float, guess_t: float, x1: float, x2: float) -> float:
    for _ in range(NEWTON_ITERATIONS):
        current_slope = get_slope(guess_t, x1, x2)
        if current_slope == 0.0:
            return guess_t
        current_x = calc_bezier(guess_t, x1, x2) - x
        guess_t -= current_x / current_slope
    return guess_t


@dataclass(frozen=True, slots=True)
class CubicBezier:
    """Easing function defined by control points ``(x1, y1)`` and ``(x2, y2)``.

    Callable: ``curve(t)`` is the eased value. When both control points sit
    on the diagonal the curve is the identity and no samples are taken.
    """

    x1: float
    y1: float
    x2: float
    y2: float
    _samples: array = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not (0.0 <= self.x1 <= 1.0 and 0.0 <= self.x2 <= 1.0):
            raise InvalidArgumentError(
                f"Bezier x values must be in [0, 1] range, got x1={self.x1!r}, x2={self.x2!r}"
            )
        # 32-bit storage is enough: samples only seed the refinement.
        samples = array("f", [0.0] * SPLINE_TABLE_SIZE)
        if not self.is_linear:
            for i in range(SPLINE_TABLE_SIZE):
                samples[i] = calc_bezier(i * SAMPLE_STEP_SIZE, self.x1, self.x2)
        object.__setattr__(self, "_samples", samples)

    @property
    def control_points(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)

    @property
    def is_linear(self) -> bool:
        return self.x1 == self.y1 and self.x2 == self.y2

    def solve_t_for_x(self, x: float) -> float:
        """Curve parameter ``t`` whose x-coordinate is ``x``."""
        if self.is_linear:
            return x
        samples = self._samples
        interval_start = 0.0
        current_sample = 1
        last_sample = SPLINE_TABLE_SIZE - 1

        while current_sample != last_sample and samples[current_sample] <= x:
            interval_start += SAMPLE_STEP_SIZE
            current_sample += 1
        current_sample -= 1

        dist = (x - samples[current_sample]) / (
            samples[current_sample + 1] - samples[current_sample]
        )
        guess_t = interval_start + dist * SAMPLE_STEP_SIZE

        initial_slope = get_slope(guess_t, self.x1, self.x2)
        if initial_slope >= NEWTON_MIN_SLOPE:
            return _newton_raphson_iterate(x, guess_t, self.x1, self.x2)
        if initial_slope == 0.0:
            return guess_t
        return _binary_subdivide(
            x, interval_start, interval_start + SAMPLE_STEP_SIZE, self.x1, self.x2
        )

    def __call__(self, t: float) -> float:
        if self.is_linear:
            return t
        if t == 0:
            return 0.0
        if t == 1:
            return 1.0
        return calc_bezier(self.solve_t_for_x(t), self.y1, self.y2)


def build_curve(x1: float, y1: float, x2: float, y2: float) -> CubicBezier:
    """Build a curve, raising InvalidArgumentError if x1 or x2 is outside [0, 1]."""
    return CubicBezier(x1, y1, x2, y2)


def evaluate(curve: CubicBezier, t: float) -> float:
    return curve(t)
