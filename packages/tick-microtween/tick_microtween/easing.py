"""Preset easing curves and resolution of easing arguments."""
from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any, Union

from tick_microtween.bezier import CubicBezier, build_curve
from tick_microtween.types import EasingFunction, UnsupportedEasingError

logger = logging.getLogger(__name__)

DEFAULT_EASING = "default"

PRESETS: dict[str, tuple[float, float, float, float]] = {
    "default": (0.25, 0.12, 0.31, 1),
    "linear": (0, 0, 1, 1),
    "easeOut": (0, 0, 0.58, 1),
    "circular": (0, 0.6, 0.4, 1),
    "elastic": (0.53, 1, 0.15, 1.2),
    "elasticStrong": (0.75, -0.5, 0, 1.75),
    "expo": (0.19, 0.85, 0.64, 1.01),
}

EASINGS: dict[str, CubicBezier] = {
    name: build_curve(*points) for name, points in PRESETS.items()
}

_CUBIC_BEZIER_RE = re.compile(r"^cubic-bezier\(([^)]*)\)$")


@dataclass(frozen=True)
class Named:
    """A preset name, or a CSS-style ``cubic-bezier(x1, y1, x2, y2)`` string."""

    name: str


@dataclass(frozen=True)
class ControlPoints:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Direct:
    fn: EasingFunction


EasingInput = Union[Named, ControlPoints, Direct]


def get_preset(name: str) -> CubicBezier:
    """Return the shared preset curve. Raises KeyError if not registered."""
    return EASINGS[name]


def parse_cubic_bezier(text: str) -> tuple[float, float, float, float] | None:
    """Parse ``'cubic-bezier(x1, y1, x2, y2)'``; None if ``text`` is not that form."""
    match = _CUBIC_BEZIER_RE.match(text.strip())
    if match is None:
        return None
    parts = [p.strip() for p in match.group(1).split(",")]
    if len(parts) != 4:
        return None
    try:
        x1, y1, x2, y2 = (float(p) for p in parts)
    except ValueError:
        return None
    return (x1, y1, x2, y2)


def _is_control_points(value: Any) -> bool:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    return len(value) == 4 and all(
        isinstance(v, Real) and not isinstance(v, bool) for v in value
    )


def as_easing_input(value: Any) -> EasingInput:
    """Coerce a raw easing argument into its tagged variant.

    ``None`` means the default preset. Strings are names, sequences of four
    numbers are control points and callables are used directly.
    """
    if isinstance(value, (Named, ControlPoints, Direct)):
        return value
    if value is None:
        return Named(DEFAULT_EASING)
    if isinstance(value, str):
        return Named(value)
    if _is_control_points(value):
        x1, y1, x2, y2 = value
        return ControlPoints(x1, y1, x2, y2)
    if callable(value):
        return Direct(value)
    raise UnsupportedEasingError(
        f"Unsupported easing {value!r}: expected a preset name, "
        "four control points or a callable"
    )


def resolve_easing(value: Any) -> EasingFunction:
    """Turn any accepted easing argument into an easing function.

    Unknown preset names fall back to the default preset with a warning.
    Raises InvalidArgumentError for out-of-range control points and
    UnsupportedEasingError for any other shape.
    """
    easing = as_easing_input(value)
    if isinstance(easing, Direct):
        return easing.fn
    if isinstance(easing, ControlPoints):
        return build_curve(easing.x1, easing.y1, easing.x2, easing.y2)

    curve = EASINGS.get(easing.name)
    if curve is not None:
        return curve
    points = parse_cubic_bezier(easing.name)
    if points is not None:
        return build_curve(*points)
    logger.warning(
        "Unknown easing %r, falling back to %r", easing.name, DEFAULT_EASING
    )
    return EASINGS[DEFAULT_EASING]
