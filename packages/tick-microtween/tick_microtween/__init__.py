"""tick-microtween - Cubic Bezier easing and frame-driven value tweens."""
from __future__ import annotations

from tick_microtween.bezier import CubicBezier, build_curve, evaluate
from tick_microtween.driver import FRAME_MS, frame_count, interpolate, start_tween, tween
from tick_microtween.easing import (
    EASINGS,
    PRESETS,
    ControlPoints,
    Direct,
    EasingInput,
    Named,
    get_preset,
    resolve_easing,
)
from tick_microtween.handle import TweenHandle, TweenSpec
from tick_microtween.types import (
    InvalidArgumentError,
    TweenPendingError,
    UnsupportedEasingError,
)

__all__ = [
    "CubicBezier",
    "build_curve",
    "evaluate",
    "EASINGS",
    "PRESETS",
    "EasingInput",
    "Named",
    "ControlPoints",
    "Direct",
    "get_preset",
    "resolve_easing",
    "TweenSpec",
    "TweenHandle",
    "start_tween",
    "tween",
    "frame_count",
    "interpolate",
    "FRAME_MS",
    "InvalidArgumentError",
    "UnsupportedEasingError",
    "TweenPendingError",
]
