"""Shared type aliases and error types for tick-microtween."""

from __future__ import annotations

from typing import Callable, Mapping

EasingFunction = Callable[[float], float]

Values = Mapping[str, float]

FrameObserver = Callable[[dict[str, float]], None]


class InvalidArgumentError(ValueError):
    """Raised synchronously for bad curve control points or tween arguments."""


class UnsupportedEasingError(TypeError):
    """Raised when an easing argument is not a name, 4 control points or a callable."""


class TweenPendingError(RuntimeError):
    """Raised when reading the result of a tween that has not completed."""
