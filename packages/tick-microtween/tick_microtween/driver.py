"""Frame-by-frame interpolation driver."""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from numbers import Real
from typing import TYPE_CHECKING, Any

from tick_microtween.easing import resolve_easing
from tick_microtween.handle import TweenHandle, TweenSpec
from tick_microtween.types import FrameObserver, InvalidArgumentError, Values

if TYPE_CHECKING:
    from tick_frames import FrameScheduler

logger = logging.getLogger(__name__)

# One frame at 60 Hz.
FRAME_MS = 16.6666


def frame_count(duration_ms: float) -> int:
    """Number of frames a tween of ``duration_ms`` spans, rounded half up."""
    return math.floor(duration_ms / FRAME_MS + 0.5)


def interpolate(start: Values, end: Values, progress: float) -> dict[str, float]:
    return {key: start[key] + (end[key] - start[key]) * progress for key in start}


def _validate_values(name: str, values: Any) -> dict[str, float]:
    if values is None:
        raise InvalidArgumentError(f"'{name}' is required")
    if not isinstance(values, Mapping):
        raise InvalidArgumentError(
            f"'{name}' must be a mapping of names to numbers, got {type(values).__name__}"
        )
    for key, value in values.items():
        if not isinstance(value, Real) or isinstance(value, bool):
            raise InvalidArgumentError(f"'{name}[{key!r}]' must be a number, got {value!r}")
    return dict(values)


def _validate(spec: TweenSpec) -> tuple[dict[str, float], dict[str, float], float]:
    start = _validate_values("start", spec.start)
    end = _validate_values("end", spec.end)
    if start.keys() != end.keys():
        raise InvalidArgumentError(
            f"'start' and 'end' must have the same keys, got {sorted(start)} and {sorted(end)}"
        )
    duration = spec.duration_ms
    if duration is None:
        raise InvalidArgumentError("'duration_ms' is required")
    if not isinstance(duration, Real) or isinstance(duration, bool):
        raise InvalidArgumentError(f"'duration_ms' must be a number, got {duration!r}")
    if not math.isfinite(duration) or duration < 0:
        raise InvalidArgumentError(
            f"'duration_ms' must be finite and non-negative, got {duration!r}"
        )
    return start, end, float(duration)


def start_tween(spec: TweenSpec, scheduler: FrameScheduler) -> TweenHandle:
    """Validate ``spec`` and schedule its first frame.

    Every scheduled frame advances the tween by one step and reports the
    interpolated values to ``spec.on_frame``. The last frame reports the
    end values exactly and completes the handle, so a tween spanning N
    frames reports N times. If ``on_frame`` raises, the handle fails with
    that exception, no further frame is requested and the exception
    propagates to the scheduler.
    """
    start, end, duration = _validate(spec)
    easing = resolve_easing(spec.easing)
    on_frame = spec.on_frame
    length = frame_count(duration)
    handle = TweenHandle(end, length)

    def report(values: dict[str, float]) -> None:
        if on_frame is None:
            return
        try:
            on_frame(values)
        except Exception as exc:
            handle.fail(exc)
            raise

    def advance() -> None:
        if handle.done:
            return

        frame = handle.begin_frame()
        if frame >= length:
            report(dict(end))
            if not handle.done:
                handle.resolve()
                logger.debug("Tween completed after %d frames", frame)
            return

        report(interpolate(start, end, easing(frame / length)))
        if not handle.done:
            scheduler.request_frame(advance)

    scheduler.request_frame(advance)
    logger.debug("Tween started: %d frames over %.1f ms", length, duration)
    return handle


def tween(
    scheduler: FrameScheduler,
    start: Values | None,
    end: Values | None,
    duration_ms: float | None,
    easing: Any = None,
    on_frame: FrameObserver | None = None,
) -> TweenHandle:
    """Keyword form of :func:`start_tween`."""
    spec = TweenSpec(
        start=start, end=end, duration_ms=duration_ms, easing=easing, on_frame=on_frame
    )
    return start_tween(spec, scheduler)
