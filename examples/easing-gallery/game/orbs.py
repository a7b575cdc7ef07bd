"""Orb state and wave launching."""
from __future__ import annotations

from dataclasses import dataclass, field

from tick_frames import FrameScheduler
from tick_microtween import TweenHandle, tween

from ui.constants import CURVE_W, EASING_NAMES, LABEL_W, LANE_H, TRACK_PAD, TRACK_W


@dataclass
class Orb:
    """One orb per lane. ``x`` and ``t`` are driven by the orb's tween."""

    easing: str
    lane: int
    start_x: float
    end_x: float
    y: float
    x: float = 0.0
    t: float = 0.0  # normalized time, for the curve dot
    handle: TweenHandle | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.x = self.start_x

    @property
    def finished(self) -> bool:
        return self.handle is not None and self.handle.done


def launch_wave(scheduler: FrameScheduler, duration_ms: float) -> list[Orb]:
    """Launch one orb per preset easing, one lane each."""
    track_left = LABEL_W + CURVE_W + TRACK_PAD
    track_right = LABEL_W + CURVE_W + TRACK_W - TRACK_PAD
    orbs = []
    for lane, easing in enumerate(EASING_NAMES):
        orb = Orb(
            easing=easing,
            lane=lane,
            start_x=track_left,
            end_x=track_right,
            y=lane * LANE_H + LANE_H / 2,
        )

        def on_frame(current: dict[str, float], orb: Orb = orb) -> None:
            orb.x = current["x"]
            handle = orb.handle
            if handle is not None and handle.length:
                orb.t = min(handle.frame / handle.length, 1.0)
            else:
                orb.t = 1.0

        orb.handle = tween(
            scheduler,
            {"x": track_left},
            {"x": track_right},
            duration_ms,
            easing=easing,
            on_frame=on_frame,
        )
        orbs.append(orb)
    return orbs


def jump_to_end(orbs: list[Orb]) -> None:
    """Cancel running orbs and snap them to their end positions."""
    for orb in orbs:
        if orb.handle is not None and not orb.handle.done:
            orb.handle.cancel()
            orb.x = orb.handle.result()["x"]
            orb.t = 1.0
