"""tick-frames - Frame scheduling capabilities for tick-microtween."""

from tick_frames.aio import AsyncioFrameScheduler
from tick_frames.loop import FrameLoop
from tick_frames.types import FrameCallback, FrameScheduler, RequestId

__all__ = [
    "FrameLoop",
    "AsyncioFrameScheduler",
    "FrameScheduler",
    "FrameCallback",
    "RequestId",
]
