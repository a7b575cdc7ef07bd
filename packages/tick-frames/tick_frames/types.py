"""Shared type aliases and protocols for frame scheduling."""

from __future__ import annotations

from typing import Callable, Protocol

FrameCallback = Callable[[], None]

RequestId = int


class FrameScheduler(Protocol):
    """Anything that can invoke a callback at the next frame boundary.

    Implementations make no promise about exact timing, only that
    requested callbacks run in request order, one frame later.
    """

    def request_frame(self, callback: FrameCallback) -> RequestId: ...
