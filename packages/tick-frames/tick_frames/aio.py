"""Frame scheduler backed by an asyncio event loop."""
from __future__ import annotations

import asyncio

from tick_frames.types import FrameCallback, RequestId


class AsyncioFrameScheduler:
    """Runs requested callbacks as one batch ``1 / fps`` seconds later on ``loop``.

    Without an explicit loop, the running loop is looked up on first use,
    so the scheduler must be used from inside a coroutine in that case.
    """

    def __init__(self, fps: int = 60, loop: asyncio.AbstractEventLoop | None = None) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._loop = loop
        self._pending: dict[RequestId, FrameCallback] = {}
        self._next_id: RequestId = 1
        self._timer: asyncio.TimerHandle | None = None

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def pending(self) -> int:
        return len(self._pending)

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def request_frame(self, callback: FrameCallback) -> RequestId:
        request_id = self._next_id
        self._next_id += 1
        self._pending[request_id] = callback
        if self._timer is None:
            self._timer = self._get_loop().call_later(self._dt, self._flush)
        return request_id

    def cancel_frame(self, request_id: RequestId) -> None:
        self._pending.pop(request_id, None)
        if not self._pending and self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _flush(self) -> None:
        self._timer = None
        snapshot = self._pending
        self._pending = {}
        queue = iter(snapshot.items())
        try:
            for _, callback in queue:
                callback()
        finally:
            rest = dict(queue)
            if rest:
                rest.update(self._pending)
                self._pending = rest
            if self._pending and self._timer is None:
                self._timer = self._get_loop().call_later(self._dt, self._flush)
