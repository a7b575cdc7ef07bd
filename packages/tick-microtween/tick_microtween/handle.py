"""TweenSpec description and TweenHandle completion signal."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Literal

from tick_microtween.types import FrameObserver, TweenPendingError, Values

TweenState = Literal["scheduled", "running", "completed", "failed"]

_DoneCallback = Callable[["TweenHandle"], None]

logger = logging.getLogger(__name__)


@dataclass
class TweenSpec:
    """Everything needed to start one tween.

    ``easing`` accepts a preset name, four control points, a callable or
    one of the variants from :mod:`tick_microtween.easing`.
    """

    start: Values | None
    end: Values | None
    duration_ms: float | None
    easing: Any = None
    on_frame: FrameObserver | None = None


class TweenHandle:
    """One in-flight tween.

    Settles exactly once. The last frame and cancel both resolve with the
    tween's end values; an ``on_frame`` observer that raises fails the
    handle with that exception instead.
    """

    def __init__(self, end: dict[str, float], length: int) -> None:
        self._end = end
        self._length = length
        self._frame = 0
        self._state: TweenState = "scheduled"
        self._cancelled = False
        self._result: dict[str, float] | None = None
        self._exception: BaseException | None = None
        self._callbacks: list[_DoneCallback] = []

    @property
    def state(self) -> TweenState:
        return self._state

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def length(self) -> int:
        return self._length

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._state in ("completed", "failed")

    def result(self) -> dict[str, float]:
        """End values, or the observer's exception if the tween failed."""
        if self._exception is not None:
            raise self._exception
        if self._result is None:
            raise TweenPendingError("Tween has not completed yet")
        return dict(self._result)

    def exception(self) -> BaseException | None:
        if not self.done:
            raise TweenPendingError("Tween has not completed yet")
        return self._exception

    def add_done_callback(self, fn: _DoneCallback) -> None:
        """Call ``fn(handle)`` once settled, or now if already settled."""
        if self.done:
            fn(self)
        else:
            self._callbacks.append(fn)

    def cancel(self) -> None:
        """Stop issuing frames and complete with the end values.

        Takes effect at the next frame boundary; a frame already running
        finishes normally. No-op once the tween has settled.
        """
        if self.done:
            return
        self._cancelled = True
        logger.debug("Tween cancelled at frame %d of %d", self._frame, self._length)
        self.resolve()

    async def wait(self) -> dict[str, float]:
        """Await completion from inside a running event loop."""
        if not self.done:
            future: asyncio.Future[None] = asyncio.get_running_loop().create_future()

            def wake(handle: TweenHandle) -> None:
                if not future.done():
                    future.set_result(None)

            self.add_done_callback(wake)
            await future
        return self.result()

    # -- Frame driver hooks --
    # Called by the per-frame closure in tick_microtween.driver. Each one
    # after settling is a no-op, so a tick racing a cancel cannot settle twice.

    def begin_frame(self) -> int:
        """Mark the tween running and return the 1-based index of the new frame."""
        self._state = "running"
        self._frame += 1
        return self._frame

    def resolve(self) -> None:
        """Complete with the end values and run done callbacks."""
        if self.done:
            return
        self._result = dict(self._end)
        self._settle("completed")

    def fail(self, exc: BaseException) -> None:
        """Settle with ``exc``; :meth:`result` and :meth:`wait` re-raise it."""
        if self.done:
            return
        self._exception = exc
        logger.debug("Tween failed at frame %d of %d: %r", self._frame, self._length, exc)
        self._settle("failed")

    def _settle(self, state: TweenState) -> None:
        self._state = state
        callbacks = self._callbacks
        self._callbacks = []
        for fn in callbacks:
            fn(self)

    def __repr__(self) -> str:
        flag = ", cancelled" if self._cancelled else ""
        return f"TweenHandle({self._state}, frame={self._frame}/{self._length}{flag})"
