"""FrameLoop - deterministic frame stepper with optional real-time pacing."""

import time

from tick_frames.types import FrameCallback, RequestId


class FrameLoop:
    def __init__(self, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._frame_number = 0
        self._pending: dict[RequestId, FrameCallback] = {}
        self._next_id: RequestId = 1
        self._stop_requested: bool = False

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        """Seconds of frame time stepped so far, ``frame_number * dt``."""
        return self._frame_number * self._dt

    @property
    def pending(self) -> int:
        return len(self._pending)

    @property
    def idle(self) -> bool:
        return not self._pending

    def request_frame(self, callback: FrameCallback) -> RequestId:
        request_id = self._next_id
        self._next_id += 1
        self._pending[request_id] = callback
        return request_id

    def cancel_frame(self, request_id: RequestId) -> None:
        self._pending.pop(request_id, None)

    def stop(self) -> None:
        self._stop_requested = True

    def reset(self, frame_number: int = 0) -> None:
        """Rewind the frame counter. Pending requests are kept."""
        self._frame_number = frame_number

    def step(self) -> int:
        """Advance one frame and run every callback requested before it.

        Callbacks requested while the frame runs are queued for the next
        step. If a callback raises, the ones after it in this frame are
        requeued ahead of new requests and the error propagates. Returns
        the number of callbacks in the frame.
        """
        self._frame_number += 1
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
        return len(snapshot)

    def run(self, n: int) -> None:
        self._stop_requested = False
        for _ in range(n):
            self.step()
            if self._stop_requested:
                break

    def run_until_idle(self, max_frames: int | None = None) -> int:
        """Step until no callbacks are pending. Returns frames stepped."""
        self._stop_requested = False
        frames = 0
        while self._pending and not self._stop_requested:
            if max_frames is not None and frames >= max_frames:
                break
            self.step()
            frames += 1
        return frames

    def run_forever(self, stop_when_idle: bool = False) -> None:
        self._stop_requested = False
        dt = self._dt
        while not self._stop_requested:
            if stop_when_idle and not self._pending:
                break
            start = time.monotonic()
            self.step()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
