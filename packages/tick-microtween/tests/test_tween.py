"""Tests for tween scheduling, interpolation, and completion."""

import math

import pytest
from tick_frames import FrameLoop
from tick_microtween import (
    EASINGS,
    FRAME_MS,
    InvalidArgumentError,
    TweenPendingError,
    TweenSpec,
    UnsupportedEasingError,
    frame_count,
    interpolate,
    start_tween,
    tween,
)


class TestFrameCount:
    """Test duration to frame conversion."""

    def test_one_second_is_sixty_frames(self):
        assert frame_count(1000) == 60

    def test_zero_duration(self):
        assert frame_count(0) == 0

    def test_rounds_to_nearest(self):
        assert frame_count(8) == 0
        assert frame_count(9) == 1
        assert frame_count(25) == 2
        assert frame_count(500) == 30

    def test_single_frame_duration(self):
        assert frame_count(FRAME_MS) == 1


class TestInterpolate:
    """Test the per-key interpolation helper."""

    def test_endpoints(self):
        assert interpolate({"x": 1, "y": -4}, {"x": 3, "y": 4}, 0.0) == {"x": 1, "y": -4}
        assert interpolate({"x": 1, "y": -4}, {"x": 3, "y": 4}, 1.0) == {"x": 3, "y": 4}

    def test_midpoint(self):
        assert interpolate({"x": 0}, {"x": 10}, 0.5) == {"x": 5}

    def test_overshoot(self):
        assert interpolate({"x": 0}, {"x": 10}, 1.2) == pytest.approx({"x": 12})


class TestTweenRun:
    """Test a tween driven to completion."""

    def test_one_second_tween_reports_sixty_frames(self):
        """{x:1} -> {x:2} over 1000ms reports 60 frames and resolves with end."""
        loop = FrameLoop(fps=60)
        frames = []

        handle = tween(loop, {"x": 1}, {"x": 2}, 1000, on_frame=frames.append)
        loop.run_until_idle()

        assert len(frames) == 60
        assert handle.done
        assert handle.result() == {"x": 2}

    def test_last_frame_is_exact_end(self):
        """The final frame reports the end values exactly."""
        loop = FrameLoop()
        frames = []

        tween(loop, {"x": 0.1}, {"x": 0.7}, 300, easing="elastic", on_frame=frames.append)
        loop.run_until_idle()

        assert frames[-1] == {"x": 0.7}

    def test_frames_follow_linear_easing(self):
        """Intermediate frames follow start + (end - start) * easing(f / length)."""
        loop = FrameLoop()
        frames = []

        tween(loop, {"x": 0}, {"x": 100}, 10 * FRAME_MS, easing="linear", on_frame=frames.append)
        loop.run_until_idle()

        assert len(frames) == 10
        for i, frame in enumerate(frames[:-1], start=1):
            assert frame["x"] == pytest.approx(i * 10)
        assert frames[-1] == {"x": 100}

    def test_custom_easing_function(self):
        loop = FrameLoop()
        frames = []

        tween(loop, {"x": 0}, {"x": 1}, 4 * FRAME_MS, easing=lambda p: p * p, on_frame=frames.append)
        loop.run_until_idle()

        assert [f["x"] for f in frames] == pytest.approx([1 / 16, 4 / 16, 9 / 16, 1.0])

    def test_default_easing_strictly_increases(self):
        """The default curve moves forward every frame."""
        loop = FrameLoop()
        values = []

        tween(loop, {"thing": 5}, {"thing": 10}, 1000, on_frame=lambda c: values.append(c["thing"]))
        loop.run_until_idle()

        last = 5
        for value in values:
            assert value > last
            last = value
        assert values[-1] == 10

    def test_multiple_keys(self):
        """Every key moves with the same eased progress."""
        loop = FrameLoop()
        frames = []

        tween(loop, {"x": 0, "y": 10}, {"x": 10, "y": 0}, 250, easing="expo", on_frame=frames.append)
        loop.run_until_idle()

        for frame in frames:
            assert set(frame) == {"x", "y"}
            assert frame["x"] + frame["y"] == pytest.approx(10)

    def test_control_point_easing(self):
        loop = FrameLoop()
        handle = tween(loop, {"x": 0}, {"x": 1}, 200, easing=[0.42, 0, 0.58, 1])
        loop.run_until_idle()
        assert handle.result() == {"x": 1}

    def test_without_observer(self):
        loop = FrameLoop()
        handle = tween(loop, {"x": 0}, {"x": 1}, 100)
        assert loop.run_until_idle() == frame_count(100)
        assert handle.result() == {"x": 1}

    def test_unknown_easing_name_still_runs(self):
        loop = FrameLoop()
        handle = tween(loop, {"x": 0}, {"x": 1}, 100, easing="bouncy")
        loop.run_until_idle()
        assert handle.result() == {"x": 1}

    def test_zero_duration_reports_single_frame(self):
        """A zero-length tween reports the end values once."""
        loop = FrameLoop()
        frames = []

        handle = tween(loop, {"x": 0}, {"x": 5}, 0, on_frame=frames.append)
        loop.run_until_idle()

        assert handle.length == 0
        assert frames == [{"x": 5}]
        assert handle.result() == {"x": 5}

    def test_spec_form(self):
        """start_tween accepts a TweenSpec."""
        loop = FrameLoop()
        frames = []
        spec = TweenSpec(start={"a": 0}, end={"a": 2}, duration_ms=100, on_frame=frames.append)

        handle = start_tween(spec, loop)
        loop.run_until_idle()

        assert len(frames) == 6
        assert handle.result() == {"a": 2}

    def test_independent_tweens(self):
        """Tweens on one scheduler complete on their own schedules."""
        loop = FrameLoop()
        short = tween(loop, {"x": 0}, {"x": 1}, 100)
        long = tween(loop, {"y": 0}, {"y": 1}, 200)

        loop.run(6)
        assert short.done
        assert not long.done

        loop.run_until_idle()
        assert long.done
        assert long.result() == {"y": 1}


class TestTweenLifecycle:
    """Test handle state and completion signalling."""

    def test_nothing_reported_before_first_frame(self):
        """Starting a tween only schedules its first frame."""
        loop = FrameLoop()
        frames = []

        handle = tween(loop, {"x": 0}, {"x": 1}, 100, on_frame=frames.append)

        assert frames == []
        assert handle.state == "scheduled"
        assert handle.frame == 0
        assert loop.pending == 1

    def test_running_state(self):
        loop = FrameLoop()
        handle = tween(loop, {"x": 0}, {"x": 1}, 100)

        loop.step()
        assert handle.state == "running"
        assert handle.frame == 1
        assert not handle.done

    def test_completed_state(self):
        loop = FrameLoop()
        handle = tween(loop, {"x": 0}, {"x": 1}, 100)
        loop.run_until_idle()

        assert handle.state == "completed"
        assert handle.frame == handle.length == 6
        assert not handle.cancelled

    def test_result_before_completion_raises(self):
        loop = FrameLoop()
        handle = tween(loop, {"x": 0}, {"x": 1}, 100)
        with pytest.raises(TweenPendingError):
            handle.result()

    def test_done_callback_fires_once(self):
        loop = FrameLoop()
        calls = []
        handle = tween(loop, {"x": 0}, {"x": 1}, 100)
        handle.add_done_callback(lambda h: calls.append(h.result()))

        loop.run_until_idle()
        assert calls == [{"x": 1}]

    def test_late_done_callback_fires_immediately(self):
        loop = FrameLoop()
        handle = tween(loop, {"x": 0}, {"x": 1}, 100)
        loop.run_until_idle()

        calls = []
        handle.add_done_callback(calls.append)
        assert calls == [handle]

    def test_values_are_copied(self):
        """Mutating inputs or reported frames does not affect the tween."""
        loop = FrameLoop()
        start = {"x": 0}
        end = {"x": 1}

        def scribble(current):
            current["x"] = -100

        handle = tween(loop, start, end, 100, on_frame=scribble)
        start["x"] = 50
        end["x"] = 50
        loop.run_until_idle()

        assert handle.result() == {"x": 1}

    def test_observer_errors_propagate(self):
        loop = FrameLoop()

        def boom(current):
            raise RuntimeError("observer failed")

        tween(loop, {"x": 0}, {"x": 1}, 100, on_frame=boom)
        with pytest.raises(RuntimeError, match="observer failed"):
            loop.step()

    def test_observer_error_fails_handle(self):
        """A raising observer settles its handle with the error and stops frames."""
        loop = FrameLoop()
        settled = []
        error = RuntimeError("observer failed")

        def boom(current):
            raise error

        handle = tween(loop, {"x": 0}, {"x": 1}, 100, on_frame=boom)
        handle.add_done_callback(settled.append)
        with pytest.raises(TweenPendingError):
            handle.exception()
        with pytest.raises(RuntimeError):
            loop.step()

        assert handle.state == "failed"
        assert handle.done
        assert handle.exception() is error
        assert settled == [handle]
        with pytest.raises(RuntimeError, match="observer failed"):
            handle.result()
        assert loop.idle

    def test_observer_error_on_last_frame_fails_handle(self):
        loop = FrameLoop()

        def boom(current):
            raise ValueError("last frame")

        handle = tween(loop, {"x": 0}, {"x": 1}, 0, on_frame=boom)
        with pytest.raises(ValueError):
            loop.step()
        assert handle.state == "failed"
        assert isinstance(handle.exception(), ValueError)

    def test_failing_observer_does_not_strand_other_tweens(self):
        """A tween sharing the frame with a failing one still runs to completion."""
        loop = FrameLoop()
        frames = []

        def boom(current):
            raise RuntimeError("observer failed")

        failed = tween(loop, {"x": 0}, {"x": 1}, 100, on_frame=boom)
        healthy = tween(loop, {"y": 0}, {"y": 2}, 100, on_frame=frames.append)

        with pytest.raises(RuntimeError):
            loop.step()
        assert loop.pending == 1

        loop.run_until_idle()
        assert failed.state == "failed"
        assert healthy.state == "completed"
        assert healthy.result() == {"y": 2}
        assert len(frames) == 6
        assert frames[-1] == {"y": 2}

    def test_cancel_after_failure_is_noop(self):
        loop = FrameLoop()

        def boom(current):
            raise RuntimeError("observer failed")

        handle = tween(loop, {"x": 0}, {"x": 1}, 100, on_frame=boom)
        with pytest.raises(RuntimeError):
            loop.step()
        handle.cancel()
        assert handle.state == "failed"
        assert not handle.cancelled


class TestValidation:
    """Test synchronous argument validation."""

    @pytest.mark.parametrize(
        "start, end, duration",
        [
            (None, {"x": 1}, 100),
            ({"x": 1}, None, 100),
            ({"x": 1}, {"x": 2}, None),
            ({"a": 1}, {"a": 1, "b": 2}, 100),
            ({"a": 1, "b": 2}, {"a": 1}, 100),
            ({"a": 1}, {"b": 1}, 100),
            ([1], [2], 100),
            ({"x": 1}, 2, 100),
            ({"x": "1"}, {"x": 2}, 100),
            ({"x": True}, {"x": 2}, 100),
            ({"x": 1}, {"x": 2}, -1),
            ({"x": 1}, {"x": 2}, math.nan),
            ({"x": 1}, {"x": 2}, math.inf),
            ({"x": 1}, {"x": 2}, "100"),
        ],
    )
    def test_invalid_arguments_rejected(self, start, end, duration):
        loop = FrameLoop()
        with pytest.raises(InvalidArgumentError):
            tween(loop, start, end, duration)
        assert loop.idle

    def test_mismatched_keys_message(self):
        loop = FrameLoop()
        with pytest.raises(InvalidArgumentError, match="same keys"):
            tween(loop, {"a": 1}, {"a": 1, "b": 2}, 100)

    def test_unsupported_easing_rejected(self):
        loop = FrameLoop()
        with pytest.raises(UnsupportedEasingError):
            tween(loop, {"x": 0}, {"x": 1}, 100, easing=object())
        assert loop.idle

    def test_invalid_control_points_rejected(self):
        loop = FrameLoop()
        with pytest.raises(InvalidArgumentError):
            tween(loop, {"x": 0}, {"x": 1}, 100, easing=(2, 0, 0, 1))
        assert loop.idle

    def test_empty_maps_allowed(self):
        loop = FrameLoop()
        frames = []
        handle = tween(loop, {}, {}, 50, on_frame=frames.append)
        loop.run_until_idle()
        assert frames == [{}, {}, {}]
        assert handle.result() == {}

    def test_preset_curves_usable_directly(self):
        loop = FrameLoop()
        handle = tween(loop, {"x": 0}, {"x": 1}, 50, easing=EASINGS["circular"])
        loop.run_until_idle()
        assert handle.result() == {"x": 1}
