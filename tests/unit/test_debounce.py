"""Unit tests for the resize debouncer."""

import threading

import pytest

from pageenv.reflect.debounce import Debouncer, ThreadingScheduler


class TestTrailingEdge:
    """Tests for the default trailing-edge behaviour."""

    def test_burst_collapses_to_one_call(self, scheduler):
        """Test three events 50ms apart trigger one call 250ms after the last."""
        calls = []
        debounced = Debouncer(lambda: calls.append(scheduler.now), 0.25, scheduler=scheduler)

        debounced()
        scheduler.advance(0.05)
        debounced()
        scheduler.advance(0.05)
        debounced()

        scheduler.advance(0.24)
        assert calls == []

        scheduler.advance(0.02)
        assert len(calls) == 1
        assert calls[0] == pytest.approx(0.35)

        scheduler.advance(1.0)
        assert len(calls) == 1

    def test_single_event(self, scheduler):
        """Test a lone event fires after the wait."""
        calls = []
        debounced = Debouncer(lambda: calls.append(1), 0.25, scheduler=scheduler)

        debounced()
        scheduler.advance(0.25)

        assert calls == [1]

    def test_last_arguments_win(self, scheduler):
        """Test the trailing call uses the final event's arguments."""
        seen = []
        debounced = Debouncer(seen.append, 0.1, scheduler=scheduler)

        debounced("first")
        debounced("second")
        scheduler.advance(0.1)

        assert seen == ["second"]

    def test_separate_bursts_fire_separately(self, scheduler):
        """Test quiet periods longer than the wait split bursts."""
        calls = []
        debounced = Debouncer(lambda: calls.append(1), 0.25, scheduler=scheduler)

        debounced()
        scheduler.advance(0.3)
        debounced()
        scheduler.advance(0.3)

        assert len(calls) == 2

    def test_returns_previous_result(self, scheduler):
        """Test a call returns the most recent completed result."""
        counter = iter(range(10))
        debounced = Debouncer(lambda: next(counter), 0.1, scheduler=scheduler)

        assert debounced() is None
        scheduler.advance(0.1)
        assert debounced() == 0

    def test_cancel(self, scheduler):
        """Test a pending call can be dropped."""
        calls = []
        debounced = Debouncer(lambda: calls.append(1), 0.25, scheduler=scheduler)

        debounced()
        assert debounced.pending is True
        debounced.cancel()
        scheduler.advance(1.0)

        assert calls == []
        assert debounced.pending is False


class TestLeadingEdge:
    """Tests for immediate mode."""

    def test_fires_on_first_event_only(self, scheduler):
        """Test immediate mode runs at the start of a burst and not after."""
        calls = []
        debounced = Debouncer(lambda: calls.append(scheduler.now), 0.25, immediate=True, scheduler=scheduler)

        debounced()
        scheduler.advance(0.1)
        debounced()
        scheduler.advance(1.0)

        assert calls == [0.0]

    def test_rearms_after_quiet_period(self, scheduler):
        """Test a new burst fires again on its leading edge."""
        calls = []
        debounced = Debouncer(lambda: calls.append(1), 0.25, immediate=True, scheduler=scheduler)

        debounced()
        scheduler.advance(0.5)
        debounced()

        assert len(calls) == 2


class TestThreadingScheduler:
    """Tests for the default timer-thread scheduler."""

    def test_runs_callback(self):
        """Test the default scheduler invokes the function on a timer thread."""
        done = threading.Event()
        debounced = Debouncer(done.set, 0.01, scheduler=ThreadingScheduler())

        debounced()

        assert done.wait(timeout=5)

    def test_cancelled_timer_does_not_run(self):
        """Test a cancelled timer never fires."""
        fired = threading.Event()
        timer = ThreadingScheduler().call_later(0.05, fired.set)

        timer.cancel()

        assert not fired.wait(timeout=0.2)
