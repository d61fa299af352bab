"""Unit tests for sshells.timer."""

import threading

from sshells.timer import TimerController, TimerState


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestCountdown:
    def test_starts_active_with_deadline(self):
        clock = FakeClock()
        timer = TimerController(3, clock=clock)

        assert timer.state is TimerState.ACTIVE
        assert timer.deadline == 103.0

    def test_remaining_seconds_round_up(self):
        clock = FakeClock()
        timer = TimerController(3, clock=clock)

        assert timer.tick().remaining == 3
        clock.now = 100.5
        assert timer.tick().remaining == 3
        clock.now = 101.0
        assert timer.tick().remaining == 2
        clock.now = 102.99
        tick = timer.tick()
        assert tick.remaining == 1
        assert tick.state is TimerState.ACTIVE
        assert tick.transitioned is False


class TestExpiry:
    def test_expires_at_deadline_exactly_once(self):
        clock = FakeClock()
        timer = TimerController(3, clock=clock)

        clock.now = 103.0
        first = timer.tick()
        clock.now = 200.0
        second = timer.tick()

        assert first.state is TimerState.EXPIRED
        assert first.transitioned is True
        assert second.state is TimerState.EXPIRED
        assert second.transitioned is False
        assert timer.state is TimerState.EXPIRED

    def test_expired_timer_cannot_be_cancelled(self):
        clock = FakeClock()
        timer = TimerController(0, clock=clock)
        timer.tick()

        assert timer.cancel() is False
        assert timer.state is TimerState.EXPIRED


class TestCancellation:
    def test_first_cancel_transitions(self):
        timer = TimerController(3, clock=FakeClock())

        assert timer.cancel() is True
        assert timer.state is TimerState.CANCELLED

    def test_second_cancel_is_noop(self):
        timer = TimerController(3, clock=FakeClock())
        timer.cancel()

        assert timer.cancel() is False
        assert timer.state is TimerState.CANCELLED

    def test_cancelled_timer_never_expires(self):
        clock = FakeClock()
        timer = TimerController(3, clock=clock)
        timer.cancel()

        clock.now = 1000.0
        tick = timer.tick()

        assert tick.state is TimerState.CANCELLED
        assert tick.transitioned is False

    def test_concurrent_cancels_transition_once(self):
        timer = TimerController(3, clock=FakeClock())
        results: list[bool] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(timer.cancel())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results.count(True) == 1
