"""Tests for Scheduler: periodic and one-shot tasks, cancellation, pacing."""

import time

import pytest
from countdown_clock import Clock, Scheduler, SchedulerError


class TestPeriodic:
    """Periodic task timing."""

    def test_first_fire_after_one_period(self):
        """A periodic task first fires one full period after scheduling."""
        scheduler = Scheduler()
        fired = []
        scheduler.schedule(1000, lambda ctx: fired.append(ctx.now_ms))

        scheduler.advance(999)
        assert fired == []

        scheduler.advance(1)
        assert fired == [1000]

    def test_fires_once_per_period(self):
        """advance() fires a periodic task once per elapsed period and counts the fires."""
        scheduler = Scheduler()
        fired = []
        scheduler.schedule(1000, lambda ctx: fired.append(ctx.fire_number))

        assert scheduler.advance(3500) == 3
        assert fired == [1, 2, 3]

    def test_context_carries_due_time_not_target(self):
        """Each fire sees the clock at its own due time."""
        scheduler = Scheduler()
        seen = []
        scheduler.schedule(400, lambda ctx: seen.append((ctx.now_ms, ctx.period_ms)))

        scheduler.advance(1000)
        assert seen == [(400, 400), (800, 400)]
        assert scheduler.now_ms == 1000

    def test_drift_free_across_uneven_steps(self):
        """Due times stay on the period grid whatever the step sizes."""
        scheduler = Scheduler()
        seen = []
        scheduler.schedule(1000, lambda ctx: seen.append(ctx.now_ms))

        for step in (300, 900, 50, 1200, 550):
            scheduler.advance(step)

        assert seen == [1000, 2000, 3000]

    def test_non_positive_period_rejected(self):
        """Zero and negative periods raise ValueError."""
        scheduler = Scheduler()
        with pytest.raises(ValueError):
            scheduler.schedule(0, lambda ctx: None)
        with pytest.raises(ValueError):
            scheduler.schedule(-10, lambda ctx: None)

    def test_tasks_fire_in_due_order(self):
        """Tasks interleave by due time; ties go to the task scheduled first."""
        scheduler = Scheduler()
        order = []
        scheduler.schedule(300, lambda ctx: order.append(("slow", ctx.now_ms)))
        scheduler.schedule(200, lambda ctx: order.append(("fast", ctx.now_ms)))

        scheduler.advance(600)

        assert order == [
            ("fast", 200),
            ("slow", 300),
            ("fast", 400),
            ("slow", 600),
            ("fast", 600),
        ]

    def test_ties_fire_in_scheduling_order(self):
        """Tasks due at the same time fire in the order they were scheduled."""
        scheduler = Scheduler()
        order = []
        scheduler.schedule(100, lambda ctx: order.append("a"))
        scheduler.schedule(100, lambda ctx: order.append("b"))

        scheduler.advance(100)
        assert order == ["a", "b"]


class TestCallLater:
    """One-shot tasks."""

    def test_fires_once(self):
        """A one-shot task fires exactly once and then stops being pending."""
        scheduler = Scheduler()
        fired = []
        task = scheduler.call_later(1200, lambda ctx: fired.append(ctx.now_ms))

        scheduler.advance(5000)
        assert fired == [1200]
        assert task.fire_count == 1
        assert task.done
        assert scheduler.pending() == 0

    def test_zero_delay_fires_on_next_advance(self):
        """call_later(0) fires on advance(0)."""
        scheduler = Scheduler()
        fired = []
        scheduler.call_later(0, lambda ctx: fired.append(ctx.now_ms))

        scheduler.advance(0)
        assert fired == [0]

    def test_negative_delay_rejected(self):
        """A negative delay raises ValueError."""
        scheduler = Scheduler()
        with pytest.raises(ValueError):
            scheduler.call_later(-1, lambda ctx: None)


class TestCancellation:
    """Cancel handles."""

    def test_cancel_before_due(self):
        """A task cancelled before it is due never fires."""
        scheduler = Scheduler()
        fired = []
        task = scheduler.schedule(1000, lambda ctx: fired.append(1))

        task.cancel()
        scheduler.advance(5000)

        assert fired == []
        assert task.cancelled
        assert scheduler.pending() == 0

    def test_cancel_is_idempotent(self):
        """Cancelling twice is harmless."""
        scheduler = Scheduler()
        task = scheduler.schedule(1000, lambda ctx: None)
        task.cancel()
        task.cancel()
        assert task.cancelled

    def test_cancel_from_own_callback(self):
        """A task can cancel itself through its TickContext."""
        scheduler = Scheduler()
        fired = []

        def on_tick(ctx):
            fired.append(ctx.fire_number)
            if ctx.fire_number == 2:
                ctx.cancel()

        scheduler.schedule(100, on_tick)
        scheduler.advance(1000)
        assert fired == [1, 2]

    def test_cancel_other_task_mid_advance(self):
        """A task cancelled by an earlier callback in the same advance never fires."""
        scheduler = Scheduler()
        fired = []
        tasks = {}

        def killer(ctx):
            fired.append("killer")
            tasks["victim"].cancel()

        # Same due time; the killer was scheduled first so it fires first.
        scheduler.schedule(100, killer)
        tasks["victim"] = scheduler.schedule(100, lambda ctx: fired.append("victim"))
        scheduler.advance(100)

        assert fired == ["killer"]

    def test_schedule_from_callback(self):
        """Tasks scheduled from a callback fire within the same advance."""
        scheduler = Scheduler()
        fired = []

        def first(ctx):
            fired.append(("first", ctx.now_ms))
            scheduler.call_later(100, lambda c: fired.append(("second", c.now_ms)))

        scheduler.call_later(100, first)
        scheduler.advance(1000)
        assert fired == [("first", 100), ("second", 200)]


class TestAdvance:
    """advance() bookkeeping and errors."""

    def test_advance_moves_clock_to_target(self):
        """advance() leaves the shared clock at the target time."""
        clock = Clock(start_ms=500)
        scheduler = Scheduler(clock=clock)
        scheduler.advance(250)
        assert clock.now_ms == 750
        assert scheduler.clock is clock

    def test_advance_negative_rejected(self):
        """advance() refuses negative steps."""
        scheduler = Scheduler()
        with pytest.raises(ValueError):
            scheduler.advance(-1)

    def test_advance_not_reentrant(self):
        """Calling advance() from a callback raises SchedulerError."""
        scheduler = Scheduler()
        errors = []

        def nested(ctx):
            try:
                scheduler.advance(10)
            except SchedulerError as exc:
                errors.append(exc)

        scheduler.call_later(10, nested)
        scheduler.advance(10)
        assert len(errors) == 1

    def test_callback_exception_propagates(self):
        """Callback errors reach the caller and the scheduler stays usable."""
        scheduler = Scheduler()

        def boom(ctx):
            raise RuntimeError("boom")

        scheduler.call_later(10, boom)
        with pytest.raises(RuntimeError, match="boom"):
            scheduler.advance(100)

        # Scheduler is usable afterwards.
        fired = []
        scheduler.call_later(10, lambda ctx: fired.append(1))
        scheduler.advance(10)
        assert fired == [1]

    def test_next_due_in(self):
        """next_due_in() reports the time to the earliest live task."""
        scheduler = Scheduler()
        assert scheduler.next_due_in() is None

        scheduler.schedule(1000, lambda ctx: None)
        scheduler.call_later(300, lambda ctx: None)
        assert scheduler.next_due_in() == 300

        scheduler.advance(300)
        assert scheduler.next_due_in() == 700

    def test_invalid_resolution(self):
        """A non-positive resolution raises ValueError."""
        with pytest.raises(ValueError):
            Scheduler(resolution_ms=0)


class TestRunForever:
    """Wall-clock pacing."""

    def test_until_idle_returns_when_tasks_done(self):
        """run_forever(until_idle=True) returns once every task has fired."""
        scheduler = Scheduler(resolution_ms=5)
        fired = []
        scheduler.call_later(20, lambda ctx: fired.append(ctx.now_ms))

        start = time.monotonic()
        scheduler.run_forever(until_idle=True)
        elapsed = time.monotonic() - start

        assert fired == [20]
        assert elapsed >= 0.015
        assert elapsed < 2.0

    def test_request_stop_from_callback(self):
        """request_stop() from a callback ends run_forever."""
        scheduler = Scheduler(resolution_ms=5)
        fired = []

        def on_tick(ctx):
            fired.append(ctx.fire_number)
            if ctx.fire_number == 3:
                ctx.cancel()
                scheduler.request_stop()

        scheduler.schedule(10, on_tick)
        scheduler.run_forever()

        assert fired == [1, 2, 3]
        assert scheduler.now_ms >= 30

    def test_nested_run_forever_rejected(self):
        """Starting run_forever() inside itself raises SchedulerError."""
        scheduler = Scheduler(resolution_ms=5)
        errors = []

        def nested(ctx):
            try:
                scheduler.run_forever()
            except SchedulerError as exc:
                errors.append(exc)

        scheduler.call_later(5, nested)
        scheduler.run_forever(until_idle=True)
        assert len(errors) == 1
