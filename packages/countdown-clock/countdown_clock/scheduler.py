"""Scheduler - cancellable periodic and one-shot tasks, stepped or paced."""
from __future__ import annotations

import itertools
import logging
import time

from countdown_clock.clock import Clock
from countdown_clock.types import SchedulerError, TickCallback, TickContext

logger = logging.getLogger(__name__)

_DEFAULT_RESOLUTION_MS = 50


class ScheduledTask:
    """A periodic or one-shot task owned by a Scheduler.

    Conforms to the CancelHandle protocol. Cancelling takes effect at once:
    a cancelled task never fires again, even if it is already due inside
    the ``advance`` call that is currently running.
    """

    def __init__(
        self,
        seq: int,
        period_ms: int,
        callback: TickCallback,
        next_due_ms: int,
        repeat: bool,
    ) -> None:
        self._seq = seq
        self._period_ms = period_ms
        self._callback = callback
        self._next_due_ms = next_due_ms
        self._repeat = repeat
        self._fire_count = 0
        self._cancelled = False

    @property
    def seq(self) -> int:
        return self._seq

    @property
    def period_ms(self) -> int:
        return self._period_ms

    @property
    def next_due_ms(self) -> int:
        return self._next_due_ms

    @property
    def fire_count(self) -> int:
        return self._fire_count

    @property
    def repeat(self) -> bool:
        return self._repeat

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        """True once the task can no longer fire."""
        return self._cancelled or (not self._repeat and self._fire_count > 0)

    def cancel(self) -> None:
        if not self._cancelled:
            self._cancelled = True
            logger.debug("task %d cancelled after %d fires", self._seq, self._fire_count)

    def _fire(self, now_ms: int) -> None:
        self._fire_count += 1
        if self._repeat:
            # Drift-free: the next due time is anchored to the schedule,
            # not to when this fire happened.
            self._next_due_ms += self._period_ms
        ctx = TickContext(
            fire_number=self._fire_count,
            period_ms=self._period_ms,
            now_ms=now_ms,
            cancel=self.cancel,
        )
        self._callback(ctx)


class Scheduler:
    """Runs tasks against a virtual Clock on a single thread.

    Drive it either by calling ``advance(ms)`` (tests, frame loops) or with
    ``run_forever()`` which paces ``advance`` against wall time. Callbacks
    always run on the thread that drives the scheduler.
    """

    def __init__(
        self, clock: Clock | None = None, resolution_ms: int = _DEFAULT_RESOLUTION_MS
    ) -> None:
        if resolution_ms <= 0:
            raise ValueError("resolution_ms must be positive")
        self._clock = clock if clock is not None else Clock()
        self._resolution_ms = resolution_ms
        self._tasks: list[ScheduledTask] = []
        self._seq = itertools.count(1)
        self._advancing = False
        self._running = False
        self._stop_requested = False

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def now_ms(self) -> int:
        return self._clock.now_ms

    # --- Registration ---

    def schedule(self, period_ms: int, on_tick: TickCallback) -> ScheduledTask:
        """Fire ``on_tick`` every ``period_ms``, first one period from now."""
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        return self._add(period_ms, on_tick, delay_ms=period_ms, repeat=True)

    def call_later(self, delay_ms: int, callback: TickCallback) -> ScheduledTask:
        """Fire ``callback`` once after ``delay_ms``."""
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        return self._add(delay_ms, callback, delay_ms=delay_ms, repeat=False)

    def _add(
        self, period_ms: int, callback: TickCallback, delay_ms: int, repeat: bool
    ) -> ScheduledTask:
        task = ScheduledTask(
            seq=next(self._seq),
            period_ms=period_ms,
            callback=callback,
            next_due_ms=self._clock.now_ms + delay_ms,
            repeat=repeat,
        )
        self._tasks.append(task)
        logger.debug(
            "task %d scheduled (%s, %d ms) at %d ms",
            task.seq, "periodic" if repeat else "once", period_ms, self._clock.now_ms,
        )
        return task

    # --- Queries ---

    def pending(self) -> int:
        """Number of tasks that may still fire."""
        return sum(1 for task in self._tasks if not task.done)

    def next_due_in(self) -> int | None:
        """Milliseconds until the next live task is due. None when idle."""
        due = [task.next_due_ms for task in self._tasks if not task.done]
        if not due:
            return None
        return max(0, min(due) - self._clock.now_ms)

    # --- Driving ---

    def advance(self, ms: int) -> int:
        """Move time forward by ``ms``, firing due tasks in order.

        Tasks fire in due-time order, ties broken by scheduling order.
        Returns the number of fires. Exceptions from callbacks propagate.
        """
        if ms < 0:
            raise ValueError(f"cannot advance by a negative amount, got {ms}")
        if self._advancing:
            raise SchedulerError("advance() is not reentrant")
        self._advancing = True
        target = self._clock.now_ms + ms
        fired = 0
        try:
            while True:
                task = self._next_due(target)
                if task is None:
                    break
                if task.next_due_ms > self._clock.now_ms:
                    self._clock.advance_to(task.next_due_ms)
                task._fire(self._clock.now_ms)
                fired += 1
            self._clock.advance_to(target)
        finally:
            self._advancing = False
            self._tasks = [task for task in self._tasks if not task.done]
        return fired

    def _next_due(self, target: int) -> ScheduledTask | None:
        best: ScheduledTask | None = None
        for task in self._tasks:
            if task.done or task.next_due_ms > target:
                continue
            if best is None or (task.next_due_ms, task.seq) < (best.next_due_ms, best.seq):
                best = task
        return best

    def request_stop(self) -> None:
        self._stop_requested = True

    def run_forever(self, until_idle: bool = False) -> None:
        """Pace ``advance`` against wall time until ``request_stop()``.

        With ``until_idle`` the loop also ends once no task is pending.
        """
        if self._running:
            raise SchedulerError("run_forever() is already running")
        self._running = True
        self._stop_requested = False
        last = time.monotonic()
        try:
            while not self._stop_requested:
                now = time.monotonic()
                elapsed_ms = int((now - last) * 1000)
                last += elapsed_ms / 1000.0
                self.advance(elapsed_ms)
                if self._stop_requested:
                    break
                if until_idle and self.pending() == 0:
                    break
                wait = self.next_due_in()
                sleep_ms = self._resolution_ms if wait is None else min(wait, self._resolution_ms)
                time.sleep(max(sleep_ms, 1) / 1000.0)
        finally:
            self._running = False
