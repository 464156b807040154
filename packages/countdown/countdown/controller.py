"""CountdownController - the countdown state machine."""
from __future__ import annotations

import dataclasses
import logging
from typing import Callable

from countdown_clock import CancelHandle, TaskScheduler, TickContext

from countdown.config import CountdownConfig
from countdown.state import CountdownState, Phase, check_transition
from countdown.store import StateStore

logger = logging.getLogger(__name__)


class CountdownController:
    """Owns the countdown state and the tasks that drive it.

    Commands never raise: negative durations clamp to 0 and a zero
    duration completes on start. Every transition publishes one snapshot
    through the store. At most one tick task exists at a time, and
    ``stop_timer`` cancels it before returning.
    """

    def __init__(
        self, scheduler: TaskScheduler, config: CountdownConfig | None = None
    ) -> None:
        self._scheduler = scheduler
        self._config = config if config is not None else CountdownConfig()
        self._store = StateStore(CountdownState.placeholder(self._config.placeholder_seconds))
        self._tick_handle: CancelHandle | None = None
        self._hold_handle: CancelHandle | None = None

    @property
    def config(self) -> CountdownConfig:
        return self._config

    @property
    def store(self) -> StateStore:
        return self._store

    @property
    def state(self) -> CountdownState:
        return self._store.state

    @property
    def has_active_tick(self) -> bool:
        return self._tick_handle is not None and not self._tick_handle.cancelled

    def subscribe(
        self, handler: Callable[[CountdownState], None], replay: bool = True
    ) -> Callable[[], None]:
        return self._store.subscribe(handler, replay=replay)

    # --- Commands ---

    def set_duration(self, seconds: int) -> None:
        if self.state.is_running:
            logger.debug("set_duration(%d) ignored: countdown in progress", seconds)
            return
        seconds = max(seconds, 0)
        if seconds == self.state.total_duration_seconds:
            return
        self._transition(dataclasses.replace(self.state, total_duration_seconds=seconds))

    def start_timer(self) -> None:
        state = self.state
        if state.is_running:
            logger.debug("start_timer ignored: countdown already %s", state.phase.value)
            return
        total = state.total_duration_seconds
        interval_ms = total * 1000
        if interval_ms == 0:
            logger.info("countdown of 0 s finished on start")
            self._finish(total, 0)
            return
        # Scheduled before publishing so a subscriber that stops the
        # countdown from inside the notification cancels this handle.
        self._tick_handle = self._scheduler.schedule(self._config.tick_period_ms, self._on_tick)
        logger.info("countdown started: %d s", total)
        self._transition(CountdownState.running(total, interval_ms, interval_ms))

    def stop_timer(self) -> None:
        state = self.state
        self._cancel_tasks()
        if state.is_running:
            logger.info("countdown stopped with %d ms remaining", state.remaining_ms)
        cleared = CountdownState.cleared()
        if state != cleared:
            self._transition(cleared)

    def toggle(self) -> None:
        """Stop a running countdown, start an idle one."""
        if self.state.is_running:
            self.stop_timer()
        else:
            self.start_timer()

    # --- Internal ---

    def _on_tick(self, ctx: TickContext) -> None:
        state = self.state
        remaining = max(state.remaining_ms - self._config.tick_period_ms, 0)
        logger.debug("tick %d: %d ms remaining", ctx.fire_number, remaining)
        if remaining > 0:
            self._transition(
                CountdownState.running(state.total_duration_seconds, remaining, state.initial_ms)
            )
            return
        self._cancel_tick()
        logger.info("countdown of %d s finished", state.total_duration_seconds)
        self._finish(state.total_duration_seconds, state.initial_ms)

    def _finish(self, total_seconds: int, initial_ms: int) -> None:
        try:
            self._transition(
                CountdownState.finishing(total_seconds, initial_ms, self._config.finished_label)
            )
        finally:
            # Finishing always leads back to idle, even when a subscriber
            # raised on the finished snapshot.
            if self.state.phase is Phase.FINISHING:
                self._complete()

    def _complete(self) -> None:
        hold = self._config.finish_hold_ms
        if hold == 0:
            self._reset()
        else:
            self._hold_handle = self._scheduler.call_later(hold, self._on_hold_elapsed)

    def _on_hold_elapsed(self, ctx: TickContext) -> None:
        self._hold_handle = None
        self._reset()

    def _reset(self) -> None:
        self._cancel_tasks()
        self._transition(CountdownState.cleared())

    def _cancel_tick(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def _cancel_tasks(self) -> None:
        self._cancel_tick()
        if self._hold_handle is not None:
            self._hold_handle.cancel()
            self._hold_handle = None

    def _transition(self, new: CountdownState) -> None:
        check_transition(self.state.phase, new.phase)
        self._store.publish(new)
