"""Shared types and protocols for the scheduler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class TickContext:
    fire_number: int
    period_ms: int
    now_ms: int
    cancel: Callable[[], None]


TickCallback = Callable[[TickContext], None]


class SchedulerError(Exception):
    """Raised when the scheduler is driven reentrantly."""


@runtime_checkable
class CancelHandle(Protocol):
    """Handle to a scheduled task. Cancelling twice is a no-op."""

    def cancel(self) -> None:
        ...

    @property
    def cancelled(self) -> bool:
        ...


@runtime_checkable
class TaskScheduler(Protocol):
    """The timer utility a countdown needs: periodic and one-shot tasks."""

    def schedule(self, period_ms: int, on_tick: TickCallback) -> CancelHandle:
        ...

    def call_later(self, delay_ms: int, callback: TickCallback) -> CancelHandle:
        ...
