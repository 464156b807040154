"""countdown-clock - Cancellable periodic tasks on a millisecond clock."""
from __future__ import annotations

from countdown_clock.clock import Clock
from countdown_clock.scheduler import ScheduledTask, Scheduler
from countdown_clock.types import CancelHandle, SchedulerError, TaskScheduler, TickContext

__all__ = [
    "Clock",
    "Scheduler",
    "ScheduledTask",
    "TickContext",
    "CancelHandle",
    "TaskScheduler",
    "SchedulerError",
]
