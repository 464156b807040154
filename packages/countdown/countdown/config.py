"""Countdown configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CountdownConfig:
    """Immutable configuration for a CountdownController.

    Attributes:
        tick_period_ms: Time removed from the countdown on each tick.
        finished_label: Label shown once the countdown reaches zero.
        placeholder_seconds: Duration previewed by the initial idle state.
        finish_hold_ms: How long the finished state stays visible before
            the automatic reset. 0 resets immediately.
    """

    tick_period_ms: int = 1000
    finished_label: str = "Finished!"
    placeholder_seconds: int = 60
    finish_hold_ms: int = 0

    def __post_init__(self) -> None:
        if self.tick_period_ms <= 0:
            raise ValueError(f"tick_period_ms must be > 0, got {self.tick_period_ms}")
        if self.placeholder_seconds < 0:
            raise ValueError(
                f"placeholder_seconds must be >= 0, got {self.placeholder_seconds}"
            )
        if self.finish_hold_ms < 0:
            raise ValueError(f"finish_hold_ms must be >= 0, got {self.finish_hold_ms}")
