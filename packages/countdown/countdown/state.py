"""Countdown state snapshot and phase transition table."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from countdown.labels import format_clock


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHING = "finishing"


_TRANSITIONS: dict[Phase, frozenset[Phase]] = {
    Phase.IDLE: frozenset({Phase.IDLE, Phase.RUNNING, Phase.FINISHING}),
    Phase.RUNNING: frozenset({Phase.RUNNING, Phase.FINISHING, Phase.IDLE}),
    Phase.FINISHING: frozenset({Phase.FINISHING, Phase.IDLE}),
}


class TransitionError(Exception):
    """Raised when a phase change is not in the transition table."""

    def __init__(self, old: Phase, new: Phase) -> None:
        self.old = old
        self.new = new
        super().__init__(f"illegal countdown transition {old.value} -> {new.value}")


def check_transition(old: Phase, new: Phase) -> None:
    if new not in _TRANSITIONS[old]:
        raise TransitionError(old, new)


@dataclass(frozen=True, slots=True)
class CountdownState:
    """One immutable snapshot of a countdown.

    ``progress_fraction`` and ``is_running`` are derived, never stored.
    ``initial_ms`` is the interval captured when the run started.
    """

    phase: Phase
    total_duration_seconds: int
    remaining_ms: int
    initial_ms: int
    display_label: str

    @property
    def is_running(self) -> bool:
        return self.phase is not Phase.IDLE

    @property
    def progress_fraction(self) -> float:
        if self.initial_ms <= 0:
            return 0.0
        return min(max(self.remaining_ms / self.initial_ms, 0.0), 1.0)

    @classmethod
    def placeholder(cls, seconds: int) -> CountdownState:
        """Fresh idle state previewing a full ``seconds`` dial."""
        millis = seconds * 1000
        return cls(
            phase=Phase.IDLE,
            total_duration_seconds=0,
            remaining_ms=millis,
            initial_ms=millis,
            display_label=format_clock(millis),
        )

    @classmethod
    def cleared(cls) -> CountdownState:
        """Idle state after a stop or a completed run."""
        return cls(
            phase=Phase.IDLE,
            total_duration_seconds=0,
            remaining_ms=0,
            initial_ms=0,
            display_label="",
        )

    @classmethod
    def running(cls, total_seconds: int, remaining_ms: int, initial_ms: int) -> CountdownState:
        return cls(
            phase=Phase.RUNNING,
            total_duration_seconds=total_seconds,
            remaining_ms=remaining_ms,
            initial_ms=initial_ms,
            display_label=format_clock(remaining_ms),
        )

    @classmethod
    def finishing(cls, total_seconds: int, initial_ms: int, label: str) -> CountdownState:
        return cls(
            phase=Phase.FINISHING,
            total_duration_seconds=total_seconds,
            remaining_ms=0,
            initial_ms=initial_ms,
            display_label=label,
        )
