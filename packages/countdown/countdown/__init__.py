"""countdown - A single countdown timer driven by a tick scheduler."""
from __future__ import annotations

from countdown.config import CountdownConfig
from countdown.controller import CountdownController
from countdown.input import DurationInput, parse_seconds
from countdown.labels import format_clock
from countdown.state import CountdownState, Phase, TransitionError
from countdown.store import StateStore

__all__ = [
    "CountdownController",
    "CountdownConfig",
    "CountdownState",
    "Phase",
    "StateStore",
    "TransitionError",
    "DurationInput",
    "parse_seconds",
    "format_clock",
]
