"""Remaining-time labels."""
from __future__ import annotations


def format_clock(millis: int) -> str:
    """Format milliseconds as zero-padded ``mm:ss``.

    Partial seconds are truncated. Minutes keep counting past 59, so an
    hour and a half reads ``90:00``.
    """
    seconds = max(millis, 0) // 1000
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"
