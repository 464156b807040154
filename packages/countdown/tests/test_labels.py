"""Tests for mm:ss formatting."""

from countdown.labels import format_clock


def test_zero():
    """Zero formats as 00:00."""
    assert format_clock(0) == "00:00"


def test_zero_padded():
    """Minutes and seconds are zero-padded to two digits."""
    assert format_clock(2000) == "00:02"
    assert format_clock(65_000) == "01:05"


def test_one_minute_placeholder():
    """60 s formats as 01:00."""
    assert format_clock(60_000) == "01:00"


def test_partial_seconds_truncate():
    """Partial seconds are dropped."""
    assert format_clock(2999) == "00:02"
    assert format_clock(999) == "00:00"


def test_minutes_do_not_wrap_at_an_hour():
    """Minutes keep counting past 59."""
    assert format_clock(90 * 60 * 1000) == "90:00"
    assert format_clock(100 * 60 * 1000 + 1000) == "100:01"


def test_negative_reads_as_zero():
    """Negative input formats as 00:00."""
    assert format_clock(-500) == "00:00"
