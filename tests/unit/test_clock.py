"""Unit tests for clock."""

from datetime import datetime, timedelta, timezone

from slurm_metrics.infrastructure.runtime.clock import SystemClock


def test_now():
    """Test getting current time."""
    clock = SystemClock()
    now = clock.now()

    assert isinstance(now, datetime)
    assert now.utcoffset() == timedelta(0)


def test_format_iso():
    """Test formatting timestamp."""
    clock = SystemClock()
    dt = datetime(2025, 1, 15, 10, 30, 45, 123456, tzinfo=timezone.utc)

    assert clock.format_iso(dt) == "2025-01-15T10:30:45.123Z"


def test_format_iso_naive_is_utc():
    """Test naive timestamps are treated as UTC."""
    clock = SystemClock()
    dt = datetime(2025, 1, 15, 10, 30, 0)

    assert clock.format_iso(dt) == "2025-01-15T10:30:00.000Z"


def test_format_iso_converts_offset():
    """Test non-UTC timestamps are converted."""
    clock = SystemClock()
    dt = datetime(2025, 1, 15, 5, 30, 0, tzinfo=timezone(timedelta(hours=-5)))

    assert clock.format_iso(dt) == "2025-01-15T10:30:00.000Z"
