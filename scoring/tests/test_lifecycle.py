"""Tests for lifecycle classification and duration helpers."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from skipwire.schemas.events import LifecycleState

from scoring.lifecycle import classify, time_remaining, whole_hours, whole_minutes

START = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
END = datetime(2026, 3, 2, 12, 0, tzinfo=UTC)


def test_classify_upcoming_active_ended():
    assert classify(START - timedelta(seconds=1), START, END) is LifecycleState.UPCOMING
    assert classify(START + timedelta(hours=3), START, END) is LifecycleState.ACTIVE
    assert classify(END + timedelta(seconds=1), START, END) is LifecycleState.ENDED


def test_classify_is_inclusive_at_both_ends():
    assert classify(START, START, END) is LifecycleState.ACTIVE
    assert classify(END, START, END) is LifecycleState.ACTIVE


def test_classify_zero_length_interval():
    assert classify(START, START, START) is LifecycleState.ACTIVE


def test_classify_matches_closed_interval_everywhere():
    for minutes in range(-90, 24 * 60 + 90, 15):
        now = START + timedelta(minutes=minutes)
        state = classify(now, START, END)
        assert (state is LifecycleState.ACTIVE) == (START <= now <= END)


def test_time_remaining_by_state():
    assert time_remaining(START - timedelta(hours=2), START, END) == timedelta(hours=2)
    assert time_remaining(START + timedelta(hours=20), START, END) == timedelta(hours=4)
    assert time_remaining(END + timedelta(hours=1), START, END) == timedelta(hours=-1)


def test_whole_hours_truncates_toward_zero():
    assert whole_hours(timedelta(hours=5, minutes=59)) == 5
    assert whole_hours(timedelta(hours=-1, minutes=-30)) == -1
    assert whole_hours(timedelta(minutes=59)) == 0


def test_whole_minutes_truncates_toward_zero():
    assert whole_minutes(timedelta(minutes=5, seconds=59)) == 5
    assert whole_minutes(timedelta(seconds=-90)) == -1
