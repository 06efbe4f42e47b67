"""Lifecycle state derivation for time-bounded events."""

from __future__ import annotations

from datetime import datetime, timedelta

from skipwire.schemas.events import LifecycleState

_HOUR = timedelta(hours=1)
_MINUTE = timedelta(minutes=1)


def classify(now: datetime, start: datetime, end: datetime) -> LifecycleState:
    """Project (interval, now) onto a lifecycle state.

    Both ends of the interval are inclusive: now == start and now == end
    are ACTIVE.
    """
    if now < start:
        return LifecycleState.UPCOMING
    if now > end:
        return LifecycleState.ENDED
    return LifecycleState.ACTIVE


def time_remaining(now: datetime, start: datetime, end: datetime) -> timedelta:
    """Signed duration to start (UPCOMING), to end (ACTIVE), or negative since end (ENDED)."""
    state = classify(now, start, end)
    if state is LifecycleState.UPCOMING:
        return start - now
    if state is LifecycleState.ACTIVE:
        return end - now
    return -(now - end)


def _truncate(delta: timedelta, unit: timedelta) -> int:
    whole = abs(delta) // unit
    return whole if delta >= timedelta(0) else -whole


def whole_hours(delta: timedelta) -> int:
    """Whole hours in delta, truncated toward zero (5h59m -> 5, -1h30m -> -1)."""
    return _truncate(delta, _HOUR)


def whole_minutes(delta: timedelta) -> int:
    """Whole minutes in delta, truncated toward zero."""
    return _truncate(delta, _MINUTE)
