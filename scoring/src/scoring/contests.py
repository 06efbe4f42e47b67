"""Contest scoring: lifecycle, favorability, and time-to-start decay."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from skipwire.schemas.cards import ScoreResult
from skipwire.schemas.events import Contest, LifecycleState

from scoring.lifecycle import classify, time_remaining, whole_hours

# Upcoming contests starting within this many hours are favorable
FAVORABLE_LEAD_HOURS = 6
# Active contests with fewer than this many whole hours left are ending soon
ENDING_SOON_HOURS = 1
# Upcoming contests within this window count toward the "upcoming" summary
UPCOMING_WINDOW = timedelta(hours=24)

ACTIVE_SCORE = 100
FAR_FUTURE_SCORE = 10


def contest_state(contest: Contest, now: datetime) -> LifecycleState:
    return classify(now, contest.start_time, contest.end_time)


def contest_time_remaining(contest: Contest, now: datetime) -> timedelta:
    return time_remaining(now, contest.start_time, contest.end_time)


def contest_ending_soon(contest: Contest, now: datetime) -> bool:
    if contest_state(contest, now) is not LifecycleState.ACTIVE:
        return False
    return whole_hours(contest_time_remaining(contest, now)) < ENDING_SOON_HOURS


def contest_favorable(contest: Contest, now: datetime) -> bool:
    """Active, or starting within FAVORABLE_LEAD_HOURS whole hours."""
    state = contest_state(contest, now)
    if state is LifecycleState.ACTIVE:
        return True
    if state is LifecycleState.UPCOMING:
        return whole_hours(contest_time_remaining(contest, now)) <= FAVORABLE_LEAD_HOURS
    return False


def contest_score(contest: Contest, now: datetime) -> int:
    """Score a contest by status and whole hours to start.

    ACTIVE scores 100 and ENDED scores 0. UPCOMING decays linearly through
    three bands (0-6h: 100->80, 6-24h: 80->40, 24-72h: 40->20) and sits at
    10 beyond 72 hours. Intermediate values are truncated.
    """
    state = contest_state(contest, now)
    if state is LifecycleState.ACTIVE:
        return ACTIVE_SCORE
    if state is LifecycleState.ENDED:
        return 0

    hours = whole_hours(contest_time_remaining(contest, now))
    if hours <= 6:
        return int(100 - hours * 3.33)
    if hours <= 24:
        return int(80 - (hours - 6) * 2.22)
    if hours <= 72:
        return int(40 - (hours - 24) * 0.42)
    return FAR_FUTURE_SCORE


def score_contest(contest: Contest, now: datetime) -> ScoreResult:
    return ScoreResult(
        state=contest_state(contest, now),
        score=contest_score(contest, now),
        favorable=contest_favorable(contest, now),
    )


def summarize_contests(contests: Iterable[Contest], now: datetime) -> dict[str, int]:
    """Count active contests and those starting within the next 24 hours."""
    active_count = 0
    upcoming_count = 0
    total_count = 0
    for contest in contests:
        total_count += 1
        state = contest_state(contest, now)
        if state is LifecycleState.ACTIVE:
            active_count += 1
        elif (
            state is LifecycleState.UPCOMING
            and contest_time_remaining(contest, now) <= UPCOMING_WINDOW
        ):
            upcoming_count += 1
    return {
        "active_count": active_count,
        "upcoming_count": upcoming_count,
        "total_count": total_count,
    }
