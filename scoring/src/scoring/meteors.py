"""Meteor shower scoring.

A shower has two nested windows. The visibility window drives the public
lifecycle state; the narrower peak window only feeds the score. Current
ZHR is modelled as a Gaussian around the peak-window midpoint.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import datetime, timedelta

from skipwire.schemas.cards import ScoreResult
from skipwire.schemas.events import LifecycleState, MeteorShower

from scoring.lifecycle import classify, time_remaining, whole_hours
from scoring.numeric import clamp, round_half_up

SIGMA_HOURS = 24.0
NEAR_PEAK_HOURS = 12
NEAR_VISIBILITY_HOURS = 12
PEAK_ENDING_WINDOW = timedelta(hours=6)

PEAK_BASE_SCORE = 85
PEAK_MAX_BONUS = 15
OFF_PEAK_BASE_SCORE = 40
OFF_PEAK_RANGE = 44
FAR_FUTURE_SCORE = 15


def shower_state(shower: MeteorShower, now: datetime) -> LifecycleState:
    return classify(now, shower.visibility_start, shower.visibility_end)


def shower_time_remaining(shower: MeteorShower, now: datetime) -> timedelta:
    return time_remaining(now, shower.visibility_start, shower.visibility_end)


def is_at_peak(shower: MeteorShower, now: datetime) -> bool:
    return shower.peak_start <= now <= shower.peak_end


def peak_midpoint(shower: MeteorShower) -> datetime:
    return shower.peak_start + (shower.peak_end - shower.peak_start) / 2


def time_to_peak(shower: MeteorShower, now: datetime) -> timedelta:
    """Signed duration to peak start; zero during the peak, negative once it has passed."""
    if now < shower.peak_start:
        return shower.peak_start - now
    if now > shower.peak_end:
        return -(now - shower.peak_end)
    return timedelta(0)


def current_zhr(shower: MeteorShower, now: datetime) -> int:
    """Estimated zenithal hourly rate at now.

    0 once ended and 1 while upcoming. While active the Gaussian decay is
    floored at 1.
    """
    state = shower_state(shower, now)
    if state is LifecycleState.ENDED:
        return 0
    if state is LifecycleState.UPCOMING:
        return 1

    hours_from_peak = abs(whole_hours(now - peak_midpoint(shower)))
    decay = math.exp(-0.5 * (hours_from_peak / SIGMA_HOURS) ** 2)
    return max(1, round_half_up(shower.peak_zhr * decay))


def shower_ending_soon(shower: MeteorShower, now: datetime) -> bool:
    """Active with the peak window closing within the next six hours."""
    if shower_state(shower, now) is not LifecycleState.ACTIVE:
        return False
    return shower.peak_end - PEAK_ENDING_WINDOW < now < shower.peak_end


def shower_favorable(shower: MeteorShower, now: datetime) -> bool:
    if is_at_peak(shower, now):
        return True
    state = shower_state(shower, now)
    if state is LifecycleState.ACTIVE:
        hours = whole_hours(shower.peak_start - now)
        return 0 <= hours <= NEAR_PEAK_HOURS
    if state is LifecycleState.UPCOMING:
        return whole_hours(shower.visibility_start - now) <= NEAR_VISIBILITY_HOURS
    return False


def _zhr_ratio(shower: MeteorShower, now: datetime) -> float:
    # A non-positive peak ZHR has no meaningful ratio; treat it as no activity.
    if shower.peak_zhr <= 0:
        return 0.0
    return clamp(current_zhr(shower, now) / shower.peak_zhr, 0.0, 1.0)


def shower_score(shower: MeteorShower, now: datetime) -> int:
    state = shower_state(shower, now)
    if state is LifecycleState.ENDED:
        return 0

    if state is LifecycleState.ACTIVE:
        if is_at_peak(shower, now):
            bonus = int(clamp(shower.peak_zhr / 10.0, 0, PEAK_MAX_BONUS))
            return PEAK_BASE_SCORE + bonus
        return int(OFF_PEAK_BASE_SCORE + _zhr_ratio(shower, now) * OFF_PEAK_RANGE)

    hours = whole_hours(shower.visibility_start - now)
    if hours <= 24:
        return int(80 - hours * 0.83)
    if hours <= 72:
        return int(60 - (hours - 24) * 0.625)
    return FAR_FUTURE_SCORE


def score_shower(shower: MeteorShower, now: datetime) -> ScoreResult:
    return ScoreResult(
        state=shower_state(shower, now),
        score=shower_score(shower, now),
        favorable=shower_favorable(shower, now),
    )


def relevant_showers(showers: Iterable[MeteorShower], now: datetime) -> list[MeteorShower]:
    """Drop ended showers, keeping input order."""
    return [s for s in showers if shower_state(s, now) is not LifecycleState.ENDED]
