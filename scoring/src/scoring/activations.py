"""Activation scoring by spot freshness, for single spots and program summaries."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from skipwire.schemas.activations import Activation
from skipwire.schemas.cards import ScoreResult

from scoring.lifecycle import whole_minutes

FAVORABLE_MAX_AGE_MINUTES = 15
RECENT_SPOT_MINUTES = 5
SUMMARY_FAVORABLE_COUNT = 5
SUMMARY_POINTS_PER_ACTIVATION = 3
SUMMARY_RECENCY_BONUS = 10


def spot_age_minutes(activation: Activation, now: datetime) -> int | None:
    if activation.spotted_at is None:
        return None
    return whole_minutes(now - activation.spotted_at)


def activation_score(activation: Activation, now: datetime) -> int:
    """Score a spot by age in whole minutes.

    <=5 min (or future-dated): 100. 5-15: 100->80. 15-30: 80->20.
    30-60: 20->0. Older, or never spotted: 0.
    """
    minutes = spot_age_minutes(activation, now)
    if minutes is None:
        return 0
    if minutes <= 5:
        return 100
    if minutes <= 15:
        return int(100 - (minutes - 5) * 2)
    if minutes <= 30:
        return int(80 - (minutes - 15) * 4)
    if minutes <= 60:
        return int(max(0.0, 20 - (minutes - 30) * 0.67))
    return 0


def activation_favorable(activation: Activation, now: datetime) -> bool:
    minutes = spot_age_minutes(activation, now)
    return minutes is not None and minutes <= FAVORABLE_MAX_AGE_MINUTES


def score_activation(activation: Activation, now: datetime) -> ScoreResult:
    return ScoreResult(
        score=activation_score(activation, now),
        favorable=activation_favorable(activation, now),
    )


def score_activation_summary(activations: Sequence[Activation], now: datetime) -> ScoreResult:
    """Score a whole program's activity: volume plus a bonus for a very fresh spot."""
    has_recent = any(
        (age := spot_age_minutes(a, now)) is not None and age <= RECENT_SPOT_MINUTES
        for a in activations
    )
    score = len(activations) * SUMMARY_POINTS_PER_ACTIVATION
    if has_recent:
        score += SUMMARY_RECENCY_BONUS
    return ScoreResult(
        score=min(100, score),
        favorable=len(activations) >= SUMMARY_FAVORABLE_COUNT,
    )
