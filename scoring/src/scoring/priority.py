"""Priority calculation for dashboard card ordering.

Combines a normalized PriorityInput into a single priority number using
fixed weights: favorable 40, score 35, rating 20, recency 5.
"""

from __future__ import annotations

from datetime import UTC, datetime

from skipwire.schemas.cards import PriorityInput
from skipwire.schemas.propagation import BandConditionRating

from scoring.numeric import clamp, round_half_up

PRIORITY_WEIGHTS: dict[str, int] = {
    "favorable": 40,
    "score": 35,
    "rating": 20,
    "recency": 5,
}

RATING_SCORES: dict[BandConditionRating, int] = {
    BandConditionRating.GOOD: 100,
    BandConditionRating.FAIR: 60,
    BandConditionRating.POOR: 20,
    BandConditionRating.UNKNOWN: 0,
}

# Recency credit decays linearly to zero over this many minutes
RECENCY_WINDOW_MINUTES = 60.0


def recency_factor(last_updated: datetime, now: datetime) -> float:
    age_minutes = (now - last_updated).total_seconds() / 60.0
    return max(0.0, 1.0 - age_minutes / RECENCY_WINDOW_MINUTES)


def calculate_priority(priority_input: PriorityInput, now: datetime | None = None) -> int:
    """Calculate a card priority from its scoring input.

    Missing optional fields contribute nothing. The result is rounded but
    not clamped after the user weight is applied, so a weight above 1 can
    push it past 100.

    Args:
        priority_input: Favorable flag plus optional score, rating, update time, weight.
        now: Reference time for recency. Read from the clock when omitted.

    Returns:
        Priority, nominally 0-100.
    """
    priority = 0.0

    if priority_input.favorable:
        priority += PRIORITY_WEIGHTS["favorable"]

    if priority_input.score is not None:
        normalized = clamp(priority_input.score, 0, 100)
        priority += normalized / 100 * PRIORITY_WEIGHTS["score"]

    if priority_input.rating is not None:
        priority += RATING_SCORES[priority_input.rating] / 100 * PRIORITY_WEIGHTS["rating"]

    if priority_input.last_updated is not None:
        reference = now or datetime.now(UTC)
        priority += recency_factor(priority_input.last_updated, reference) * PRIORITY_WEIGHTS["recency"]

    if priority_input.user_weight is not None:
        priority *= priority_input.user_weight

    return round_half_up(priority)
