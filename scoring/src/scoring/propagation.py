"""Propagation scoring: solar indices, band conditions, and band activity."""

from __future__ import annotations

from skipwire.schemas.cards import ScoreResult
from skipwire.schemas.propagation import (
    BandActivity,
    BandCondition,
    BandConditionRating,
    SolarIndices,
)

from scoring.numeric import clamp, round_half_up

# Solar flux (SFU) and geomagnetic thresholds
SFI_FAVORABLE_MIN = 100.0
K_INDEX_FAVORABLE_MAX = 4  # exclusive
A_INDEX_FAVORABLE_MAX = 20  # exclusive

SFI_WEIGHT = 0.6
K_WEIGHT = 0.3
A_WEIGHT = 0.1

# K-index label bands (inclusive upper bounds)
GEOMAGNETIC_LEVELS = [
    (2, "Quiet"),
    (4, "Unsettled"),
    (6, "Active"),
    (8, "Storm"),
]

# SFI label bands (exclusive upper bounds)
SOLAR_FLUX_LEVELS = [
    (70.0, "Very Low"),
    (100.0, "Low"),
    (150.0, "Moderate"),
    (200.0, "High"),
]

# Rating -> score ceiling, scaled by confidence
RATING_CEILINGS: dict[BandConditionRating, int] = {
    BandConditionRating.GOOD: 100,
    BandConditionRating.FAIR: 60,
    BandConditionRating.POOR: 20,
    BandConditionRating.UNKNOWN: 0,
}
CONDITION_FAVORABLE_CONFIDENCE = 0.5  # exclusive

# Band activity thresholds
HIGH_ACTIVITY_SPOTS = 100
MEDIUM_ACTIVITY_SPOTS = 50
LOW_ACTIVITY_SPOTS = 10
STRONG_POSITIVE_TREND = 50.0
POSITIVE_TREND = 20.0
EXCELLENT_DX_KM = 10_000
GOOD_DX_KM = 5_000
MODERATE_DX_KM = 2_000
MANY_PATHS = 4
SOME_PATHS = 2

ACTIVITY_WEIGHTS = {
    "activity": 0.40,
    "trend": 0.30,
    "dx": 0.20,
    "paths": 0.10,
}

# Blend of live activity and forecast condition when both exist for a band
COMBINED_ACTIVITY_WEIGHT = 0.7
COMBINED_CONDITION_WEIGHT = 0.3


# --- Solar indices ---


def solar_score(indices: SolarIndices) -> int:
    """Weighted 0-100 score: 60% SFI, 30% inverted K-index, 10% inverted A-index."""
    sfi_score = clamp((indices.solar_flux_index - 50) / 150.0 * 100, 0, 100)
    k_score = max(0.0, (9 - indices.k_index) / 9.0 * 100)
    a_score = clamp((50 - min(indices.a_index, 50)) / 50.0 * 100, 0, 100)
    return round_half_up(sfi_score * SFI_WEIGHT + k_score * K_WEIGHT + a_score * A_WEIGHT)


def solar_favorable(indices: SolarIndices) -> bool:
    return (
        indices.solar_flux_index > SFI_FAVORABLE_MIN
        and indices.k_index < K_INDEX_FAVORABLE_MAX
        and indices.a_index < A_INDEX_FAVORABLE_MAX
    )


def score_solar(indices: SolarIndices) -> ScoreResult:
    return ScoreResult(score=solar_score(indices), favorable=solar_favorable(indices))


def geomagnetic_activity(k_index: int) -> str:
    for upper, label in GEOMAGNETIC_LEVELS:
        if k_index <= upper:
            return label
    return "Severe Storm"


def solar_flux_level(solar_flux_index: float) -> str:
    for upper, label in SOLAR_FLUX_LEVELS:
        if solar_flux_index < upper:
            return label
    return "Very High"


def solar_flux_rating(solar_flux_index: float | None) -> BandConditionRating:
    """Coarse rating used when ranking the solar card."""
    if solar_flux_index is None:
        return BandConditionRating.UNKNOWN
    if solar_flux_index >= 150:
        return BandConditionRating.GOOD
    if solar_flux_index >= 100:
        return BandConditionRating.FAIR
    return BandConditionRating.POOR


# --- Band conditions ---


def condition_score(condition: BandCondition) -> int:
    return round_half_up(RATING_CEILINGS[condition.rating] * condition.confidence)


def condition_favorable(condition: BandCondition) -> bool:
    return (
        condition.rating is BandConditionRating.GOOD
        and condition.confidence > CONDITION_FAVORABLE_CONFIDENCE
    )


def score_condition(condition: BandCondition) -> ScoreResult:
    return ScoreResult(score=condition_score(condition), favorable=condition_favorable(condition))


# --- Band activity ---


def _normalize_spots(spot_count: int) -> int:
    if spot_count >= HIGH_ACTIVITY_SPOTS:
        return 100
    if spot_count >= MEDIUM_ACTIVITY_SPOTS:
        return 50 + (spot_count - MEDIUM_ACTIVITY_SPOTS)
    if spot_count >= LOW_ACTIVITY_SPOTS:
        ratio = (spot_count - LOW_ACTIVITY_SPOTS) / (MEDIUM_ACTIVITY_SPOTS - LOW_ACTIVITY_SPOTS)
        return int(20 + ratio * 30)
    return spot_count * 2


def _normalize_trend(trend_percentage: float) -> int:
    if trend_percentage >= STRONG_POSITIVE_TREND:
        return 100
    if trend_percentage >= POSITIVE_TREND:
        ratio = (trend_percentage - POSITIVE_TREND) / (STRONG_POSITIVE_TREND - POSITIVE_TREND)
        return int(70 + ratio * 30)
    if trend_percentage >= 0:
        return int(50 + trend_percentage / POSITIVE_TREND * 20)
    # -100% trend bottoms out at 0
    return int(max(0.0, 50 + trend_percentage / 2))


def _normalize_dx(max_dx_km: int | None) -> int:
    if max_dx_km is None or max_dx_km <= 0:
        return 0
    if max_dx_km >= EXCELLENT_DX_KM:
        return 100
    if max_dx_km >= GOOD_DX_KM:
        ratio = (max_dx_km - GOOD_DX_KM) / (EXCELLENT_DX_KM - GOOD_DX_KM)
        return int(70 + ratio * 30)
    if max_dx_km >= MODERATE_DX_KM:
        ratio = (max_dx_km - MODERATE_DX_KM) / (GOOD_DX_KM - MODERATE_DX_KM)
        return int(40 + ratio * 30)
    return int(max_dx_km / MODERATE_DX_KM * 40)


def _normalize_paths(path_count: int) -> int:
    if path_count >= MANY_PATHS:
        return 100
    if path_count >= SOME_PATHS:
        return 50 + (path_count - SOME_PATHS) * 25
    if path_count == 1:
        return 30
    return 0


def activity_score(activity: BandActivity) -> int:
    weighted = (
        _normalize_spots(activity.spot_count) * ACTIVITY_WEIGHTS["activity"]
        + _normalize_trend(activity.trend_percentage) * ACTIVITY_WEIGHTS["trend"]
        + _normalize_dx(activity.max_dx_km) * ACTIVITY_WEIGHTS["dx"]
        + _normalize_paths(len(activity.active_paths)) * ACTIVITY_WEIGHTS["paths"]
    )
    return round_half_up(clamp(weighted, 0, 100))


def activity_favorable(activity: BandActivity) -> bool:
    return (
        activity.spot_count >= HIGH_ACTIVITY_SPOTS
        and activity.trend_percentage > 0
        and len(activity.active_paths) > 0
    )


def score_band_activity(activity: BandActivity) -> ScoreResult:
    return ScoreResult(score=activity_score(activity), favorable=activity_favorable(activity))


def combined_band_score(activity: int | None, condition: int | None) -> int:
    """Blend live activity (70%) with forecast condition (30%); fall back to whichever exists."""
    if activity is not None and condition is not None:
        weighted = activity * COMBINED_ACTIVITY_WEIGHT + condition * COMBINED_CONDITION_WEIGHT
        return round_half_up(clamp(weighted, 0, 100))
    if activity is not None:
        return round_half_up(clamp(activity, 0, 100))
    if condition is not None:
        return round_half_up(clamp(condition, 0, 100))
    return 0
