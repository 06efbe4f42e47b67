"""Propagation card producers: solar indices, per-band conditions, per-band/mode activity."""

from __future__ import annotations

from skipwire.schemas.cards import CardDescriptor, CardType, Hotness, PriorityInput
from skipwire.schemas.propagation import BandActivity, BandCondition, FrequencyBand

from dashboard.context import DashboardContext
from dashboard.producers.common import base_view, card_id, descriptor
from scoring.bands import band_sort_key, dx_reach
from scoring.priority import calculate_priority
from scoring.propagation import (
    combined_band_score,
    geomagnetic_activity,
    score_band_activity,
    score_condition,
    score_solar,
    solar_flux_level,
    solar_flux_rating,
)

# Mode -> shown even without activity. Unsupported modes only appear when spotted.
MODE_REGISTRY: dict[str, bool] = {
    "FT8": True,
    "CW": True,
    "FT4": False,
    "SSB": False,
    "RTTY": False,
    "PSK31": False,
    "JS8": False,
}


class SolarIndicesProducer:
    """Single solar indices card, always shown; priority 0 while data is loading."""

    def can_render(self, ctx: DashboardContext) -> bool:
        return True

    def create_config(self, ctx: DashboardContext) -> CardDescriptor:
        indices = ctx.snapshot.solar_indices
        if indices is None:
            return CardDescriptor(
                id=CardType.SOLAR_INDICES.value,
                type=CardType.SOLAR_INDICES,
                priority=0,
                hotness=Hotness.NEUTRAL,
            )
        result = score_solar(indices)
        priority = calculate_priority(
            PriorityInput(
                favorable=result.favorable,
                score=indices.solar_flux_index,
                rating=solar_flux_rating(indices.solar_flux_index),
            ),
            now=ctx.now,
        )
        return descriptor(CardType.SOLAR_INDICES, priority)

    def render(self, ctx: DashboardContext, config: CardDescriptor) -> dict:
        indices = ctx.snapshot.solar_indices
        if indices is None:
            view = base_view(config, "Solar Indices", "Loading...")
            view["loading"] = True
            return view

        result = score_solar(indices)
        view = base_view(config, "Solar Indices", indices.source or None)
        view.update({
            "loading": False,
            "solar_flux_index": indices.solar_flux_index,
            "a_index": indices.a_index,
            "k_index": indices.k_index,
            "sunspot_number": indices.sunspot_number,
            "geomagnetic_activity": geomagnetic_activity(indices.k_index),
            "solar_flux_level": solar_flux_level(indices.solar_flux_index),
            "score": result.score,
            "favorable": result.favorable,
            "observed_at": indices.timestamp.isoformat() if indices.timestamp else None,
        })
        return view


def _active_bands(ctx: DashboardContext) -> set[FrequencyBand]:
    return {a.band for a in ctx.snapshot.band_activities}


def _condition_for(ctx: DashboardContext, band: FrequencyBand) -> BandCondition | None:
    for condition in ctx.snapshot.band_conditions:
        if condition.band is band:
            return condition
    return None


def _activity_for(ctx: DashboardContext, band: FrequencyBand, mode: str) -> BandActivity | None:
    for activity in ctx.snapshot.band_activities:
        if activity.band is band and activity.mode == mode:
            return activity
    return None


class BandConditionsProducer:
    """One card per forecast band that has no live activity data."""

    def _bands(self, ctx: DashboardContext) -> list[BandCondition]:
        with_activity = _active_bands(ctx)
        conditions = [c for c in ctx.snapshot.band_conditions if c.band not in with_activity]
        return sorted(conditions, key=lambda c: band_sort_key(c.band))

    def can_render(self, ctx: DashboardContext) -> bool:
        return bool(self._bands(ctx))

    def create_config(self, ctx: DashboardContext) -> list[CardDescriptor]:
        configs = []
        for condition in self._bands(ctx):
            result = score_condition(condition)
            priority = calculate_priority(
                PriorityInput(
                    favorable=result.favorable,
                    score=result.score,
                    rating=condition.rating,
                    last_updated=ctx.snapshot.fetched_at,
                ),
                now=ctx.now,
            )
            configs.append(descriptor(CardType.BAND_CONDITIONS, priority, condition.band.value))
        return configs

    def render(self, ctx: DashboardContext, config: CardDescriptor) -> dict | None:
        condition = next(
            (
                c
                for c in self._bands(ctx)
                if card_id(CardType.BAND_CONDITIONS, c.band.value) == config.id
            ),
            None,
        )
        if condition is None:
            return None
        result = score_condition(condition)
        view = base_view(config, f"{condition.band.value} Conditions")
        view.update({
            "band": condition.band.value,
            "rating": condition.rating.value,
            "confidence": condition.confidence,
            "notes": condition.notes,
            "score": result.score,
            "favorable": result.favorable,
        })
        return view


class BandActivityProducer:
    """One card per band with live spots, for each supported mode and any spotted mode."""

    def _pairs(self, ctx: DashboardContext) -> list[tuple[FrequencyBand, str]]:
        pairs = []
        for band in sorted(_active_bands(ctx), key=band_sort_key):
            for mode, supported in MODE_REGISTRY.items():
                if supported or _activity_for(ctx, band, mode) is not None:
                    pairs.append((band, mode))
        return pairs

    def _score(self, ctx: DashboardContext, band: FrequencyBand, mode: str) -> tuple[int, bool]:
        activity = _activity_for(ctx, band, mode)
        condition = _condition_for(ctx, band)
        activity_result = score_band_activity(activity) if activity else None
        condition_result = score_condition(condition) if condition else None
        score = combined_band_score(
            activity_result.score if activity_result else None,
            condition_result.score if condition_result else None,
        )
        favorable = bool(
            (activity_result and activity_result.favorable)
            or (condition_result and condition_result.favorable)
        )
        return score, favorable

    def can_render(self, ctx: DashboardContext) -> bool:
        return bool(ctx.snapshot.band_activities)

    def create_config(self, ctx: DashboardContext) -> list[CardDescriptor]:
        configs = []
        for band, mode in self._pairs(ctx):
            score, _ = self._score(ctx, band, mode)
            configs.append(descriptor(CardType.BAND_ACTIVITY, score, band.value, mode))
        return configs

    def render(self, ctx: DashboardContext, config: CardDescriptor) -> dict | None:
        match = next(
            (
                (band, mode)
                for band, mode in self._pairs(ctx)
                if card_id(CardType.BAND_ACTIVITY, band.value, mode) == config.id
            ),
            None,
        )
        if match is None:
            return None
        band, mode = match
        activity = _activity_for(ctx, band, mode)
        condition = _condition_for(ctx, band)
        score, favorable = self._score(ctx, band, mode)

        view = base_view(config, f"{band.value} {mode}")
        view.update({
            "band": band.value,
            "mode": mode,
            "score": score,
            "favorable": favorable,
            "condition": condition.rating.value if condition else None,
            "has_activity": activity is not None and activity.spot_count > 0,
        })
        if activity is not None:
            view.update({
                "spot_count": activity.spot_count,
                "baseline_spot_count": activity.baseline_spot_count,
                "trend_percentage": activity.trend_percentage,
                "max_dx_km": activity.max_dx_km,
                "max_dx_path": activity.max_dx_path,
                "dx_reach": dx_reach(band, activity.max_dx_km),
                "active_paths": sorted(activity.active_paths),
            })
        return view
