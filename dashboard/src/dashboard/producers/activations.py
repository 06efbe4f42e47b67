"""POTA/SOTA activation card producers."""

from __future__ import annotations

from skipwire.schemas.activations import Activation, ActivationType
from skipwire.schemas.cards import CardDescriptor, CardType, PriorityInput
from skipwire.schemas.propagation import BandConditionRating

from dashboard.context import DashboardContext
from dashboard.producers.common import base_view, descriptor
from scoring.activations import score_activation, score_activation_summary, spot_age_minutes
from scoring.bands import band_from_khz
from scoring.priority import calculate_priority

FAVORABLE_COUNT = 3
POINTS_PER_ACTIVATION = 5
GOOD_COUNT = 10
FAIR_COUNT = 5

_PROGRAMS: dict[ActivationType, tuple[CardType, str, str]] = {
    ActivationType.POTA: (CardType.POTA_ACTIVATIONS, "POTA Activations", "Parks on the Air"),
    ActivationType.SOTA: (CardType.SOTA_ACTIVATIONS, "SOTA Activations", "Summits on the Air"),
}


def count_rating(count: int) -> BandConditionRating:
    if count >= GOOD_COUNT:
        return BandConditionRating.GOOD
    if count >= FAIR_COUNT:
        return BandConditionRating.FAIR
    return BandConditionRating.POOR


def _band_name(frequency_khz: float | None) -> str | None:
    band = band_from_khz(frequency_khz) if frequency_khz is not None else None
    return band.value if band else None


class ActivationsProducer:
    """One card summarizing all current activations for a program."""

    def __init__(self, program: ActivationType) -> None:
        self.program = program
        self.card_type, self.title, self.subtitle = _PROGRAMS[program]

    def _activations(self, ctx: DashboardContext) -> tuple[Activation, ...] | None:
        if self.program is ActivationType.POTA:
            return ctx.snapshot.pota_activations
        return ctx.snapshot.sota_activations

    def can_render(self, ctx: DashboardContext) -> bool:
        return self._activations(ctx) is not None

    def create_config(self, ctx: DashboardContext) -> CardDescriptor | None:
        activations = self._activations(ctx)
        if activations is None:
            return None
        count = len(activations)
        priority = calculate_priority(
            PriorityInput(
                favorable=count >= FAVORABLE_COUNT,
                score=min(100, count * POINTS_PER_ACTIVATION),
                rating=count_rating(count),
            ),
            now=ctx.now,
        )
        return descriptor(self.card_type, priority)

    def render(self, ctx: DashboardContext, config: CardDescriptor) -> dict | None:
        activations = self._activations(ctx)
        if activations is None:
            return None
        summary = score_activation_summary(activations, ctx.now)
        spots = []
        for activation in activations:
            result = score_activation(activation, ctx.now)
            spots.append({
                "spot_id": activation.spot_id,
                "callsign": activation.activator_callsign,
                "reference": activation.reference,
                "reference_name": activation.reference_name,
                "frequency_khz": activation.frequency,
                "band": _band_name(activation.frequency),
                "mode": activation.mode,
                "spotted_at": activation.spotted_at.isoformat() if activation.spotted_at else None,
                "age_minutes": spot_age_minutes(activation, ctx.now),
                "score": result.score,
                "favorable": result.favorable,
            })
        spots.sort(key=lambda s: s["score"], reverse=True)

        view = base_view(config, self.title, self.subtitle)
        view.update({
            "program": self.program.value,
            "count": len(activations),
            "score": summary.score,
            "favorable": summary.favorable,
            "activations": spots,
        })
        return view
