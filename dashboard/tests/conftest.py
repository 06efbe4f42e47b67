"""Dashboard test fixtures."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from skipwire.schemas.activations import Activation, ActivationType
from skipwire.schemas.cards import DashboardSnapshot
from skipwire.schemas.events import Contest, MeteorShower
from skipwire.schemas.propagation import (
    BandActivity,
    BandCondition,
    BandConditionRating,
    FrequencyBand,
    SolarIndices,
)

from dashboard.context import DashboardContext

NOW = datetime(2026, 8, 12, 12, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def solar() -> SolarIndices:
    return SolarIndices(solar_flux_index=150.0, k_index=2, a_index=10, sunspot_number=120, timestamp=NOW)


@pytest.fixture
def band_conditions() -> tuple[BandCondition, ...]:
    return (
        BandCondition(band=FrequencyBand.BAND_20M, rating=BandConditionRating.GOOD, confidence=1.0),
        BandCondition(band=FrequencyBand.BAND_40M, rating=BandConditionRating.FAIR, confidence=0.8),
        BandCondition(band=FrequencyBand.BAND_10M, rating=BandConditionRating.POOR, confidence=1.0),
    )


@pytest.fixture
def contests() -> tuple[Contest, ...]:
    return (
        Contest(
            name="WAE DX CW",
            start_time=NOW - timedelta(hours=2),
            end_time=NOW + timedelta(hours=30),
            bands=frozenset({FrequencyBand.BAND_20M, FrequencyBand.BAND_40M}),
            modes=frozenset({"CW"}),
            sponsor="DARC",
        ),
        Contest(
            name="Old Sprint",
            start_time=NOW - timedelta(days=3),
            end_time=NOW - timedelta(days=2),
        ),
    )


@pytest.fixture
def perseids() -> MeteorShower:
    return MeteorShower(
        name="Perseids",
        code="PER",
        peak_start=datetime(2026, 8, 12, 0, 0, tzinfo=UTC),
        peak_end=datetime(2026, 8, 13, 0, 0, tzinfo=UTC),
        visibility_start=datetime(2026, 7, 17, 0, 0, tzinfo=UTC),
        visibility_end=datetime(2026, 8, 24, 0, 0, tzinfo=UTC),
        peak_zhr=100,
        parent_body="109P/Swift-Tuttle",
    )


def _make_spots(
    count: int, program: ActivationType, age: timedelta = timedelta(minutes=3)
) -> tuple[Activation, ...]:
    return tuple(
        Activation(
            spot_id=f"{program.value}-{i}",
            activator_callsign=f"K{i}ABC",
            reference=f"US-{1000 + i}",
            type=program,
            frequency=14062.0,
            mode="CW",
            spotted_at=NOW - age,
        )
        for i in range(count)
    )


@pytest.fixture
def make_spots():
    return _make_spots


@pytest.fixture
def full_snapshot(solar, band_conditions, contests, perseids, make_spots) -> DashboardSnapshot:
    return DashboardSnapshot(
        solar_indices=solar,
        band_conditions=band_conditions,
        band_activities=(
            BandActivity(
                band=FrequencyBand.BAND_20M,
                mode="FT8",
                spot_count=150,
                trend_percentage=60.0,
                max_dx_km=12_000,
                active_paths=frozenset({"EU-NA", "EU-AS"}),
            ),
        ),
        contests=contests,
        meteor_showers=(perseids,),
        pota_activations=make_spots(4, ActivationType.POTA),
        sota_activations=(),
        fetched_at=NOW,
    )


@pytest.fixture
def ctx(full_snapshot) -> DashboardContext:
    return DashboardContext(snapshot=full_snapshot, now=NOW)
