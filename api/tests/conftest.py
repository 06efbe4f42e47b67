"""API test configuration."""

from datetime import UTC, datetime, timedelta

import pytest
from api.dependencies import get_clock
from api.main import create_app
from api.services.snapshot_store import SnapshotStore
from httpx import ASGITransport, AsyncClient
from skipwire.config import reset_settings_cache
from skipwire.schemas.cards import DashboardSnapshot
from skipwire.schemas.events import Contest
from skipwire.schemas.propagation import BandCondition, BandConditionRating, FrequencyBand, SolarIndices

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def snapshot():
    return DashboardSnapshot(
        solar_indices=SolarIndices(solar_flux_index=85.0, k_index=3, a_index=12, timestamp=NOW),
        band_conditions=(
            BandCondition(band=FrequencyBand.BAND_20M, rating=BandConditionRating.GOOD, confidence=0.9),
        ),
        contests=(
            Contest(
                name="ARRL DX CW",
                start_time=NOW - timedelta(hours=4),
                end_time=NOW + timedelta(hours=44),
            ),
        ),
        fetched_at=NOW - timedelta(minutes=10),
    )


@pytest.fixture
def store(snapshot):
    return SnapshotStore(snapshot)


@pytest.fixture
def app(store):
    reset_settings_cache()
    a = create_app(snapshot_store=store)
    a.dependency_overrides[get_clock] = lambda: NOW
    return a


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
