"""Integration test configuration."""

from datetime import UTC, datetime

import pytest

from dashboard.bootstrap import build_card_registry


@pytest.fixture
def now():
    return datetime(2026, 12, 13, 20, 0, tzinfo=UTC)


@pytest.fixture
def card_registry():
    return build_card_registry()
