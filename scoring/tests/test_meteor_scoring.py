"""Tests for meteor shower scoring."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from skipwire.schemas.events import LifecycleState, MeteorShower

from scoring.meteors import (
    current_zhr,
    is_at_peak,
    peak_midpoint,
    relevant_showers,
    score_shower,
    shower_ending_soon,
    shower_favorable,
    shower_score,
    time_to_peak,
)

VIS_START = datetime(2026, 8, 1, 0, 0, tzinfo=UTC)
VIS_END = datetime(2026, 8, 24, 0, 0, tzinfo=UTC)
PEAK_START = datetime(2026, 8, 12, 0, 0, tzinfo=UTC)
PEAK_END = datetime(2026, 8, 13, 0, 0, tzinfo=UTC)


@pytest.fixture
def perseids():
    return _shower(100)


def _shower(peak_zhr: int) -> MeteorShower:
    return MeteorShower(
        name="Perseids",
        code="PER",
        peak_start=PEAK_START,
        peak_end=PEAK_END,
        visibility_start=VIS_START,
        visibility_end=VIS_END,
        peak_zhr=peak_zhr,
        parent_body="109P/Swift-Tuttle",
    )


def test_peak_midpoint(perseids):
    assert peak_midpoint(perseids) == datetime(2026, 8, 12, 12, 0, tzinfo=UTC)


def test_zhr_at_midpoint_equals_peak(perseids):
    assert current_zhr(perseids, peak_midpoint(perseids)) == 100


def test_zhr_decays_away_from_peak(perseids):
    # 48h from midpoint: 100 * exp(-2) = 13.5
    assert current_zhr(perseids, datetime(2026, 8, 10, 12, 0, tzinfo=UTC)) == 14


def test_zhr_floored_at_one_while_active(perseids):
    assert current_zhr(perseids, VIS_START) == 1


def test_zhr_upcoming_and_ended(perseids):
    assert current_zhr(perseids, VIS_START - timedelta(days=1)) == 1
    assert current_zhr(perseids, VIS_END + timedelta(days=1)) == 0


def test_state_uses_visibility_window(perseids):
    assert score_shower(perseids, VIS_START).state is LifecycleState.ACTIVE
    assert score_shower(perseids, VIS_END).state is LifecycleState.ACTIVE
    assert score_shower(perseids, VIS_END + timedelta(seconds=1)).state is LifecycleState.ENDED


def test_at_peak_score(perseids):
    now = peak_midpoint(perseids)
    assert is_at_peak(perseids, now) is True
    assert shower_score(perseids, now) == 95
    assert shower_favorable(perseids, now) is True


def test_at_peak_bonus_capped():
    assert shower_score(_shower(200), PEAK_START) == 100


def test_off_peak_score_scales_with_zhr(perseids):
    now = datetime(2026, 8, 10, 12, 0, tzinfo=UTC)
    assert shower_score(perseids, now) == 46
    assert shower_favorable(perseids, now) is False


def test_active_near_peak_is_favorable(perseids):
    assert shower_favorable(perseids, PEAK_START - timedelta(hours=10)) is True
    assert shower_favorable(perseids, PEAK_START - timedelta(hours=13)) is False


def test_active_after_peak_not_favorable(perseids):
    assert shower_favorable(perseids, PEAK_END + timedelta(hours=1)) is False


@pytest.mark.parametrize(
    ("hours", "expected"),
    [(10, 71), (13, 69), (48, 45), (100, 15)],
)
def test_upcoming_score_bands(perseids, hours, expected):
    assert shower_score(perseids, VIS_START - timedelta(hours=hours)) == expected


def test_upcoming_favorable_within_twelve_hours(perseids):
    assert shower_favorable(perseids, VIS_START - timedelta(hours=12, minutes=30)) is True
    assert shower_favorable(perseids, VIS_START - timedelta(hours=13)) is False


def test_ended_scores_zero(perseids):
    result = score_shower(perseids, VIS_END + timedelta(days=1))
    assert result.score == 0
    assert result.favorable is False


def test_zero_peak_zhr_off_peak_scores_base():
    assert shower_score(_shower(0), datetime(2026, 8, 5, tzinfo=UTC)) == 40


def test_time_to_peak_sign(perseids):
    assert time_to_peak(perseids, PEAK_START - timedelta(hours=5)) == timedelta(hours=5)
    assert time_to_peak(perseids, peak_midpoint(perseids)) == timedelta(0)
    assert time_to_peak(perseids, PEAK_END + timedelta(hours=2)) == timedelta(hours=-2)


def test_ending_soon_inside_last_six_peak_hours(perseids):
    assert shower_ending_soon(perseids, PEAK_END - timedelta(hours=4)) is True
    assert shower_ending_soon(perseids, PEAK_END - timedelta(hours=12)) is False
    assert shower_ending_soon(perseids, PEAK_END) is False


def test_relevant_showers_drops_ended(perseids):
    ended = perseids.model_copy(
        update={"visibility_end": datetime(2026, 8, 2, tzinfo=UTC), "code": "OLD"}
    )
    now = datetime(2026, 8, 5, tzinfo=UTC)
    assert [s.code for s in relevant_showers([ended, perseids], now)] == ["PER"]
