"""Tests for band lookups and DX reach."""

from skipwire.schemas.propagation import FrequencyBand

from scoring.bands import band_from_hz, band_from_khz, band_from_name, band_sort_key, center_khz, dx_reach


def test_band_from_frequency():
    assert band_from_khz(14074) is FrequencyBand.BAND_20M
    assert band_from_khz(1800) is FrequencyBand.BAND_160M
    assert band_from_khz(12000) is None
    assert band_from_hz(7_074_000) is FrequencyBand.BAND_40M


def test_band_from_name():
    assert band_from_name(" 20M ") is FrequencyBand.BAND_20M
    assert band_from_name("") is None
    assert band_from_name("11m") is None


def test_center_frequency():
    assert center_khz(FrequencyBand.BAND_20M) == 14175


def test_sort_key_orders_by_frequency():
    bands = [FrequencyBand.BAND_10M, FrequencyBand.BAND_160M, FrequencyBand.BAND_20M]
    assert sorted(bands, key=band_sort_key) == [
        FrequencyBand.BAND_160M,
        FrequencyBand.BAND_20M,
        FrequencyBand.BAND_10M,
    ]


def test_dx_reach_uses_band_thresholds():
    assert dx_reach(FrequencyBand.BAND_20M, 16_000) == "excellent"
    assert dx_reach(FrequencyBand.BAND_20M, 6_000) == "moderate"
    assert dx_reach(FrequencyBand.BAND_2M, 600) == "good"
    assert dx_reach(FrequencyBand.BAND_40M, 500) == "limited"
    assert dx_reach(FrequencyBand.BAND_40M, None) == "none"
