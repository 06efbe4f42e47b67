"""Frequency band edges, DX distance thresholds, and band lookups.

The lookups by Hz and by name, and `center_khz`, are the entry points feed
adapters use to map raw spot and forecast records onto `FrequencyBand`.
"""

from __future__ import annotations

from skipwire.schemas.propagation import FrequencyBand

# Band edges in kHz: band -> (start_khz, end_khz)
BAND_EDGES_KHZ: dict[FrequencyBand, tuple[int, int]] = {
    FrequencyBand.BAND_160M: (1800, 2000),
    FrequencyBand.BAND_80M: (3500, 4000),
    FrequencyBand.BAND_60M: (5330, 5405),
    FrequencyBand.BAND_40M: (7000, 7300),
    FrequencyBand.BAND_30M: (10100, 10150),
    FrequencyBand.BAND_20M: (14000, 14350),
    FrequencyBand.BAND_17M: (18068, 18168),
    FrequencyBand.BAND_15M: (21000, 21450),
    FrequencyBand.BAND_12M: (24890, 24990),
    FrequencyBand.BAND_10M: (28000, 29700),
    FrequencyBand.BAND_6M: (50000, 54000),
    FrequencyBand.BAND_2M: (144000, 148000),
}

# DX reach thresholds in km: band -> (excellent, good, moderate, description)
# Low bands and VHF get lower thresholds; 20m is the workhorse DX band.
DX_THRESHOLDS_KM: dict[FrequencyBand, tuple[int, int, int, str]] = {
    FrequencyBand.BAND_160M: (3_000, 1_500, 500, "Difficult; night skip required"),
    FrequencyBand.BAND_80M: (5_000, 2_500, 1_000, "Regional; some DX at night"),
    FrequencyBand.BAND_60M: (6_000, 3_000, 1_500, "Secondary allocation; variable propagation"),
    FrequencyBand.BAND_40M: (7_000, 4_000, 2_000, "Day/night transitions"),
    FrequencyBand.BAND_30M: (8_000, 5_000, 2_500, "WARC; reliable propagation"),
    FrequencyBand.BAND_20M: (15_000, 10_000, 5_000, "Workhorse DX band"),
    FrequencyBand.BAND_17M: (12_000, 8_000, 4_000, "WARC; solar-dependent"),
    FrequencyBand.BAND_15M: (14_000, 9_000, 4_500, "Solar-dependent; excellent when open"),
    FrequencyBand.BAND_12M: (13_000, 8_500, 4_000, "WARC; similar to 10m/15m"),
    FrequencyBand.BAND_10M: (12_000, 7_000, 3_000, "Magic when open"),
    FrequencyBand.BAND_6M: (5_000, 2_000, 500, "Sporadic-E; rare F2"),
    FrequencyBand.BAND_2M: (2_000, 500, 100, "Tropo/EME"),
}

DEFAULT_DX_THRESHOLDS_KM = (7_000, 4_000, 2_000, "Moderate propagation")


def center_khz(band: FrequencyBand) -> int:
    start, end = BAND_EDGES_KHZ[band]
    return (start + end) // 2


def band_from_khz(freq_khz: float) -> FrequencyBand | None:
    """Find the band containing a frequency in kHz (edges inclusive)."""
    for band, (start, end) in BAND_EDGES_KHZ.items():
        if start <= freq_khz <= end:
            return band
    return None


def band_from_hz(freq_hz: int) -> FrequencyBand | None:
    return band_from_khz(freq_hz // 1000)


def band_from_name(name: str | None) -> FrequencyBand | None:
    """Case-insensitive lookup by band name ("20m", "20M ")."""
    if name is None or not name.strip():
        return None
    normalized = name.strip().lower()
    for band in FrequencyBand:
        if band.value == normalized:
            return band
    return None


def dx_thresholds(band: FrequencyBand) -> tuple[int, int, int, str]:
    return DX_THRESHOLDS_KM.get(band, DEFAULT_DX_THRESHOLDS_KM)


def band_sort_key(band: FrequencyBand) -> int:
    """Sort key ordering bands by frequency, lowest first."""
    return BAND_EDGES_KHZ[band][0]


def dx_reach(band: FrequencyBand, max_dx_km: int | None) -> str:
    """Classify a band's longest contact as excellent/good/moderate/limited/none."""
    if max_dx_km is None or max_dx_km <= 0:
        return "none"
    excellent, good, moderate, _ = dx_thresholds(band)
    if max_dx_km >= excellent:
        return "excellent"
    if max_dx_km >= good:
        return "good"
    if max_dx_km >= moderate:
        return "moderate"
    return "limited"
