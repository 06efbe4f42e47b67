"""Pydantic schemas for propagation data (solar indices, band conditions, band activity)."""

from __future__ import annotations

from enum import Enum

from pydantic import AwareDatetime, BaseModel, Field


class FrequencyBand(str, Enum):
    """Amateur radio HF/VHF bands, lowest frequency first."""

    BAND_160M = "160m"
    BAND_80M = "80m"
    BAND_60M = "60m"
    BAND_40M = "40m"
    BAND_30M = "30m"
    BAND_20M = "20m"
    BAND_17M = "17m"
    BAND_15M = "15m"
    BAND_12M = "12m"
    BAND_10M = "10m"
    BAND_6M = "6m"
    BAND_2M = "2m"


class BandConditionRating(str, Enum):
    """Coarse propagation rating for a band."""

    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_string(cls, value: str | None) -> BandConditionRating:
        """Parse a forecast feed value, mapping blank or unrecognized input to UNKNOWN.

        Used by feed adapters before building `BandCondition` records.
        """
        if value is None or not value.strip():
            return cls.UNKNOWN
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.UNKNOWN


class SolarIndices(BaseModel):
    """Snapshot of solar and geomagnetic indices."""

    model_config = {"frozen": True}

    solar_flux_index: float
    a_index: int = Field(ge=0)
    k_index: int = Field(ge=0, le=9)
    sunspot_number: int = 0
    timestamp: AwareDatetime | None = None
    source: str = ""


class BandCondition(BaseModel):
    """Rated propagation condition for a single band."""

    model_config = {"frozen": True}

    band: FrequencyBand
    rating: BandConditionRating
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    notes: str | None = None


class BandActivity(BaseModel):
    """Aggregated real-time spot activity for one band and mode."""

    model_config = {"frozen": True}

    band: FrequencyBand
    mode: str
    spot_count: int = Field(default=0, ge=0)
    baseline_spot_count: int = Field(default=0, ge=0)
    trend_percentage: float = 0.0
    max_dx_km: int | None = None
    max_dx_path: str | None = None
    active_paths: frozenset[str] = Field(default_factory=frozenset)
    window_start: AwareDatetime | None = None
    window_end: AwareDatetime | None = None
    calculated_at: AwareDatetime | None = None
