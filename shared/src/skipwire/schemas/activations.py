"""Pydantic schemas for portable-station activations (POTA/SOTA)."""

from __future__ import annotations

from enum import Enum

from pydantic import AwareDatetime, BaseModel


class ActivationType(str, Enum):
    """Activation program."""

    POTA = "POTA"
    SOTA = "SOTA"


class Activation(BaseModel):
    """A single spotted activation of a park or summit."""

    model_config = {"frozen": True}

    spot_id: str
    activator_callsign: str
    reference: str
    reference_name: str | None = None
    type: ActivationType
    frequency: float | None = None  # kHz
    mode: str | None = None
    grid: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    spotted_at: AwareDatetime | None = None
    qso_count: int | None = None
    source: str = ""
