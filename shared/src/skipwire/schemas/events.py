"""Pydantic schemas for scheduled events (contests, meteor showers)."""

from __future__ import annotations

from enum import Enum

from pydantic import AwareDatetime, BaseModel, Field

from skipwire.schemas.propagation import FrequencyBand


class LifecycleState(str, Enum):
    """Lifecycle of a time-bounded event. Derived from (interval, now), never stored."""

    UPCOMING = "UPCOMING"
    ACTIVE = "ACTIVE"
    ENDED = "ENDED"


class Contest(BaseModel):
    """An amateur radio contest."""

    model_config = {"frozen": True}

    name: str
    start_time: AwareDatetime
    end_time: AwareDatetime
    bands: frozenset[FrequencyBand] = Field(default_factory=frozenset)
    modes: frozenset[str] = Field(default_factory=frozenset)
    sponsor: str | None = None
    calendar_source_url: str | None = None
    official_rules_url: str | None = None


class MeteorShower(BaseModel):
    """A meteor shower with a visibility window and a narrower peak window."""

    model_config = {"frozen": True}

    name: str
    code: str
    peak_start: AwareDatetime
    peak_end: AwareDatetime
    visibility_start: AwareDatetime
    visibility_end: AwareDatetime
    peak_zhr: int
    parent_body: str | None = None
    info_url: str | None = None
