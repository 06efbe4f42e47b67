"""Pydantic schemas for scoring output, priority input, and dashboard cards."""

from __future__ import annotations

from enum import Enum

from pydantic import AwareDatetime, BaseModel, Field

from skipwire.schemas.activations import Activation
from skipwire.schemas.events import Contest, LifecycleState, MeteorShower
from skipwire.schemas.propagation import (
    BandActivity,
    BandCondition,
    BandConditionRating,
    SolarIndices,
)

CARD_ID_PATTERN = r"^[A-Za-z0-9-]+$"


class Hotness(str, Enum):
    """Ordinal visual-priority label, hottest first."""

    HOT = "hot"
    WARM = "warm"
    NEUTRAL = "neutral"
    COOL = "cool"


class CardSize(str, Enum):
    """Grid footprint of a card."""

    STANDARD = "standard"
    WIDE = "wide"
    TALL = "tall"
    HERO = "hero"


class CardType(str, Enum):
    """Kind of entity a card displays."""

    SOLAR_INDICES = "solar-indices"
    BAND_CONDITIONS = "band-conditions"
    BAND_ACTIVITY = "band-activity"
    CONTEST = "contest"
    METEOR_SHOWER = "meteor-shower"
    POTA_ACTIVATIONS = "pota-activations"
    SOTA_ACTIVATIONS = "sota-activations"


class ScoreResult(BaseModel):
    """Output of a domain scorer."""

    model_config = {"frozen": True}

    state: LifecycleState | None = None  # None for stateless entities (solar, bands)
    score: int = Field(ge=0, le=100)
    favorable: bool


class PriorityInput(BaseModel):
    """Normalized input to the priority calculator. Absent fields contribute nothing."""

    model_config = {"frozen": True}

    favorable: bool
    score: float | None = None
    rating: BandConditionRating | None = None
    last_updated: AwareDatetime | None = None
    user_weight: float | None = None


class CardDescriptor(BaseModel):
    """One dashboard card, recomputed on every render pass."""

    model_config = {"frozen": True}

    id: str = Field(pattern=CARD_ID_PATTERN)
    type: CardType
    size: CardSize = CardSize.STANDARD
    priority: int
    hotness: Hotness


class HelpSection(BaseModel):
    """A help entry shown in the dashboard help modal."""

    model_config = {"frozen": True}

    id: str
    title: str
    order: int
    icon: str | None = None
    body: str = ""


class DashboardSnapshot(BaseModel):
    """Immutable set of the latest fetched entities. Replaced wholesale on refresh."""

    model_config = {"frozen": True}

    solar_indices: SolarIndices | None = None
    band_conditions: tuple[BandCondition, ...] = ()
    band_activities: tuple[BandActivity, ...] = ()
    contests: tuple[Contest, ...] | None = None
    meteor_showers: tuple[MeteorShower, ...] | None = None
    pota_activations: tuple[Activation, ...] | None = None
    sota_activations: tuple[Activation, ...] | None = None
    fetched_at: AwareDatetime | None = None
