"""Per-render context handed to every card producer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from skipwire.schemas.cards import DashboardSnapshot


@dataclass(frozen=True)
class DashboardContext:
    """The immutable snapshot plus the single "now" read for this render pass."""

    snapshot: DashboardSnapshot
    now: datetime
