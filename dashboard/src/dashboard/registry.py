"""Card producer contract and the registries populated at startup.

Registries are plain objects built once and passed to the composer; there
is no module-level global. Card producers are append-only with no
deduplication. Help sections dedupe by id, first registration wins.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from skipwire.schemas.cards import CardDescriptor, HelpSection

from dashboard.context import DashboardContext

logger = logging.getLogger(__name__)


@runtime_checkable
class CardProducer(Protocol):
    """A self-contained source of one or more dashboard cards."""

    def can_render(self, ctx: DashboardContext) -> bool:
        """Whether the snapshot holds enough data for this producer."""
        ...

    def create_config(
        self, ctx: DashboardContext
    ) -> CardDescriptor | list[CardDescriptor] | None:
        """Build the card descriptor(s) with priority and hotness, or None."""
        ...

    def render(self, ctx: DashboardContext, config: CardDescriptor) -> dict[str, Any] | None:
        """Build the view payload for a descriptor this producer created."""
        ...


class CardRegistry:
    """Ordered, append-only list of card producers."""

    def __init__(self) -> None:
        self._producers: list[CardProducer] = []

    def register(self, producer: CardProducer) -> None:
        if not isinstance(producer, CardProducer):
            raise TypeError(
                f"{type(producer).__name__} does not implement can_render/create_config/render"
            )
        self._producers.append(producer)
        logger.debug("Registered card producer %s", type(producer).__name__)

    def producers(self) -> tuple[CardProducer, ...]:
        return tuple(self._producers)

    def clear(self) -> None:
        self._producers.clear()

    def __len__(self) -> int:
        return len(self._producers)


class HelpRegistry:
    """Help sections keyed by id, returned in display order."""

    def __init__(self) -> None:
        self._sections: list[HelpSection] = []

    def register(self, section: HelpSection) -> bool:
        """Add a section unless one with the same id exists. Returns True if added."""
        if any(existing.id == section.id for existing in self._sections):
            logger.debug("Help section %s already registered, ignoring", section.id)
            return False
        self._sections.append(section)
        return True

    def sections(self) -> list[HelpSection]:
        """Sections sorted by order; equal orders keep registration order."""
        return sorted(self._sections, key=lambda s: s.order)

    def clear(self) -> None:
        self._sections.clear()

    def __len__(self) -> int:
        return len(self._sections)
