"""Card composition: collect descriptors from every applicable producer and rank them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from skipwire.schemas.cards import CardDescriptor

from dashboard.context import DashboardContext
from dashboard.registry import CardProducer, CardRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComposedCard:
    """A ranked descriptor still joined to the producer that created it."""

    descriptor: CardDescriptor
    producer: CardProducer

    def render(self, ctx: DashboardContext) -> dict[str, Any] | None:
        return self.producer.render(ctx, self.descriptor)


def _as_list(result: CardDescriptor | list[CardDescriptor] | None) -> list[CardDescriptor]:
    if result is None:
        return []
    if isinstance(result, CardDescriptor):
        return [result]
    return list(result)


def compose(registry: CardRegistry, ctx: DashboardContext) -> list[ComposedCard]:
    """Run every registered producer and sort all cards by priority, highest first.

    Producers that cannot render or return nothing are skipped. The sort is
    stable, so equal priorities keep registration order and, within a
    producer, emission order.
    """
    composed: list[ComposedCard] = []
    for producer in registry.producers():
        name = type(producer).__name__
        if not producer.can_render(ctx):
            logger.debug("Skipping %s: cannot render", name)
            continue
        descriptors = _as_list(producer.create_config(ctx))
        if not descriptors:
            logger.debug("Skipping %s: no cards", name)
            continue
        composed.extend(ComposedCard(descriptor=d, producer=producer) for d in descriptors)

    seen: set[str] = set()
    for card in composed:
        if card.descriptor.id in seen:
            logger.warning("Duplicate card id %s in render pass", card.descriptor.id)
        seen.add(card.descriptor.id)

    composed.sort(key=lambda c: c.descriptor.priority, reverse=True)
    logger.debug("Composed %d cards", len(composed))
    return composed


def compose_cards(registry: CardRegistry, ctx: DashboardContext) -> list[CardDescriptor]:
    """Ordered card descriptors for grid placement."""
    return [card.descriptor for card in compose(registry, ctx)]


def render_dashboard(registry: CardRegistry, ctx: DashboardContext) -> list[dict[str, Any]]:
    """Ordered cards with their rendered views. Cards whose view is None are dropped."""
    rendered: list[dict[str, Any]] = []
    for card in compose(registry, ctx):
        view = card.render(ctx)
        if view is None:
            logger.debug("No view for card %s", card.descriptor.id)
            continue
        rendered.append({"card": card.descriptor, "view": view})
    return rendered
