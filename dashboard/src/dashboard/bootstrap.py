"""Startup wiring: build the registries the API injects into each render pass."""

from __future__ import annotations

import logging

from skipwire.schemas.activations import ActivationType

from dashboard.help import DEFAULT_HELP_SECTIONS
from dashboard.producers.activations import ActivationsProducer
from dashboard.producers.events import ContestProducer, MeteorShowerProducer
from dashboard.producers.propagation import (
    BandActivityProducer,
    BandConditionsProducer,
    SolarIndicesProducer,
)
from dashboard.registry import CardRegistry, HelpRegistry

logger = logging.getLogger(__name__)


def build_card_registry() -> CardRegistry:
    registry = CardRegistry()
    registry.register(SolarIndicesProducer())
    registry.register(BandConditionsProducer())
    registry.register(BandActivityProducer())
    registry.register(ActivationsProducer(ActivationType.POTA))
    registry.register(ActivationsProducer(ActivationType.SOTA))
    registry.register(ContestProducer())
    registry.register(MeteorShowerProducer())
    logger.info("Card registry ready with %d producers", len(registry))
    return registry


def build_help_registry() -> HelpRegistry:
    registry = HelpRegistry()
    for section in DEFAULT_HELP_SECTIONS:
        registry.register(section)
    return registry
