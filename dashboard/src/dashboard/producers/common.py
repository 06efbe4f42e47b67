"""Helpers shared by the card producers."""

from __future__ import annotations

import re
from datetime import timedelta

from skipwire.schemas.cards import CardDescriptor, CardSize, CardType

from scoring.hotness import classify_hotness, hotness_label

_UNSAFE_ID_CHARS = re.compile(r"[^A-Za-z0-9-]")


def card_id(card_type: CardType, *natural_key: object) -> str:
    """Composite id "<type>-<key...>" with non id-safe characters replaced by '-'."""
    raw = "-".join([card_type.value, *(str(part) for part in natural_key)])
    return _UNSAFE_ID_CHARS.sub("-", raw)


def descriptor(
    card_type: CardType,
    priority: int,
    *natural_key: object,
    size: CardSize = CardSize.STANDARD,
) -> CardDescriptor:
    return CardDescriptor(
        id=card_id(card_type, *natural_key),
        type=card_type,
        size=size,
        priority=priority,
        hotness=classify_hotness(priority),
    )


def seconds(delta: timedelta) -> int:
    """Whole seconds, truncated toward zero."""
    return int(delta.total_seconds())


def base_view(config: CardDescriptor, title: str, subtitle: str | None = None) -> dict:
    return {
        "title": title,
        "subtitle": subtitle,
        "hotness_label": hotness_label(config.hotness),
    }
