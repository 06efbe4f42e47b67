"""Priority to hotness classification."""

from __future__ import annotations

from skipwire.schemas.cards import Hotness

# Lower bound (inclusive) for each level, hottest first
HOTNESS_THRESHOLDS: list[tuple[int, Hotness]] = [
    (70, Hotness.HOT),
    (45, Hotness.WARM),
    (20, Hotness.NEUTRAL),
]

HOTNESS_LABELS: dict[Hotness, str] = {
    Hotness.HOT: "Excellent",
    Hotness.WARM: "Good",
    Hotness.NEUTRAL: "Moderate",
    Hotness.COOL: "Limited",
}


def classify_hotness(priority: int) -> Hotness:
    for lower, level in HOTNESS_THRESHOLDS:
        if priority >= lower:
            return level
    return Hotness.COOL


def hotness_label(hotness: Hotness) -> str:
    return HOTNESS_LABELS[hotness]
