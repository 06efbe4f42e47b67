"""Default help sections for the dashboard help modal."""

from __future__ import annotations

from skipwire.schemas.cards import HelpSection

DEFAULT_HELP_SECTIONS: list[HelpSection] = [
    HelpSection(
        id="about",
        title="About",
        order=0,
        body=(
            "Cards are ranked by how favorable conditions are right now. "
            "Hot cards (Excellent) appear first, followed by warm (Good), "
            "neutral (Moderate), and cool (Limited)."
        ),
    ),
    HelpSection(
        id="solar-indices",
        title="Solar Indices",
        order=10,
        icon="sun",
        body=(
            "SFI: higher values (150+) indicate better HF propagation. "
            "K-index: lower values (0-2) mean quieter, more stable conditions. "
            "A-index: 24-hour average geomagnetic activity, lower is better."
        ),
    ),
    HelpSection(
        id="band-conditions",
        title="Band Conditions",
        order=20,
        icon="radio",
        body=(
            "Each band is rated Good, Fair, or Poor with a confidence level. "
            "Where live spots exist, the card blends spot activity (70%) with "
            "the forecast rating (30%)."
        ),
    ),
    HelpSection(
        id="pota-activations",
        title="POTA Activations",
        order=30,
        body=(
            "Parks on the Air encourages portable operation from parks and public "
            "lands. More active spots mean more chances for contacts."
        ),
    ),
    HelpSection(
        id="sota-activations",
        title="SOTA Activations",
        order=40,
        body=(
            "Summits on the Air encourages portable operation from mountain summits. "
            "Spots older than an hour no longer count toward freshness."
        ),
    ),
    HelpSection(
        id="contests",
        title="Contests",
        order=50,
        body=(
            "Contests are time-limited events where operators make as many contacts "
            "as possible. Active contests and those starting within six hours rank highest."
        ),
    ),
    HelpSection(
        id="meteor-showers",
        title="Meteor Showers",
        order=60,
        body=(
            "Meteor scatter works best near a shower's peak. The current rate is "
            "estimated from the peak ZHR and decays with distance from the peak."
        ),
    ),
]
