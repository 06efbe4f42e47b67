"""Event card producers: one card per contest and per meteor shower that has not ended."""

from __future__ import annotations

from datetime import UTC, datetime

from skipwire.schemas.cards import CardDescriptor, CardType, PriorityInput
from skipwire.schemas.events import Contest, LifecycleState, MeteorShower

from dashboard.context import DashboardContext
from dashboard.producers.common import base_view, card_id, descriptor, seconds
from scoring.contests import (
    contest_ending_soon,
    contest_state,
    contest_time_remaining,
    score_contest,
    summarize_contests,
)
from scoring.meteors import (
    current_zhr,
    is_at_peak,
    relevant_showers,
    score_shower,
    shower_ending_soon,
    shower_time_remaining,
    time_to_peak,
)
from scoring.priority import calculate_priority


def _utc_stamp(moment: datetime) -> str:
    return moment.astimezone(UTC).strftime("%Y%m%d%H%M")


def _contest_key(contest: Contest) -> tuple[str, str]:
    return contest.name, _utc_stamp(contest.start_time)


def _shower_key(shower: MeteorShower) -> tuple[str, str]:
    return shower.code, _utc_stamp(shower.peak_start)


class ContestProducer:
    def _contests(self, ctx: DashboardContext) -> list[Contest]:
        return [
            c
            for c in ctx.snapshot.contests or ()
            if contest_state(c, ctx.now) is not LifecycleState.ENDED
        ]

    def can_render(self, ctx: DashboardContext) -> bool:
        # Same rule as meteor showers: an empty calendar has nothing to show
        return bool(ctx.snapshot.contests)

    def create_config(self, ctx: DashboardContext) -> list[CardDescriptor] | None:
        configs = []
        for contest in self._contests(ctx):
            result = score_contest(contest, ctx.now)
            priority = calculate_priority(
                PriorityInput(favorable=result.favorable, score=result.score), now=ctx.now
            )
            configs.append(descriptor(CardType.CONTEST, priority, *_contest_key(contest)))
        return configs or None

    def render(self, ctx: DashboardContext, config: CardDescriptor) -> dict | None:
        contest = next(
            (c for c in self._contests(ctx) if card_id(CardType.CONTEST, *_contest_key(c)) == config.id),
            None,
        )
        if contest is None:
            return None
        result = score_contest(contest, ctx.now)
        view = base_view(config, contest.name, contest.sponsor)
        view.update({
            "state": result.state.value,
            "score": result.score,
            "favorable": result.favorable,
            "ending_soon": contest_ending_soon(contest, ctx.now),
            "time_remaining_seconds": seconds(contest_time_remaining(contest, ctx.now)),
            "start_time": contest.start_time.isoformat(),
            "end_time": contest.end_time.isoformat(),
            "bands": sorted(b.value for b in contest.bands),
            "modes": sorted(contest.modes),
            "calendar_source_url": contest.calendar_source_url,
            "official_rules_url": contest.official_rules_url,
            "calendar": summarize_contests(ctx.snapshot.contests or (), ctx.now),
        })
        return view


class MeteorShowerProducer:
    def can_render(self, ctx: DashboardContext) -> bool:
        return bool(ctx.snapshot.meteor_showers)

    def create_config(self, ctx: DashboardContext) -> list[CardDescriptor] | None:
        configs = []
        for shower in relevant_showers(ctx.snapshot.meteor_showers or (), ctx.now):
            result = score_shower(shower, ctx.now)
            priority = calculate_priority(
                PriorityInput(favorable=result.favorable, score=result.score), now=ctx.now
            )
            configs.append(descriptor(CardType.METEOR_SHOWER, priority, *_shower_key(shower)))
        return configs or None

    def render(self, ctx: DashboardContext, config: CardDescriptor) -> dict | None:
        showers = relevant_showers(ctx.snapshot.meteor_showers or (), ctx.now)
        shower = next(
            (s for s in showers if card_id(CardType.METEOR_SHOWER, *_shower_key(s)) == config.id),
            None,
        )
        if shower is None:
            return None
        result = score_shower(shower, ctx.now)
        view = base_view(config, shower.name, shower.parent_body)
        view.update({
            "code": shower.code,
            "state": result.state.value,
            "score": result.score,
            "favorable": result.favorable,
            "at_peak": is_at_peak(shower, ctx.now),
            "current_zhr": current_zhr(shower, ctx.now),
            "peak_zhr": shower.peak_zhr,
            "time_to_peak_seconds": seconds(time_to_peak(shower, ctx.now)),
            "time_remaining_seconds": seconds(shower_time_remaining(shower, ctx.now)),
            "ending_soon": shower_ending_soon(shower, ctx.now),
            "parent_body": shower.parent_body,
            "info_url": shower.info_url,
        })
        return view
