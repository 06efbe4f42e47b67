"""Public dashboard endpoints: ranked cards and help sections."""

from __future__ import annotations

from datetime import datetime, timedelta

from dashboard.composer import compose, render_dashboard
from dashboard.context import DashboardContext
from dashboard.registry import CardRegistry, HelpRegistry
from fastapi import APIRouter, Depends, HTTPException
from skipwire.config import get_settings
from skipwire.schemas.cards import CardDescriptor, DashboardSnapshot

from api.dependencies import get_card_registry, get_clock, get_help_registry, get_snapshot_store
from api.services.snapshot_store import SnapshotStore

router = APIRouter()


def _is_stale(snapshot: DashboardSnapshot, now: datetime) -> bool:
    if snapshot.fetched_at is None:
        return True
    max_age = timedelta(minutes=get_settings().snapshot_stale_minutes)
    return now - snapshot.fetched_at > max_age


def _card_payload(card: CardDescriptor, view: dict) -> dict:
    return {"card": card.model_dump(mode="json"), "view": view}


@router.get("/dashboard")
async def get_dashboard(
    registry: CardRegistry = Depends(get_card_registry),
    store: SnapshotStore = Depends(get_snapshot_store),
    now: datetime = Depends(get_clock),
):
    snapshot = store.get()
    ctx = DashboardContext(snapshot=snapshot, now=now)
    cards = [_card_payload(item["card"], item["view"]) for item in render_dashboard(registry, ctx)]
    return {
        "generated_at": now.isoformat(),
        "snapshot_at": snapshot.fetched_at.isoformat() if snapshot.fetched_at else None,
        "stale": _is_stale(snapshot, now),
        "cards": cards,
    }


@router.get("/cards/{card_id}")
async def get_card(
    card_id: str,
    registry: CardRegistry = Depends(get_card_registry),
    store: SnapshotStore = Depends(get_snapshot_store),
    now: datetime = Depends(get_clock),
):
    ctx = DashboardContext(snapshot=store.get(), now=now)
    for composed in compose(registry, ctx):
        if composed.descriptor.id != card_id:
            continue
        view = composed.render(ctx)
        if view is None:
            break
        return _card_payload(composed.descriptor, view)
    raise HTTPException(status_code=404, detail="Card not found")


@router.get("/help")
async def get_help(registry: HelpRegistry = Depends(get_help_registry)):
    return {"sections": [s.model_dump(mode="json") for s in registry.sections()]}
