"""FastAPI dependency injection."""

from __future__ import annotations

from datetime import UTC, datetime

from dashboard.registry import CardRegistry, HelpRegistry
from fastapi import Request

from api.services.snapshot_store import SnapshotStore


def get_card_registry(request: Request) -> CardRegistry:
    return request.app.state.card_registry


def get_help_registry(request: Request) -> HelpRegistry:
    return request.app.state.help_registry


def get_snapshot_store(request: Request) -> SnapshotStore:
    return request.app.state.snapshot_store


def get_clock() -> datetime:
    """Current instant, read once per request. Tests override this."""
    return datetime.now(UTC)
