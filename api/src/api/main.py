"""FastAPI application factory."""

from __future__ import annotations

import logging

from dashboard.bootstrap import build_card_registry, build_help_registry
from dashboard.registry import CardRegistry, HelpRegistry
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from skipwire.config import get_settings

from api.routers import dashboard, health
from api.services.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def create_app(
    *,
    card_registry: CardRegistry | None = None,
    help_registry: HelpRegistry | None = None,
    snapshot_store: SnapshotStore | None = None,
) -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)

    app = FastAPI(title=settings.api_title, version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.site_url],
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.state.card_registry = card_registry or build_card_registry()
    app.state.help_registry = help_registry or build_help_registry()
    app.state.snapshot_store = snapshot_store or SnapshotStore()

    app.include_router(health.router, tags=["health"])
    app.include_router(dashboard.router, prefix="/v1", tags=["public"])
    logger.info("%s ready", settings.api_title)
    return app


app = create_app()
