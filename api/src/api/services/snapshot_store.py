"""In-memory holder for the latest dashboard snapshot."""

from __future__ import annotations

import logging
import threading

from skipwire.schemas.cards import DashboardSnapshot

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Latest immutable snapshot, replaced wholesale by the acquisition layer."""

    def __init__(self, snapshot: DashboardSnapshot | None = None) -> None:
        self._lock = threading.Lock()
        self._snapshot = snapshot or DashboardSnapshot()

    def get(self) -> DashboardSnapshot:
        with self._lock:
            return self._snapshot

    def replace(self, snapshot: DashboardSnapshot) -> None:
        with self._lock:
            self._snapshot = snapshot
        logger.info("Dashboard snapshot replaced (fetched_at=%s)", snapshot.fetched_at)
