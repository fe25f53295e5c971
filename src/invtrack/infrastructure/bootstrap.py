"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from invtrack.application.store import InventoryStore, utc_now
from invtrack.infrastructure.config import Settings
from invtrack.infrastructure.persistence.bridge import PersistenceBridge
from invtrack.infrastructure.persistence.json_state_repository import JsonStateRepository
from invtrack.infrastructure.seed import seed_state


def state_repository(settings: Settings) -> JsonStateRepository:
    return JsonStateRepository(settings.data_dir, settings.slot)


def open_store(settings: Settings) -> InventoryStore:
    """Load the saved (or seed) state and persist every later change."""
    bridge = PersistenceBridge(state_repository(settings), seed=lambda: seed_state(utc_now()))
    return bridge.open_store()
