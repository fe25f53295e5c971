"""Persistence bridge: load once at startup, save after every change.

The store knows nothing about storage; the bridge subscribes to it.
"""

from __future__ import annotations

import logging
from typing import Callable

from invtrack.application.store import InventoryStore
from invtrack.domain.exceptions import StateFormatError
from invtrack.domain.model.state import InventoryState
from invtrack.domain.repository.state_repository import StateRepository

logger = logging.getLogger(__name__)


class PersistenceBridge:

    def __init__(
        self,
        repository: StateRepository,
        seed: Callable[[], InventoryState],
    ) -> None:
        self._repository = repository
        self._seed = seed

    def load_initial_state(self) -> InventoryState:
        """Return the saved snapshot, or the seed data if there is none
        or it cannot be read."""
        try:
            state = self._repository.load()
        except StateFormatError as exc:
            logger.warning("Ignoring unreadable saved state, using seed data: %s", exc)
            return self._seed()
        if state is None:
            logger.info("No saved state found, using seed data")
            return self._seed()
        return state

    def attach(self, store: InventoryStore) -> Callable[[], None]:
        """Save every new snapshot *store* produces; returns the detacher."""
        return store.subscribe(self._repository.save)

    def open_store(self, **store_options) -> InventoryStore:
        store = InventoryStore(self.load_initial_state(), **store_options)
        self.attach(store)
        return store
