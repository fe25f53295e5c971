"""InventoryStore: the single owner and writer of the inventory snapshot.

Callers hold a reference to the store they were given; there is no
module-level instance. Readers use ``state``; the only write path is
``dispatch``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from invtrack.domain.actions import Action
from invtrack.domain.model.ids import IdGenerator
from invtrack.domain.model.state import InventoryState
from invtrack.domain.reducer import Clock, reduce

logger = logging.getLogger(__name__)

Listener = Callable[[InventoryState], None]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InventoryStore:

    def __init__(
        self,
        initial_state: InventoryState | None = None,
        *,
        clock: Clock = utc_now,
        ids: IdGenerator | None = None,
    ) -> None:
        self._state = initial_state if initial_state is not None else InventoryState.empty()
        self._clock = clock
        self._ids = ids or IdGenerator()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> InventoryState:
        return self._state

    def dispatch(self, action: Action) -> InventoryState:
        """Apply *action*, then notify subscribers if the snapshot changed.

        The new snapshot (derived fields and ledger included) is in place
        before any subscriber runs.
        """
        new_state = reduce(self._state, action, clock=self._clock, ids=self._ids)
        if new_state is self._state:
            logger.debug("%s left the state unchanged", type(action).__name__)
            return new_state

        self._state = new_state
        logger.debug(
            "Applied %s (%d products, %d transactions)",
            type(action).__name__,
            len(new_state.products),
            len(new_state.transactions),
        )
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* for every state change; returns an unsubscriber."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
