"""Abstract repository for the persisted inventory snapshot.

Defined in the domain layer so the domain never depends on
infrastructure. The store is saved and loaded whole; there is no
per-record access.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from invtrack.domain.model.state import InventoryState


class StateRepository(ABC):

    @abstractmethod
    def load(self) -> InventoryState | None:
        """Return the saved snapshot, or None if nothing was saved yet.

        Raises StateFormatError if the saved blob cannot be decoded.
        """

    @abstractmethod
    def save(self, state: InventoryState) -> None:
        """Overwrite the saved snapshot with *state*."""
