"""JSON-file-backed implementation of StateRepository.

Each named slot is one JSON file in the data directory, rewritten in
full on every save.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from invtrack.domain.exceptions import StateFormatError
from invtrack.domain.model.state import InventoryState
from invtrack.domain.repository.state_repository import StateRepository
from invtrack.infrastructure.persistence.state_codec import decode_state, encode_state

logger = logging.getLogger(__name__)

DEFAULT_SLOT = "inventoryData"


class JsonStateRepository(StateRepository):

    def __init__(self, data_dir: Path, slot: str = DEFAULT_SLOT) -> None:
        self._file_path = data_dir / f"{slot}.json"

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- StateRepository interface --------------------------------------------

    def load(self) -> InventoryState | None:
        if not self._file_path.exists():
            return None
        try:
            raw = json.loads(self._file_path.read_bytes())
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise StateFormatError(f"{self._file_path.name} is not valid JSON") from exc
        return decode_state(raw)

    def save(self, state: InventoryState) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(encode_state(state), indent=2) + "\n", encoding="utf-8"
        )
        logger.debug("Saved inventory state to %s", self._file_path)
