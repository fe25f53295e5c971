"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from invtrack.application.queries import (
    DEFAULT_ALERT_LIMIT,
    DEFAULT_RECENT_LIMIT,
    DEFAULT_TOP_N,
)
from invtrack.domain.exceptions import ValidationError
from invtrack.infrastructure.persistence.json_state_repository import DEFAULT_SLOT

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    slot: str = DEFAULT_SLOT
    alert_limit: int = DEFAULT_ALERT_LIMIT
    recent_limit: int = DEFAULT_RECENT_LIMIT
    top_n: int = DEFAULT_TOP_N

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            data_dir=Path(env.get("INVTRACK_DATA_DIR") or DEFAULT_DATA_DIR),
            slot=env.get("INVTRACK_SLOT") or DEFAULT_SLOT,
            alert_limit=_positive_int(env, "INVTRACK_ALERT_LIMIT", DEFAULT_ALERT_LIMIT),
            recent_limit=_positive_int(env, "INVTRACK_RECENT_LIMIT", DEFAULT_RECENT_LIMIT),
            top_n=_positive_int(env, "INVTRACK_TOP_N", DEFAULT_TOP_N),
        )


def _positive_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValidationError(f"{key} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValidationError(f"{key} must be positive, got {value}")
    return value
