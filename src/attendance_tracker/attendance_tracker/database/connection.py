from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from pathlib import Path

from ..core.constants import ALL_BOXES, DEFAULT_STORE_PATH

MEMORY_PATH = ":memory:"


@dataclass(frozen=True)
class StoreConfig:
    path: str = DEFAULT_STORE_PATH
    boxes: tuple[str, ...] = field(default=ALL_BOXES)

    @property
    def in_memory(self) -> bool:
        return self.path == MEMORY_PATH


def connect(config: StoreConfig) -> sqlite3.Connection:
    """Open the sqlite file backing the store, creating parent folders as needed."""

    if not config.in_memory:
        Path(config.path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(config.path, check_same_thread=False)
