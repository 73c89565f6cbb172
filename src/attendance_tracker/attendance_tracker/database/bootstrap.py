from __future__ import annotations

import sqlite3
from typing import Iterable

from .sqlite_base import db_cursor, table_name


def apply_schema(conn: sqlite3.Connection, boxes: Iterable[str]) -> None:
    """Create one key/value table per box (idempotent: CREATE IF NOT EXISTS)."""

    with db_cursor(conn) as cur:
        for name in boxes:
            cur.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {table_name(name)} (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )


def list_boxes(conn: sqlite3.Connection) -> list[str]:
    with db_cursor(conn) as cur:
        cur.execute("SELECT name FROM sqlite_master WHERE type='table' ORDER BY name")
        return [row[0] for row in cur.fetchall()]
