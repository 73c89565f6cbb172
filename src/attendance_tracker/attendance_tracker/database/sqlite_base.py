from __future__ import annotations

import json
import re
import sqlite3
from contextlib import contextmanager
from typing import Any, Iterator

_BOX_NAME = re.compile(r"^[a-z_][a-z0-9_]*$")


@contextmanager
def db_cursor(conn: sqlite3.Connection) -> Iterator[sqlite3.Cursor]:
    cur = conn.cursor()
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()


def table_name(box_name: str) -> str:
    """Validate a box name and return it quoted for use as a table identifier."""

    if not _BOX_NAME.match(box_name or ""):
        raise ValueError(f"Invalid box name: {box_name!r}")
    return f'"{box_name}"'


def encode_value(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def decode_value(raw: str) -> Any:
    return json.loads(raw)
