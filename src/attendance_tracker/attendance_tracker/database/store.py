from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..core.constants import ATTENDANCE_BOX, LEAVE_BOX, LEAVE_TYPE_BOX, SETTINGS_BOX
from ..core.exceptions import StoreError, StoreNotOpenError
from .bootstrap import apply_schema, list_boxes
from .connection import StoreConfig, connect
from .sqlite_base import db_cursor, decode_value, encode_value, table_name

logger = logging.getLogger(__name__)


class Box:
    """A named key/value collection inside the local store.

    Values are JSON documents; keys are strings. Every sqlite failure surfaces
    as ``StoreError``.
    """

    def __init__(self, store: "LocalStore", name: str):
        self._store = store
        self._name = name
        self._table = table_name(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_open(self) -> bool:
        return self._store.is_open

    def contains_key(self, key: str) -> bool:
        with self._cursor() as cur:
            cur.execute(f"SELECT 1 FROM {self._table} WHERE key=?", (key,))
            return cur.fetchone() is not None

    def get(self, key: str, default: Any = None) -> Any:
        with self._cursor() as cur:
            cur.execute(f"SELECT value FROM {self._table} WHERE key=?", (key,))
            row = cur.fetchone()
        if row is None:
            return default
        return self._decode(key, row[0])

    def put(self, key: str, value: Any) -> None:
        try:
            raw = encode_value(value)
        except (TypeError, ValueError) as e:
            raise StoreError(f"Value for {self._name}[{key}] is not JSON serializable") from e

        with self._cursor() as cur:
            cur.execute(
                f"""
                INSERT INTO {self._table}(key, value) VALUES(?, ?)
                ON CONFLICT(key) DO UPDATE SET value=excluded.value
                """,
                (key, raw),
            )

    def add(self, key: str, value: Any) -> bool:
        """Insert only. Returns False when the key is already taken."""

        try:
            raw = encode_value(value)
        except (TypeError, ValueError) as e:
            raise StoreError(f"Value for {self._name}[{key}] is not JSON serializable") from e

        try:
            with self._cursor() as cur:
                cur.execute(f"INSERT INTO {self._table}(key, value) VALUES(?, ?)", (key, raw))
        except StoreError as e:
            if isinstance(e.__cause__, sqlite3.IntegrityError):
                return False
            raise
        return True

    def delete(self, key: str) -> bool:
        with self._cursor() as cur:
            cur.execute(f"DELETE FROM {self._table} WHERE key=?", (key,))
            return cur.rowcount > 0

    def keys(self) -> List[str]:
        with self._cursor() as cur:
            cur.execute(f"SELECT key FROM {self._table} ORDER BY rowid")
            return [row[0] for row in cur.fetchall()]

    def items(self) -> List[Tuple[str, Any]]:
        with self._cursor() as cur:
            cur.execute(f"SELECT key, value FROM {self._table} ORDER BY rowid")
            rows = cur.fetchall()

        items: List[Tuple[str, Any]] = []
        for key, raw in rows:
            try:
                items.append((key, decode_value(raw)))
            except ValueError:
                logger.error("Skipping corrupt value stored at %s[%s]", self._name, key)
        return items

    def clear(self) -> int:
        with self._cursor() as cur:
            cur.execute(f"DELETE FROM {self._table}")
            return cur.rowcount

    def __len__(self) -> int:
        with self._cursor() as cur:
            cur.execute(f"SELECT COUNT(*) FROM {self._table}")
            return int(cur.fetchone()[0])

    def _decode(self, key: str, raw: str) -> Any:
        try:
            return decode_value(raw)
        except ValueError as e:
            raise StoreError(f"Corrupt value stored at {self._name}[{key}]") from e

    def _cursor(self):
        return self._store._cursor(self._name)


class LocalStore:
    """Embedded on-device store: one sqlite file, one table per box.

    The store is created once and handed to repositories (no global instance).
    """

    def __init__(self, config: StoreConfig):
        self._config = config
        self._conn: Optional[sqlite3.Connection] = None
        self._boxes: Dict[str, Box] = {}
        self._lock = threading.RLock()

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        if self.is_open:
            return

        try:
            conn = connect(self._config)
        except (sqlite3.Error, OSError) as e:
            logger.exception("Failed to open local store at %s", self._config.path)
            raise StoreError(f"Failed to open local store at {self._config.path}") from e

        try:
            apply_schema(conn, self._config.boxes)
        except (sqlite3.Error, ValueError) as e:
            conn.close()
            logger.exception("Failed to open boxes in %s", self._config.path)
            raise StoreError("Failed to open boxes") from e

        self._conn = conn
        self._boxes = {name: Box(self, name) for name in self._config.boxes}
        logger.info("Local store opened: %s (boxes=%d)", self._config.path, len(self._boxes))

    def close(self) -> None:
        with self._lock:
            conn, self._conn = self._conn, None
            if conn is None:
                return
            try:
                conn.close()
                logger.info("Local store closed: %s", self._config.path)
            except sqlite3.Error:
                logger.exception("Failed to close local store %s", self._config.path)

    def box(self, name: str) -> Box:
        if not self.is_open:
            raise StoreNotOpenError(f"{name} is not initialized or closed")
        try:
            return self._boxes[name]
        except KeyError:
            raise StoreError(f"Unknown box: {name}") from None

    @property
    def attendance_box(self) -> Box:
        return self.box(ATTENDANCE_BOX)

    @property
    def settings_box(self) -> Box:
        return self.box(SETTINGS_BOX)

    @property
    def leave_box(self) -> Box:
        return self.box(LEAVE_BOX)

    @property
    def leave_type_box(self) -> Box:
        return self.box(LEAVE_TYPE_BOX)

    def backup(self, target_path: str | Path) -> bool:
        """Copy the whole store into another sqlite file."""

        target = Path(target_path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with self._lock:
                conn = self._require_connection("store")
                dst = sqlite3.connect(str(target))
                try:
                    conn.backup(dst)
                finally:
                    dst.close()
        except (StoreError, sqlite3.Error, OSError):
            logger.exception("Failed to backup local store to %s", target)
            return False

        logger.info("Local store backed up to %s", target)
        return True

    def list_boxes(self) -> List[str]:
        """Names of the box tables present in the sqlite file."""

        with self._lock:
            return list_boxes(self._require_connection("store"))

    def _require_connection(self, box_name: str) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreNotOpenError(f"{box_name} is not initialized or closed")
        return self._conn

    @contextmanager
    def _cursor(self, box_name: str) -> Iterator[sqlite3.Cursor]:
        with self._lock:
            conn = self._require_connection(box_name)
            try:
                with db_cursor(conn) as cur:
                    yield cur
            except sqlite3.Error as e:
                raise StoreError(f"Failed to access {box_name}") from e
