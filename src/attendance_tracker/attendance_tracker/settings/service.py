from __future__ import annotations

import logging
from typing import Any, Dict

from ..common.broadcast import Broadcaster, Listener, Subscription
from ..core.constants import CURRENT_DB_VERSION, DB_VERSION_KEY
from ..core.exceptions import StoreError
from ..database.store import LocalStore

logger = logging.getLogger(__name__)


class SettingsService:
    """Application settings kept as plain JSON values in the settings box."""

    def __init__(self, store: LocalStore):
        self._store = store
        self._stream: Broadcaster[Dict[str, Any]] = Broadcaster("SettingsService")

    def get_setting(self, key: str, default: Any = None) -> Any:
        try:
            return self._store.settings_box.get(key, default)
        except StoreError:
            logger.exception("Failed to get setting %s", key)
            return default

    def set_setting(self, key: str, value: Any) -> bool:
        if not key:
            logger.error("SettingsService Error: Setting key cannot be empty")
            return False
        try:
            self._store.settings_box.put(key, value)
        except StoreError:
            logger.exception("Failed to set setting %s", key)
            return False

        self._broadcast()
        logger.info("Setting updated: %s", key)
        return True

    def get_all_settings(self) -> Dict[str, Any]:
        try:
            return dict(self._store.settings_box.items())
        except StoreError:
            logger.exception("Failed to get all settings")
            return {}

    def subscribe(self, listener: Listener) -> Subscription[Dict[str, Any]]:
        return self._stream.subscribe(listener)

    def dispose(self) -> None:
        self._stream.close()
        logger.info("SettingsService disposed successfully")

    def perform_migration(self) -> bool:
        """Bring ``db_version`` up to the current schema version.

        Stores without a version are treated as version 1. Returns True when the
        store is up to date afterwards.
        """

        version = self.get_setting(DB_VERSION_KEY, 1)
        try:
            version = int(version)
        except (TypeError, ValueError):
            logger.error("Invalid %s value %r, assuming 1", DB_VERSION_KEY, version)
            version = 1

        if version >= CURRENT_DB_VERSION:
            logger.debug("No migration needed (db_version=%d)", version)
            return True

        # 1 -> 2: version marker only, record layout is unchanged.
        if not self.set_setting(DB_VERSION_KEY, CURRENT_DB_VERSION):
            logger.error("Migration from db_version %d failed", version)
            return False

        logger.info("Migrated local store from db_version %d to %d", version, CURRENT_DB_VERSION)
        return True

    def _broadcast(self) -> None:
        if not self._stream.is_closed:
            self._stream.emit(self.get_all_settings())
