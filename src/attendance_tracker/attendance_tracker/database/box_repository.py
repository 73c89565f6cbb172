from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, Optional, TypeVar

from .store import Box

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BoxRepository(ABC, Generic[T]):
    """Shared persistence for one record type kept in one box.

    Records are stored as their JSON map under their identifier. A map that
    fails to decode is logged and skipped so one bad entry never hides the rest.
    """

    entity_name = "Record"

    def __init__(self, box_provider: Callable[[], Box]):
        # Resolved per call so a closed store raises StoreNotOpenError.
        self._box_provider = box_provider

    @property
    def _box(self) -> Box:
        return self._box_provider()

    @abstractmethod
    def _to_map(self, record: T) -> dict:
        raise NotImplementedError

    @abstractmethod
    def _from_map(self, data: dict) -> T:
        raise NotImplementedError

    def contains(self, record_id: str) -> bool:
        return self._box.contains_key(record_id)

    def get(self, record_id: str) -> Optional[T]:
        data = self._box.get(record_id)
        if data is None:
            return None
        return self._decode(record_id, data)

    def put(self, record_id: str, record: T) -> None:
        self._box.put(record_id, self._to_map(record))

    def add(self, record_id: str, record: T) -> bool:
        return self._box.add(record_id, self._to_map(record))

    def delete(self, record_id: str) -> bool:
        return self._box.delete(record_id)

    def list_all(self) -> List[T]:
        records: List[T] = []
        for key, data in self._box.items():
            record = self._decode(key, data)
            if record is not None:
                records.append(record)
        return records

    def clear(self) -> int:
        return self._box.clear()

    def _decode(self, key: str, data: Any) -> Optional[T]:
        if not isinstance(data, dict):
            logger.error("Invalid %s map stored under %s", self.entity_name, key)
            return None
        try:
            return self._from_map(data)
        except (KeyError, TypeError, ValueError):
            logger.exception("Failed to convert map to %s object (key=%s)", self.entity_name, key)
            return None
