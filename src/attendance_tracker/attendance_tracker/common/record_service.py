from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Generic, List, Optional, Protocol, TypeVar

from ..core.exceptions import StoreError, ValidationError
from .broadcast import Broadcaster, Listener, Subscription
from .datetime_utils import align_tz, now_local
from .validators import require_id

T = TypeVar("T")


class RecordRepository(Protocol[T]):
    def contains(self, record_id: str) -> bool:
        raise NotImplementedError

    def get(self, record_id: str) -> Optional[T]:
        raise NotImplementedError

    def put(self, record_id: str, record: T) -> None:
        raise NotImplementedError

    def add(self, record_id: str, record: T) -> bool:
        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> List[T]:
        raise NotImplementedError

    def clear(self) -> int:
        raise NotImplementedError


class RecordService(ABC, Generic[T]):
    """CRUD facade shared by the attendance, leave and leave type services.

    Contract: mutations return a success flag, reads return None / [] on
    absence; every failure is logged, never raised to the caller. After each
    successful mutation the full sorted record list is broadcast to subscribers.
    """

    entity_name = "Record"

    def __init__(self, repository: RecordRepository[T], *, clock: Callable[[], datetime] = now_local):
        self._repo = repository
        self._clock = clock
        self._stream: Broadcaster[List[T]] = Broadcaster(f"{self.entity_name}Service")
        self._logger = logging.getLogger(type(self).__module__)

    @abstractmethod
    def _id_of(self, record: T) -> Optional[str]:
        raise NotImplementedError

    @abstractmethod
    def _with_id(self, record: T, record_id: str) -> T:
        raise NotImplementedError

    def _validate_fields(self, record: T) -> None:
        """Entity specific rules; raise ValidationError."""

    def _sort(self, records: List[T]) -> List[T]:
        return records

    def create(self, record: T) -> bool:
        try:
            self._validate(record)
            record_id = self._id_of(record)
            if not self._repo.add(record_id, record):
                self._log_error("%s with ID %s already exists", self.entity_name, record_id)
                return False
        except ValidationError as e:
            self._log_error("%s", e)
            return False
        except StoreError:
            self._logger.exception("Failed to create %s", self._lower_name)
            return False

        self._broadcast()
        self._logger.info("%s created successfully: %s", self.entity_name, record_id)
        return True

    def read(self, record_id: str) -> Optional[T]:
        try:
            if not self._repo.contains(record_id):
                self._log_error("%s with ID %s not found", self.entity_name, record_id)
                return None
            return self._repo.get(record_id)
        except StoreError:
            self._logger.exception("Failed to read %s with ID %s", self._lower_name, record_id)
            return None

    def get_all(self) -> List[T]:
        try:
            return self._sort(self._repo.list_all())
        except StoreError:
            self._logger.exception("Failed to get all %s records", self._lower_name)
            return []

    def update(self, record_id: str, updated: T) -> bool:
        try:
            self._validate(updated)
            if not self._repo.contains(record_id):
                self._log_error("%s with ID %s does not exist", self.entity_name, record_id)
                return False
            if self._id_of(updated) != record_id:
                self._log_error("ID in updated %s does not match the provided ID", self._lower_name)
                return False
            self._repo.put(record_id, updated)
        except ValidationError as e:
            self._log_error("%s", e)
            return False
        except StoreError:
            self._logger.exception("Failed to update %s with ID %s", self._lower_name, record_id)
            return False

        self._broadcast()
        self._logger.info("%s updated successfully: %s", self.entity_name, record_id)
        return True

    def delete(self, record_id: str) -> bool:
        try:
            if not self._repo.contains(record_id):
                self._log_error("%s with ID %s does not exist", self.entity_name, record_id)
                return False
            self._repo.delete(record_id)
        except StoreError:
            self._logger.exception("Failed to delete %s with ID %s", self._lower_name, record_id)
            return False

        self._broadcast()
        self._logger.info("%s deleted successfully: %s", self.entity_name, record_id)
        return True

    def create_with_auto_id(self, record: T) -> Optional[str]:
        """Create the record under its own ID, or a fresh uuid4 when it has none."""

        record_id = self._id_of(record) or str(uuid.uuid4())
        return record_id if self.create(self._with_id(record, record_id)) else None

    def clear(self) -> bool:
        try:
            removed = self._repo.clear()
        except StoreError:
            self._logger.exception("Failed to clear %s records", self._lower_name)
            return False

        self._broadcast()
        self._logger.info("All %s records cleared successfully (%d removed)", self._lower_name, removed)
        return True

    def subscribe(self, listener: Listener) -> Subscription[List[T]]:
        """Receive the full sorted record list after every successful mutation."""

        return self._stream.subscribe(listener)

    def dispose(self) -> None:
        self._stream.close()
        self._logger.info("%sService disposed successfully", self.entity_name)

    @property
    def _lower_name(self) -> str:
        return self.entity_name[0].lower() + self.entity_name[1:]

    def _validate(self, record: T) -> None:
        require_id(self._id_of(record), self.entity_name)
        self._validate_fields(record)

    def _broadcast(self) -> None:
        if not self._stream.is_closed:
            self._stream.emit(self.get_all())

    def _log_error(self, message: str, *args: Any) -> None:
        self._logger.error("%sService Error: " + message, self.entity_name, *args)

    def _now(self) -> datetime:
        return self._clock()

    @staticmethod
    def _between(value: datetime, start: datetime, end: datetime) -> bool:
        """Exclusive range check: start < value < end."""

        value_s, start = align_tz(value, start)
        value_e, end = align_tz(value, end)
        return value_s > start and value_e < end
