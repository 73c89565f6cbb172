from __future__ import annotations

from typing import List, Optional, Protocol

from .model import Attendance


class AttendanceRepository(Protocol):
    """Storage interface the attendance service depends on (not the concrete store)."""

    def contains(self, record_id: str) -> bool:
        raise NotImplementedError

    def get(self, record_id: str) -> Optional[Attendance]:
        raise NotImplementedError

    def put(self, record_id: str, record: Attendance) -> None:
        raise NotImplementedError

    def add(self, record_id: str, record: Attendance) -> bool:
        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> List[Attendance]:
        raise NotImplementedError

    def clear(self) -> int:
        raise NotImplementedError
