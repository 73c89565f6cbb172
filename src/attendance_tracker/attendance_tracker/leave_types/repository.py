from __future__ import annotations

from typing import List, Optional, Protocol

from .model import LeaveType


class LeaveTypeRepository(Protocol):
    def contains(self, record_id: str) -> bool:
        raise NotImplementedError

    def get(self, record_id: str) -> Optional[LeaveType]:
        raise NotImplementedError

    def put(self, record_id: str, record: LeaveType) -> None:
        raise NotImplementedError

    def add(self, record_id: str, record: LeaveType) -> bool:
        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> List[LeaveType]:
        raise NotImplementedError

    def clear(self) -> int:
        raise NotImplementedError
