from __future__ import annotations

from typing import List, Optional, Protocol

from .model import Leave


class LeaveRepository(Protocol):
    def contains(self, record_id: str) -> bool:
        raise NotImplementedError

    def get(self, record_id: str) -> Optional[Leave]:
        raise NotImplementedError

    def put(self, record_id: str, record: Leave) -> None:
        raise NotImplementedError

    def add(self, record_id: str, record: Leave) -> bool:
        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> List[Leave]:
        raise NotImplementedError

    def clear(self) -> int:
        raise NotImplementedError
