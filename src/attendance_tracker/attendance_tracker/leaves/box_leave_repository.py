from __future__ import annotations

from ..database.box_repository import BoxRepository
from ..database.store import LocalStore
from .model import Leave
from .repository import LeaveRepository


class BoxLeaveRepository(BoxRepository[Leave], LeaveRepository):
    entity_name = "Leave"

    def __init__(self, store: LocalStore):
        super().__init__(lambda: store.leave_box)

    def _to_map(self, record: Leave) -> dict:
        return record.to_json()

    def _from_map(self, data: dict) -> Leave:
        return Leave.from_json(data)
