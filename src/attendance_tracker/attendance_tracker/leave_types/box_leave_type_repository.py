from __future__ import annotations

from ..database.box_repository import BoxRepository
from ..database.store import LocalStore
from .model import LeaveType
from .repository import LeaveTypeRepository


class BoxLeaveTypeRepository(BoxRepository[LeaveType], LeaveTypeRepository):
    entity_name = "LeaveType"

    def __init__(self, store: LocalStore):
        super().__init__(lambda: store.leave_type_box)

    def _to_map(self, record: LeaveType) -> dict:
        return record.to_json()

    def _from_map(self, data: dict) -> LeaveType:
        return LeaveType.from_json(data)
