from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional

from ..common.datetime_utils import now_local
from ..common.record_service import RecordService
from ..common.validators import require_non_empty, require_positive
from ..core.enums import LeaveCriteria
from .model import LeaveType
from .repository import LeaveTypeRepository


class LeaveTypeService(RecordService[LeaveType]):
    entity_name = "LeaveType"

    def __init__(self, leave_types: LeaveTypeRepository, *, clock: Callable[[], datetime] = now_local):
        super().__init__(leave_types, clock=clock)

    def _id_of(self, record: LeaveType) -> Optional[str]:
        return record.leave_type_id

    def _with_id(self, record: LeaveType, record_id: str) -> LeaveType:
        return replace(record, leave_type_id=record_id)

    def _validate_fields(self, record: LeaveType) -> None:
        require_non_empty(record.name, "LeaveType name")
        require_positive(record.maximum_days, "LeaveType maximum days")

    def _sort(self, records: List[LeaveType]) -> List[LeaveType]:
        # Leave types carry no timestamp.
        return sorted(records, key=lambda r: (r.name.casefold(), r.leave_type_id or ""))

    def create_leave_type(self, leave_type: LeaveType) -> bool:
        return self.create(leave_type)

    def read_leave_type(self, leave_type_id: str) -> Optional[LeaveType]:
        return self.read(leave_type_id)

    def get_all_leave_types(self) -> List[LeaveType]:
        return self.get_all()

    def update_leave_type(self, leave_type_id: str, updated: LeaveType) -> bool:
        return self.update(leave_type_id, updated)

    def delete_leave_type(self, leave_type_id: str) -> bool:
        return self.delete(leave_type_id)

    def get_leave_type_by_criteria(self, criteria: LeaveCriteria) -> List[LeaveType]:
        return [r for r in self.get_all() if r.criteria is criteria]
