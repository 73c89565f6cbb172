from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional

from ..common.datetime_utils import now_local, to_local_naive
from ..common.record_service import RecordService
from ..common.validators import require_non_empty, require_not_in_future, require_positive
from ..core.enums import LeaveStatus, UploadStatus
from ..leave_types.model import LeaveType
from .model import Leave
from .repository import LeaveRepository


class LeaveService(RecordService[Leave]):
    """Use cases over locally stored leave applications."""

    entity_name = "Leave"

    def __init__(self, leaves: LeaveRepository, *, clock: Callable[[], datetime] = now_local):
        super().__init__(leaves, clock=clock)

    def _id_of(self, record: Leave) -> Optional[str]:
        return record.leave_id

    def _with_id(self, record: Leave, record_id: str) -> Leave:
        return replace(record, leave_id=record_id)

    def _validate_fields(self, record: Leave) -> None:
        require_non_empty(record.leave_type.name, "Leave type name")
        require_positive(record.leave_type.maximum_days, "Leave type maximum days")
        require_not_in_future(record.applied_on, self._now(), "Leave applied date")

    def _sort(self, records: List[Leave]) -> List[Leave]:
        return sorted(records, key=lambda r: to_local_naive(r.applied_on), reverse=True)

    def create_leave(self, leave: Leave) -> bool:
        return self.create(leave)

    def read_leave(self, leave_id: str) -> Optional[Leave]:
        return self.read(leave_id)

    def get_all_leaves(self) -> List[Leave]:
        return self.get_all()

    def update_leave(self, leave_id: str, updated: Leave) -> bool:
        return self.update(leave_id, updated)

    def delete_leave(self, leave_id: str) -> bool:
        return self.delete(leave_id)

    def apply_leave(
        self,
        leave_type: LeaveType,
        *,
        leave_id: Optional[str] = None,
        applied_on: Optional[datetime] = None,
        remark: Optional[str] = None,
        device_id: Optional[str] = None,
    ) -> Optional[str]:
        """Record a pending leave application, applied now unless a date is given."""

        leave = Leave(
            leave_id=leave_id,
            leave_type=leave_type,
            applied_on=applied_on or self._now(),
            remark=remark,
            leave_status=LeaveStatus.PENDING,
            upload_status=UploadStatus.PENDING,
            device_id=device_id,
        )
        return self.create_with_auto_id(leave)

    def get_leave_by_type(self, leave_type: LeaveType) -> List[Leave]:
        return [r for r in self.get_all() if r.leave_type == leave_type]

    def get_leave_by_date_range(self, start: datetime, end: datetime) -> List[Leave]:
        return [r for r in self.get_all() if self._between(r.applied_on, start, end)]

    def approve_leave(self, leave_id: str, approved_by: str) -> bool:
        """Move a pending leave to approved, stamping approver and time."""

        if not approved_by or not approved_by.strip():
            self._log_error("Approver cannot be empty")
            return False

        record = self.read(leave_id)
        if record is None:
            return False
        if record.leave_status is not LeaveStatus.PENDING:
            self._log_error("Leave with ID %s is already %s", leave_id, record.leave_status.value)
            return False

        return self.update(
            leave_id,
            replace(
                record,
                leave_status=LeaveStatus.APPROVED,
                approved_by=approved_by,
                approved_on=self._now(),
            ),
        )

    def get_pending_uploads(self) -> List[Leave]:
        return [r for r in self.get_all() if r.upload_status is not UploadStatus.UPLOADED]

    def mark_uploaded(self, leave_id: str) -> bool:
        record = self.read(leave_id)
        if record is None:
            return False
        return self.update(
            leave_id,
            replace(record, upload_status=UploadStatus.UPLOADED, uploaded_at=self._now()),
        )
