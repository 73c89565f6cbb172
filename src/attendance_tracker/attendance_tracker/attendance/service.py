from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional

from ..common.datetime_utils import now_local, to_local_naive
from ..common.record_service import RecordService
from ..common.validators import require_not_in_future
from ..core.enums import AttendanceType, MarkType, UploadStatus
from .model import Attendance
from .repository import AttendanceRepository


class AttendanceService(RecordService[Attendance]):
    """Use cases over locally stored attendance records."""

    entity_name = "Attendance"

    def __init__(self, attendance: AttendanceRepository, *, clock: Callable[[], datetime] = now_local):
        super().__init__(attendance, clock=clock)

    def _id_of(self, record: Attendance) -> Optional[str]:
        return record.attendance_id

    def _with_id(self, record: Attendance, record_id: str) -> Attendance:
        return replace(record, attendance_id=record_id)

    def _validate_fields(self, record: Attendance) -> None:
        require_not_in_future(record.timestamp, self._now(), "Attendance datetime")

    def _sort(self, records: List[Attendance]) -> List[Attendance]:
        return sorted(records, key=lambda r: to_local_naive(r.timestamp), reverse=True)

    def create_attendance(self, attendance: Attendance) -> bool:
        return self.create(attendance)

    def read_attendance(self, attendance_id: str) -> Optional[Attendance]:
        return self.read(attendance_id)

    def get_all_attendance(self) -> List[Attendance]:
        return self.get_all()

    def update_attendance(self, attendance_id: str, updated: Attendance) -> bool:
        return self.update(attendance_id, updated)

    def delete_attendance(self, attendance_id: str) -> bool:
        return self.delete(attendance_id)

    def take_attendance(
        self,
        attendance_type: AttendanceType,
        *,
        lat: Optional[float] = None,
        lng: Optional[float] = None,
        device_id: Optional[str] = None,
        mark_type: Optional[MarkType] = None,
    ) -> Optional[str]:
        """Record an event happening now, pending upload, under a fresh ID."""

        attendance = Attendance(
            attendance_id=None,
            timestamp=self._now(),
            type=attendance_type,
            lat=lat,
            lng=lng,
            device_id=device_id,
            mark_type=mark_type,
            upload_status=UploadStatus.PENDING,
        )
        return self.create_with_auto_id(attendance)

    def get_attendance_by_type(self, attendance_type: AttendanceType) -> List[Attendance]:
        return [r for r in self.get_all() if r.type is attendance_type]

    def get_attendance_by_date_range(self, start: datetime, end: datetime) -> List[Attendance]:
        return [r for r in self.get_all() if self._between(r.timestamp, start, end)]

    def get_pending_uploads(self) -> List[Attendance]:
        return [r for r in self.get_all() if r.upload_status is not UploadStatus.UPLOADED]

    def mark_uploaded(self, attendance_id: str) -> bool:
        record = self.read(attendance_id)
        if record is None:
            return False
        return self.update(
            attendance_id,
            replace(record, upload_status=UploadStatus.UPLOADED, uploaded_at=self._now()),
        )
