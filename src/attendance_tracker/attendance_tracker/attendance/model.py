from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import parse_iso, to_iso
from ..core.enums import AttendanceType, MarkType, UploadStatus


@dataclass(frozen=True)
class Attendance:
    """Domain entity: one check-in / check-out / leave / work-from-home event."""

    attendance_id: Optional[str]
    timestamp: datetime
    type: AttendanceType
    lat: Optional[float] = None
    lng: Optional[float] = None
    device_id: Optional[str] = None
    mark_type: Optional[MarkType] = None
    upload_status: Optional[UploadStatus] = None
    uploaded_at: Optional[datetime] = None

    @property
    def has_valid_location(self) -> bool:
        if self.lat is None or self.lng is None:
            return False
        return -90.0 <= self.lat <= 90.0 and -180.0 <= self.lng <= 180.0

    @property
    def is_check_in(self) -> bool:
        return self.type is AttendanceType.CHECK_IN

    @property
    def is_check_out(self) -> bool:
        return self.type is AttendanceType.CHECK_OUT

    @property
    def is_leave(self) -> bool:
        return self.type is AttendanceType.LEAVE

    @property
    def is_work_from_home(self) -> bool:
        return self.type is AttendanceType.WORK_FROM_HOME

    @property
    def is_uploaded(self) -> bool:
        return self.upload_status is UploadStatus.UPLOADED

    @property
    def is_pending_upload(self) -> bool:
        return self.upload_status is UploadStatus.PENDING

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.attendance_id,
            "datetime": to_iso(self.timestamp),
            "type": self.type.to_json(),
            "lat": self.lat,
            "lng": self.lng,
            "deviceid": self.device_id,
            "marktype": self.mark_type.to_json() if self.mark_type else None,
            "status": self.upload_status.to_json() if self.upload_status else None,
            "uploadeddatetime": to_iso(self.uploaded_at),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Attendance":
        lat = data.get("lat")
        lng = data.get("lng")
        return cls(
            attendance_id=data.get("id"),
            timestamp=parse_iso(data["datetime"]),
            type=AttendanceType.from_json(data["type"]),
            lat=float(lat) if lat is not None else None,
            lng=float(lng) if lng is not None else None,
            device_id=data.get("deviceid"),
            mark_type=MarkType.from_json(data["marktype"]) if data.get("marktype") is not None else None,
            upload_status=UploadStatus.from_json(data["status"]) if data.get("status") is not None else None,
            uploaded_at=parse_iso(data.get("uploadeddatetime")),
        )

    def to_json_string(self) -> str:
        return json.dumps(self.to_json())

    @classmethod
    def from_json_string(cls, value: str) -> "Attendance":
        return cls.from_json(json.loads(value))
