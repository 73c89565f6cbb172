from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import is_in_future, parse_iso, to_iso
from ..core.enums import LeaveStatus, UploadStatus
from ..leave_types.model import LeaveType


@dataclass(frozen=True)
class Leave:
    """Domain entity: a leave application, carrying its leave type by value."""

    leave_id: Optional[str]
    leave_type: LeaveType
    applied_on: datetime
    remark: Optional[str] = None
    approved_by: Optional[str] = None
    approved_on: Optional[datetime] = None
    leave_status: LeaveStatus = LeaveStatus.PENDING
    upload_status: Optional[UploadStatus] = None
    uploaded_at: Optional[datetime] = None
    device_id: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.leave_status is LeaveStatus.PENDING

    @property
    def is_approved(self) -> bool:
        return self.leave_status is LeaveStatus.APPROVED

    @property
    def is_uploaded(self) -> bool:
        return self.upload_status is UploadStatus.UPLOADED

    @property
    def is_pending_upload(self) -> bool:
        return self.upload_status is UploadStatus.PENDING

    def is_valid(self, now: datetime) -> bool:
        return self.leave_type.is_valid and not is_in_future(self.applied_on, now)

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.leave_id,
            "type": self.leave_type.to_json(),
            "remark": self.remark,
            "approvedby": self.approved_by,
            "approvedon": to_iso(self.approved_on),
            "leavestatus": self.leave_status.to_json(),
            "appliedOn": to_iso(self.applied_on),
            "status": self.upload_status.to_json() if self.upload_status else None,
            "uploadeddatetime": to_iso(self.uploaded_at),
            "deviceid": self.device_id,
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Leave":
        if not isinstance(data, dict):
            raise TypeError(f"Leave must be a map, got {type(data).__name__}")
        status = data.get("leavestatus")
        return cls(
            leave_id=data.get("id"),
            leave_type=LeaveType.from_json(data["type"]),
            applied_on=parse_iso(data["appliedOn"]),
            remark=data.get("remark"),
            approved_by=data.get("approvedby"),
            approved_on=parse_iso(data.get("approvedon")),
            leave_status=LeaveStatus.from_json(status) if status is not None else LeaveStatus.PENDING,
            upload_status=UploadStatus.from_json(data["status"]) if data.get("status") is not None else None,
            uploaded_at=parse_iso(data.get("uploadeddatetime")),
            device_id=data.get("deviceid"),
        )

    def to_json_string(self) -> str:
        return json.dumps(self.to_json())

    @classmethod
    def from_json_string(cls, value: str) -> "Leave":
        return cls.from_json(json.loads(value))
