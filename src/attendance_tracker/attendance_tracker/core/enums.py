from __future__ import annotations

from enum import Enum
from typing import Optional, TypeVar

E = TypeVar("E", bound="WireEnum")


class WireEnum(str, Enum):
    """Enum whose member values are the strings stored in the local store."""

    def to_json(self) -> str:
        return self.value

    @classmethod
    def from_json(cls: type[E], value: Optional[str], default: Optional[E] = None) -> E:
        try:
            return cls(value)
        except ValueError:
            if default is None:
                raise
            return default

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


class AttendanceType(WireEnum):
    """Kind of attendance event recorded by the user."""

    CHECK_IN = "checkIn"
    CHECK_OUT = "checkOut"
    LEAVE = "leave"
    WORK_FROM_HOME = "workFromHome"


class MarkType(WireEnum):
    """How an attendance record was verified."""

    GEOLOCATION = "GEOLOCATION"
    FACE = "FACE"
    QR = "QR"
    FINGERPRINT = "FINGERPRINT"


class UploadStatus(WireEnum):
    """Sync state of a locally stored record."""

    PENDING = "Pending"
    UPLOADED = "Uploaded"

    @property
    def is_pending(self) -> bool:
        return self is UploadStatus.PENDING

    @property
    def is_uploaded(self) -> bool:
        return self is UploadStatus.UPLOADED


class LeaveStatus(WireEnum):
    """Approval state of a leave request."""

    PENDING = "pending"
    APPROVED = "approved"

    @property
    def is_pending(self) -> bool:
        return self is LeaveStatus.PENDING

    @property
    def is_approved(self) -> bool:
        return self is LeaveStatus.APPROVED


class LeaveCriteria(WireEnum):
    """Recurrence period a leave type allowance applies to."""

    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    HALF_YEARLY = "halfyearly"
    YEARLY = "yearly"

    @property
    def days_in_period(self) -> int:
        return _DAYS_IN_PERIOD[self]


_DISPLAY_NAMES: dict[WireEnum, str] = {
    AttendanceType.CHECK_IN: "Check In",
    AttendanceType.CHECK_OUT: "Check Out",
    AttendanceType.LEAVE: "Leave",
    AttendanceType.WORK_FROM_HOME: "Work From Home",
    MarkType.GEOLOCATION: "Geolocation",
    MarkType.FACE: "Face Recognition",
    MarkType.QR: "QR Code",
    MarkType.FINGERPRINT: "Fingerprint",
    UploadStatus.PENDING: "Pending",
    UploadStatus.UPLOADED: "Uploaded",
    LeaveStatus.PENDING: "Pending",
    LeaveStatus.APPROVED: "Approved",
    LeaveCriteria.WEEKLY: "Weekly",
    LeaveCriteria.FORTNIGHTLY: "Fortnightly",
    LeaveCriteria.MONTHLY: "Monthly",
    LeaveCriteria.QUARTERLY: "Quarterly",
    LeaveCriteria.HALF_YEARLY: "Half Yearly",
    LeaveCriteria.YEARLY: "Yearly",
}

_DAYS_IN_PERIOD: dict[LeaveCriteria, int] = {
    LeaveCriteria.WEEKLY: 7,
    LeaveCriteria.FORTNIGHTLY: 14,
    LeaveCriteria.MONTHLY: 30,
    LeaveCriteria.QUARTERLY: 90,
    LeaveCriteria.HALF_YEARLY: 180,
    LeaveCriteria.YEARLY: 365,
}
