from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from .attendance.box_attendance_repository import BoxAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .database.connection import StoreConfig
from .database.store import LocalStore
from .leave_types.box_leave_type_repository import BoxLeaveTypeRepository
from .leave_types.service import LeaveTypeService
from .leaves.box_leave_repository import BoxLeaveRepository
from .leaves.service import LeaveService
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    store: LocalStore

    attendance_repo: BoxAttendanceRepository
    leaves_repo: BoxLeaveRepository
    leave_types_repo: BoxLeaveTypeRepository

    attendance_service: AttendanceService
    leave_service: LeaveService
    leave_type_service: LeaveTypeService
    settings_service: SettingsService

    def close(self) -> None:
        self.attendance_service.dispose()
        self.leave_service.dispose()
        self.leave_type_service.dispose()
        self.settings_service.dispose()
        self.store.close()


def build_container(*, store_config: StoreConfig, clock: Callable[[], datetime] = now_local) -> Container:
    store = LocalStore(store_config)
    store.open()

    attendance_repo = BoxAttendanceRepository(store)
    leaves_repo = BoxLeaveRepository(store)
    leave_types_repo = BoxLeaveTypeRepository(store)

    return Container(
        store=store,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        leave_types_repo=leave_types_repo,
        attendance_service=AttendanceService(attendance_repo, clock=clock),
        leave_service=LeaveService(leaves_repo, clock=clock),
        leave_type_service=LeaveTypeService(leave_types_repo, clock=clock),
        settings_service=SettingsService(store),
    )
