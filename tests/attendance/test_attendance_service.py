from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from src.attendance_tracker.attendance_tracker.attendance.box_attendance_repository import BoxAttendanceRepository
from src.attendance_tracker.attendance_tracker.attendance.model import Attendance
from src.attendance_tracker.attendance_tracker.attendance.service import AttendanceService
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceType, MarkType, UploadStatus
from src.attendance_tracker.attendance_tracker.core.exceptions import BroadcastClosedError


class InMemoryAttendance:
    def __init__(self):
        self._by_id: dict[str, Attendance] = {}

    def contains(self, record_id: str) -> bool:
        return record_id in self._by_id

    def get(self, record_id: str) -> Optional[Attendance]:
        return self._by_id.get(record_id)

    def put(self, record_id: str, record: Attendance) -> None:
        self._by_id[record_id] = record

    def add(self, record_id: str, record: Attendance) -> bool:
        if record_id in self._by_id:
            return False
        self._by_id[record_id] = record
        return True

    def delete(self, record_id: str) -> bool:
        return self._by_id.pop(record_id, None) is not None

    def list_all(self):
        return list(self._by_id.values())

    def clear(self) -> int:
        removed = len(self._by_id)
        self._by_id.clear()
        return removed


def _service(now: datetime):
    repo = InMemoryAttendance()
    return AttendanceService(repo, clock=lambda: now), repo


def _record(attendance_id, when, kind=AttendanceType.CHECK_IN, **kwargs) -> Attendance:
    return Attendance(attendance_id, when, kind, **kwargs)


def test_create_then_read(fixed_now):
    svc, repo = _service(fixed_now)
    record = _record("a1", fixed_now - timedelta(hours=1))

    assert svc.create(record) is True
    assert svc.read("a1") == record
    assert repo.contains("a1")


def test_duplicate_id_is_rejected(fixed_now):
    svc, repo = _service(fixed_now)
    assert svc.create(_record("a1", fixed_now - timedelta(hours=2)))

    assert svc.create(_record("a1", fixed_now - timedelta(hours=1), AttendanceType.CHECK_OUT)) is False
    assert repo.get("a1").type is AttendanceType.CHECK_IN


def test_future_timestamp_is_rejected(fixed_now, caplog):
    svc, repo = _service(fixed_now)

    assert svc.create(_record("a1", fixed_now + timedelta(minutes=1))) is False
    assert repo.list_all() == []
    assert "AttendanceService Error: Attendance datetime cannot be in the future" in caplog.text


def test_timestamp_equal_to_now_is_accepted(fixed_now):
    svc, _ = _service(fixed_now)
    assert svc.create(_record("a1", fixed_now)) is True


@pytest.mark.parametrize("bad_id", [None, ""])
def test_missing_id_is_rejected(fixed_now, bad_id):
    svc, repo = _service(fixed_now)
    assert svc.create(_record(bad_id, fixed_now)) is False
    assert repo.list_all() == []


def test_read_missing_returns_none(fixed_now):
    svc, _ = _service(fixed_now)
    assert svc.read("nope") is None


def test_get_all_is_newest_first(fixed_now):
    svc, _ = _service(fixed_now)
    svc.create(_record("old", fixed_now - timedelta(days=2)))
    svc.create(_record("new", fixed_now - timedelta(minutes=5)))
    svc.create(_record("mid", fixed_now - timedelta(days=1)))

    assert [r.attendance_id for r in svc.get_all_attendance()] == ["new", "mid", "old"]


def test_get_all_empty(fixed_now):
    svc, _ = _service(fixed_now)
    assert svc.get_all() == []


def test_update_requires_matching_id(fixed_now):
    svc, repo = _service(fixed_now)
    original = _record("a1", fixed_now - timedelta(hours=1))
    svc.create(original)

    assert svc.update("a1", replace(original, attendance_id="a2")) is False
    assert svc.update("missing", replace(original, attendance_id="missing")) is False
    assert repo.get("a1") == original

    changed = replace(original, device_id="pixel-7")
    assert svc.update_attendance("a1", changed) is True
    assert repo.get("a1").device_id == "pixel-7"


def test_update_rejects_future_timestamp(fixed_now):
    svc, repo = _service(fixed_now)
    original = _record("a1", fixed_now - timedelta(hours=1))
    svc.create(original)

    assert svc.update("a1", replace(original, timestamp=fixed_now + timedelta(days=1))) is False
    assert repo.get("a1") == original


def test_delete(fixed_now):
    svc, repo = _service(fixed_now)
    svc.create(_record("a1", fixed_now))

    assert svc.delete_attendance("missing") is False
    assert svc.delete_attendance("a1") is True
    assert svc.delete_attendance("a1") is False
    assert repo.list_all() == []


def test_create_with_auto_id_keeps_given_id(fixed_now):
    svc, repo = _service(fixed_now)
    record = _record("given", fixed_now, lat=1.0, lng=2.0, mark_type=MarkType.QR)

    assert svc.create_with_auto_id(record) == "given"
    assert repo.get("given") == record
    assert svc.create_with_auto_id(record) is None


def test_create_with_auto_id_generates_id(fixed_now):
    svc, repo = _service(fixed_now)

    new_id = svc.create_with_auto_id(_record(None, fixed_now, device_id="d1"))

    assert new_id
    stored = repo.get(new_id)
    assert stored.attendance_id == new_id
    assert stored.device_id == "d1"


def test_create_with_auto_id_still_validates(fixed_now):
    svc, _ = _service(fixed_now)
    assert svc.create_with_auto_id(_record(None, fixed_now + timedelta(hours=1))) is None


def test_take_attendance_records_pending_event_now(fixed_now):
    svc, repo = _service(fixed_now)

    new_id = svc.take_attendance(AttendanceType.CHECK_IN, lat=21.0, lng=105.8, mark_type=MarkType.GEOLOCATION)

    stored = repo.get(new_id)
    assert stored.timestamp == fixed_now
    assert stored.upload_status is UploadStatus.PENDING
    assert stored.mark_type is MarkType.GEOLOCATION
    assert stored.has_valid_location


def test_stream_emits_full_sorted_list_after_each_mutation(fixed_now):
    svc, _ = _service(fixed_now)
    emissions = []
    svc.subscribe(emissions.append)

    older = _record("older", fixed_now - timedelta(hours=3))
    newer = _record("newer", fixed_now - timedelta(hours=1))
    svc.create(older)
    svc.create(newer)
    svc.update("older", replace(older, device_id="d"))
    svc.delete("newer")
    svc.create(newer)
    svc.create(newer)

    assert [[r.attendance_id for r in e] for e in emissions] == [
        ["older"],
        ["newer", "older"],
        ["newer", "older"],
        ["older"],
        ["newer", "older"],
    ]


def test_failed_mutations_do_not_emit(fixed_now):
    svc, _ = _service(fixed_now)
    emissions = []
    svc.subscribe(emissions.append)

    svc.create(_record("a1", fixed_now + timedelta(days=1)))
    svc.delete("missing")

    assert emissions == []


def test_cancelled_listener_stops_receiving(fixed_now):
    svc, _ = _service(fixed_now)
    emissions = []
    sub = svc.subscribe(emissions.append)
    svc.create(_record("a1", fixed_now))
    sub.cancel()
    svc.create(_record("a2", fixed_now))

    assert len(emissions) == 1


def test_dispose_closes_stream_but_keeps_persisting(fixed_now):
    svc, repo = _service(fixed_now)
    emissions = []
    svc.subscribe(emissions.append)
    svc.dispose()

    assert svc.create(_record("a1", fixed_now)) is True
    assert repo.contains("a1")
    assert emissions == []
    with pytest.raises(BroadcastClosedError):
        svc.subscribe(emissions.append)


def test_clear_removes_everything(fixed_now):
    svc, repo = _service(fixed_now)
    emissions = []
    svc.subscribe(emissions.append)
    svc.create(_record("a1", fixed_now))
    svc.create(_record("a2", fixed_now))

    assert svc.clear() is True
    assert repo.list_all() == []
    assert emissions[-1] == []


def test_queries_by_type_and_exclusive_date_range(fixed_now):
    svc, _ = _service(fixed_now)
    day = datetime(2024, 3, 14)
    svc.create(_record("in", day.replace(hour=8), AttendanceType.CHECK_IN))
    svc.create(_record("out", day.replace(hour=17), AttendanceType.CHECK_OUT))
    svc.create(_record("edge", day.replace(hour=20), AttendanceType.CHECK_IN))

    assert [r.attendance_id for r in svc.get_attendance_by_type(AttendanceType.CHECK_IN)] == ["edge", "in"]
    assert svc.get_attendance_by_type(AttendanceType.LEAVE) == []

    in_range = svc.get_attendance_by_date_range(day.replace(hour=8), day.replace(hour=20))
    assert [r.attendance_id for r in in_range] == ["out"]


def test_pending_uploads_and_mark_uploaded(fixed_now):
    svc, repo = _service(fixed_now)
    svc.create(_record("p", fixed_now - timedelta(hours=2), upload_status=UploadStatus.PENDING))
    svc.create(_record("none", fixed_now - timedelta(hours=1)))
    svc.create(_record("done", fixed_now - timedelta(hours=3), upload_status=UploadStatus.UPLOADED))

    assert [r.attendance_id for r in svc.get_pending_uploads()] == ["none", "p"]

    assert svc.mark_uploaded("p") is True
    assert repo.get("p").is_uploaded
    assert repo.get("p").uploaded_at == fixed_now
    assert svc.mark_uploaded("missing") is False
    assert [r.attendance_id for r in svc.get_pending_uploads()] == ["none"]


def test_closed_store_turns_into_failure_results(store, fixed_now, caplog):
    svc = AttendanceService(BoxAttendanceRepository(store), clock=lambda: fixed_now)
    assert svc.create(_record("a1", fixed_now))
    store.close()

    assert svc.create(_record("a2", fixed_now)) is False
    assert svc.read("a1") is None
    assert svc.get_all() == []
    assert svc.update("a1", _record("a1", fixed_now)) is False
    assert svc.delete("a1") is False
    assert svc.clear() is False
    assert "Failed to create attendance" in caplog.text


def test_corrupt_record_is_skipped_by_get_all(store, fixed_now):
    svc = AttendanceService(BoxAttendanceRepository(store), clock=lambda: fixed_now)
    svc.create(_record("good", fixed_now))
    store.attendance_box.put("bad", {"id": "bad", "type": "checkIn"})

    assert [r.attendance_id for r in svc.get_all()] == ["good"]


def test_aware_and_naive_timestamps_sort_together(fixed_now):
    svc, _ = _service(fixed_now)
    emissions = []
    svc.subscribe(emissions.append)

    assert svc.create(_record("utc", datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc))) is True
    assert svc.create(_record("local", fixed_now - timedelta(hours=1))) is True

    assert [r.attendance_id for r in svc.get_all()] == ["local", "utc"]
    assert [r.attendance_id for r in emissions[-1]] == ["local", "utc"]


def test_duplicate_is_rejected_even_when_existence_check_misses(store, fixed_now):
    class StaleContains(BoxAttendanceRepository):
        def contains(self, record_id: str) -> bool:
            return False

    repo = StaleContains(store)
    svc = AttendanceService(repo, clock=lambda: fixed_now)
    first = _record("a1", fixed_now - timedelta(hours=2))

    assert svc.create(first) is True
    assert svc.create(_record("a1", fixed_now - timedelta(hours=1), AttendanceType.CHECK_OUT)) is False
    assert repo.get("a1") == first
