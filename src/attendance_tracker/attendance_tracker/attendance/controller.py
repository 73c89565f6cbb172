from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso
from ..core.enums import AttendanceType, MarkType
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _fail(message: str, status: int = 400):
        return jsonify({"success": False, "message": message}), status

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance_list")
    def api_attendance_list():
        try:
            attendance_type = AttendanceType.from_json(request.args["type"]) if request.args.get("type") else None
            start = parse_iso(request.args.get("start"))
            end = parse_iso(request.args.get("end"))
        except ValueError as e:
            return _fail(str(e))

        if start is not None and end is not None:
            records = service.get_attendance_by_date_range(start, end)
        elif start is not None or end is not None:
            return _fail("Both start and end are required for a date range")
        else:
            records = service.get_all_attendance()

        if attendance_type is not None:
            records = [r for r in records if r.type is attendance_type]

        return jsonify({"success": True, "data": [r.to_json() for r in records]})

    @app.route("/api/attendance/<attendance_id>", methods=["GET"], endpoint="api_attendance_get")
    def api_attendance_get(attendance_id: str):
        record = service.read_attendance(attendance_id)
        if record is None:
            return _fail(f"Attendance with ID {attendance_id} not found", 404)
        return jsonify({"success": True, "data": record.to_json()})

    @app.route("/api/attendance/<attendance_type>", methods=["POST"], endpoint="api_attendance_take")
    def api_attendance_take(attendance_type: str):
        data = request.get_json(silent=True) or {}
        try:
            kind = AttendanceType.from_json(attendance_type)
            mark_type = MarkType.from_json(data["marktype"]) if data.get("marktype") else None
            lat = float(data["lat"]) if data.get("lat") is not None else None
            lng = float(data["lng"]) if data.get("lng") is not None else None
        except (TypeError, ValueError) as e:
            return _fail(str(e))

        attendance_id = service.take_attendance(
            kind,
            lat=lat,
            lng=lng,
            device_id=data.get("deviceid"),
            mark_type=mark_type,
        )
        if attendance_id is None:
            return _fail(f"Failed to record {kind.display_name}")
        return jsonify({
            "success": True,
            "id": attendance_id,
            "message": f"{kind.display_name} recorded",
        }), 201

    @app.route("/api/attendance/<attendance_id>", methods=["DELETE"], endpoint="api_attendance_delete")
    def api_attendance_delete(attendance_id: str):
        if service.read_attendance(attendance_id) is None:
            return _fail(f"Attendance with ID {attendance_id} not found", 404)
        if not service.delete_attendance(attendance_id):
            return _fail("Failed to delete attendance")
        return jsonify({"success": True, "message": "Attendance deleted"})

    @app.route("/api/attendance/<attendance_id>/uploaded", methods=["POST"], endpoint="api_attendance_uploaded")
    def api_attendance_uploaded(attendance_id: str):
        if service.read_attendance(attendance_id) is None:
            return _fail(f"Attendance with ID {attendance_id} not found", 404)
        if not service.mark_uploaded(attendance_id):
            return _fail("Failed to mark attendance as uploaded")
        return jsonify({"success": True, "message": "Attendance marked as uploaded"})
