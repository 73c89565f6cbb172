from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso
from ..container import Container
from ..leave_types.model import LeaveType


def register(app: Flask, container: Container) -> None:
    service = container.leave_service
    leave_types = container.leave_type_service

    def _fail(message: str, status: int = 400):
        return jsonify({"success": False, "message": message}), status

    @app.route("/api/leaves", methods=["GET"], endpoint="api_leaves_list")
    def api_leaves_list():
        try:
            start = parse_iso(request.args.get("start"))
            end = parse_iso(request.args.get("end"))
        except ValueError as e:
            return _fail(str(e))

        if start is not None and end is not None:
            records = service.get_leave_by_date_range(start, end)
        elif start is not None or end is not None:
            return _fail("Both start and end are required for a date range")
        else:
            records = service.get_all_leaves()

        leave_type_id = request.args.get("leavetypeid")
        if leave_type_id:
            records = [r for r in records if r.leave_type.leave_type_id == leave_type_id]

        return jsonify({"success": True, "data": [r.to_json() for r in records]})

    @app.route("/api/leaves", methods=["POST"], endpoint="api_leaves_create")
    def api_leaves_create():
        """Apply for leave.

        The leave type is either referenced by ``leavetypeid`` (looked up in the
        store) or embedded as a ``type`` map. ``appliedOn`` defaults to now.
        """

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        leave_type_id = data.get("leavetypeid")
        if leave_type_id:
            leave_type = leave_types.read_leave_type(str(leave_type_id))
            if leave_type is None:
                return _fail(f"LeaveType with ID {leave_type_id} not found", 404)
        else:
            try:
                leave_type = LeaveType.from_json(data["type"])
            except (KeyError, TypeError, ValueError) as e:
                return _fail(f"Invalid leave type: {e}")

        try:
            applied_on = parse_iso(data.get("appliedOn"))
        except (TypeError, ValueError) as e:
            return _fail(str(e))

        leave_id = service.apply_leave(
            leave_type,
            leave_id=data.get("id"),
            applied_on=applied_on,
            remark=data.get("remark"),
            device_id=data.get("deviceid"),
        )
        if leave_id is None:
            return _fail("Failed to apply for leave")
        return jsonify({"success": True, "id": leave_id, "message": "Leave applied"}), 201

    @app.route("/api/leaves/<leave_id>", methods=["GET"], endpoint="api_leaves_get")
    def api_leaves_get(leave_id: str):
        record = service.read_leave(leave_id)
        if record is None:
            return _fail(f"Leave with ID {leave_id} not found", 404)
        return jsonify({"success": True, "data": record.to_json()})

    @app.route("/api/leaves/<leave_id>", methods=["DELETE"], endpoint="api_leaves_delete")
    def api_leaves_delete(leave_id: str):
        if service.read_leave(leave_id) is None:
            return _fail(f"Leave with ID {leave_id} not found", 404)
        if not service.delete_leave(leave_id):
            return _fail("Failed to delete leave")
        return jsonify({"success": True, "message": "Leave deleted"})

    @app.route("/api/leaves/<leave_id>/approve", methods=["POST"], endpoint="api_leaves_approve")
    def api_leaves_approve(leave_id: str):
        if service.read_leave(leave_id) is None:
            return _fail(f"Leave with ID {leave_id} not found", 404)

        data = request.get_json(silent=True) or {}
        approved_by = str(data.get("approvedby") or "").strip()
        if not approved_by:
            return _fail("approvedby is required")

        if not service.approve_leave(leave_id, approved_by):
            return _fail("Leave cannot be approved")
        return jsonify({"success": True, "message": f"Leave approved by {approved_by}"})
