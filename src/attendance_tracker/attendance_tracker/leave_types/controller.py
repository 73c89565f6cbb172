from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.enums import LeaveCriteria
from ..container import Container
from .model import LeaveType


def register(app: Flask, container: Container) -> None:
    service = container.leave_type_service

    def _fail(message: str, status: int = 400):
        return jsonify({"success": False, "message": message}), status

    def _parse_body(default_id=None) -> LeaveType:
        data = dict(request.get_json(silent=True) or {})
        if default_id is not None:
            data.setdefault("id", default_id)
        return LeaveType.from_json(data)

    @app.route("/api/leave-types", methods=["GET"], endpoint="api_leave_types_list")
    def api_leave_types_list():
        criteria = request.args.get("criteria")
        if criteria:
            try:
                records = service.get_leave_type_by_criteria(LeaveCriteria.from_json(criteria))
            except ValueError as e:
                return _fail(str(e))
        else:
            records = service.get_all_leave_types()
        return jsonify({"success": True, "data": [r.to_json() for r in records]})

    @app.route("/api/leave-types", methods=["POST"], endpoint="api_leave_types_create")
    def api_leave_types_create():
        try:
            leave_type = _parse_body()
        except (KeyError, TypeError, ValueError) as e:
            return _fail(f"Invalid leave type: {e}")

        leave_type_id = service.create_with_auto_id(leave_type)
        if leave_type_id is None:
            return _fail("Failed to create leave type")
        return jsonify({"success": True, "id": leave_type_id, "message": "Leave type created"}), 201

    @app.route("/api/leave-types/<leave_type_id>", methods=["GET"], endpoint="api_leave_types_get")
    def api_leave_types_get(leave_type_id: str):
        record = service.read_leave_type(leave_type_id)
        if record is None:
            return _fail(f"LeaveType with ID {leave_type_id} not found", 404)
        return jsonify({"success": True, "data": record.to_json()})

    @app.route("/api/leave-types/<leave_type_id>", methods=["PUT"], endpoint="api_leave_types_update")
    def api_leave_types_update(leave_type_id: str):
        if service.read_leave_type(leave_type_id) is None:
            return _fail(f"LeaveType with ID {leave_type_id} not found", 404)
        try:
            leave_type = _parse_body(default_id=leave_type_id)
        except (KeyError, TypeError, ValueError) as e:
            return _fail(f"Invalid leave type: {e}")

        if not service.update_leave_type(leave_type_id, leave_type):
            return _fail("Failed to update leave type")
        return jsonify({"success": True, "message": "Leave type updated"})

    @app.route("/api/leave-types/<leave_type_id>", methods=["DELETE"], endpoint="api_leave_types_delete")
    def api_leave_types_delete(leave_type_id: str):
        if service.read_leave_type(leave_type_id) is None:
            return _fail(f"LeaveType with ID {leave_type_id} not found", 404)
        if not service.delete_leave_type(leave_type_id):
            return _fail("Failed to delete leave type")
        return jsonify({"success": True, "message": "Leave type deleted"})
