from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


_MISSING = object()


def register(app: Flask, container: Container) -> None:
    service = container.settings_service

    @app.route("/api/settings/<key>", methods=["GET"], endpoint="api_settings_get")
    def api_settings_get(key: str):
        value = service.get_setting(key, _MISSING)
        if value is _MISSING:
            return jsonify({"success": False, "message": f"Setting {key} not found"}), 404
        return jsonify({"success": True, "key": key, "value": value})

    @app.route("/api/settings/<key>", methods=["PUT"], endpoint="api_settings_set")
    def api_settings_set(key: str):
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "value" not in data:
            return jsonify({"success": False, "message": "Body must be a JSON object with a value"}), 400

        if not service.set_setting(key, data["value"]):
            return jsonify({"success": False, "message": f"Failed to save setting {key}"}), 400
        return jsonify({"success": True, "key": key, "value": data["value"]})
