from __future__ import annotations

from functools import wraps
from typing import Any

from flask import Flask, jsonify, request

from ..attendance.records import build_record_map
from ..common.datetime_utils import parse_iso_datetime
from ..common.logging import get_logger
from ..container import Container
from ..core.exceptions import ValidationError

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    def json_endpoint(view):
        """Map domain validation failures to 400 and anything else to 500."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                logger.warning("api.rejected", endpoint=request.endpoint, reason=str(e))
                return jsonify({"success": False, "message": str(e)}), 400
            except Exception:
                logger.exception("api.failed", endpoint=request.endpoint)
                return jsonify({"success": False, "message": "Internal error while computing attendance"}), 500

        return wrapper

    def _read_inputs() -> tuple[Any, ...]:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")

        timetable = container.timetable_service.build_timetable(data.get("timetable"))
        records = build_record_map(data.get("records"))
        settings = container.settings_service.merge(data.get("settings"))
        now = parse_iso_datetime(data["now"]) if data.get("now") else None
        return timetable, records, settings, now

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/settings/defaults", methods=["GET"], endpoint="api_settings_defaults")
    def api_settings_defaults():
        return jsonify({"settings": container.settings_service.defaults.to_dict()})

    @app.route("/api/attendance/stats", methods=["POST"], endpoint="api_attendance_stats")
    @json_endpoint
    def api_attendance_stats():
        timetable, records, settings, now = _read_inputs()
        summary = container.attendance_service.summarize(timetable, records, settings, now=now)
        return jsonify({"success": True, **summary.to_dict()})

    @app.route("/api/attendance/projections", methods=["POST"], endpoint="api_attendance_projections")
    @json_endpoint
    def api_attendance_projections():
        timetable, records, settings, now = _read_inputs()
        report = container.attendance_service.project(timetable, records, settings, now=now)
        return jsonify({"success": True, **report.to_dict()})

    @app.route("/api/attendance/report", methods=["POST"], endpoint="api_attendance_report")
    @json_endpoint
    def api_attendance_report():
        timetable, records, settings, now = _read_inputs()
        report = container.attendance_service.build_report(timetable, records, settings, now=now)
        return jsonify({"success": True, **report.to_dict()})
