from __future__ import annotations

from datetime import date

from flask import Flask, jsonify

from ..common.api import json_body, json_errors, parse_enum
from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.enums import AttendanceStatus, SessionType
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    def _parse_date(value) -> date:
        try:
            return parse_iso_date(str(value or "").strip())
        except ValueError:
            raise ValidationError("Date must be YYYY-MM-DD")

    @app.route("/api/courses/<int:course_id>/attendance", methods=["GET"], endpoint="api_attendance_list")
    @json_errors
    def api_attendance_list(course_id: int):
        records = container.attendance_service.list_for_course(course_id)
        return jsonify({"success": True, "records": [container.attendance_service.to_view(r) for r in records]})

    @app.route("/api/courses/<int:course_id>/attendance", methods=["POST"], endpoint="api_attendance_mark")
    @json_errors
    def api_attendance_mark(course_id: int):
        data = json_body()
        record = container.attendance_service.mark_attendance(
            course_id=course_id,
            day=_parse_date(data.get("date")),
            session_type=parse_enum(SessionType, data.get("type"), "type"),
            hours=data.get("hours"),
            status=parse_enum(AttendanceStatus, data.get("status"), "status"),
            note=data.get("note"),
        )
        return jsonify({"success": True, "record": container.attendance_service.to_view(record)}), 201

    @app.route("/api/attendance/<int:record_id>", methods=["PATCH"], endpoint="api_attendance_update")
    @json_errors
    def api_attendance_update(record_id: int):
        data = json_body()
        record = container.attendance_service.update_status(
            record_id,
            parse_enum(AttendanceStatus, data.get("status"), "status"),
            note=data.get("note"),
        )
        return jsonify({"success": True, "record": container.attendance_service.to_view(record)})

    @app.route("/api/attendance/<int:record_id>", methods=["DELETE"], endpoint="api_attendance_delete")
    @json_errors
    def api_attendance_delete(record_id: int):
        container.attendance_service.delete_record(record_id)
        return jsonify({"success": True})
