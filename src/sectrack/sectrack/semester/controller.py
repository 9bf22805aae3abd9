from __future__ import annotations

from flask import Flask, jsonify

from ..common.api import json_body, json_errors
from ..common.datetime_utils import parse_optional_iso_date
from ..container import Container
from ..core.exceptions import ValidationError
from ..dashboard.service import progress_to_view


def register(app: Flask, container: Container) -> None:
    @app.route("/api/users/<int:user_id>/semester", methods=["GET"], endpoint="api_semester_get")
    @json_errors
    def api_semester_get(user_id: int):
        progress = container.semester_service.get_progress(user_id)
        return jsonify({"success": True, "semester": progress_to_view(progress)})

    @app.route("/api/users/<int:user_id>/semester", methods=["PUT"], endpoint="api_semester_set")
    @json_errors
    def api_semester_set(user_id: int):
        data = json_body()
        try:
            start = parse_optional_iso_date(data.get("semester_start"))
        except ValueError:
            raise ValidationError("semester_start must be YYYY-MM-DD")

        container.semester_service.set_semester_start(user_id, start)
        progress = container.semester_service.get_progress(user_id)
        return jsonify({"success": True, "semester": progress_to_view(progress)})
