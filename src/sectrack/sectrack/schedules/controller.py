from __future__ import annotations

from flask import Flask, jsonify

from ..common.api import json_body, json_errors, parse_enum
from ..container import Container
from ..core.enums import SessionType


def register(app: Flask, container: Container) -> None:
    @app.route("/api/users/<int:user_id>/slots", methods=["GET"], endpoint="api_slots_list")
    @json_errors
    def api_slots_list(user_id: int):
        slots = container.schedule_service.list_for_user(user_id)
        return jsonify({"success": True, "slots": [container.schedule_service.to_view(s) for s in slots]})

    @app.route("/api/courses/<int:course_id>/slots", methods=["POST"], endpoint="api_slots_create")
    @json_errors
    def api_slots_create(course_id: int):
        data = json_body()
        slot_id = container.schedule_service.add_slot(
            course_id=course_id,
            day_of_week=data.get("day_of_week"),
            session_type=parse_enum(SessionType, data.get("type"), "type"),
            hours=data.get("hours"),
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
        )
        return jsonify({"success": True, "slot_id": slot_id}), 201

    @app.route("/api/slots/<int:slot_id>", methods=["DELETE"], endpoint="api_slots_delete")
    @json_errors
    def api_slots_delete(slot_id: int):
        container.schedule_service.delete_slot(slot_id)
        return jsonify({"success": True})
