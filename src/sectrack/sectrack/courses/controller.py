from __future__ import annotations

from flask import Flask, jsonify

from ..common.api import json_body, json_errors
from ..container import Container
from ..dashboard.service import calculation_to_view, course_to_view


def _course_fields(data: dict) -> dict:
    # The API keeps the short T/U column names of the stored records.
    return {
        "name": data.get("name", ""),
        "course_code": data.get("course_code"),
        "weekly_theory_hours": data.get("t_hours", 0),
        "weekly_practice_hours": data.get("u_hours", 0),
        "theory_limit_percent": data.get("t_limit_percent"),
        "practice_limit_percent": data.get("u_limit_percent"),
        "color_code": data.get("color_code"),
    }

def register(app: Flask, container: Container) -> None:
    @app.route("/api/users/<int:user_id>/courses", methods=["GET"], endpoint="api_courses_list")
    @json_errors
    def api_courses_list(user_id: int):
        courses = container.course_service.list_active(user_id)
        return jsonify({"success": True, "courses": [course_to_view(c) for c in courses]})

    @app.route("/api/users/<int:user_id>/courses", methods=["POST"], endpoint="api_courses_create")
    @json_errors
    def api_courses_create(user_id: int):
        course_id = container.course_service.create_course(user_id=user_id, **_course_fields(json_body()))
        course = container.course_service.get(course_id)
        return jsonify({"success": True, "course": course_to_view(course)}), 201

    @app.route("/api/courses/<int:course_id>", methods=["PUT"], endpoint="api_courses_update")
    @json_errors
    def api_courses_update(course_id: int):
        course = container.course_service.update_course(course_id, **_course_fields(json_body()))
        return jsonify({"success": True, "course": course_to_view(course)})

    @app.route("/api/courses/<int:course_id>", methods=["DELETE"], endpoint="api_courses_delete")
    @json_errors
    def api_courses_delete(course_id: int):
        container.course_service.delete_course(course_id)
        return jsonify({"success": True})

    @app.route("/api/courses/<int:course_id>/calculation", methods=["GET"], endpoint="api_courses_calculation")
    @json_errors
    def api_courses_calculation(course_id: int):
        course = container.course_service.get(course_id)
        config = container.semester_service.get_config(course.user_id)
        calc = container.attendance_service.calculate_for_course(
            course_id, total_weeks=config.semester_length_weeks
        )
        return jsonify({"success": True, "course_id": course_id, "calculation": calculation_to_view(calc)})
