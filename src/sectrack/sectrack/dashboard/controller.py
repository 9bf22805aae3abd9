from __future__ import annotations

from datetime import date

from flask import Flask, jsonify

from ..common.api import json_errors
from ..common.datetime_utils import format_iso_date
from ..container import Container
from .service import dashboard_to_view


def register(app: Flask, container: Container) -> None:
    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/users/<int:user_id>/dashboard", methods=["GET"], endpoint="api_dashboard")
    @json_errors
    def api_dashboard(user_id: int):
        dashboard = container.dashboard_service.load(user_id)
        return jsonify({"success": True, **dashboard_to_view(dashboard)})

    @app.route("/api/users/<int:user_id>/sync", methods=["POST"], endpoint="api_sync")
    @json_errors
    def api_sync(user_id: int):
        result = container.auto_absent_service.reconcile(user_id, today=date.today())
        return jsonify(
            {
                "success": True,
                "created": result.created,
                "skipped_existing": result.skipped_existing,
                "days_checked": result.days_checked,
                "last_visit_date": format_iso_date(result.watermark),
            }
        )
