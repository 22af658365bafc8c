from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_month, parse_month_param
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    def api_dashboard():
        year, month = parse_month_param(request.args.get("month"))
        report = container.report_service.build_monthly_dashboard(year=year, month=month)

        data = report.to_dict()
        data["month_label"] = format_month(year, month)
        return jsonify(data), 200
