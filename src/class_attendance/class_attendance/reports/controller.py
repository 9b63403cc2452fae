from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import to_day, today
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    def _requested_day() -> date:
        value = request.args.get("date")
        return to_day(value) if value else today()

    @app.route("/api/reports/daily", methods=["GET"], endpoint="report_daily")
    def report_daily():
        try:
            day = _requested_day()
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        return jsonify(container.report_service.daily_overview(day).to_json())

    @app.route("/api/reports/weekly", methods=["GET"], endpoint="report_weekly")
    def report_weekly():
        try:
            day = _requested_day()
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        return jsonify(container.report_service.weekly_overview(day))

    @app.route("/api/reports/weekly.csv", methods=["GET"], endpoint="report_weekly_csv")
    def report_weekly_csv():
        try:
            day = _requested_day()
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400

        csv_bytes = container.report_service.weekly_csv(day).encode("utf-8-sig")
        filename = f"attendance_week_{day.strftime('%Y%m%d')}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/students/<int:student_id>/summary", methods=["GET"], endpoint="student_summary")
    def student_summary(student_id: int):
        return jsonify(container.report_service.student_summary(student_id))
