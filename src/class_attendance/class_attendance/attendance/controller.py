from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        try:
            records = container.attendance_service.for_date(request.args.get("date"))
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        return jsonify([r.to_json() for r in records])

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        try:
            record = container.attendance_service.mark(request.get_json(silent=True))
        except ValidationError as e:
            return jsonify({"message": "Invalid attendance data", "detail": str(e)}), 400
        return jsonify(record.to_json()), 201

    @app.route("/api/students/<int:student_id>/attendance", methods=["GET"], endpoint="student_attendance")
    def student_attendance(student_id: int):
        return jsonify([r.to_json() for r in container.attendance_service.for_student(student_id)])
