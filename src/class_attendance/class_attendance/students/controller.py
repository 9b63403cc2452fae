from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        return jsonify([s.to_json() for s in container.student_service.list_all()])

    @app.route("/api/students/<int:student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: int):
        try:
            student = container.student_service.get(student_id)
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        return jsonify(student.to_json())

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    def create_student():
        try:
            student = container.student_service.create(request.get_json(silent=True))
        except ValidationError as e:
            return jsonify({"message": "Invalid student data", "detail": str(e)}), 400
        return jsonify(student.to_json()), 201

    @app.route("/api/students/<int:student_id>", methods=["PUT"], endpoint="update_student")
    def update_student(student_id: int):
        try:
            student = container.student_service.update(student_id, request.get_json(silent=True))
        except ValidationError as e:
            return jsonify({"message": "Invalid student data", "detail": str(e)}), 400
        return jsonify(student.to_json())

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: int):
        container.student_service.delete(student_id)
        return "", 204
