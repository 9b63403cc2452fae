from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/sections", methods=["GET"], endpoint="list_sections")
    def list_sections():
        return jsonify([s.to_json() for s in container.section_service.list_all()])

    @app.route("/api/sections/<int:section_id>", methods=["GET"], endpoint="get_section")
    def get_section(section_id: int):
        try:
            section = container.section_service.get(section_id)
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        return jsonify(section.to_json())

    @app.route("/api/sections", methods=["POST"], endpoint="create_section")
    def create_section():
        try:
            section = container.section_service.create(request.get_json(silent=True))
        except ValidationError as e:
            return jsonify({"message": "Invalid section data", "detail": str(e)}), 400
        return jsonify(section.to_json()), 201

    @app.route("/api/sections/<int:section_id>", methods=["PUT"], endpoint="update_section")
    def update_section(section_id: int):
        try:
            section = container.section_service.update(section_id, request.get_json(silent=True))
        except ValidationError as e:
            return jsonify({"message": "Invalid section data", "detail": str(e)}), 400
        return jsonify(section.to_json())

    @app.route("/api/sections/<int:section_id>", methods=["DELETE"], endpoint="delete_section")
    def delete_section(section_id: int):
        container.section_service.delete(section_id)
        return "", 204
