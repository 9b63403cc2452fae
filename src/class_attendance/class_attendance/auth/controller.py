from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import AuthenticationError

PUBLIC_ENDPOINTS = {"auth_status", "auth_login", "auth_logout"}


def register(app: Flask, container: Container) -> None:
    def _challenge(message: str):
        resp = jsonify({"message": message})
        resp.status_code = 401
        resp.headers["WWW-Authenticate"] = "Basic"
        return resp

    def _check_credentials() -> str:
        if "Authorization" not in request.headers:
            raise AuthenticationError("Authentication required")

        auth = request.authorization
        if auth is None or auth.type != "basic":
            raise AuthenticationError("Invalid credentials")
        return container.auth_service.authenticate(auth.username, auth.password)

    @app.before_request
    def require_basic_auth():
        """Guard every /api route except the auth probe and login/logout."""

        if not request.path.startswith("/api") or request.endpoint in PUBLIC_ENDPOINTS:
            return None
        try:
            _check_credentials()
        except AuthenticationError as e:
            return _challenge(str(e))
        return None

    @app.route("/api/auth/status", methods=["GET"], endpoint="auth_status")
    def auth_status():
        try:
            username = _check_credentials()
        except AuthenticationError:
            return jsonify({"authenticated": False, "username": None})
        return jsonify({"authenticated": True, "username": username})

    # Basic Auth is stateless; login/logout only exist for the browser client.
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        return jsonify({"message": "Login successful"})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        return jsonify({"message": "Logout successful"})
