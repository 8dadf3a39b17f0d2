"""Health check endpoint."""

from flask import Blueprint, Response, jsonify


def init_health_routes() -> Blueprint:
    """Initialize the health check route.

    Returns:
        Blueprint: Flask blueprint with the health route.
    """
    health_bp = Blueprint("health", __name__)

    @health_bp.route("/health", methods=["GET"])
    def health() -> Response:
        return jsonify({"status": "ok"})

    return health_bp
