"""JWT authentication middleware.

Configures flask-jwt-extended so that missing, invalid and expired tokens are
answered with the same JSON error body as every other API error.
"""

import logging
from typing import Any, Dict, Tuple

from flask import Flask, Response
from flask_jwt_extended import JWTManager

from interview_prep.src.api.middleware.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


def register_jwt_handlers(app: Flask) -> JWTManager:
    """Attach a JWTManager with JSON error callbacks to the application.

    Args:
        app: Flask application, with JWT_SECRET_KEY configured

    Returns:
        JWTManager: The configured manager
    """
    jwt = JWTManager(app)

    @jwt.unauthorized_loader
    def missing_token_callback(reason: str) -> Tuple[Response, int]:
        logger.warning(f"Request without valid authorization header: {reason}")
        return UnauthorizedError("Not authorized, no token").to_response()

    @jwt.invalid_token_loader
    def invalid_token_callback(reason: str) -> Tuple[Response, int]:
        logger.warning(f"Invalid token: {reason}")
        return UnauthorizedError("Not authorized, token failed").to_response()

    @jwt.expired_token_loader
    def expired_token_callback(
        jwt_header: Dict[str, Any], jwt_payload: Dict[str, Any]
    ) -> Tuple[Response, int]:
        logger.warning(f"Expired token for user {jwt_payload.get('sub')}")
        return UnauthorizedError("Not authorized, token expired").to_response()

    return jwt
