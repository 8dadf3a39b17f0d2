"""Auth endpoints module.

This module provides Flask routes for user signup and login.
"""

import logging
from typing import Tuple

from flask import Blueprint, Response, jsonify
from flask_pydantic import validate  # type: ignore
from pydantic import BaseModel, Field

from interview_prep.src.api.schemas import CamelModel, UserModel
from interview_prep.src.services import AuthService

logger = logging.getLogger(__name__)


# Schema definitions
class CredentialsRequest(BaseModel):
    """Signup and login request model for validation."""

    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class AuthResponseModel(CamelModel):
    """Auth response model."""

    token: str = Field(..., description="JWT access token")
    user: UserModel


def init_auth_routes(auth_service: AuthService) -> Blueprint:
    """Initialize auth routes with the provided service.

    Args:
        auth_service: Service for signup and login.

    Returns:
        Blueprint: Flask blueprint with configured auth routes.
    """
    auth_bp = Blueprint("auth", __name__)

    @auth_bp.route("/auth/signup", methods=["POST"])
    @validate()
    def signup(body: CredentialsRequest) -> Tuple[Response, int]:  # type: ignore
        """Register a user and return an access token."""
        user, token = auth_service.signup(body.email, body.password)
        response = AuthResponseModel(token=token, user=UserModel.from_user(user))
        return jsonify(response.to_dict()), 201

    @auth_bp.route("/auth/login", methods=["POST"])
    @validate()
    def login(body: CredentialsRequest) -> Tuple[Response, int]:  # type: ignore
        """Verify credentials and return an access token."""
        user, token = auth_service.login(body.email, body.password)
        response = AuthResponseModel(token=token, user=UserModel.from_user(user))
        return jsonify(response.to_dict()), 200

    return auth_bp
