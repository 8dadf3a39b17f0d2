"""Core API setup and configuration.

This module configures API middleware, error handling, and other global API components.
"""

import logging

from flask import Flask

from interview_prep.conf.config import Config

from interview_prep.src.api.endpoints import register_endpoints
from interview_prep.src.api.middleware import register_middleware
from interview_prep.src.services import AuthService, ChatService, DocumentService

logger = logging.getLogger(__name__)


def setup_api(
    app: Flask,
    auth_service: AuthService,
    document_service: DocumentService,
    chat_service: ChatService,
) -> None:
    """Set up API with middleware and endpoints.

    Args:
        app: Flask application
        auth_service: Service for signup and login
        document_service: Service managing uploaded documents
        chat_service: Service running interview chats
    """
    # Register middleware
    register_middleware(app)

    # Register endpoints
    register_endpoints(app, auth_service, document_service, chat_service)
    logger.info(f"API endpoints registered under {Config.API_PREFIX}")
