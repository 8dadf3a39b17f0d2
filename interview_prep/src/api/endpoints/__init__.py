"""API endpoints package.

This package contains endpoint definitions for the API.
"""

from flask import Flask

from interview_prep.conf.config import Config
from interview_prep.src.api.endpoints.auth import init_auth_routes
from interview_prep.src.api.endpoints.chat import init_chat_routes
from interview_prep.src.api.endpoints.documents import init_document_routes
from interview_prep.src.api.endpoints.health import init_health_routes
from interview_prep.src.services import AuthService, ChatService, DocumentService


def register_endpoints(
    app: Flask,
    auth_service: AuthService,
    document_service: DocumentService,
    chat_service: ChatService,
) -> None:
    """Register all API endpoints with the application.

    Args:
        app: Flask application
        auth_service: Service for signup and login
        document_service: Service managing uploaded documents
        chat_service: Service running interview chats
    """
    prefix = Config.API_PREFIX
    app.register_blueprint(init_health_routes(), url_prefix=prefix)
    app.register_blueprint(init_auth_routes(auth_service), url_prefix=prefix)
    app.register_blueprint(init_document_routes(document_service), url_prefix=prefix)
    app.register_blueprint(init_chat_routes(chat_service), url_prefix=prefix)
