"""Flask application for interview practice against an uploaded resume and job description."""

import argparse
import logging
import os
import sys
from datetime import timedelta
from typing import Optional

from flask import Flask
from flask_cors import CORS

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from interview_prep.conf.config import Config
from interview_prep.src.api import setup_api
from interview_prep.src.services import (
    AuthService,
    BaseLLMService,
    ChatService,
    DocumentService,
    DocumentStore,
    create_auth_service,
    create_chat_service,
    create_document_service,
    create_interview_service,
    create_llm_service,
    create_retrieval_service,
)

# Logging is configured in interview_prep/__init__.py
logger = logging.getLogger(__name__)


def create_app(
    llm_service: Optional[BaseLLMService] = None,
    auth_service: Optional[AuthService] = None,
    document_service: Optional[DocumentService] = None,
    chat_service: Optional[ChatService] = None,
) -> Flask:
    """Create and configure the Flask application.

    Services that are not provided are created from configuration.

    Args:
        llm_service: LLM used for questions and evaluations
        auth_service: Service for signup and login
        document_service: Service managing uploaded documents
        chat_service: Service running interview chats

    Returns:
        Flask: The configured application
    """
    logger.info("Starting application setup...")

    # Create Flask app
    app = Flask(__name__)
    app.config["JWT_SECRET_KEY"] = Config.JWT_SECRET_KEY
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(days=Config.JWT_EXPIRES_DAYS)
    app.config["MAX_CONTENT_LENGTH"] = (
        Config.MAX_UPLOAD_BYTES + Config.MAX_REQUEST_OVERHEAD_BYTES
    )
    CORS(app, origins=Config.CORS_ORIGINS)

    # Create services using factory methods
    if document_service is None or chat_service is None:
        logger.info("Creating retrieval service")
        retrieval_service = create_retrieval_service()
        document_store = DocumentStore()

        if document_service is None:
            logger.info("Creating document service")
            document_service = create_document_service(
                document_store, retrieval_service
            )

        if chat_service is None:
            logger.info("Creating chat service")
            chat_service = create_chat_service(
                document_store,
                retrieval_service,
                interview_service=create_interview_service(llm_service),
            )

    if auth_service is None:
        auth_service = create_auth_service()

    # Set up API routes
    logger.info("Setting up API routes")
    setup_api(app, auth_service, document_service, chat_service)
    logger.info("API routes configured")

    logger.info("Application setup complete")
    return app


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Run the interview prep backend with arguments (--llm, --storage, --port)"
    )
    parser.add_argument(
        "--llm",
        type=str,
        choices=Config.VALID_LLM_SERVICES,
        default=Config.LLM_SERVICE,
        help=f"LLM service to use (default: {Config.LLM_SERVICE})",
    )
    parser.add_argument(
        "--storage",
        type=str,
        choices=Config.VALID_STORAGE_SERVICES,
        default=Config.STORAGE_SERVICE,
        help=f"File storage to use (default: {Config.STORAGE_SERVICE})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Config.FLASK_PORT,
        help=f"Port to listen on (default: {Config.FLASK_PORT})",
    )

    args = parser.parse_args()

    # Set configuration from command line arguments
    Config.LLM_SERVICE = args.llm
    Config.STORAGE_SERVICE = args.storage
    Config.FLASK_PORT = args.port

    logger.info(f"Using LLM service: {Config.LLM_SERVICE}")
    logger.info(f"Using file storage: {Config.STORAGE_SERVICE}")

    # Initialize LLM service
    try:
        llm_service = create_llm_service()
        logger.info(
            f"{Config.LLM_SERVICE.capitalize()} LLM service initialized successfully!"
        )
    except Exception as e:
        logger.error(f"Failed to initialize {Config.LLM_SERVICE} LLM service: {str(e)}")
        sys.exit(1)

    # Create app and run
    app = create_app(llm_service)
    app.run(host="0.0.0.0", port=Config.FLASK_PORT)
