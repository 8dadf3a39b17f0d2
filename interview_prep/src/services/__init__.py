"""Services package for backend functionality.

This package contains all service components for business logic.
"""

from .auth import AuthService
from .chat import ChatService
from .documents import DocumentService
from .exceptions import (
    AuthenticationError,
    FileTooLargeError,
    InterviewPrepError,
    InvalidInputError,
    ProcessingError,
    ResourceNotFoundError,
)
from .factory import (
    create_auth_service,
    create_chat_service,
    create_document_service,
    create_file_storage_service,
    create_interview_service,
    create_llm_service,
    create_retrieval_service,
)
from .file_storage import BaseFileStorageService
from .interview import InterviewService
from .llm import BaseLLMService, GeminiLLMService
from .retrieval import RetrievalService
from .store import ChatStore, DocumentStore, UserStore

__all__ = [
    # LLM Services
    "BaseLLMService",
    "GeminiLLMService",
    # Other Services
    "AuthService",
    "ChatService",
    "DocumentService",
    "InterviewService",
    "RetrievalService",
    "BaseFileStorageService",
    # Stores
    "UserStore",
    "DocumentStore",
    "ChatStore",
    # Errors
    "InterviewPrepError",
    "InvalidInputError",
    "AuthenticationError",
    "ResourceNotFoundError",
    "FileTooLargeError",
    "ProcessingError",
    # Factory Functions
    "create_llm_service",
    "create_file_storage_service",
    "create_retrieval_service",
    "create_interview_service",
    "create_auth_service",
    "create_document_service",
    "create_chat_service",
]
