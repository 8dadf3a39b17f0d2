"""Service factory module for centralized service instantiation.

This module provides factory methods for creating service instances,
keeping service initialization logic in one place.
"""

import logging
from typing import Optional

from interview_prep.conf.config import Config
from interview_prep.src.services.auth import AuthService
from interview_prep.src.services.chat import ChatService
from interview_prep.src.services.documents import DocumentService
from interview_prep.src.services.file_storage import (
    BaseFileStorageService,
    CloudinaryStorageService,
    LocalFileStorageService,
)
from interview_prep.src.services.interview import InterviewService
from interview_prep.src.services.llm import BaseLLMService, GeminiLLMService
from interview_prep.src.services.pdf import PDFTextExtractor
from interview_prep.src.services.retrieval import RetrievalService
from interview_prep.src.services.retrieval.components import (
    BaseDenseEmbedder,
    HuggingFaceEmbedder,
)
from interview_prep.src.services.store import ChatStore, DocumentStore, UserStore

logger = logging.getLogger(__name__)


def create_llm_service() -> BaseLLMService:
    """Create and initialize the LLM service based on configuration."""
    try:
        if Config.LLM_SERVICE == "gemini":
            return GeminiLLMService()
        else:
            raise ValueError(f"Unsupported LLM service: {Config.LLM_SERVICE}")
    except Exception as e:
        logger.error(f"Failed to create {Config.LLM_SERVICE} LLM service: {e}")
        raise e


def create_file_storage_service() -> BaseFileStorageService:
    """Create the file storage service based on configuration."""
    if Config.STORAGE_SERVICE == "cloudinary":
        return CloudinaryStorageService()
    elif Config.STORAGE_SERVICE == "local":
        return LocalFileStorageService()
    else:
        raise ValueError(f"Unsupported storage service: {Config.STORAGE_SERVICE}")


def create_retrieval_service(
    embedding_model: Optional[BaseDenseEmbedder] = None,
) -> RetrievalService:
    """Create and configure a RetrievalService instance.

    Args:
        embedding_model: Embedder to use, defaults to the Hugging Face inference API

    Returns:
        Configured RetrievalService instance
    """
    if embedding_model is None:
        logger.info(f"Initializing dense embedder: {Config.EMBEDDING_MODEL_NAME}")
        embedding_model = HuggingFaceEmbedder()
    return RetrievalService(embedding_model=embedding_model)


def create_interview_service(
    llm_service: Optional[BaseLLMService] = None,
) -> InterviewService:
    """Create an InterviewService, creating the LLM service if not provided."""
    if llm_service is None:
        logger.info("No LLM service provided, creating new one")
        llm_service = create_llm_service()
    return InterviewService(llm_service=llm_service)


def create_auth_service(user_store: Optional[UserStore] = None) -> AuthService:
    return AuthService(user_store=user_store or UserStore())


def create_document_service(
    document_store: DocumentStore,
    retrieval_service: RetrievalService,
    file_storage: Optional[BaseFileStorageService] = None,
) -> DocumentService:
    """Create a DocumentService.

    Args:
        document_store: Store shared with the chat service
        retrieval_service: Service embedding uploaded text
        file_storage: Storage for raw files, created from configuration if not provided

    Returns:
        Configured DocumentService instance
    """
    if file_storage is None:
        logger.info(f"Creating {Config.STORAGE_SERVICE} file storage")
        file_storage = create_file_storage_service()
    return DocumentService(
        document_store=document_store,
        file_storage=file_storage,
        pdf_extractor=PDFTextExtractor(),
        retrieval_service=retrieval_service,
    )


def create_chat_service(
    document_store: DocumentStore,
    retrieval_service: RetrievalService,
    interview_service: Optional[InterviewService] = None,
    chat_store: Optional[ChatStore] = None,
) -> ChatService:
    """Create a ChatService.

    Args:
        document_store: Store shared with the document service
        retrieval_service: Service ranking chunks against answers
        interview_service: Service for questions and evaluations
        chat_store: Storage for chats

    Returns:
        Configured ChatService instance
    """
    if interview_service is None:
        interview_service = create_interview_service()
    return ChatService(
        document_store=document_store,
        chat_store=chat_store or ChatStore(),
        retrieval_service=retrieval_service,
        interview_service=interview_service,
    )
