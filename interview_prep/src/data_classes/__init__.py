"""Data classes module for users, documents and interview chats.

This module provides the core data structures of the application:

Classes:
    - User: A registered account
    - TextChunk: A piece of document text with its embedding
    - StoredDocument: An uploaded resume or job description
    - Citation: Reference to a chunk backing an evaluation
    - ChatMessage: A single message in an interview chat
    - Chat: The interview chat of a user
    - ScoredChunk: A chunk ranked against a query
    - Evaluation: Score and feedback for an answer
Types:
    - DocumentType: "resume" or "jd"
"""

from interview_prep.src.data_classes.stored_document import (
    DocumentType,
    StoredDocument,
    TextChunk,
)
from interview_prep.src.data_classes.user import User

# Classes that depend on the document types
from interview_prep.src.data_classes.chat import Chat, ChatMessage, Citation
from interview_prep.src.data_classes.evaluation import Evaluation
from interview_prep.src.data_classes.scored_chunk import ScoredChunk

__all__ = [
    "DocumentType",
    "User",
    "TextChunk",
    "StoredDocument",
    "Citation",
    "ChatMessage",
    "Chat",
    "ScoredChunk",
    "Evaluation",
]
