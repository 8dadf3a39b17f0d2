"""Storage services package.

This package provides JSON-file storage for:
- UserStore: registered users
- DocumentStore: uploaded documents and their embedded chunks
- ChatStore: interview chats

The stores handle data persistence and retrieval with thread-safe
concurrent access.
"""

from .chat_store import ChatStore
from .document_store import DocumentStore
from .json_store import JsonFileStore
from .user_store import UserStore

__all__ = ["JsonFileStore", "UserStore", "DocumentStore", "ChatStore"]
