"""Chat package for running interview sessions."""

from .chat_service import ChatService, build_citations

__all__ = ["ChatService", "build_citations"]
