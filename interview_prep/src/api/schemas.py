"""Response models shared by the endpoints.

The single-page frontend expects camelCase keys, so every response model dumps
its fields through a camelCase alias generator.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from interview_prep.src.data_classes import ChatMessage, Citation, StoredDocument, User


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class UserModel(CamelModel):
    """Public view of a user."""

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="Email address")

    @classmethod
    def from_user(cls, user: User) -> "UserModel":
        return cls(id=user.uuid, email=user.email)


class DocumentSummaryModel(CamelModel):
    """Document metadata without its chunks."""

    id: str = Field(..., description="Document ID")
    type: str = Field(..., description="Document type: resume or jd")
    filename: str = Field(..., description="Original filename")
    uploaded_at: datetime = Field(..., description="Upload time")
    chunks_count: int = Field(..., description="Number of embedded chunks")

    @classmethod
    def from_document(cls, document: StoredDocument) -> "DocumentSummaryModel":
        return cls(
            id=document.uuid,
            type=document.type,
            filename=document.filename,
            uploaded_at=document.uploaded_at,
            chunks_count=len(document.chunks),
        )


class CitationModel(CamelModel):
    """Chunk reference backing an evaluation."""

    chunk_index: int = Field(..., description="Index of the chunk in its document")
    snippet: str = Field(..., description="Leading text of the chunk")
    type: str = Field(..., description="Source document type")

    @classmethod
    def from_citation(cls, citation: Citation) -> "CitationModel":
        return cls(
            chunk_index=citation.chunk_index,
            snippet=citation.snippet,
            type=citation.type,
        )


class ChatMessageModel(CamelModel):
    """A chat message as returned by the history endpoint."""

    role: str
    content: str
    score: Optional[int] = None
    citations: List[CitationModel] = Field(default_factory=list)
    timestamp: datetime

    @classmethod
    def from_message(cls, message: ChatMessage) -> "ChatMessageModel":
        return cls(
            role=message.role,
            content=message.content,
            score=message.score,
            citations=[CitationModel.from_citation(c) for c in message.citations],
            timestamp=message.timestamp,
        )
