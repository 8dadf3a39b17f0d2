"""Data classes for interview chat sessions."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from interview_prep.conf.config import Config
from interview_prep.src.data_classes.stored_document import DocumentType

VALID_ROLES = ("user", "assistant", "system")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Citation:
    """Reference to the document chunk that backed an evaluation.

    Attributes:
        chunk_index: Index of the chunk within its document
        snippet: Leading text of the chunk shown to the user
        type: Type of the document the chunk came from
    """

    chunk_index: int
    snippet: str
    type: DocumentType

    def to_json(self) -> Dict[str, Any]:
        return {"chunk_index": self.chunk_index, "snippet": self.snippet, "type": self.type}

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Citation":
        return cls(
            chunk_index=int(data["chunk_index"]),
            snippet=data["snippet"],
            type=data["type"],
        )


@dataclass
class ChatMessage:
    """A single message in an interview chat.

    Attributes:
        role: Author of the message (user, assistant or system)
        content: Message text
        score: Answer score from MIN_SCORE to MAX_SCORE, assistant evaluations only
        citations: Chunks that backed the evaluation
        timestamp: When the message was created
    """

    role: str
    content: str
    score: Optional[int] = None
    citations: List[Citation] = field(default_factory=list)
    timestamp: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if self.role not in VALID_ROLES:
            raise ValueError(f"Invalid message role: {self.role}")
        if not self.content:
            raise ValueError("Message content must not be empty")
        if self.score is not None and not (
            Config.MIN_SCORE <= self.score <= Config.MAX_SCORE
        ):
            raise ValueError(
                f"Score {self.score} outside [{Config.MIN_SCORE}, {Config.MAX_SCORE}]"
            )

    def to_json(self) -> Dict[str, Any]:
        return {
            "role": self.role,
            "content": self.content,
            "score": self.score,
            "citations": [citation.to_json() for citation in self.citations],
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ChatMessage":
        return cls(
            role=data["role"],
            content=data["content"],
            score=data.get("score"),
            citations=[Citation.from_json(c) for c in data.get("citations", [])],
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )


@dataclass
class Chat:
    """The interview chat of a user. Each user has at most one.

    Attributes:
        uuid: Unique identifier of the chat
        user_id: UUID of the owning user
        messages: Messages in the order they were added
        created_at: When the chat was started
    """

    uuid: str
    user_id: str
    messages: List[ChatMessage] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)

    def add_message(self, message: ChatMessage) -> None:
        self.messages.append(message)

    def to_json(self) -> Dict[str, Any]:
        """Convert the chat to a JSON-compatible dictionary for storage."""
        return {
            "uuid": self.uuid,
            "user_id": self.user_id,
            "messages": [message.to_json() for message in self.messages],
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Chat":
        """Create a Chat from its stored dictionary."""
        return cls(
            uuid=data["uuid"],
            user_id=data["user_id"],
            messages=[ChatMessage.from_json(m) for m in data.get("messages", [])],
            created_at=datetime.fromisoformat(data["created_at"]),
        )
