"""Data classes for uploaded documents and their embedded text chunks."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

DocumentType = Literal["resume", "jd"]


class TextChunk:
    """A piece of document text with its embedding vector.

    Attributes:
        text: Text content of the chunk
        embedding: Dense embedding of the text
    """

    text: str
    embedding: List[float]

    def __init__(self, text: str, embedding: Optional[List[float]] = None):
        self.text = text
        self.embedding = list(embedding) if embedding is not None else []

    def to_json(self) -> Dict[str, Any]:
        return {"text": self.text, "embedding": self.embedding}

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "TextChunk":
        return cls(text=data.get("text", ""), embedding=data.get("embedding") or [])

    def __repr__(self) -> str:
        return f"TextChunk(words={len(self.text.split())}, dim={len(self.embedding)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextChunk):
            return False
        return self.text == other.text and self.embedding == other.embedding


class StoredDocument:
    """An uploaded resume or job description owned by a user.

    Attributes:
        uuid: Unique identifier of the document
        user_id: UUID of the owning user
        type: Document type, either "resume" or "jd"
        filename: Original filename of the upload
        file_url: URL of the stored PDF in file storage
        storage_public_id: Identifier of the file in file storage, used for deletion
        chunks: Embedded text chunks extracted from the PDF
        uploaded_at: When the document was uploaded
    """

    uuid: str
    user_id: str
    type: DocumentType
    filename: str
    file_url: str
    storage_public_id: str
    chunks: List[TextChunk]
    uploaded_at: datetime

    def __init__(
        self,
        uuid: str,
        user_id: str,
        type: DocumentType,
        filename: str,
        file_url: str,
        storage_public_id: str,
        chunks: Optional[List[TextChunk]] = None,
        uploaded_at: Optional[datetime] = None,
    ):
        """Initialize a StoredDocument.

        Args:
            uuid: Unique identifier of the document
            user_id: UUID of the owning user
            type: Document type, either "resume" or "jd"
            filename: Original filename of the upload
            file_url: URL of the stored PDF
            storage_public_id: Identifier of the file in file storage
            chunks: Embedded text chunks
            uploaded_at: Upload time, defaults to now (UTC)
        """
        self.uuid = uuid
        self.user_id = user_id
        self.type = type
        self.filename = filename
        self.file_url = file_url
        self.storage_public_id = storage_public_id
        self.chunks = chunks or []
        self.uploaded_at = uploaded_at or datetime.now(timezone.utc)

    @property
    def full_text(self) -> str:
        """Text of all chunks joined back together with single spaces."""
        return " ".join(chunk.text for chunk in self.chunks)

    def to_json(self) -> Dict[str, Any]:
        """Convert the document to a JSON-compatible dictionary.

        Returns:
            Dictionary containing all document attributes in a JSON-serializable format
        """
        return {
            "uuid": self.uuid,
            "user_id": self.user_id,
            "type": self.type,
            "filename": self.filename,
            "file_url": self.file_url,
            "storage_public_id": self.storage_public_id,
            "chunks": [chunk.to_json() for chunk in self.chunks],
            "uploaded_at": self.uploaded_at.isoformat(),
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "StoredDocument":
        """Create a StoredDocument from its stored dictionary.

        Args:
            data: Dictionary produced by to_json()
        """
        return cls(
            uuid=data["uuid"],
            user_id=data["user_id"],
            type=data["type"],
            filename=data["filename"],
            file_url=data["file_url"],
            storage_public_id=data["storage_public_id"],
            chunks=[TextChunk.from_json(chunk) for chunk in data.get("chunks", [])],
            uploaded_at=datetime.fromisoformat(data["uploaded_at"]),
        )

    def __str__(self) -> str:
        return (
            f"StoredDocument(uuid={self.uuid}, type={self.type}, "
            f"filename={self.filename}, chunks={len(self.chunks)})"
        )

    def __repr__(self) -> str:
        return f"Document(uuid={self.uuid}, user_id={self.user_id}, type={self.type})"

    def __hash__(self) -> int:
        return hash(self.uuid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StoredDocument):
            return False
        return self.uuid == other.uuid
