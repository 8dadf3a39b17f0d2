from dataclasses import dataclass, field
from typing import List

from interview_prep.src.data_classes.stored_document import DocumentType


@dataclass
class ScoredChunk:
    """A document chunk ranked against a query embedding.

    Attributes:
        text: Text content of the chunk
        type: Type of the source document (resume or jd)
        chunk_index: Index of the chunk within its source document
        document_id: UUID of the source document
        similarity: Cosine similarity to the query
        embedding: Embedding of the chunk
    """

    text: str
    type: DocumentType
    chunk_index: int
    document_id: str
    similarity: float = 0.0
    embedding: List[float] = field(default_factory=list, repr=False)

    def __str__(self) -> str:
        """Return the chunk as it is presented to the LLM."""
        return f"[{self.type} #{self.chunk_index}] {self.text}"
