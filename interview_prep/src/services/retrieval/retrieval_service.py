"""Retrieval service for embedding documents and finding chunks relevant to an answer.

This module combines the retrieval components into the two operations the rest of
the application needs:
- Turning extracted document text into embedded chunks at upload time
- Ranking a user's stored chunks against a free-text answer at scoring time
"""

import logging
import time
from typing import Iterable, List

from interview_prep.conf.config import Config
from interview_prep.src.data_classes import ScoredChunk, StoredDocument, TextChunk

from .components import (
    BaseDenseEmbedder,
    EmbeddingError,
    chunk_text,
    find_top_similar_chunks,
)

logger = logging.getLogger(__name__)


class RetrievalService:
    """Embedding-based retrieval over a user's uploaded documents.

    Attributes:
        embedding_model (BaseDenseEmbedder): Model for generating embeddings
        chunk_max_words (int): Maximum words per chunk
        chunk_delay (float): Pause between chunk embeddings, in seconds
    """

    def __init__(
        self,
        embedding_model: BaseDenseEmbedder,
        chunk_max_words: int = Config.CHUNK_MAX_WORDS,
        chunk_delay: float = Config.EMBEDDING_CHUNK_DELAY,
    ) -> None:
        """Initialize the retrieval service.

        Args:
            embedding_model: Model for generating embeddings
            chunk_max_words: Maximum words per chunk
            chunk_delay: Pause between chunk embeddings, in seconds
        """
        self.embedding_model = embedding_model
        self.chunk_max_words = chunk_max_words
        self.chunk_delay = chunk_delay

        logger.info(
            f"RetrievalService initialized with: "
            f"embedding_model={type(embedding_model).__name__}, "
            f"chunk_max_words={chunk_max_words}"
        )

    def embed_text(self, text: str) -> List[TextChunk]:
        """Chunk a document text and embed every chunk.

        Chunks whose embedding fails are skipped, so the result can hold fewer
        chunks than the text was split into.

        Args:
            text: Extracted document text

        Returns:
            Embedded chunks in text order
        """
        pieces = chunk_text(text, self.chunk_max_words)
        embedded: List[TextChunk] = []

        for index, piece in enumerate(pieces):
            try:
                embedding = self.embedding_model.encode(piece)
            except EmbeddingError as e:
                logger.error(f"Embedding error for chunk {index}: {str(e)}")
                continue

            embedded.append(TextChunk(text=piece, embedding=embedding))
            # Stay under the embedding API rate limit
            if self.chunk_delay > 0:
                time.sleep(self.chunk_delay)

        logger.info(f"Embedded {len(embedded)}/{len(pieces)} chunks")
        return embedded

    def embed_query(self, text: str) -> List[float]:
        """Embed a query text.

        Raises:
            EmbeddingError: If the embedding could not be generated
        """
        return self.embedding_model.encode(text)

    def find_relevant_chunks(
        self,
        query: str,
        documents: Iterable[StoredDocument],
        k: int = Config.TOP_K_CHUNKS,
    ) -> List[ScoredChunk]:
        """Find the chunks most similar to a query across documents.

        Args:
            query: Free-text query, typically a candidate's answer
            documents: Documents whose chunks are candidates
            k: Number of chunks to return

        Returns:
            Up to k chunks, most similar first

        Raises:
            EmbeddingError: If the query could not be embedded
        """
        query_embedding = self.embed_query(query)
        return find_top_similar_chunks(query_embedding, documents, k)
