"""Cosine similarity ranking over embedded document chunks.

A brute-force scan: every chunk of every candidate document is scored against
the query embedding. Users own at most two short documents, so no index is kept.
"""

import logging
from typing import Iterable, List, Optional, Sequence

import numpy as np

from interview_prep.src.data_classes import ScoredChunk, StoredDocument

logger = logging.getLogger(__name__)


def cosine_similarity(
    vec_a: Optional[Sequence[float]], vec_b: Optional[Sequence[float]]
) -> float:
    """Compute the cosine similarity of two vectors.

    Args:
        vec_a: First vector
        vec_b: Second vector

    Returns:
        Similarity in [-1, 1]. 0.0 when a vector is missing or empty, the lengths
        differ, or either vector has zero magnitude.
    """
    if vec_a is None or vec_b is None or len(vec_a) == 0 or len(vec_a) != len(vec_b):
        logger.error("Invalid vectors for similarity calculation")
        return 0.0

    a = np.asarray(vec_a, dtype=np.float64)
    b = np.asarray(vec_b, dtype=np.float64)

    magnitude_a = float(np.linalg.norm(a))
    magnitude_b = float(np.linalg.norm(b))
    if magnitude_a == 0.0 or magnitude_b == 0.0:
        return 0.0

    similarity = float(np.dot(a, b)) / (magnitude_a * magnitude_b)
    # Rounding can push parallel vectors just past 1
    return float(np.clip(similarity, -1.0, 1.0))


def collect_chunks(documents: Iterable[StoredDocument]) -> List[ScoredChunk]:
    """Flatten the chunks of all documents into unscored candidates.

    Args:
        documents: Documents to collect chunks from

    Returns:
        Candidates in document order, then chunk order
    """
    return [
        ScoredChunk(
            text=chunk.text,
            type=document.type,
            chunk_index=index,
            document_id=document.uuid,
            embedding=chunk.embedding,
        )
        for document in documents
        for index, chunk in enumerate(document.chunks)
    ]


def find_top_similar_chunks(
    query_embedding: Sequence[float],
    documents: Iterable[StoredDocument],
    top_k: int = 2,
) -> List[ScoredChunk]:
    """Rank all chunks of the given documents by similarity to a query.

    Args:
        query_embedding: Embedding of the query text
        documents: Documents whose chunks are candidates
        top_k: Number of chunks to return

    Returns:
        Up to top_k chunks, most similar first. Ties keep document order, then
        chunk order.
    """
    if top_k <= 0:
        return []

    candidates = collect_chunks(documents)
    for candidate in candidates:
        candidate.similarity = cosine_similarity(query_embedding, candidate.embedding)

    # sorted() is stable, so equal scores keep their collection order
    ranked = sorted(candidates, key=lambda c: c.similarity, reverse=True)

    logger.debug(
        f"Ranked {len(candidates)} chunks, returning top {min(top_k, len(ranked))}"
    )
    return ranked[:top_k]
