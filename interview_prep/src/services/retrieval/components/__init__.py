"""Retrieval components package.

This package provides the components used in the retrieval system:

- chunk_text: Fixed-size word window chunking
- BaseDenseEmbedder: Abstract base class for text embedders
- HuggingFaceEmbedder: Embeddings from the hosted Hugging Face inference API
- cosine_similarity: Similarity of two embedding vectors
- find_top_similar_chunks: Brute-force top-K ranking over document chunks
"""

from .chunker import chunk_text
from .dense_embedder import BaseDenseEmbedder, EmbeddingError, HuggingFaceEmbedder
from .similarity import collect_chunks, cosine_similarity, find_top_similar_chunks

__all__ = [
    "chunk_text",
    "BaseDenseEmbedder",
    "EmbeddingError",
    "HuggingFaceEmbedder",
    "cosine_similarity",
    "collect_chunks",
    "find_top_similar_chunks",
]
