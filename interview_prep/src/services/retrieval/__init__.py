"""Retrieval package for document chunking, embedding and similarity ranking.

The main interface is through the RetrievalService class which coordinates
the retrieval components.
"""

from .retrieval_service import RetrievalService

__all__ = [
    "RetrievalService",
]
