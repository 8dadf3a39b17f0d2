"""Storage for uploaded documents and their embedded chunks."""

import logging
from pathlib import Path
from typing import List, Optional

from interview_prep.conf.config import Config
from interview_prep.src.data_classes import DocumentType, StoredDocument

from .json_store import JsonFileStore

logger = logging.getLogger(__name__)


class DocumentStore:
    """Stores documents in a JSON file, scoped by owning user."""

    def __init__(self, file_path: Path = Config.DOCUMENTS_PATH) -> None:
        self.store = JsonFileStore(file_path)

    def find_by_user(self, user_id: str) -> List[StoredDocument]:
        """Return all documents of a user, newest first."""
        records = self.store.find(lambda r: r.get("user_id") == user_id)
        documents = [StoredDocument.from_json(record) for record in records]
        documents.sort(key=lambda doc: doc.uploaded_at, reverse=True)
        return documents

    def find_by_type(self, user_id: str, doc_type: DocumentType) -> List[StoredDocument]:
        """Return the documents of a user with the given type, newest first."""
        return [doc for doc in self.find_by_user(user_id) if doc.type == doc_type]

    def get(self, doc_id: str, user_id: str) -> Optional[StoredDocument]:
        """Return a document if it exists and belongs to the user."""
        record = self.store.find_one(
            lambda r: r.get("uuid") == doc_id and r.get("user_id") == user_id
        )
        return StoredDocument.from_json(record) if record else None

    def insert(self, document: StoredDocument) -> bool:
        return self.store.insert(document.to_json())

    def replace_by_type(
        self, document: StoredDocument
    ) -> Optional[List[StoredDocument]]:
        """Store a document in place of the owner's documents of the same type.

        Args:
            document: The new document

        Returns:
            The replaced documents, or None if storage failed
        """
        removed = self.store.replace(
            lambda r: r.get("user_id") == document.user_id
            and r.get("type") == document.type,
            document.to_json(),
        )
        if removed is None:
            return None
        return [StoredDocument.from_json(record) for record in removed]

    def delete(self, doc_id: str, user_id: str) -> bool:
        """Delete a document owned by the user.

        Returns:
            bool: True if a document was deleted
        """
        deleted = self.store.delete(
            lambda r: r.get("uuid") == doc_id and r.get("user_id") == user_id
        )
        logger.debug(f"Deleted {deleted} documents with id {doc_id}")
        return deleted > 0
