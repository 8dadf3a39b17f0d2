"""Service managing a user's uploaded resume and job description.

An upload goes through these steps:
1. Validation of the file and the document type
2. Text extraction from the PDF
3. Storage of the raw file
4. Chunking and embedding of the text
5. Replacement of any previous document of the same type

Each user keeps at most one document per type. The previous document is only
removed once the new one is fully embedded, so a failed upload never loses data.
"""

import logging
import time
import uuid
from typing import List, Optional

from interview_prep.conf.config import Config
from interview_prep.src.data_classes import StoredDocument
from interview_prep.src.services.exceptions import (
    FileTooLargeError,
    InvalidInputError,
    ProcessingError,
    ResourceNotFoundError,
)
from interview_prep.src.services.file_storage import (
    BaseFileStorageService,
    FileStorageError,
)
from interview_prep.src.services.pdf import PDFExtractionError, PDFTextExtractor
from interview_prep.src.services.retrieval import RetrievalService
from interview_prep.src.services.store import DocumentStore

logger = logging.getLogger(__name__)


class DocumentService:
    """Uploads, lists and deletes user documents.

    Attributes:
        document_store: Storage for document records
        file_storage: Storage for the raw PDF files
        pdf_extractor: Extractor for PDF text
        retrieval_service: Service embedding the document text
    """

    def __init__(
        self,
        document_store: DocumentStore,
        file_storage: BaseFileStorageService,
        pdf_extractor: PDFTextExtractor,
        retrieval_service: RetrievalService,
    ) -> None:
        self.document_store = document_store
        self.file_storage = file_storage
        self.pdf_extractor = pdf_extractor
        self.retrieval_service = retrieval_service
        logger.info(
            f"DocumentService initialized with storage "
            f"{type(file_storage).__name__}"
        )

    def _validate_upload(
        self, file_bytes: Optional[bytes], mimetype: Optional[str], doc_type: str
    ) -> None:
        if file_bytes is None:
            raise InvalidInputError("No file uploaded")
        if mimetype not in Config.ALLOWED_MIMETYPES:
            raise InvalidInputError("Only PDF files are allowed")
        if len(file_bytes) > Config.MAX_UPLOAD_BYTES:
            raise FileTooLargeError(
                f"File too large. Maximum size is "
                f"{Config.MAX_UPLOAD_BYTES // (1024 * 1024)}MB"
            )
        if doc_type not in Config.VALID_DOCUMENT_TYPES:
            raise InvalidInputError('Invalid document type. Must be "resume" or "jd"')

    def _destroy_file(self, public_id: str) -> None:
        """Delete a stored file, logging instead of failing the request."""
        try:
            self.file_storage.destroy(public_id, resource_type="raw")
        except Exception as e:
            logger.error(f"Failed to delete stored file {public_id}: {str(e)}")

    def upload(
        self,
        user_id: str,
        file_bytes: Optional[bytes],
        filename: str,
        mimetype: Optional[str],
        doc_type: str,
    ) -> StoredDocument:
        """Store, chunk and embed an uploaded PDF.

        Args:
            user_id: UUID of the uploading user
            file_bytes: Raw file content, None if no file was sent
            filename: Original filename
            mimetype: Declared content type of the file
            doc_type: "resume" or "jd"

        Returns:
            StoredDocument: The saved document

        Raises:
            InvalidInputError: If the file or type is invalid or holds no text
            FileTooLargeError: If the file exceeds the upload limit
            ProcessingError: If storage or embedding fails
        """
        self._validate_upload(file_bytes, mimetype, doc_type)

        try:
            text = self.pdf_extractor.extract_text(file_bytes)
        except PDFExtractionError as e:
            raise InvalidInputError("Could not extract text from PDF") from e
        if not text.strip():
            raise InvalidInputError("Could not extract text from PDF")

        public_id = f"{user_id}_{doc_type}_{int(time.time() * 1000)}"
        try:
            stored_file = self.file_storage.upload(
                file_bytes,
                folder=Config.STORAGE_FOLDER,
                public_id=public_id,
                resource_type="raw",
            )
        except FileStorageError as e:
            raise ProcessingError("Failed to store file") from e

        chunks = self.retrieval_service.embed_text(text)
        if not chunks:
            logger.error(f"No chunks embedded for {filename}, removing stored file")
            self._destroy_file(stored_file.public_id)
            raise ProcessingError("Failed to generate embeddings")

        document = StoredDocument(
            uuid=str(uuid.uuid4()),
            user_id=user_id,
            type=doc_type,
            filename=filename,
            file_url=stored_file.url,
            storage_public_id=stored_file.public_id,
            chunks=chunks,
        )
        replaced = self.document_store.replace_by_type(document)
        if replaced is None:
            self._destroy_file(stored_file.public_id)
            raise ProcessingError("Failed to save document")

        for existing in replaced:
            logger.info(f"Replaced existing {doc_type} document {existing.uuid}")
            self._destroy_file(existing.storage_public_id)

        logger.info(f"Stored {document}")
        return document

    def list_documents(self, user_id: str) -> List[StoredDocument]:
        """Return the user's documents, newest first."""
        return self.document_store.find_by_user(user_id)

    def get_documents(self, user_id: str) -> List[StoredDocument]:
        """Return the user's documents with their embedded chunks."""
        return self.document_store.find_by_user(user_id)

    def delete_document(self, user_id: str, document_id: str) -> None:
        """Delete a document and its stored file.

        Raises:
            ResourceNotFoundError: If the document does not exist or is not owned
                by the user
        """
        document = self.document_store.get(document_id, user_id)
        if document is None:
            raise ResourceNotFoundError("Document not found")

        self._destroy_file(document.storage_public_id)
        if not self.document_store.delete(document_id, user_id):
            raise ProcessingError("Failed to delete document")
        logger.info(f"Deleted document {document_id}")
