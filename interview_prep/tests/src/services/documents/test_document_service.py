"""Unit tests for the DocumentService."""

import shutil
import tempfile
import threading
import unittest
from pathlib import Path
from unittest.mock import Mock

from interview_prep.src.data_classes import TextChunk
from interview_prep.src.services.documents import DocumentService
from interview_prep.src.services.exceptions import (
    FileTooLargeError,
    InvalidInputError,
    ProcessingError,
    ResourceNotFoundError,
)
from interview_prep.src.services.file_storage import (
    BaseFileStorageService,
    FileStorageError,
    StoredFile,
)
from interview_prep.src.services.pdf import PDFExtractionError, PDFTextExtractor
from interview_prep.src.services.retrieval import RetrievalService
from interview_prep.src.services.store import DocumentStore

PDF_BYTES = b"%PDF-1.4 fake content"


class TestDocumentService(unittest.TestCase):
    """Test cases for the DocumentService."""

    def setUp(self) -> None:
        """Set up a real document store with mocked collaborators."""
        self.tmp_dir = Path(tempfile.mkdtemp())
        self.document_store = DocumentStore(self.tmp_dir / "documents.json")

        self.mock_storage = Mock(spec=BaseFileStorageService)
        self.mock_storage.upload.side_effect = lambda data, folder, public_id, resource_type: StoredFile(
            url=f"https://files.test/{folder}/{public_id}",
            public_id=f"{folder}/{public_id}",
        )
        self.mock_extractor = Mock(spec=PDFTextExtractor)
        self.mock_extractor.extract_text.return_value = "Python developer with Flask experience"
        self.mock_retrieval = Mock(spec=RetrievalService)
        self.mock_retrieval.embed_text.return_value = [
            TextChunk("Python developer with Flask experience", [0.1, 0.9])
        ]

        self.service = DocumentService(
            document_store=self.document_store,
            file_storage=self.mock_storage,
            pdf_extractor=self.mock_extractor,
            retrieval_service=self.mock_retrieval,
        )

    def tearDown(self) -> None:
        """Remove the temporary store directory."""
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def upload(self, doc_type: str = "resume", **overrides):
        kwargs = dict(
            user_id="u1",
            file_bytes=PDF_BYTES,
            filename=f"{doc_type}.pdf",
            mimetype="application/pdf",
            doc_type=doc_type,
        )
        kwargs.update(overrides)
        return self.service.upload(**kwargs)

    def test_upload_stores_document(self) -> None:
        """Test a successful upload end to end."""
        document = self.upload()

        self.assertEqual(document.type, "resume")
        self.assertEqual(len(document.chunks), 1)
        self.assertTrue(document.storage_public_id.startswith("interview-prep/u1_resume_"))
        self.mock_extractor.extract_text.assert_called_once_with(PDF_BYTES)
        kwargs = self.mock_storage.upload.call_args.kwargs
        self.assertEqual(kwargs["resource_type"], "raw")
        self.assertEqual(kwargs["folder"], "interview-prep")
        self.assertEqual(self.service.list_documents("u1"), [document])

    def test_rejects_missing_file(self) -> None:
        """Test that an upload without a file is rejected."""
        with self.assertRaisesRegex(InvalidInputError, "No file uploaded"):
            self.upload(file_bytes=None)

    def test_rejects_non_pdf(self) -> None:
        """Test that only PDFs are accepted."""
        with self.assertRaisesRegex(InvalidInputError, "Only PDF files are allowed"):
            self.upload(mimetype="image/png")
        self.mock_storage.upload.assert_not_called()

    def test_rejects_oversized_file(self) -> None:
        """Test that files over 2MB are rejected before any processing."""
        with self.assertRaises(FileTooLargeError):
            self.upload(file_bytes=b"x" * (2 * 1024 * 1024 + 1))
        self.mock_extractor.extract_text.assert_not_called()

    def test_accepts_file_at_limit(self) -> None:
        """Test that a file of exactly 2MB is accepted."""
        document = self.upload(file_bytes=b"x" * (2 * 1024 * 1024))
        self.assertEqual(document.type, "resume")

    def test_rejects_invalid_type(self) -> None:
        """Test that the document type must be resume or jd."""
        with self.assertRaisesRegex(InvalidInputError, "Invalid document type"):
            self.upload(doc_type="cover_letter")

    def test_rejects_pdf_without_text(self) -> None:
        """Test that PDFs without extractable text are rejected."""
        self.mock_extractor.extract_text.return_value = "   "
        with self.assertRaisesRegex(InvalidInputError, "Could not extract text from PDF"):
            self.upload()
        self.mock_storage.upload.assert_not_called()

    def test_rejects_unreadable_pdf(self) -> None:
        """Test that unreadable PDFs are rejected."""
        self.mock_extractor.extract_text.side_effect = PDFExtractionError("broken")
        with self.assertRaises(InvalidInputError):
            self.upload()

    def test_storage_failure(self) -> None:
        """Test that a file storage failure is reported."""
        self.mock_storage.upload.side_effect = FileStorageError("down")
        with self.assertRaises(ProcessingError):
            self.upload()

    def test_no_embeddings_destroys_file(self) -> None:
        """Test that a failed embedding removes the stored file and keeps old data."""
        previous = self.upload()
        self.mock_retrieval.embed_text.return_value = []

        with self.assertRaisesRegex(ProcessingError, "Failed to generate embeddings"):
            self.upload()

        destroyed = self.mock_storage.destroy.call_args.args[0]
        self.assertNotEqual(destroyed, previous.storage_public_id)
        self.assertEqual(self.service.list_documents("u1"), [previous])

    def test_upload_replaces_same_type(self) -> None:
        """Test that at most one document per type is kept per user."""
        first = self.upload("resume")
        jd = self.upload("jd")
        second = self.upload("resume")

        documents = self.service.list_documents("u1")
        self.assertEqual(len([d for d in documents if d.type == "resume"]), 1)
        self.assertIn(second, documents)
        self.assertIn(jd, documents)
        self.assertNotIn(first, documents)
        self.mock_storage.destroy.assert_called_once_with(
            first.storage_public_id, resource_type="raw"
        )

    def test_concurrent_uploads_keep_one_document_per_type(self) -> None:
        """Test that two simultaneous uploads of one type leave a single document."""
        barrier = threading.Barrier(2)
        errors = []

        def embed_text(text):
            barrier.wait(timeout=5)
            return [TextChunk(text, [0.1, 0.9])]

        def upload() -> None:
            try:
                self.upload("resume")
            except Exception as e:
                errors.append(e)

        self.mock_retrieval.embed_text.side_effect = embed_text
        threads = [threading.Thread(target=upload) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(errors, [])
        self.assertEqual(len(self.service.list_documents("u1")), 1)
        self.assertEqual(self.mock_storage.destroy.call_count, 1)

    def test_replace_survives_destroy_failure(self) -> None:
        """Test that a failing delete of the old file does not fail the upload."""
        self.upload("resume")
        self.mock_storage.destroy.side_effect = Exception("storage down")

        second = self.upload("resume")

        self.assertEqual(self.service.list_documents("u1"), [second])

    def test_users_are_isolated(self) -> None:
        """Test that uploads of one user never replace another's documents."""
        mine = self.upload("resume")
        self.upload("resume", user_id="u2")

        self.assertEqual(self.service.list_documents("u1"), [mine])

    def test_delete_document(self) -> None:
        """Test that deleting removes both the file and the record."""
        document = self.upload()

        self.service.delete_document("u1", document.uuid)

        self.assertEqual(self.service.list_documents("u1"), [])
        self.mock_storage.destroy.assert_called_once_with(
            document.storage_public_id, resource_type="raw"
        )

    def test_delete_not_owned(self) -> None:
        """Test that users cannot delete documents they do not own."""
        document = self.upload()

        with self.assertRaises(ResourceNotFoundError):
            self.service.delete_document("u2", document.uuid)
        with self.assertRaises(ResourceNotFoundError):
            self.service.delete_document("u1", "missing")
        self.assertEqual(self.service.get_documents("u1"), [document])


if __name__ == "__main__":
    unittest.main()
