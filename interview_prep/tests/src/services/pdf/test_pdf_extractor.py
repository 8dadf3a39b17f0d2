"""Unit tests for the PDF text extractor."""

import unittest
from unittest.mock import MagicMock, patch

from pypdf.errors import PdfReadError

from interview_prep.src.services.pdf import PDFExtractionError, PDFTextExtractor

READER_PATH = "interview_prep.src.services.pdf.pdf_extractor.PdfReader"


class TestPDFTextExtractor(unittest.TestCase):
    """Test cases for PDFTextExtractor."""

    def setUp(self) -> None:
        """Set up test fixtures before each test method."""
        self.extractor = PDFTextExtractor()

    def test_joins_pages_with_newlines(self) -> None:
        """Test that page texts are joined in page order."""
        pages = [MagicMock(), MagicMock()]
        pages[0].extract_text.return_value = "Page one"
        pages[1].extract_text.return_value = "Page two"

        with patch(READER_PATH) as mock_reader:
            mock_reader.return_value.pages = pages
            text = self.extractor.extract_text(b"%PDF-1.4")

        self.assertEqual(text, "Page one\nPage two")

    def test_pages_without_text(self) -> None:
        """Test that image-only pages give empty text."""
        page = MagicMock()
        page.extract_text.return_value = None

        with patch(READER_PATH) as mock_reader:
            mock_reader.return_value.pages = [page]
            self.assertEqual(self.extractor.extract_text(b"%PDF-1.4"), "")

    def test_unreadable_pdf(self) -> None:
        """Test that a parse failure raises PDFExtractionError."""
        with patch(READER_PATH, side_effect=PdfReadError("EOF marker not found")):
            with self.assertRaises(PDFExtractionError):
                self.extractor.extract_text(b"not a pdf")

    def test_malformed_page_errors(self) -> None:
        """Test that errors raised while reading pages are reported as extraction failures."""
        for error in (KeyError("/Contents"), TypeError("bad object"), AttributeError("x")):
            page = MagicMock()
            page.extract_text.side_effect = error
            with patch(READER_PATH) as mock_reader:
                mock_reader.return_value.pages = [page]
                with self.assertRaises(PDFExtractionError):
                    self.extractor.extract_text(b"%PDF-1.4")


if __name__ == "__main__":
    unittest.main()
