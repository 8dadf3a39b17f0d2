"""PDF text extraction module.

Extracts the plain text of uploaded PDFs in memory. Layout, images and OCR are
out of scope: scanned PDFs without a text layer yield empty text.
"""

import io
import logging

from pypdf import PdfReader

logger = logging.getLogger(__name__)


class PDFExtractionError(Exception):
    """Raised when a file cannot be read as a PDF."""


class PDFTextExtractor:
    """Extracts text from PDF bytes using pypdf."""

    def extract_text(self, data: bytes) -> str:
        """Extract the text of all pages.

        Args:
            data: Raw PDF file content

        Returns:
            Page texts joined by newlines, stripped of surrounding whitespace

        Raises:
            PDFExtractionError: If the data is not a readable PDF
        """
        try:
            reader = PdfReader(io.BytesIO(data))
            pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as e:
            logger.error(f"Failed to read PDF: {str(e)}")
            raise PDFExtractionError(f"Could not read PDF: {str(e)}") from e

        text = "\n".join(pages).strip()
        logger.debug(f"Extracted {len(text)} characters from {len(pages)} pages")
        return text
