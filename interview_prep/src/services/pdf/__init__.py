"""PDF package for extracting text from uploaded documents."""

from .pdf_extractor import PDFExtractionError, PDFTextExtractor

__all__ = ["PDFTextExtractor", "PDFExtractionError"]
