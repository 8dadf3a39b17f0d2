"""Documents package for uploading and managing resumes and job descriptions."""

from .document_service import DocumentService

__all__ = ["DocumentService"]
