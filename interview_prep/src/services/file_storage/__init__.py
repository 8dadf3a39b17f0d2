"""File storage package for uploaded PDFs."""

from .file_storage_service import (
    BaseFileStorageService,
    CloudinaryStorageService,
    FileStorageError,
    LocalFileStorageService,
    StoredFile,
)

__all__ = [
    "BaseFileStorageService",
    "CloudinaryStorageService",
    "LocalFileStorageService",
    "FileStorageError",
    "StoredFile",
]
