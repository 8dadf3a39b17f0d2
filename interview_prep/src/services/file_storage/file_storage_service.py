"""Services for storing uploaded files.

This module provides a common interface over the places an uploaded PDF can be kept:
- Cloudinary: hosted asset storage (production)
- Local: a directory on disk (development and tests)
"""

import io
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import cloudinary
import cloudinary.uploader

from interview_prep.conf.config import Config

logger = logging.getLogger(__name__)


class FileStorageError(Exception):
    """Raised when a file cannot be stored."""


@dataclass
class StoredFile:
    """Location of a stored file.

    Attributes:
        url: URL the file can be fetched from
        public_id: Identifier used to delete the file
    """

    url: str
    public_id: str


class BaseFileStorageService(ABC):
    """Base class for file storage services."""

    @abstractmethod
    def upload(
        self, data: bytes, folder: str, public_id: str, resource_type: str = "raw"
    ) -> StoredFile:
        """Store a file.

        Args:
            data: File content
            folder: Folder to store the file in
            public_id: Name of the file within the folder
            resource_type: Kind of asset, "raw" for non-media files

        Returns:
            StoredFile: Location of the stored file

        Raises:
            FileStorageError: If the file could not be stored
        """

    @abstractmethod
    def destroy(self, public_id: str, resource_type: str = "raw") -> bool:
        """Delete a stored file.

        Args:
            public_id: Identifier returned by upload()
            resource_type: Kind of asset used at upload

        Returns:
            bool: True if a file was deleted, False if it did not exist
        """


class CloudinaryStorageService(BaseFileStorageService):
    """Stores files on Cloudinary."""

    def __init__(
        self,
        cloud_name: Optional[str] = Config.CLOUDINARY_CLOUD_NAME,
        api_key: Optional[str] = Config.CLOUDINARY_API_KEY,
        api_secret: Optional[str] = Config.CLOUDINARY_API_SECRET,
    ) -> None:
        """Initialize the Cloudinary storage service."""
        if not (cloud_name and api_key and api_secret):
            raise ValueError(
                "Cloudinary credentials not found. Please set CLOUDINARY_CLOUD_NAME, "
                "CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET."
            )
        cloudinary.config(
            cloud_name=cloud_name, api_key=api_key, api_secret=api_secret, secure=True
        )
        logger.info(f"Initialized Cloudinary storage for cloud: {cloud_name}")

    def upload(
        self, data: bytes, folder: str, public_id: str, resource_type: str = "raw"
    ) -> StoredFile:
        try:
            result: Dict[str, Any] = cloudinary.uploader.upload(
                io.BytesIO(data),
                resource_type=resource_type,
                folder=folder,
                public_id=public_id,
            )
        except Exception as e:
            logger.error(f"Cloudinary upload failed: {str(e)}")
            raise FileStorageError(f"Failed to store file: {str(e)}") from e

        logger.info(f"Uploaded {result['public_id']} to Cloudinary")
        return StoredFile(url=result["secure_url"], public_id=result["public_id"])

    def destroy(self, public_id: str, resource_type: str = "raw") -> bool:
        result: Dict[str, Any] = cloudinary.uploader.destroy(
            public_id, resource_type=resource_type
        )
        deleted = result.get("result") == "ok"
        if not deleted:
            logger.warning(f"Cloudinary destroy of {public_id}: {result.get('result')}")
        return deleted


class LocalFileStorageService(BaseFileStorageService):
    """Stores files in a local directory, mirroring Cloudinary's folder layout."""

    def __init__(self, root_dir: Path = Config.UPLOADS_DIR) -> None:
        """Initialize the local storage service.

        Args:
            root_dir: Directory that holds all stored files
        """
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Initialized local file storage at {self.root_dir}")

    def _path_for(self, public_id: str) -> Path:
        # public_ids are "<folder>/<name>"; keep them inside root_dir
        safe_parts = [
            re.sub(r"[^A-Za-z0-9_.-]", "_", part)
            for part in public_id.split("/")
            if part not in ("", ".", "..")
        ]
        return self.root_dir.joinpath(*safe_parts)

    def upload(
        self, data: bytes, folder: str, public_id: str, resource_type: str = "raw"
    ) -> StoredFile:
        full_id = f"{folder}/{public_id}" if folder else public_id
        path = self._path_for(full_id)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            logger.error(f"Local upload failed: {str(e)}")
            raise FileStorageError(f"Failed to store file: {str(e)}") from e

        logger.info(f"Stored {full_id} at {path}")
        return StoredFile(url=path.resolve().as_uri(), public_id=full_id)

    def destroy(self, public_id: str, resource_type: str = "raw") -> bool:
        path = self._path_for(public_id)
        if not path.exists():
            logger.warning(f"Local file {public_id} not found, nothing to delete")
            return False
        path.unlink()
        return True
