"""Configuration module for the backend."""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


class ConfigMeta(type):
    """Metaclass to prevent direct instantiation and enforce singleton attributes."""

    def __call__(cls, *args: object, **kwargs: object) -> None:
        """Prevent direct instantiation."""
        raise TypeError("Config cannot be instantiated directly. Use class attributes.")


class Config(metaclass=ConfigMeta):
    """Singleton configuration class. Access attributes directly via the class."""

    # =========================================================================
    # Path Configuration
    # =========================================================================
    BASE_DIR: Path = Path(__file__).parent.parent.parent
    DATA_DIR: Path = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))
    USERS_PATH: Path = DATA_DIR / "users.json"
    DOCUMENTS_PATH: Path = DATA_DIR / "documents.json"
    CHATS_PATH: Path = DATA_DIR / "chats.json"
    UPLOADS_DIR: Path = DATA_DIR / "uploads"

    # =========================================================================
    # Server Configuration
    # =========================================================================
    FLASK_PORT: int = int(os.getenv("PORT", "5000"))
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")
    API_PREFIX: str = "/api"

    # =========================================================================
    # Auth Configuration
    # =========================================================================
    JWT_SECRET_KEY: str = os.getenv("JWT_SECRET", "dev-secret-change-me")
    JWT_EXPIRES_DAYS: int = 7
    MIN_PASSWORD_LENGTH: int = 6

    # =========================================================================
    # Upload Configuration
    # =========================================================================
    MAX_UPLOAD_BYTES: int = 2 * 1024 * 1024  # 2MB per file
    # Multipart framing on top of the file itself
    MAX_REQUEST_OVERHEAD_BYTES: int = 64 * 1024
    ALLOWED_MIMETYPES: List[str] = ["application/pdf"]
    VALID_DOCUMENT_TYPES: List[str] = ["resume", "jd"]
    STORAGE_FOLDER: str = "interview-prep"

    # =========================================================================
    # Chunking Configuration
    # =========================================================================
    CHUNK_MAX_WORDS: int = 500
    EMBEDDING_CHUNK_DELAY: float = 0.5  # Pause between chunk embeddings (rate limits)

    # =========================================================================
    # Embedding Configuration
    # =========================================================================
    HUGGINGFACE_API_KEY: Optional[str] = os.getenv("HUGGINGFACE_API_KEY")
    EMBEDDING_MODEL_NAME: str = "BAAI/bge-small-en-v1.5"
    EMBEDDING_API_URL: str = os.getenv(
        "EMBEDDING_API_URL",
        f"https://api-inference.huggingface.co/models/{EMBEDDING_MODEL_NAME}",
    )
    EMBEDDING_MAX_RETRIES: int = 3
    EMBEDDING_TIMEOUT: int = 60  # Model cold starts can take a while
    EMBEDDING_LOADING_WAIT: float = 20.0  # Model reported as loading in the body
    EMBEDDING_LOADING_ERROR_WAIT: float = 30.0  # Model reported as loading in an error
    EMBEDDING_RETRY_DELAY: float = 5.0

    # =========================================================================
    # Retrieval Configuration
    # =========================================================================
    TOP_K_CHUNKS: int = 2
    CITATION_SNIPPET_LENGTH: int = 200
    RELEVANCE_PREFIX_LENGTH: int = 50  # Chunk prefix checked by the fallback scorer

    # =========================================================================
    # Interview Configuration
    # =========================================================================
    QUESTION_COUNT: int = 3
    MIN_SCORE: int = 1
    MAX_SCORE: int = 10
    DEFAULT_SCORE: int = 5

    # =========================================================================
    # LLM Configuration
    # =========================================================================
    # Service selection
    LLM_SERVICE: str = os.getenv("LLM_SERVICE", "gemini")
    VALID_LLM_SERVICES: List[str] = ["gemini"]

    # Gemini configuration
    GEMINI_MODEL_NAME: str = os.getenv("GEMINI_MODEL_NAME", "gemini-1.5-flash")
    GEMINI_TEMPERATURE: float = 0.7
    GEMINI_API_KEY: Optional[str] = os.getenv("GEMINI_API_KEY")
    GEMINI_MAX_TOKENS: int = 1024
    GEMINI_TIMEOUT: int = 30

    # =========================================================================
    # Storage Configuration
    # =========================================================================
    CLOUDINARY_CLOUD_NAME: Optional[str] = os.getenv("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY: Optional[str] = os.getenv("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET: Optional[str] = os.getenv("CLOUDINARY_API_SECRET")
    VALID_STORAGE_SERVICES: List[str] = ["cloudinary", "local"]
    STORAGE_SERVICE: str = os.getenv(
        "STORAGE_SERVICE",
        "cloudinary" if os.getenv("CLOUDINARY_CLOUD_NAME") else "local",
    )

    # =========================================================================
    # Service Selection Validation
    # =========================================================================
    if LLM_SERVICE not in VALID_LLM_SERVICES:
        raise ValueError(
            f"Invalid LLM service: {LLM_SERVICE}. Must be one of {VALID_LLM_SERVICES}"
        )
    if STORAGE_SERVICE not in VALID_STORAGE_SERVICES:
        raise ValueError(
            f"Invalid storage service: {STORAGE_SERVICE}. "
            f"Must be one of {VALID_STORAGE_SERVICES}"
        )
