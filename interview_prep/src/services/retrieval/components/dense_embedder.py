"""Text embedding module.

This module provides embedder classes for generating text embeddings.
The module includes an abstract base class and a client for the hosted
Hugging Face inference API.
"""

import abc
import logging
import time
from typing import Any, Dict, List, Optional

import numpy as np
import requests

from interview_prep.conf.config import Config

logger = logging.getLogger(__name__)


class EmbeddingError(RuntimeError):
    """Raised when an embedding could not be generated."""


class BaseDenseEmbedder(abc.ABC):
    """Base class for text embedders.

    Defines the interface for text embedding systems.
    """

    @abc.abstractmethod
    def encode(self, text: str) -> List[float]:
        """Generate the embedding of a single text.

        Args:
            text: Text to embed

        Returns:
            Embedding vector

        Raises:
            EmbeddingError: If the embedding could not be generated
        """


class HuggingFaceEmbedder(BaseDenseEmbedder):
    """Embedder backed by the Hugging Face feature-extraction inference API.

    Hosted models are unloaded when idle, so the first requests after a pause
    can report that the model is loading. The client waits and retries in that
    case, and retries other failures after a short fixed delay.

    Attributes:
        api_url (str): Model endpoint
        api_key (Optional[str]): Bearer token for the API
        max_retries (int): Number of attempts per text
        timeout (int): Request timeout in seconds
        session (requests.Session): Shared HTTP session
    """

    def __init__(
        self,
        api_url: str = Config.EMBEDDING_API_URL,
        api_key: Optional[str] = Config.HUGGINGFACE_API_KEY,
        max_retries: int = Config.EMBEDDING_MAX_RETRIES,
        timeout: int = Config.EMBEDDING_TIMEOUT,
        loading_wait: float = Config.EMBEDDING_LOADING_WAIT,
        loading_error_wait: float = Config.EMBEDDING_LOADING_ERROR_WAIT,
        retry_delay: float = Config.EMBEDDING_RETRY_DELAY,
    ) -> None:
        """Initialize the embedder.

        Args:
            api_url: Model endpoint
            api_key: Bearer token for the API
            max_retries: Number of attempts per text
            timeout: Request timeout in seconds
            loading_wait: Wait when the response body reports a loading model
            loading_error_wait: Wait when an error response reports a loading model
            retry_delay: Wait after any other failure
        """
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        if not api_key:
            logger.warning("HUGGINGFACE_API_KEY is not set, requests may be rejected")

        self.api_url = api_url
        self.api_key = api_key
        self.max_retries = max_retries
        self.timeout = timeout
        self.loading_wait = loading_wait
        self.loading_error_wait = loading_error_wait
        self.retry_delay = retry_delay
        self.session = requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    @staticmethod
    def _is_loading(payload: Any) -> bool:
        if isinstance(payload, dict):
            return "loading" in str(payload.get("error", "")).lower()
        return "loading" in str(payload).lower()

    @staticmethod
    def _error_body(error: requests.exceptions.RequestException) -> str:
        response = getattr(error, "response", None)
        if response is not None:
            return response.text
        return str(error)

    @staticmethod
    def _to_vector(payload: Any) -> List[float]:
        """Convert an API payload into a single embedding vector.

        Sentence models return one vector. Some models return the vector
        wrapped in a batch, or one vector per token, which is mean-pooled.

        Raises:
            ValueError: If the payload is not a numeric array
        """
        if isinstance(payload, dict):
            raise ValueError(f"Embedding API error: {payload.get('error', payload)}")

        array = np.asarray(payload, dtype=np.float64)
        if array.size == 0:
            raise ValueError("Embedding API returned an empty vector")

        if array.ndim == 3:
            array = array[0]
        if array.ndim == 2:
            array = array[0] if array.shape[0] == 1 else array.mean(axis=0)
        if array.ndim != 1:
            raise ValueError(f"Unexpected embedding shape: {array.shape}")

        return array.tolist()

    def encode(self, text: str) -> List[float]:
        """Generate the embedding of a text with a linear retry loop.

        Args:
            text: Text to embed

        Returns:
            Embedding vector

        Raises:
            EmbeddingError: If every attempt failed
        """
        payload = {"inputs": text, "options": {"wait_for_model": True}}

        for attempt in range(self.max_retries):
            try:
                response = self.session.post(
                    self.api_url,
                    json=payload,
                    headers=self._headers(),
                    timeout=self.timeout,
                )
                response.raise_for_status()
                data = response.json()

                if self._is_loading(data):
                    logger.info(
                        f"Model loading, waiting... (attempt {attempt + 1}/{self.max_retries})"
                    )
                    time.sleep(self.loading_wait)
                    continue

                return self._to_vector(data)

            except (requests.exceptions.RequestException, ValueError) as e:
                body = (
                    self._error_body(e)
                    if isinstance(e, requests.exceptions.RequestException)
                    else str(e)
                )
                logger.error(f"Embedding error (attempt {attempt + 1}): {body}")

                if self._is_loading(body) and attempt < self.max_retries - 1:
                    logger.info(
                        f"Model is loading, waiting {self.loading_error_wait}s before retry..."
                    )
                    time.sleep(self.loading_error_wait)
                    continue

                if attempt == self.max_retries - 1:
                    raise EmbeddingError(
                        "Failed to generate embedding after retries"
                    ) from e

                time.sleep(self.retry_delay)

        raise EmbeddingError("Failed to generate embedding after retries")
