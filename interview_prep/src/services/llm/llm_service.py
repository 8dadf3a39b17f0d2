"""Service module for generating text with Google's Gemini API.

Question generation and answer evaluation both go through `BaseLLMService`, so
the interview logic never touches the provider SDK directly.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import google.generativeai as genai
from google.generativeai.generative_models import GenerativeModel
from google.generativeai.types import GenerationConfig

from interview_prep.conf.config import Config

logger = logging.getLogger(__name__)


class BaseLLMService(ABC):
    """Base class for LLM services."""

    @abstractmethod
    def generate_response(
        self,
        user_message: str,
        system_prompt: str = "",
        max_tokens: Optional[int] = None,
    ) -> str:
        """Generate text for a prompt.

        Args:
            user_message: The prompt body
            system_prompt: Instructions placed ahead of the prompt body
            max_tokens: Maximum number of tokens to generate. If None, uses service default

        Returns:
            str: Generated text

        Raises:
            RuntimeError: If generation fails or produces no text
        """


def extract_text(response: Any) -> str:
    """Pull the text of the first candidate out of a Gemini response.

    Args:
        response: Response returned by `GenerativeModel.generate_content`

    Returns:
        str: Concatenated text parts of the first candidate

    Raises:
        RuntimeError: If the response has no candidates or no text
    """
    candidates = getattr(response, "candidates", None)
    if not candidates:
        feedback = getattr(response, "prompt_feedback", None)
        raise RuntimeError(f"Gemini returned no candidates (prompt feedback: {feedback})")

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    text = "".join(getattr(part, "text", "") or "" for part in parts)
    if not text.strip():
        finish_reason = getattr(candidates[0], "finish_reason", None)
        raise RuntimeError(f"Gemini returned no text (finish reason: {finish_reason})")
    return text


class GeminiLLMService(BaseLLMService):
    """Generates text with a Gemini model.

    Attributes:
        model: The configured Gemini model client
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        api_key: Optional[str] = Config.GEMINI_API_KEY,
        model_name: str = Config.GEMINI_MODEL_NAME,
        timeout: int = Config.GEMINI_TIMEOUT,
    ) -> None:
        if not api_key:
            raise ValueError(
                "Gemini API key not found. Please set the GEMINI_API_KEY environment variable."
            )
        genai.configure(api_key=api_key)  # type: ignore

        self.model = GenerativeModel(
            model_name=model_name,
            generation_config=GenerationConfig(
                temperature=Config.GEMINI_TEMPERATURE,
                max_output_tokens=Config.GEMINI_MAX_TOKENS,
            ),
        )
        self.timeout = timeout
        logger.info(f"Initialized Gemini LLM service with model: {model_name}")

    def generate_response(
        self,
        user_message: str,
        system_prompt: str = "",
        max_tokens: Optional[int] = None,
    ) -> str:
        prompt = f"{system_prompt}\n\n{user_message}" if system_prompt else user_message
        generation_config = (
            GenerationConfig(max_output_tokens=max_tokens) if max_tokens else None
        )

        try:
            response = self.model.generate_content(  # type: ignore
                [{"role": "user", "parts": [{"text": prompt}]}],
                generation_config=generation_config,
                request_options={"timeout": self.timeout},
            )
        except Exception as e:
            logger.error(f"Gemini API error: {str(e)}")
            raise RuntimeError(f"Failed to generate response: {str(e)}") from e

        text = extract_text(response)
        logger.debug(f"Gemini returned {len(text)} characters")
        return text
