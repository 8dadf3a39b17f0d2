"""LLM service package."""

from .llm_service import BaseLLMService, GeminiLLMService, extract_text

__all__ = [
    "BaseLLMService",
    "GeminiLLMService",
    "extract_text",
]
