"""Configuration package: runtime settings and LLM prompts."""

from .config import Config

__all__ = ["Config"]
