"""Interview package: question generation and answer evaluation."""

from .interview_service import InterviewService
from .utils import split_questions

__all__ = ["InterviewService", "split_questions"]
