"""Utility functions for the interview service."""

import logging
import re
from typing import List, Sequence

from interview_prep.conf.config import Config
from interview_prep.src.data_classes import Evaluation, ScoredChunk

logger = logging.getLogger(__name__)

_SCORE_PATTERN = re.compile(r"SCORE:\s*(\d+)", re.IGNORECASE)
_FEEDBACK_PATTERN = re.compile(r"FEEDBACK:\s*(.+)", re.IGNORECASE | re.DOTALL)
_NUMBERED_LINE_PATTERN = re.compile(r"^\s*\**\s*(\d+)[.)]\**\s*(.*)$")


def clamp_score(score: int) -> int:
    """Clamp a score into [MIN_SCORE, MAX_SCORE]."""
    return max(Config.MIN_SCORE, min(Config.MAX_SCORE, score))


def parse_evaluation(text: str) -> Evaluation:
    """Parse an LLM evaluation in the "SCORE: n / FEEDBACK: text" format.

    A missing score defaults to DEFAULT_SCORE and a missing feedback section
    falls back to the whole reply.

    Args:
        text: Raw LLM reply

    Returns:
        Parsed evaluation with the score clamped into range
    """
    score_match = _SCORE_PATTERN.search(text)
    feedback_match = _FEEDBACK_PATTERN.search(text)

    if score_match:
        score = clamp_score(int(score_match.group(1)))
    else:
        logger.warning("No score found in evaluation, using default")
        score = Config.DEFAULT_SCORE

    feedback = feedback_match.group(1).strip() if feedback_match else ""
    if not feedback:
        feedback = text.strip()
    return Evaluation(score=score, feedback=feedback)


def format_chunks_for_llm(chunks: Sequence[ScoredChunk]) -> str:
    """Format retrieved chunks as numbered context for the evaluation prompt.

    Args:
        chunks: Retrieved chunks, most similar first

    Returns:
        One paragraph per chunk, separated by blank lines
    """
    return "\n\n".join(
        f"[Resume Chunk {i + 1}]: {chunk.text}" for i, chunk in enumerate(chunks)
    )


def split_questions(text: str) -> List[str]:
    """Extract the individual questions from a numbered list.

    Lines that do not start a new item are appended to the previous item.
    Text without any numbered item is returned as a single question.

    Args:
        text: Generated questions, formatted as "1. ...", "2. ...", ...

    Returns:
        Question texts without their numbers
    """
    questions: List[str] = []
    for line in text.splitlines():
        match = _NUMBERED_LINE_PATTERN.match(line)
        if match:
            questions.append(match.group(2).strip())
        elif questions and line.strip():
            questions[-1] = f"{questions[-1]} {line.strip()}"

    if not questions and text.strip():
        return [text.strip()]
    return [question for question in questions if question]
