"""Keyword heuristic used to score answers when the LLM is unavailable."""

import logging
from typing import Sequence

from interview_prep.conf.config import Config
from interview_prep.conf.prompts import (
    FEEDBACK_LONG_GENERIC,
    FEEDBACK_LONG_RELEVANT,
    FEEDBACK_SHORT_GENERIC,
    FEEDBACK_SHORT_RELEVANT,
    FEEDBACK_TOO_BRIEF,
)
from interview_prep.src.data_classes import Evaluation, ScoredChunk

logger = logging.getLogger(__name__)

BRIEF_ANSWER_WORDS = 10
SHORT_ANSWER_WORDS = 30


def references_chunks(answer: str, chunks: Sequence[ScoredChunk]) -> bool:
    """Check whether the answer quotes the start of any retrieved chunk."""
    lowered = answer.lower()
    return any(
        chunk.text[: Config.RELEVANCE_PREFIX_LENGTH].lower() in lowered
        for chunk in chunks
    )


def heuristic_evaluation(answer: str, chunks: Sequence[ScoredChunk]) -> Evaluation:
    """Score an answer by its length and whether it references the documents.

    Args:
        answer: The candidate's answer
        chunks: Chunks retrieved for the answer

    Returns:
        Evaluation marked as a fallback
    """
    # Counted on single spaces, so runs of spaces count as extra words
    word_count = len(answer.split(" "))
    relevant = references_chunks(answer, chunks)

    if word_count < BRIEF_ANSWER_WORDS:
        score, feedback = 3, FEEDBACK_TOO_BRIEF
    elif word_count < SHORT_ANSWER_WORDS:
        score, feedback = (
            (6, FEEDBACK_SHORT_RELEVANT) if relevant else (5, FEEDBACK_SHORT_GENERIC)
        )
    else:
        score, feedback = (
            (8, FEEDBACK_LONG_RELEVANT) if relevant else (6, FEEDBACK_LONG_GENERIC)
        )

    logger.info(
        f"Fallback evaluation: words={word_count}, relevant={relevant}, score={score}"
    )
    return Evaluation(score=score, feedback=feedback, used_fallback=True)
