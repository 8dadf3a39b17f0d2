"""Service generating interview questions and scoring candidate answers.

Both operations call the configured LLM and degrade to canned output when the
provider fails: fixed generic questions, or the keyword heuristic for scoring.
"""

import logging
from typing import Sequence

from interview_prep.conf.config import Config
from interview_prep.conf.prompts import (
    FALLBACK_QUESTIONS,
    QUESTION_GENERATION_PROMPT,
    QUESTION_GENERATION_SYSTEM_PROMPT,
    RESPONSE_EVALUATION_PROMPT,
    RESPONSE_EVALUATION_SYSTEM_PROMPT,
)
from interview_prep.src.data_classes import Evaluation, ScoredChunk
from interview_prep.src.services.interview.fallback_scorer import heuristic_evaluation
from interview_prep.src.services.interview.utils import (
    format_chunks_for_llm,
    parse_evaluation,
)
from interview_prep.src.services.llm import BaseLLMService

logger = logging.getLogger(__name__)


class InterviewService:
    """Generates questions from a job description and evaluates answers.

    Attributes:
        llm_service: Service for LLM generation
        question_count: Number of questions to request
    """

    def __init__(
        self, llm_service: BaseLLMService, question_count: int = Config.QUESTION_COUNT
    ) -> None:
        """Initialize the interview service.

        Args:
            llm_service: Service for LLM generation
            question_count: Number of questions to request

        Raises:
            AssertionError: If LLM service is None
        """
        assert llm_service is not None, "LLM service must be provided"

        self.llm_service = llm_service
        self.question_count = question_count
        logger.info("InterviewService initialized")

    def generate_questions(self, jd_text: str) -> str:
        """Generate numbered interview questions for a job description.

        Args:
            jd_text: Full text of the job description

        Returns:
            str: Numbered list of questions, or the canned fallback questions if
                 the LLM fails
        """
        user_message = QUESTION_GENERATION_PROMPT.format(
            question_count=self.question_count, jd_text=jd_text
        )

        try:
            response = self.llm_service.generate_response(
                user_message=user_message,
                system_prompt=QUESTION_GENERATION_SYSTEM_PROMPT,
            )
        except RuntimeError as e:
            logger.error(f"LLM error while generating questions: {str(e)}")
            logger.info("Using fallback questions based on JD content...")
            return FALLBACK_QUESTIONS

        if not response or not response.strip():
            logger.warning("LLM returned no questions, using fallback questions")
            return FALLBACK_QUESTIONS

        return response.strip()

    def evaluate_response(
        self, question: str, answer: str, chunks: Sequence[ScoredChunk]
    ) -> Evaluation:
        """Score a candidate's answer against the retrieved document chunks.

        Args:
            question: The interview question that was answered
            answer: The candidate's answer
            chunks: Chunks retrieved for the answer, most similar first

        Returns:
            Evaluation: Score in [1, 10] and feedback. Uses the keyword heuristic
                        when the LLM fails.
        """
        user_message = RESPONSE_EVALUATION_PROMPT.format(
            question=question,
            answer=answer,
            context=format_chunks_for_llm(chunks),
        )

        try:
            response = self.llm_service.generate_response(
                user_message=user_message,
                system_prompt=RESPONSE_EVALUATION_SYSTEM_PROMPT,
            )
        except RuntimeError as e:
            logger.error(f"LLM error while evaluating response: {str(e)}")
            logger.info("Using fallback evaluation...")
            return heuristic_evaluation(answer, chunks)

        if not response or not response.strip():
            logger.warning("LLM returned an empty evaluation, using fallback evaluation")
            return heuristic_evaluation(answer, chunks)

        evaluation = parse_evaluation(response)
        logger.info(f"Evaluated response with score {evaluation.score}")
        return evaluation
