"""Unit tests for the InterviewService."""

import unittest
from unittest.mock import Mock

from interview_prep.conf.prompts import FALLBACK_QUESTIONS
from interview_prep.src.data_classes import ScoredChunk
from interview_prep.src.services.interview import InterviewService
from interview_prep.src.services.llm import BaseLLMService


class TestInterviewService(unittest.TestCase):
    """Test cases for the InterviewService."""

    def setUp(self) -> None:
        """Set up test fixtures before each test method."""
        self.mock_llm_service = Mock(spec=BaseLLMService)
        self.service = InterviewService(llm_service=self.mock_llm_service)
        self.chunks = [
            ScoredChunk(
                text="Five years of Django development",
                type="resume",
                chunk_index=0,
                document_id="r",
            )
        ]

    def test_requires_llm_service(self) -> None:
        """Test that the service cannot be created without an LLM."""
        with self.assertRaises(AssertionError):
            InterviewService(llm_service=None)  # type: ignore

    def test_generate_questions(self) -> None:
        """Test that the LLM reply is returned and the JD is in the prompt."""
        self.mock_llm_service.generate_response.return_value = (
            "1. Q one?\n2. Q two?\n3. Q three?\n"
        )

        result = self.service.generate_questions("Senior Django engineer wanted")

        self.assertEqual(result, "1. Q one?\n2. Q two?\n3. Q three?")
        kwargs = self.mock_llm_service.generate_response.call_args.kwargs
        self.assertIn("Senior Django engineer wanted", kwargs["user_message"])
        self.assertIn("exactly 3", kwargs["user_message"])

    def test_generate_questions_fallback_on_error(self) -> None:
        """Test that an LLM failure returns the canned questions."""
        self.mock_llm_service.generate_response.side_effect = RuntimeError("quota")
        self.assertEqual(self.service.generate_questions("JD"), FALLBACK_QUESTIONS)

    def test_generate_questions_fallback_on_empty(self) -> None:
        """Test that an empty LLM reply returns the canned questions."""
        self.mock_llm_service.generate_response.return_value = "  "
        self.assertEqual(self.service.generate_questions("JD"), FALLBACK_QUESTIONS)

    def test_evaluate_response(self) -> None:
        """Test that the LLM evaluation is parsed and the context is numbered."""
        self.mock_llm_service.generate_response.return_value = (
            "SCORE: 8\nFEEDBACK: Strong, specific answer."
        )

        evaluation = self.service.evaluate_response(
            "Tell me about Django", "I built Django apps for five years", self.chunks
        )

        self.assertEqual(evaluation.score, 8)
        self.assertEqual(evaluation.feedback, "Strong, specific answer.")
        self.assertFalse(evaluation.used_fallback)
        user_message = self.mock_llm_service.generate_response.call_args.kwargs[
            "user_message"
        ]
        self.assertIn("Tell me about Django", user_message)
        self.assertIn("[Resume Chunk 1]: Five years of Django development", user_message)

    def test_evaluate_response_fallback_on_error(self) -> None:
        """Test that an LLM failure uses the keyword heuristic."""
        self.mock_llm_service.generate_response.side_effect = RuntimeError("down")

        evaluation = self.service.evaluate_response("Q", "Too short", self.chunks)

        self.assertTrue(evaluation.used_fallback)
        self.assertEqual(evaluation.score, 3)

    def test_evaluate_response_fallback_on_empty(self) -> None:
        """Test that an empty LLM reply uses the keyword heuristic."""
        self.mock_llm_service.generate_response.return_value = ""

        evaluation = self.service.evaluate_response("Q", "Short", self.chunks)

        self.assertTrue(evaluation.used_fallback)


if __name__ == "__main__":
    unittest.main()
