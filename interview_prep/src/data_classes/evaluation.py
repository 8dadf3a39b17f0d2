"""Evaluation result data class for scored interview answers."""

from dataclasses import dataclass


@dataclass
class Evaluation:
    """Score and feedback for a candidate's answer.

    Attributes:
        score: Score from 1 to 10
        feedback: Feedback text shown to the candidate
        used_fallback: True when the keyword heuristic replaced the LLM
    """

    score: int
    feedback: str
    used_fallback: bool = False
