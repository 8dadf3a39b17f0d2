"""Chat endpoints module.

This module provides Flask routes for the interview chat:
1. Starting a chat with questions generated from the job description
2. Scoring an answer against the user's documents
3. Reading back the chat history
"""

import logging
from typing import List, Optional

from flask import Blueprint, Response, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required
from flask_pydantic import validate  # type: ignore
from pydantic import BaseModel, Field

from interview_prep.src.api.schemas import CamelModel, ChatMessageModel, CitationModel
from interview_prep.src.services import ChatService
from interview_prep.src.services.interview import split_questions

logger = logging.getLogger(__name__)


# Schema definitions
class QueryRequest(BaseModel):
    """Answer submission model for validation."""

    message: Optional[str] = Field(None, description="User's answer")
    question: Optional[str] = Field(None, description="Question being answered")


class StartChatResponseModel(CamelModel):
    """Chat start response model."""

    message: str
    questions: str = Field(..., description="Generated questions as numbered text")
    question_list: List[str] = Field(
        default_factory=list, description="Generated questions, one per item"
    )
    chat_id: str


class QueryResponseModel(CamelModel):
    """Answer evaluation response model."""

    response: str = Field(..., description="Feedback on the answer")
    score: Optional[int] = Field(None, description="Score from 1 to 10")
    citations: List[CitationModel] = Field(default_factory=list)


class HistoryResponseModel(CamelModel):
    """Chat history response model."""

    messages: List[ChatMessageModel] = Field(default_factory=list)


def init_chat_routes(chat_service: ChatService) -> Blueprint:
    """Initialize chat routes with the provided service.

    Args:
        chat_service: Service running interview chats.

    Returns:
        Blueprint: Flask blueprint with configured chat routes.
    """
    chat_bp = Blueprint("chat", __name__)

    @chat_bp.route("/chat/start", methods=["POST"])
    @jwt_required()
    def start_chat() -> Response:
        """Start a new interview chat, replacing the previous one."""
        chat, questions = chat_service.start(get_jwt_identity())
        response = StartChatResponseModel(
            message="Chat session started",
            questions=questions,
            question_list=split_questions(questions),
            chat_id=chat.uuid,
        )
        return jsonify(response.to_dict())

    @chat_bp.route("/chat/query", methods=["POST"])
    @jwt_required()
    @validate()
    def query_chat(body: QueryRequest) -> Response:  # type: ignore
        """Score an answer to an interview question.

        Args:
            body: Validated request body

        Returns:
            Feedback, score and the citations backing them
        """
        evaluation = chat_service.query(
            get_jwt_identity(), body.message or "", body.question or ""
        )
        response = QueryResponseModel(
            response=evaluation.content,
            score=evaluation.score,
            citations=[CitationModel.from_citation(c) for c in evaluation.citations],
        )
        return jsonify(response.to_dict())

    @chat_bp.route("/chat/history", methods=["GET"])
    @jwt_required()
    def chat_history() -> Response:
        """Return the messages of the user's chat."""
        messages = chat_service.history(get_jwt_identity())
        response = HistoryResponseModel(
            messages=[ChatMessageModel.from_message(m) for m in messages]
        )
        return jsonify(response.to_dict())

    return chat_bp
