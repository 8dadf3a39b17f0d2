"""Service running the interview chat.

Starting a chat generates questions from the job description. Each answer is
embedded, matched against the user's document chunks and scored, and both the
answer and its evaluation are appended to the chat.
"""

import logging
import uuid
from dataclasses import replace
from typing import List, Sequence, Tuple

from interview_prep.conf.config import Config
from interview_prep.src.data_classes import Chat, ChatMessage, Citation, ScoredChunk
from interview_prep.src.services.exceptions import InvalidInputError, ProcessingError
from interview_prep.src.services.interview import InterviewService
from interview_prep.src.services.retrieval import RetrievalService
from interview_prep.src.services.retrieval.components import EmbeddingError
from interview_prep.src.services.store import ChatStore, DocumentStore

logger = logging.getLogger(__name__)


def build_citations(
    chunks: Sequence[ScoredChunk],
    snippet_length: int = Config.CITATION_SNIPPET_LENGTH,
) -> List[Citation]:
    """Turn retrieved chunks into citations with a truncated snippet."""
    return [
        Citation(
            chunk_index=chunk.chunk_index,
            snippet=chunk.text[:snippet_length] + "...",
            type=chunk.type,
        )
        for chunk in chunks
    ]


class ChatService:
    """Starts interview chats and scores answers.

    Attributes:
        document_store: Storage for the user's documents
        chat_store: Storage for chats
        retrieval_service: Service ranking chunks against answers
        interview_service: Service generating questions and evaluations
    """

    def __init__(
        self,
        document_store: DocumentStore,
        chat_store: ChatStore,
        retrieval_service: RetrievalService,
        interview_service: InterviewService,
    ) -> None:
        self.document_store = document_store
        self.chat_store = chat_store
        self.retrieval_service = retrieval_service
        self.interview_service = interview_service

    def start(self, user_id: str) -> Tuple[Chat, str]:
        """Start a new chat, discarding the previous one.

        Args:
            user_id: UUID of the user

        Returns:
            Tuple[Chat, str]: The new chat and the generated questions

        Raises:
            InvalidInputError: If the resume or job description is missing
            ProcessingError: If the chat could not be saved
        """
        resumes = self.document_store.find_by_type(user_id, "resume")
        jds = self.document_store.find_by_type(user_id, "jd")
        if not resumes or not jds:
            raise InvalidInputError(
                "Both resume and job description must be uploaded before starting chat"
            )

        questions = self.interview_service.generate_questions(jds[0].full_text)

        self.chat_store.delete_for_user(user_id)
        chat = Chat(uuid=str(uuid.uuid4()), user_id=user_id)
        chat.add_message(ChatMessage(role="assistant", content=questions))
        if not self.chat_store.save(chat):
            raise ProcessingError("Failed to start chat")

        logger.info(f"Started chat {chat.uuid} for user {user_id}")
        return chat, questions

    def query(self, user_id: str, message: str, question: str) -> ChatMessage:
        """Score an answer to an interview question.

        Args:
            user_id: UUID of the user
            message: The user's answer
            question: The question being answered

        Returns:
            ChatMessage: The assistant evaluation, with feedback, score and citations

        Raises:
            InvalidInputError: If fields are missing or the resume or job description
                is missing
            ProcessingError: If the answer could not be embedded or the chat saved
        """
        if not message or not message.strip() or not question or not question.strip():
            raise InvalidInputError("Message and question are required")

        resumes = self.document_store.find_by_type(user_id, "resume")
        jds = self.document_store.find_by_type(user_id, "jd")
        if not resumes or not jds:
            raise InvalidInputError("Documents not found")
        documents = resumes + jds

        try:
            chunks = self.retrieval_service.find_relevant_chunks(message, documents)
        except EmbeddingError as e:
            logger.error(f"Failed to embed answer: {str(e)}")
            raise ProcessingError("Failed to process answer") from e

        evaluation = self.interview_service.evaluate_response(question, message, chunks)
        citations = build_citations(chunks)

        chat = self.chat_store.get_for_user(user_id)
        if chat is None:
            chat = Chat(uuid=str(uuid.uuid4()), user_id=user_id)

        assistant_message = ChatMessage(
            role="assistant",
            content=evaluation.feedback,
            score=evaluation.score,
            citations=citations,
        )
        chat.add_message(ChatMessage(role="user", content=message))
        chat.add_message(assistant_message)

        if not self.chat_store.save(chat):
            logger.warning("Saving chat failed, retrying without citations")
            chat.messages[-1] = replace(assistant_message, citations=[])
            if not self.chat_store.save(chat):
                raise ProcessingError("Failed to save chat")

        return assistant_message

    def history(self, user_id: str) -> List[ChatMessage]:
        chat = self.chat_store.get_for_user(user_id)
        return chat.messages if chat else []
