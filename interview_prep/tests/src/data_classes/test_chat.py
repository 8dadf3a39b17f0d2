"""Unit tests for the chat data classes."""

import unittest
from datetime import datetime, timezone

from interview_prep.src.data_classes import Chat, ChatMessage, Citation


class TestChatMessage(unittest.TestCase):
    """Test cases for ChatMessage validation and serialization."""

    def test_rejects_unknown_role(self) -> None:
        """Test that only user, assistant and system roles are accepted."""
        with self.assertRaises(ValueError):
            ChatMessage(role="bot", content="hi")

    def test_rejects_empty_content(self) -> None:
        """Test that a message must have content."""
        with self.assertRaises(ValueError):
            ChatMessage(role="user", content="")

    def test_rejects_out_of_range_score(self) -> None:
        """Test that scores must lie in [1, 10]."""
        for score in (0, 11):
            with self.assertRaises(ValueError):
                ChatMessage(role="assistant", content="feedback", score=score)

    def test_accepts_bounds(self) -> None:
        """Test that the score bounds are inclusive."""
        self.assertEqual(ChatMessage(role="assistant", content="f", score=1).score, 1)
        self.assertEqual(ChatMessage(role="assistant", content="f", score=10).score, 10)

    def test_json_keeps_citations(self) -> None:
        """Test that citations and timestamps survive storage."""
        message = ChatMessage(
            role="assistant",
            content="Good answer",
            score=7,
            citations=[Citation(chunk_index=2, snippet="Led a team...", type="resume")],
            timestamp=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        )

        data = message.to_json()
        self.assertEqual(
            data["citations"],
            [{"chunk_index": 2, "snippet": "Led a team...", "type": "resume"}],
        )
        self.assertEqual(ChatMessage.from_json(data), message)


class TestChat(unittest.TestCase):
    """Test cases for Chat."""

    def test_messages_keep_insertion_order(self) -> None:
        """Test that messages are appended in order and survive storage."""
        chat = Chat(uuid="c1", user_id="u1")
        chat.add_message(ChatMessage(role="assistant", content="1. Question?"))
        chat.add_message(ChatMessage(role="user", content="My answer"))

        restored = Chat.from_json(chat.to_json())

        self.assertEqual([m.role for m in restored.messages], ["assistant", "user"])
        self.assertEqual(restored.user_id, "u1")

    def test_new_chats_do_not_share_messages(self) -> None:
        """Test that the default message list is not shared between chats."""
        first = Chat(uuid="a", user_id="u")
        second = Chat(uuid="b", user_id="u")
        first.add_message(ChatMessage(role="user", content="hi"))
        self.assertEqual(second.messages, [])


if __name__ == "__main__":
    unittest.main()
