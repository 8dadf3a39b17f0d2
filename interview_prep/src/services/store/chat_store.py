"""Storage for interview chats."""

from pathlib import Path
from typing import Optional

from interview_prep.conf.config import Config
from interview_prep.src.data_classes import Chat

from .json_store import JsonFileStore


class ChatStore:
    """Stores chats in a JSON file. Each user has at most one chat."""

    def __init__(self, file_path: Path = Config.CHATS_PATH) -> None:
        self.store = JsonFileStore(file_path)

    def get_for_user(self, user_id: str) -> Optional[Chat]:
        record = self.store.find_one(lambda r: r.get("user_id") == user_id)
        return Chat.from_json(record) if record else None

    def save(self, chat: Chat) -> bool:
        """Insert the chat or replace its stored version."""
        return self.store.upsert(chat.to_json())

    def delete_for_user(self, user_id: str) -> int:
        return self.store.delete(lambda r: r.get("user_id") == user_id)
