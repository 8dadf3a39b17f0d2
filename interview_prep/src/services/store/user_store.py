"""Storage for registered users."""

import logging
from pathlib import Path
from typing import Optional

from interview_prep.conf.config import Config
from interview_prep.src.data_classes import User

from .json_store import JsonFileStore

logger = logging.getLogger(__name__)


class UserStore:
    """Stores users in a JSON file, unique by lower-cased email."""

    def __init__(self, file_path: Path = Config.USERS_PATH) -> None:
        self.store = JsonFileStore(file_path)

    def get_by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        record = self.store.find_one(lambda r: r.get("email") == email)
        return User.from_json(record) if record else None

    def get_by_id(self, user_id: str) -> Optional[User]:
        record = self.store.find_one(lambda r: r.get("uuid") == user_id)
        return User.from_json(record) if record else None

    def create_user(self, user: User) -> bool:
        """Store a new user.

        Args:
            user: User to store, its email already lower-cased

        Returns:
            bool: True if stored, False if the email is taken or storage failed
        """
        created = self.store.insert_unless(
            lambda r: r.get("email") == user.email, user.to_json()
        )
        if not created:
            logger.warning(f"User with email {user.email} was not created")
        return created
