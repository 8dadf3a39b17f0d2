"""Data class representing a registered user."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict


@dataclass
class User:
    """A registered account.

    Attributes:
        uuid: Unique identifier of the user
        email: Lower-cased email address, unique across users
        password_hash: bcrypt hash of the password
        created_at: When the account was created
    """

    uuid: str
    email: str
    password_hash: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_json(self) -> Dict[str, Any]:
        """Convert the user to a JSON-compatible dictionary for storage."""
        return {
            "uuid": self.uuid,
            "email": self.email,
            "password_hash": self.password_hash,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "User":
        """Create a User from its stored dictionary."""
        return cls(
            uuid=data["uuid"],
            email=data["email"],
            password_hash=data["password_hash"],
            created_at=datetime.fromisoformat(data["created_at"]),
        )

    def __repr__(self) -> str:
        # Never leak the password hash into logs
        return f"User(uuid={self.uuid}, email={self.email})"
