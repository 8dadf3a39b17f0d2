"""Service for user registration and login.

Passwords are hashed with bcrypt. Successful signup and login issue a JWT access
token whose identity is the user's UUID.
"""

import logging
import re
import uuid
from datetime import timedelta
from typing import Tuple

import bcrypt
from flask_jwt_extended import create_access_token

from interview_prep.conf.config import Config
from interview_prep.src.data_classes import User
from interview_prep.src.services.exceptions import (
    AuthenticationError,
    InvalidInputError,
    ProcessingError,
)
from interview_prep.src.services.store import UserStore

logger = logging.getLogger(__name__)

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        logger.error("Stored password hash is malformed")
        return False


class AuthService:
    """Registers users and verifies their credentials.

    Attributes:
        user_store: Storage for registered users
        token_expires: Lifetime of issued access tokens
    """

    def __init__(
        self,
        user_store: UserStore,
        token_expires: timedelta = timedelta(days=Config.JWT_EXPIRES_DAYS),
    ) -> None:
        self.user_store = user_store
        self.token_expires = token_expires

    def create_token(self, user: User) -> str:
        """Issue an access token for a user. Requires a Flask app context."""
        return create_access_token(identity=user.uuid, expires_delta=self.token_expires)

    def signup(self, email: str, password: str) -> Tuple[User, str]:
        """Register a new user.

        Args:
            email: Email address, compared case-insensitively
            password: Plain-text password

        Returns:
            Tuple[User, str]: The created user and an access token

        Raises:
            InvalidInputError: If the email or password is invalid, or the email is taken
            ProcessingError: If the user could not be stored
        """
        email = email.strip().lower()
        if not _EMAIL_PATTERN.match(email):
            raise InvalidInputError("Please provide a valid email")
        if len(password) < Config.MIN_PASSWORD_LENGTH:
            raise InvalidInputError(
                f"Password must be at least {Config.MIN_PASSWORD_LENGTH} characters"
            )
        if self.user_store.get_by_email(email) is not None:
            raise InvalidInputError("User already exists")

        user = User(uuid=str(uuid.uuid4()), email=email, password_hash=hash_password(password))
        if not self.user_store.create_user(user):
            # A concurrent signup may have taken the email after the check above
            if self.user_store.get_by_email(email) is not None:
                raise InvalidInputError("User already exists")
            raise ProcessingError("Failed to create user")

        logger.info(f"Registered user {user.uuid}")
        return user, self.create_token(user)

    def login(self, email: str, password: str) -> Tuple[User, str]:
        """Verify credentials and issue a token.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        user = self.user_store.get_by_email(email)
        if user is None or not check_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise AuthenticationError("Invalid credentials")

        logger.info(f"User {user.uuid} logged in")
        return user, self.create_token(user)
