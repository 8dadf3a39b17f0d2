"""Auth package for signup, login and password hashing."""

from .auth_service import AuthService, check_password, hash_password

__all__ = ["AuthService", "hash_password", "check_password"]
