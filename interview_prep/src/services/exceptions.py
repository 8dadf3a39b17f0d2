"""Exceptions raised by the application services.

The API layer maps each of these to an HTTP error response, so services stay
independent of Flask.
"""


class InterviewPrepError(Exception):
    """Base class for errors the services report to callers."""

    default_message = "An unexpected error occurred"

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(InterviewPrepError):
    """The caller supplied missing or invalid data."""

    default_message = "Invalid input"


class AuthenticationError(InterviewPrepError):
    """The supplied credentials are not valid."""

    default_message = "Invalid credentials"


class ResourceNotFoundError(InterviewPrepError):
    """The requested resource does not exist or is not owned by the caller."""

    default_message = "Resource not found"


class FileTooLargeError(InterviewPrepError):
    """An uploaded file exceeds the size limit."""

    default_message = "File too large"


class ProcessingError(InterviewPrepError):
    """An external collaborator or the storage layer failed."""

    default_message = "Processing failed"
