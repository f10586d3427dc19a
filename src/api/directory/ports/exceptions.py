"""Gateway exceptions for the directory bounded context.

These exceptions are the only failures a gateway raises. The directory
store catches them and reports results as booleans or optionals.
"""

from __future__ import annotations

GENERIC_ERROR_MESSAGE = "An error occurred"


class RequestError(Exception):
    """Raised when a gateway request fails or returns a non-success status.

    Carries a human-readable message suitable for showing to the end user,
    and the HTTP status code when one was received.
    """

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UserNotFoundError(RequestError):
    """Raised when the requested user identifier does not exist."""

    def __init__(self, user_id: int, message: str | None = None):
        super().__init__(message or f"User {user_id} not found", status_code=404)
        self.user_id = user_id
