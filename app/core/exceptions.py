"""Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; ``app.main`` turns them into
``{"detail": ...}`` responses.
"""

from fastapi import status


class TodoAppError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(TodoAppError):
    """Bad input value (empty text, unknown label id, ...)."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(TodoAppError):
    """The referenced id does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(TodoAppError):
    """A label with the same name already exists."""

    status_code = status.HTTP_409_CONFLICT
