"""
Application error taxonomy.

Services raise these; main.py maps them to JSON `{"error": message}`
responses with the class's status code.
"""

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestValidationFailed(AppError):
    """A required field is missing, blank, or out of range."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class UpstreamError(AppError):
    """Database, embedding, vector index, or completion model failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class GenerationError(UpstreamError):
    """The completion model returned an empty or missing reply."""
