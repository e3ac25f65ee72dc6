from typing import Any, Dict, Optional
from fastapi import status


class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the service.

    Carries what the handlers need to render the error envelope:
    ``{"statusCode": ..., "message": ..., "error": ...}``. ``details`` is
    context for the logs and is never sent to the client.
    """
    def __init__(
        self,
        message: str,
        error: str = "Internal Server Error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error = error
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class BadRequestException(BaseAPIException):
    """400: invalid request (malformed payload, unusable input)"""
    def __init__(self, message: str = "Bad Request", details: dict = None):
        super().__init__(
            message=message,
            error="Bad Request",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class NotFoundException(BaseAPIException):
    """404: resource not found"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            error="Not Found",
            status_code=status.HTTP_404_NOT_FOUND
        )


class StudentCreationError(BadRequestException):
    """
    400: a student could not be created.

    Every creation failure maps to this one response regardless of cause.
    The cause travels in ``details`` and ``__cause__`` for the logs only.
    """
    MESSAGE = "Error: student not created!"

    def __init__(self, details: dict = None):
        super().__init__(message=self.MESSAGE, details=details)
        self.error = "Bad request"
