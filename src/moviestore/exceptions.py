"""
Movie Store Custom Exceptions

This module defines the exception classes used at the HTTP boundary.
Store outcomes (inserted / already exists / found / absent) are plain
return values and never appear here; these exceptions are raised by the
client when translating HTTP statuses, and rendered by the app's
exception handler when raised inside a route.
"""

from typing import Optional


class MovieStoreException(Exception):
    """
    Base exception class for all Movie Store errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        """
        Initialize MovieStoreException.

        Args:
            message: Human-readable error message
            status_code: HTTP status code associated with this error
            details: Additional error details (optional)
            request_id: Request ID associated with this error (optional)
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.request_id = request_id

    def to_dict(self) -> dict:
        """Convert exception to dict for JSON response."""
        result = {
            "error": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.request_id:
            result["request_id"] = self.request_id
        return result


class MovieConflictError(MovieStoreException):
    """Exception raised when a movie with the same id is already stored."""

    def __init__(
        self,
        movie_id: str,
        details: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(
            message=f"Movie already exists: {movie_id}",
            status_code=409,
            details=details,
            request_id=request_id,
        )
        self.movie_id = movie_id


class InvalidMovieError(MovieStoreException):
    """Exception raised when a payload does not match the Movie shape."""

    def __init__(
        self,
        message: str = "Validation error",
        details: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(
            message=message,
            status_code=400,
            details=details,
            request_id=request_id,
        )


class ServiceCommunicationError(MovieStoreException):
    """Exception raised when the service cannot be reached."""

    def __init__(
        self,
        base_url: str,
        message: str = "Failed to communicate with Movie Store",
        details: Optional[str] = None,
    ):
        super().__init__(
            message=f"{message}: {base_url}",
            status_code=503,
            details=details,
        )
        self.base_url = base_url
