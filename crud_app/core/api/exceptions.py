"""Normalized errors raised by the users API client.

Every failure of a remote call is classified as exactly one of
ValidationError, NotFoundError or RequestError, so callers never inspect
HTTP responses themselves.
"""
from __future__ import annotations
from typing import Any, Optional


class ApiError(Exception):
    """Base exception for all users API operations."""

    def __init__(self, message: Optional[str] = None):
        self.message = message
        super().__init__(message or self.__class__.__name__)


class ValidationError(ApiError):
    """The server rejected the payload.

    Attributes:
        message: Summary message from the response, if any
        errors: Per-field problems as returned by the server (free-text
            strings, or ``{"field", "message"}`` objects)
    """

    def __init__(self, message: Optional[str] = None, errors: Optional[list[Any]] = None):
        self.errors = list(errors or [])
        super().__init__(message)


class NotFoundError(ApiError):
    """The addressed user does not exist remotely."""
    pass


class RequestError(ApiError):
    """Network failure, unexpected status or malformed response.

    Attributes:
        message: Server-provided message, or None when there is none to show
        status_code: HTTP status code, None for transport failures
    """

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
