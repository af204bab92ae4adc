"""Users REST API client library.

Architecture:
- client.py: HTTP client with timeouts and error normalization
- users.py: User collection operations (list, get, create, update, delete)
- exceptions.py: Typed exceptions for error handling

Usage:
    from crud_app.core.api import ApiClient, UserService

    service = UserService(ApiClient("http://localhost:5000/api"))
    users = service.list_users()
"""
from .client import ApiClient, REQUEST_TIMEOUT
from .exceptions import ApiError, NotFoundError, RequestError, ValidationError
from .users import UserService

__all__ = [
    "ApiClient",
    "REQUEST_TIMEOUT",
    "ApiError",
    "NotFoundError",
    "RequestError",
    "ValidationError",
    "UserService",
]
