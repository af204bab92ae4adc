"""User collection operations on the remote API."""
from __future__ import annotations
import logging
from typing import Any

from requests.utils import quote

from crud_app.core.models import User

from .client import ApiClient
from .exceptions import RequestError

logger = logging.getLogger(__name__)

USERS_ENDPOINT = "/users"


def _unwrap(body: Any) -> Any:
    """Return the ``data`` member of ``{data: ...}`` envelopes, else the body itself."""
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


def _user_path(user_id: str) -> str:
    """Path of a single user; the id is quoted as one path segment."""
    return f"{USERS_ENDPOINT}/{quote(str(user_id), safe='')}"


def _to_user(body: Any) -> User:
    try:
        return User.from_dict(_unwrap(body))
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("Malformed user in response: %r", exc)
        raise RequestError(None) from exc


class UserService:
    """Typed access to the remote user collection.

    Every method raises only ValidationError, NotFoundError or RequestError.
    """

    def __init__(self, client: ApiClient):
        """Initialize user service.

        Args:
            client: API client bound to the users API base URL
        """
        self.client = client

    def list_users(self) -> list[User]:
        """Return the full collection in server order."""
        body = self.client.get(USERS_ENDPOINT)
        if not isinstance(body, dict) or not isinstance(body.get("data"), list):
            logger.warning("Malformed user list response: %r", type(body).__name__)
            raise RequestError(None)
        return [_to_user(item) for item in body["data"]]

    def get_user(self, user_id: str) -> User:
        """Return a single user.

        Raises:
            NotFoundError: If the id does not exist remotely
        """
        return _to_user(self.client.get(_user_path(user_id)))

    def create_user(self, payload: dict) -> User:
        """Create a user and return it with its server-assigned id and timestamps.

        Args:
            payload: ``{name, email, age:int, profession}``
        """
        return _to_user(self.client.post(USERS_ENDPOINT, json=payload))

    def update_user(self, user_id: str, payload: dict) -> User:
        """Replace the editable fields of an existing user.

        Raises:
            NotFoundError: If the id does not exist remotely
        """
        return _to_user(self.client.put(_user_path(user_id), json=payload))

    def delete_user(self, user_id: str) -> None:
        """Delete a user.

        Raises:
            NotFoundError: If the id does not exist remotely
        """
        self.client.delete(_user_path(user_id))
