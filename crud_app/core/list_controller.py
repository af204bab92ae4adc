"""State behind the users list screen: load, refresh, search, delete."""
from __future__ import annotations
import logging
from typing import Optional

from crud_app.core.api import ApiError, UserService
from crud_app.core.feedback import Confirmation, Notifier
from crud_app.core.models import User

logger = logging.getLogger(__name__)

DELETE_CONFIRM_MESSAGE = "Are you sure you want to delete this user?"


class ListController:
    """Owns the in-memory user collection of one list screen.

    Loads are tagged with an increasing sequence number when issued; a
    result is applied only if no later-issued load has been applied first.
    """

    def __init__(
        self,
        service: UserService,
        notifier: Notifier,
        confirmation: Confirmation,
    ):
        self.service = service
        self.notifier = notifier
        self.confirmation = confirmation
        self.users: list[User] = []
        self.loading = False
        self.refreshing = False
        self.search_term = ""
        self._issued = 0
        self._applied = 0

    def fetch(self) -> bool:
        """Load the collection. Returns True when the remote call succeeded."""
        self.loading = True
        try:
            return self._load()
        finally:
            self.loading = False

    def refresh(self) -> bool:
        """Reload on demand; reports success only if the reload itself succeeded."""
        self.refreshing = True
        try:
            ok = self._load()
        finally:
            self.refreshing = False
        if ok:
            self.notifier.notify_success("Users refreshed!")
        return ok

    def _load(self) -> bool:
        self._issued += 1
        seq = self._issued
        try:
            users = self.service.list_users()
        except ApiError as exc:
            logger.error("Error fetching users: %s", exc)
            self.notifier.notify_error("Failed to fetch users")
            return False
        if seq > self._applied:
            self._applied = seq
            self.users = users
        else:
            logger.debug("Discarding stale user list (load %d, already applied %d)", seq, self._applied)
        return True

    def remove(self, user_id: str) -> bool:
        """Delete a user after confirmation.

        Returns:
            True if the user was deleted remotely and dropped from ``users``
        """
        if not self.confirmation.confirm(DELETE_CONFIRM_MESSAGE):
            return False
        try:
            self.service.delete_user(user_id)
        except ApiError as exc:
            logger.error("Error deleting user %s: %s", user_id, exc)
            self.notifier.notify_error("Failed to delete user")
            return False
        self.users = [user for user in self.users if user.id != user_id]
        self.notifier.notify_success("User deleted successfully!")
        return True

    def set_search_term(self, term: Optional[str]) -> None:
        self.search_term = term or ""

    def filtered(self) -> list[User]:
        """Users whose name, email or profession contains the search term (case-insensitive)."""
        term = self.search_term.lower()
        if not term:
            return list(self.users)
        return [
            user for user in self.users
            if term in user.name.lower()
            or term in user.email.lower()
            or term in user.profession.lower()
        ]

