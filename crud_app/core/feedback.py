"""Collaborators the controllers report through.

Controllers never talk to a UI directly. Each host (Flask views, CLI,
tests) passes in a notifier, a navigator and, for deletes, a confirmation
gate.
"""
from __future__ import annotations
from typing import Protocol

USERS_PATH = "/users"


class Notifier(Protocol):
    """Transient user feedback. Fire-and-forget."""

    def notify_success(self, message: str) -> None: ...

    def notify_error(self, message: str) -> None: ...


class Navigator(Protocol):
    """Screen transitions requested by a controller."""

    def go_to(self, path: str) -> None: ...


class Confirmation(Protocol):
    """Yes/no gate asked before a destructive call."""

    def confirm(self, message: str) -> bool: ...


class AlwaysConfirm:
    """Gate for non-interactive callers that already confirmed (e.g. ``--yes``)."""

    def confirm(self, message: str) -> bool:
        return True


class NeverConfirm:
    def confirm(self, message: str) -> bool:
        return False
