"""Flask implementations of the controller collaborators."""
from __future__ import annotations
from typing import Mapping, Optional

from flask import flash

CONFIRM_VALUES = {"yes", "true", "1", "on"}


class FlashNotifier:
    """Queue notifications as flash messages (categories ``success`` / ``error``)."""

    def notify_success(self, message: str) -> None:
        flash(message, "success")

    def notify_error(self, message: str) -> None:
        flash(message, "error")


class RedirectNavigator:
    """Remember the last requested path so the view can redirect to it."""

    def __init__(self):
        self.target: Optional[str] = None

    def go_to(self, path: str) -> None:
        self.target = path


class FormConfirmation:
    """Treat a posted ``confirm`` field as the user's answer."""

    def __init__(self, form: Mapping[str, str]):
        self.form = form

    def confirm(self, message: str) -> bool:
        return (self.form.get("confirm") or "").strip().lower() in CONFIRM_VALUES
