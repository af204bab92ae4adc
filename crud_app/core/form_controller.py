"""State behind the add/edit user forms: draft, field errors, submission."""
from __future__ import annotations
import logging
from typing import Optional

from crud_app.core.api import NotFoundError, RequestError, UserService, ValidationError
from crud_app.core.feedback import USERS_PATH, Navigator, Notifier
from crud_app.core.models import EDITABLE_FIELDS, Draft, FieldErrors, User
from crud_app.core.validators import (
    attribute_server_errors,
    unattributed_server_errors,
    validate,
)

logger = logging.getLogger(__name__)

FIX_ERRORS_MESSAGE = "Please fix the errors in the form"


class FormController:
    """Owns one draft user and submits it as a create or an update.

    Build it with ``for_create`` or ``for_edit``; ``user_id`` is None in
    create mode.
    """

    def __init__(
        self,
        service: UserService,
        notifier: Notifier,
        navigator: Navigator,
        draft: Optional[Draft] = None,
        user_id: Optional[str] = None,
    ):
        self.service = service
        self.notifier = notifier
        self.navigator = navigator
        self.draft = draft if draft is not None else Draft()
        self.user_id = user_id
        self.field_errors: FieldErrors = {}
        self.submitting = False

    @classmethod
    def for_create(cls, service: UserService, notifier: Notifier, navigator: Navigator) -> "FormController":
        return cls(service, notifier, navigator)

    @classmethod
    def for_edit(cls, user: User, service: UserService, notifier: Notifier, navigator: Navigator) -> "FormController":
        return cls(service, notifier, navigator, draft=Draft.from_user(user), user_id=user.id)

    @property
    def is_edit(self) -> bool:
        return self.user_id is not None

    def set_field(self, name: str, value) -> None:
        """Update one draft field and drop its error, if any.

        Raises:
            KeyError: If ``name`` is not an editable field
        """
        if name not in EDITABLE_FIELDS:
            raise KeyError(name)
        setattr(self.draft, name, value)
        self.field_errors.pop(name, None)

    def update(self, values: dict) -> None:
        """Apply several known fields at once; unknown keys are ignored."""
        for name in EDITABLE_FIELDS:
            if name in values:
                self.set_field(name, values[name])

    def submit(self) -> Optional[User]:
        """Validate and send the draft.

        Returns:
            The saved User on success, None otherwise
        """
        errors = validate(self.draft)
        if errors:
            self.field_errors = errors
            self.notifier.notify_error(FIX_ERRORS_MESSAGE)
            return None

        self.submitting = True
        try:
            payload = self.draft.to_payload()
            if self.is_edit:
                user = self.service.update_user(self.user_id, payload)
            else:
                user = self.service.create_user(payload)
        except ValidationError as exc:
            logger.error("Server rejected user %s: %s", self._action, exc.errors or exc.message)
            self._apply_server_errors(exc)
            return None
        except NotFoundError as exc:
            logger.error("User %s not found while %s", self.user_id, self._action)
            self.notifier.notify_error(exc.message or "User not found")
            return None
        except RequestError as exc:
            logger.error("Error %s user: %s", self._action, exc)
            self.notifier.notify_error(exc.message or f"Failed to {self._verb} user")
            return None
        finally:
            self.submitting = False

        self.draft = Draft()
        self.field_errors = {}
        self.notifier.notify_success(f"User {self._verb}d successfully!")
        self.navigator.go_to(USERS_PATH)
        return user

    def cancel(self) -> None:
        self.draft = Draft()
        self.field_errors = {}
        self.navigator.go_to(USERS_PATH)

    def _apply_server_errors(self, exc: ValidationError) -> None:
        attributed = attribute_server_errors(exc.errors)
        leftover = unattributed_server_errors(exc.errors)
        self.field_errors.update(attributed)
        for message in leftover:
            self.notifier.notify_error(message)
        if not attributed and not leftover:
            self.notifier.notify_error(exc.message or f"Failed to {self._verb} user")

    @property
    def _verb(self) -> str:
        return "update" if self.is_edit else "create"

    @property
    def _action(self) -> str:
        return "updating" if self.is_edit else "creating"
