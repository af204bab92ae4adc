"""Input validation helpers for user drafts."""
from __future__ import annotations
import re
from typing import Any, Iterable, Optional

from crud_app.core.models import Draft, FieldErrors

NAME_MIN_LENGTH = 2
AGE_MIN = 1
AGE_MAX = 150

# Same language as ^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$ without nested quantifiers
EMAIL_PATTERN = re.compile(r"\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*(?:\.\w{2,3})+", re.ASCII)
AGE_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

# Order matters: a message mentioning several fields goes to the first one listed
SERVER_FIELD_KEYWORDS = (
    ("Email", "email"),
    ("Name", "name"),
    ("Age", "age"),
    ("Profession", "profession"),
)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def validate_name(name: Any) -> Optional[str]:
    """Return the error message for a name, or None when valid."""
    trimmed = _text(name).strip()
    if not trimmed:
        return "Name is required"
    if len(trimmed) < NAME_MIN_LENGTH:
        return f"Name must be at least {NAME_MIN_LENGTH} characters"
    return None


def validate_email(email: Any) -> Optional[str]:
    """Return the error message for an email address, or None when valid.

    The pattern is deliberately permissive (word characters separated by
    single dots or dashes, 2-3 letter suffix); it is not RFC 5322.
    """
    raw = _text(email)
    if not raw.strip():
        return "Email is required"
    if not EMAIL_PATTERN.fullmatch(raw):
        return "Please enter a valid email address"
    return None


def parse_age(age: Any) -> Optional[int]:
    """Coerce a raw age value to an integer, or None if it is not one."""
    if isinstance(age, bool):
        return None
    if isinstance(age, int):
        return age
    text = _text(age).strip()
    if not AGE_PATTERN.fullmatch(text):
        return None
    return int(text)


def validate_age(age: Any) -> Optional[str]:
    """Return the error message for an age, or None when valid.

    Presence is checked on the raw value, so ``"0"`` is present and fails
    the range check instead of the required check.
    """
    if age is None or not _text(age).strip():
        return "Age is required"
    value = parse_age(age)
    if value is None or not AGE_MIN <= value <= AGE_MAX:
        return f"Age must be between {AGE_MIN} and {AGE_MAX}"
    return None


def validate_profession(profession: Any) -> Optional[str]:
    if not _text(profession).strip():
        return "Profession is required"
    return None


def validate(draft: Draft) -> FieldErrors:
    """Validate every field of a draft.

    Args:
        draft: Draft to check

    Returns:
        Mapping of failing field name to message; empty when the draft is valid
    """
    checks = {
        "name": validate_name(draft.name),
        "email": validate_email(draft.email),
        "age": validate_age(draft.age),
        "profession": validate_profession(draft.profession),
    }
    return {field: message for field, message in checks.items() if message}


def _field_for_message(message: str) -> Optional[str]:
    for keyword, field in SERVER_FIELD_KEYWORDS:
        if keyword in message:
            return field
    return None


def _split_server_errors(errors: Iterable[Any]) -> tuple[FieldErrors, list[str]]:
    attributed: FieldErrors = {}
    leftover: list[str] = []
    for entry in errors or []:
        if isinstance(entry, dict):
            field = entry.get("field")
            message = _text(entry.get("message"))
            if field not in {f for _, f in SERVER_FIELD_KEYWORDS}:
                field = _field_for_message(message)
        else:
            message = _text(entry)
            field = _field_for_message(message)
        if not message:
            continue
        if field is None:
            leftover.append(message)
        else:
            attributed[field] = message
    return attributed, leftover


def attribute_server_errors(errors: Iterable[Any]) -> FieldErrors:
    """Attribute server validation messages to form fields.

    Free-text messages go to the first field whose capitalized name they
    contain ("Email", "Name", "Age", "Profession", in that order).
    Structured ``{"field": ..., "message": ...}`` entries are mapped directly.
    A later message for the same field replaces an earlier one.
    """
    attributed, _ = _split_server_errors(errors)
    return attributed


def unattributed_server_errors(errors: Iterable[Any]) -> list[str]:
    """Return the server messages that mention no known field."""
    _, leftover = _split_server_errors(errors)
    return leftover
