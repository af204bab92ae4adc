"""User records and in-progress form drafts."""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Union

FieldErrors = dict[str, str]

EDITABLE_FIELDS = ("name", "email", "age", "profession")


def _parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as emitted by the API (``Z`` suffix allowed)."""
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


@dataclass(frozen=True)
class User:
    """A person record as returned by the remote store."""
    id: str
    name: str
    email: str
    age: int
    profession: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, payload: dict) -> "User":
        """Build a User from an API representation.

        The store exposes its identifier as ``_id``; ``id`` is accepted too.

        Raises:
            KeyError: If a required field is missing
            TypeError, ValueError: If a field has the wrong shape
        """
        if not isinstance(payload, dict):
            raise TypeError(f"User payload must be an object, got {type(payload).__name__}")
        user_id = payload.get("_id", payload.get("id"))
        if user_id in (None, ""):
            raise KeyError("_id")
        age = payload["age"]
        if isinstance(age, bool):
            raise TypeError("age must be an integer")
        return cls(
            id=str(user_id),
            name=str(payload["name"]),
            email=str(payload["email"]),
            age=int(age),
            profession=str(payload["profession"]),
            created_at=_parse_timestamp(payload.get("createdAt")),
            updated_at=_parse_timestamp(payload.get("updatedAt")),
        )


@dataclass
class Draft:
    """Editable fields of a User while a form is open. May be invalid."""
    name: str = ""
    email: str = ""
    age: Union[str, int, None] = ""
    profession: str = ""

    @classmethod
    def from_user(cls, user: User) -> "Draft":
        return cls(name=user.name, email=user.email, age=str(user.age), profession=user.profession)

    def to_payload(self) -> dict:
        """Return the request body with ``age`` coerced to an integer."""
        return {
            "name": self.name,
            "email": self.email,
            "age": int(str(self.age).strip()),
            "profession": self.profession,
        }

    def as_form(self) -> dict[str, str]:
        return {
            "name": self.name,
            "email": self.email,
            "age": "" if self.age is None else str(self.age),
            "profession": self.profession,
        }

