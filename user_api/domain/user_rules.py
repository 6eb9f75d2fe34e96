from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

from email_validator import EmailNotValidError, validate_email


NAME_MIN_LEN = 2
NAME_MAX_LEN = 100
AGE_MIN = 1
AGE_MAX = 120


class ValidationError(ValueError):
    """A user payload broke one of the field rules."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class NotFoundError(LookupError):
    """No stored user has the requested id."""

    def __init__(self, user_id: int):
        super().__init__("user not found")
        self.user_id = user_id


@dataclass(frozen=True)
class User:
    """
    One stored user.

    `id`, `created_at` and `updated_at` are owned by the repository; values
    passed in by callers are ignored on create/update.
    """
    name: str
    email: str
    age: int
    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["created_at"] = self.created_at.isoformat() if self.created_at else None
        out["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return {k: out[k] for k in ("id", "name", "email", "age", "created_at", "updated_at")}


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_user(name: str, email: str, age: int) -> None:
    """Check the field rules in order; the first broken rule is raised."""
    if not name:
        raise ValidationError("name", "name is required")
    if len(name) < NAME_MIN_LEN:
        raise ValidationError("name", f"name must be at least {NAME_MIN_LEN} characters long")
    if len(name) > NAME_MAX_LEN:
        raise ValidationError("name", f"name must be at most {NAME_MAX_LEN} characters long")
    if not email:
        raise ValidationError("email", "email is required")
    if not is_valid_email(email):
        raise ValidationError("email", "email must be a valid email address")
    if age < AGE_MIN:
        raise ValidationError("age", "age must be greater than 0")
    if age > AGE_MAX:
        raise ValidationError("age", f"age must be less than or equal to {AGE_MAX}")


def build_user(payload: dict[str, Any]) -> User:
    """Validate a create/update payload and turn it into an unsaved User."""
    name = payload.get("name") or ""
    email = payload.get("email") or ""
    age = int(payload.get("age") or 0)
    validate_user(name, email, age)
    return User(name=name, email=email, age=age)
