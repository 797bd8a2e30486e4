"""Author entity.

Identity is the immutable ``id``. The display name can change through
``AuthorRegistry.rename``; it is stored trimmed with whitespace collapsed,
and compared through ``normalized_key`` (case and diacritics folded).
"""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import StrEnum

from daybook.core.exceptions import ValidationError
from daybook.core.utils.text import collapse_whitespace, fold_key

MAX_NAME_LENGTH = 100
MIN_PASSWORD_LENGTH = 4


class Role(StrEnum):
    REGULAR = "regular"
    ADMIN = "admin"


def _clean_display_name(name: str | None) -> str:
    """Trim and collapse whitespace, then enforce the length bounds."""
    if name is None:
        raise ValidationError("display name must not be None")
    if not isinstance(name, str):
        raise ValidationError(f"display name must be a string, got {type(name).__name__}")
    collapsed = collapse_whitespace(name)
    if not collapsed:
        raise ValidationError("display name must not be blank")
    if len(collapsed) > MAX_NAME_LENGTH:
        raise ValidationError(f"display name must be {MAX_NAME_LENGTH} characters or less")
    return collapsed


def normalized_key(name: str | None) -> str:
    """Comparison key for a display name.

    Raises:
        ValidationError: If the name is None, blank or too long.
    """
    return fold_key(_clean_display_name(name))


def _validate_password(password: str | None) -> str:
    if password is None or not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"password must be at least {MIN_PASSWORD_LENGTH} characters long")
    return password


class Author:
    """A diary author: a user identity that owns entries and logs in with a password."""

    __slots__ = ("_id", "_display_name", "_password", "_role", "_created_at", "_updated_at")

    def __init__(
        self,
        display_name: str,
        password: str,
        *,
        role: Role = Role.REGULAR,
        author_id: uuid.UUID | None = None,
    ):
        cleaned = _clean_display_name(display_name)
        secret = _validate_password(password)
        try:
            role = Role(role)
        except ValueError:
            raise ValidationError(f"Unknown role: {role!r}") from None

        now = datetime.now()
        self._id = author_id or uuid.uuid4()
        self._display_name = cleaned
        self._password = secret
        self._role = role
        self._created_at = now
        self._updated_at = now

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def role(self) -> Role:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role is Role.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def key(self) -> str:
        """Normalized key of the current display name."""
        return fold_key(self._display_name)

    def check_password(self, candidate: str | None) -> bool:
        """Exact, case-sensitive password comparison."""
        return candidate is not None and self._password == candidate

    def _rename(self, new_display_name: str) -> None:
        # Registry-internal: uniqueness is the registry's job.
        self._display_name = _clean_display_name(new_display_name)
        self._updated_at = datetime.now()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Author):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Author(id='{self._id}', display_name='{self._display_name}', role='{self._role.value}')"

    def __str__(self) -> str:
        return self._display_name
