"""Diary entry model.

The id, author and timestamp are fixed once an entry is created; title and
text can be edited through their property setters, which validate first.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from daybook.authors.models import Author
from daybook.core.exceptions import ValidationError
from daybook.core.utils.text import count_words, truncate_text

TITLE_MAX_LENGTH = 200
TEXT_MAX_LENGTH = 10_000

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def _validate_field(value: str | None, field: str, max_length: int) -> str:
    """Return *value* trimmed, or raise if it is missing, blank or too long."""
    if value is None:
        raise ValidationError(f"{field} cannot be None")
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string, got {type(value).__name__}")
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{field} cannot be blank")
    if len(trimmed) > max_length:
        raise ValidationError(f"{field} must be {max_length} characters or less")
    return trimmed


class DiaryEntry:
    """A single diary record: author, timestamp, title and text.

    Example::

        entry = DiaryEntry(lars, "Monday", "Went for a walk.", datetime(2025, 11, 8, 9, 0))
        entry.title = "Monday morning"
    """

    __slots__ = ("_id", "_author", "_timestamp", "_title", "_text")

    def __init__(
        self,
        author: Author,
        title: str,
        text: str,
        timestamp: datetime,
        *,
        entry_id: uuid.UUID | None = None,
    ):
        if author is None:
            raise ValidationError("author cannot be None")
        if not isinstance(author, Author):
            raise ValidationError(f"author must be an Author, got {type(author).__name__}")
        if not isinstance(timestamp, datetime):
            raise ValidationError("timestamp must be a datetime")
        clean_title = _validate_field(title, "title", TITLE_MAX_LENGTH)
        clean_text = _validate_field(text, "text", TEXT_MAX_LENGTH)

        self._id = entry_id or uuid.uuid4()
        self._author = author
        self._timestamp = timestamp
        self._title = clean_title
        self._text = clean_text

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def author(self) -> Author:
        return self._author

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = _validate_field(value, "title", TITLE_MAX_LENGTH)

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = _validate_field(value, "text", TEXT_MAX_LENGTH)

    @property
    def word_count(self) -> int:
        return count_words(self._text)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DiaryEntry):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"DiaryEntry(id='{self._id}', author='{self._author.display_name}', "
            f"timestamp='{self._timestamp.strftime(TIMESTAMP_FORMAT)}', title='{truncate_text(self._title, 40)}')"
        )

    def __str__(self) -> str:
        stamp = self._timestamp.strftime(TIMESTAMP_FORMAT)
        return f"[{stamp}] {self._author.display_name}\n{self._title}\n{self._text}"
