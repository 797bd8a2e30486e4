"""Entry registry: the authoritative in-memory store of diary entries.

Entries live in an unordered list. Every query returns a fresh
``ReadOnlyList`` sorted in canonical order: ascending timestamp, ties broken
by ascending author id.
"""

from __future__ import annotations

import threading
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime

from loguru import logger

from daybook.core.exceptions import ConflictError, ValidationError
from daybook.core.views import ReadOnlyList

from .models import DiaryEntry

NO_STATISTICS_MESSAGE = "No statistics available - Author has no entries."


def canonical_order(entry: DiaryEntry) -> tuple[datetime, uuid.UUID]:
    """Sort key shared by every listing."""
    return entry.timestamp, entry.author.id


def _minute(ts: datetime) -> datetime:
    return ts.replace(second=0, microsecond=0)


@dataclass(frozen=True)
class EntryStatistics:
    """Word-count summary of one author's entries.

    Attributes:
        total_entries: Number of entries.
        total_words: Sum of word counts.
        average_words: ``total_words // total_entries``.
        longest: Entry with the most words (earliest wins ties).
        shortest: Entry with the fewest words (earliest wins ties).
    """

    total_entries: int
    total_words: int
    average_words: int
    longest: DiaryEntry
    shortest: DiaryEntry

    def format(self) -> str:
        lines = [
            "--- Diary Statistics ---",
            f"Total entries: {self.total_entries}",
            f"Total word count: {self.total_words}",
            f"Average word count: {self.average_words}",
            f"Longest entry: {self.longest.title} ({self.longest.word_count} words)",
            f"Shortest entry: {self.shortest.title} ({self.shortest.word_count} words)",
        ]
        return "\n".join(lines) + "\n"


class EntryRegistry:
    """In-memory diary entry store.

    Args:
        reject_duplicates: Refuse a second entry by the same author in the
            same minute. Off by default, so duplicates are accepted.
    """

    def __init__(self, *, reject_duplicates: bool = False) -> None:
        self.reject_duplicates = reject_duplicates
        self._entries: list[DiaryEntry] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._entries)

    # -- Mutation -----------------------------------------------------------

    def add_entry(self, entry: DiaryEntry) -> None:
        """Register an entry.

        Raises:
            ValidationError: The entry (or its author) is missing.
            ConflictError: ``reject_duplicates`` is on and the author already
                has an entry in the same minute.
        """
        if entry is None:
            raise ValidationError("entry must not be None")
        if not isinstance(entry, DiaryEntry):
            raise ValidationError(f"entry must be a DiaryEntry, got {type(entry).__name__}")
        if entry.author is None:
            raise ValidationError("author of entry must not be None")

        with self._lock:
            if self.reject_duplicates:
                slot = _minute(entry.timestamp)
                for existing in self._entries:
                    if existing.author == entry.author and _minute(existing.timestamp) == slot:
                        raise ConflictError(
                            f"{entry.author.display_name} already has an entry at "
                            f"{slot.strftime('%Y-%m-%d %H:%M')}"
                        )
            self._entries.append(entry)
        logger.debug(f"Added entry {entry.id} by author {entry.author.id}")

    def remove_entry(self, entry_id: uuid.UUID) -> bool:
        """Remove the entry with this id. Returns True if one was removed."""
        if entry_id is None:
            raise ValidationError("entry id must not be None")
        with self._lock:
            before = len(self._entries)
            self._entries = [e for e in self._entries if e.id != entry_id]
            removed = len(self._entries) < before
        if removed:
            logger.debug(f"Removed entry {entry_id}")
        return removed

    def clear_diary_entry_register(self) -> None:
        """Remove all entries."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info(f"Cleared {count} diary entr{'y' if count == 1 else 'ies'}")

    # -- Query --------------------------------------------------------------

    def get_all(self) -> ReadOnlyList[DiaryEntry]:
        return self._select(lambda e: True)

    def get_by_id(self, entry_id: uuid.UUID) -> DiaryEntry | None:
        if entry_id is None:
            raise ValidationError("entry id must not be None")
        with self._lock:
            for entry in self._entries:
                if entry.id == entry_id:
                    return entry
        return None

    def get_number_of_entries(self) -> int:
        return len(self._entries)

    def find_by_date(self, day: date) -> ReadOnlyList[DiaryEntry]:
        """Entries whose timestamp falls on the given calendar date."""
        if day is None:
            raise ValidationError("date must not be None")
        if isinstance(day, datetime):
            day = day.date()
        if not isinstance(day, date):
            raise ValidationError("date must be a date")
        return self._select(lambda e: e.timestamp.date() == day)

    def find_between(self, from_inclusive: datetime, to_exclusive: datetime) -> ReadOnlyList[DiaryEntry]:
        """Entries in the half-open interval ``[from_inclusive, to_exclusive)``.

        Timestamps are compared exactly, with no truncation.

        Raises:
            ValidationError: A bound is missing or not a ``datetime``, or
                ``from_inclusive`` is not strictly before ``to_exclusive``.
        """
        if from_inclusive is None or to_exclusive is None:
            raise ValidationError("interval bounds must not be None")
        if not isinstance(from_inclusive, datetime) or not isinstance(to_exclusive, datetime):
            raise ValidationError("interval bounds must be datetimes")
        if not from_inclusive < to_exclusive:
            raise ValidationError("start of interval must be before its end")
        return self._select(lambda e: from_inclusive <= e.timestamp < to_exclusive)

    def find_by_author(self, author_id: uuid.UUID) -> ReadOnlyList[DiaryEntry]:
        if author_id is None:
            raise ValidationError("author id must not be None")
        return self._select(lambda e: e.author.id == author_id)

    def search_by_keyword(self, keyword: str) -> ReadOnlyList[DiaryEntry]:
        """Case-insensitive substring search over titles and texts.

        A blank keyword matches nothing and returns an empty list.
        """
        if keyword is None:
            raise ValidationError("keyword must not be None")
        if not isinstance(keyword, str):
            raise ValidationError("keyword must be a string")
        needle = keyword.strip().lower()
        if not needle:
            return ReadOnlyList()
        return self._select(lambda e: needle in e.title.lower() or needle in e.text.lower())

    # -- Aggregates ---------------------------------------------------------

    def count_by_author(self, author_id: uuid.UUID) -> int:
        if author_id is None:
            raise ValidationError("author id must not be None")
        with self._lock:
            return sum(1 for e in self._entries if e.author.id == author_id)

    def compute_statistics(self, author_id: uuid.UUID) -> EntryStatistics | None:
        """Word-count statistics for an author, or None if they have no entries."""
        entries = self.find_by_author(author_id)
        if not entries:
            return None
        total_words = sum(e.word_count for e in entries)
        return EntryStatistics(
            total_entries=len(entries),
            total_words=total_words,
            average_words=total_words // len(entries),
            longest=max(entries, key=lambda e: e.word_count),
            shortest=min(entries, key=lambda e: e.word_count),
        )

    def get_statistics(self, author_id: uuid.UUID) -> str:
        """Human-readable statistics summary for an author."""
        stats = self.compute_statistics(author_id)
        if stats is None:
            return NO_STATISTICS_MESSAGE
        return stats.format()

    # -- Internals ----------------------------------------------------------

    def _select(self, predicate: Callable[[DiaryEntry], bool]) -> ReadOnlyList[DiaryEntry]:
        with self._lock:
            matches = [e for e in self._entries if predicate(e)]
        return ReadOnlyList(sorted(matches, key=canonical_order))
