"""Diary entries: the entry model, the entry registry and role-based views."""

from .access import AccessFilter, visible_to
from .models import TEXT_MAX_LENGTH, TIMESTAMP_FORMAT, TITLE_MAX_LENGTH, DiaryEntry
from .registry import NO_STATISTICS_MESSAGE, EntryRegistry, EntryStatistics, canonical_order

__all__ = [
    "NO_STATISTICS_MESSAGE",
    "TEXT_MAX_LENGTH",
    "TIMESTAMP_FORMAT",
    "TITLE_MAX_LENGTH",
    "AccessFilter",
    "DiaryEntry",
    "EntryRegistry",
    "EntryStatistics",
    "canonical_order",
    "visible_to",
]
