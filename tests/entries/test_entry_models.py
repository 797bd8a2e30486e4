"""Tests for daybook.entries.models."""

import uuid
from datetime import date, datetime

import pytest

from daybook.core.exceptions import ValidationError
from daybook.entries.models import TEXT_MAX_LENGTH, TITLE_MAX_LENGTH, DiaryEntry


class TestDiaryEntry:
    def test_create_basic(self, lars, morning):
        entry = DiaryEntry(lars, "  Monday ", " Went for a walk. ", morning)
        assert entry.author is lars
        assert entry.title == "Monday"
        assert entry.text == "Went for a walk."
        assert entry.timestamp == morning
        assert isinstance(entry.id, uuid.UUID)

    def test_timestamp_keeps_seconds(self, lars):
        ts = datetime(2025, 11, 8, 9, 30, 5, 1234)
        assert DiaryEntry(lars, "t", "x", ts).timestamp == ts

    def test_missing_author(self, morning):
        with pytest.raises(ValidationError, match="author"):
            DiaryEntry(None, "Title", "Text", morning)

    def test_timestamp_must_be_datetime(self, lars):
        with pytest.raises(ValidationError, match="timestamp"):
            DiaryEntry(lars, "Title", "Text", date(2025, 11, 8))
        with pytest.raises(ValidationError, match="timestamp"):
            DiaryEntry(lars, "Title", "Text", None)

    @pytest.mark.parametrize("field", ["title", "text"])
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_fields_raise(self, lars, morning, field, value):
        kwargs = {"title": "Title", "text": "Text"}
        kwargs[field] = value
        with pytest.raises(ValidationError, match=field):
            DiaryEntry(lars, kwargs["title"], kwargs["text"], morning)

    def test_length_limits(self, lars, morning):
        DiaryEntry(lars, "t" * TITLE_MAX_LENGTH, "x" * TEXT_MAX_LENGTH, morning)
        with pytest.raises(ValidationError, match="title"):
            DiaryEntry(lars, "t" * (TITLE_MAX_LENGTH + 1), "x", morning)
        with pytest.raises(ValidationError, match="text"):
            DiaryEntry(lars, "t", "x" * (TEXT_MAX_LENGTH + 1), morning)

    def test_length_checked_after_trim(self, lars, morning):
        entry = DiaryEntry(lars, "  " + "t" * TITLE_MAX_LENGTH + "  ", "x", morning)
        assert len(entry.title) == TITLE_MAX_LENGTH

    def test_setters_validate(self, lars, morning):
        entry = DiaryEntry(lars, "Title", "Text", morning)
        entry.title = "  New title "
        entry.text = "New text"
        assert entry.title == "New title"
        assert entry.text == "New text"
        with pytest.raises(ValidationError):
            entry.title = "   "
        with pytest.raises(ValidationError):
            entry.text = None
        assert entry.title == "New title"
        assert entry.text == "New text"

    def test_identity_fields_are_read_only(self, lars, lisa, morning):
        entry = DiaryEntry(lars, "Title", "Text", morning)
        with pytest.raises(AttributeError):
            entry.author = lisa
        with pytest.raises(AttributeError):
            entry.timestamp = datetime.now()

    def test_word_count(self, lars, morning):
        assert DiaryEntry(lars, "t", "one  two\nthree\tfour", morning).word_count == 4
        assert DiaryEntry(lars, "t", "single", morning).word_count == 1

    def test_equality_by_id(self, lars, morning):
        entry_id = uuid.uuid4()
        a = DiaryEntry(lars, "A", "a", morning, entry_id=entry_id)
        b = DiaryEntry(lars, "B", "b", morning, entry_id=entry_id)
        assert a == b
        assert a != DiaryEntry(lars, "A", "a", morning)

    def test_str(self, lars, morning):
        rendered = str(DiaryEntry(lars, "Monday", "Walk", morning))
        assert rendered == "[2025-11-08 09:00] Lars\nMonday\nWalk"
