"""Role-based visibility over registry results.

Admins see everything; anyone else sees only their own entries. Nothing is
cached: the filter is re-evaluated for every call.
"""

from __future__ import annotations

from collections.abc import Sequence

from daybook.authors.models import Author
from daybook.core.exceptions import ValidationError
from daybook.core.views import ReadOnlyList

from .models import DiaryEntry


def visible_to(entries: Sequence[DiaryEntry], requester: Author) -> ReadOnlyList[DiaryEntry]:
    """Return the subset of *entries* that *requester* may see, order preserved."""
    if requester is None:
        raise ValidationError("requester must not be None")
    if requester.is_admin:
        return entries if isinstance(entries, ReadOnlyList) else ReadOnlyList(entries)
    return ReadOnlyList(e for e in entries if e.author == requester)


class AccessFilter:
    """Callable bound to one requester, for use as ``view(registry.get_all())``."""

    def __init__(self, requester: Author):
        if requester is None:
            raise ValidationError("requester must not be None")
        self.requester = requester

    def __call__(self, entries: Sequence[DiaryEntry]) -> ReadOnlyList[DiaryEntry]:
        return visible_to(entries, self.requester)
