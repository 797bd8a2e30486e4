"""Author registry: the authoritative in-memory store of author identities.

Authors are kept in a dict keyed by id. Name lookups and uniqueness checks
are linear scans over normalized keys.
"""

from __future__ import annotations

import threading
import uuid

from loguru import logger

from daybook.core.exceptions import ConflictError, NotFoundError, ValidationError
from daybook.core.views import ReadOnlyList

from .models import Author, Role, normalized_key


class AuthorRegistry:
    """In-memory author store.

    Args:
        unique_names: Also reject duplicate display names in ``add_author``.
            Off by default; ``rename`` always enforces uniqueness.
    """

    def __init__(self, *, unique_names: bool = False) -> None:
        self.unique_names = unique_names
        self._authors: dict[uuid.UUID, Author] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._authors)

    def __contains__(self, author_id: object) -> bool:
        return author_id in self._authors

    # -- CRUD ---------------------------------------------------------------

    def add_author(self, display_name: str, password: str, role: Role = Role.REGULAR) -> Author:
        """Create a new author and store it.

        Raises:
            ValidationError: Blank or too-long name, or password shorter than 4.
            ConflictError: Name already taken and ``unique_names`` is on.
        """
        author = Author(display_name, password, role=role)
        with self._lock:
            if self.unique_names and self._name_taken(author.key):
                raise ConflictError(f"An author with this name already exists: {author.display_name}")
            self._authors[author.id] = author
        logger.debug(f"Added author {author.id} ({author.role.value})")
        return author

    def get_by_id(self, author_id: uuid.UUID) -> Author | None:
        if author_id is None:
            raise ValidationError("author id must not be None")
        return self._authors.get(author_id)

    def get_all(self) -> ReadOnlyList[Author]:
        """All authors, sorted by normalized name then id."""
        with self._lock:
            authors = sorted(self._authors.values(), key=lambda a: (a.key, a.id))
        return ReadOnlyList(authors)

    def find_by_name(self, display_name: str) -> Author | None:
        """Find an author by name, ignoring case, extra whitespace and diacritics.

        If several authors share a name, the earliest registered one is returned.
        """
        target = normalized_key(display_name)
        with self._lock:
            for author in self._authors.values():
                if author.key == target:
                    return author
        return None

    def rename(self, author_id: uuid.UUID, new_display_name: str) -> Author:
        """Change an author's display name, keeping names unique.

        Raises:
            NotFoundError: No author with that id.
            ValidationError: The new name is blank or too long.
            ConflictError: Another author already uses that name.
        """
        if author_id is None:
            raise ValidationError("author id must not be None")
        target = normalized_key(new_display_name)
        with self._lock:
            author = self._authors.get(author_id)
            if author is None:
                raise NotFoundError(f"No registered author with this ID: {author_id}")
            if self._name_taken(target, exclude=author_id):
                raise ConflictError(f"An author with this name already exists: {new_display_name.strip()}")
            author._rename(new_display_name)
        logger.debug(f"Renamed author {author_id}")
        return author

    def remove(self, author_id: uuid.UUID) -> bool:
        """Remove an author. Their entries are left in place."""
        if author_id is None:
            raise ValidationError("author id must not be None")
        with self._lock:
            removed = self._authors.pop(author_id, None) is not None
        if removed:
            logger.debug(f"Removed author {author_id}")
        return removed

    # -- Session helpers ----------------------------------------------------

    def authenticate(self, display_name: str, password: str) -> Author | None:
        """Return the author if the name exists and the password matches."""
        author = self.find_by_name(display_name)
        if author is None or not author.check_password(password):
            return None
        return author

    # -- Bulk ---------------------------------------------------------------

    def clear_except_admin(self) -> int:
        """Remove every non-admin author. Returns the number removed."""
        with self._lock:
            doomed = [a.id for a in self._authors.values() if not a.is_admin]
            for author_id in doomed:
                del self._authors[author_id]
        logger.info(f"Cleared {len(doomed)} non-admin author(s)")
        return len(doomed)

    def clear(self) -> None:
        with self._lock:
            self._authors.clear()

    def get_author_number(self) -> int:
        return len(self._authors)

    # -- Internals ----------------------------------------------------------

    def _name_taken(self, key: str, exclude: uuid.UUID | None = None) -> bool:
        return any(a.key == key for a in self._authors.values() if a.id != exclude)
