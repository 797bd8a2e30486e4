"""Startup data: the admin account and a few demo authors and entries."""

from __future__ import annotations

from datetime import datetime, timedelta

from loguru import logger

from daybook.authors import Author, AuthorRegistry, Role
from daybook.entries import DiaryEntry, EntryRegistry

DEMO_PASSWORD = "password"


def ensure_admin(authors: AuthorRegistry, display_name: str = "admin", password: str = "admin123") -> Author:
    """Return the admin account, creating it if no admin exists yet."""
    for author in authors.get_all():
        if author.is_admin:
            return author
    admin = authors.add_author(display_name, password, role=Role.ADMIN)
    logger.info(f"Created admin account '{admin.display_name}'")
    return admin


def seed_demo_data(
    authors: AuthorRegistry,
    entries: EntryRegistry,
    *,
    now: datetime | None = None,
) -> list[DiaryEntry]:
    """Add the demo authors Lars and Lisa with three entries between them."""
    now = now or datetime.now()
    lars = authors.add_author("Lars", DEMO_PASSWORD)
    lisa = authors.add_author("Lisa", DEMO_PASSWORD)

    three_days_ago = now - timedelta(days=3)
    four_days_ago = now - timedelta(days=4)
    seeded = [
        DiaryEntry(lars, "Title 1", "Text 1 Lars", now),
        DiaryEntry(lisa, "Title 2", "Text 2 Lisa", three_days_ago.replace(hour=12, minute=20)),
        DiaryEntry(lars, "Title 3", "Text 3 Lars", four_days_ago.replace(hour=15, minute=22)),
    ]
    for entry in seeded:
        entries.add_entry(entry)
    logger.debug(f"Seeded {len(seeded)} demo entries")
    return seeded
