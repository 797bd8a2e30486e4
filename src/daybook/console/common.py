"""Shared setup logic for CLI commands."""

from __future__ import annotations

from daybook.authors import AuthorRegistry
from daybook.core.config import Config
from daybook.core.utils.logging import setup_logging
from daybook.entries import EntryRegistry


def load_config(config_file: str | None = None) -> Config:
    """Load config from defaults, an optional file and DAYBOOK_* env vars."""
    return Config(config_file=config_file)


def configure_logging(config: Config, level: str | None = None) -> None:
    setup_logging(level=level or config.get("logging.level", "WARNING"), log_file=config.get("logging.file"))


def create_registries(config: Config) -> tuple[EntryRegistry, AuthorRegistry]:
    """Build empty registries with the policies the config asks for."""
    entries = EntryRegistry(reject_duplicates=config.get_bool("entries.reject_duplicates"))
    authors = AuthorRegistry(unique_names=config.get_bool("authors.unique_names"))
    return entries, authors
