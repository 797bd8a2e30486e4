"""Shared test fixtures for daybook."""

import os
import tempfile
from datetime import datetime

import pytest

from daybook.authors import AuthorRegistry, Role
from daybook.entries import EntryRegistry


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "logging": {"level": "DEBUG"},
        "entries": {"reject_duplicates": True},
        "admin": {"display_name": "root", "password": "s3cret!"},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def authors():
    return AuthorRegistry()


@pytest.fixture
def entries():
    return EntryRegistry()


@pytest.fixture
def lars(authors):
    return authors.add_author("Lars", "password123")


@pytest.fixture
def lisa(authors):
    return authors.add_author("Lisa", "password123")


@pytest.fixture
def admin(authors):
    return authors.add_author("admin", "admin123", role=Role.ADMIN)


@pytest.fixture
def morning():
    return datetime(2025, 11, 8, 9, 0, 30)
