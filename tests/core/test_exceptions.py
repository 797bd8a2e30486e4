"""Tests for daybook.core.exceptions."""

import pytest

from daybook.core.exceptions import (
    ConfigurationError,
    ConflictError,
    DaybookError,
    NotFoundError,
    ReadOnlyViolation,
    ValidationError,
)


def test_hierarchy():
    """All exceptions should inherit from DaybookError."""
    for exc_cls in [ConfigurationError, ConflictError, NotFoundError, ReadOnlyViolation, ValidationError]:
        assert issubclass(exc_cls, DaybookError)


def test_builtin_bases():
    assert issubclass(ValidationError, ValueError)
    assert issubclass(NotFoundError, LookupError)
    assert issubclass(ReadOnlyViolation, TypeError)


def test_read_only_is_not_a_validation_error():
    assert not issubclass(ReadOnlyViolation, ValidationError)
    assert not issubclass(ValidationError, ReadOnlyViolation)


def test_catch_base():
    """Catching DaybookError should catch all subtypes."""
    with pytest.raises(DaybookError, match="taken"):
        raise ConflictError("name taken")
