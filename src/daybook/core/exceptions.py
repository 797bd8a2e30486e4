"""
Daybook exception hierarchy.

All daybook exceptions inherit from DaybookError, making it easy for callers
to catch library-level errors while still distinguishing specific failure modes.
Where a builtin exception has the same meaning it is mixed in, so plain
``except ValueError`` handlers keep working.
"""


class DaybookError(Exception):
    """Base exception class for all daybook errors."""


class ConfigurationError(DaybookError):
    """Raised for configuration errors (missing keys, invalid values)."""


class ValidationError(DaybookError, ValueError):
    """Raised when a caller supplies a missing, blank or out-of-range value."""


class NotFoundError(DaybookError, LookupError):
    """Raised when an operation references an identifier that does not exist."""


class ConflictError(DaybookError):
    """Raised when a uniqueness constraint would be violated."""


class ReadOnlyViolation(DaybookError, TypeError):
    """Raised when a caller tries to mutate a read-only view returned by a registry."""
