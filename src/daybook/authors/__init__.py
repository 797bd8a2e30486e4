"""Author identities and the registry that keeps their names unique."""

from .models import MAX_NAME_LENGTH, MIN_PASSWORD_LENGTH, Author, Role, normalized_key
from .registry import AuthorRegistry

__all__ = [
    "MAX_NAME_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "Author",
    "AuthorRegistry",
    "Role",
    "normalized_key",
]
