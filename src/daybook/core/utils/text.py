"""Text helpers: whitespace collapsing, comparison keys, word counting."""

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Trim and collapse every whitespace run to a single space."""
    if not text or not isinstance(text, str):
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def fold_key(text: str) -> str:
    """Case- and diacritic-insensitive comparison form of *text*.

    Casefolds, decomposes to NFD and drops combining marks, so ``"Åse"``
    and ``"ASE"`` fold to the same key.
    """
    decomposed = unicodedata.normalize("NFD", text.casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens in *text* (0 when blank)."""
    if not text or not isinstance(text, str):
        return 0
    return len(text.split())


def truncate_text(text: str, max_length: int = 100, ellipsis: str = "...") -> str:
    """Truncate text to max_length, appending ellipsis if truncated."""
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ellipsis)] + ellipsis
