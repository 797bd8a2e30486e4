"""daybook: an in-memory, single-session diary with author accounts."""

__version__ = "0.1.0"
