"""Exception taxonomy.

Lookup misses are not errors and never show up here. Business-level
failures derive from :class:`BookstackError`; broken container invariants
derive from :class:`AssertionError` because they indicate a programming
error rather than a condition a caller should recover from.
"""


class BookstackError(Exception):
    """Base class for recoverable bookstack failures."""


class CatalogLoadError(BookstackError):
    """The catalog source could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not load catalog from {path!r}: {reason}")
        self.path = path
        self.reason = reason


class ConfigError(BookstackError):
    """An environment setting has an unusable value."""


class ContainerUnderflowError(AssertionError):
    """A pop or peek was attempted on an empty cart or queue."""
