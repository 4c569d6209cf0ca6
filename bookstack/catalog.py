"""In-memory, read-only book catalog keyed by ISBN.

Lookups are a sequential scan from the first record. Duplicate ISBNs are
not rejected on load; ``find`` returns the one read first. Swapping the
scan for a dict would silently change that tie-break.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import ClassVar, TextIO

from .book import Book, parse_books
from .config import Settings
from .errors import CatalogLoadError
from .result import Err, Ok, Result, unwrap

logger = logging.getLogger(__name__)


class Catalog:
    """An ordered, immutable collection of books.

    The books returned by :meth:`find` are the catalog's own objects; they
    stay valid for as long as the catalog does.
    """

    _instance: ClassVar[Catalog | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    __slots__ = ("_books",)

    def __init__(self, books: Iterable[Book] = ()):
        self._books: tuple[Book, ...] = tuple(books)

    @classmethod
    def from_stream(cls, stream: TextIO) -> Catalog:
        """Read every record from an open text stream."""
        return cls(parse_books(stream.read()))

    @classmethod
    def instance(cls) -> Catalog:
        """Return the process-wide catalog, loading it on first use.

        The path comes from :class:`~bookstack.config.Settings`. Raises
        :class:`~bookstack.errors.CatalogLoadError` or
        :class:`~bookstack.errors.ConfigError` if loading fails; a failed
        load is retried on the next call.
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    settings = unwrap(Settings.from_env())
                    cls._instance = unwrap(load_catalog(settings.catalog_path))
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the process-wide catalog. Intended for tests."""
        with cls._instance_lock:
            cls._instance = None

    def find(self, isbn: str) -> Book | None:
        index = 0
        while index < len(self._books):
            book = self._books[index]
            if book.isbn == isbn:
                return book
            index += 1
        return None

    def size(self) -> int:
        return len(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self):
        return iter(self._books)

    def __repr__(self) -> str:
        return f"Catalog(size={len(self._books)})"

    def __copy__(self):
        raise TypeError("Catalog cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("Catalog cannot be copied")

    def __reduce__(self):
        raise TypeError("Catalog cannot be copied")


def load_catalog(path: str | Path) -> Result[Catalog, CatalogLoadError]:
    """Load a catalog file. Malformed trailing records are dropped with a warning."""
    try:
        with open(path, encoding="utf-8") as fin:
            catalog = Catalog.from_stream(fin)
    except OSError as e:
        return Err(CatalogLoadError(str(path), e.strerror or str(e)))
    except UnicodeDecodeError as e:
        return Err(CatalogLoadError(str(path), str(e)))

    logger.info("Loaded %d books from %s", catalog.size(), path)
    return Ok(catalog)
