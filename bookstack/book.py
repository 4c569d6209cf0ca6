"""Book records and their text format.

A catalog file holds records separated by whitespace. Each record has four
comma-delimited fields:

    Field     Type      Notes
    ISBN      string    unique identifier, always double-quoted
    Title     string    may contain spaces, always double-quoted
    Author    string    may contain spaces, always double-quoted
    Price     decimal   in dollars, written back with the precision it was read with

Example:

    "0001062417",  "Early aircraft",                 "Maurice F. Allward", 65.65
    "0000255406",  "Shadow maker \\"1st edition)\\"",  "Rosemary Sullivan",   8.08

Double quotes and backslashes inside a string are escaped with a backslash.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

logger = logging.getLogger(__name__)

_QUOTED = r'"((?:[^"\\]|\\.)*)"'
_SEP = r"\s*,\s*"
_PRICE = r"([+-]?(?:\d+(?:\.\d*)?|\.\d+))"

_RECORD_RE = re.compile(
    r"\s*" + _QUOTED + _SEP + _QUOTED + _SEP + _QUOTED + _SEP + _PRICE,
    re.DOTALL,
)
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_BLANK_TAIL_RE = re.compile(r"\s*\Z")


@dataclass(frozen=True)
class Book:
    """A purchasable book.

    Books placed in a cart usually carry only an ISBN and a title; the
    price comes from the catalog at settlement time.
    """

    isbn: str
    title: str
    author: str = ""
    price: Decimal = field(default=Decimal("0"))

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            try:
                price = Decimal(str(self.price))
            except InvalidOperation:
                raise ValueError(f"Book {self.isbn!r} has a non-numeric price: {self.price!r}") from None
            object.__setattr__(self, "price", price)
        if self.price < 0:
            raise ValueError(f"Book {self.isbn!r} has a negative price: {self.price}")

    @property
    def full_description(self) -> str:
        return ", ".join(_quote(v) for v in (self.isbn, self.title, self.author))


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _unquote(value: str) -> str:
    return _ESCAPE_RE.sub(r"\1", value)


def format_book(book: Book) -> str:
    """Render a book as a single catalog record."""
    return f"{book.full_description}, {book.price}"


def parse_books(text: str) -> Iterator[Book]:
    """Yield books from catalog text in the order they appear.

    Parsing stops at the first record that does not match the format; the
    books before it are still yielded.
    """
    pos = 0
    end = len(text)
    while pos < end:
        if _BLANK_TAIL_RE.match(text, pos):
            return
        m = _RECORD_RE.match(text, pos)
        if m is None:
            logger.warning("Malformed catalog record at offset %d, stopping", pos)
            return
        isbn, title, author, price = m.groups()
        try:
            book = Book(
                isbn=_unquote(isbn),
                title=_unquote(title),
                author=_unquote(author),
                price=Decimal(price),
            )
        except ValueError as e:
            logger.warning("Rejected catalog record at offset %d: %s", pos, e)
            return
        yield book
        pos = m.end()
