"""Settlement results and their printed form."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .book import Book
from .render import render


@dataclass(frozen=True)
class LineItem:
    """One settled book. ``book`` is the catalog's record, or ``None`` on a miss."""

    isbn: str
    book: Book | None
    charge: Decimal

    @property
    def found(self) -> bool:
        return self.book is not None


@dataclass(frozen=True)
class Receipt:
    lines: tuple[LineItem, ...]
    total: Decimal

    @property
    def found_count(self) -> int:
        return sum(1 for line in self.lines if line.found)

    @property
    def missing_count(self) -> int:
        return sum(1 for line in self.lines if not line.found)


def format_receipt(receipt: Receipt) -> str:
    return render("receipt.txt.j2", receipt=receipt)
