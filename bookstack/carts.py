"""Book containers used during checkout.

A :class:`Cart` is a stack: only its top book can be touched. A
:class:`CheckoutQueue` is the counter, served front to back.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .book import Book
from .errors import ContainerUnderflowError


class Cart:
    """A last-in, first-out stack of books."""

    def __init__(self, label: str = "Cart", books: Iterable[Book] = ()):
        self.label = label
        self._books: list[Book] = []
        for book in books:
            self.push(book)

    def push(self, book: Book) -> None:
        self._books.append(book)

    def pop(self) -> Book:
        if not self._books:
            raise ContainerUnderflowError(f"pop from empty cart {self.label!r}")
        return self._books.pop()

    def top(self) -> Book:
        if not self._books:
            raise ContainerUnderflowError(f"top of empty cart {self.label!r}")
        return self._books[-1]

    def snapshot(self) -> tuple[Book, ...]:
        """Contents from top to bottom."""
        return tuple(reversed(self._books))

    def __len__(self) -> int:
        return len(self._books)

    def __bool__(self) -> bool:
        return bool(self._books)

    def __repr__(self) -> str:
        return f"Cart({self.label!r}, size={len(self._books)})"


class CheckoutQueue:
    """A first-in, first-out queue of books waiting to be settled."""

    def __init__(self, books: Iterable[Book] = ()):
        self._books: deque[Book] = deque(books)

    def enqueue(self, book: Book) -> None:
        self._books.append(book)

    def dequeue(self) -> Book:
        if not self._books:
            raise ContainerUnderflowError("dequeue from empty checkout queue")
        return self._books.popleft()

    def front(self) -> Book:
        if not self._books:
            raise ContainerUnderflowError("front of empty checkout queue")
        return self._books[0]

    def snapshot(self) -> tuple[Book, ...]:
        """Contents from front to back."""
        return tuple(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def __bool__(self) -> bool:
        return bool(self._books)

    def __repr__(self) -> str:
        return f"CheckoutQueue(size={len(self._books)})"
