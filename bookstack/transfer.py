"""Careful move: relocate a stack of books one at a time through a spare cart.

The procedure is the three-peg disk puzzle applied to carts::

    move(n, src, dst, spare):
      if n == 1:
          move top book from src to dst
      else:
          move(n - 1, src, spare, dst)
          move top book from src to dst
          move(n - 1, spare, dst, src)

Moving ``n`` books takes ``2**n - 1`` primitive moves. The books end up on
the destination in the same top-to-bottom order they had on the source.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .book import Book
from .carts import Cart
from .config import TransferStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartState:
    label: str
    books: tuple[Book, ...]  # top to bottom


@dataclass(frozen=True)
class MoveEvent:
    """What an observer sees after one primitive move."""

    move_number: int
    book: Book
    source: str
    destination: str
    carts: tuple[CartState, ...]
    """The three carts in the order they were passed to the outermost call."""


MoveObserver = Callable[[MoveEvent], None]


def expected_moves(count: int) -> int:
    return 2**count - 1 if count > 0 else 0


class _MoveLog:
    """Performs primitive moves, counting them and notifying the observer."""

    def __init__(self, carts: tuple[Cart, Cart, Cart], on_move: MoveObserver | None):
        self._carts = carts
        self._on_move = on_move
        self.moves = 0

    def step(self, source: Cart, destination: Cart) -> None:
        book = source.pop()
        destination.push(book)
        self.moves += 1
        logger.debug(
            "Move %d: %r from %s to %s", self.moves, book.title, source.label, destination.label
        )
        if self._on_move is not None:
            self._on_move(
                MoveEvent(
                    move_number=self.moves,
                    book=book,
                    source=source.label,
                    destination=destination.label,
                    carts=tuple(CartState(c.label, c.snapshot()) for c in self._carts),
                )
            )


def _check_count(count: int, source: Cart) -> None:
    if count < 0:
        raise ValueError(f"Cannot move a negative number of books: {count}")
    if count > len(source):
        raise ValueError(
            f"Cannot move {count} books from {source.label!r}, it holds {len(source)}"
        )


def _move(count: int, source: Cart, destination: Cart, spare: Cart, log: _MoveLog) -> None:
    if count == 1:
        log.step(source, destination)
    else:
        _move(count - 1, source, spare, destination, log)
        log.step(source, destination)
        _move(count - 1, spare, destination, source, log)


def careful_move(
    count: int,
    source: Cart,
    destination: Cart,
    spare: Cart,
    on_move: MoveObserver | None = None,
) -> int:
    """Move the top ``count`` books of ``source`` onto ``destination``.

    ``on_move`` is called after every primitive move, never before the first.
    Returns the number of primitive moves made.
    """
    _check_count(count, source)
    log = _MoveLog((source, destination, spare), on_move)
    if count > 0:
        _move(count, source, destination, spare, log)
    return log.moves


def careful_move_iterative(
    count: int,
    source: Cart,
    destination: Cart,
    spare: Cart,
    on_move: MoveObserver | None = None,
) -> int:
    """Same moves as :func:`careful_move`, driven by a work list instead of recursion."""
    _check_count(count, source)
    log = _MoveLog((source, destination, spare), on_move)
    if count == 0:
        return 0

    # (n, src, dst, via); via is None for a single primitive move.
    work: list[tuple[int, Cart, Cart, Cart | None]] = [(count, source, destination, spare)]
    while work:
        n, src, dst, via = work.pop()
        if n == 1 or via is None:
            log.step(src, dst)
            continue
        work.append((n - 1, via, dst, src))
        work.append((1, src, dst, None))
        work.append((n - 1, src, via, dst))
    return log.moves


def transfer(
    count: int,
    source: Cart,
    destination: Cart,
    spare: Cart,
    on_move: MoveObserver | None = None,
    strategy: TransferStrategy = TransferStrategy.RECURSIVE,
) -> int:
    match strategy:
        case TransferStrategy.RECURSIVE:
            return careful_move(count, source, destination, spare, on_move)
        case TransferStrategy.ITERATIVE:
            return careful_move_iterative(count, source, destination, spare, on_move)
    raise ValueError(f"Unknown transfer strategy: {strategy!r}")
