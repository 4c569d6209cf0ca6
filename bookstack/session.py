"""A single checkout transaction.

Books go into the shopping cart, which turns out to be broken. They are
carefully moved to a working cart one at a time, unloaded onto the
checkout counter, and rung up against the catalog.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from .book import Book
from .carts import Cart, CheckoutQueue
from .catalog import Catalog
from .config import Settings, TransferStrategy
from .receipt import LineItem, Receipt
from .result import unwrap
from .transfer import MoveObserver, transfer

logger = logging.getLogger(__name__)

# Heaviest first, so "Hunger Games" sits at the bottom and
# "Like the Animals" on top. Prices come from the catalog.
DEMO_SHOPPING_LIST: tuple[Book, ...] = (
    Book(isbn="9780545310581", title="Hunger Games"),
    Book(isbn="9780399576775", title="Eat pray love"),
    Book(isbn="0140444300", title="Les Mis"),
    Book(isbn="54782169785", title="131 Answer Key"),
    Book(isbn="9780895656926", title="Like the Animals"),
)


class CheckoutSession:
    """Owns the carts, the checkout counter and the running total for one customer.

    Not thread safe; use one session per transaction.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        on_move: MoveObserver | None = None,
        strategy: TransferStrategy | None = None,
    ):
        self._catalog = catalog
        self._on_move = on_move
        self._strategy = strategy
        self.source_cart = Cart("Broken Cart")
        self.working_cart = Cart("Working Cart")
        self.checkout_queue = CheckoutQueue()
        self.amount_due = Decimal("0")

    @property
    def catalog(self) -> Catalog:
        if self._catalog is None:
            self._catalog = Catalog.instance()
        return self._catalog

    @property
    def strategy(self) -> TransferStrategy:
        if self._strategy is None:
            self._strategy = unwrap(Settings.from_env()).transfer_strategy
        return self._strategy

    def load_cart(self, books: Iterable[Book]) -> None:
        """Push ``books`` in order: the first ends up at the bottom, the last on top."""
        for book in books:
            self.source_cart.push(book)

    def transfer_to_working_cart(self) -> int:
        """Carefully move the whole source cart onto the working cart.

        Returns the number of primitive moves made.
        """
        spare_cart = Cart("Spare Cart")
        count = len(self.source_cart)
        moves = transfer(
            count,
            self.source_cart,
            self.working_cart,
            spare_cart,
            on_move=self._on_move,
            strategy=self.strategy,
        )
        logger.info("Moved %d books to the working cart in %d moves", count, moves)
        return moves

    def drain_to_checkout_queue(self) -> int:
        original_size = len(self.working_cart)
        for _ in range(original_size):
            self.checkout_queue.enqueue(self.working_cart.pop())
        return original_size

    def settle(self) -> Receipt:
        """Ring up every book on the counter, front to back.

        A book missing from the catalog is not charged.
        """
        catalog = self.catalog
        lines: list[LineItem] = []
        original_size = len(self.checkout_queue)
        for _ in range(original_size):
            isbn = self.checkout_queue.front().isbn
            book = catalog.find(isbn)
            if book is not None:
                self.amount_due += book.price
                lines.append(LineItem(isbn=isbn, book=book, charge=book.price))
            else:
                logger.info("No catalog entry for ISBN %s, no charge", isbn)
                lines.append(LineItem(isbn=isbn, book=None, charge=Decimal("0")))
            self.checkout_queue.dequeue()
        return Receipt(lines=tuple(lines), total=self.amount_due)

    def checkout(self, books: Iterable[Book]) -> Receipt:
        """Run the whole flow: load, transfer, drain, settle."""
        self.load_cart(books)
        self.transfer_to_working_cart()
        self.drain_to_checkout_queue()
        return self.settle()
