"""bookstack: a bookstore checkout with careful cart transfers."""

from .book import Book, format_book, parse_books
from .carts import Cart, CheckoutQueue
from .catalog import Catalog, load_catalog
from .config import Settings, TransferStrategy
from .errors import (
    BookstackError,
    CatalogLoadError,
    ConfigError,
    ContainerUnderflowError,
)
from .receipt import LineItem, Receipt, format_receipt
from .result import Err, Ok, Result, unwrap
from .session import DEMO_SHOPPING_LIST, CheckoutSession
from .trace import CartTrace, format_move
from .transfer import (
    CartState,
    MoveEvent,
    careful_move,
    careful_move_iterative,
    expected_moves,
    transfer,
)

__all__ = [
    # Records
    "Book", "format_book", "parse_books",
    # Containers
    "Cart", "CheckoutQueue",
    # Catalog
    "Catalog", "load_catalog",
    # Configuration
    "Settings", "TransferStrategy",
    # Errors
    "BookstackError", "CatalogLoadError", "ConfigError", "ContainerUnderflowError",
    # Checkout
    "CheckoutSession", "DEMO_SHOPPING_LIST", "LineItem", "Receipt", "format_receipt",
    # Careful move
    "CartState", "MoveEvent", "careful_move", "careful_move_iterative",
    "expected_moves", "transfer", "CartTrace", "format_move",
    # Result
    "Ok", "Err", "Result", "unwrap",
]
