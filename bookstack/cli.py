import argparse
import logging
import sys
from collections.abc import Sequence

from bookstack.book import Book, format_book
from bookstack.carts import Cart
from bookstack.catalog import Catalog, load_catalog
from bookstack.config import Settings
from bookstack.receipt import format_receipt
from bookstack.result import Err, Ok
from bookstack.session import DEMO_SHOPPING_LIST, CheckoutSession
from bookstack.trace import CartTrace
from bookstack.transfer import transfer


def _open_catalog(path: str | None, settings: Settings) -> Catalog | None:
    match load_catalog(path or settings.catalog_path):
        case Ok(catalog):
            return catalog
        case Err(e):
            print(f"Error: {e}", file=sys.stderr)
            return None


def handle_checkout(
    isbns: Sequence[str],
    *,
    catalog_path: str | None,
    trace: bool,
    settings: Settings,
) -> int:
    catalog = _open_catalog(catalog_path, settings)
    if catalog is None:
        return 1

    books = [Book(isbn=i, title=i) for i in isbns] if isbns else list(DEMO_SHOPPING_LIST)
    session = CheckoutSession(
        catalog=catalog,
        on_move=CartTrace() if trace or settings.trace else None,
        strategy=settings.transfer_strategy,
    )
    receipt = session.checkout(books)
    print(format_receipt(receipt), end="")
    return 0


def handle_lookup(isbn: str, *, catalog_path: str | None, settings: Settings) -> int:
    catalog = _open_catalog(catalog_path, settings)
    if catalog is None:
        return 1

    book = catalog.find(isbn)
    if book is None:
        print(f"{isbn}: not found", file=sys.stderr)
        return 1
    print(format_book(book))
    return 0


def handle_count(*, catalog_path: str | None, settings: Settings) -> int:
    catalog = _open_catalog(catalog_path, settings)
    if catalog is None:
        return 1
    print(catalog.size())
    return 0


def handle_moves(count: int, *, trace: bool, settings: Settings) -> int:
    """Carefully move ``count`` placeholder books and report the move count."""
    placeholders = (Book(isbn=str(n), title=f"Book {n}") for n in range(count, 0, -1))
    source = Cart("Broken Cart", placeholders)
    moves = transfer(
        count,
        source,
        Cart("Working Cart"),
        Cart("Spare Cart"),
        on_move=CartTrace() if trace or settings.trace else None,
        strategy=settings.transfer_strategy,
    )
    print(f"Moved {count} books in {moves} moves")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookstack",
        description="Simulated bookstore checkout with careful cart transfers",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (default: BOOKSTACK_LOG_LEVEL or WARNING).",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: checkout
    checkout_parser = subparsers.add_parser(
        "checkout",
        help="Check out a cart of books and print the receipt.",
    )
    checkout_parser.add_argument(
        "isbns",
        nargs="*",
        metavar="ISBN",
        help="ISBNs to place in the cart, bottom first. Default: the demo list.",
    )
    checkout_parser.add_argument("--catalog", help="Catalog file to read.")
    checkout_parser.add_argument(
        "--trace",
        action="store_true",
        default=False,
        help="Print the carts to stderr after every move.",
    )

    # Command: lookup
    lookup_parser = subparsers.add_parser("lookup", help="Find a book by ISBN.")
    lookup_parser.add_argument("isbn", metavar="ISBN")
    lookup_parser.add_argument("--catalog", help="Catalog file to read.")

    # Command: count
    count_parser = subparsers.add_parser("count", help="Print the number of books in the catalog.")
    count_parser.add_argument("--catalog", help="Catalog file to read.")

    # Command: moves
    moves_parser = subparsers.add_parser(
        "moves",
        help="Carefully move N placeholder books and print the move count.",
    )
    moves_parser.add_argument("count", type=int, metavar="N")
    moves_parser.add_argument(
        "--trace",
        action="store_true",
        default=False,
        help="Print the carts to stderr after every move.",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    match Settings.from_env():
        case Ok(settings):
            pass
        case Err(e):
            print(f"Error: {e}", file=sys.stderr)
            return 1

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "checkout":
            return handle_checkout(
                args.isbns,
                catalog_path=args.catalog,
                trace=args.trace,
                settings=settings,
            )
        case "lookup":
            return handle_lookup(args.isbn, catalog_path=args.catalog, settings=settings)
        case "count":
            return handle_count(catalog_path=args.catalog, settings=settings)
        case "moves":
            if args.count < 0:
                print("Error: N must be zero or more", file=sys.stderr)
                return 1
            return handle_moves(args.count, trace=args.trace, settings=settings)
        case None:
            parser.print_help()
            return 1
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


if __name__ == "__main__":
    sys.exit(main())
