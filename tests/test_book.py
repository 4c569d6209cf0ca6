"""Tests for bookstack.book: the Book record and catalog text format."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from bookstack.book import Book, format_book, parse_books


SAMPLE = '''
"0001062417",  "Early aircraft",                 "Maurice F. Allward", 65.65
"0000255406",  "Shadow maker \\"1st edition)\\"",  "Rosemary Sullivan",   8.08
"0000385264",  "Der Karawanenkardinal",          "Heinz Gstrein",      35.18
'''


def test_cart_book_defaults() -> None:
    book = Book(isbn="0140444300", title="Les Mis")
    assert book.author == ""
    assert book.price == Decimal("0")


def test_price_is_coerced_to_decimal() -> None:
    book = Book(isbn="1", title="T", price=9.5)
    assert isinstance(book.price, Decimal)
    assert book.price == Decimal("9.5")


def test_negative_price_rejected() -> None:
    with pytest.raises(ValueError, match="negative price"):
        Book(isbn="1", title="T", price=Decimal("-0.01"))


def test_full_description_escapes_quotes() -> None:
    book = Book(isbn="0000255406", title='Shadow maker "1st edition)"', author="Rosemary Sullivan")
    assert book.full_description == '"0000255406", "Shadow maker \\"1st edition)\\"", "Rosemary Sullivan"'


def test_format_book_appends_price() -> None:
    book = Book(isbn="0140444300", title="Les Mis", author="Victor Hugo", price=Decimal("9.50"))
    assert format_book(book) == '"0140444300", "Les Mis", "Victor Hugo", 9.50'


def test_format_book_keeps_price_precision() -> None:
    book = Book(isbn="1", title="T", price=Decimal("8.085"))
    assert format_book(book).endswith(", 8.085")
    assert list(parse_books(format_book(book)))[0].price == Decimal("8.085")


def test_non_numeric_price_rejected() -> None:
    with pytest.raises(ValueError, match="non-numeric price"):
        Book(isbn="1", title="T", price="abc")  # type: ignore[arg-type]


class TestParseBooks:
    def test_reads_records_in_order(self) -> None:
        books = list(parse_books(SAMPLE))
        assert [b.isbn for b in books] == ["0001062417", "0000255406", "0000385264"]
        assert books[0].title == "Early aircraft"
        assert books[0].author == "Maurice F. Allward"
        assert books[0].price == Decimal("65.65")

    def test_unescapes_quotes(self) -> None:
        books = list(parse_books(SAMPLE))
        assert books[1].title == 'Shadow maker "1st edition)"'

    def test_escaped_backslash(self) -> None:
        (book,) = parse_books('"1", "C:\\\\books", "", 1.00')
        assert book.title == "C:\\books"

    def test_records_may_share_a_line(self) -> None:
        books = list(parse_books('"1", "A", "X", 1.0 "2", "B", "Y", 2'))
        assert [b.isbn for b in books] == ["1", "2"]
        assert books[1].price == Decimal("2")

    def test_empty_input(self) -> None:
        assert list(parse_books("")) == []
        assert list(parse_books("  \n\t ")) == []

    def test_formatted_book_parses_back(self) -> None:
        book = Book(isbn="0000255406", title='a "quoted" \\ title', author="Someone", price=Decimal("8.08"))
        assert list(parse_books(format_book(book))) == [book]

    def test_stops_at_malformed_record(self, caplog: pytest.LogCaptureFixture) -> None:
        text = '"1", "A", "X", 1.00\n"2", "B", missing quotes, 2.00\n"3", "C", "Z", 3.00'
        with caplog.at_level(logging.WARNING, logger="bookstack.book"):
            books = list(parse_books(text))
        assert [b.isbn for b in books] == ["1"]
        assert any("Malformed" in r.message for r in caplog.records)

    def test_stops_at_negative_price(self, caplog: pytest.LogCaptureFixture) -> None:
        text = '"1", "A", "X", 1.00 "2", "B", "Y", -2.00'
        with caplog.at_level(logging.WARNING, logger="bookstack.book"):
            books = list(parse_books(text))
        assert [b.isbn for b in books] == ["1"]
        assert any("Rejected" in r.message for r in caplog.records)
