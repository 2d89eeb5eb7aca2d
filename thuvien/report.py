"""Fixed-width text tables for listing books."""

from __future__ import annotations

from collections.abc import Iterable

from .book import Book

TABLE_TITLE = "Danh sach hien tai:"

_HEADER_COLUMNS = (
    ("Ma so sach", 10),
    ("Ten sach", 30),
    ("Ten tac gia", 25),
    ("Nha xuat ban", 20),
    ("Nam xuat ban", 20),
    ("So lan muon", 20),
    ("So luong", 15),
)

# The year column of a row is narrower than its heading, as in the shelf list.
_ROW_WIDTHS = (10, 30, 25, 20, 16, 20, 15)

RULE = "-" * sum(width for _, width in _HEADER_COLUMNS)


def format_header() -> str:
    """Return the column headings as one right-aligned line."""
    return "".join(f"{label:>{width}}" for label, width in _HEADER_COLUMNS)


def format_row(book: Book) -> str:
    """Return one book as a right-aligned table line."""
    values = (
        book.id,
        book.name,
        book.author,
        book.publisher,
        book.year,
        book.used,
        book.amount,
    )
    return "".join(f"{value!s:>{width}}" for value, width in zip(values, _ROW_WIDTHS))


def format_table(books: Iterable[Book]) -> str:
    """Return a titled table of the given books, framed by rules."""
    lines = [TABLE_TITLE, RULE, format_header()]
    lines.extend(format_row(book) for book in books)
    lines.append(RULE)
    return "\n".join(lines)