"""Book records and their comma-separated line format."""

from __future__ import annotations

import re
from dataclasses import dataclass

INVALID_BOOK_ID = -1
FIELD_COUNT = 7

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class BookFormatError(ValueError):
    """Raised when a catalogue line does not have the expected layout."""


@dataclass
class Book:
    """One title in the library, with its stock and loan counters."""

    id: int
    name: str = ""
    author: str = ""
    publisher: str = ""
    year: int = 0
    used: int = 0
    amount: int = 0
    borrowed: int = 0

    def to_line(self) -> str:
        """Return the record as a catalogue line, without a line break."""
        return ",".join(
            str(value)
            for value in (
                self.id,
                self.name,
                self.author,
                self.publisher,
                self.year,
                self.used,
                self.amount,
            )
        )


def _to_int(text: str) -> int:
    """Read a leading integer the lenient way: anything unreadable is 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_line(line: str) -> Book:
    """Parse a catalogue line into a Book.

    Empty fields are skipped, as consecutive commas count as one separator.
    Missing trailing fields keep their defaults; the loan counter starts at 0.
    """
    tokens = [token for token in line.rstrip("\r\n").split(",") if token]
    if not tokens:
        raise BookFormatError(f"malformed line: {line!r}")
    if len(tokens) > FIELD_COUNT:
        raise BookFormatError(f"too many fields in line: {line!r}")

    book = Book(id=_to_int(tokens[0]))
    text_fields = ("name", "author", "publisher")
    int_fields = ("year", "used", "amount")
    for field_name, token in zip(text_fields + int_fields, tokens[1:]):
        value = token if field_name in text_fields else _to_int(token)
        setattr(book, field_name, value)
    return book