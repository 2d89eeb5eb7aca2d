"""An ordered catalogue of books with insertion, removal, search and loans."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from os import PathLike

from .book import INVALID_BOOK_ID, Book, parse_line

_EDITABLE_FIELDS = frozenset(
    {"id", "name", "author", "publisher", "year", "used", "amount"}
)


class BookNotFoundError(LookupError):
    """Raised when no book matches the requested criterion."""


class CatalogEmptyError(LookupError):
    """Raised when removing from an empty catalogue."""


def _same_text(a: str, b: str) -> bool:
    return a.upper() == b.upper()


def _selection_sort(items: list[Book], before: Callable[[Book, Book], bool]) -> None:
    """Sort in place by repeatedly moving the first best element forward."""
    for start in range(len(items)):
        best = start
        for candidate in range(start + 1, len(items)):
            if before(items[candidate], items[best]):
                best = candidate
        items[start], items[best] = items[best], items[start]


class Catalog:
    """Books kept in list order, as the library shelves them."""

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._books: list[Book] = list(books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def get(self, book_id: int) -> Book:
        """Return the first book with this id."""
        for book in self._books:
            if book.id == book_id:
                return book
        raise BookNotFoundError(f"no book with id {book_id}")

    # Insertion

    def insert_first(self, book: Book) -> None:
        self._books.insert(0, book)

    def insert_last(self, book: Book) -> None:
        self._books.append(book)

    def insert_after(self, book_id: int, book: Book) -> None:
        """Insert after the first book with ``book_id``.

        An empty catalogue simply receives the book. The last book is not
        considered as an anchor.
        """
        if not self._books:
            self._books.append(book)
            return
        for position, current in enumerate(self._books[:-1]):
            if current.id == book_id:
                self._books.insert(position + 1, book)
                return
        raise BookNotFoundError(f"no position after book id {book_id}")

    # Removal

    def _require_books(self) -> None:
        if not self._books:
            raise CatalogEmptyError("nothing to remove")

    def remove_first(self) -> Book:
        self._require_books()
        return self._books.pop(0)

    def remove_last(self) -> Book:
        self._require_books()
        return self._books.pop()

    def remove_by_id(self, book_id: int) -> Book:
        """Remove the first book with this id."""
        self._require_books()
        for position, book in enumerate(self._books):
            if book.id == book_id:
                return self._books.pop(position)
        raise BookNotFoundError(f"no book with id {book_id}")

    def remove_after(self, book_id: int) -> Book:
        """Remove the book that follows the first book with ``book_id``."""
        self._require_books()
        for position, book in enumerate(self._books[:-1]):
            if book.id == book_id:
                return self._books.pop(position + 1)
        raise BookNotFoundError(f"no book after id {book_id}")

    def remove_by_name(self, name: str) -> Book:
        """Remove the first book whose title matches, ignoring case."""
        self._require_books()
        for position, book in enumerate(self._books):
            if _same_text(book.name, name):
                return self._books.pop(position)
        raise BookNotFoundError(f"no book named {name!r}")

    def remove_by_author(self, author: str) -> list[Book]:
        """Remove every book by this author, ignoring case."""
        self._require_books()
        removed = [book for book in self._books if _same_text(book.author, author)]
        if not removed:
            raise BookNotFoundError(f"no book by {author!r}")
        self._books = [
            book for book in self._books if not _same_text(book.author, author)
        ]
        return removed

    # Search and listing

    def find_by_name(self, name: str) -> list[Book]:
        return [book for book in self._books if _same_text(book.name, name)]

    def find_by_author(self, author: str) -> list[Book]:
        return [book for book in self._books if _same_text(book.author, author)]

    def find_by_publisher(self, publisher: str) -> list[Book]:
        return [
            book for book in self._books if _same_text(book.publisher, publisher)
        ]

    def available(self) -> list[Book]:
        """Books with at least one copy on the shelf."""
        return [book for book in self._books if book.amount > 0]

    def not_available(self) -> list[Book]:
        """Books with every copy lent out."""
        return [book for book in self._books if book.amount == 0]

    # Ordering (in place)

    def sort_by_name(self) -> None:
        _selection_sort(self._books, lambda a, b: a.name < b.name)

    def sort_by_author(self) -> None:
        _selection_sort(self._books, lambda a, b: a.author < b.author)

    def sort_by_publisher(self) -> None:
        _selection_sort(self._books, lambda a, b: a.publisher < b.publisher)

    def sort_by_year(self) -> None:
        """Newest publication year first."""
        _selection_sort(self._books, lambda a, b: a.year > b.year)

    # Loans

    def borrow(self, book_id: int) -> Book:
        """Lend one copy of the first book with this id that has stock."""
        for book in self._books:
            if book.id == book_id and book.amount > 0:
                book.amount -= 1
                book.used += 1
                book.borrowed += 1
                return book
        raise BookNotFoundError(f"no available book with id {book_id}")

    def give_back(self, book_id: int) -> Book:
        """Return one lent copy of the first book with this id on loan."""
        for book in self._books:
            if book.id == book_id and book.borrowed > 0:
                book.amount += 1
                book.borrowed -= 1
                return book
        raise BookNotFoundError(f"no lent book with id {book_id}")

    def edit(self, book_id: int, **kwargs: object) -> Book:
        """Change fields of the first book with this id."""
        unknown = set(kwargs) - _EDITABLE_FIELDS
        if unknown:
            raise TypeError(f"cannot edit field(s): {', '.join(sorted(unknown))}")
        book = self.get(book_id)
        for field_name, value in kwargs.items():
            setattr(book, field_name, value)
        return book

    # Counts

    def title_count(self) -> int:
        return len(self._books)

    def available_count(self) -> int:
        return sum(book.amount for book in self._books)

    def borrowed_count(self) -> int:
        return sum(book.borrowed for book in self._books)

    def total_count(self) -> int:
        return self.available_count() + self.borrowed_count()

    # Files

    def load(self, path: str | PathLike[str]) -> None:
        """Append the books listed in a catalogue file."""
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                book = parse_line(line)
                if book.id != INVALID_BOOK_ID:
                    self.insert_last(book)

    def save(self, path: str | PathLike[str]) -> None:
        """Write every book to a catalogue file, one per line."""
        with open(path, "w", encoding="utf-8") as handle:
            for book in self._books:
                handle.write(book.to_line() + "\n")