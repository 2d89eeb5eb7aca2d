# thuvien

`thuvien` keeps the catalogue of a small library. Each book has these fields:

- an id
- a title
- an author
- a publisher
- a year of publication
- a count of past loans
- a count of copies on the shelf

Each book also has a counter of copies that are out on loan at the moment. A catalogue can be loaded from a plain comma-separated text file and saved back to one.

## Installing

```
pip install .
```

## Using the menu

```
thuvien
```

This starts an interactive menu in the terminal. Its prompts and messages are in Vietnamese. From the menu you can:

- load a catalogue from a file (the books are appended to those already held)
- add a book at the start, at the end, or after a given book id
- remove books:
  - by id
  - by title
  - by author (this removes every book by that author)
  - from the start or the end of the list
  - the book that follows a given id
- search by title, author or publisher (matching ignores letter case)
- list all books, books with copies on the shelf, or books with no copies left
- list books ordered by title, author or publisher, or newest year first (this reorders the catalogue itself)
- lend and take back copies
- edit any field of a book
- save the catalogue to a file
- see counts of titles, copies on the shelf, copies on loan, and all copies

Choosing `0` leaves a submenu; in the main menu it ends the program. The program also ends when input runs out (end of file). It exits with status 1 when a file to load cannot be opened or holds a malformed line.

The screen is cleared only when output goes to a terminal. After each action the menu waits for Enter only when input comes from a terminal.

## File format

One book per line, with the fields separated by commas:

```
id,title,author,publisher,year,times_borrowed,copies
```

For example:

```
1,Dune,Frank Herbert,Chilton,1965,12,3
```

When a file is read:

- Blank lines are skipped.
- Empty fields are ignored, so consecutive commas count as one separator.
- Missing trailing fields keep their defaults: an empty string for text fields and `0` for numbers.
- A number field that does not start with an integer reads as `0`.
- A line with more than seven fields is an error.

## Using it from Python

```python
from thuvien.book import parse_line
from thuvien.catalog import Catalog
from thuvien.report import format_table

catalog = Catalog([])
catalog.load("books.txt")
catalog.insert_last(parse_line("7,Emma,Jane Austen,Murray,1815,0,2"))
catalog.borrow(7)
print(format_table(catalog.available()))
print(catalog.title_count(), catalog.borrowed_count())
catalog.save("books.txt")
```

### `thuvien.book`

- `Book` is a dataclass with the fields `id`, `name`, `author`, `publisher`, `year`, `used`, `amount` and `borrowed`.
- `Book.to_line()` gives the record as a file line.
- `parse_line(line)` reads a line into a `Book`.

### `thuvien.catalog`

`Catalog` keeps books in list order and supports `len()` and iteration. It offers these methods:

- `get`
- `insert_first`, `insert_last`, `insert_after`
- `remove_first`, `remove_last`, `remove_by_id`, `remove_after`, `remove_by_name`, `remove_by_author`
- `find_by_name`, `find_by_author`, `find_by_publisher`
- `available`, `not_available`
- `sort_by_name`, `sort_by_author`, `sort_by_publisher`, `sort_by_year`
- `borrow`, `give_back`
- `edit(book_id, **fields)`
- `title_count`, `available_count`, `borrowed_count`, `total_count`
- `load`, `save`

Some of these methods have points to note:

- `insert_after` does not accept the last book in the list as the anchor. On an empty catalogue it simply adds the book.
- `borrow` takes one copy off the shelf, adds one to the loan count and marks one copy as out on loan.
- `give_back` puts a lent copy back on the shelf.

### `thuvien.report`

`format_header()`, `format_row(book)` and `format_table(books)` build the fixed-width, right-aligned listing used by the menu.

### Errors

- Looking up, removing, lending or returning a book that cannot be found raises `BookNotFoundError`.
- Removing from an empty catalogue raises `CatalogEmptyError`.
- A malformed line raises `BookFormatError`.
- `edit` raises `TypeError` for a field name it does not know.

## What it does not do

The file does not store the number of copies currently on loan. After a save and a later load, every book starts with none on loan, so those copies can no longer be given back through the menu.

The command offers only the interactive menu; it has no options for running single actions from the command line.