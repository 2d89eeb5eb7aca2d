from thuvien.book import Book
from thuvien.report import RULE, TABLE_TITLE, format_header, format_row, format_table


def _book(book_id=1, name="Dune", author="Herbert", publisher="Chilton"):
    return Book(
        id=book_id,
        name=name,
        author=author,
        publisher=publisher,
        year=1965,
        used=3,
        amount=4,
    )


def test_header_holds_column_labels_in_order():
    header = format_header()
    labels = ["Ma so sach", "Ten sach", "Ten tac gia", "Nha xuat ban",
              "Nam xuat ban", "So lan muon", "So luong"]
    positions = [header.index(label) for label in labels]
    assert positions == sorted(positions)
    assert header.endswith("So luong")


def test_rule_matches_header_width():
    assert len(RULE) == len(format_header())
    assert set(RULE) == {"-"}


def test_row_fields_are_right_aligned():
    row = format_row(_book())
    assert row.split() == ["1", "Dune", "Herbert", "Chilton", "1965", "3", "4"]
    assert row[:10] == "1".rjust(10)
    assert row[10:40] == "Dune".rjust(30)
    assert row.endswith("4")


def test_row_does_not_truncate_long_values():
    long_name = "x" * 45
    row = format_row(_book(name=long_name))
    assert long_name in row


def test_table_frames_rows():
    books = [_book(1, "Dune"), _book(2, "Emma")]
    lines = format_table(books).split("\n")
    assert lines[0] == TABLE_TITLE
    assert lines[1] == RULE
    assert lines[2] == format_header()
    assert lines[3:5] == [format_row(book) for book in books]
    assert lines[-1] == RULE


def test_empty_table_has_only_frame():
    lines = format_table([]).split("\n")
    assert lines == [TABLE_TITLE, RULE, format_header(), RULE]