import pytest

from thuvien.book import Book
from thuvien.catalog import BookNotFoundError, Catalog, CatalogEmptyError


def make(book_id, name="n", author="a", publisher="p", year=2000, used=0, amount=1):
    return Book(book_id, name, author, publisher, year, used, amount)


def ids(catalog):
    return [book.id for book in catalog]


@pytest.fixture
def catalog():
    return Catalog(
        [
            make(1, "Zeta", "Hugo", "Nxb Tre", 1990, amount=2),
            make(2, "alpha", "Austen", "Kim Dong", 2015, amount=0),
            make(3, "Beta", "hugo", "Giao Duc", 2005, amount=3),
        ]
    )


def test_len_and_get(catalog):
    assert len(catalog) == 3
    assert catalog.get(2).name == "alpha"
    with pytest.raises(BookNotFoundError):
        catalog.get(99)


def test_insert_first_and_last(catalog):
    catalog.insert_first(make(10))
    catalog.insert_last(make(11))
    assert ids(catalog) == [10, 1, 2, 3, 11]


def test_insert_after_middle(catalog):
    catalog.insert_after(1, make(10))
    assert ids(catalog) == [1, 10, 2, 3]


def test_insert_after_into_empty():
    catalog = Catalog()
    catalog.insert_after(5, make(10))
    assert ids(catalog) == [10]


def test_insert_after_last_is_not_an_anchor(catalog):
    with pytest.raises(BookNotFoundError):
        catalog.insert_after(3, make(10))
    assert ids(catalog) == [1, 2, 3]


def test_remove_first_and_last(catalog):
    assert catalog.remove_first().id == 1
    assert catalog.remove_last().id == 3
    assert ids(catalog) == [2]


def test_remove_from_empty():
    catalog = Catalog()
    for remove in (catalog.remove_first, catalog.remove_last):
        with pytest.raises(CatalogEmptyError):
            remove()
    with pytest.raises(CatalogEmptyError):
        catalog.remove_by_id(1)


def test_remove_by_id(catalog):
    assert catalog.remove_by_id(2).id == 2
    assert ids(catalog) == [1, 3]
    with pytest.raises(BookNotFoundError):
        catalog.remove_by_id(2)


def test_remove_after(catalog):
    assert catalog.remove_after(1).id == 2
    assert ids(catalog) == [1, 3]
    with pytest.raises(BookNotFoundError):
        catalog.remove_after(3)


def test_remove_by_name_ignores_case(catalog):
    assert catalog.remove_by_name("ZETA").id == 1
    assert ids(catalog) == [2, 3]
    with pytest.raises(BookNotFoundError):
        catalog.remove_by_name("missing")


def test_remove_by_author_removes_all(catalog):
    removed = catalog.remove_by_author("HUGO")
    assert [book.id for book in removed] == [1, 3]
    assert ids(catalog) == [2]
    with pytest.raises(BookNotFoundError):
        catalog.remove_by_author("hugo")


def test_find(catalog):
    assert [b.id for b in catalog.find_by_name("beta")] == [3]
    assert [b.id for b in catalog.find_by_author("Hugo")] == [1, 3]
    assert [b.id for b in catalog.find_by_publisher("kim dong")] == [2]
    assert catalog.find_by_name("nothing") == []


def test_availability_partitions(catalog):
    available = catalog.available()
    lent_out = catalog.not_available()
    assert [b.id for b in lent_out] == [2]
    assert all(b.amount > 0 for b in available)
    assert len(available) + len(lent_out) == len(catalog)


@pytest.mark.parametrize(
    "method, key",
    [
        ("sort_by_name", lambda b: b.name),
        ("sort_by_author", lambda b: b.author),
        ("sort_by_publisher", lambda b: b.publisher),
    ],
)
def test_text_sorts_are_ascending(catalog, method, key):
    before = sorted(key(b) for b in catalog)
    getattr(catalog, method)()
    assert [key(b) for b in catalog] == before


def test_sort_by_year_newest_first(catalog):
    catalog.sort_by_year()
    years = [b.year for b in catalog]
    assert years == sorted(years, reverse=True)
    assert ids(catalog) == [2, 3, 1]


def test_borrow_and_give_back(catalog):
    book = catalog.borrow(1)
    assert (book.amount, book.used, book.borrowed) == (1, 1, 1)
    book = catalog.give_back(1)
    assert (book.amount, book.used, book.borrowed) == (2, 1, 0)


def test_borrow_without_stock(catalog):
    with pytest.raises(BookNotFoundError):
        catalog.borrow(2)


def test_give_back_without_loan(catalog):
    with pytest.raises(BookNotFoundError):
        catalog.give_back(1)


def test_edit(catalog):
    book = catalog.edit(3, name="Gamma", year=2020, id=30)
    assert (book.id, book.name, book.year) == (30, "Gamma", 2020)
    assert catalog.get(30) is book


def test_edit_errors(catalog):
    with pytest.raises(BookNotFoundError):
        catalog.edit(99, name="x")
    with pytest.raises(TypeError):
        catalog.edit(1, borrowed=5)


def test_counts(catalog):
    catalog.borrow(3)
    assert catalog.title_count() == 3
    assert catalog.available_count() == 2 + 0 + 2
    assert catalog.borrowed_count() == 1
    assert catalog.total_count() == catalog.available_count() + 1


def test_save_load_round_trip(catalog, tmp_path):
    path = tmp_path / "books.txt"
    catalog.save(path)
    loaded = Catalog()
    loaded.load(path)
    assert list(loaded) == list(catalog)


def test_load_appends_and_skips_invalid(tmp_path):
    path = tmp_path / "books.txt"
    path.write_text("-1,Bad,A,P,2000,0,1\n\n4,Good,A,P,2001,2,3\n", encoding="utf-8")
    catalog = Catalog([make(1)])
    catalog.load(path)
    assert ids(catalog) == [1, 4]
    assert catalog.get(4).name == "Good"


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        Catalog().load(tmp_path / "absent.txt")