"""Interactive menu for managing the library catalogue."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from .book import Book, BookFormatError
from .catalog import BookNotFoundError, Catalog, CatalogEmptyError
from .report import format_table

_EXIT_TEXT = " Ban da thoat chuc nang nay. "
_NOT_FOUND_POSITION = "Khong tim thay vi tri nay !!! "
_NOT_FOUND_ID = "Khong tim thay ma so sach !!! "
_NOTHING_TO_REMOVE = "Khong co gi de xoa ! "

Action = Callable[[], None]


class _FatalError(Exception):
    """Stops the program with a failure status."""


def _clear_screen() -> None:
    if sys.stdout.isatty():
        print("\033[2J\033[H", end="", flush=True)


def _pause() -> None:
    if sys.stdin.isatty():
        input()


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt)
        try:
            return int(text.strip())
        except ValueError:
            print("Gia tri khong hop le, hay nhap mot so nguyen.")


def _run_menu(
    title: str,
    entries: Sequence[tuple[str, Action]],
    *,
    rule: str,
    prompt: str = "Nhap lua chon : ",
    banner: Sequence[str] = (),
    before: Action | None = None,
    pause_after: bool = True,
) -> None:
    actions = {number: action for number, (_, action) in enumerate(entries, start=1)}
    while True:
        _clear_screen()
        if before is not None:
            before()
        for line in banner:
            print(f"\n {line} ")
        print(f"\n {title} ")
        for number, (label, _) in enumerate(entries, start=1):
            print(f"\n {number}.{label} ")
        print("\n 0.Thoat. ")
        print(f"\n {rule} ")
        choice = _read_int(prompt)
        if choice == 0:
            print(_EXIT_TEXT)
            _pause()
            return
        action = actions.get(choice)
        if action is None:
            print(" Khong co chuc nang nay ")
            print(" Hay chon chuc nang khac trong menu ")
            print(" Nhap phim bat ki ")
            _pause()
        else:
            action()
        if pause_after:
            _pause()


class _Session:
    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    # Main menu

    def run(self) -> None:
        _run_menu(
            "=========================MENU=========================",
            [
                ("Khoi tao danh sach.", self.load),
                ("Them mot cuon sach vao danh sach.", self.insert_menu),
                ("Xoa mot cuon sach khoi danh sach.", self.delete_menu),
                ("Tim kiem sach.", self.find_menu),
                ("Xem danh sach.", self.display_menu),
                ("Muon/tra sach.", self.loan_menu),
                ("Chinh sua noi dung cua sach.", self.edit_menu),
                ("Luu file.", self.save),
                ("Xem so luong sach", self.count_menu),
            ],
            rule="======================================================",
            prompt="Nhap chuc nang : ",
            banner=("***************QUAN LY SACH TRONG THU VIEN************",),
            pause_after=False,
        )

    def show(self, books) -> None:
        print(format_table(books))

    # Files

    def load(self) -> None:
        file_name = input("Nhap ten file :")
        try:
            self.catalog.load(file_name)
        except OSError as exc:
            raise _FatalError(f"Co loi khi mo file : {file_name}") from exc
        except BookFormatError as exc:
            raise _FatalError(f"Du lieu khong dung dinh dang: {exc}") from exc
        _pause()

    def save(self) -> None:
        file_name = input("Nhap ten file :")
        try:
            self.catalog.save(file_name)
        except OSError:
            print(f"Co loi khi mo file : {file_name}")

    # Insertion

    def create_book(self) -> Book:
        book_id = _read_int("Nhap ma so sach: ")
        name = input("Nhap ten sach: ")
        author = input("Nhap ten tac gia: ")
        publisher = input("Nhap nha xuat ban: ")
        year = _read_int("Nhap nam xuat ban: ")
        used = _read_int("Nhap so lan sach da duoc muon: ")
        amount = _read_int("Nhap so luong sach: ")
        return Book(
            id=book_id,
            name=name,
            author=author,
            publisher=publisher,
            year=year,
            used=used,
            amount=amount,
        )

    def insert_first(self) -> None:
        self.catalog.insert_first(self.create_book())

    def insert_last(self) -> None:
        self.catalog.insert_last(self.create_book())

    def insert_after(self) -> None:
        anchor = _read_int("Nhap vi tri sach can them : ")
        books = list(self.catalog)
        if books and not any(book.id == anchor for book in books[:-1]):
            print(_NOT_FOUND_POSITION)
            return
        self.catalog.insert_after(anchor, self.create_book())

    def insert_menu(self) -> None:
        _run_menu(
            "--------------------Them sach--------------------",
            [
                ("Them cuon sach vao dau danh sach.", self.insert_first),
                ("Them cuon sach vao sau mot cuon sach nao do.", self.insert_after),
                ("Them cuon sach vao cuoi danh sach.", self.insert_last),
            ],
            rule="-------------------------------------------------",
        )

    # Removal

    def _remove(self, remove: Callable[[], object], not_found: str) -> None:
        try:
            remove()
        except CatalogEmptyError:
            print(_NOTHING_TO_REMOVE)
        except BookNotFoundError:
            print(not_found)

    def delete_by_id(self) -> None:
        book_id = _read_int("Nhap ma so sach can xoa: ")
        self._remove(lambda: self.catalog.remove_by_id(book_id), _NOT_FOUND_POSITION)

    def delete_by_name(self) -> None:
        name = input("Nhap ten sach can xoa: ")
        self._remove(
            lambda: self.catalog.remove_by_name(name),
            "Khong co ten sach nay trong thu vien !!! ",
        )

    def delete_by_author(self) -> None:
        author = input("Nhap ten tac gia can xoa: ")
        self._remove(
            lambda: self.catalog.remove_by_author(author),
            "Khong co ten tac gia nay trong thu vien !!! ",
        )

    def delete_first(self) -> None:
        self._remove(self.catalog.remove_first, _NOTHING_TO_REMOVE)

    def delete_after(self) -> None:
        book_id = _read_int("Nhap ma so sach truoc sach can xoa: ")
        self._remove(lambda: self.catalog.remove_after(book_id), _NOT_FOUND_POSITION)

    def delete_last(self) -> None:
        self._remove(self.catalog.remove_last, _NOTHING_TO_REMOVE)

    def delete_menu(self) -> None:
        _run_menu(
            "--------------------Xoa sach--------------------",
            [
                ("Xoa cuon sach  theo ma so.", self.delete_by_id),
                ("Xoa cuon sach  theo ten sach.", self.delete_by_name),
                ("Xoa cuon sach  theo ten tac gia.", self.delete_by_author),
                ("Xoa cuon sach  o dau danh sach.", self.delete_first),
                ("Xoa cuon sach  o sau cuon sach co ma so nao do.", self.delete_after),
                ("Xoa cuon sach  o cuoi danh sach.", self.delete_last),
            ],
            rule="-------------------------------------------------",
        )

    # Search

    def find_by_name(self) -> None:
        name = input("Nhap ten quyen sach can tim: \n")
        self.show(self.catalog.find_by_name(name))

    def find_by_author(self) -> None:
        author = input("Nhap ten tac gia can tim: \n")
        self.show(self.catalog.find_by_author(author))

    def find_by_publisher(self) -> None:
        publisher = input("Nhap ten nha xuat ban can tim: \n")
        self.show(self.catalog.find_by_publisher(publisher))

    def find_menu(self) -> None:
        _run_menu(
            "----------Tim sach----------",
            [
                ("Tim theo ten sach.", self.find_by_name),
                ("Tim theo ten tac gia.", self.find_by_author),
                ("Tim theo ten nha xuat ban.", self.find_by_publisher),
            ],
            rule="----------------------------",
        )

    # Listing

    def _sorted_view(self, sort: Action) -> Action:
        def view() -> None:
            sort()
            self.show(self.catalog)

        return view

    def display_menu(self) -> None:
        catalog = self.catalog
        _run_menu(
            "----------Xem danh sach----------",
            [
                ("Xem toan bo danh muc sach.", lambda: self.show(catalog)),
                ("Xem sach da cho muon het.", lambda: self.show(catalog.not_available())),
                ("Xem sach van con .", lambda: self.show(catalog.available())),
                ("Xem theo thu tu alphabet cua ten sach.",
                 self._sorted_view(catalog.sort_by_name)),
                ("Xem theo thu tu alphabet cua ten tac gia.",
                 self._sorted_view(catalog.sort_by_author)),
                ("Xem theo thu tu alphabet cua ten nha xuat ban.",
                 self._sorted_view(catalog.sort_by_publisher)),
                ("Xem theo thu tu sach xuat ban moi nhat.",
                 self._sorted_view(catalog.sort_by_year)),
            ],
            rule="----------------------------",
        )

    # Loans

    def borrow(self) -> None:
        self.show(self.catalog.available())
        book_id = _read_int("Nap ma so sach can muon: \n")
        try:
            self.catalog.borrow(book_id)
        except BookNotFoundError:
            print("Khong tim thay ma so sach nay trong thu vien sach chua cho muon!!! ")

    def give_back(self) -> None:
        book_id = _read_int("Nap ma so sach can tra: \n")
        try:
            self.catalog.give_back(book_id)
        except BookNotFoundError:
            print("Khong tim thay ma so sach nay trong thu vien sach dang cho muon!!! ")

    def loan_menu(self) -> None:
        _run_menu(
            "----------Muon/tra sach----------",
            [("Muon sach.", self.borrow), ("Tra sach.", self.give_back)],
            rule="----------------------------",
        )

    # Editing

    def _editor(self, field: str, prompt: str, numeric: bool) -> Action:
        def edit() -> None:
            book_id = _read_int("Nhap ma so sach can sua: \n")
            try:
                self.catalog.get(book_id)
            except BookNotFoundError:
                print(_NOT_FOUND_ID)
                return
            value: object = _read_int(prompt) if numeric else input(prompt)
            self.catalog.edit(book_id, **{field: value})

        return edit

    def edit_menu(self) -> None:
        _run_menu(
            "----------Chinh sua noi dung sach----------",
            [
                ("Chinh sua ma so sach.",
                 self._editor("id", "Nhap ma so sach moi: \n", True)),
                ("Chinh sua ten sach.",
                 self._editor("name", "Nhap ten sach moi: \n", False)),
                ("Chinh sua ten tac gia.",
                 self._editor("author", "Nhap ten tac gia moi: \n", False)),
                ("Chinh sua ten nha xuat ban.",
                 self._editor("publisher", "Nhap nha xuat ban moi: \n", False)),
                ("Chinh sua nam xuat ban.",
                 self._editor("year", "Nhap nam xuat ban moi: \n", True)),
                ("Chinh sua so lan muon sach.",
                 self._editor("used", "Nhap so lan muon moi: \n", True)),
                ("Chinh sua so luong sach.",
                 self._editor("amount", "Nhap so luong moi : \n", True)),
            ],
            rule="-------------------------------------------",
            before=lambda: self.show(self.catalog),
        )

    # Counts

    def count_menu(self) -> None:
        catalog = self.catalog
        _run_menu(
            "----------Xem so luong sach----------",
            [
                ("Xem tong so loai sach.", lambda: print(
                    f"Tong so luong sach la : {catalog.title_count()} loai ")),
                ("Xem so luong sach chua cho muon.", lambda: print(
                    f"So luong sach chua cho muon la : {catalog.available_count()} cuon ")),
                ("Xem so luong sach dang cho muon.", lambda: print(
                    f"So luong sach dang cho muon la : {catalog.borrowed_count()} cuon ")),
                ("Xem tong so luong sach.", lambda: print(
                    f"Tong so luong la : {catalog.total_count()} cuon ")),
            ],
            rule="-------------------------------------------",
        )


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="thuvien",
        description="Quan ly sach trong thu vien.",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive library menu; return the exit status."""
    _build_parser().parse_args(argv)
    session = _Session(Catalog())
    try:
        session.run()
    except _FatalError as exc:
        print(exc)
        return 1
    except EOFError:
        print()
    return 0