"""A small lending library: add, search, check out and return books."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Optional

Reader = Callable[[], str]
Writer = Callable[[str], object]

DEFAULT_FINE_RATE = 1


class LibraryError(Exception):
    """Base class for library errors."""


class BookNotFoundError(LibraryError, LookupError):
    """No book matches the request."""


class AlreadyCheckedOutError(LibraryError):
    """The book is already lent out."""


class NotCheckedOutError(LibraryError):
    """The book is already on the shelf."""


@dataclass
class Book:
    title: str
    author: str
    isbn: str
    checked_out: bool = False

    def describe(self) -> str:
        status = "Checked Out" if self.checked_out else "Available"
        return f"Title: {self.title}, Author: {self.author}, ISBN: {self.isbn} ({status})"


class Library:
    """The book collection and the lending rules."""

    def __init__(self, fine_rate: int = DEFAULT_FINE_RATE) -> None:
        self.fine_rate = fine_rate
        self._books: list[Book] = []

    @property
    def books(self) -> tuple[Book, ...]:
        return tuple(self._books)

    def add_book(self, title: str, author: str, isbn: str) -> Book:
        book = Book(title, author, isbn)
        self._books.append(book)
        return book

    def search(self, key: str) -> Book:
        """Return the first book whose title or author contains key, or whose ISBN equals it."""
        for book in self._books:
            if key in book.title or key in book.author or book.isbn == key:
                return book
        raise BookNotFoundError(f"no book matches {key!r}")

    def _find(self, isbn: str) -> Book:
        for book in self._books:
            if book.isbn == isbn:
                return book
        raise BookNotFoundError(f"no book with ISBN {isbn!r}")

    def checkout(self, isbn: str) -> Book:
        book = self._find(isbn)
        if book.checked_out:
            raise AlreadyCheckedOutError(f"{isbn} is already checked out")
        book.checked_out = True
        return book

    def return_book(self, isbn: str) -> Book:
        book = self._find(isbn)
        if not book.checked_out:
            raise NotCheckedOutError(f"{isbn} is already in the library")
        book.checked_out = False
        return book

    def fine(self, days: int) -> int:
        return days * self.fine_rate


MENU = (
    "\n===== LIBRARY MANAGEMENT SYSTEM =====\n"
    "1. Add Book\n2. Search Book\n3. Checkout Book\n4. Return Book\n5. Show Books\n6. Exit\n"
    "Enter your choice: "
)


def _read_token(read: Reader) -> str:
    while not (tokens := read().split()):
        pass
    return tokens[0]


def _read_int(read: Reader, write: Writer) -> int:
    while True:
        try:
            return int(_read_token(read))
        except ValueError:
            write("Please enter a whole number: ")


def _add(library: Library, read: Reader, write: Writer) -> None:
    write("\nEnter book title: ")
    title = read()
    write("Enter author: ")
    author = read()
    write("Enter ISBN: ")
    isbn = _read_token(read)
    library.add_book(title, author, isbn)
    write("\n✅ Book added successfully!\n")


def _search(library: Library, read: Reader, write: Writer) -> None:
    write("\nEnter title, author, or ISBN to search: ")
    try:
        book = library.search(read())
    except BookNotFoundError:
        write("\n❌ No books found.\n")
    else:
        write(f"\n🔎 Book Found:\n{book.describe()}\n")


def _checkout(library: Library, read: Reader, write: Writer) -> None:
    write("\nEnter ISBN to checkout: ")
    try:
        library.checkout(read())
    except AlreadyCheckedOutError:
        write("\n❌ This book is already checked out.\n")
    except BookNotFoundError:
        write("\n❌ Book not found.\n")
    else:
        write("\n✅ Book checked out successfully!\n")


def _return(library: Library, read: Reader, write: Writer) -> None:
    write("\nEnter ISBN to return: ")
    try:
        library.return_book(read())
    except NotCheckedOutError:
        write("\nThis book is already in the library.\n")
        return
    except BookNotFoundError:
        write("\n❌ Book not found.\n")
        return
    write("Was the book overdue? (y/n): ")
    if _read_token(read)[:1] in ("y", "Y"):
        write("Enter number of overdue days: ")
        days = _read_int(read, write)
        write(f"Total fine: ₹{library.fine(days)}\n")
    write("\n✅ Book returned successfully!\n")


def _show(library: Library, read: Reader, write: Writer) -> None:
    write("\n📚 Available Books:\n")
    if not library.books:
        write("No books in the library.\n")
        return
    for book in library.books:
        write(book.describe() + "\n")


_ACTIONS = {1: _add, 2: _search, 3: _checkout, 4: _return, 5: _show}
_EXIT_CHOICE = 6


def run(read: Reader, write: Writer) -> Library:
    """Run the menu until Exit is chosen; return the library as it was left."""
    library = Library()
    while True:
        write(MENU)
        tokens = read().split()
        try:
            choice = int(tokens[0])
        except (IndexError, ValueError):
            choice = None
        if choice == _EXIT_CHOICE:
            write("Exiting...\n")
            return library
        action = _ACTIONS.get(choice)
        if action is None:
            write("Invalid choice. Please try again.\n")
            continue
        action(library, read, write)


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="library", description="Manage a small lending library.")
    parser.parse_args(argv)
    try:
        run(input, _write_stdout)
    except EOFError:
        _write_stdout("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())