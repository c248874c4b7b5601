"""Book lending: a catalogue of books, registered members and their loans."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Iterator


class LibraryError(Exception):
    """A request the library refuses; the message says why."""


@dataclass
class Book:
    """A title in the catalogue with its available and total copy counts."""

    title: str = "UnknownTitle"
    author: str = "UnknownAuthor"
    isbn: str = "ISBN"
    copies_available: int = 0
    total_copies: int = 5

    def update_copies(self, count: int) -> None:
        """Add count copies (or remove, if negative) to both totals."""
        if self.total_copies + count < 0 or self.copies_available + count < 0:
            raise LibraryError("Count becomes negative")
        self.total_copies += count
        self.copies_available += count

    def check_out(self) -> None:
        """Lend one copy."""
        if not self.copies_available:
            raise LibraryError("Copy of book not available")
        self.copies_available -= 1

    def check_in(self) -> None:
        """Take one copy back."""
        if self.copies_available >= self.total_copies:
            raise LibraryError("Copy of book exceeds total copies")
        self.copies_available += 1


@dataclass
class Member:
    """A library member and the count of each book they hold."""

    member_id: str = "UnknownID"
    name: str = "UnknownName"
    borrow_limit: int = 3
    borrowed: dict[str, int] = field(default_factory=dict)

    @property
    def borrowed_count(self) -> int:
        return sum(self.borrowed.values())

    def borrow(self, isbn: str) -> None:
        if self.borrowed_count >= self.borrow_limit:
            raise LibraryError("Borrow limit exceeded")
        self.borrowed[isbn] = self.borrowed.get(isbn, 0) + 1

    def give_back(self, isbn: str) -> None:
        held = self.borrowed.get(isbn)
        if held is None:
            raise LibraryError("Book not borrowed")
        if held > 1:
            self.borrowed[isbn] = held - 1
        else:
            del self.borrowed[isbn]


class Library:
    """Catalogue of books and members, listed in the order they were added.

    Looking up an unknown isbn or member id creates a placeholder record under
    that key; placeholders are not listed but do occupy the key.
    """

    def __init__(self) -> None:
        self._books: dict[str, Book] = {}
        self._members: dict[str, Member] = {}
        self._book_order: list[str] = []
        self._member_order: list[str] = []

    def add_book(self, book: Book) -> None:
        if book.isbn in self._books:
            raise LibraryError("Book with same isbn already exists")
        self._books[book.isbn] = book
        self._book_order.append(book.isbn)

    def register_member(self, member: Member) -> None:
        if member.member_id in self._members:
            raise LibraryError("Member with same id already exists")
        self._members[member.member_id] = member
        self._member_order.append(member.member_id)

    def borrow_book(self, member_id: str, isbn: str) -> None:
        book = self.find_book(isbn)
        book.check_out()
        try:
            self.find_member(member_id).borrow(isbn)
        except LibraryError:
            book.copies_available += 1
            raise

    def return_book(self, member_id: str, isbn: str) -> None:
        book = self.find_book(isbn)
        book.check_in()
        try:
            self.find_member(member_id).give_back(isbn)
        except LibraryError:
            book.copies_available -= 1
            raise

    def find_book(self, isbn: str) -> Book:
        return self._books.setdefault(isbn, Book())

    def find_member(self, member_id: str) -> Member:
        return self._members.setdefault(member_id, Member())

    def details(self) -> list[str]:
        """Listed books with available copies, then listed members."""
        lines = []
        for isbn in self._book_order:
            book = self._books[isbn]
            lines.append(f"{book.title} {book.author} {book.copies_available}")
        for member_id in self._member_order:
            member = self._members[member_id]
            lines.append(f"{member.member_id} {member.name}")
        return lines


class _Exhausted(Exception):
    """Raised when the token stream runs out."""


def _execute(library: Library, command: str, take: Callable[[], str]) -> Iterator[str]:
    match command:
        case "Book":
            first = take()
            if first == "None":
                library.add_book(Book())
            elif first == "ExistingBook":
                old_isbn, new_isbn = take(), take()
                library.add_book(replace(library.find_book(old_isbn), isbn=new_isbn))
            else:
                author, isbn = take(), take()
                available, total = int(take()), int(take())
                library.add_book(Book(first, author, isbn, available, total))
        case "UpdateCopiesCount":
            isbn, count = take(), int(take())
            library.find_book(isbn).update_copies(count)
        case "Member":
            first = take()
            if first == "NoBorrowLimit":
                member_id, name = take(), take()
                library.register_member(Member(member_id, name))
            else:
                name, limit = take(), int(take())
                library.register_member(Member(first, name, limit))
        case "Borrow":
            member_id, isbn = take(), take()
            library.borrow_book(member_id, isbn)
        case "Return":
            member_id, isbn = take(), take()
            library.return_book(member_id, isbn)
        case "PrintBook":
            book = library.find_book(take())
            yield f"{book.title} {book.author}"
        case "PrintMember":
            member = library.find_member(take())
            for isbn, count in sorted(member.borrowed.items()):
                yield f"{member.member_id} {member.name} {isbn} {count}"
        case "PrintLibrary":
            yield from library.details()


def _run(words: Iterable[str]) -> Iterator[str]:
    tokens = iter(words)

    def take() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise _Exhausted from None

    library = Library()
    try:
        command = take()
        while command != "Done":
            try:
                yield from _execute(library, command, take)
            except LibraryError as error:
                yield f"Invalid request! {error}"
            command = take()
    except _Exhausted:
        return


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Apply library commands read from standard input.")
    parser.parse_args(argv)
    for line in _run(sys.stdin.read().split()):
        print(line)


if __name__ == "__main__":
    main()