import io

import pytest

from labsuite.library import Book, Library, LibraryError, Member, main


def _library_with(copies=2, limit=3):
    library = Library()
    library.add_book(Book("Dune", "Herbert", "111", copies, copies))
    library.register_member(Member("m1", "Ann", limit))
    return library


def test_default_book_and_member():
    assert Book() == Book("UnknownTitle", "UnknownAuthor", "ISBN", 0, 5)
    assert Member() == Member("UnknownID", "UnknownName", 3, {})


def test_update_copies_changes_both_counts():
    book = Book("T", "A", "9", 2, 4)
    book.update_copies(3)
    assert (book.copies_available, book.total_copies) == (2 + 3, 4 + 3)


def test_update_copies_refuses_negative_result():
    book = Book("T", "A", "9", 1, 4)
    with pytest.raises(LibraryError, match="Count becomes negative"):
        book.update_copies(-2)
    assert (book.copies_available, book.total_copies) == (1, 4)


def test_borrow_moves_copy_to_member():
    library = _library_with()
    before = library.find_book("111").copies_available
    library.borrow_book("m1", "111")
    assert library.find_book("111").copies_available == before - 1
    assert library.find_member("m1").borrowed == {"111": 1}


def test_borrow_limit_leaves_book_untouched():
    library = _library_with(copies=5, limit=1)
    library.borrow_book("m1", "111")
    before = library.find_book("111").copies_available
    with pytest.raises(LibraryError, match="Borrow limit exceeded"):
        library.borrow_book("m1", "111")
    assert library.find_book("111").copies_available == before
    assert library.find_member("m1").borrowed_count == 1


def test_borrow_unavailable():
    library = _library_with(copies=0)
    with pytest.raises(LibraryError, match="Copy of book not available"):
        library.borrow_book("m1", "111")
    assert library.find_member("m1").borrowed == {}


def test_return_restores_copy():
    library = _library_with()
    before = library.find_book("111").copies_available
    library.borrow_book("m1", "111")
    library.return_book("m1", "111")
    assert library.find_book("111").copies_available == before
    assert library.find_member("m1").borrowed == {}


def test_return_when_all_copies_present():
    library = _library_with()
    with pytest.raises(LibraryError, match="Copy of book exceeds total copies"):
        library.return_book("m1", "111")


def test_return_not_borrowed_leaves_book_untouched():
    library = _library_with()
    library.borrow_book("m1", "111")
    library.register_member(Member("m2", "Bob"))
    before = library.find_book("111").copies_available
    with pytest.raises(LibraryError, match="Book not borrowed"):
        library.return_book("m2", "111")
    assert library.find_book("111").copies_available == before


def test_duplicates_rejected():
    library = _library_with()
    with pytest.raises(LibraryError, match="Book with same isbn already exists"):
        library.add_book(Book("Other", "X", "111", 1, 1))
    with pytest.raises(LibraryError, match="Member with same id already exists"):
        library.register_member(Member("m1", "Zed"))


def test_lookup_of_unknown_isbn_occupies_key():
    library = Library()
    assert library.find_book("999").title == "UnknownTitle"
    with pytest.raises(LibraryError):
        library.add_book(Book("T", "A", "999", 1, 1))
    assert library.details() == []


def test_details_lists_in_insertion_order():
    library = Library()
    library.add_book(Book("B", "Y", "2", 1, 1))
    library.add_book(Book("A", "X", "1", 3, 3))
    library.register_member(Member("z", "Zed"))
    library.register_member(Member("a", "Amy"))
    assert library.details() == ["B Y 1", "A X 3", "z Zed", "a Amy"]


def test_main_runs_commands(monkeypatch, capsys):
    script = (
        "Book Dune Herbert 111 1 1\n"
        "Member m1 Ann 1\n"
        "Borrow m1 111\n"
        "Borrow m1 111\n"
        "PrintMember m1\n"
        "PrintBook 111\n"
        "PrintLibrary\n"
        "Done\n"
        "PrintLibrary\n"
    )
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    main([])
    assert capsys.readouterr().out.splitlines() == [
        "Invalid request! Copy of book not available",
        "m1 Ann 111 1",
        "Dune Herbert",
        "Dune Herbert 0",
        "m1 Ann",
    ]


def test_main_existing_book_copies_record(monkeypatch, capsys):
    script = "Book Dune Herbert 111 2 2 Book ExistingBook 111 222 PrintBook 222 Done"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    main([])
    assert capsys.readouterr().out.splitlines() == ["Dune Herbert"]