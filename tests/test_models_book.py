"""
Tests for the Book model.

These tests verify that the Book model correctly:
1. Validates construction and keeps identifying fields immutable
2. Keeps availability and borrower in step through borrow and return
3. Rejects a borrow without touching either side
4. Notifies observers in registration order
"""

import pytest
from pydantic import ValidationError

from lending_library.errors import BookUnavailableError, LendingErrorKind, MemberAtCapacityError
from lending_library.models import AvailabilityObserver, Book, Member


class TestBookModel:
    """Test suite for Book construction and serialization."""

    def test_create_valid_book(self):
        book = Book(title="Kotlin Programming", author="JetBrains", isbn="123-456-789")

        assert book.title == "Kotlin Programming"
        assert book.author == "JetBrains"
        assert book.isbn == "123-456-789"
        assert book.available is True
        assert book.is_available is True
        assert book.borrower is None
        assert book.observers == ()

    def test_title_required(self):
        with pytest.raises(ValidationError):
            Book(title="", author="JetBrains", isbn="123")

    def test_title_kept_verbatim(self):
        book = Book(title=" Dune ", author=" Herbert", isbn="111 ")

        assert book.title == " Dune "
        assert book.author == " Herbert"
        assert book.isbn == "111 "

    def test_empty_author_and_isbn_allowed(self):
        book = Book(title="Anonymous Pamphlet", author="", isbn="")
        assert book.author == ""
        assert book.isbn == ""

    def test_identifying_fields_are_immutable(self, kotlin_programming):
        with pytest.raises(ValidationError):
            kotlin_programming.title = "Java Programming"
        with pytest.raises(ValidationError):
            kotlin_programming.author = "Oracle"
        with pytest.raises(ValidationError):
            kotlin_programming.isbn = "000"

    def test_loan_state_validated_on_construction(self, alice):
        with pytest.raises(ValidationError, match="must have a borrower"):
            Book(title="Lost", author="Nobody", isbn="1", available=False)
        with pytest.raises(ValidationError, match="cannot have a borrower"):
            Book(title="Odd", author="Nobody", isbn="1", available=True, borrower=alice)

        on_loan = Book(title="Held", author="Somebody", isbn="2", available=False, borrower=alice)
        assert on_loan.borrower is alice

    def test_copies_with_same_isbn_are_distinct(self):
        first = Book(title="Dune", author="Herbert", isbn="111")
        second = Book(title="Dune", author="Herbert", isbn="111")

        assert first == first
        assert first != second
        assert len({first, second}) == 2

    def test_serialization_hides_borrower_reference(self, kotlin_programming, alice):
        kotlin_programming.borrow(alice)
        data = kotlin_programming.model_dump()

        assert "borrower" not in data
        assert data["borrower_id"] == "M001"
        assert data["available"] is False
        assert data["title"] == "Kotlin Programming"


class TestBookBorrow:
    """Borrowing updates the book and the member together, or neither."""

    def test_borrow_available_book(self, kotlin_programming, alice):
        kotlin_programming.borrow(alice)

        assert kotlin_programming.available is False
        assert kotlin_programming.borrower is alice
        assert alice.borrowed_books == [kotlin_programming]

    def test_borrow_unavailable_book(self, kotlin_programming, alice):
        bob = Member(name="Bob", member_id="M002")
        kotlin_programming.borrow(alice)

        with pytest.raises(BookUnavailableError) as exc_info:
            kotlin_programming.borrow(bob)

        assert exc_info.value.kind is LendingErrorKind.BOOK_UNAVAILABLE
        assert kotlin_programming.borrower is alice
        assert bob.borrowed_books == []

    def test_member_with_zero_capacity_leaves_book_untouched(self, kotlin_programming):
        """A member who cannot borrow never ends up as the borrower of record."""
        member = Member(name="Carol", member_id="M003", max_books=0)

        with pytest.raises(MemberAtCapacityError) as exc_info:
            kotlin_programming.borrow(member)

        assert exc_info.value.kind is LendingErrorKind.MEMBER_AT_CAPACITY
        assert kotlin_programming.available is True
        assert kotlin_programming.borrower is None
        assert member.borrowed_books == []

    def test_member_at_capacity_leaves_book_untouched(self, alice):
        books = [Book(title=f"Volume {n}", author="Anon", isbn=str(n)) for n in range(4)]
        for book in books[:3]:
            book.borrow(alice)

        with pytest.raises(MemberAtCapacityError):
            books[3].borrow(alice)

        assert books[3].available is True
        assert books[3].borrower is None
        assert len(alice.borrowed_books) == 3

    def test_refusals_are_logged(self, kotlin_programming, alice, caplog):
        carol = Member(name="Carol", member_id="M003", max_books=0)

        with caplog.at_level("INFO", logger="lending_library.models.book"):
            with pytest.raises(MemberAtCapacityError):
                kotlin_programming.borrow(carol)
            kotlin_programming.borrow(alice)
            with pytest.raises(BookUnavailableError):
                kotlin_programming.borrow(carol)

        assert "Carol (M003) holds 0 of 0 books" in caplog.text
        assert "'Kotlin Programming' is already on loan" in caplog.text


class TestBookReturn:
    """Returning puts the copy back and fans out notifications."""

    def test_return_clears_both_sides(self, kotlin_programming, alice):
        kotlin_programming.borrow(alice)
        kotlin_programming.return_book()

        assert kotlin_programming.available is True
        assert kotlin_programming.borrower is None
        assert alice.borrowed_books == []

    def test_return_of_book_never_lent(self, kotlin_programming, recorder):
        kotlin_programming.add_observer(recorder)
        kotlin_programming.return_book()

        assert kotlin_programming.available is True
        assert recorder.seen == [kotlin_programming]

    def test_return_notifies_observers_in_order(self, kotlin_programming, alice):
        calls: list[str] = []

        class Named:
            def __init__(self, label: str) -> None:
                self.label = label

            def update(self, book: Book) -> None:
                calls.append(self.label)

        kotlin_programming.add_observer(Named("first"))
        kotlin_programming.add_observer(Named("second"))
        kotlin_programming.borrow(alice)
        kotlin_programming.return_book()

        assert calls == ["first", "second"]

    def test_observer_sees_book_already_available(self, kotlin_programming, alice):
        states: list[tuple[bool, object]] = []

        class Probe:
            def update(self, book: Book) -> None:
                states.append((book.is_available, book.borrower))

        kotlin_programming.add_observer(Probe())
        kotlin_programming.borrow(alice)
        kotlin_programming.return_book()

        assert states == [(True, None)]

    def test_observer_error_propagates_after_state_change(self, kotlin_programming, alice):
        class Broken:
            def update(self, book: Book) -> None:
                raise RuntimeError("observer failed")

        kotlin_programming.add_observer(Broken())
        kotlin_programming.borrow(alice)

        with pytest.raises(RuntimeError, match="observer failed"):
            kotlin_programming.return_book()

        assert kotlin_programming.available is True
        assert kotlin_programming.borrower is None
        assert alice.borrowed_books == []


class TestBookObservers:
    """Observer registration."""

    def test_duplicate_registration_notifies_twice(self, kotlin_programming, recorder):
        kotlin_programming.add_observer(recorder)
        kotlin_programming.add_observer(recorder)

        kotlin_programming.return_book()

        assert recorder.seen == [kotlin_programming, kotlin_programming]

    def test_remove_observer_drops_one_registration(self, kotlin_programming, recorder):
        kotlin_programming.add_observer(recorder)
        kotlin_programming.add_observer(recorder)

        kotlin_programming.remove_observer(recorder)
        assert kotlin_programming.observers == (recorder,)

        kotlin_programming.remove_observer(recorder)
        kotlin_programming.remove_observer(recorder)
        assert kotlin_programming.observers == ()

    def test_members_and_custom_observers_satisfy_protocol(self, alice, recorder):
        assert isinstance(alice, AvailabilityObserver)
        assert isinstance(recorder, AvailabilityObserver)
        assert not isinstance(object(), AvailabilityObserver)
