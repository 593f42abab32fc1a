"""
Tests for book/author lookups, the borrowed/available split and the
borrower history.
"""

from library_stats_api.app.services.book_service import BookService

from conftest import make_book


class TestLookups:
    def test_find_author_by_id(self, authors):
        assert BookService.find_author_by_id(authors, 2) is authors[1]
        assert BookService.find_author_by_id(authors, 5) is None

    def test_find_book_by_id(self, books):
        assert BookService.find_book_by_id(books, 3) is books[2]
        assert BookService.find_book_by_id(books, 0) is None
        assert BookService.find_book_by_id([], 1) is None


class TestPartitionBooksByBorrowedStatus:
    def test_splits_on_latest_borrow(self, books):
        borrowed, available = BookService.partition_books_by_borrowed_status(books)
        assert [b.id for b in borrowed] == [1, 3]
        assert [b.id for b in available] == [2, 4]

    def test_every_book_in_exactly_one_list(self, books):
        borrowed, available = BookService.partition_books_by_borrowed_status(books)
        ids = [b.id for b in borrowed + available]
        assert sorted(ids) == [b.id for b in books]
        assert not {b.id for b in borrowed} & {b.id for b in available}

    def test_never_borrowed_book_is_available(self):
        borrowed, available = BookService.partition_books_by_borrowed_status([make_book(9)])
        assert borrowed == []
        assert [b.id for b in available] == [9]

    def test_only_most_recent_record_matters(self):
        book = make_book(1, [(1, True), (2, False), (3, False)])
        borrowed, available = BookService.partition_books_by_borrowed_status([book])
        assert borrowed == []
        assert available == [book]


class TestGetBorrowersForBook:
    def test_merges_account_fields_in_stored_order(self, books, accounts):
        borrowers = BookService.get_borrowers_for_book(books[0], accounts)
        assert [(b.id, b.returned) for b in borrowers] == [(2, False), (1, True), (3, True)]
        assert borrowers[0].name == accounts[1].name
        assert borrowers[1].model_extra["email"] == "ada@example.com"
        assert borrowers[1].model_extra["age"] == 31

    def test_unknown_account_keeps_only_borrow_fields(self, accounts):
        book = make_book(1, [(77, True)])
        (borrower,) = BookService.get_borrowers_for_book(book, accounts)
        assert borrower.id == 77
        assert borrower.returned is True
        assert borrower.name is None
        assert borrower.model_extra == {}

    def test_keeps_the_ten_most_recent(self, accounts):
        history = [(1, True) if i % 2 else (2, True) for i in range(12)]
        history[0] = (3, False)
        book = make_book(1, history)
        borrowers = BookService.get_borrowers_for_book(book, accounts)
        assert len(borrowers) == 10
        assert [(b.id, b.returned) for b in borrowers] == history[:10]

    def test_custom_limit(self, books, accounts):
        borrowers = BookService.get_borrowers_for_book(books[0], accounts, limit=1)
        assert [b.id for b in borrowers] == [2]

    def test_never_borrowed_book(self, accounts):
        assert BookService.get_borrowers_for_book(make_book(1), accounts) == []


class TestBookDetail:
    def test_collects_author_and_borrowers(self, books, accounts, authors):
        detail = BookService.book_detail(books[2], accounts, authors)
        assert detail.book == books[2]
        assert detail.author == authors[1]
        assert [b.id for b in detail.borrowers] == [1, 2]

    def test_unknown_author_is_logged(self, accounts, caplog):
        book = make_book(5, [(1, True)], author_id=42)
        with caplog.at_level("WARNING"):
            detail = BookService.book_detail(book, accounts, [])
        assert detail.author is None
        assert "unknown author 42" in caplog.text


def test_negative_borrowers_limit_lists_nobody(books, accounts):
    assert BookService.get_borrowers_for_book(books[0], accounts, limit=-3) == []
