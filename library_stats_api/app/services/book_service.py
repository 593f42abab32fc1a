"""
Service layer for book and borrow queries.

Book and author lookups, the borrowed/available split used on the
books listing, and the borrower history shown on the per‑book page.
Borrower entries are joined against the accounts through
``AccountService``.

A book's ``borrows`` list is newest first.  A book with an empty
history counts as available.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from library_stats_api.app.schemas.account import Account
from library_stats_api.app.schemas.author import Author
from library_stats_api.app.schemas.book import Book, BookDetail, Borrower
from library_stats_api.app.services.account_service import AccountService

# Number of borrow records listed on the book page.
DEFAULT_BORROWERS_LIMIT = 10


class BookService:
    """Queries over books, their authors and their borrowers."""

    @classmethod
    def find_author_by_id(cls, authors: Sequence[Author], author_id: int) -> Optional[Author]:
        return next((author for author in authors if author.id == author_id), None)

    @classmethod
    def find_book_by_id(cls, books: Sequence[Book], book_id: int) -> Optional[Book]:
        return next((book for book in books if book.id == book_id), None)

    @classmethod
    def partition_books_by_borrowed_status(
        cls, books: Sequence[Book]
    ) -> Tuple[List[Book], List[Book]]:
        """Split ``books`` into ``(borrowed, available)``.

        Every book lands in exactly one of the two lists, in input
        order.  A book is available when its latest borrow has been
        returned or when it has never been borrowed.
        """
        borrowed: List[Book] = []
        available: List[Book] = []
        for book in books:
            (borrowed if book.is_borrowed else available).append(book)
        return borrowed, available

    @classmethod
    def get_borrowers_for_book(
        cls,
        book: Book,
        accounts: Sequence[Account],
        limit: int = DEFAULT_BORROWERS_LIMIT,
    ) -> List[Borrower]:
        """Return the borrow history of ``book`` joined with account data.

        Entries follow the stored order and are cut to the first
        ``limit`` records, which are the most recent ones.  Each entry
        holds the borrow ``id`` and ``returned`` flag followed by the
        account's fields; unknown accounts contribute nothing beyond
        those two keys.
        """
        borrowers: List[Borrower] = []
        for borrow in book.borrows[:max(limit, 0)]:
            account = AccountService.find_account_by_id(accounts, borrow.id)
            fields = {"id": borrow.id, "returned": borrow.returned}
            if account is not None:
                fields.update(account.model_dump())
            borrowers.append(Borrower(**fields))
        return borrowers

    @classmethod
    def book_detail(
        cls,
        book: Book,
        accounts: Sequence[Account],
        authors: Sequence[Author],
        borrowers_limit: int = DEFAULT_BORROWERS_LIMIT,
    ) -> BookDetail:
        """Collect the data shown on the book page."""
        logger = logging.getLogger(__name__)
        author = cls.find_author_by_id(authors, book.author_id)
        if author is None:
            logger.warning("Book %s references unknown author %s", book.id, book.author_id)
        return BookDetail(
            book=book,
            author=author,
            borrowers=cls.get_borrowers_for_book(book, accounts, limit=borrowers_limit),
        )
