"""
Service layer for account queries.

Lookups, ordering and borrow counting over the account collection,
plus the summary shown on the per‑account page.  Lookups return
``None`` for unknown ids instead of raising.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from library_stats_api.app.schemas.account import Account, AccountSummary
from library_stats_api.app.schemas.author import Author
from library_stats_api.app.schemas.book import Book, BookWithAuthor


class AccountService:
    """Queries over accounts and the books they borrowed."""

    @classmethod
    def find_account_by_id(cls, accounts: Sequence[Account], account_id: int) -> Optional[Account]:
        """Return the first account with ``account_id`` or ``None``."""
        return next((account for account in accounts if account.id == account_id), None)

    @classmethod
    def sort_accounts_by_last_name(cls, accounts: Sequence[Account]) -> List[Account]:
        """Return a new list of accounts ordered by last name.

        Comparison is case insensitive.  ``sorted`` is stable, so
        accounts sharing a last name keep their relative input order.
        The input sequence is left as it was.
        """
        return sorted(accounts, key=lambda account: account.name.last.lower())

    @classmethod
    def number_of_borrows(cls, account: Account, books: Sequence[Book]) -> int:
        """Count every borrow record made by ``account`` across all books.

        This is the lifetime total, including loans already returned.
        """
        return sum(
            1
            for book in books
            for borrow in book.borrows
            if borrow.id == account.id
        )

    @classmethod
    def get_books_possessed_by_account(
        cls,
        account: Account,
        books: Sequence[Book],
        authors: Sequence[Author],
    ) -> List[BookWithAuthor]:
        """Return the books whose current borrower is ``account``.

        Each result keeps the book's fields and full borrow history and
        carries its resolved author.  Books never borrowed are skipped.
        """
        possessed: List[BookWithAuthor] = []
        for book in books:
            current = book.current_borrow
            if current is None or current.id != account.id:
                continue
            author = next((a for a in authors if a.id == book.author_id), None)
            possessed.append(BookWithAuthor(**book.model_dump(), author=author))
        return possessed

    @classmethod
    def account_summary(
        cls,
        account: Account,
        books: Sequence[Book],
        authors: Sequence[Author],
    ) -> AccountSummary:
        """Collect the data shown on the account page."""
        logger = logging.getLogger(__name__)
        summary = AccountSummary(
            account=account,
            borrow_count=cls.number_of_borrows(account, books),
            books_possessed=cls.get_books_possessed_by_account(account, books, authors),
        )
        logger.debug(
            "Account %s: %d borrows, %d books in hand",
            account.id,
            summary.borrow_count,
            len(summary.books_possessed),
        )
        return summary
