"""
Service layer for catalog‑wide statistics.

This module provides the figures shown on the home page: collection
sizes, the number of books currently out, and three top‑N rankings
(genres, books, authors).

Every ranking is built the same way: counts are accumulated into a
mapping keyed by the group, the entries are sorted by count in
descending order and the list is cut to ``limit`` entries.  Python's
sort is stable, so groups with equal counts stay in the order they
were first seen.

Genres and authors are merged by key; books are not, so two books with
the same title appear as two separate entries.  Authors are grouped by
id and labelled with their display name, which keeps two different
authors with the same printed name apart.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence

from library_stats_api.app.schemas.account import Account
from library_stats_api.app.schemas.author import Author
from library_stats_api.app.schemas.book import Book
from library_stats_api.app.schemas.common import RankedItem
from library_stats_api.app.schemas.statistics import HomeSummary
from library_stats_api.app.services.book_service import BookService

# Length of each ranking on the home page.
DEFAULT_RANKING_LIMIT = 5


class StatisticsService:
    """Aggregated counts and rankings over the whole catalog."""

    @classmethod
    def total_books_count(cls, books: Sequence[Book]) -> int:
        return len(books)

    @classmethod
    def total_accounts_count(cls, accounts: Sequence[Account]) -> int:
        return len(accounts)

    @classmethod
    def books_borrowed_count(cls, books: Sequence[Book]) -> int:
        """Count books whose latest borrow is not returned yet."""
        return sum(1 for book in books if book.is_borrowed)

    @classmethod
    def top_n(cls, items: Iterable[RankedItem], limit: int) -> List[RankedItem]:
        """Sort ``items`` by count, highest first, and keep ``limit`` of them.

        Ties keep their incoming order.  A negative ``limit`` yields an
        empty list.
        """
        ranked = sorted(items, key=lambda item: item.count, reverse=True)
        return ranked[:max(limit, 0)]

    @classmethod
    def get_most_common_genres(
        cls, books: Sequence[Book], limit: int = DEFAULT_RANKING_LIMIT
    ) -> List[RankedItem]:
        counts: Dict[str, int] = {}
        for book in books:
            counts[book.genre] = counts.get(book.genre, 0) + 1
        return cls.top_n(
            (RankedItem(name=genre, count=count) for genre, count in counts.items()),
            limit,
        )

    @classmethod
    def get_most_popular_books(
        cls, books: Sequence[Book], limit: int = DEFAULT_RANKING_LIMIT
    ) -> List[RankedItem]:
        """Rank books by how many times they were ever borrowed."""
        return cls.top_n(
            (RankedItem(name=book.title, count=len(book.borrows)) for book in books),
            limit,
        )

    @classmethod
    def get_most_popular_authors(
        cls,
        books: Sequence[Book],
        authors: Sequence[Author],
        limit: int = DEFAULT_RANKING_LIMIT,
    ) -> List[RankedItem]:
        """Rank authors by the total number of borrows of their books.

        Books pointing at an unknown author are left out of the ranking.
        """
        logger = logging.getLogger(__name__)
        names: Dict[int, str] = {}
        counts: Dict[int, int] = {}
        for book in books:
            if book.author_id not in names:
                author = BookService.find_author_by_id(authors, book.author_id)
                if author is None:
                    logger.warning(
                        "Skipping book %s: unknown author %s", book.id, book.author_id
                    )
                    continue
                names[book.author_id] = author.name.full
            counts[book.author_id] = counts.get(book.author_id, 0) + len(book.borrows)
        return cls.top_n(
            (RankedItem(name=names[author_id], count=count) for author_id, count in counts.items()),
            limit,
        )

    @classmethod
    def home_summary(
        cls,
        accounts: Sequence[Account],
        books: Sequence[Book],
        authors: Sequence[Author],
        limit: int = DEFAULT_RANKING_LIMIT,
    ) -> HomeSummary:
        """Collect the data shown on the home page."""
        return HomeSummary(
            total_books=cls.total_books_count(books),
            total_accounts=cls.total_accounts_count(accounts),
            books_borrowed=cls.books_borrowed_count(books),
            most_common_genres=cls.get_most_common_genres(books, limit),
            most_popular_books=cls.get_most_popular_books(books, limit),
            most_popular_authors=cls.get_most_popular_authors(books, authors, limit),
        )
