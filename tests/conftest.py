"""
Pytest fixtures shared by the service and API tests.

The catalog built here is small enough to reason about by hand:

* book 1 is out with account 2 and has been borrowed three times,
* book 2 is back on the shelf,
* book 3 is out with account 1,
* book 4 has never been borrowed.
"""

import pytest

from library_stats_api.app.core.catalog import Catalog
from library_stats_api.app.schemas.account import Account
from library_stats_api.app.schemas.author import Author
from library_stats_api.app.schemas.book import Book


def make_book(book_id, borrows=(), genre="Science", author_id=1, title=None):
    """Build a ``Book`` from plain ``(account_id, returned)`` pairs."""
    return Book.model_validate(
        {
            "id": book_id,
            "title": title or f"book {book_id}",
            "genre": genre,
            "authorId": author_id,
            "borrows": [{"id": account_id, "returned": returned} for account_id, returned in borrows],
        }
    )


@pytest.fixture
def accounts():
    return [
        Account.model_validate(
            {"id": 1, "name": {"first": "Ada", "last": "Tucker"}, "email": "ada@example.com", "age": 31}
        ),
        Account.model_validate({"id": 2, "name": {"first": "Bo", "last": "adkins"}}),
        Account.model_validate({"id": 3, "name": {"first": "Cy", "last": "Morris"}}),
    ]


@pytest.fixture
def authors():
    return [
        Author.model_validate({"id": 1, "name": {"first": "Lucia", "last": "Moreno"}}),
        Author.model_validate({"id": 2, "name": {"first": "Trisha", "last": "Mathis"}}),
    ]


@pytest.fixture
def books():
    return [
        make_book(1, [(2, False), (1, True), (3, True)], genre="Science", author_id=1),
        make_book(2, [(1, True)], genre="Poetry", author_id=2),
        make_book(3, [(1, False), (2, True)], genre="Science", author_id=2),
        make_book(4, [], genre="Travel", author_id=1),
    ]


@pytest.fixture
def catalog(accounts, books, authors):
    return Catalog(accounts=accounts, books=books, authors=authors)
