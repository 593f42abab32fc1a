"""
Pydantic models for books, their borrow history and the book page.

A book's ``borrows`` list is ordered newest first: ``borrows[0]`` is
the current loan state of the book.  The JSON catalog uses the key
``authorId``; the model exposes it as ``author_id`` and serializes it
back under the original key.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from library_stats_api.app.schemas.author import Author
from library_stats_api.app.schemas.common import PersonName


class Borrow(BaseModel):
    """A single loan event; ``id`` is the borrowing account's id."""

    id: int = Field(..., examples=[12])
    returned: bool = Field(..., examples=[False])


class Book(BaseModel):
    id: int = Field(..., examples=[1])
    title: str = Field(..., examples=["ullamco est minim"])
    genre: str = Field(..., examples=["Science"])
    author_id: int = Field(..., alias="authorId", examples=[4])
    borrows: List[Borrow] = Field(default_factory=list)

    model_config = {
        "populate_by_name": True,
    }

    @property
    def current_borrow(self) -> Optional[Borrow]:
        """Most recent borrow record, or ``None`` if never borrowed."""
        return self.borrows[0] if self.borrows else None

    @property
    def is_borrowed(self) -> bool:
        # A book that was never lent out sits on the shelf.
        current = self.current_borrow
        return current is not None and not current.returned


class BookWithAuthor(Book):
    """A book enriched with its resolved author (``None`` if unknown)."""

    author: Optional[Author] = None


class Borrower(BaseModel):
    """A borrow record merged with the fields of the borrowing account.

    When the account cannot be resolved only ``id`` and ``returned``
    are present.  Any additional account fields are carried through.
    """

    id: int
    returned: bool
    name: Optional[PersonName] = None

    model_config = {
        "extra": "allow",
    }


class BooksPartition(BaseModel):
    """Books split by their current loan state."""

    borrowed: List[Book]
    available: List[Book]


class BookDetail(BaseModel):
    """Everything the book page shows."""

    book: Book
    author: Optional[Author] = None
    borrowers: List[Borrower]
