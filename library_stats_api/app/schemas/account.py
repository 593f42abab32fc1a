"""
Pydantic models for library accounts and the account page.

Source catalogs carry more than the id and the name (picture, age,
company, email, registration date).  Those fields are not used by the
queries but are kept on the model so they reach the borrower listings
and the API responses untouched.
"""

from typing import List

from pydantic import BaseModel, Field

from library_stats_api.app.schemas.book import BookWithAuthor
from library_stats_api.app.schemas.common import PersonName


class Account(BaseModel):
    id: int = Field(..., examples=[12])
    name: PersonName

    model_config = {
        "extra": "allow",
    }


class AccountSummary(BaseModel):
    """Everything the account page shows."""

    account: Account
    borrow_count: int
    books_possessed: List[BookWithAuthor]
