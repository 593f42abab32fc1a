"""
Pydantic model for the home page summary.
"""

from typing import List

from pydantic import BaseModel

from library_stats_api.app.schemas.common import RankedItem


class HomeSummary(BaseModel):
    total_books: int
    total_accounts: int
    books_borrowed: int
    most_common_genres: List[RankedItem]
    most_popular_books: List[RankedItem]
    most_popular_authors: List[RankedItem]
