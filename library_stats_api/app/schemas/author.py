"""
Pydantic model for catalog authors.
"""

from pydantic import BaseModel, Field

from library_stats_api.app.schemas.common import PersonName


class Author(BaseModel):
    """An author referenced by ``Book.author_id``."""

    id: int = Field(..., examples=[4])
    name: PersonName
