"""
Shared pieces of the catalog records.
"""

from pydantic import BaseModel, Field


class PersonName(BaseModel):
    first: str = Field(..., examples=["Esther"])
    last: str = Field(..., examples=["Tucker"])

    @property
    def full(self) -> str:
        """Display form used on the statistics pages: ``"first last"``."""
        return f"{self.first} {self.last}"


class RankedItem(BaseModel):
    """One row of a top‑N ranking."""

    name: str
    count: int
