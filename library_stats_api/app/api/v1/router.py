"""
Top‑level router for version 1 of the API.

This router aggregates the page routers under a unified prefix.  When
a new page is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import accounts, authors, books, home

router = APIRouter()

router.include_router(home.router, prefix="/home", tags=["home"])
router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
router.include_router(books.router, prefix="/books", tags=["books"])
router.include_router(authors.router, prefix="/authors", tags=["authors"])
