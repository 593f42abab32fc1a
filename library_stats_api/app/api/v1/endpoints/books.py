"""
Book endpoints for API v1.

The listing splits the catalog into borrowed and available books; the
detail route serves the per‑book page with the author and the most
recent borrowers.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from library_stats_api.app.core.catalog import Catalog, get_catalog
from library_stats_api.app.core.config import settings
from library_stats_api.app.schemas.book import BookDetail, BooksPartition
from library_stats_api.app.services.book_service import BookService

router = APIRouter()


@router.get("/", response_model=BooksPartition)
async def list_books(catalog: Catalog = Depends(get_catalog)) -> BooksPartition:
    borrowed, available = BookService.partition_books_by_borrowed_status(catalog.books)
    return BooksPartition(borrowed=borrowed, available=available)


@router.get("/{book_id}", response_model=BookDetail)
async def get_book(book_id: int, catalog: Catalog = Depends(get_catalog)) -> BookDetail:
    """Return the book page for ``book_id``.

    At most ``settings.borrowers_limit`` borrowers are listed, newest
    first.  Raises 404 if the book is unknown.
    """
    book = BookService.find_book_by_id(catalog.books, book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return BookService.book_detail(
        book,
        catalog.accounts,
        catalog.authors,
        borrowers_limit=settings.borrowers_limit,
    )
