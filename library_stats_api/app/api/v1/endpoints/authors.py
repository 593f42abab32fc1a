"""
Author endpoint for API v1.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from library_stats_api.app.core.catalog import Catalog, get_catalog
from library_stats_api.app.schemas.author import Author
from library_stats_api.app.services.book_service import BookService

router = APIRouter()


@router.get("/{author_id}", response_model=Author)
async def get_author(author_id: int, catalog: Catalog = Depends(get_catalog)) -> Author:
    author = BookService.find_author_by_id(catalog.authors, author_id)
    if author is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")
    return author
