"""
Home page endpoint for API v1.

Returns the catalog totals together with the genre, book and author
rankings.
"""

from fastapi import APIRouter, Depends

from library_stats_api.app.core.catalog import Catalog, get_catalog
from library_stats_api.app.core.config import settings
from library_stats_api.app.schemas.statistics import HomeSummary
from library_stats_api.app.services.statistics_service import StatisticsService

router = APIRouter()


@router.get("/", response_model=HomeSummary)
async def get_home(catalog: Catalog = Depends(get_catalog)) -> HomeSummary:
    """Return the home page summary.

    Rankings are cut to ``settings.ranking_limit`` entries.
    """
    return StatisticsService.home_summary(
        catalog.accounts,
        catalog.books,
        catalog.authors,
        limit=settings.ranking_limit,
    )
