"""
Account endpoints for API v1.

Lists accounts ordered by last name and serves the per‑account page:
the lifetime borrow count and the books the account holds right now.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from library_stats_api.app.core.catalog import Catalog, get_catalog
from library_stats_api.app.schemas.account import Account, AccountSummary
from library_stats_api.app.services.account_service import AccountService

router = APIRouter()


@router.get("/", response_model=List[Account])
async def list_accounts(catalog: Catalog = Depends(get_catalog)) -> List[Account]:
    """Return all accounts sorted by last name, case insensitive."""
    return AccountService.sort_accounts_by_last_name(catalog.accounts)


@router.get("/{account_id}", response_model=AccountSummary)
async def get_account(account_id: int, catalog: Catalog = Depends(get_catalog)) -> AccountSummary:
    """Return the account page for ``account_id``.  Raises 404 if unknown."""
    account = AccountService.find_account_by_id(catalog.accounts, account_id)
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Account not found")
    return AccountService.account_summary(account, catalog.books, catalog.authors)
