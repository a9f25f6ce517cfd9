"""Businesses API endpoints.

POST /api/businesses - Create a business or update its icon
DELETE /api/businesses/{name} - Delete a business
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fieldbook.api.app import get_db_session
from fieldbook.db import repo
from fieldbook.db.repo import DbSession
from fieldbook.models.domain import BusinessEntity
from fieldbook.models.types import BusinessRecord, SuccessResponse

router = APIRouter()


@router.post("/businesses", response_model=SuccessResponse)
def save_business(
    business: BusinessRecord,
    session: DbSession = Depends(get_db_session),
) -> SuccessResponse:
    """Create a business keyed on name, or replace its icon."""
    repo.upsert_business(session, BusinessEntity(name=business.name, icon=business.icon))
    return SuccessResponse()


@router.delete("/businesses/{name}", response_model=SuccessResponse)
def delete_business(
    name: str,
    session: DbSession = Depends(get_db_session),
) -> SuccessResponse:
    """Delete a business.

    Officers and customers that reference it are kept.
    """
    repo.delete_business(session, name)
    return SuccessResponse()
