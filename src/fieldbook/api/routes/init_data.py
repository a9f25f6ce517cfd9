"""Bootstrap data endpoint.

GET /api/init - Businesses, their icons, and all officers
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from fieldbook.api.app import get_db_session
from fieldbook.db import repo
from fieldbook.db.repo import DbSession
from fieldbook.models.types import InitData, OfficerRecord

router = APIRouter()


@router.get("/init", response_model=InitData)
def get_init_data(session: DbSession = Depends(get_db_session)) -> InitData:
    """Get the reference data a client needs at startup.

    Args:
        session: Database session (injected).

    Returns:
        InitData with business names, an icon map for businesses that
        have one, and every officer.
    """
    businesses = repo.list_businesses(session)
    officers = repo.list_officers(session)

    return InitData(
        businesses=[b.name for b in businesses],
        icons={b.name: b.icon for b in businesses if b.icon},
        officers=[OfficerRecord(**asdict(o)) for o in officers],
    )
