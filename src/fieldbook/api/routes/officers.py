"""Officers API endpoints.

GET /api/officers - List all officers
POST /api/officers - Create or replace an officer
DELETE /api/officers/{officer_id} - Delete an officer
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from fieldbook.api.app import get_db_session
from fieldbook.db import repo
from fieldbook.db.repo import DbSession
from fieldbook.models.domain import OfficerEntity
from fieldbook.models.types import OfficerRecord, SuccessResponse

router = APIRouter()


@router.get("/officers", response_model=list[OfficerRecord])
def list_officers(session: DbSession = Depends(get_db_session)) -> list[OfficerRecord]:
    """List every officer."""
    return [OfficerRecord(**asdict(o)) for o in repo.list_officers(session)]


@router.post("/officers", response_model=SuccessResponse)
def save_officer(
    officer: OfficerRecord,
    session: DbSession = Depends(get_db_session),
) -> SuccessResponse:
    """Create an officer, or overwrite the one with the same id.

    Args:
        officer: Officer fields from the request body.
        session: Database session (injected).
    """
    repo.upsert_officer(session, OfficerEntity(**officer.model_dump()))
    return SuccessResponse()


@router.delete("/officers/{officer_id}", response_model=SuccessResponse)
def delete_officer(
    officer_id: str,
    session: DbSession = Depends(get_db_session),
) -> SuccessResponse:
    """Delete an officer. Deleting an unknown id still succeeds."""
    repo.delete_officer(session, officer_id)
    return SuccessResponse()
