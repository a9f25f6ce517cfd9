"""Customers API endpoints.

GET /api/customers - List customers, optionally for one business
POST /api/customers - Create or replace a customer
DELETE /api/customers/{customer_id} - Delete a customer
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from fieldbook.api.app import get_db_session
from fieldbook.db import repo
from fieldbook.db.repo import DbSession
from fieldbook.models.domain import CustomerEntity
from fieldbook.models.types import CustomerRecord, SuccessResponse

router = APIRouter()


@router.get("/customers", response_model=list[CustomerRecord])
def list_customers(
    business: str | None = None,
    session: DbSession = Depends(get_db_session),
) -> list[CustomerRecord]:
    """List customers.

    Args:
        business: Only return customers of this business. Empty means all.
        session: Database session (injected).

    Returns:
        Customer rows in store order.
    """
    customers = repo.list_customers(session, business=business)
    return [CustomerRecord(**asdict(c)) for c in customers]


@router.post("/customers", response_model=SuccessResponse)
def save_customer(
    customer: CustomerRecord,
    session: DbSession = Depends(get_db_session),
) -> SuccessResponse:
    """Create a customer, or overwrite the one with the same id.

    Args:
        customer: Customer fields from the request body.
        session: Database session (injected).
    """
    repo.upsert_customer(session, CustomerEntity(**customer.model_dump()))
    return SuccessResponse()


@router.delete("/customers/{customer_id}", response_model=SuccessResponse)
def delete_customer(
    customer_id: str,
    session: DbSession = Depends(get_db_session),
) -> SuccessResponse:
    """Delete a customer. Deleting an unknown id still succeeds."""
    repo.delete_customer(session, customer_id)
    return SuccessResponse()
