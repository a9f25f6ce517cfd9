"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries and returns domain models (not
SQLAlchemy entities) to callers. Every write is a single statement that
is committed on its own.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete as sa_delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from fieldbook.db.schema import Base, Business, Customer, Officer
from fieldbook.errors import FieldbookError
from fieldbook.models.domain import BusinessEntity, CustomerEntity, OfficerEntity

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]

logger = logging.getLogger(__name__)

# Dialects with a native INSERT ... ON CONFLICT DO UPDATE.
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _business_to_entity(business: Business) -> BusinessEntity:
    """Convert SQLAlchemy Business to domain entity."""
    return BusinessEntity(name=business.name, icon=business.icon)


def _officer_to_entity(officer: Officer) -> OfficerEntity:
    """Convert SQLAlchemy Officer to domain entity."""
    return OfficerEntity(
        id=officer.id,
        full_name=officer.full_name,
        territory=officer.territory,
        password=officer.password,
        role=officer.role,
        business=officer.business,
    )


def _customer_to_entity(customer: Customer) -> CustomerEntity:
    """Convert SQLAlchemy Customer to domain entity."""
    return CustomerEntity(
        id=customer.id,
        customer_no=customer.customer_no,
        name=customer.name,
        date=customer.date,
        address=customer.address,
        model=customer.model,
        sale_type=customer.sale_type,
        officer_id=customer.officer_id,
        officer_name=customer.officer_name,
        business=customer.business,
        visit_completed=customer.visit_completed,
        customer_type=customer.customer_type,
        field_visit_notes=customer.field_visit_notes,
        booking_info=customer.booking_info,
        delivery_info=customer.delivery_info,
    )


# ============================================================================
# Generic write helpers
# ============================================================================


def upsert(session: DbSession, model: type[Base], key: str, values: dict[str, Any]) -> None:
    """Insert a row, or overwrite every non-key column if the key exists.

    Args:
        session: Database session.
        model: Mapped table class.
        key: Name of the unique key column used for conflict detection.
        values: Column values for the row, including the key.

    Raises:
        FieldbookError: If the store's dialect has no ON CONFLICT support.
    """
    dialect = session.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect)
    if insert is None:
        raise FieldbookError(f"Upsert is not supported for dialect {dialect!r}")

    stmt = insert(model).values(**values)
    updates = {column: stmt.excluded[column] for column in values if column != key}
    if updates:
        stmt = stmt.on_conflict_do_update(index_elements=[key], set_=updates)
    else:
        stmt = stmt.on_conflict_do_nothing(index_elements=[key])

    session.execute(stmt)
    session.commit()
    logger.info(f"Upserted {model.__tablename__} {key}={values.get(key)!r}")


def delete_by_key(session: DbSession, model: type[Base], key: str, value: str) -> None:
    """Delete the row whose key column equals value. Missing rows are ignored."""
    column = getattr(model, key)
    result = session.execute(sa_delete(model).where(column == value))
    session.commit()
    logger.info(f"Deleted {result.rowcount} {model.__tablename__} row(s) where {key}={value!r}")


# ============================================================================
# Business Repository
# ============================================================================


def list_businesses(session: DbSession) -> list[BusinessEntity]:
    """Get all businesses."""
    businesses = session.query(Business).all()
    return [_business_to_entity(b) for b in businesses]


def upsert_business(session: DbSession, entity: BusinessEntity) -> None:
    """Create or update a business keyed on name."""
    upsert(session, Business, "name", asdict(entity))


def delete_business(session: DbSession, name: str) -> None:
    """Delete a business. Its officers and customers are left in place."""
    delete_by_key(session, Business, "name", name)


# ============================================================================
# Officer Repository
# ============================================================================


def list_officers(session: DbSession) -> list[OfficerEntity]:
    """Get all officers."""
    officers = session.query(Officer).all()
    return [_officer_to_entity(o) for o in officers]


def upsert_officer(session: DbSession, entity: OfficerEntity) -> None:
    """Create or update an officer keyed on id."""
    upsert(session, Officer, "id", asdict(entity))


def delete_officer(session: DbSession, officer_id: str) -> None:
    """Delete an officer by id."""
    delete_by_key(session, Officer, "id", officer_id)


# ============================================================================
# Customer Repository
# ============================================================================


def list_customers(session: DbSession, business: str | None = None) -> list[CustomerEntity]:
    """Get customers, optionally only those belonging to one business."""
    query = session.query(Customer)
    if business:
        query = query.filter(Customer.business == business)
    return [_customer_to_entity(c) for c in query.all()]


def upsert_customer(session: DbSession, entity: CustomerEntity) -> None:
    """Create or update a customer keyed on id.

    An empty visit status is stored as the default ("No").
    """
    upsert(session, Customer, "id", asdict(entity.with_defaults()))


def delete_customer(session: DbSession, customer_id: str) -> None:
    """Delete a customer by id."""
    delete_by_key(session, Customer, "id", customer_id)
