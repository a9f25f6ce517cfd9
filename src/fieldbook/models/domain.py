"""Domain models for Fieldbook.

Pure Python dataclasses representing stored rows. These are independent
of SQLAlchemy and are what the repository hands back to the API layer.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

# Stored when a customer is written without a visit status.
DEFAULT_VISIT_COMPLETED = "No"


# ============================================================================
# Business Domain
# ============================================================================


@dataclass
class BusinessEntity:
    """Domain model for a business."""

    name: str
    icon: str | None = None


# ============================================================================
# Officer Domain
# ============================================================================


@dataclass
class OfficerEntity:
    """Domain model for a field officer."""

    id: str
    full_name: str | None = None
    territory: str | None = None
    password: str | None = None
    role: str | None = None
    business: str | None = None


# ============================================================================
# Customer Domain
# ============================================================================


@dataclass
class CustomerEntity:
    """Domain model for a customer."""

    id: str
    customer_no: str | None = None
    name: str | None = None
    date: str | None = None
    address: str | None = None
    model: str | None = None
    sale_type: str | None = None
    officer_id: str | None = None
    officer_name: str | None = None
    business: str | None = None
    visit_completed: str | None = None
    customer_type: str | None = None
    field_visit_notes: str | None = None
    booking_info: str | None = None
    delivery_info: str | None = None

    def with_defaults(self) -> CustomerEntity:
        """Return a copy with an empty visit status replaced by the default."""
        if self.visit_completed:
            return self
        return replace(self, visit_completed=DEFAULT_VISIT_COMPLETED)
