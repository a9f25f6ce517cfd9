#!/usr/bin/env python3
"""Seed demo reference data.

Usage:
    DATABASE_URL=sqlite:///demo.db python scripts/seed_demo.py

This script:
1. Creates the businesses, officers and customers tables if missing
2. Upserts a demo business with an icon
3. Upserts two officers and a handful of customers for it

Running it twice leaves the same rows in place.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from fieldbook.db import repo  # noqa: E402
from fieldbook.db.session import get_db_session, init_db  # noqa: E402
from fieldbook.errors import StoreNotConfiguredError  # noqa: E402
from fieldbook.models.domain import (  # noqa: E402
    BusinessEntity,
    CustomerEntity,
    OfficerEntity,
)

# Demo identifiers
DEMO_BUSINESS = "Demo Motors"
DEMO_ICON = "demo-motors.png"

DEMO_OFFICERS = [
    OfficerEntity(
        id="officer-1",
        full_name="Sam Perera",
        territory="North",
        password="demo",
        role="officer",
        business=DEMO_BUSINESS,
    ),
    OfficerEntity(
        id="admin-1",
        full_name="Alex Silva",
        territory="All",
        password="admin",
        role="admin",
        business=DEMO_BUSINESS,
    ),
]

DEMO_CUSTOMERS = [
    CustomerEntity(
        id="cust-1",
        customer_no="C-0001",
        name="Nimal Fernando",
        date="2024-01-15",
        address="12 Lake Road",
        model="Scooter X",
        sale_type="Cash",
        officer_id="officer-1",
        officer_name="Sam Perera",
        business=DEMO_BUSINESS,
        visit_completed="Yes",
        customer_type="Hot",
    ),
    CustomerEntity(
        id="cust-2",
        customer_no="C-0002",
        name="Kamala Jayasuriya",
        date="2024-01-18",
        address="4 Hill Street",
        model="Bike 150",
        sale_type="Lease",
        officer_id="officer-1",
        officer_name="Sam Perera",
        business=DEMO_BUSINESS,
        customer_type="Warm",
        field_visit_notes="Call back next week",
    ),
]


def seed_database() -> None:
    """Create tables and upsert the demo rows."""
    init_db()
    with get_db_session() as session:
        repo.upsert_business(session, BusinessEntity(name=DEMO_BUSINESS, icon=DEMO_ICON))
        for officer in DEMO_OFFICERS:
            repo.upsert_officer(session, officer)
        for customer in DEMO_CUSTOMERS:
            repo.upsert_customer(session, customer)


def main() -> int:
    """Main entry point."""
    print("=" * 60)
    print("Fieldbook Demo Seeding Script")
    print("=" * 60)

    try:
        seed_database()
    except StoreNotConfiguredError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"Seeded business {DEMO_BUSINESS!r}")
    print(f"Seeded {len(DEMO_OFFICERS)} officers and {len(DEMO_CUSTOMERS)} customers")
    return 0


if __name__ == "__main__":
    sys.exit(main())
