"""Database schema for Fieldbook.

Three tables: businesses, officers, customers. Keys are the only
constraints; business references are plain text and are not enforced,
so orphaned rows are allowed.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Business(Base):
    """A business, identified by its name."""

    __tablename__ = "businesses"

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    icon: Mapped[str | None] = mapped_column(Text, nullable=True)


class Officer(Base):
    """A field officer working for a business.

    The password column holds whatever the client sends.
    """

    __tablename__ = "officers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    territory: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str | None] = mapped_column(String(64), nullable=True)
    business: Mapped[str | None] = mapped_column(String(255), nullable=True)


class Customer(Base):
    """A customer record owned by an officer and a business."""

    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    customer_no: Mapped[str | None] = mapped_column(String(64), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    model: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sale_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    officer_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    officer_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    business: Mapped[str | None] = mapped_column(String(255), nullable=True)
    visit_completed: Mapped[str | None] = mapped_column(String(16), nullable=True)
    customer_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    field_visit_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    booking_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    delivery_info: Mapped[str | None] = mapped_column(Text, nullable=True)
