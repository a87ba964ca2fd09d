"""SQLAlchemy ORM models for customers, customer variables and calls."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CustomerModel(Base):
    """SQLAlchemy model for customers table."""

    __tablename__ = "customers"

    customer_id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    phone_number = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utc_now)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=_utc_now, onupdate=_utc_now
    )


class CustomerVariableModel(Base):
    """SQLAlchemy model for customer_variables table."""

    __tablename__ = "customer_variables"
    __table_args__ = (UniqueConstraint("customer_id", "key", name="uq_customer_variables_key"),)

    id = Column(String, primary_key=True)
    customer_id = Column(
        String,
        ForeignKey("customers.customer_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    key = Column(String, nullable=False)
    value = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utc_now)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=_utc_now, onupdate=_utc_now
    )


class CallModel(Base):
    """SQLAlchemy model for calls table."""

    __tablename__ = "calls"

    call_id = Column(String, primary_key=True)
    # No ON DELETE CASCADE: calls are removed by the delete-customer use case
    customer_id = Column(
        String, ForeignKey("customers.customer_id"), nullable=False, index=True
    )
    status = Column(String, nullable=False)
    requested_at = Column(DateTime(timezone=True), nullable=False)
    started_at = Column(DateTime(timezone=True), nullable=True)
    ended_at = Column(DateTime(timezone=True), nullable=True)
    duration_sec = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utc_now)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=_utc_now, onupdate=_utc_now
    )
