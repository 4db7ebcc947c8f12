"""SQLAlchemy ORM models mapping to domain entities.

These models represent the database schema and handle persistence concerns.
They should be converted to/from domain entities via repository mappers.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    func,
)
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import DeclarativeBase, relationship

from app.cost_tracker.domain.entities.alert import AlertType


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class CostAlertModel(Base):
    """ORM model for cost_alerts table."""

    __tablename__ = "cost_alerts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    alert_name = Column(String(255), nullable=False)
    threshold_amount = Column(Numeric(15, 2), nullable=False)
    service_name = Column(String(255), nullable=False)
    # Stored as the enum value ("threshold") in a plain VARCHAR
    alert_type = Column(
        SQLEnum(
            AlertType,
            native_enum=False,
            length=50,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=AlertType.THRESHOLD,
    )
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    notifications = relationship("AlertNotificationModel", back_populates="alert")

    __table_args__ = (
        CheckConstraint("threshold_amount > 0", name="ck_cost_alerts_threshold_positive"),
        Index("ix_cost_alerts_is_active", "is_active"),
    )

    def __repr__(self) -> str:
        return f"<CostAlertModel(id={self.id}, service_name='{self.service_name}')>"


class AlertNotificationModel(Base):
    """ORM model for alert_notifications table (append-only)."""

    __tablename__ = "alert_notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    alert_id = Column(
        Integer,
        ForeignKey("cost_alerts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Same scale as cost_records.cost_amount: the observed cost is stored unrounded
    triggered_amount = Column(Numeric(15, 8), nullable=False)
    triggered_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), index=True
    )

    # Relationships
    alert = relationship("CostAlertModel", back_populates="notifications")

    def __repr__(self) -> str:
        return f"<AlertNotificationModel(id={self.id}, alert_id={self.alert_id})>"


class CostRecordModel(Base):
    """ORM model for cost_records table, written by cost ingestion."""

    __tablename__ = "cost_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False)
    service_name = Column(String(255), nullable=False)
    cost_amount = Column(Numeric(15, 8), nullable=False)
    currency = Column(String(10), nullable=False, default="USD")

    __table_args__ = (
        Index("ix_cost_records_date_service", "date", "service_name"),
    )

    def __repr__(self) -> str:
        return f"<CostRecordModel(id={self.id}, date={self.date}, service_name='{self.service_name}')>"
