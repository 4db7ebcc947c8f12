"""Initial schema creation for the AWS cost tracker alerting service.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Creates the core tables:
- cost_alerts: Alert definitions (soft-disabled, never deleted)
- alert_notifications: Append-only log of fired alerts
- cost_records: Ingested daily spend per service
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create initial database schema."""
    # Create cost_alerts table
    op.create_table(
        "cost_alerts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("alert_name", sa.String(length=255), nullable=False),
        sa.Column("threshold_amount", sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column("service_name", sa.String(length=255), nullable=False),
        sa.Column(
            "alert_type",
            sa.String(length=50),
            nullable=False,
            server_default="threshold",
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "threshold_amount > 0", name="ck_cost_alerts_threshold_positive"
        ),
    )
    op.create_index("ix_cost_alerts_is_active", "cost_alerts", ["is_active"])

    # Create alert_notifications table
    op.create_table(
        "alert_notifications",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("alert_id", sa.Integer(), nullable=False),
        sa.Column("triggered_amount", sa.Numeric(precision=15, scale=8), nullable=False),
        sa.Column(
            "triggered_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.ForeignKeyConstraint(["alert_id"], ["cost_alerts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_alert_notifications_alert_id", "alert_notifications", ["alert_id"])
    op.create_index(
        "ix_alert_notifications_triggered_at", "alert_notifications", ["triggered_at"]
    )

    # Create cost_records table
    op.create_table(
        "cost_records",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("service_name", sa.String(length=255), nullable=False),
        sa.Column("cost_amount", sa.Numeric(precision=15, scale=8), nullable=False),
        sa.Column("currency", sa.String(length=10), nullable=False, server_default="USD"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_cost_records_date_service", "cost_records", ["date", "service_name"]
    )


def downgrade() -> None:
    """Drop all tables."""
    # Drop tables in reverse order of dependencies
    op.drop_table("cost_records")
    op.drop_table("alert_notifications")
    op.drop_table("cost_alerts")
