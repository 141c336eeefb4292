"""create device tables

Revision ID: 20261019_01
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261019_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "devices",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("device_name", sa.String(length=100), nullable=True),
        sa.Column("expiration", sa.DateTime(timezone=True), nullable=True),
        sa.Column("checkin_timestamp", sa.DateTime(timezone=True), nullable=True),
        sa.Column("memory", sa.String(length=50), nullable=True),
        sa.Column("disk_space", sa.String(length=50), nullable=True),
        sa.Column("processor", sa.String(length=100), nullable=True),
        sa.Column("internet_speed", sa.String(length=50), nullable=True),
        sa.Column("listing_id", sa.String(length=100), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_table(
        "device_private_data",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("device_id", sa.String(length=36), nullable=False),
        sa.Column("assigned_port", sa.Integer(), nullable=True),
        sa.Column("access_username", sa.String(length=100), nullable=True),
        sa.Column("access_password", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["device_id"], ["devices.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "ix_device_private_data_device_id",
        "device_private_data",
        ["device_id"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index("ix_device_private_data_device_id", table_name="device_private_data")
    op.drop_table("device_private_data")
    op.drop_table("devices")
