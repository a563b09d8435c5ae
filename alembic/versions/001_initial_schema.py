"""Initial database schema.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

Creates all initial tables for the Elite Arena club backend:
- Users
- Courts
- Bookings
- Coupons
- Announcements
"""

from typing import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers
revision: str = "001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create all database tables."""

    # ==================== USERS ====================
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(255), unique=True, nullable=False, index=True),
        sa.Column("image", sa.Text),
        sa.Column("role", sa.String(20), nullable=False, server_default="user", index=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("last_logged_in", sa.DateTime(timezone=True)),
    )

    # ==================== COURTS ====================
    op.create_table(
        "courts",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("court_type", sa.String(50)),
        sa.Column("price", sa.Float),
        sa.Column("slots", postgresql.JSONB, nullable=False, server_default="[]"),
        sa.Column("image", sa.Text),
        sa.Column("extra", postgresql.JSONB, nullable=False, server_default="{}"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # ==================== BOOKINGS ====================
    op.create_table(
        "bookings",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("requester_contact", sa.String(255), nullable=False, index=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending", index=True),
        sa.Column("extra", postgresql.JSONB, nullable=False, server_default="{}"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    # ==================== COUPONS ====================
    op.create_table(
        "coupons",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("coupon", sa.String(50), unique=True, nullable=False, index=True),
        sa.Column("discount_amount", sa.Float, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # ==================== ANNOUNCEMENTS ====================
    op.create_table(
        "announcements",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), index=True),
    )


def downgrade() -> None:
    """Drop all database tables."""
    op.drop_table("announcements")
    op.drop_table("coupons")
    op.drop_table("bookings")
    op.drop_table("courts")
    op.drop_table("users")
