"""initial schema: users, admins, posts, placements

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

Creates:
  • users / admins: separate credential namespaces, unique identifiers
  • posts: JSONB body, reviewed flag (false until an admin approves)
  • placement_companies: one row per placement event, sequential id
  • placement_branch_records: per-branch tallies, cascade with their event
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers
revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("registration_number", sa.String(length=16), nullable=False),
        sa.Column("display_name", sa.String(length=255), nullable=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_users_registration_number", "users", ["registration_number"], unique=True)

    op.create_table(
        "admins",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_admins_username", "admins", ["username"], unique=True)

    op.create_table(
        "posts",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("post_body", postgresql.JSONB(), nullable=False),
        sa.Column("reviewed", sa.Boolean(), server_default=sa.false(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_posts_user_id", "posts", ["user_id"])
    # Public feed and per-user listings filter on reviewed
    op.create_index("ix_posts_reviewed", "posts", ["reviewed"])

    op.create_table(
        "placement_companies",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("company", sa.String(length=255), nullable=False),
        sa.Column("ctc", sa.Numeric(10, 2), nullable=False),
        sa.Column("placement_date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_placement_companies_company", "placement_companies", ["company"])
    op.create_index("ix_placement_companies_placement_date", "placement_companies", ["placement_date"])

    op.create_table(
        "placement_branch_records",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "placement_id",
            sa.Integer(),
            sa.ForeignKey("placement_companies.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("branch", sa.String(length=8), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False),
    )
    op.create_index("ix_placement_branch_records_placement_id", "placement_branch_records", ["placement_id"])
    op.create_index("ix_placement_branch_records_branch", "placement_branch_records", ["branch"])


def downgrade() -> None:
    op.drop_table("placement_branch_records")
    op.drop_table("placement_companies")
    op.drop_table("posts")
    op.drop_table("admins")
    op.drop_table("users")
