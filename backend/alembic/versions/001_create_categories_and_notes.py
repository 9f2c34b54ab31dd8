"""Create categories and notes tables

Revision ID: 001
Revises: None
Create Date: 2024-06-01 00:00:00.000000+00:00

What:  Initial schema: `categories` (soft-deletable) and `notes` (optional
       category reference).
How:   notes.category_id is a plain indexed integer. No FOREIGN KEY is
       declared; reference checking is an application policy.

Rollback: downgrade() drops both tables (all data lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "category_name",
            sa.String(length=255),
            nullable=False,
            comment="Display name chosen by the user",
        ),
        sa.Column(
            "is_deleted",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
            comment="Soft-delete flag; the row is kept and notes keep referencing it",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "notes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "title",
            sa.Text(),
            nullable=False,
            comment="Note title; 'Untitled' when none was given at creation",
        ),
        sa.Column(
            "content",
            sa.Text(),
            nullable=False,
            server_default=sa.text("''"),
            comment="Note body",
        ),
        sa.Column(
            "category_id",
            sa.Integer(),
            nullable=True,
            comment="Optional reference to categories.id (no FK constraint)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Serves GET /categories/{id}/notes
    op.create_index("idx_notes_category_id", "notes", ["category_id"])


def downgrade() -> None:
    op.drop_index("idx_notes_category_id", table_name="notes")
    op.drop_table("notes")
    op.drop_table("categories")
