"""Initial schema: users, issues.

Revision ID: 001
Revises:
Create Date: 2026-10-17

Issue status: BACKLOG, TODO, IN_PROGRESS, DONE.
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("CREATE TYPE issue_status_enum AS ENUM ('BACKLOG', 'TODO', 'IN_PROGRESS', 'DONE')")

    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("idx_users_email", "users", ["email"], unique=True)

    op.create_table(
        "issues",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM("BACKLOG", "TODO", "IN_PROGRESS", "DONE", name="issue_status_enum", create_type=False),
            nullable=False,
            server_default="BACKLOG",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("idx_issues_user_id", "issues", ["user_id"])
    op.create_index("idx_issues_user_id_created_at", "issues", ["user_id", "created_at"])


def downgrade() -> None:
    op.drop_table("issues")
    op.drop_table("users")
    op.execute("DROP TYPE issue_status_enum")
