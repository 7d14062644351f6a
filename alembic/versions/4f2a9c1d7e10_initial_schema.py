"""Initial schema: users, lists, tasks, user_settings

Revision ID: 4f2a9c1d7e10
Revises:
Create Date: 2026-10-19 10:12:41.318204

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2a9c1d7e10"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

task_status = sa.Enum("TODO", "IN_PROGRESS", "DONE", name="task_status")
task_priority = sa.Enum("LOW", "MEDIUM", "HIGH", name="task_priority")
theme = sa.Enum("LIGHT", "DARK", name="theme")
date_format = sa.Enum("MM_DD_YYYY", "DD_MM_YYYY", "YYYY_MM_DD", name="date_format")
language = sa.Enum("EN", "ES", name="language")

# user_settings reuses the task enums created with the tasks table
existing_task_status = postgresql.ENUM(name="task_status", create_type=False)
existing_task_priority = postgresql.ENUM(name="task_priority", create_type=False)

now = sa.text("now()")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=now, nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=now, nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("profile_image", sa.String(length=255), nullable=True),
        sa.Column("phone_number", sa.String(length=30), nullable=True),
        sa.Column("email_verified", sa.Boolean(), server_default=sa.false(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "lists",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=50), nullable=False),
        sa.Column("color", sa.String(length=20), server_default="#000000", nullable=False),
        sa.Column("favorite", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("author_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_lists_id"), "lists", ["id"], unique=False)
    op.create_index(op.f("ix_lists_author_id"), "lists", ["author_id"], unique=False)

    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("task_name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("status", task_status, server_default="TODO", nullable=False),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("priority", task_priority, server_default="LOW", nullable=False),
        sa.Column("author_id", sa.Integer(), nullable=False),
        sa.Column("list_id", sa.Integer(), nullable=True),
        sa.Column("archived", sa.Boolean(), server_default=sa.false(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["list_id"], ["lists.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tasks_id"), "tasks", ["id"], unique=False)
    op.create_index(op.f("ix_tasks_author_id"), "tasks", ["author_id"], unique=False)
    op.create_index(op.f("ix_tasks_list_id"), "tasks", ["list_id"], unique=False)

    op.create_table(
        "user_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("theme", theme, server_default="LIGHT", nullable=False),
        sa.Column("date_format", date_format, server_default="MM_DD_YYYY", nullable=False),
        sa.Column("language", language, server_default="EN", nullable=False),
        sa.Column(
            "default_priority", existing_task_priority, server_default="MEDIUM", nullable=False
        ),
        sa.Column(
            "default_status", existing_task_status, server_default="TODO", nullable=False
        ),
        sa.Column("user_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_index(op.f("ix_user_settings_id"), "user_settings", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_user_settings_id"), table_name="user_settings")
    op.drop_table("user_settings")
    op.drop_index(op.f("ix_tasks_list_id"), table_name="tasks")
    op.drop_index(op.f("ix_tasks_author_id"), table_name="tasks")
    op.drop_index(op.f("ix_tasks_id"), table_name="tasks")
    op.drop_table("tasks")
    op.drop_index(op.f("ix_lists_author_id"), table_name="lists")
    op.drop_index(op.f("ix_lists_id"), table_name="lists")
    op.drop_table("lists")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")

    bind = op.get_bind()
    for enum_type in (language, date_format, theme, task_priority, task_status):
        enum_type.drop(bind, checkfirst=True)
