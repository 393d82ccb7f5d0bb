"""Initial tables: users, user_progress, game content.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(64), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("adventurer_name", sa.String(128), nullable=False),
        sa.Column("token", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "user_progress",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("story_id", sa.Integer(), nullable=True),
        sa.Column("chapter_id", sa.Integer(), nullable=True),
        sa.Column("game_state", sa.JSON(), nullable=True),
        sa.Column("inventory", sa.JSON(), nullable=True),
        sa.Column("save_name", sa.String(128), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_user_progress_user_id"), "user_progress", ["user_id"], unique=False)

    op.create_table(
        "stories",
        sa.Column("story_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("chapter_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("next_chapter_id", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("story_id"),
    )
    op.create_index(op.f("ix_stories_chapter_id"), "stories", ["chapter_id"], unique=False)

    op.create_table(
        "effect",
        sa.Column("effect_id", sa.Integer(), nullable=False),
        sa.Column("effect_name", sa.String(64), nullable=False),
        sa.Column("attribute", sa.String(32), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("effect_id"),
    )

    op.create_table(
        "item",
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("item_name", sa.String(128), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("effect_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["effect_id"], ["effect.effect_id"]),
        sa.PrimaryKeyConstraint("item_id"),
    )

    op.create_table(
        "monster",
        sa.Column("monster_id", sa.Integer(), nullable=False),
        sa.Column("monster_name", sa.String(128), nullable=False),
        sa.Column("health", sa.Integer(), nullable=False),
        sa.Column("attack", sa.Integer(), nullable=False),
        sa.Column("defense", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("monster_id"),
    )

    op.create_table(
        "story_item",
        sa.Column("chapter_id", sa.Integer(), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["item_id"], ["item.item_id"]),
        sa.PrimaryKeyConstraint("chapter_id", "item_id"),
    )

    op.create_table(
        "story_monster",
        sa.Column("chapter_id", sa.Integer(), nullable=False),
        sa.Column("monster_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["monster_id"], ["monster.monster_id"]),
        sa.PrimaryKeyConstraint("chapter_id", "monster_id"),
    )


def downgrade() -> None:
    op.drop_table("story_monster")
    op.drop_table("story_item")
    op.drop_table("monster")
    op.drop_table("item")
    op.drop_table("effect")
    op.drop_index(op.f("ix_stories_chapter_id"), table_name="stories")
    op.drop_table("stories")
    op.drop_index(op.f("ix_user_progress_user_id"), table_name="user_progress")
    op.drop_table("user_progress")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
