"""
Initial schema: users, profiles, newsfeeds, followers

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-18
"""
from __future__ import annotations
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

follow_status = sa.Enum("PENDING", "ACCEPTED", "REJECTED", name="follow_status")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=16), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("nickname", sa.String(length=32), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("image_path", sa.String(length=255), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
        ),
        *_timestamps(),
    )
    op.create_index("ix_profiles_user_id", "profiles", ["user_id"])

    op.create_table(
        "newsfeeds",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image_path", sa.String(length=255), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "profile_id",
            sa.Integer(),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_newsfeeds_profile_id", "newsfeeds", ["profile_id"])
    op.create_index("ix_newsfeeds_is_deleted_updated_at", "newsfeeds", ["is_deleted", "updated_at"])

    op.create_table(
        "followers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("status", follow_status, nullable=False),
        sa.Column(
            "sender_profile_id",
            sa.Integer(),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "receiver_profile_id",
            sa.Integer(),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_followers_receiver_profile_id", "followers", ["receiver_profile_id"])
    op.create_index(
        "ix_followers_sender_receiver", "followers", ["sender_profile_id", "receiver_profile_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_followers_sender_receiver", table_name="followers")
    op.drop_index("ix_followers_receiver_profile_id", table_name="followers")
    op.drop_table("followers")
    follow_status.drop(op.get_bind(), checkfirst=True)
    op.drop_index("ix_newsfeeds_is_deleted_updated_at", table_name="newsfeeds")
    op.drop_index("ix_newsfeeds_profile_id", table_name="newsfeeds")
    op.drop_table("newsfeeds")
    op.drop_index("ix_profiles_user_id", table_name="profiles")
    op.drop_table("profiles")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
