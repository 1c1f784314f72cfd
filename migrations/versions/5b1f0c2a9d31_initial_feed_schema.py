"""initial feed schema

Revision ID: 5b1f0c2a9d31
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5b1f0c2a9d31"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create posts, their sub-entity tables and user profiles."""
    op.create_table(
        "user_profile",
        sa.Column("uid", sa.String(length=128), nullable=False),
        sa.Column("handle", sa.Text(), nullable=False),
        sa.Column("did", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("avatar_uri", sa.Text(), nullable=True),
        sa.Column("provision_status", sa.String(length=32), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("uid"),
        sa.UniqueConstraint("handle"),
    )
    op.create_table(
        "post",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("author_uid", sa.String(length=128), nullable=False),
        sa.Column("author_did", sa.Text(), nullable=False),
        sa.Column("author_handle", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("source_title", sa.Text(), nullable=True),
        sa.Column("source_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("echo_count", sa.Integer(), nullable=False),
        sa.Column("reply_count", sa.Integer(), nullable=False),
        sa.Column("avg_agreement_score", sa.Integer(), nullable=False),
        sa.Column("visibility", sa.String(length=16), nullable=False),
        sa.Column("parent_id", sa.String(length=32), nullable=True),
        sa.CheckConstraint("echo_count >= 0", name="ck_post_echo_count"),
        sa.CheckConstraint("reply_count >= 0", name="ck_post_reply_count"),
        sa.CheckConstraint(
            "avg_agreement_score BETWEEN 0 AND 100",
            name="ck_post_avg_agreement_score",
        ),
        sa.CheckConstraint(
            "visibility IN ('public', 'private', 'followers')",
            name="ck_post_visibility",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_post_created_at", "post", ["created_at"])

    op.create_table(
        "agreement_score",
        sa.Column("post_id", sa.String(length=32), nullable=False),
        sa.Column("user_id", sa.String(length=128), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.CheckConstraint("score BETWEEN 0 AND 100", name="ck_agreement_score_range"),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id", "user_id"),
    )
    op.create_index("ix_agreement_score_post_id", "agreement_score", ["post_id"])

    op.create_table(
        "echo",
        sa.Column("post_id", sa.String(length=32), nullable=False),
        sa.Column("user_id", sa.String(length=128), nullable=False),
        sa.Column("echoed", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id", "user_id"),
    )
    op.create_index("ix_echo_post_id", "echo", ["post_id"])

    op.create_table(
        "reply",
        sa.Column("post_id", sa.String(length=32), nullable=False),
        sa.Column("user_id", sa.String(length=128), nullable=False),
        sa.Column("author_handle", sa.Text(), nullable=False),
        sa.Column("reply_text", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id", "user_id"),
    )
    op.create_index("ix_reply_post_id_created_at", "reply", ["post_id", "created_at"])


def downgrade() -> None:
    """Drop every feed table."""
    op.drop_index("ix_reply_post_id_created_at", table_name="reply")
    op.drop_table("reply")
    op.drop_index("ix_echo_post_id", table_name="echo")
    op.drop_table("echo")
    op.drop_index("ix_agreement_score_post_id", table_name="agreement_score")
    op.drop_table("agreement_score")
    op.drop_index("ix_post_created_at", table_name="post")
    op.drop_table("post")
    op.drop_table("user_profile")
