"""initial_schema

Create the schema for Threadly:
- Users (karma counters, authored post ids, subscriptions)
- Subreddits (communities, case-insensitive unique names)
- Posts (Text/Link/Image submissions, ranking scores)
  with the comment/reply tree and vote maps stored as JSONB documents

Every table carries a version column for optimistic concurrency.

Revision ID: 3c1f7a9d2e40
Revises:
Create Date: 2026-10-18 10:12:44.318201

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f7a9d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(20), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=True),
        sa.Column("post_karma", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_karma", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "posts",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "subscribed_subs",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("total_comments", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("total_comments >= 0", name="users_total_comments_check"),
    )
    op.execute("CREATE UNIQUE INDEX uq_users_username_lower ON users (lower(username))")

    # ========================================================================
    # SUBREDDITS table
    # ========================================================================
    op.create_table(
        "subreddits",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(20), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("creator_id", sa.UUID(), nullable=False),
        sa.Column(
            "posts",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "subscribed_by",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("subscriber_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.ForeignKeyConstraint(["creator_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.execute("CREATE UNIQUE INDEX uq_subreddits_name_lower ON subreddits (lower(name))")

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("post_type", sa.String(10), nullable=False),
        sa.Column("text_submission", sa.Text(), nullable=True),
        sa.Column("link_submission", sa.Text(), nullable=True),
        sa.Column("image_link", sa.Text(), nullable=True),
        sa.Column("image_id", sa.Text(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_username", sa.String(20), nullable=False),
        sa.Column("subreddit_id", sa.UUID(), nullable=False),
        sa.Column("subreddit_name", sa.String(20), nullable=False),
        sa.Column(
            "votes",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("points_count", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("vote_ratio", sa.Float(), nullable=False, server_default="0"),
        sa.Column("hot_algo", sa.Float(), nullable=False, server_default="0"),
        sa.Column("controversial_algo", sa.Float(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "comments",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["subreddit_id"], ["subreddits.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "post_type IN ('Text', 'Link', 'Image')", name="posts_post_type_check"
        ),
        sa.CheckConstraint("comment_count >= 0", name="posts_comment_count_check"),
    )
    op.create_index("idx_posts_subreddit_id", "posts", ["subreddit_id"])
    op.create_index("idx_posts_author_id", "posts", ["author_id"])
    op.create_index(
        "idx_posts_hot_algo", "posts", [sa.text("hot_algo DESC")]
    )
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_index("idx_posts_hot_algo", table_name="posts")
    op.drop_index("idx_posts_author_id", table_name="posts")
    op.drop_index("idx_posts_subreddit_id", table_name="posts")
    op.drop_table("posts")

    op.execute("DROP INDEX IF EXISTS uq_subreddits_name_lower")
    op.drop_table("subreddits")

    op.execute("DROP INDEX IF EXISTS uq_users_username_lower")
    op.drop_table("users")
