"""SQLAlchemy table definitions for Threadly.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.

Posts are stored as documents: the comment/reply tree and every vote map
live in JSONB columns of the post row.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(20), nullable=False),
    Column("password_hash", Text, nullable=True),  # Produced by the identity service
    Column("post_karma", Integer, nullable=False, server_default="0"),
    Column("comment_karma", Integer, nullable=False, server_default="0"),
    Column("posts", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("subscribed_subs", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("total_comments", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("version", Integer, nullable=False, server_default="1"),
    CheckConstraint("total_comments >= 0", name="users_total_comments_check"),
)

# Usernames are unique regardless of case
Index("uq_users_username_lower", func.lower(users_table.c.username), unique=True)

# ============================================================================
# SUBREDDITS TABLE
# ============================================================================
subreddits_table = Table(
    "subreddits",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(20), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("creator_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("posts", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("subscribed_by", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("subscriber_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("version", Integer, nullable=False, server_default="1"),
)

Index("uq_subreddits_name_lower", func.lower(subreddits_table.c.name), unique=True)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("title", Text, nullable=False),
    Column("post_type", String(10), nullable=False),
    Column("text_submission", Text, nullable=True),
    Column("link_submission", Text, nullable=True),
    Column("image_link", Text, nullable=True),
    Column("image_id", Text, nullable=True),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("author_username", String(20), nullable=False),
    Column("subreddit_id", UUID, ForeignKey("subreddits.id"), nullable=False),
    Column("subreddit_name", String(20), nullable=False),
    Column("votes", JSONB, nullable=False, server_default="[]"),  # [voter id, up/down] pairs
    Column("points_count", Integer, nullable=False, server_default="1"),
    Column("vote_ratio", Float, nullable=False, server_default="0"),
    Column("hot_algo", Float, nullable=False, server_default="0"),
    Column("controversial_algo", Float, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("comments", JSONB, nullable=False, server_default="[]"),  # comment tree
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("version", Integer, nullable=False, server_default="1"),
    CheckConstraint(
        "post_type IN ('Text', 'Link', 'Image')", name="posts_post_type_check"
    ),
    CheckConstraint("comment_count >= 0", name="posts_comment_count_check"),
)

Index("idx_posts_subreddit_id", posts_table.c.subreddit_id)
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_hot_algo", posts_table.c.hot_algo.desc())
Index("idx_posts_created_at", posts_table.c.created_at.desc())
