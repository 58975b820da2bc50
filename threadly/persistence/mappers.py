"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. JSONB columns hold
the json-mode dump of the embedded models and are validated back on read.
"""

from typing import Any, Dict
from uuid import UUID

from threadly.domain.model import Comment, KarmaPoints, Post, Subreddit, User
from threadly.domain.value import (
    ImageSubmission,
    PostId,
    PostType,
    SubredditId,
    SubredditName,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        password_hash=row.get("password_hash"),
        karma_points=KarmaPoints(
            post_karma=row["post_karma"], comment_karma=row["comment_karma"]
        ),
        posts=[PostId(_uuid(p)) for p in row.get("posts") or []],
        subscribed_subs=[SubredditId(_uuid(s)) for s in row.get("subscribed_subs") or []],
        total_comments=row["total_comments"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        version=row["version"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "password_hash": user.password_hash,
        "post_karma": user.karma_points.post_karma,
        "comment_karma": user.karma_points.comment_karma,
        "posts": list(user.posts),
        "subscribed_subs": list(user.subscribed_subs),
        "total_comments": user.total_comments,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
        "version": user.version,
    }


def row_to_subreddit(row: Dict[str, Any]) -> Subreddit:
    """Convert database row to Subreddit domain model.

    Args:
        row: Database row as dict

    Returns:
        Subreddit domain model
    """
    return Subreddit(
        id=SubredditId(_uuid(row["id"])),
        name=SubredditName(row["name"]),
        description=row.get("description") or "",
        creator_id=UserId(_uuid(row["creator_id"])),
        posts=[PostId(_uuid(p)) for p in row.get("posts") or []],
        subscribed_by=[UserId(_uuid(u)) for u in row.get("subscribed_by") or []],
        subscriber_count=row["subscriber_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        version=row["version"],
    )


def subreddit_to_dict(subreddit: Subreddit) -> Dict[str, Any]:
    """Convert Subreddit domain model to database dict."""
    return {
        "id": subreddit.id,
        "name": subreddit.name.root,
        "description": subreddit.description,
        "creator_id": subreddit.creator_id,
        "posts": list(subreddit.posts),
        "subscribed_by": list(subreddit.subscribed_by),
        "subscriber_count": subreddit.subscriber_count,
        "created_at": subreddit.created_at,
        "updated_at": subreddit.updated_at,
        "version": subreddit.version,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model, including its comment tree
    """
    image = None
    if row.get("image_link"):
        image = ImageSubmission(image_link=row["image_link"], image_id=row.get("image_id") or "")

    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        post_type=PostType(row["post_type"]),
        text_submission=row.get("text_submission"),
        link_submission=row.get("link_submission"),
        image_submission=image,
        author_id=UserId(_uuid(row["author_id"])),
        author_username=row["author_username"],
        subreddit_id=SubredditId(_uuid(row["subreddit_id"])),
        subreddit_name=row["subreddit_name"],
        votes=row.get("votes") or [],
        points_count=row["points_count"],
        vote_ratio=row["vote_ratio"],
        hot_algo=row["hot_algo"],
        controversial_algo=row["controversial_algo"],
        comment_count=row["comment_count"],
        comments=[Comment.model_validate(c) for c in row.get("comments") or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        version=row["version"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = post.model_dump(mode="json", include={"votes", "comments"})
    return {
        "id": post.id,
        "title": post.title,
        "post_type": post.post_type.value,
        "text_submission": post.text_submission,
        "link_submission": post.link_submission,
        "image_link": post.image_submission.image_link if post.image_submission else None,
        "image_id": post.image_submission.image_id if post.image_submission else None,
        "author_id": post.author_id,
        "author_username": post.author_username,
        "subreddit_id": post.subreddit_id,
        "subreddit_name": post.subreddit_name,
        "votes": data["votes"],
        "points_count": post.points_count,
        "vote_ratio": post.vote_ratio,
        "hot_algo": post.hot_algo,
        "controversial_algo": post.controversial_algo,
        "comment_count": post.comment_count,
        "comments": data["comments"],
        "created_at": post.created_at,
        "updated_at": post.updated_at,
        "version": post.version,
    }
