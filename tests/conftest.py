"""Test configuration and fixtures."""

import os
from uuid import uuid4

os.environ.setdefault("ENVIRONMENT", "test")

import logfire  # noqa: E402

from threadly.domain.model import Post, Subreddit, User  # noqa: E402
from threadly.domain.model.user import KarmaPoints  # noqa: E402
from threadly.domain.model.vote import initial_votes  # noqa: E402
from threadly.domain.value import (  # noqa: E402
    PostId,
    PostType,
    SubredditId,
    SubredditName,
    UserId,
    Username,
)

# Console only, nothing leaves the test process
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    username: str = "alice",
    post_karma: int = 0,
    comment_karma: int = 0,
) -> User:
    """Build an unsaved user."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        karma_points=KarmaPoints(post_karma=post_karma, comment_karma=comment_karma),
    )


def make_subreddit(creator: User, name: str = "python") -> Subreddit:
    """Build an unsaved subreddit."""
    return Subreddit(
        id=SubredditId(uuid4()),
        name=SubredditName(name),
        creator_id=creator.id,
    )


def make_post(
    author: User,
    subreddit: Subreddit,
    title: str = "Test Post",
    text: str = "Test content",
) -> Post:
    """Build an unsaved text post the way create_post would, author upvoting."""
    return Post(
        id=PostId(uuid4()),
        title=title,
        post_type=PostType.TEXT,
        text_submission=text,
        author_id=author.id,
        author_username=author.username.root,
        subreddit_id=subreddit.id,
        subreddit_name=subreddit.name.root,
        votes=initial_votes(author.id),
        points_count=1,
    )
