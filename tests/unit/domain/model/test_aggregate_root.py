"""Unit tests for aggregate versioning helpers."""

from uuid import uuid4

from threadly.domain.model import Subreddit, User
from threadly.domain.value import SubredditId, SubredditName, UserId, Username


def test_new_aggregate_has_version_zero():
    user = User(id=UserId(uuid4()), username=Username("alice"))

    assert user.version == 0
    assert user.is_new


def test_next_version_returns_copy():
    """Should bump the version on a copy and leave the original untouched."""
    subreddit = Subreddit(
        id=SubredditId(uuid4()),
        name=SubredditName("python"),
        creator_id=UserId(uuid4()),
    )

    saved = subreddit.next_version()

    assert saved.version == 1
    assert not saved.is_new
    assert subreddit.version == 0
    assert saved.name == subreddit.name
