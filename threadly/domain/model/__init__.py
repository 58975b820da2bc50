"""Domain model entities for Threadly."""

from threadly.domain.model.comment import Comment, Reply
from threadly.domain.model.post import Post
from threadly.domain.model.subreddit import Subreddit
from threadly.domain.model.user import KarmaPoints, User
from threadly.domain.model.vote import Votable

__all__ = [
    "User",
    "KarmaPoints",
    "Subreddit",
    "Post",
    "Comment",
    "Reply",
    "Votable",
]
