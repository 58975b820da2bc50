"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .post_service import PostPage, PostService, Submission
from .ranking_service import RankingScores, RankingService
from .subreddit_service import SubredditService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "JWTService",
    "PostPage",
    "PostService",
    "RankingScores",
    "RankingService",
    "Service",
    "Submission",
    "SubredditService",
    "UserService",
    "VoteService",
]
