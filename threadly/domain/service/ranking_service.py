"""Ranking domain service.

Scores are recomputed from the vote tallies every time a post is voted on
and stored on the post, so listings can sort on plain columns.
"""

import math
from datetime import datetime

from threadly.config import RankingSettings
from threadly.domain.model.post import Post
from threadly.domain.value.common import ValueObject

from .base import Service


class RankingScores(ValueObject):
    """Scores derived from a vote tally."""

    points_count: int
    vote_ratio: float
    hot_algo: float
    controversial_algo: float


class RankingService(Service):
    """Pure ranking computations."""

    def __init__(self, ranking_settings: RankingSettings) -> None:
        """Initialize ranking service.

        Args:
            ranking_settings: Epoch and decay used by the hot score
        """
        self.ranking_settings = ranking_settings

    @staticmethod
    def points(upvotes: int, downvotes: int) -> int:
        return upvotes - downvotes

    @staticmethod
    def vote_ratio(upvotes: int, downvotes: int) -> float:
        """Percentage of votes that are upvotes, 0 when nobody voted."""
        total = upvotes + downvotes
        if total == 0:
            return 0
        return 100 * upvotes / total

    @staticmethod
    def controversial(upvotes: int, downvotes: int) -> float:
        """High when there are many votes, split close to evenly.

        Zero whenever one side has no votes at all.
        """
        if upvotes <= 0 or downvotes <= 0:
            return 0
        balance = min(upvotes, downvotes) / max(upvotes, downvotes)
        return (upvotes + downvotes) ** balance

    def hot(self, points: int, created_at: datetime) -> float:
        """Logarithmic points plus a linear bonus for recency.

        A post needs 10x the points to rank level with a post
        `decay_seconds` younger.
        """
        order = math.log10(1 + abs(points))
        sign = 1 if points > 0 else -1 if points < 0 else 0
        seconds = created_at.timestamp() - self.ranking_settings.epoch_seconds
        return sign * order + seconds / self.ranking_settings.decay_seconds

    def score(self, upvotes: int, downvotes: int, created_at: datetime) -> RankingScores:
        """Compute all scores for a vote tally.

        Args:
            upvotes: Number of upvotes
            downvotes: Number of downvotes
            created_at: Creation time of the content

        Returns:
            The computed scores
        """
        points = self.points(upvotes, downvotes)
        return RankingScores(
            points_count=points,
            vote_ratio=self.vote_ratio(upvotes, downvotes),
            hot_algo=self.hot(points, created_at),
            controversial_algo=self.controversial(upvotes, downvotes),
        )

    def rescore(self, post: Post) -> Post:
        """Return a copy of the post with its scores recomputed from its votes."""
        scores = self.score(post.upvote_count, post.downvote_count, post.created_at)
        return post.model_copy(update=scores.model_dump())
