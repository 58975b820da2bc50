"""Vote state shared by posts, comments and replies.

Every votable entity keeps one map of voter -> direction, so a voter is
either an upvoter, a downvoter or neither. Votes are toggles: repeating a
vote removes it, voting the other way switches it.
"""

from typing import Any, Self

from pydantic import Field, field_serializer, field_validator

from threadly.domain.model.common import DomainModel
from threadly.domain.value import UserId, VoteDirection


class Votable(DomainModel):
    """Base for entities that collect up/down votes.

    In JSON the votes are a list of [voter id, direction] pairs. JSONB
    reorders object keys, a list keeps the order votes were cast in.
    """

    votes: dict[UserId, VoteDirection] = Field(default_factory=dict)
    points_count: int = 0

    @field_validator("votes", mode="before")
    @classmethod
    def votes_from_pairs(cls, value: Any) -> Any:
        if isinstance(value, list):
            return {voter: direction for voter, direction in value}
        return value

    @field_serializer("votes", when_used="json")
    def votes_as_pairs(self, votes: dict[UserId, VoteDirection]) -> list[list[str]]:
        return [[str(voter), direction.value] for voter, direction in votes.items()]

    @property
    def upvoted_by(self) -> list[UserId]:
        """Users currently upvoting, in the order they voted."""
        return [uid for uid, d in self.votes.items() if d is VoteDirection.UP]

    @property
    def downvoted_by(self) -> list[UserId]:
        """Users currently downvoting, in the order they voted."""
        return [uid for uid, d in self.votes.items() if d is VoteDirection.DOWN]

    @property
    def upvote_count(self) -> int:
        return len(self.upvoted_by)

    @property
    def downvote_count(self) -> int:
        return len(self.downvoted_by)

    def vote_of(self, voter_id: UserId) -> VoteDirection | None:
        """Current vote of a user, None if they have not voted."""
        return self.votes.get(voter_id)

    def toggle_vote(self, direction: VoteDirection, voter_id: UserId) -> tuple[Self, int]:
        """Apply a vote toggle.

        Args:
            direction: Direction of the incoming vote
            voter_id: User casting the vote

        Returns:
            Tuple of (updated entity, karma delta for the entity's author).
            The delta is -sign when an existing matching vote is withdrawn
            and +sign otherwise.
        """
        votes = dict(self.votes)
        if votes.get(voter_id) is direction:
            del votes[voter_id]
            delta = -direction.sign
        else:
            # Re-insert so an opposite vote moves to the end of the order
            votes.pop(voter_id, None)
            votes[voter_id] = direction
            delta = direction.sign

        points = sum(d.sign for d in votes.values())
        updated = self.model_copy(update={"votes": votes, "points_count": points})
        return updated, delta


def initial_votes(author_id: UserId) -> dict[UserId, VoteDirection]:
    """Vote state of freshly created content: its author upvoting it."""
    return {author_id: VoteDirection.UP}
