"""Vote domain service.

Votes toggle: voting the same way twice withdraws the vote, voting the
other way switches it. Each transition moves the content author's karma by
exactly one point: post karma for posts, comment karma for comments and
replies.
"""

import logfire

from threadly.domain.model import Post, User
from threadly.domain.value import CommentId, PostId, ReplyId, UserId, VoteDirection
from threadly.domain.value.validation import parse_id

from .base import Service
from .comment_service import CommentService
from .post_service import PostService
from .ranking_service import RankingService
from .user_service import UserService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
        ranking_service: RankingService,
    ) -> None:
        """Initialize vote service.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            user_service: User domain service
            ranking_service: Ranking domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.user_service = user_service
        self.ranking_service = ranking_service

    async def vote_post(
        self, post_id: PostId, voter_id: UserId, direction: VoteDirection
    ) -> Post:
        """Toggle a vote on a post and recompute its ranking scores.

        Args:
            post_id: Post ID
            voter_id: Authenticated voter
            direction: Up or down

        Returns:
            The saved post

        Raises:
            NotFoundError: If the post, the voter or the post author is missing
        """
        with logfire.span(
            "vote_service.vote_post",
            post_id=str(post_id),
            voter_id=str(voter_id),
            direction=direction.value,
        ):
            post = await self.post_service.get_post_by_id(post_id)
            voter = await self.user_service.get_by_id(voter_id)
            author = await self._load_author(
                post.author_id, voter, "Author user does not exist in database."
            )

            updated, delta = post.toggle_vote(direction, voter_id)
            updated = self.ranking_service.rescore(updated)
            saved = await self.post_service.save_post(updated)
            await self.user_service.apply_post_karma(author, delta)

            logfire.info(
                "Post vote toggled",
                post_id=str(post_id),
                voter_id=str(voter_id),
                vote=self._describe(saved.vote_of(voter_id)),
                points=saved.points_count,
            )
            return saved

    async def vote_comment(
        self,
        post_id: PostId,
        comment_id: CommentId | str,
        voter_id: UserId,
        direction: VoteDirection,
    ) -> Post:
        """Toggle a vote on a comment.

        Args:
            post_id: Post holding the comment
            comment_id: Comment ID, parsed only once post and voter exist
            voter_id: Authenticated voter
            direction: Up or down

        Returns:
            The saved post

        Raises:
            NotFoundError: If the post, voter, comment or comment author is missing
            ValidationError: If the comment ID is malformed
        """
        with logfire.span(
            "vote_service.vote_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            voter_id=str(voter_id),
            direction=direction.value,
        ):
            post = await self.post_service.get_post_by_id(post_id)
            voter = await self.user_service.get_by_id(voter_id)
            comment = self.comment_service.get_comment(
                post, CommentId(parse_id(comment_id, "comment ID"))
            )
            author = await self._load_author(
                comment.author_id, voter, "Comment author does not exist in database."
            )

            updated, delta = comment.toggle_vote(direction, voter_id)
            saved = await self.post_service.save_post(post.with_comment(updated))
            await self.user_service.apply_comment_karma(author, delta)

            logfire.info(
                "Comment vote toggled",
                comment_id=str(comment_id),
                voter_id=str(voter_id),
                vote=self._describe(updated.vote_of(voter_id)),
                points=updated.points_count,
            )
            return saved

    async def vote_reply(
        self,
        post_id: PostId,
        comment_id: CommentId | str,
        reply_id: ReplyId | str,
        voter_id: UserId,
        direction: VoteDirection,
    ) -> Post:
        """Toggle a vote on a reply.

        Args:
            post_id: Post holding the reply
            comment_id: Parent comment ID
            reply_id: Reply ID, parsed only once its comment is found
            voter_id: Authenticated voter
            direction: Up or down

        Returns:
            The saved post

        Raises:
            NotFoundError: If the post, voter, comment, reply or reply author
                is missing
            ValidationError: If the comment or reply ID is malformed
        """
        with logfire.span(
            "vote_service.vote_reply",
            post_id=str(post_id),
            comment_id=str(comment_id),
            reply_id=str(reply_id),
            voter_id=str(voter_id),
            direction=direction.value,
        ):
            post = await self.post_service.get_post_by_id(post_id)
            voter = await self.user_service.get_by_id(voter_id)
            comment = self.comment_service.get_comment(
                post, CommentId(parse_id(comment_id, "comment ID"))
            )
            reply = self.comment_service.get_reply(
                comment, ReplyId(parse_id(reply_id, "reply ID"))
            )
            author = await self._load_author(
                reply.author_id, voter, "Reply author does not exist in database."
            )

            updated, delta = reply.toggle_vote(direction, voter_id)
            saved = await self.post_service.save_post(
                post.with_comment(comment.with_reply(updated))
            )
            await self.user_service.apply_comment_karma(author, delta)

            logfire.info(
                "Reply vote toggled",
                reply_id=str(reply_id),
                voter_id=str(voter_id),
                vote=self._describe(updated.vote_of(voter_id)),
                points=updated.points_count,
            )
            return saved

    async def _load_author(self, author_id: UserId, voter: User, message: str) -> User:
        # Self-votes reuse the loaded voter
        if author_id == voter.id:
            return voter
        return await self.user_service.get_by_id(author_id, not_found_message=message)

    @staticmethod
    def _describe(direction: VoteDirection | None) -> str:
        return direction.value if direction else "none"
