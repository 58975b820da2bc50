"""Comment domain service.

Comments and replies are stored inside their post, so every operation here
loads the post, edits its comment tree in memory and saves the post back.
"""

from uuid import uuid4

import logfire

from threadly.config import ContentSettings
from threadly.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    PayloadTooLargeError,
    ValidationError,
)
from threadly.domain.model import Comment, Post, Reply
from threadly.domain.model.common import utc_now
from threadly.domain.model.vote import initial_votes
from threadly.domain.value import CommentId, PostId, ReplyId, UserId

from .base import Service
from .post_service import PostService
from .user_service import UserService


class CommentService(Service):
    """Domain service for comment and reply operations."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            post_service: Post domain service
            user_service: User domain service
            content_settings: Content size limits
        """
        self.post_service = post_service
        self.user_service = user_service
        self.content_settings = content_settings

    @staticmethod
    def get_comment(post: Post, comment_id: CommentId) -> Comment:
        """Find a comment in a post.

        Raises:
            NotFoundError: If the post has no such comment
        """
        comment = post.find_comment(comment_id)
        if comment is None:
            logfire.warn(
                "Comment not found", post_id=str(post.id), comment_id=str(comment_id)
            )
            raise NotFoundError("Comment", str(comment_id))
        return comment

    @staticmethod
    def get_reply(comment: Comment, reply_id: ReplyId) -> Reply:
        """Find a reply under a comment.

        Raises:
            NotFoundError: If the comment has no such reply
        """
        reply = comment.find_reply(reply_id)
        if reply is None:
            logfire.warn(
                "Reply not found", comment_id=str(comment.id), reply_id=str(reply_id)
            )
            raise NotFoundError(
                "Reply",
                str(reply_id),
                message=f"Reply comment with ID: {reply_id} does not exist in database.",
            )
        return reply

    async def add_comment(self, post_id: PostId, author_id: UserId, body: str) -> Post:
        """Add a top-level comment to a post.

        The author starts out upvoting the comment, earns one comment karma
        and one to their comment total.

        Args:
            post_id: Post to comment on
            author_id: Authenticated author
            body: Comment text

        Returns:
            The saved post

        Raises:
            ValidationError: If the body is empty
            NotFoundError: If the post or the author does not exist
        """
        body = self._validate_body(body, "Comment")

        with logfire.span(
            "comment_service.add_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            post = await self.post_service.get_post_by_id(post_id)
            author = await self.user_service.get_by_id(author_id)

            now = utc_now()
            comment = Comment(
                id=CommentId(uuid4()),
                author_id=author.id,
                author_username=author.username.root,
                body=body,
                votes=initial_votes(author.id),
                points_count=1,
                created_at=now,
                updated_at=now,
            )
            post = post.with_comment(comment).model_copy(
                update={"comment_count": post.comment_count + 1}
            )
            saved = await self.post_service.save_post(post)
            await self._credit_author(author)

            logfire.info(
                "Comment created",
                comment_id=str(comment.id),
                post_id=str(post_id),
                author=author.username.root,
            )
            return saved

    async def update_comment(
        self, post_id: PostId, comment_id: CommentId, requester_id: UserId, body: str
    ) -> Post:
        """Replace the body of a comment.

        Args:
            post_id: Post holding the comment
            comment_id: Comment to edit
            requester_id: Authenticated user, must be the author
            body: New text

        Returns:
            The post, saved only if the body changed

        Raises:
            ValidationError: If the body is empty
            NotFoundError: If the post, user or comment does not exist
            NotAuthorizedError: If the requester is not the author
        """
        body = self._validate_body(body, "Comment")

        with logfire.span(
            "comment_service.update_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
        ):
            post = await self.post_service.get_post_by_id(post_id)
            await self.user_service.get_by_id(requester_id)
            comment = self.get_comment(post, comment_id)
            self._check_author("comment", comment.id, comment.author_id, requester_id)

            if comment.body == body:
                logfire.info("Comment body unchanged", comment_id=str(comment_id))
                return post

            comment = comment.model_copy(update={"body": body, "updated_at": utc_now()})
            saved = await self.post_service.save_post(post.with_comment(comment))
            logfire.info("Comment updated", comment_id=str(comment_id))
            return saved

    async def delete_comment(
        self, post_id: PostId, comment_id: CommentId, requester_id: UserId
    ) -> Post:
        """Delete a comment together with its replies.

        Karma earned by the comment is kept.

        Args:
            post_id: Post holding the comment
            comment_id: Comment to delete
            requester_id: Authenticated user, must be the author

        Returns:
            The saved post

        Raises:
            NotFoundError: If the post, user or comment does not exist
            NotAuthorizedError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
        ):
            post = await self.post_service.get_post_by_id(post_id)
            await self.user_service.get_by_id(requester_id)
            comment = self.get_comment(post, comment_id)
            self._check_author("comment", comment.id, comment.author_id, requester_id)

            removed = 1 + len(comment.replies)
            post = post.without_comment(comment_id).model_copy(
                update={"comment_count": max(0, post.comment_count - removed)}
            )
            saved = await self.post_service.save_post(post)
            logfire.info(
                "Comment deleted", comment_id=str(comment_id), removed=removed
            )
            return saved

    async def add_reply(
        self, post_id: PostId, comment_id: CommentId, author_id: UserId, body: str
    ) -> Post:
        """Reply to a top-level comment.

        Args:
            post_id: Post holding the comment
            comment_id: Comment to reply to
            author_id: Authenticated author
            body: Reply text

        Returns:
            The saved post

        Raises:
            ValidationError: If the body is empty
            NotFoundError: If the post, author or comment does not exist
        """
        body = self._validate_body(body, "Reply")

        with logfire.span(
            "comment_service.add_reply",
            post_id=str(post_id),
            comment_id=str(comment_id),
            author_id=str(author_id),
        ):
            post = await self.post_service.get_post_by_id(post_id)
            author = await self.user_service.get_by_id(author_id)
            comment = self.get_comment(post, comment_id)

            now = utc_now()
            reply = Reply(
                id=ReplyId(uuid4()),
                author_id=author.id,
                author_username=author.username.root,
                body=body,
                votes=initial_votes(author.id),
                points_count=1,
                created_at=now,
                updated_at=now,
            )
            post = post.with_comment(comment.with_reply(reply)).model_copy(
                update={"comment_count": post.comment_count + 1}
            )
            saved = await self.post_service.save_post(post)
            await self._credit_author(author)

            logfire.info(
                "Reply created",
                reply_id=str(reply.id),
                comment_id=str(comment_id),
                author=author.username.root,
            )
            return saved

    async def update_reply(
        self,
        post_id: PostId,
        comment_id: CommentId,
        reply_id: ReplyId,
        requester_id: UserId,
        body: str,
    ) -> Post:
        """Replace the body of a reply.

        Returns:
            The post, saved only if the body changed

        Raises:
            ValidationError: If the body is empty
            NotFoundError: If the post, user, comment or reply does not exist
            NotAuthorizedError: If the requester is not the reply's author
        """
        body = self._validate_body(body, "Reply")

        with logfire.span(
            "comment_service.update_reply",
            post_id=str(post_id),
            comment_id=str(comment_id),
            reply_id=str(reply_id),
        ):
            post = await self.post_service.get_post_by_id(post_id)
            await self.user_service.get_by_id(requester_id)
            comment = self.get_comment(post, comment_id)
            reply = self.get_reply(comment, reply_id)
            self._check_author("reply", reply.id, reply.author_id, requester_id)

            if reply.body == body:
                logfire.info("Reply body unchanged", reply_id=str(reply_id))
                return post

            reply = reply.model_copy(update={"body": body, "updated_at": utc_now()})
            saved = await self.post_service.save_post(
                post.with_comment(comment.with_reply(reply))
            )
            logfire.info("Reply updated", reply_id=str(reply_id))
            return saved

    async def delete_reply(
        self,
        post_id: PostId,
        comment_id: CommentId,
        reply_id: ReplyId,
        requester_id: UserId,
    ) -> Post:
        """Delete a reply.

        Returns:
            The saved post

        Raises:
            NotFoundError: If the post, user, comment or reply does not exist
            NotAuthorizedError: If the requester is not the reply's author
        """
        with logfire.span(
            "comment_service.delete_reply",
            post_id=str(post_id),
            comment_id=str(comment_id),
            reply_id=str(reply_id),
        ):
            post = await self.post_service.get_post_by_id(post_id)
            await self.user_service.get_by_id(requester_id)
            comment = self.get_comment(post, comment_id)
            reply = self.get_reply(comment, reply_id)
            self._check_author("reply", reply.id, reply.author_id, requester_id)

            post = post.with_comment(comment.without_reply(reply_id)).model_copy(
                update={"comment_count": max(0, post.comment_count - 1)}
            )
            saved = await self.post_service.save_post(post)
            logfire.info("Reply deleted", reply_id=str(reply_id))
            return saved

    async def _credit_author(self, author) -> None:
        # New comments and replies carry their author's upvote
        author = author.with_karma(comment_delta=1).model_copy(
            update={"total_comments": author.total_comments + 1}
        )
        await self.user_service.save(author)

    def _validate_body(self, body: str | None, kind: str) -> str:
        body = (body or "").strip()
        if not body:
            raise ValidationError(f"{kind} body can't be empty.")
        if len(body) > self.content_settings.comment_max_length:
            raise PayloadTooLargeError(f"{kind} too long")
        return body

    @staticmethod
    def _check_author(kind: str, entity_id, author_id: UserId, requester_id: UserId) -> None:
        if author_id != requester_id:
            logfire.warn(
                f"{kind.capitalize()} change by non-author",
                entity_id=str(entity_id),
                requester_id=str(requester_id),
            )
            raise NotAuthorizedError(kind, str(entity_id), str(requester_id))
