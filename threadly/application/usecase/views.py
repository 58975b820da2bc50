"""Response models shared by post, comment and vote use cases."""

from datetime import datetime

from pydantic import BaseModel

from threadly.domain.model import Comment, Post, Reply
from threadly.domain.value import ImageSubmission, PostType


class ReplyView(BaseModel):
    """Reply as returned to clients."""

    reply_id: str
    author_id: str
    author_username: str
    body: str
    points_count: int
    upvoted_by: list[str]
    downvoted_by: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, reply: Reply) -> "ReplyView":
        return cls(
            reply_id=str(reply.id),
            author_id=str(reply.author_id),
            author_username=reply.author_username,
            body=reply.body,
            points_count=reply.points_count,
            upvoted_by=[str(uid) for uid in reply.upvoted_by],
            downvoted_by=[str(uid) for uid in reply.downvoted_by],
            created_at=reply.created_at,
            updated_at=reply.updated_at,
        )


class CommentView(BaseModel):
    """Comment with its replies as returned to clients."""

    comment_id: str
    author_id: str
    author_username: str
    body: str
    points_count: int
    upvoted_by: list[str]
    downvoted_by: list[str]
    replies: list[ReplyView]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, comment: Comment) -> "CommentView":
        return cls(
            comment_id=str(comment.id),
            author_id=str(comment.author_id),
            author_username=comment.author_username,
            body=comment.body,
            points_count=comment.points_count,
            upvoted_by=[str(uid) for uid in comment.upvoted_by],
            downvoted_by=[str(uid) for uid in comment.downvoted_by],
            replies=[ReplyView.from_model(r) for r in comment.replies],
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class PostView(BaseModel):
    """Post as returned to clients.

    comments is None in listings, where the tree is left out.
    """

    post_id: str
    title: str
    post_type: PostType
    text_submission: str | None
    link_submission: str | None
    image_submission: ImageSubmission | None
    author_id: str
    author_username: str
    subreddit_id: str
    subreddit_name: str
    points_count: int
    vote_ratio: float
    hot_algo: float
    controversial_algo: float
    comment_count: int
    upvoted_by: list[str]
    downvoted_by: list[str]
    created_at: datetime
    updated_at: datetime
    comments: list[CommentView] | None = None

    @classmethod
    def from_model(cls, post: Post, include_comments: bool = True) -> "PostView":
        return cls(
            post_id=str(post.id),
            title=post.title,
            post_type=post.post_type,
            text_submission=post.text_submission,
            link_submission=post.link_submission,
            image_submission=post.image_submission,
            author_id=str(post.author_id),
            author_username=post.author_username,
            subreddit_id=str(post.subreddit_id),
            subreddit_name=post.subreddit_name,
            points_count=post.points_count,
            vote_ratio=post.vote_ratio,
            hot_algo=post.hot_algo,
            controversial_algo=post.controversial_algo,
            comment_count=post.comment_count,
            upvoted_by=[str(uid) for uid in post.upvoted_by],
            downvoted_by=[str(uid) for uid in post.downvoted_by],
            created_at=post.created_at,
            updated_at=post.updated_at,
            comments=(
                [CommentView.from_model(c) for c in post.comments]
                if include_comments
                else None
            ),
        )
