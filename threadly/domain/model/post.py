"""Post aggregate root.

A post is a single document: its submission, its vote state, its ranking
scores and the whole comment/reply tree.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from threadly.domain.model.comment import Comment
from threadly.domain.model.common import AggregateRoot, utc_now
from threadly.domain.model.vote import Votable
from threadly.domain.value import (
    CommentId,
    ImageSubmission,
    PostId,
    PostType,
    SubredditId,
    UserId,
)


class Post(Votable, AggregateRoot):
    """Post aggregate root.

    Exactly one submission field is populated, matching the post type:
    - Text: text_submission
    - Link: link_submission
    - Image: image_submission
    """

    id: PostId
    title: str = Field(min_length=1)
    post_type: PostType
    text_submission: Optional[str] = None
    link_submission: Optional[str] = None
    image_submission: Optional[ImageSubmission] = None
    author_id: UserId
    author_username: str
    subreddit_id: SubredditId
    subreddit_name: str
    points_count: int = 1
    vote_ratio: float = 0
    hot_algo: float = 0
    controversial_algo: float = 0
    comment_count: int = Field(default=0, ge=0)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_submission(self) -> "Post":
        """Validate that the submission matches the post type."""
        if self.post_type is PostType.TEXT and not self.text_submission:
            raise ValueError("Text posts require text_submission")
        if self.post_type is PostType.LINK and not self.link_submission:
            raise ValueError("Link posts require link_submission")
        if self.post_type is PostType.IMAGE and not self.image_submission:
            raise ValueError("Image posts require image_submission")
        return self

    def find_comment(self, comment_id: CommentId) -> Comment | None:
        """Find a top-level comment by id (linear scan)."""
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    def with_comment(self, comment: Comment) -> "Post":
        """Return a copy with the comment appended, or replaced if its id exists."""
        if self.find_comment(comment.id) is None:
            comments = [*self.comments, comment]
        else:
            comments = [comment if c.id == comment.id else c for c in self.comments]
        return self.model_copy(update={"comments": comments})

    def without_comment(self, comment_id: CommentId) -> "Post":
        """Return a copy with the comment (and its replies) removed."""
        return self.model_copy(
            update={"comments": [c for c in self.comments if c.id != comment_id]}
        )
