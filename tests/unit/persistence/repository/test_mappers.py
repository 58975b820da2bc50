"""Unit tests for the post document mapping."""

import json
from uuid import UUID, uuid4

from threadly.domain.model import Comment, Reply
from threadly.domain.value import CommentId, ReplyId, UserId, VoteDirection
from threadly.persistence.mappers import post_to_dict, row_to_post
from tests.conftest import make_post, make_subreddit, make_user


class TestPostMapping:
    """Tests for post_to_dict / row_to_post."""

    def test_comment_tree_survives_jsonb(self):
        """Votes and the comment tree should come back from their JSON form."""
        # Arrange
        author = make_user("alice")
        voter = make_user("bob")
        reply = Reply(
            id=ReplyId(uuid4()),
            author_id=voter.id,
            author_username="bob",
            body="reply",
            votes={voter.id: VoteDirection.DOWN},
            points_count=-1,
        )
        comment = Comment(
            id=CommentId(uuid4()),
            author_id=author.id,
            author_username="alice",
            body="comment",
            votes={author.id: VoteDirection.UP},
            points_count=1,
            replies=[reply],
        )
        post = make_post(author, make_subreddit(author)).with_comment(comment)

        # Act - JSONB columns go through a real JSON round trip in the driver
        row = post_to_dict(post)
        row["votes"] = json.loads(json.dumps(row["votes"]))
        row["comments"] = json.loads(json.dumps(row["comments"]))
        restored = row_to_post(row)

        # Assert
        assert restored.votes == {author.id: VoteDirection.UP}
        restored_comment = restored.find_comment(comment.id)
        assert restored_comment.upvoted_by == [author.id]
        assert restored_comment.find_reply(reply.id).downvoted_by == [voter.id]
        assert restored == post

    def test_vote_order_survives_jsonb(self):
        """Votes should come back in the order they were cast, not sorted by voter id."""
        # Arrange - voters cast in descending id order
        author = make_user("alice")
        voters = [UserId(UUID(int=n)) for n in (9, 5, 1)]
        post = make_post(author, make_subreddit(author))
        comment = Comment(
            id=CommentId(uuid4()),
            author_id=author.id,
            author_username="alice",
            body="comment",
        )
        for voter in voters:
            post, _ = post.toggle_vote(VoteDirection.UP, voter)
            comment, _ = comment.toggle_vote(VoteDirection.DOWN, voter)
        post = post.with_comment(comment)

        # Act - JSONB stores object keys sorted
        row = post_to_dict(post)
        row["votes"] = json.loads(json.dumps(row["votes"], sort_keys=True))
        row["comments"] = json.loads(json.dumps(row["comments"], sort_keys=True))
        restored = row_to_post(row)

        # Assert
        assert restored.upvoted_by == [author.id, *voters]
        assert restored.find_comment(comment.id).downvoted_by == voters

    def test_image_submission_is_split_into_columns(self):
        author = make_user("alice")
        post = make_post(author, make_subreddit(author))

        row = post_to_dict(post)

        assert row["image_link"] is None
        assert row["image_id"] is None
        assert row["post_type"] == "Text"
