"""Unit tests for comment and reply use cases."""

import pytest

from threadly.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)
from threadly.domain.error import NotAuthorizedError, ValidationError
from threadly.domain.repository import PostRepository, SubredditRepository, UserRepository
from tests.conftest import make_post, make_subreddit, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env):
    user_repo = await unit_env.get(UserRepository)
    subreddit_repo = await unit_env.get(SubredditRepository)
    post_repo = await unit_env.get(PostRepository)
    alice = await user_repo.save(make_user("alice"))
    bob = await user_repo.save(make_user("bob"))
    subreddit = await subreddit_repo.save(make_subreddit(alice))
    post = await post_repo.save(make_post(alice, subreddit))
    return str(post.id), str(alice.id), str(bob.id)


class TestCommentUseCases:
    """Tests for the comment use cases."""

    @pytest.mark.asyncio
    async def test_comment_lifecycle(self, unit_env):
        # Arrange
        post_id, _, bob_id = await _seed(unit_env)
        create = await unit_env.get(CreateCommentUseCase)
        update = await unit_env.get(UpdateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)

        # Act
        created = await create.execute(
            CreateCommentRequest(post_id=post_id, author_id=bob_id, body="Hello")
        )
        comment_id = created.comments[0].comment_id
        edited = await update.execute(
            UpdateCommentRequest(
                post_id=post_id, comment_id=comment_id, user_id=bob_id, body="Hello!"
            )
        )
        await delete.execute(
            DeleteCommentRequest(post_id=post_id, comment_id=comment_id, user_id=bob_id)
        )

        # Assert
        assert created.post_id == post_id
        assert created.comment_count == 1
        assert created.comments[0].upvoted_by == [bob_id]
        assert edited.body == "Hello!"

    @pytest.mark.asyncio
    async def test_malformed_comment_id(self, unit_env):
        post_id, _, bob_id = await _seed(unit_env)
        delete = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(ValidationError, match="Malformed comment ID"):
            await delete.execute(
                DeleteCommentRequest(post_id=post_id, comment_id="42", user_id=bob_id)
            )


class TestReplyUseCases:
    """Tests for the reply use cases."""

    @pytest.mark.asyncio
    async def test_reply_lifecycle(self, unit_env):
        # Arrange
        post_id, alice_id, bob_id = await _seed(unit_env)
        create_comment = await unit_env.get(CreateCommentUseCase)
        create_reply = await unit_env.get(CreateReplyUseCase)
        update_reply = await unit_env.get(UpdateReplyUseCase)
        delete_reply = await unit_env.get(DeleteReplyUseCase)
        created = await create_comment.execute(
            CreateCommentRequest(post_id=post_id, author_id=bob_id, body="Question")
        )
        comment_id = created.comments[0].comment_id

        # Act
        replied = await create_reply.execute(
            CreateReplyRequest(
                post_id=post_id, comment_id=comment_id, author_id=alice_id, body="Answer"
            )
        )
        reply_id = replied.comments[0].replies[0].reply_id
        edited = await update_reply.execute(
            UpdateReplyRequest(
                post_id=post_id,
                comment_id=comment_id,
                reply_id=reply_id,
                user_id=alice_id,
                body="Better answer",
            )
        )

        # Assert
        assert replied.comment_count == 2
        assert edited.body == "Better answer"
        with pytest.raises(NotAuthorizedError):
            await delete_reply.execute(
                DeleteReplyRequest(
                    post_id=post_id, comment_id=comment_id, reply_id=reply_id, user_id=bob_id
                )
            )
