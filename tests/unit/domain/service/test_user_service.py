"""Unit tests for UserService and SubredditService."""

from uuid import uuid4

import pytest

from threadly.domain.error import ConflictError, NotFoundError
from threadly.domain.repository import UserRepository
from threadly.domain.service import SubredditService, UserService
from threadly.domain.value import SubredditId, SubredditName, UserId, Username
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_create_and_find_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        user = await user_service.create_user(Username("Alice"), password_hash="hash")

        user_repo = await unit_env.get(UserRepository)

        found = await user_repo.find_by_username(Username("alice"))
        assert found is not None
        assert found.id == user.id
        assert user.version == 1
        assert user.karma_points.total == 0

    @pytest.mark.asyncio
    async def test_duplicate_username_ignores_case(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.create_user(Username("alice"))

        with pytest.raises(ConflictError, match="User with username 'ALICE' already exists."):
            await user_service.create_user(Username("ALICE"))

    @pytest.mark.asyncio
    async def test_get_missing_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User does not exist in database."):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_karma_may_go_negative(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user(Username("grumpy"))

        user = await user_service.apply_post_karma(user, -1)
        user = await user_service.apply_comment_karma(user, -1)

        assert user.karma_points.post_karma == -1
        assert user.karma_points.comment_karma == -1
        assert user.karma_points.total == -2


class TestSubredditService:
    """Tests for SubredditService."""

    @pytest.mark.asyncio
    async def test_create_subreddit(self, unit_env):
        user_service = await unit_env.get(UserService)
        subreddit_service = await unit_env.get(SubredditService)
        creator = await user_service.create_user(Username("alice"))

        subreddit = await subreddit_service.create_subreddit(
            SubredditName("python"), creator.id, description="Snakes"
        )

        found = await subreddit_service.get_by_id(subreddit.id)
        assert found.name.root == "python"
        assert found.creator_id == creator.id

    @pytest.mark.asyncio
    async def test_duplicate_name_ignores_case(self, unit_env):
        user_service = await unit_env.get(UserService)
        subreddit_service = await unit_env.get(SubredditService)
        creator = await user_service.create_user(Username("alice"))
        await subreddit_service.create_subreddit(SubredditName("python"), creator.id)

        with pytest.raises(ConflictError):
            await subreddit_service.create_subreddit(SubredditName("Python"), creator.id)

    @pytest.mark.asyncio
    async def test_get_missing_subreddit(self, unit_env):
        subreddit_service = await unit_env.get(SubredditService)
        subreddit_id = SubredditId(uuid4())

        with pytest.raises(
            NotFoundError,
            match=f"Subreddit with ID: '{subreddit_id}' does not exist in database.",
        ):
            await subreddit_service.get_by_id(subreddit_id)
