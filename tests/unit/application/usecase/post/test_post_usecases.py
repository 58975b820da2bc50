"""Unit tests for post use cases."""

import pytest

from threadly.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from threadly.domain.error import NotFoundError, ValidationError
from threadly.domain.repository import PostSortOrder, SubredditRepository, UserRepository
from threadly.domain.value import PostType
from tests.conftest import make_subreddit, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create_post(unit_env, title: str = "Hello"):
    user_repo = await unit_env.get(UserRepository)
    subreddit_repo = await unit_env.get(SubredditRepository)
    author = await user_repo.save(make_user("alice"))
    subreddit = await subreddit_repo.save(make_subreddit(author))
    use_case = await unit_env.get(CreatePostUseCase)
    view = await use_case.execute(
        CreatePostRequest(
            author_id=str(author.id),
            subreddit_id=str(subreddit.id),
            post_type=PostType.TEXT,
            title=title,
            text_submission="Body",
        )
    )
    return view, author, subreddit


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_returns_post_view(self, unit_env):
        view, author, subreddit = await _create_post(unit_env)

        assert view.title == "Hello"
        assert view.points_count == 1
        assert view.upvoted_by == [str(author.id)]
        assert view.author_username == "alice"
        assert view.subreddit_name == subreddit.name.root
        assert view.comments == []

    @pytest.mark.asyncio
    async def test_malformed_subreddit_id(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("alice"))
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(ValidationError, match="Malformed"):
            await use_case.execute(
                CreatePostRequest(
                    author_id=str(author.id),
                    subreddit_id="not-an-id",
                    post_type=PostType.TEXT,
                    title="Hello",
                    text_submission="Body",
                )
            )


class TestGetUpdateDeletePost:
    """Tests for the single post use cases."""

    @pytest.mark.asyncio
    async def test_get_post(self, unit_env):
        view, _, _ = await _create_post(unit_env)
        use_case = await unit_env.get(GetPostUseCase)

        result = await use_case.execute(GetPostRequest(post_id=view.post_id))

        assert result.post_id == view.post_id
        assert result.comments == []

    @pytest.mark.asyncio
    async def test_update_post(self, unit_env):
        view, author, _ = await _create_post(unit_env)
        use_case = await unit_env.get(UpdatePostUseCase)

        result = await use_case.execute(
            UpdatePostRequest(
                post_id=view.post_id, user_id=str(author.id), text_submission="New body"
            )
        )

        assert result.text_submission == "New body"

    @pytest.mark.asyncio
    async def test_delete_post(self, unit_env):
        view, author, _ = await _create_post(unit_env)
        delete_use_case = await unit_env.get(DeletePostUseCase)
        get_use_case = await unit_env.get(GetPostUseCase)

        await delete_use_case.execute(
            DeletePostRequest(post_id=view.post_id, user_id=str(author.id))
        )

        with pytest.raises(NotFoundError):
            await get_use_case.execute(GetPostRequest(post_id=view.post_id))


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_listing_leaves_out_comments(self, unit_env):
        await _create_post(unit_env)
        use_case = await unit_env.get(ListPostsUseCase)

        result = await use_case.execute(ListPostsRequest(sort=PostSortOrder.NEW))

        assert result.total == 1
        assert result.posts[0].comments is None

    @pytest.mark.asyncio
    async def test_invalid_page_falls_back_to_first(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)

        result = await use_case.execute(ListPostsRequest(page="abc", limit="-3"))

        assert result.page == 1
        assert result.limit == 1
        assert result.previous is None
