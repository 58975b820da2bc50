"""Integration tests for the PostgreSQL repositories.

Requires a migrated database at DATABASE__URL; skipped otherwise.
"""

import os
from uuid import UUID

import pytest

from threadly.domain.error import ConcurrentUpdateError
from threadly.domain.repository import (
    PostRepository,
    PostSortOrder,
    SubredditRepository,
    UserRepository,
)
from threadly.domain.value import UserId, Username, VoteDirection
from tests.conftest import make_post, make_subreddit, make_user
from tests.harness import create_container_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="needs a PostgreSQL database"
)

# Integration fixture - real persistence
integration_container = create_container_fixture(unmock={"persistence"})


async def _seed(container):
    async with container() as request:
        user_repo = await request.get(UserRepository)
        subreddit_repo = await request.get(SubredditRepository)
        post_repo = await request.get(PostRepository)
        author = await user_repo.save(make_user(f"u{os.urandom(4).hex()}"))
        subreddit = await subreddit_repo.save(
            make_subreddit(author, name=f"s{os.urandom(4).hex()}")
        )
        post = await post_repo.save(make_post(author, subreddit))
        return author, subreddit, post


class TestPostgresRepositories:
    """Round trips through PostgreSQL."""

    @pytest.mark.asyncio
    async def test_post_round_trip(self, integration_container):
        author, subreddit, post = await _seed(integration_container)

        async with integration_container() as request:
            post_repo = await request.get(PostRepository)
            found = await post_repo.find_by_id(post.id)
            listed = await post_repo.find_all(
                sort=PostSortOrder.NEW, subreddit_id=subreddit.id
            )

        assert found.upvoted_by == [author.id]
        assert found.version == 1
        assert [p.id for p in listed] == [post.id]

    @pytest.mark.asyncio
    async def test_vote_order_round_trip(self, integration_container):
        """Votes should load in the order they were cast, not by voter id."""
        author, _, post = await _seed(integration_container)
        voters = [UserId(UUID(int=n)) for n in (9, 5, 1)]
        for voter in voters:
            post, _ = post.toggle_vote(VoteDirection.UP, voter)

        async with integration_container() as request:
            post_repo = await request.get(PostRepository)
            await post_repo.save(post)

        async with integration_container() as request:
            post_repo = await request.get(PostRepository)
            found = await post_repo.find_by_id(post.id)

        assert found.upvoted_by == [author.id, *voters]

    @pytest.mark.asyncio
    async def test_username_lookup_ignores_case(self, integration_container):
        author, _, _ = await _seed(integration_container)

        async with integration_container() as request:
            user_repo = await request.get(UserRepository)
            found = await user_repo.find_by_username(Username(author.username.root.upper()))

        assert found.id == author.id

    @pytest.mark.asyncio
    async def test_stale_post_save_conflicts(self, integration_container):
        author, _, post = await _seed(integration_container)

        async with integration_container() as request:
            post_repo = await request.get(PostRepository)
            await post_repo.save(post.model_copy(update={"title": "First"}))

        with pytest.raises(ConcurrentUpdateError):
            async with integration_container() as request:
                post_repo = await request.get(PostRepository)
                await post_repo.save(post.model_copy(update={"title": "Second"}))
