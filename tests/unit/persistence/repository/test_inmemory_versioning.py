"""Unit tests for optimistic versioning in the in-memory store."""

import pytest

from threadly.domain.error import ConcurrentUpdateError
from threadly.domain.service import VoteService
from threadly.domain.value import VoteDirection
from threadly.domain.repository import PostRepository, SubredditRepository, UserRepository
from threadly.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_post, make_subreddit, make_user
from tests.harness import create_container_fixture

# Container fixture - several request scopes over one in-memory database
unit_container = create_container_fixture()


class TestVersionedSave:
    """Tests for version checks on save."""

    @pytest.mark.asyncio
    async def test_new_aggregate_gets_version_one(self):
        repo = InMemoryUserRepository(InMemoryDatabase())

        saved = await repo.save(make_user())

        assert saved.version == 1

    @pytest.mark.asyncio
    async def test_save_bumps_version(self):
        repo = InMemoryUserRepository(InMemoryDatabase())
        user = await repo.save(make_user())

        updated = await repo.save(user.with_karma(post_delta=1))

        assert updated.version == 2
        assert (await repo.find_by_id(user.id)).karma_points.post_karma == 1

    @pytest.mark.asyncio
    async def test_stale_save_is_rejected(self):
        """Saving a copy loaded before another save should fail."""
        # Arrange
        database = InMemoryDatabase()
        repo = InMemoryUserRepository(database)
        user = await repo.save(make_user())
        first = await repo.find_by_id(user.id)
        second = await repo.find_by_id(user.id)

        # Act
        await repo.save(first.with_karma(post_delta=1))

        # Assert - the second writer must not overwrite the first
        with pytest.raises(ConcurrentUpdateError):
            await repo.save(second.with_karma(post_delta=1))
        assert (await repo.find_by_id(user.id)).karma_points.post_karma == 1

    @pytest.mark.asyncio
    async def test_inserting_existing_id_is_rejected(self):
        repo = InMemoryUserRepository(InMemoryDatabase())
        user = make_user()
        await repo.save(user)

        with pytest.raises(ConcurrentUpdateError):
            await repo.save(user)

    @pytest.mark.asyncio
    async def test_delete(self):
        database = InMemoryDatabase()
        author = make_user()
        post = await InMemoryPostRepository(database).save(
            make_post(author, make_subreddit(author))
        )
        repo = InMemoryPostRepository(database)

        assert await repo.delete(post.id) is True
        assert await repo.delete(post.id) is False


class TestConcurrentVotes:
    """Two requests voting on the same post at once."""

    @pytest.mark.asyncio
    async def test_second_vote_on_stale_post_conflicts(self, unit_container):
        # Arrange
        async with unit_container() as setup:
            user_repo = await setup.get(UserRepository)
            subreddit_repo = await setup.get(SubredditRepository)
            post_repo = await setup.get(PostRepository)
            author = await user_repo.save(make_user("author"))
            voter_a = await user_repo.save(make_user("voter_a"))
            voter_b = await user_repo.save(make_user("voter_b"))
            subreddit = await subreddit_repo.save(make_subreddit(author))
            post = await post_repo.save(make_post(author, subreddit))

        async with unit_container() as request_a, unit_container() as request_b:
            post_repo_a = await request_a.get(PostRepository)
            post_repo_b = await request_b.get(PostRepository)
            # Both requests read the post before either writes
            loaded_a = await post_repo_a.find_by_id(post.id)
            loaded_b = await post_repo_b.find_by_id(post.id)

            # Act
            voted_a, _ = loaded_a.toggle_vote(VoteDirection.UP, voter_a.id)
            await post_repo_a.save(voted_a)
            voted_b, _ = loaded_b.toggle_vote(VoteDirection.UP, voter_b.id)

            # Assert
            with pytest.raises(ConcurrentUpdateError):
                await post_repo_b.save(voted_b)

        # The retried vote goes through on fresh data
        async with unit_container() as retry:
            vote_service = await retry.get(VoteService)
            result = await vote_service.vote_post(post.id, voter_b.id, VoteDirection.UP)
            assert result.upvoted_by == [author.id, voter_a.id, voter_b.id]
            assert result.points_count == 3
