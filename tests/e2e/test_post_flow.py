"""End-to-end tests for posts, comments and votes over HTTP."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from threadly.config import AuthSettings
from threadly.domain.model import Subreddit, User
from threadly.domain.repository import PostRepository
from threadly.domain.service import JWTService, SubredditService, UserService
from threadly.domain.value import SubredditName, Username
from threadly.interface.api.app import create_app
from tests.di import build_test_container


async def _seed(container) -> tuple[User, User, Subreddit]:
    async with container() as request:
        user_service = await request.get(UserService)
        subreddit_service = await request.get(SubredditService)
        alice = await user_service.create_user(Username("alice"))
        bob = await user_service.create_user(Username("bob"))
        subreddit = await subreddit_service.create_subreddit(SubredditName("python"), alice.id)
        return alice, bob, subreddit


async def _count_posts(container) -> int:
    async with container() as request:
        post_repo = await request.get(PostRepository)
        return await post_repo.count()


@pytest.fixture
def container():
    return build_test_container(with_fastapi=True)


@pytest.fixture
def seeded(container):
    """Users alice and bob and the subreddit r/python."""
    return asyncio.run(_seed(container))


@pytest.fixture
def client(container):
    """Create test client."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


def _cookies(user: User) -> dict[str, str]:
    token = JWTService(AuthSettings()).create_token(str(user.id), user.username.root)
    return {"auth_token": token}


def _create_post(client, user, subreddit, **overrides):
    payload = {
        "subreddit_id": str(subreddit.id),
        "post_type": "Text",
        "title": "Hello",
        "text_submission": "World",
    }
    payload.update(overrides)
    client.cookies = _cookies(user)
    return client.post("/posts", json=payload)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPostFlow:
    """End-to-end tests for the post lifecycle."""

    def test_create_and_get_post(self, client, seeded):
        # Arrange
        alice, _, subreddit = seeded

        # Act
        created = _create_post(client, alice, subreddit)
        fetched = client.get(f"/posts/{created.json()['post_id']}")

        # Assert
        assert created.status_code == 201
        data = fetched.json()
        assert fetched.status_code == 200
        assert data["points_count"] == 1
        assert data["upvoted_by"] == [str(alice.id)]
        assert data["comment_count"] == 0
        assert data["subreddit_name"] == "python"
        assert data["comments"] == []

    def test_create_requires_auth(self, client, seeded):
        _, _, subreddit = seeded

        response = client.post(
            "/posts",
            json={"subreddit_id": str(subreddit.id), "post_type": "Text", "title": "x"},
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Authentication required"}

    def test_invalid_token(self, client, seeded):
        _, _, subreddit = seeded
        client.cookies = {"auth_token": "garbage"}

        response = client.post(
            "/posts",
            json={"subreddit_id": str(subreddit.id), "post_type": "Text", "title": "x"},
        )

        assert response.status_code == 401

    def test_invalid_link_is_400(self, client, seeded, container):
        alice, _, subreddit = seeded

        response = _create_post(
            client, alice, subreddit, post_type="Link", link_submission="nope"
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Valid URL needed for post type 'Link'."}
        assert asyncio.run(_count_posts(container)) == 0

    def test_text_over_limit_is_413(self, client, seeded, container):
        alice, _, subreddit = seeded

        response = _create_post(client, alice, subreddit, text_submission="x" * 40001)

        assert response.status_code == 413
        assert response.json() == {"message": "Text submission too long"}
        assert asyncio.run(_count_posts(container)) == 0

    def test_unknown_post_type_is_400(self, client, seeded):
        alice, _, subreddit = seeded

        response = _create_post(client, alice, subreddit, post_type="Video")

        assert response.status_code == 400
        assert "message" in response.json()

    def test_missing_post_is_404(self, client):
        response = client.get("/posts/00000000-0000-4000-8000-000000000000")

        assert response.status_code == 404
        assert response.json() == {
            "message": "Post with ID: 00000000-0000-4000-8000-000000000000 does not exist in database."
        }

    def test_malformed_post_id_is_400(self, client):
        response = client.get("/posts/not-a-uuid")

        assert response.status_code == 400

    def test_update_and_delete_post(self, client, seeded):
        alice, bob, subreddit = seeded
        post_id = _create_post(client, alice, subreddit).json()["post_id"]

        client.cookies = _cookies(bob)
        forbidden = client.patch(f"/posts/{post_id}", json={"text_submission": "mine"})
        client.cookies = _cookies(alice)
        updated = client.patch(f"/posts/{post_id}", json={"text_submission": "Edited"})
        deleted = client.delete(f"/posts/{post_id}")
        missing = client.get(f"/posts/{post_id}")

        assert forbidden.status_code == 401
        assert forbidden.json()["message"].startswith("Access is denied")
        assert updated.status_code == 200
        assert updated.json()["text_submission"] == "Edited"
        assert deleted.status_code == 204
        assert missing.status_code == 404

    def test_list_posts(self, client, seeded):
        alice, _, subreddit = seeded
        for i in range(3):
            _create_post(client, alice, subreddit, title=f"Post {i}")

        response = client.get("/posts", params={"sort": "new", "limit": "2"})

        data = response.json()
        assert response.status_code == 200
        assert data["total"] == 3
        assert data["limit"] == 2
        assert data["next"] == 2
        assert [p["title"] for p in data["posts"]] == ["Post 2", "Post 1"]


class TestVoteFlow:
    """End-to-end tests for voting."""

    def test_post_vote_toggle(self, client, seeded):
        alice, bob, subreddit = seeded
        post_id = _create_post(client, alice, subreddit).json()["post_id"]

        client.cookies = _cookies(bob)
        first = client.post(f"/posts/{post_id}/upvote")
        after_up = client.get(f"/posts/{post_id}").json()
        client.post(f"/posts/{post_id}/upvote")
        after_toggle = client.get(f"/posts/{post_id}").json()
        client.post(f"/posts/{post_id}/downvote")
        after_down = client.get(f"/posts/{post_id}").json()

        assert first.status_code == 204
        assert after_up["points_count"] == 2
        assert after_toggle["points_count"] == 1
        assert after_down["points_count"] == 0
        assert after_down["downvoted_by"] == [str(bob.id)]
        assert after_down["vote_ratio"] == 50

    def test_vote_requires_auth(self, client, seeded):
        alice, _, subreddit = seeded
        post_id = _create_post(client, alice, subreddit).json()["post_id"]
        client.cookies = {}

        response = client.post(f"/posts/{post_id}/upvote")

        assert response.status_code == 401


class TestCommentFlow:
    """End-to-end tests for comments and replies."""

    def test_comment_reply_and_votes(self, client, seeded):
        # Arrange
        alice, bob, subreddit = seeded
        post_id = _create_post(client, alice, subreddit).json()["post_id"]

        # Act
        client.cookies = _cookies(bob)
        created = client.post(f"/posts/{post_id}/comments", json={"body": "Nice"})
        comment_id = created.json()["comments"][0]["comment_id"]
        client.cookies = _cookies(alice)
        replied = client.post(
            f"/posts/{post_id}/comments/{comment_id}/replies", json={"body": "Thanks"}
        )
        reply_id = replied.json()["comments"][0]["replies"][0]["reply_id"]
        comment_vote = client.post(f"/posts/{post_id}/comments/{comment_id}/upvote")
        client.cookies = _cookies(bob)
        reply_vote = client.post(
            f"/posts/{post_id}/comments/{comment_id}/replies/{reply_id}/downvote"
        )
        post = client.get(f"/posts/{post_id}").json()

        # Assert
        assert created.status_code == 201
        assert replied.status_code == 201
        assert comment_vote.status_code == 204
        assert reply_vote.status_code == 204
        assert post["comment_count"] == 2
        comment = post["comments"][0]
        assert comment["points_count"] == 2
        assert comment["replies"][0]["points_count"] == 0

    def test_empty_comment_is_400(self, client, seeded):
        alice, _, subreddit = seeded
        post_id = _create_post(client, alice, subreddit).json()["post_id"]

        response = client.post(f"/posts/{post_id}/comments", json={"body": "  "})

        assert response.status_code == 400
        assert response.json() == {"message": "Comment body can't be empty."}

    def test_non_author_cannot_delete_comment(self, client, seeded):
        alice, bob, subreddit = seeded
        post_id = _create_post(client, alice, subreddit).json()["post_id"]
        client.cookies = _cookies(bob)
        created = client.post(f"/posts/{post_id}/comments", json={"body": "Mine"})
        comment_id = created.json()["comments"][0]["comment_id"]

        client.cookies = _cookies(alice)
        response = client.delete(f"/posts/{post_id}/comments/{comment_id}")
        post = client.get(f"/posts/{post_id}").json()

        assert response.status_code == 401
        assert len(post["comments"]) == 1

    def test_edit_and_delete_reply(self, client, seeded):
        alice, bob, subreddit = seeded
        post_id = _create_post(client, alice, subreddit).json()["post_id"]
        client.cookies = _cookies(bob)
        created = client.post(f"/posts/{post_id}/comments", json={"body": "Thread"})
        comment_id = created.json()["comments"][0]["comment_id"]
        replied = client.post(
            f"/posts/{post_id}/comments/{comment_id}/replies", json={"body": "Draft"}
        )
        reply_id = replied.json()["comments"][0]["replies"][0]["reply_id"]

        edited = client.patch(
            f"/posts/{post_id}/comments/{comment_id}/replies/{reply_id}",
            json={"body": "Final"},
        )
        deleted = client.delete(f"/posts/{post_id}/comments/{comment_id}/replies/{reply_id}")
        post = client.get(f"/posts/{post_id}").json()

        assert edited.status_code == 200
        assert edited.json()["body"] == "Final"
        assert deleted.status_code == 204
        assert post["comments"][0]["replies"] == []
        assert post["comment_count"] == 1
