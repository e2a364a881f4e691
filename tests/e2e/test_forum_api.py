"""End-to-end tests for the forum HTTP API.

Requests go through the full FastAPI stack with in-memory persistence.
"""

import pytest
from fastapi.testclient import TestClient

from forum.config import Settings
from forum.domain.value import DELETED_COMMENT_PLACEHOLDER, DELETED_REPLY_PLACEHOLDER
from forum.interface.api.app import create_app
from forum.persistence.repository.inmemory import InMemoryUserRepository
from forum.util.jwt import create_token
from tests.di import build_test_container
from tests.harness import seed_user


async def _seed_users(container) -> None:
    async with container() as request_container:
        users = await request_container.get(InMemoryUserRepository)
        await seed_user(users, "user-1", "dicoding")
        await seed_user(users, "user-2", "johndoe")


def _auth(user_id: str) -> dict[str, str]:
    token = create_token(user_id, Settings().auth)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client():
    """Create test client with test container and two known users."""
    container = build_test_container()
    app_instance = create_app(container)
    with TestClient(app_instance) as test_client:
        test_client.portal.call(_seed_users, container)
        yield test_client


def _add_thread(client, title: str = "sebuah thread") -> str:
    response = client.post(
        "/threads",
        json={"title": title, "body": "sebuah body thread"},
        headers=_auth("user-1"),
    )
    assert response.status_code == 201
    return response.json()["data"]["addedThread"]["id"]


def _add_comment(client, thread_id: str, content: str = "sebuah comment") -> str:
    response = client.post(
        f"/threads/{thread_id}/comments",
        json={"content": content},
        headers=_auth("user-2"),
    )
    assert response.status_code == 201
    return response.json()["data"]["addedComment"]["id"]


class TestThreadEndpoints:
    """HTTP tests for thread endpoints."""

    def test_add_thread(self, client):
        """POST /threads returns the created thread owned by the caller."""
        # Act
        response = client.post(
            "/threads",
            json={"title": "sebuah thread", "body": "sebuah body thread"},
            headers=_auth("user-1"),
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        added = body["data"]["addedThread"]
        assert added["id"].startswith("thread-")
        assert added["title"] == "sebuah thread"
        assert added["owner"] == "user-1"

    def test_add_thread_without_auth(self, client):
        """Missing token returns 401."""
        response = client.post("/threads", json={"title": "t", "body": "b"})

        assert response.status_code == 401
        assert response.json()["status"] == "fail"

    def test_add_thread_with_invalid_token(self, client):
        response = client.post(
            "/threads",
            json={"title": "t", "body": "b"},
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401

    def test_add_thread_missing_property(self, client):
        """Validation errors map to 400 with their kind."""
        # Act
        response = client.post(
            "/threads", json={"title": "t"}, headers=_auth("user-1")
        )

        # Assert
        assert response.status_code == 400
        body = response.json()
        assert body["status"] == "fail"
        assert body["kind"] == "NOT_CONTAIN_NEEDED_PROPERTY"
        assert body["message"] == "ADD_THREAD.NOT_CONTAIN_NEEDED_PROPERTY"

    def test_add_thread_wrong_type(self, client):
        response = client.post(
            "/threads", json={"title": 123, "body": "b"}, headers=_auth("user-1")
        )

        assert response.status_code == 400
        assert response.json()["kind"] == "NOT_MEET_DATA_TYPE_SPECIFICATION"

    def test_duplicate_title(self, client):
        _add_thread(client, title="taken")

        response = client.post(
            "/threads", json={"title": "taken", "body": "b"}, headers=_auth("user-1")
        )

        assert response.status_code == 400
        assert response.json()["kind"] == "THREAD_TITLE_TAKEN"

    def test_get_thread_without_comments(self, client):
        """Thread detail always carries a comments list."""
        # Arrange
        thread_id = _add_thread(client)

        # Act
        response = client.get(f"/threads/{thread_id}")

        # Assert
        assert response.status_code == 200
        thread = response.json()["data"]["thread"]
        assert thread["id"] == thread_id
        assert thread["username"] == "dicoding"
        assert thread["comments"] == []

    def test_get_missing_thread(self, client):
        response = client.get("/threads/thread-missing")

        assert response.status_code == 404
        assert response.json()["kind"] == "THREAD_NOT_FOUND"

    def test_get_thread_of_unknown_user(self, client):
        """A thread whose owner has no user row is a 404, never a 400."""
        # Arrange
        response = client.post(
            "/threads",
            json={"title": "orphan", "body": "B"},
            headers=_auth("user-unknown"),
        )
        thread_id = response.json()["data"]["addedThread"]["id"]

        # Act
        response = client.get(f"/threads/{thread_id}")

        # Assert
        assert response.status_code == 404
        assert response.json() == {
            "status": "fail",
            "message": "user not found: user-unknown",
            "kind": "USER_NOT_FOUND",
        }


class TestCommentEndpoints:
    """HTTP tests for comment endpoints."""

    def test_add_comment(self, client):
        # Arrange
        thread_id = _add_thread(client)

        # Act
        response = client.post(
            f"/threads/{thread_id}/comments",
            json={"content": "sebuah comment"},
            headers=_auth("user-2"),
        )

        # Assert
        assert response.status_code == 201
        added = response.json()["data"]["addedComment"]
        assert added["content"] == "sebuah comment"
        assert added["owner"] == "user-2"

    def test_add_comment_to_missing_thread(self, client):
        response = client.post(
            "/threads/thread-missing/comments",
            json={"content": "c"},
            headers=_auth("user-2"),
        )

        assert response.status_code == 404

    def test_delete_comment_by_other_user(self, client):
        """Deleting someone else's comment returns 403."""
        # Arrange
        thread_id = _add_thread(client)
        comment_id = _add_comment(client, thread_id)

        # Act
        response = client.delete(
            f"/threads/{thread_id}/comments/{comment_id}", headers=_auth("user-1")
        )

        # Assert
        assert response.status_code == 403
        assert response.json()["kind"] == "NOT_AUTHORIZED"

    def test_delete_comment_then_read_thread(self, client):
        """A deleted comment stays listed with masked content."""
        # Arrange
        thread_id = _add_thread(client)
        comment_id = _add_comment(client, thread_id, content="hi")

        # Act
        delete_response = client.delete(
            f"/threads/{thread_id}/comments/{comment_id}", headers=_auth("user-2")
        )
        detail = client.get(f"/threads/{thread_id}").json()["data"]["thread"]

        # Assert
        assert delete_response.status_code == 200
        assert delete_response.json() == {"status": "success"}
        assert len(detail["comments"]) == 1
        assert detail["comments"][0]["id"] == comment_id
        assert detail["comments"][0]["content"] == DELETED_COMMENT_PLACEHOLDER
        assert detail["comments"][0]["username"] == "johndoe"


class TestReplyEndpoints:
    """HTTP tests for reply endpoints."""

    def test_add_and_delete_reply(self, client):
        # Arrange
        thread_id = _add_thread(client)
        comment_id = _add_comment(client, thread_id)
        base = f"/threads/{thread_id}/comments/{comment_id}/replies"

        # Act
        added = client.post(
            base, json={"content": "sebuah balasan"}, headers=_auth("user-1")
        )
        reply_id = added.json()["data"]["addedReply"]["id"]
        deleted = client.delete(f"{base}/{reply_id}", headers=_auth("user-1"))
        detail = client.get(f"/threads/{thread_id}").json()["data"]["thread"]

        # Assert
        assert added.status_code == 201
        assert reply_id.startswith("reply-")
        assert deleted.status_code == 200
        reply = detail["comments"][0]["replies"][0]
        assert reply["id"] == reply_id
        assert reply["content"] == DELETED_REPLY_PLACEHOLDER
        assert reply["username"] == "dicoding"

    def test_reply_to_missing_comment(self, client):
        thread_id = _add_thread(client)

        response = client.post(
            f"/threads/{thread_id}/comments/comment-missing/replies",
            json={"content": "r"},
            headers=_auth("user-1"),
        )

        assert response.status_code == 404
        assert response.json()["kind"] == "COMMENT_NOT_FOUND"

    def test_reply_without_content(self, client):
        thread_id = _add_thread(client)
        comment_id = _add_comment(client, thread_id)

        response = client.post(
            f"/threads/{thread_id}/comments/{comment_id}/replies",
            json={},
            headers=_auth("user-1"),
        )

        assert response.status_code == 400


class TestLikeEndpoints:
    """HTTP tests for the like toggle."""

    def test_like_toggle_updates_like_count(self, client):
        """Liking twice returns the count to zero."""
        # Arrange
        thread_id = _add_thread(client)
        comment_id = _add_comment(client, thread_id)
        url = f"/threads/{thread_id}/comments/{comment_id}/likes"

        # Act & Assert
        assert client.put(url, headers=_auth("user-1")).status_code == 200
        detail = client.get(f"/threads/{thread_id}").json()["data"]["thread"]
        assert detail["comments"][0]["likeCount"] == 1

        assert client.put(url, headers=_auth("user-1")).status_code == 200
        detail = client.get(f"/threads/{thread_id}").json()["data"]["thread"]
        assert detail["comments"][0]["likeCount"] == 0

    def test_like_without_auth(self, client):
        response = client.put("/threads/t/comments/c/likes")

        assert response.status_code == 401


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
