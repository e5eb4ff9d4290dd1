"""End-to-end tests for the comment API."""

import pytest
from fastapi.testclient import TestClient

from murmur.domain.service import identity_hash
from murmur.interface.api.app import create_app
from tests.di import build_test_container

# TestClient reports this as the client address
CLIENT_IP = "testclient"


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


def _post(client, text, name=None, parent=None, path="/post/"):
    data = {"path": path, "title": "Post", "comment": text}
    if name is not None:
        data["name"] = name
    if parent is not None:
        data["parent"] = str(parent)
    return client.post("/comments", data=data)


class TestCommentFlow:
    """Posting, reading, voting, editing and deleting comments over HTTP."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_init_returns_hashes(self, client):
        response = client.get("/init")

        assert response.status_code == 200
        assert response.json()["user_ip"] == identity_hash(None, None, None, CLIENT_IP)

    def test_conversation(self, client):
        """Comment, reply, like and a rejected second like."""
        # Arrange / Act
        first = _post(client, "hello", name="A")
        reply = _post(client, "hi back", name="B", parent=first.json()["id"])
        like = client.post(f"/comments/{first.json()['id']}/like")
        again = client.post(f"/comments/{first.json()['id']}/like")
        listing = client.get("/comments", params={"url": "/post/"})
        count = client.get("/comments/count", params={"url": "/post/"})

        # Assert
        assert first.status_code == 201
        assert first.json() == {"id": 1, "parent": None, "author": "A"}
        assert reply.status_code == 201
        assert reply.json()["parent"] == 1
        assert like.status_code == 204
        assert again.status_code == 409

        comments = listing.json()["comments"]
        assert len(comments) == 1
        assert comments[0]["text"] == "hello"
        assert comments[0]["votes"] == 1
        assert comments[0]["hash"] == identity_hash("A", None, None)
        assert comments[0]["replies"][0]["text"] == "hi back"
        assert count.json() == 2

    def test_edit_requires_identity_hash(self, client):
        # Arrange
        created = _post(client, "typo", name="A").json()

        # Act
        denied = client.put(
            f"/comments/{created['id']}",
            json={"text": "fixed", "author": "A"},
            headers={"X-Identity-Hash": "not-mine"},
        )
        allowed = client.put(
            f"/comments/{created['id']}",
            json={"text": "fixed", "author": "A"},
            headers={"X-Identity-Hash": identity_hash("A", None, None)},
        )

        # Assert
        assert denied.status_code == 403
        assert allowed.status_code == 200
        assert allowed.json()["text"] == "fixed"

    def test_delete_leaves_tombstone_for_replies(self, client):
        # Arrange
        parent = _post(client, "parent", name="A").json()
        _post(client, "child", name="B", parent=parent["id"])

        # Act
        response = client.delete(
            f"/comments/{parent['id']}",
            headers={"X-Identity-Hash": identity_hash("A", None, None)},
        )

        # Assert
        assert response.status_code == 204
        comments = client.get("/comments", params={"url": "/post/"}).json()["comments"]
        assert comments[0]["text"] == ""
        assert comments[0]["author"] is None
        assert comments[0]["replies"][0]["text"] == "child"

    def test_unknown_comment(self, client):
        assert client.post("/comments/99/dislike").status_code == 404
        assert (
            client.delete("/comments/99", headers={"X-Identity-Hash": "x"}).status_code
            == 404
        )

    def test_reply_across_pages_is_not_found(self, client):
        first = _post(client, "on page one", path="/one/").json()

        response = _post(client, "on page two", parent=first["id"], path="/two/")

        assert response.status_code == 404
        assert client.get("/comments/count", params={"url": "/two/"}).json() == 0

    def test_comment_requires_path_and_text(self, client):
        response = client.post("/comments", data={"comment": "no path"})

        assert response.status_code == 422

    def test_empty_page(self, client):
        listing = client.get("/comments", params={"url": "/empty/"})
        count = client.get("/comments/count", params={"url": "/empty/"})

        assert listing.json() == {"comments": []}
        assert count.json() == 0
