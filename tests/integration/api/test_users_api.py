"""API tests for profile updates."""

from uuid import uuid4

import pytest

from tests.shared.fixtures.api import sign_up

pytestmark = pytest.mark.integration


class TestUpdateProfile:
    def test_partial_update(self, client):
        user = sign_up(client, display_name="Ann")["user"]

        response = client.put(f"/api/users/{user['id']}", json={"bio": "Hello"})

        assert response.status_code == 200
        assert response.json() == {
            "id": user["id"],
            "email": user["email"],
            "displayName": "Ann",
            "bio": "Hello",
        }

    def test_null_clears_field(self, client):
        user = sign_up(client, display_name="Ann")["user"]

        response = client.put(
            f"/api/users/{user['id']}",
            json={"displayName": None},
        )

        assert response.json()["displayName"] is None

    def test_update_is_visible_in_feed(self, client):
        user = sign_up(client)["user"]
        client.post("/api/thoughts", json={"content": "hi", "userId": user["id"]})

        client.put(f"/api/users/{user['id']}", json={"displayName": "Renamed"})

        feed = client.get("/api/thoughts").json()
        assert feed[0]["user"]["displayName"] == "Renamed"

    def test_display_name_too_long(self, client):
        user = sign_up(client)["user"]

        response = client.put(
            f"/api/users/{user['id']}",
            json={"displayName": "n" * 51},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PROFILE"

    def test_bio_too_long(self, client):
        user = sign_up(client)["user"]

        response = client.put(f"/api/users/{user['id']}", json={"bio": "b" * 161})

        assert response.status_code == 400
        assert response.json()["error"] == "Bio cannot exceed 160 characters"

    def test_unknown_user(self, client):
        response = client.put(f"/api/users/{uuid4()}", json={"bio": "x"})

        assert response.status_code == 404


class TestServiceEndpoints:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        body = client.get("/").json()

        assert body["api_base"] == "/api"
