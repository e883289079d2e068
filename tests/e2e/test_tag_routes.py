"""End-to-end tests for tag endpoints."""

import pytest
from fastapi.testclient import TestClient

from tullamore.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance, base_url="http://localhost")


class TestTagEndpoints:
    """End-to-end tests for tag API endpoints."""

    def test_create_tag_returns_location(self, client):
        """Should return 201 with the new tag's location."""
        # Act
        response = client.post("/tag", json={"name": "Java"})

        # Assert
        assert response.status_code == 201
        assert response.headers["Location"] == "http://localhost/tag/Java"
        assert response.json()["name"] == "Java"

    def test_create_existing_tag_conflicts(self, client):
        """Should return 409 when the name is taken."""
        client.post("/tag", json={"name": "Java"})

        response = client.post("/tag", json={"name": "Java"})

        assert response.status_code == 409

    def test_create_tag_with_blank_name_is_rejected(self, client):
        response = client.post("/tag", json={"name": "   "})

        assert response.status_code == 400

    def test_create_tag_with_slash_is_rejected(self, client):
        response = client.post("/tag", json={"name": "C/C++"})

        assert response.status_code == 400
        assert "Location" not in response.headers

    def test_location_addresses_created_tag(self, client):
        """The Location of a tag with URL-reserved characters resolves to it."""
        created = client.post("/tag", json={"name": "C++ & C#"})

        response = client.get(created.headers["Location"])

        assert response.status_code == 200
        assert response.json()["name"] == "C++ & C#"

    def test_get_tag(self, client):
        client.post("/tag", json={"name": "C++", "description": "Systems language"})

        response = client.get("/tag/C++")

        assert response.status_code == 200
        assert response.json()["description"] == "Systems language"

    def test_get_missing_tag(self, client):
        response = client.get("/tag/Missing")

        assert response.status_code == 404

    def test_update_tag(self, client):
        client.post("/tag", json={"name": "Java", "description": "Old"})

        response = client.put("/tag/Java", json={"description": "New"})

        assert response.status_code == 200
        assert response.json()["description"] == "New"
        assert client.get("/tag/Java").json()["description"] == "New"

    def test_update_missing_tag(self, client):
        response = client.put("/tag/Missing", json={"description": "New"})

        assert response.status_code == 404

    def test_delete_tag(self, client):
        client.post("/tag", json={"name": "Java"})

        response = client.delete("/tag/Java")

        assert response.status_code == 204
        assert client.get("/tag/Java").status_code == 404
        assert client.delete("/tag/Java").status_code == 404

    def test_list_tags(self, client):
        for name in ["Python", "Java", "Go"]:
            client.post("/tag", json={"name": name})

        response = client.get("/tag", params={"limit": 2})

        assert response.status_code == 200
        assert [t["name"] for t in response.json()["tags"]] == ["Go", "Java"]

    def test_list_tags_rejects_bad_limit(self, client):
        response = client.get("/tag", params={"limit": 0})

        assert response.status_code == 400


class TestHealthEndpoint:
    """Tests for the health check."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
