"""Route-level tests through the FastAPI app.

Each HTTP request opens its own request scope, so in-memory repositories
start empty on every call. These tests cover routing, status codes and
the admin session cookie rather than multi-request data flows.
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from dami.domain.service import hash_password
from dami.interface.api.app import create_app
from tests.di import build_test_container

ADMIN_EMAIL = "admin@devopswithdami.com"
PASSWORD = "let-me-in"


@pytest.fixture
def admin_env(monkeypatch):
    """Environment with known admin credentials, set before Settings load."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("AUTH__JWT_SECRET", "route-test-secret")
    monkeypatch.setenv("AUTH__ADMIN_EMAIL", ADMIN_EMAIL)
    monkeypatch.setenv("AUTH__ADMIN_PASSWORD_HASH", hash_password(PASSWORD))


@pytest.fixture
def client(admin_env):
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


class TestPublicRoutes:
    """Catalog, comment and like routes."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["environment"] == "test"

    def test_empty_catalogs(self, client):
        assert client.get("/articles").json() == {"articles": [], "total": 0}
        assert client.get("/videos/featured").json() == {"videos": [], "total": 0}
        assert client.get("/articles/categories").json() == ["All"]
        assert client.get("/videos/categories").json() == ["All"]

    @pytest.mark.parametrize("path", ["/articles/{id}", "/videos/{id}"])
    def test_missing_content_is_404(self, client, path):
        response = client.get(path.format(id=uuid4()))

        assert response.status_code == 404
        assert "not found" in response.json()["detail"]

    def test_malformed_id_is_404(self, client):
        assert client.get("/articles/not-a-uuid").status_code == 404

    def test_comments_on_missing_subject_is_404(self, client):
        assert client.get(f"/videos/{uuid4()}/comments").status_code == 404
        response = client.post(
            f"/articles/{uuid4()}/comments", json={"body": "Hello"}
        )
        assert response.status_code == 404

    def test_unknown_subject_kind_is_rejected(self, client):
        assert client.get(f"/podcasts/{uuid4()}/comments").status_code in (404, 422)

    def test_like_requires_client_id_header(self, client):
        response = client.post(f"/articles/{uuid4()}/like")

        assert response.status_code == 400
        assert response.json()["detail"] == "X-Client-Id header is required"

    def test_like_missing_subject_is_404(self, client):
        response = client.get(
            f"/videos/{uuid4()}/like", headers={"X-Client-Id": "anon_abc"}
        )
        assert response.status_code == 404

    def test_issue_client_id(self, client):
        first = client.get("/client-id").json()["client_id"]
        second = client.get("/client-id").json()["client_id"]

        assert first.startswith("anon_")
        assert first != second


class TestAdminRoutes:
    """Admin session and protected routes."""

    @pytest.mark.parametrize(
        "method,path",
        [
            ("GET", "/admin/me"),
            ("GET", "/admin/dashboard"),
            ("GET", "/admin/articles"),
            ("GET", "/admin/videos"),
            ("DELETE", f"/admin/articles/{uuid4()}"),
            ("DELETE", f"/admin/comments/{uuid4()}"),
        ],
    )
    def test_protected_routes_require_session(self, client, method, path):
        response = client.request(method, path)

        assert response.status_code == 401

    def test_garbage_cookie_is_401(self, client):
        response = client.get("/admin/me", headers={"Cookie": "admin_token=garbage"})

        assert response.status_code == 401

    def test_bad_credentials(self, client):
        response = client.post(
            "/admin/login", json={"email": ADMIN_EMAIL, "password": "nope"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid login credentials"
        assert "admin_token" not in response.cookies

    def test_login_session_and_logout(self, client):
        login = client.post(
            "/admin/login", json={"email": ADMIN_EMAIL, "password": PASSWORD}
        )
        assert login.status_code == 200
        assert login.json() == {"email": ADMIN_EMAIL}
        assert "admin_token" in client.cookies
        set_cookie = login.headers["set-cookie"].lower()
        assert "httponly" in set_cookie

        me = client.get("/admin/me")
        assert me.status_code == 200
        assert me.json()["email"] == ADMIN_EMAIL

        dashboard = client.get("/admin/dashboard")
        assert dashboard.json() == {"articles": 0, "videos": 0}

        missing = client.delete(f"/admin/comments/{uuid4()}")
        assert missing.status_code == 404

        invalid = client.post(
            "/admin/videos",
            json={
                "title": "Title",
                "description": "Description",
                "youtube_url": "https://example.com/watch",
                "category": "Tutorial",
            },
        )
        assert invalid.status_code == 400
        assert invalid.json()["detail"].startswith("Invalid YouTube URL")

        created = client.post(
            "/admin/articles",
            json={
                "title": "Hello",
                "excerpt": "First post",
                "content": "<p>Hi</p>",
                "category": "Technology",
                "featured_image": "https://images.example.com/a.png",
            },
        )
        assert created.status_code == 201
        assert created.json()["title"] == "Hello"

        client.post("/admin/logout")
        assert client.get("/admin/me").status_code == 401
