"""Tests for the admin HTTP routes, resolved against the test CMS."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from decoy.core.exceptions import AuthConfigurationError
from decoy.main import create_app
from tests.cms_app import ADMIN_EMAIL, ADMIN_PASSWORD, GOOD_TOKEN, cms_registry


def _related(body: dict[str, Any], controller: str) -> dict[str, Any]:
    """Helper: pick a related list's summary out of an edit response."""
    matches = [r for r in body["related"] if r["controller"] == controller]
    assert len(matches) == 1, body["related"]
    return matches[0]


class TestRootRoute:
    def test_root_returns_discovery(self, client: TestClient) -> None:
        resp = client.get("/")
        assert resp.status_code == 200
        body = resp.json()
        assert body["admin"] == "/admin"
        assert body["settings"]["dir"] == "admin"
        assert body["settings"]["upload_delete"] == "delete-"
        assert body["settings"]["format_date"] == "%m/%d/%y"


class TestHealthRoute:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"


class TestAuthRoutes:
    def test_login(self, client: TestClient) -> None:
        resp = client.post("/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["access_token"] == GOOD_TOKEN
        assert body["token_type"] == "bearer"

    def test_login_with_bad_password(self, client: TestClient) -> None:
        resp = client.post("/admin/login", json={"email": ADMIN_EMAIL, "password": "nope"})
        assert resp.status_code == 401
        assert resp.headers["WWW-Authenticate"] == "Bearer"

    def test_login_validates_email(self, client: TestClient) -> None:
        resp = client.post("/admin/login", json={"email": "nobody", "password": ADMIN_PASSWORD})
        assert resp.status_code == 422

    def test_me(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.get("/admin/me", headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["email"] == ADMIN_EMAIL

    def test_logout(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.post("/admin/logout", headers=auth_headers)
        assert resp.status_code == 204


class TestWildcardRoute:
    def test_requires_login(self, client: TestClient) -> None:
        resp = client.get("/admin/articles")
        assert resp.status_code == 401

    def test_rejects_bad_token(self, client: TestClient) -> None:
        resp = client.get("/admin/articles", headers={"Authorization": "Bearer stale"})
        assert resp.status_code == 401

    def test_top_level_index(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.get("/admin/articles", headers=auth_headers)
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["controller"] == "ArticlesController"
        assert body["action"] == "index"
        assert body["title"] == "Articles"
        assert body["is_child"] is False
        assert body["parent_controller"] is None
        assert body["related"] == []

    def test_nested_index(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.get("/admin/articles/3/super-slides", headers=auth_headers)
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["controller"] == "SuperSlidesController"
        assert body["is_child"] is True
        assert body["parent_controller"] == "ArticlesController"
        assert body["parent_id"] == "3"
        assert body["parent_to_self"] == "superSlides"
        assert body["self_to_parent"] == "article"
        assert body["many_to_many"] is False

    def test_nested_edit(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.get("/admin/articles/3/super-slides/7/edit", headers=auth_headers)
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["action"] == "edit"
        assert body["id"] == "7"
        assert body["parent_id"] == "3"

    def test_edit_lists_related(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.get("/admin/posts/4/edit", headers=auth_headers)
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["controller"] == "PostsController"
        assert body["is_child"] is False

        images = _related(body, "ImagesController")
        assert images["is_child"] is True
        assert images["parent_controller"] == "PostsController"
        assert images["parent_to_self"] == "images"
        assert images["self_to_parent"] == "post"
        assert images["parent_id"] is None
        assert images["many_to_many"] is False

        tags = _related(body, "TagsController")
        assert tags["parent_to_self"] == "tags"
        assert tags["self_to_parent"] == "posts"
        assert tags["many_to_many"] is True

    def test_attach_with_parent_in_input(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.post(
            "/admin/tags/attach",
            json={"parent_controller": "PostsController"},
            headers=auth_headers,
        )
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["action"] == "attach"
        assert body["is_child"] is True
        assert body["parent_controller"] == "PostsController"
        assert body["many_to_many"] is True

    def test_denied_action(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.delete("/admin/tags/5", headers=auth_headers)
        assert resp.status_code == 403

    def test_allowed_delete(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.delete("/admin/images/5", headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["action"] == "destroy"

    def test_unknown_controller(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.get("/admin/widgets", headers=auth_headers)
        assert resp.status_code == 404

    def test_unknown_parent_controller_in_input(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.post(
            "/admin/tags/attach",
            json={"parent_controller": "WidgetsController"},
            headers=auth_headers,
        )
        assert resp.status_code == 404
        body = resp.json()
        assert body["category"] == "routing"
        assert "WidgetsController" in body["error"]

    def test_parent_controller_that_isnt_a_name(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.post(
            "/admin/tags/attach",
            json={"parent_controller": ["PostsController"]},
            headers=auth_headers,
        )
        assert resp.status_code == 404
        assert resp.json()["category"] == "routing"

    def test_unknown_slug_in_nested_path(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.get("/admin/articles/2/widgets/9/super-slides", headers=auth_headers)
        assert resp.status_code == 404
        assert "widgets" in resp.json()["detail"]

    def test_undeducible_relationship(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        resp = client.get("/admin/posts/4/super-slides", headers=auth_headers)
        assert resp.status_code == 500
        body = resp.json()
        assert body["category"] == "ancestry"
        assert body["details"]["looked_for"] == ["superSlides"]


class TestBoot:
    def test_bad_auth_class(self) -> None:
        with pytest.raises(AuthConfigurationError):
            create_app(auth_class="tests.cms_app.NotAnAuth", controller_modules=[], registry=cms_registry)

    def test_admin_routes_are_mounted(self, client: TestClient) -> None:
        paths = {route.path for route in client.app.routes}
        assert "/admin/login" in paths
        assert "/admin/{path:path}" in paths
