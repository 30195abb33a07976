"""API resource tests."""

from uuid import uuid4

import pytest
from falcon.testing import TestClient

from roleguard.interfaces.api.middleware.cors import CORSMiddleware

from tests.conftest import FakeUnitOfWork


class TestRoles:
    def test_list_empty(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/roles")
        assert r.status_code == 200
        assert r.json == {"items": []}

    def test_create_and_get(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/roles",
            json={"slug": "editor", "name": "Editor", "permissions": {"edit-post": True}},
        )
        assert r.status_code == 201
        assert r.json["slug"] == "editor"
        assert r.json["permissions"] == {"edit-post": True}

        r = client.simulate_get("/v1/roles/editor")
        assert r.status_code == 200
        assert r.json["name"] == "Editor"
        assert "users" not in r.json

    def test_create_stores_empty_permissions_as_empty_string(
        self, client: TestClient, fake_uow: FakeUnitOfWork
    ) -> None:
        r = client.simulate_post("/v1/roles", json={"slug": "viewer", "name": "Viewer"})
        assert r.status_code == 201
        assert r.json["permissions"] == {}
        assert fake_uow.roles.row_for("viewer")["permissions"] == ""

    def test_create_missing_field(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/roles", json={"slug": "editor"})
        assert r.status_code == 400
        assert "name" in r.json["error"]

    def test_create_duplicate(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.roles.add_row("admin", "Admin")
        r = client.simulate_post("/v1/roles", json={"slug": "admin", "name": "Admin"})
        assert r.status_code == 409

    def test_create_invalid_permissions(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/roles", json={"slug": "x", "name": "X", "permissions": ["a"]}
        )
        assert r.status_code == 400

    def test_get_missing(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/roles/missing")
        assert r.status_code == 404

    def test_patch_rename(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.roles.add_row("editor", "Editor")
        r = client.simulate_patch("/v1/roles/editor", json={"slug": "writer", "name": "Writer"})
        assert r.status_code == 200
        assert r.json["slug"] == "writer"
        assert client.simulate_get("/v1/roles/editor").status_code == 404

    def test_patch_conflict(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.roles.add_row("editor", "Editor")
        fake_uow.roles.add_row("admin", "Admin")
        r = client.simulate_patch("/v1/roles/editor", json={"slug": "admin"})
        assert r.status_code == 409

    def test_delete(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.roles.add_row("editor", "Editor")
        assert client.simulate_delete("/v1/roles/editor").status_code == 204
        assert client.simulate_delete("/v1/roles/editor").status_code == 404


class TestPermissions:
    @pytest.fixture(autouse=True)
    def _editor(self, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.roles.add_row("editor", "Editor", '{"edit-post":true}')

    def test_add(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/roles/editor/permissions", json={"permission": "view-post"}
        )
        assert r.status_code == 200
        assert r.json["permissions"] == {"edit-post": True, "view-post": True}

    def test_add_existing_keeps_value(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/roles/editor/permissions",
            json={"permission": "edit-post", "value": False},
        )
        assert r.status_code == 200
        assert r.json["permissions"] == {"edit-post": True}

    def test_add_missing_name(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/roles/editor/permissions", json={"value": True})
        assert r.status_code == 400

    def test_add_unknown_role(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/roles/nope/permissions", json={"permission": "x"})
        assert r.status_code == 404

    def test_update(self, client: TestClient) -> None:
        r = client.simulate_put("/v1/roles/editor/permissions/edit-post", json={"value": False})
        assert r.status_code == 200
        assert r.json["permissions"] == {"edit-post": False}

    def test_update_missing_permission_is_noop(self, client: TestClient) -> None:
        r = client.simulate_put("/v1/roles/editor/permissions/x", json={"value": True})
        assert r.status_code == 200
        assert r.json["permissions"] == {"edit-post": True}

    def test_update_requires_value(self, client: TestClient) -> None:
        r = client.simulate_put("/v1/roles/editor/permissions/edit-post", json={})
        assert r.status_code == 400

    def test_add_nested_value_rejected(
        self, client: TestClient, fake_uow: FakeUnitOfWork
    ) -> None:
        r = client.simulate_post(
            "/v1/roles/editor/permissions",
            json={"permission": "x", "value": {"nested": [1]}},
        )
        assert r.status_code == 400
        assert fake_uow.roles.row_for("editor")["permissions"] == '{"edit-post":true}'

    def test_update_nested_value_rejected(
        self, client: TestClient, fake_uow: FakeUnitOfWork
    ) -> None:
        r = client.simulate_put(
            "/v1/roles/editor/permissions/edit-post", json={"value": [True]}
        )
        assert r.status_code == 400
        assert "value" in r.json["error"]
        assert fake_uow.roles.row_for("editor")["permissions"] == '{"edit-post":true}'

    def test_remove(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        r = client.simulate_delete("/v1/roles/editor/permissions/edit-post")
        assert r.status_code == 200
        assert r.json["permissions"] == {}
        assert fake_uow.roles.row_for("editor")["permissions"] == ""


class TestAccess:
    @pytest.fixture(autouse=True)
    def _editor(self, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.roles.add_row(
            "editor", "Editor", '{"edit-post":true,"delete-post":false}'
        )

    def test_single_permission(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/roles/editor/access", params={"permission": "edit-post"})
        assert r.status_code == 200
        assert r.json["granted"] is True

        r = client.simulate_get("/v1/roles/editor/access", params={"permission": "delete-post"})
        assert r.json["granted"] is False

    def test_all_mode_is_default(self, client: TestClient) -> None:
        r = client.simulate_get(
            "/v1/roles/editor/access?permission=delete-post&permission=edit-post"
        )
        assert r.status_code == 200
        assert r.json["mode"] == "all"
        assert r.json["permissions"] == ["delete-post", "edit-post"]
        assert r.json["granted"] is False

    def test_any_mode(self, client: TestClient) -> None:
        r = client.simulate_get(
            "/v1/roles/editor/access?permission=delete-post&permission=edit-post&mode=any"
        )
        assert r.json["granted"] is True

    def test_bad_mode(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/roles/editor/access?permission=a&mode=some")
        assert r.status_code == 400

    def test_no_permissions(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/roles/editor/access")
        assert r.status_code == 400

    def test_unknown_role(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/roles/nope/access?permission=a")
        assert r.status_code == 404


class TestUsers:
    def test_attach_list_detach(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.roles.add_row("editor", "Editor")
        user = fake_uow.users.add_user("ann@example.com", "Ann")

        r = client.simulate_put(f"/v1/roles/editor/users/{user.id}")
        assert r.status_code == 204

        r = client.simulate_get("/v1/roles/editor/users")
        assert r.status_code == 200
        assert [u["email"] for u in r.json["items"]] == ["ann@example.com"]
        assert r.json["items"][0]["id"] == str(user.id)

        r = client.simulate_get("/v1/roles/editor", params={"users": "true"})
        assert [u["name"] for u in r.json["users"]] == ["Ann"]

        r = client.simulate_delete(f"/v1/roles/editor/users/{user.id}")
        assert r.status_code == 204
        assert client.simulate_get("/v1/roles/editor/users").json["items"] == []

    def test_invalid_user_id(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.roles.add_row("editor", "Editor")
        r = client.simulate_put("/v1/roles/editor/users/not-a-uuid")
        assert r.status_code == 400

    def test_unknown_user(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.roles.add_row("editor", "Editor")
        r = client.simulate_put(f"/v1/roles/editor/users/{uuid4()}")
        assert r.status_code == 404


class TestErrors:
    def test_unexpected_error_returns_500(self, fake_uow: FakeUnitOfWork, uow_factory) -> None:
        from roleguard.interfaces.api.app import create_app

        async def _boom() -> list:
            raise RuntimeError("db down")

        fake_uow.roles.list_all = _boom
        client = TestClient(create_app(uow_factory))
        r = client.simulate_get("/v1/roles")
        assert r.status_code == 500


class TestCors:
    def _client(self, uow_factory) -> TestClient:
        from roleguard.interfaces.api.app import create_app

        app = create_app(uow_factory, middleware=[CORSMiddleware(["https://app.example"])])
        return TestClient(app)

    def test_allowed_origin_echoed(self, uow_factory) -> None:
        r = self._client(uow_factory).simulate_get(
            "/v1/roles", headers={"Origin": "https://app.example"}
        )
        assert r.headers["Access-Control-Allow-Origin"] == "https://app.example"

    def test_other_origin_not_echoed(self, uow_factory) -> None:
        r = self._client(uow_factory).simulate_get(
            "/v1/roles", headers={"Origin": "https://evil.example"}
        )
        assert "Access-Control-Allow-Origin" not in r.headers

    def test_preflight(self, uow_factory) -> None:
        r = self._client(uow_factory).simulate_options(
            "/v1/roles", headers={"Origin": "https://app.example"}
        )
        assert r.status_code == 204
        assert "PATCH" in r.headers["Access-Control-Allow-Methods"]
