"""Task API tests: lifecycle, isolation, visibility, search and error mapping."""

import pytest
from httpx import AsyncClient
from sqlalchemy import event, text
from sqlalchemy.exc import OperationalError

from tasknest.infrastructure.persistence import database
from tasknest.main import app

pytestmark = pytest.mark.requires_db

DESCRIPTION = "Collect numbers for the quarterly review"


async def _create(
    client: AsyncClient,
    headers: dict[str, str],
    task_name: str = "Write report",
    **fields,
) -> dict:
    body = {"task_name": task_name, "description": DESCRIPTION, "priority": "HIGH"}
    body.update(fields)
    response = await client.post("/api/v1/tasks", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateAndGet:
    async def test_create_defaults_and_trims(self, client: AsyncClient, auth_headers) -> None:
        alice = auth_headers("alice")
        created = await _create(client, alice, task_name="  Write report  ")
        assert created["task_name"] == "Write report"
        assert created["owner_id"] == "alice"
        assert created["share_type"] == "PRIVATE"
        assert created["priority"] == "HIGH"
        assert created["is_active"] is True

        response = await client.get(f"/api/v1/tasks/{created['id']}", headers=alice)
        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    async def test_invalid_fields_are_400_with_every_field(
        self, client: AsyncClient, auth_headers
    ) -> None:
        response = await client.post(
            "/api/v1/tasks",
            json={"task_name": "abc", "description": "short", "priority": "URGENT"},
            headers=auth_headers("alice"),
        )
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        fields = [e["field"] for e in body["details"]["errors"]]
        assert fields == ["task_name", "description", "priority"]

        listing = await client.get("/api/v1/tasks", headers=auth_headers("alice"))
        assert listing.json() == []

    async def test_owner_in_body_is_ignored(self, client: AsyncClient, auth_headers) -> None:
        created = await _create(client, auth_headers("alice"), owner_id="mallory")
        assert created["owner_id"] == "alice"

    async def test_other_callers_get_not_found(
        self, client: AsyncClient, auth_headers
    ) -> None:
        created = await _create(client, auth_headers("alice"), share_type="PUBLIC")
        response = await client.get(
            f"/api/v1/tasks/{created['id']}", headers=auth_headers("bob")
        )
        assert response.status_code == 404
        assert response.json()["error"] == "RESOURCE_NOT_FOUND"

    async def test_malformed_task_id_is_400(self, client: AsyncClient, auth_headers) -> None:
        response = await client.get("/api/v1/tasks/bad$id", headers=auth_headers("alice"))
        assert response.status_code == 400
        assert response.json()["details"] == {"field": "task_id"}


class TestVisibility:
    async def test_public_tasks_are_listed_with_owner_profile(
        self, client: AsyncClient, auth_headers, seed_profile
    ) -> None:
        await seed_profile("alice", "Alice", "Smith", "Pilot")
        alice = auth_headers("alice")
        public = await _create(client, alice, "Public plan", share_type="PUBLIC")
        await _create(client, alice, "Private plan")
        await _create(client, alice, "Linked plan", share_type="SHARE_VIA_LINK")

        response = await client.get("/api/v1/tasks", headers=auth_headers("bob"))
        assert response.status_code == 200
        items = response.json()
        assert [i["id"] for i in items] == [public["id"]]
        assert items[0]["profile"] == {
            "first_name": "Alice",
            "last_name": "Smith",
            "occupation": "Pilot",
        }

    async def test_owner_without_profile_is_still_listed(
        self, client: AsyncClient, auth_headers
    ) -> None:
        created = await _create(client, auth_headers("carol"))
        items = (await client.get("/api/v1/tasks", headers=auth_headers("carol"))).json()
        assert [i["id"] for i in items] == [created["id"]]
        assert items[0]["profile"] is None


class TestLifecycle:
    async def test_bin_then_undo(self, client: AsyncClient, auth_headers) -> None:
        alice = auth_headers("alice")
        created = await _create(client, alice)
        task_url = f"/api/v1/tasks/{created['id']}"

        binned = await client.delete(task_url, headers=alice)
        assert binned.status_code == 200
        assert binned.json()["is_active"] is False

        assert (await client.get(task_url, headers=alice)).status_code == 404
        assert (await client.get("/api/v1/tasks", headers=alice)).json() == []
        assert (await client.delete(task_url, headers=alice)).status_code == 404
        bin_items = (await client.get("/api/v1/tasks/bin", headers=alice)).json()
        assert [t["id"] for t in bin_items] == [created["id"]]

        restored = await client.post(f"{task_url}/restore", headers=alice)
        assert restored.status_code == 200
        assert restored.json()["is_active"] is True
        assert restored.json()["task_name"] == created["task_name"]
        assert (await client.post(f"{task_url}/restore", headers=alice)).status_code == 404
        assert (await client.get(task_url, headers=alice)).status_code == 200

    async def test_only_owner_can_bin(self, client: AsyncClient, auth_headers) -> None:
        created = await _create(client, auth_headers("alice"), share_type="PUBLIC")
        response = await client.delete(
            f"/api/v1/tasks/{created['id']}", headers=auth_headers("bob")
        )
        assert response.status_code == 404
        visible = (await client.get("/api/v1/tasks", headers=auth_headers("bob"))).json()
        assert [t["id"] for t in visible] == [created["id"]]

    async def test_restore_of_active_task_is_not_found(
        self, client: AsyncClient, auth_headers
    ) -> None:
        alice = auth_headers("alice")
        created = await _create(client, alice)
        response = await client.post(
            f"/api/v1/tasks/{created['id']}/restore", headers=alice
        )
        assert response.status_code == 404


class TestUpdate:
    async def test_partial_update(self, client: AsyncClient, auth_headers) -> None:
        alice = auth_headers("alice")
        created = await _create(client, alice)
        response = await client.patch(
            f"/api/v1/tasks/{created['id']}",
            json={"priority": "LOW", "share_type": "PUBLIC"},
            headers=alice,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["priority"] == "LOW"
        assert body["share_type"] == "PUBLIC"
        assert body["task_name"] == created["task_name"]
        assert body["description"] == created["description"]
        assert body["owner_id"] == "alice"

    async def test_empty_update_is_400(self, client: AsyncClient, auth_headers) -> None:
        alice = auth_headers("alice")
        created = await _create(client, alice)
        response = await client.patch(
            f"/api/v1/tasks/{created['id']}", json={}, headers=alice
        )
        assert response.status_code == 400

    async def test_update_by_other_caller_is_not_found(
        self, client: AsyncClient, auth_headers
    ) -> None:
        created = await _create(client, auth_headers("alice"))
        response = await client.patch(
            f"/api/v1/tasks/{created['id']}",
            json={"task_name": "Taken over"},
            headers=auth_headers("bob"),
        )
        assert response.status_code == 404

    async def test_binned_task_cannot_be_updated(
        self, client: AsyncClient, auth_headers
    ) -> None:
        alice = auth_headers("alice")
        created = await _create(client, alice)
        await client.delete(f"/api/v1/tasks/{created['id']}", headers=alice)
        response = await client.patch(
            f"/api/v1/tasks/{created['id']}",
            json={"task_name": "Renamed task"},
            headers=alice,
        )
        assert response.status_code == 404


class TestSearch:
    async def test_search_projection(
        self, client: AsyncClient, auth_headers, seed_profile
    ) -> None:
        await seed_profile("bob", "Bob", "Jones", "Chef")
        await _create(client, auth_headers("bob"), "Weekly REPORT", share_type="PUBLIC")
        await _create(client, auth_headers("bob"), "Secret report")

        response = await client.get(
            "/api/v1/tasks/search", params={"q": "report"}, headers=auth_headers("alice")
        )
        assert response.status_code == 200
        items = response.json()
        assert len(items) == 1
        assert set(items[0]) == {
            "id",
            "task_name",
            "description",
            "priority",
            "share_type",
            "profile",
        }
        assert items[0]["task_name"] == "Weekly REPORT"
        assert items[0]["profile"]["first_name"] == "Bob"

    async def test_no_match_is_empty_list(self, client: AsyncClient, auth_headers) -> None:
        response = await client.get(
            "/api/v1/tasks/search", params={"q": "nothing"}, headers=auth_headers("alice")
        )
        assert response.status_code == 200
        assert response.json() == []

    async def test_blank_query_is_400(self, client: AsyncClient, auth_headers) -> None:
        response = await client.get(
            "/api/v1/tasks/search", params={"q": "   "}, headers=auth_headers("alice")
        )
        assert response.status_code == 400
        assert response.json()["details"]["field"] == "q"


class TestRequestSchema:
    async def test_openapi_documents_field_contract(self, client: AsyncClient) -> None:
        schemas = (await client.get("/openapi.json")).json()["components"]["schemas"]
        create = schemas["TaskCreateRequest"]["properties"]
        assert create["task_name"]["minLength"] == 5
        assert create["task_name"]["maxLength"] == 255
        assert create["description"]["minLength"] == 15
        assert "HIGH" in create["priority"]["enum"]
        assert "SHARE_VIA_LINK" in create["share_type"]["enum"]
        update = schemas["TaskUpdateRequest"]["properties"]
        assert "LOW" in update["priority"]["enum"]

    async def test_non_string_field_is_422(self, client: AsyncClient, auth_headers) -> None:
        response = await client.post(
            "/api/v1/tasks",
            json={"task_name": 12345, "description": DESCRIPTION, "priority": "HIGH"},
            headers=auth_headers("alice"),
        )
        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"


class TestStoreFailures:
    async def test_store_failure_is_internal_without_driver_text(
        self, client: AsyncClient, auth_headers, engine
    ) -> None:
        async with engine.begin() as conn:
            await conn.execute(text("DROP TABLE task"))

        response = await client.get("/api/v1/tasks", headers=auth_headers("alice"))

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "INTERNAL_ERROR"
        assert body["details"] == {"operation": "task.list"}
        assert "no such table" not in response.text
        assert "SELECT" not in response.text

    async def test_failed_commit_is_internal_and_nothing_is_saved(
        self, client: AsyncClient, auth_headers, session_factory, monkeypatch
    ) -> None:
        def _refuse_commit(session) -> None:
            raise OperationalError("COMMIT", {}, Exception("database is locked"))

        def _sessions():
            session = session_factory()
            event.listen(session.sync_session, "before_commit", _refuse_commit)
            return session

        monkeypatch.setattr(database, "AsyncSessionLocal", _sessions)
        app.dependency_overrides.pop(database.get_db_transactional)
        alice = auth_headers("alice")

        response = await client.post(
            "/api/v1/tasks",
            json={"task_name": "Write report", "description": DESCRIPTION, "priority": "HIGH"},
            headers=alice,
        )

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "INTERNAL_ERROR"
        assert body["details"] == {"operation": "commit"}
        assert "database is locked" not in response.text
        assert (await client.get("/api/v1/tasks", headers=alice)).json() == []
