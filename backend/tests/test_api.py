"""
NoteShelf Backend: HTTP API Tests
=================================

What:  End-to-end tests through the FastAPI app (httpx + ASGITransport)
       against an in-memory SQLite store.

What we test:
    ✅ Every notes and categories route with its success status
    ✅ 404 for missing ids, 400 for invalid bodies and path params
    ✅ Store faults → 500 with the error envelope
    ✅ Strict category reference setting
    ✅ CORS headers, request IDs, health probes
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from noteshelf.config import settings


class TestNotesEndpoints:

    @pytest.mark.asyncio
    async def test_create_with_defaults(self, test_client):
        response = await test_client.post("/notes", json={})

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Untitled"
        assert body["content"] == ""
        assert body["category_id"] is None
        assert isinstance(body["id"], int)

    @pytest.mark.asyncio
    async def test_create_and_get(self, test_client):
        created = (await test_client.post("/notes", json={"title": "A", "content": "B"})).json()

        response = await test_client.get(f"/notes/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {
            "id": created["id"], "title": "A", "content": "B", "category_id": None,
        }

    @pytest.mark.asyncio
    async def test_list(self, test_client):
        await test_client.post("/notes", json={"title": "one"})
        await test_client.post("/notes", json={"title": "two"})

        response = await test_client.get("/notes")

        assert response.status_code == 200
        assert [n["title"] for n in response.json()] == ["one", "two"]

    @pytest.mark.asyncio
    async def test_get_missing_is_404(self, test_client):
        response = await test_client.get("/notes/999")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert "999" in body["message"]

    @pytest.mark.asyncio
    async def test_non_integer_id_is_400(self, test_client):
        response = await test_client.get("/notes/abc")

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, test_client):
        note = (await test_client.post("/notes", json={"title": "x", "content": "y"})).json()

        response = await test_client.put(
            f"/notes/{note['id']}", json={"title": "new", "content": "text"}
        )

        assert response.status_code == 200
        assert response.json()["title"] == "new"
        assert response.json()["content"] == "text"

    @pytest.mark.asyncio
    async def test_update_requires_both_fields(self, test_client):
        note = (await test_client.post("/notes", json={"title": "x", "content": "y"})).json()

        response = await test_client.put(f"/notes/{note['id']}", json={"title": "only"})

        assert response.status_code == 400
        assert "content" in response.json()["message"]
        unchanged = (await test_client.get(f"/notes/{note['id']}")).json()
        assert unchanged["title"] == "x"

    @pytest.mark.asyncio
    async def test_update_missing_is_404(self, test_client):
        response = await test_client.put("/notes/5", json={"title": "t", "content": "c"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete(self, test_client):
        note = (await test_client.post("/notes", json={"title": "bye"})).json()

        response = await test_client.delete(f"/notes/{note['id']}")

        assert response.status_code == 200
        assert response.json() == note
        assert (await test_client.get(f"/notes/{note['id']}")).status_code == 404
        assert (await test_client.delete(f"/notes/{note['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_set_and_remove_category(self, test_client):
        note = (await test_client.post("/notes", json={"title": "n"})).json()
        category = (await test_client.post("/categories", json={"category_name": "Work"})).json()

        response = await test_client.put(
            f"/notes/{note['id']}/category", json={"category_id": category["id"]}
        )
        assert response.status_code == 200
        assert response.json()["category_id"] == category["id"]

        response = await test_client.put(f"/notes/{note['id']}/remove-category")
        assert response.status_code == 200
        assert response.json()["category_id"] is None

    @pytest.mark.asyncio
    async def test_set_category_accepts_camel_case_and_null(self, test_client):
        note = (await test_client.post("/notes", json={})).json()

        response = await test_client.put(f"/notes/{note['id']}/category", json={"categoryId": 7})
        assert response.json()["category_id"] == 7

        response = await test_client.put(f"/notes/{note['id']}/category", json={"category_id": None})
        assert response.json()["category_id"] is None

    @pytest.mark.asyncio
    async def test_set_category_zero_or_no_body_clears(self, test_client):
        note = (await test_client.post("/notes", json={})).json()
        await test_client.put(f"/notes/{note['id']}/category", json={"category_id": 4})

        response = await test_client.put(f"/notes/{note['id']}/category", json={"categoryId": 0})
        assert response.status_code == 200
        assert response.json()["category_id"] is None

        await test_client.put(f"/notes/{note['id']}/category", json={"category_id": 4})
        response = await test_client.put(f"/notes/{note['id']}/category")
        assert response.status_code == 200
        assert response.json()["category_id"] is None

    @pytest.mark.asyncio
    async def test_out_of_range_ids_are_400(self, test_client):
        note = (await test_client.post("/notes", json={})).json()

        for path in ("/notes/99999999999999999999", "/notes/0", "/notes/-3"):
            response = await test_client.get(path)
            assert response.status_code == 400, path
            assert response.json()["error"] == "validation_error"

        response = await test_client.put(
            f"/notes/{note['id']}/category", json={"category_id": 99999999999999999999}
        )
        assert response.status_code == 400
        response = await test_client.put(f"/notes/{note['id']}/category", json={"category_id": -1})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_set_category_on_missing_note_is_404(self, test_client):
        response = await test_client.put("/notes/3/category", json={"category_id": 1})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_strict_references_reject_unknown_category(self, test_client, monkeypatch):
        monkeypatch.setattr(settings, "strict_category_references", True)
        note = (await test_client.post("/notes", json={})).json()

        response = await test_client.put(f"/notes/{note['id']}/category", json={"category_id": 99})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "category_id"


class TestCategoriesEndpoints:

    @pytest.mark.asyncio
    async def test_create_forces_active(self, test_client):
        response = await test_client.post(
            "/categories", json={"category_name": "Work", "is_deleted": True}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["category_name"] == "Work"
        assert body["is_deleted"] is False

    @pytest.mark.asyncio
    async def test_create_blank_name_is_400(self, test_client):
        response = await test_client.post("/categories", json={"category_name": "  "})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "category_name"

    @pytest.mark.asyncio
    async def test_create_name_length_limit(self, test_client):
        response = await test_client.post("/categories", json={"category_name": "x" * 300})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "category_name"

        response = await test_client.post("/categories", json={"category_name": "y" * 255})
        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_create_missing_name_is_400(self, test_client):
        response = await test_client.post("/categories", json={})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_get_and_missing(self, test_client):
        category = (await test_client.post("/categories", json={"category_name": "Home"})).json()

        assert (await test_client.get(f"/categories/{category['id']}")).json() == category
        assert (await test_client.get("/categories/999")).status_code == 404
        assert (await test_client.get("/categories/0")).status_code == 400

    @pytest.mark.asyncio
    async def test_soft_delete_and_listing(self, test_client):
        keep = (await test_client.post("/categories", json={"category_name": "Keep"})).json()
        drop = (await test_client.post("/categories", json={"category_name": "Drop"})).json()

        response = await test_client.put(f"/categories/{drop['id']}", json={"is_deleted": True})
        assert response.status_code == 200
        assert response.json()["is_deleted"] is True

        everything = (await test_client.get("/categories")).json()
        assert [c["id"] for c in everything] == [keep["id"], drop["id"]]

        active = (await test_client.get("/categories", params={"include_deleted": "false"})).json()
        assert [c["id"] for c in active] == [keep["id"]]

    @pytest.mark.asyncio
    async def test_status_update_missing_is_404(self, test_client):
        response = await test_client.put("/categories/404", json={"is_deleted": True})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_status_update_requires_flag(self, test_client):
        category = (await test_client.post("/categories", json={"category_name": "C"})).json()
        response = await test_client.put(f"/categories/{category['id']}", json={})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_category_notes_scenario(self, test_client):
        category = (await test_client.post("/categories", json={"category_name": "Work"})).json()
        assert category["is_deleted"] is False
        note = (await test_client.post("/notes", json={"title": "A", "content": "B"})).json()
        await test_client.post("/notes", json={"title": "unrelated"})
        await test_client.put(f"/notes/{note['id']}/category", json={"category_id": category["id"]})

        expected = [{"id": note["id"], "title": "A", "content": "B", "category_id": category["id"]}]
        response = await test_client.get(f"/categories/{category['id']}/notes")
        assert response.status_code == 200
        assert response.json() == expected

        await test_client.put(f"/categories/{category['id']}", json={"is_deleted": True})
        response = await test_client.get(f"/categories/{category['id']}/notes")
        assert response.json() == expected

    @pytest.mark.asyncio
    async def test_notes_for_unknown_category_is_empty(self, test_client):
        response = await test_client.get("/categories/321/notes")

        assert response.status_code == 200
        assert response.json() == []


class TestErrorsAndCrossCutting:

    @pytest.mark.asyncio
    async def test_store_fault_is_500(self, test_client):
        fault = OperationalError("SELECT", {}, Exception("connection reset"))
        with patch.object(AsyncSession, "execute", AsyncMock(side_effect=fault)):
            response = await test_client.get("/notes")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert body["message"] == "Could not retrieve notes. Please try again."

    @pytest.mark.asyncio
    async def test_request_id_round_trip(self, test_client):
        response = await test_client.get("/notes", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

        generated = await test_client.get("/notes")
        assert generated.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_cors_simple_request(self, test_client):
        response = await test_client.get("/notes", headers={"Origin": "http://localhost:3000"})
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_cors_preflight(self, test_client):
        response = await test_client.options(
            "/notes/1",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "DELETE",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        allowed = response.headers["access-control-allow-methods"]
        for method in ("GET", "POST", "PUT", "DELETE"):
            assert method in allowed

    @pytest.mark.asyncio
    async def test_liveness(self, test_client):
        response = await test_client.get("/test")

        assert response.status_code == 200
        assert response.json() == {"message": "API is working"}

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        from noteshelf.database import dispose_engine

        try:
            response = await test_client.get("/health")
        finally:
            await dispose_engine()

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_health_reports_unreachable_database(self, test_client):
        broken = MagicMock()
        broken.connect.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))

        with patch("noteshelf.database.engine", broken):
            response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["database"] == "disconnected"
