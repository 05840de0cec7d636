"""
API tests for the advocate listing and filter endpoints.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker

from advocates.core.config import settings
from advocates.db.engine import create_db_engine
from advocates.db.session import get_session_factory
from advocates.main import create_app


class TestListAdvocates:
    """GET /api/advocates."""

    async def test_envelope_and_camel_case_fields(self, client, sample_advocates):
        response = await client.get("/api/advocates", params={"limit": 3})

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"data", "pagination"}
        assert body["pagination"] == {
            "page": 1,
            "limit": 3,
            "total": 8,
            "totalPages": 3,
            "hasMore": True,
        }
        first = body["data"][0]
        assert first["firstName"] == "Eve"
        assert first["lastName"] == "Adams"
        assert first["yearsOfExperience"] == 1
        assert first["phoneNumber"] == 5550000000
        assert first["specialties"] == ["Pediatrics"]
        assert "createdAt" in first

    async def test_default_limit(self, client, sample_advocates):
        response = await client.get("/api/advocates")

        assert response.status_code == 200
        assert response.json()["pagination"]["limit"] == 100
        assert len(response.json()["data"]) == 8

    async def test_search_for_single_match(self, client, sample_advocates):
        response = await client.get("/api/advocates", params={"search": "Jane", "limit": 10, "page": 1})

        body = response.json()
        assert len(body["data"]) == 1
        assert body["data"][0]["firstName"] == "Jane"
        assert body["pagination"]["total"] == 1
        assert body["pagination"]["totalPages"] == 1
        assert body["pagination"]["hasMore"] is False

    async def test_repeated_filter_params(self, client, sample_advocates):
        response = await client.get(
            "/api/advocates",
            params=[("degrees", "MD"), ("degrees", "PhD"), ("specialties", "Bipolar")],
        )

        names = [row["firstName"] for row in response.json()["data"]]
        assert names == ["Carol", "Dana", "Jane"]

    async def test_sort_experience_desc(self, client, sample_advocates):
        response = await client.get(
            "/api/advocates", params={"sortField": "experience", "sortDirection": "desc"}
        )

        rows = response.json()["data"]
        years = [row["yearsOfExperience"] for row in rows]
        assert years == sorted(years, reverse=True)
        tied = [row["lastName"] for row in rows if row["yearsOfExperience"] == 10]
        assert tied == ["Doe", "Evans", "Smith"]

    async def test_sort_direction_is_case_insensitive(self, client, sample_advocates):
        response = await client.get(
            "/api/advocates", params={"sortField": "name", "sortDirection": "DESC"}
        )

        assert response.json()["data"][0]["firstName"] == "Jane"

    async def test_unknown_sort_field_uses_default_order(self, client, sample_advocates):
        response = await client.get("/api/advocates", params={"sortField": "salary"})

        assert response.status_code == 200
        assert response.json()["data"][0]["lastName"] == "Adams"

    async def test_page_past_the_end(self, client, sample_advocates):
        response = await client.get("/api/advocates", params={"page": 9, "limit": 3})

        body = response.json()
        assert body["data"] == []
        assert body["pagination"]["total"] == 8
        assert body["pagination"]["hasMore"] is False

    @pytest.mark.parametrize(
        "params",
        [{"page": 0}, {"page": -1}, {"limit": 0}, {"page": "abc"}],
    )
    async def test_invalid_pagination_is_rejected(self, client, params):
        response = await client.get("/api/advocates", params=params)

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "Invalid request parameters"
        assert body["details"]

    async def test_limit_above_default_is_served(self, client, sample_advocates):
        response = await client.get("/api/advocates", params={"limit": 101})

        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 8
        assert body["pagination"]["limit"] == 101
        assert body["pagination"]["totalPages"] == 1

    async def test_configured_max_limit_is_enforced(self, client, sample_advocates, monkeypatch):
        monkeypatch.setattr(settings, "ADVOCATES_MAX_LIMIT", 5)

        rejected = await client.get("/api/advocates", params={"limit": 6})
        accepted = await client.get("/api/advocates", params={"limit": 5})

        assert rejected.status_code == 422
        assert rejected.json()["details"][0]["field"] == "query.limit"
        assert accepted.status_code == 200

    async def test_huge_page_number_is_empty_not_an_error(self, client, sample_advocates):
        response = await client.get(
            "/api/advocates", params={"page": 100_000_000_000_000_000, "limit": 100}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["data"] == []
        assert body["pagination"]["total"] == 8
        assert body["pagination"]["hasMore"] is False

    async def test_request_id_is_echoed(self, client, sample_advocates):
        response = await client.get("/api/advocates", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    async def test_request_id_is_generated(self, client):
        response = await client.get("/api/advocates")

        assert response.headers.get("X-Request-ID")


class TestFilterOptionsEndpoint:
    """GET /api/advocates/filters."""

    async def test_returns_degrees_and_specialties(self, client, sample_advocates):
        response = await client.get("/api/advocates/filters")

        assert response.status_code == 200
        body = response.json()
        assert body["degrees"] == ["MD", "MSW", "PhD"]
        assert "Trauma & PTSD" in body["specialties"]


class TestStoreFailures:
    """Store errors map to 500 with a fixed message."""

    @pytest.fixture
    async def broken_client(self, tmp_path):
        engine = create_db_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
        app = create_app()
        app.dependency_overrides[get_session_factory] = lambda: async_sessionmaker(engine)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
        await engine.dispose()

    async def test_listing_failure(self, broken_client):
        response = await broken_client.get("/api/advocates")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch advocates"}

    async def test_filter_options_failure(self, broken_client):
        response = await broken_client.get("/api/advocates/filters")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch filter options"}
