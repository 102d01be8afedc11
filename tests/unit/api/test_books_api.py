"""Tests for the book endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient
from support.memory_engine import InMemoryEngine


class TestBookReads:
    def test_get_all(self, client: TestClient) -> None:
        response = client.get("/v1/book/getall", params={"page_size": 2, "page": 1})
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert len(body["data"]) == 2

    def test_get_by_id(self, client: TestClient) -> None:
        response = client.get("/v1/book/getbyid", params={"id": "b-2"})
        assert response.status_code == 200
        assert response.json()["data"]["title"] == "Google"

    def test_get_by_id_blank_is_400(self, client: TestClient) -> None:
        response = client.get("/v1/book/getbyid", params={"id": " "})
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_get_by_unknown_id_is_200_no_content(self, client: TestClient) -> None:
        response = client.get("/v1/book/getbyid", params={"id": "missing"})
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "no_content"
        assert body["data"] is None

    def test_get_by_name(self, client: TestClient) -> None:
        response = client.get("/v1/book/getbyname", params={"title": "relevant search"})
        assert [b["id"] for b in response.json()["data"]] == ["b-3"]

    def test_get_by_name_list(self, client: TestClient) -> None:
        response = client.post("/v1/book/getbynamelist", json=["Google", "Elasticsearch in Action"])
        assert sorted(b["id"] for b in response.json()["data"]) == ["b-1", "b-2"]

    def test_get_by_name_list_empty_is_400(self, client: TestClient) -> None:
        response = client.post("/v1/book/getbynamelist", json=[])
        assert response.status_code == 400

    def test_get_by_title_pattern(self, client: TestClient) -> None:
        response = client.get("/v1/book/getbytitlepattern", params={"pattern": "*search*"})
        assert sorted(b["id"] for b in response.json()["data"]) == ["b-1", "b-3"]

    def test_get_by_title_fuzzy(self, client: TestClient) -> None:
        response = client.get("/v1/book/getbytitlefuzzy", params={"title": "Goopla", "max_edits": 2})
        assert [b["id"] for b in response.json()["data"]] == ["b-2"]

    def test_get_by_publish_date(self, client: TestClient) -> None:
        response = client.get("/v1/book/getbypublishdate", params={"publish_date": "2021-03-15T10:30:00"})
        assert [b["id"] for b in response.json()["data"]] == ["b-1"]

    def test_get_by_publish_date_range_inverted_is_400(self, client: TestClient) -> None:
        response = client.get(
            "/v1/book/getbypublishdaterange", params={"start": "2020-01-01T00:00:00", "end": "2019-01-01T00:00:00"}
        )
        assert response.status_code == 400

    def test_get_by_price_range(self, client: TestClient) -> None:
        response = client.get("/v1/book/getbypricerange", params={"min_price": 10, "max_price": 40})
        assert sorted(b["id"] for b in response.json()["data"]) == ["b-2", "b-3"]

    def test_get_by_abstract(self, client: TestClient) -> None:
        response = client.get("/v1/book/getbyabstract", params={"text": "relevance"})
        assert [b["id"] for b in response.json()["data"]] == ["b-3"]

    def test_search(self, client: TestClient) -> None:
        response = client.get("/v1/book/search", params={"text": "advert"})
        assert response.status_code == 200
        assert [b["id"] for b in response.json()["data"]] == ["b-2"]

    def test_search_engine_failure_is_400(self, client: TestClient, seeded_engine: InMemoryEngine) -> None:
        seeded_engine.fail_with = "search_phase_execution_exception"
        response = client.get("/v1/book/search", params={"text": "advert"})
        assert response.status_code == 400
        assert "search_phase_execution_exception" in response.json()["messages"][0]

    def test_filter(self, client: TestClient) -> None:
        response = client.post("/v1/book/filter", json={"min_price": 20, "min_stock": 5})
        assert [b["id"] for b in response.json()["data"]] == ["b-1"]

    def test_compound(self, client: TestClient) -> None:
        response = client.post(
            "/v1/book/compound",
            json={"filter": [{"field": "categories", "value": "search"}], "must_not": [{"field": "stock", "value": 5}]},
        )
        assert [b["id"] for b in response.json()["data"]] == ["b-1"]

    def test_compound_empty_is_400(self, client: TestClient) -> None:
        response = client.post("/v1/book/compound", json={})
        assert response.status_code == 400


class TestBookWrites:
    def test_insert_then_get(self, client: TestClient) -> None:
        response = client.post("/v1/book/insert", json={"title": "Dune", "price": 9.99, "stock": 2})
        assert response.status_code == 200
        created = response.json()["data"]
        assert created["id"]
        assert created["created_by"] == 1111

        fetched = client.get("/v1/book/getbyid", params={"id": created["id"]}).json()["data"]
        assert fetched["title"] == "Dune"

    def test_insert_invalid_payload_is_422(self, client: TestClient) -> None:
        response = client.post("/v1/book/insert", json={"price": -3})
        assert response.status_code == 422

    def test_update(self, client: TestClient, seeded_engine: InMemoryEngine) -> None:
        response = client.put("/v1/book/update", json={"id": "b-2", "title": "Google", "stock": 7})
        assert response.status_code == 200
        stored = seeded_engine.indices["books"]["b-2"]
        assert stored["stock"] == 7
        assert stored["price"] == 18.5
        assert stored["updated_by"] == 2222

    def test_delete(self, client: TestClient, seeded_engine: InMemoryEngine) -> None:
        response = client.delete("/v1/book/delete", params={"id": "b-2"})
        assert response.status_code == 200
        assert response.json()["data"] is True
        assert "b-2" not in seeded_engine.indices["books"]

    def test_deactivate(self, client: TestClient, seeded_engine: InMemoryEngine) -> None:
        response = client.delete("/v1/book/deactivate", params={"id": "b-2"})
        assert response.status_code == 200
        assert seeded_engine.indices["books"]["b-2"]["is_active"] is False
