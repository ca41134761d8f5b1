"""HTTP API tests."""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from core.search.pipeline import GalleryQueryService
from core.store.base import StoreUnavailable
from core.store.memory_store import InMemoryImageStore


class DownStore(InMemoryImageStore):
    def _fail(self, *args, **kwargs):
        raise StoreUnavailable("Image store search failed: timed out")

    find_matching = find_page = count = ping = self_test = _fail


@pytest.fixture
def client(store):
    return TestClient(create_app(GalleryQueryService(store)))


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_images_without_query(client):
    payload = client.get("/api/images").json()
    assert [item["_id"] for item in payload["data"]] == ["6", "5", "4", "3", "2", "1"]
    assert payload["totalPages"] == 1
    assert payload["savedImages"] == 6


def test_search_returns_ranked_dtos_with_authors(client):
    payload = client.get("/api/images", params={"query": "sunset", "pageSize": 2}).json()
    first = payload["data"][0]
    assert first["_id"] == "1"
    assert first["title"] == "Sunset"
    assert first["transformationType"] == "removeBackground"
    assert first["author"]["firstName"] == "Ada"
    assert "score" not in first and "_score" not in first
    assert payload["totalPages"] == 2
    assert payload["savedImages"] == 6


def test_malformed_page_falls_back_to_first_page(client):
    response = client.get("/api/images", params={"page": "two", "pageSize": "2"})
    assert response.status_code == 200
    assert [item["_id"] for item in response.json()["data"]] == ["6", "5"]


def test_get_image(client):
    assert client.get("/api/images/3").json()["title"] == "Mountain lake"
    assert client.get("/api/images/unknown").status_code == 404


def test_user_images(client):
    payload = client.get("/api/users/u2/images").json()
    assert [item["_id"] for item in payload["data"]] == ["6", "4", "2"]
    assert payload["totalPages"] == 1
    assert "savedImages" not in payload


def test_dbcheck_runs_a_roundtrip(client):
    response = client.get("/api/dbcheck")
    payload = response.json()
    assert payload["ok"] is True
    assert payload["dbName"] == "memory"
    assert payload["ping"] is True
    assert payload["roundtrip"]["fetchedExists"] is True
    assert payload["roundtrip"]["insertedId"]
    assert response.headers["cache-control"] == "no-store"


@pytest.mark.parametrize("path", ["/api/images", "/api/images?query=cat", "/api/dbcheck"])
def test_store_outage_maps_to_503(path):
    client = TestClient(create_app(GalleryQueryService(DownStore())))
    response = client.get(path)
    assert response.status_code == 503
    assert "timed out" in response.json()["detail"]


def test_unconfigured_service_is_a_server_error():
    response = TestClient(create_app()).get("/api/images")
    assert response.status_code == 500


def test_page_beyond_int64_is_an_empty_page(client):
    response = client.get("/api/images", params={"page": "9999999999999999999"})
    assert response.status_code == 200
    assert response.json()["data"] == []
