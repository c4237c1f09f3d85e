from fastapi.testclient import TestClient

from directory_api.app import create_app
from directory_api.cache import FacilityCache, InMemoryCacheStore
from directory_api.dependencies import get_directory_service
from directory_api.repositories.memory import InMemoryFacilityRepository
from directory_api.services.directory_service import DirectoryService

BASE = "https://example.co.uk"


class FailingRepository:
    async def list_by_category(self, _category):
        raise RuntimeError("store down")

    async def list_nearby(self, **_kwargs):
        raise RuntimeError("store down")

    async def close(self) -> None:
        return None


def _client(repository=None) -> TestClient:
    app = create_app()
    service = DirectoryService(
        repository or InMemoryFacilityRepository(),
        FacilityCache(store=InMemoryCacheStore(), ttl_seconds=300),
        base_url=BASE,
    )
    app.dependency_overrides[get_directory_service] = lambda: service
    return TestClient(app)


def test_index_page_lists_featured_and_regions() -> None:
    response = _client().get("/saunas")
    body = response.json()
    data = body["data"]

    assert response.status_code == 200
    assert body["success"] is True
    assert data["total"] == 11
    assert len(data["featured"]) == 6
    assert data["featured"][0]["name"] == "Beyond Sauna"
    assert data["featured"][0]["url"] == "/saunas/cornwall/falmouth/beyond-sauna"
    assert {"England", "Scotland", "Wales"} <= set(data["regions"])
    assert data["seo"]["canonical_url"] == f"{BASE}/saunas"


def test_region_page() -> None:
    response = _client().get("/saunas/west-yorkshire")
    data = response.json()["data"]

    assert response.status_code == 200
    assert data["region"] == {"key": "west-yorkshire", "name": "West Yorkshire", "country": "England"}
    assert data["total"] == 3
    assert [(city["name"], city["count"]) for city in data["cities"]] == [("Leeds", 2), ("Bradford", 1)]
    assert data["cities"][0]["url"] == "/saunas/west-yorkshire/leeds"
    assert data["average_rating"] == 3.1
    assert data["facilities"][0]["name"] == "Kelda Wood-Fired Sauna"


def test_region_page_not_found_for_unmapped_or_empty_region() -> None:
    client = _client()

    for path in ("/saunas/atlantis", "/saunas/isle-of-wight", "/saunas/dorset"):
        response = client.get(path)
        body = response.json()
        assert response.status_code == 404
        assert body["success"] is False
        assert body["error"]["code"] == "NOT_FOUND"


def test_city_page_sorted_by_rating() -> None:
    response = _client().get("/saunas/west-yorkshire/leeds")
    data = response.json()["data"]

    assert response.status_code == 200
    assert data["city"] == {"name": "Leeds", "slug": "leeds"}
    assert [item["id"] for item in data["facilities"]] == ["fac-001", "fac-002"]


def test_city_page_not_found() -> None:
    client = _client()

    assert client.get("/saunas/west-yorkshire/wakefield").status_code == 404
    assert client.get("/saunas/north-yorkshire/leeds").status_code == 404


def test_facility_page_with_nearby() -> None:
    response = _client().get("/saunas/west-yorkshire/leeds/hot-box-sauna")
    data = response.json()["data"]

    assert response.status_code == 200
    assert data["facility"]["id"] == "fac-002"
    assert data["facility"]["facility_type"] == "sauna"
    assert data["facility"]["url"] == "/saunas/west-yorkshire/leeds/hot-box-sauna"
    assert [item["id"] for item in data["nearby"]] == ["fac-001"]
    assert data["seo"]["title"].startswith("Hot Box Sauna - Leeds, West Yorkshire")


def test_facility_page_not_found() -> None:
    response = _client().get("/saunas/west-yorkshire/leeds/no-such-sauna")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_other_categories_are_served_separately() -> None:
    client = _client()

    response = client.get("/cold-plunges/east-sussex")
    data = response.json()["data"]

    assert response.status_code == 200
    assert [item["name"] for item in data["facilities"]] == ["Brighton Ice Plunge"]
    assert client.get("/ice-baths/east-sussex").status_code == 404


def test_legacy_slug_redirects_to_canonical_path() -> None:
    client = _client()

    response = client.get("/sauna/hot-box-sauna-york", follow_redirects=False)

    assert response.status_code == 301
    assert response.headers["location"] == "/saunas/north-yorkshire/york/hot-box-sauna"


def test_legacy_slug_for_unmapped_county_is_not_found() -> None:
    client = _client()

    response = client.get("/sauna/island-steam", follow_redirects=False)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
    assert client.get("/saunas/isle-of-wight/ryde/island-steam").status_code == 404


def test_legacy_reserved_or_unknown_slug_is_not_found() -> None:
    client = _client()

    assert client.get("/sauna/admin", follow_redirects=False).status_code == 404
    assert client.get("/sauna/hot-box-sauna", follow_redirects=False).status_code == 404


def test_store_failure_degrades_to_not_found_and_empty_index() -> None:
    client = _client(FailingRepository())

    index = client.get("/saunas")
    region = client.get("/saunas/west-yorkshire")

    assert index.status_code == 200
    assert index.json()["data"]["total"] == 0
    assert region.status_code == 404


def test_sitemap_xml() -> None:
    response = _client().get("/sitemap.xml")
    body = response.text

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    assert f"<loc>{BASE}/saunas/west-yorkshire/leeds/kelda-woodfired-sauna</loc>" in body
    assert f"<loc>{BASE}/cold-plunges/east-sussex</loc>" in body
    assert "isle-of-wight" not in body


def test_sitemap_lists_static_pages_only_when_store_fails() -> None:
    response = _client(FailingRepository()).get("/sitemap.xml")

    assert response.status_code == 200
    assert response.text.count("<url>") == 1 + 6 + 3
    assert f"<loc>{BASE}/privacy-policy</loc>" in response.text
