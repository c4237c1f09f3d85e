from directory_engine.models import Facility, FacilityCategory
from directory_engine.seo import city_metadata, facility_metadata, index_metadata, region_metadata
from directory_engine.slug_router import FacilityPath

BASE = "https://example.co.uk"


def test_index_metadata_canonical_url() -> None:
    meta = index_metadata(FacilityCategory.COLD_PLUNGE, total=12, base_url=BASE)

    assert meta.canonical_url == f"{BASE}/cold-plunges"
    assert "Cold Plunges" in meta.title
    assert "12 cold plunges" in meta.description


def test_region_metadata_mentions_leading_cities() -> None:
    meta = region_metadata(
        FacilityCategory.SAUNA,
        region_key="west-yorkshire",
        region_name="West Yorkshire",
        total=5,
        city_names=["Leeds", "Bradford", "Wakefield", "Keighley"],
        base_url=BASE,
    )

    assert meta.title.startswith("5 Best Saunas in West Yorkshire")
    assert "Leeds, Bradford, Wakefield" in meta.description
    assert "Keighley" not in meta.description
    assert meta.canonical_url == f"{BASE}/saunas/west-yorkshire"


def test_city_metadata_breadcrumbs() -> None:
    meta = city_metadata(
        FacilityCategory.SAUNA,
        region_key="west-yorkshire",
        region_name="West Yorkshire",
        city_slug="leeds",
        city_name="Leeds",
        total=2,
        base_url=BASE,
    )

    payload = meta.to_dict()
    items = payload["breadcrumbs"]["itemListElement"]

    assert payload["breadcrumbs"]["@type"] == "BreadcrumbList"
    assert [item["name"] for item in items] == ["Home", "Saunas", "West Yorkshire", "Leeds"]
    assert items[-1]["item"] == f"{BASE}/saunas/west-yorkshire/leeds"
    assert [item["position"] for item in items] == [1, 2, 3, 4]


def test_facility_metadata_includes_rating() -> None:
    facility = Facility(
        id="a",
        name="Kelda",
        category=FacilityCategory.SAUNA,
        city="Leeds",
        county="Leeds",
        description="Wood-fired sauna by the canal.",
        rating=4.5,
        review_count=80,
    )

    meta = facility_metadata(
        facility,
        FacilityPath("west-yorkshire", "leeds", "kelda"),
        region_name="West Yorkshire",
        base_url=BASE,
    )

    assert meta.title == "Kelda - Leeds, West Yorkshire | Sauna & Cold"
    assert meta.canonical_url == f"{BASE}/saunas/west-yorkshire/leeds/kelda"
    assert "Rating: 4.5 (80 reviews)." in meta.description
