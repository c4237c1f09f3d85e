import pytest

from directory_api.repositories.base import DuplicateSignupError
from directory_api.repositories.memory import InMemoryFacilityRepository, InMemoryWaitlistRepository
from directory_engine.models import Facility, FacilityCategory


def _facility(facility_id: str, county: str, rating: float | None) -> Facility:
    return Facility(
        id=facility_id,
        name=f"Sauna {facility_id}",
        category=FacilityCategory.SAUNA,
        city="Town",
        county=county,
        rating=rating,
    )


@pytest.mark.asyncio
async def test_list_by_category_filters_category() -> None:
    repository = InMemoryFacilityRepository()

    plunges = await repository.list_by_category(FacilityCategory.COLD_PLUNGE)

    assert {item.category for item in plunges} == {FacilityCategory.COLD_PLUNGE}


@pytest.mark.asyncio
async def test_list_nearby_same_county_by_rating() -> None:
    repository = InMemoryFacilityRepository(
        [
            _facility("a", "Leeds", 4.0),
            _facility("b", "Leeds", None),
            _facility("c", "Leeds", 4.9),
            _facility("d", "Leeds", 4.5),
            _facility("e", "Leeds", 3.0),
            _facility("f", "York", 5.0),
        ]
    )

    nearby = await repository.list_nearby(category=FacilityCategory.SAUNA, county="Leeds", exclude_id="d")

    assert [item.id for item in nearby] == ["c", "a", "e"]


@pytest.mark.asyncio
async def test_waitlist_rejects_duplicate_email() -> None:
    repository = InMemoryWaitlistRepository()

    row = await repository.add_signup(email="a@b.co", source="community_page", metadata={"user_agent": None})

    assert row["email"] == "a@b.co"
    assert row["id"]
    with pytest.raises(DuplicateSignupError):
        await repository.add_signup(email="a@b.co", source="footer", metadata={})
