from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from uuid import uuid4

from devkit.timezone import now_uk_iso
from directory_engine.listings import sort_by_rating
from directory_engine.models import Facility, FacilityCategory

from directory_api.repositories.base import DuplicateSignupError


def _sample(
    facility_id: str,
    name: str,
    category: FacilityCategory,
    city: str,
    county: str,
    rating: float | None,
    review_count: int,
    **extra: Any,
) -> Facility:
    return Facility(
        id=facility_id,
        name=name,
        category=category,
        city=city,
        county=county,
        rating=rating,
        review_count=review_count,
        updated_at="2025-05-01T09:00:00+01:00",
        **extra,
    )


SAMPLE_FACILITIES: tuple[Facility, ...] = (
    _sample(
        "fac-001",
        "Kelda Wood-Fired Sauna",
        FacilityCategory.SAUNA,
        "Leeds",
        "Leeds",
        4.8,
        126,
        address="Canal Wharf",
        postcode="LS11 5PS",
        latitude=53.7926,
        longitude=-1.5494,
        amenities=["wood-fired", "cold plunge"],
        verified=True,
        featured=True,
    ),
    _sample("fac-002", "Hot Box Sauna", FacilityCategory.SAUNA, "Leeds", "Leeds", 4.5, 58),
    _sample("fac-003", "Hot Box Sauna", FacilityCategory.SAUNA, "York", "York", 4.6, 41),
    _sample("fac-004", "Sauna Hut Bradford", FacilityCategory.SAUNA, "Bradford", "Bradford", None, 0),
    _sample(
        "fac-005",
        "Brighton Beach Sauna",
        FacilityCategory.SAUNA,
        "Brighton",
        "Brighton",
        4.7,
        212,
        latitude=50.8195,
        longitude=-0.1363,
        price_range="££",
    ),
    _sample("fac-006", "Beyond Sauna", FacilityCategory.SAUNA, "Falmouth", "Falmouth", 4.9, 87),
    _sample("fac-007", "Canal Side Sauna", FacilityCategory.SAUNA, "London", "London", 4.3, 64),
    _sample("fac-008", "Sauna Social", FacilityCategory.SAUNA, "Edinburgh", "Edinburgh", 4.4, 39),
    _sample("fac-009", "Bay Steam", FacilityCategory.SAUNA, "Cardiff", "Cardiff", 4.2, 22),
    _sample("fac-010", "Loch Heat", FacilityCategory.SAUNA, "Portree", "Highland", 4.6, 17),
    _sample("fac-011", "Island Steam", FacilityCategory.SAUNA, "Ryde", "Isle of Wight", 4.0, 9),
    _sample("fac-012", "Cold Water Club", FacilityCategory.COLD_PLUNGE, "Leeds", "Leeds", 4.1, 15),
    _sample("fac-013", "Brighton Ice Plunge", FacilityCategory.COLD_PLUNGE, "Brighton", "Brighton", 4.5, 33),
)


class InMemoryFacilityRepository:
    def __init__(self, facilities: Iterable[Facility] | None = None) -> None:
        self._items = list(SAMPLE_FACILITIES if facilities is None else facilities)

    async def list_by_category(self, category: FacilityCategory) -> list[Facility]:
        return [item for item in self._items if item.category is category]

    async def list_nearby(
        self,
        *,
        category: FacilityCategory,
        county: str,
        exclude_id: str,
        limit: int = 3,
    ) -> list[Facility]:
        same_county = [
            item for item in self._items if item.category is category and item.county == county and item.id != exclude_id
        ]
        return sort_by_rating(same_county)[:limit]

    async def close(self) -> None:
        return None


class InMemoryWaitlistRepository:
    def __init__(self) -> None:
        self._rows: dict[str, dict[str, Any]] = {}

    async def add_signup(self, *, email: str, source: str, metadata: dict[str, Any]) -> dict[str, Any]:
        if email in self._rows:
            raise DuplicateSignupError(email)
        row = {
            "id": str(uuid4()),
            "email": email,
            "source": source,
            "metadata": dict(metadata),
            "created_at": now_uk_iso(),
        }
        self._rows[email] = row
        return dict(row)

    def rows(self) -> list[dict[str, Any]]:
        return [dict(row) for row in self._rows.values()]

    async def close(self) -> None:
        return None
