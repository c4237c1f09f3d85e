from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from directory_engine.models import Facility


class FacilityItem(BaseModel):
    id: str
    name: str
    facility_type: str
    city: str
    county: str
    address: str = ""
    postcode: str = ""
    description: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    opening_hours: dict[str, Any] | None = None
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    rating: float | None = None
    review_count: int = 0
    price_range: str | None = None
    verified: bool = False
    featured: bool = False
    updated_at: str | None = None
    url: str | None = None

    @classmethod
    def from_facility(cls, facility: Facility, url: str | None = None) -> FacilityItem:
        return cls(**facility.to_dict(), url=url)


class CitySummary(BaseModel):
    name: str
    slug: str
    count: int
    url: str


class RegionItem(BaseModel):
    key: str
    name: str
    facility_count: int
    city_count: int
    url: str
