from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class FacilityCategory(str, Enum):
    SAUNA = "sauna"
    COLD_PLUNGE = "cold_plunge"
    ICE_BATH = "ice_bath"
    WELLNESS_CENTRE = "wellness_centre"
    SPA_HOTEL = "spa_hotel"
    THERMAL_BATH = "thermal_bath"

    @property
    def path(self) -> str:
        return _CATEGORY_PATHS[self]

    @property
    def legacy_path(self) -> str:
        return self.value.replace("_", "-")

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self][0]

    @property
    def plural_label(self) -> str:
        return _CATEGORY_LABELS[self][1]

    @classmethod
    def from_path(cls, path: str) -> FacilityCategory | None:
        for category in cls:
            if category.path == path:
                return category
        return None


_CATEGORY_PATHS: dict[FacilityCategory, str] = {
    FacilityCategory.SAUNA: "saunas",
    FacilityCategory.COLD_PLUNGE: "cold-plunges",
    FacilityCategory.ICE_BATH: "ice-baths",
    FacilityCategory.WELLNESS_CENTRE: "wellness-centres",
    FacilityCategory.SPA_HOTEL: "spa-hotels",
    FacilityCategory.THERMAL_BATH: "thermal-baths",
}

_CATEGORY_LABELS: dict[FacilityCategory, tuple[str, str]] = {
    FacilityCategory.SAUNA: ("Sauna", "Saunas"),
    FacilityCategory.COLD_PLUNGE: ("Cold Plunge", "Cold Plunges"),
    FacilityCategory.ICE_BATH: ("Ice Bath", "Ice Baths"),
    FacilityCategory.WELLNESS_CENTRE: ("Wellness Centre", "Wellness Centres"),
    FacilityCategory.SPA_HOTEL: ("Spa Hotel", "Spa Hotels"),
    FacilityCategory.THERMAL_BATH: ("Thermal Bath", "Thermal Baths"),
}


@dataclass
class Facility:
    id: str
    name: str
    category: FacilityCategory
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
    amenities: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)
    rating: float | None = None
    review_count: int = 0
    price_range: str | None = None
    verified: bool = False
    featured: bool = False
    updated_at: str | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Facility:
        """Build a facility from a ``facilities`` table row (or cached dict)."""
        rating = row.get("rating")
        latitude = row.get("latitude")
        longitude = row.get("longitude")
        updated_at = row.get("updated_at")
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            category=FacilityCategory(row.get("facility_type") or row.get("category")),
            city=row.get("city") or "",
            county=row.get("county") or "",
            address=row.get("address") or "",
            postcode=row.get("postcode") or "",
            description=row.get("description"),
            phone=row.get("phone"),
            email=row.get("email"),
            website=row.get("website"),
            latitude=float(latitude) if latitude is not None else None,
            longitude=float(longitude) if longitude is not None else None,
            opening_hours=row.get("opening_hours"),
            amenities=list(row.get("amenities") or []),
            images=list(row.get("images") or []),
            rating=float(rating) if rating is not None else None,
            review_count=int(row.get("review_count") or 0),
            price_range=row.get("price_range"),
            verified=bool(row.get("verified", False)),
            featured=bool(row.get("featured", False)),
            updated_at=updated_at.isoformat() if hasattr(updated_at, "isoformat") else updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload.pop("category")
        payload["facility_type"] = self.category.value
        return payload
