from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from directory_engine.models import Facility, FacilityCategory
from directory_engine.slug_router import FacilityPath

SITE_NAME = "Sauna & Cold"
DEFAULT_BASE_URL = "https://saunaandcold.co.uk"


@dataclass(frozen=True)
class Breadcrumb:
    name: str
    url: str


@dataclass
class PageMetadata:
    title: str
    description: str
    canonical_url: str
    keywords: list[str] = field(default_factory=list)
    breadcrumbs: list[Breadcrumb] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "canonical_url": self.canonical_url,
            "keywords": list(self.keywords),
            "breadcrumbs": breadcrumb_list(self.breadcrumbs) if self.breadcrumbs else None,
        }


def absolute_url(base_url: str, path: str) -> str:
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def breadcrumb_list(crumbs: Sequence[Breadcrumb]) -> dict[str, Any]:
    """schema.org ``BreadcrumbList`` for the JSON-LD block of a page."""
    return {
        "@context": "https://schema.org",
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": position, "name": crumb.name, "item": crumb.url}
            for position, crumb in enumerate(crumbs, start=1)
        ],
    }


def _trail(category: FacilityCategory, base_url: str) -> list[Breadcrumb]:
    return [
        Breadcrumb("Home", absolute_url(base_url, "/")),
        Breadcrumb(category.plural_label, absolute_url(base_url, category.path)),
    ]


def index_metadata(category: FacilityCategory, total: int, base_url: str = DEFAULT_BASE_URL) -> PageMetadata:
    plural = category.plural_label
    return PageMetadata(
        title=f"{plural} in the UK | {SITE_NAME}",
        description=f"Browse {total} {plural.lower()} across England, Scotland, Wales and Northern Ireland.",
        canonical_url=absolute_url(base_url, category.path),
        keywords=[f"{plural.lower()} uk", f"best {plural.lower()}"],
        breadcrumbs=_trail(category, base_url),
    )


def region_metadata(
    category: FacilityCategory,
    *,
    region_key: str,
    region_name: str,
    total: int,
    city_names: Sequence[str],
    base_url: str = DEFAULT_BASE_URL,
) -> PageMetadata:
    plural = category.plural_label
    leading = ", ".join(city_names[:3])
    description = f"Discover {total} {plural.lower()} across {region_name}."
    if leading:
        description += f" Find {plural.lower()} in {leading} and more."
    canonical = absolute_url(base_url, f"{category.path}/{region_key}")
    return PageMetadata(
        title=f"{total} Best {plural} in {region_name} | {SITE_NAME}",
        description=description,
        canonical_url=canonical,
        keywords=[f"{region_name} {plural.lower()}"] + [f"{name} {plural.lower()}" for name in city_names[:5]],
        breadcrumbs=[*_trail(category, base_url), Breadcrumb(region_name, canonical)],
    )


def city_metadata(
    category: FacilityCategory,
    *,
    region_key: str,
    region_name: str,
    city_slug: str,
    city_name: str,
    total: int,
    base_url: str = DEFAULT_BASE_URL,
) -> PageMetadata:
    plural = category.plural_label
    region_url = absolute_url(base_url, f"{category.path}/{region_key}")
    canonical = f"{region_url}/{city_slug}"
    return PageMetadata(
        title=f"{total} Best {plural} in {city_name}, {region_name} | {SITE_NAME}",
        description=(
            f"Discover {total} {plural.lower()} in {city_name}, {region_name} "
            "with ratings, opening hours and contact details."
        ),
        canonical_url=canonical,
        keywords=[f"{city_name} {plural.lower()}", f"{region_name} {plural.lower()}"],
        breadcrumbs=[
            *_trail(category, base_url),
            Breadcrumb(region_name, region_url),
            Breadcrumb(city_name, canonical),
        ],
    )


def facility_metadata(
    facility: Facility,
    path: FacilityPath,
    *,
    region_name: str,
    base_url: str = DEFAULT_BASE_URL,
) -> PageMetadata:
    category = facility.category
    region_url = absolute_url(base_url, f"{category.path}/{path.region_key}")
    city_url = f"{region_url}/{path.city_slug}"
    description = facility.description or f"{facility.name} is a {category.label.lower()} in {facility.city}."
    description += f" Located in {facility.city}, {region_name}."
    if facility.rating is not None:
        description += f" Rating: {facility.rating:g} ({facility.review_count} reviews)."
    return PageMetadata(
        title=f"{facility.name} - {facility.city}, {region_name} | {SITE_NAME}",
        description=description,
        canonical_url=absolute_url(base_url, path.url(category.path)),
        keywords=[facility.name, f"{category.label.lower()} {facility.city}", f"{region_name} {category.label.lower()}"],
        breadcrumbs=[
            *_trail(category, base_url),
            Breadcrumb(region_name, region_url),
            Breadcrumb(facility.city, city_url),
            Breadcrumb(facility.name, absolute_url(base_url, path.url(category.path))),
        ],
    )
