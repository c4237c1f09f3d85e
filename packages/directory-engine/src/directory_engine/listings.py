from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field

from directory_engine.models import Facility
from directory_engine.region_table import COUNTRIES
from directory_engine.regions import RegionMapping
from directory_engine.slugs import slugify

FEATURED_LIMIT = 6


@dataclass
class CityGroup:
    name: str
    slug: str
    facilities: list[Facility] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.facilities)


@dataclass(frozen=True)
class RegionSummary:
    key: str
    name: str
    country: str
    facility_count: int
    city_count: int


def _rating(facility: Facility) -> float:
    return facility.rating if facility.rating is not None else 0.0


def sort_by_rating(facilities: Sequence[Facility]) -> list[Facility]:
    return sorted(facilities, key=lambda facility: (-_rating(facility), facility.id))


def top_rated(facilities: Sequence[Facility], limit: int = FEATURED_LIMIT) -> list[Facility]:
    if limit <= 0:
        return []
    return sort_by_rating(facilities)[:limit]


def average_rating(facilities: Sequence[Facility]) -> float:
    if not facilities:
        return 0.0
    return sum(_rating(facility) for facility in facilities) / len(facilities)


def group_by_city(facilities: Sequence[Facility]) -> list[CityGroup]:
    # Grouped by slug so "St Ives" and "St. Ives" land on the same city page.
    groups: dict[str, CityGroup] = {}
    for facility in facilities:
        slug = slugify(facility.city)
        if not slug:
            continue
        group = groups.get(slug)
        if group is None:
            group = groups[slug] = CityGroup(name=facility.city, slug=slug)
        group.facilities.append(facility)
    return sorted(groups.values(), key=lambda group: (-group.count, group.name))


def summarize_regions(facilities: Sequence[Facility], mapping: RegionMapping) -> dict[str, list[RegionSummary]]:
    """Index-page view: regions with at least one facility, per country, largest first."""
    by_region: dict[str, list[Facility]] = defaultdict(list)
    for facility in facilities:
        if not mapping.is_mapped(facility.county):
            continue
        key = mapping.region_key_for_county(facility.county)
        if key is not None:
            by_region[key].append(facility)

    summary: dict[str, list[RegionSummary]] = {country: [] for country in COUNTRIES}
    for key, members in by_region.items():
        region = mapping.region(key)
        if region is None:
            continue
        summary.setdefault(region.country, []).append(
            RegionSummary(
                key=key,
                name=region.name,
                country=region.country,
                facility_count=len(members),
                city_count=len({slugify(facility.city) for facility in members if facility.city}),
            )
        )
    for regions in summary.values():
        regions.sort(key=lambda item: (-item.facility_count, item.name))
    return {country: regions for country, regions in summary.items() if regions}
