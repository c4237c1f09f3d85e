from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from directory_engine.models import Facility
from directory_engine.regions import RegionMapping, default_region_mapping
from directory_engine.slugs import slugify, with_suffix

# Single segments that belong to app routes and never name a facility.
RESERVED_SEGMENTS: frozenset[str] = frozenset({"delete", "edit", "new", "create", "admin", "api"})


@dataclass(frozen=True)
class FacilityPath:
    region_key: str
    city_slug: str
    facility_slug: str

    @property
    def segments(self) -> tuple[str, str, str]:
        return (self.region_key, self.city_slug, self.facility_slug)

    def url(self, prefix: str) -> str:
        return "/" + "/".join((prefix.strip("/"), *self.segments))


def is_reserved_segment(segment: str) -> bool:
    return segment.lower() in RESERVED_SEGMENTS


def _base_slug(facility: Facility) -> str:
    return slugify(facility.name) or slugify(facility.id)


def _claim_unique(candidates: dict[str, str]) -> dict[str, str]:
    """Resolve clashing candidate slugs, keyed by facility id.

    The lowest id of each clashing group keeps the candidate; the rest get
    ``-2``, ``-3``, ... in id order, skipping anything already taken.
    """
    ordered = sorted(candidates)
    taken: set[str] = set()
    claimed: dict[str, str] = {}
    for facility_id in ordered:
        candidate = candidates[facility_id]
        if candidate not in taken:
            taken.add(candidate)
            claimed[facility_id] = candidate
    for facility_id in ordered:
        if facility_id in claimed:
            continue
        candidate = candidates[facility_id]
        suffix = 2
        while f"{candidate}-{suffix}" in taken:
            suffix += 1
        slug = f"{candidate}-{suffix}"
        taken.add(slug)
        claimed[facility_id] = slug
    return claimed


class SlugRouter:
    """Maps facilities to URL slugs and URL segments back to facilities.

    Two URL shapes are supported. The flat legacy form ``/{slug}`` uses
    ``slugify(name)``, widened to ``name-city`` when a sibling shares the
    name. The canonical form ``/{region}/{city}/{facility}`` uses
    ``slugify(name)`` inside its city. Both are unique across the sibling set
    they are computed from.
    """

    def __init__(self, mapping: RegionMapping | None = None) -> None:
        self._mapping = mapping or default_region_mapping()

    @property
    def mapping(self) -> RegionMapping:
        return self._mapping

    def slug_table(self, siblings: Iterable[Facility]) -> dict[str, str]:
        facilities = list(siblings)
        base_counts: dict[str, int] = defaultdict(int)
        for facility in facilities:
            base_counts[_base_slug(facility)] += 1
        candidates: dict[str, str] = {}
        for facility in facilities:
            base = _base_slug(facility)
            if base_counts[base] > 1:
                base = with_suffix(base, slugify(facility.city))
            candidates[facility.id] = base
        return _claim_unique(candidates)

    def slug_for(self, facility: Facility, siblings: Sequence[Facility]) -> str:
        facilities = list(siblings)
        if all(sibling.id != facility.id for sibling in facilities):
            facilities.append(facility)
        return self.slug_table(facilities)[facility.id]

    def city_members(self, siblings: Iterable[Facility], region_key: str, city_slug: str) -> list[Facility]:
        in_region = self._mapping.list_facilities_in_region(list(siblings), region_key)
        return [facility for facility in in_region if slugify(facility.city) == city_slug]

    def canonical_paths(self, siblings: Iterable[Facility]) -> dict[str, FacilityPath]:
        groups: dict[tuple[str, str], list[Facility]] = defaultdict(list)
        for facility in siblings:
            region_key = self._mapping.region_key_for_county(facility.county)
            city_slug = slugify(facility.city)
            if region_key is None or not city_slug:
                continue
            groups[(region_key, city_slug)].append(facility)

        paths: dict[str, FacilityPath] = {}
        for (region_key, city_slug), members in groups.items():
            segments = _claim_unique({facility.id: _base_slug(facility) for facility in members})
            for facility_id, facility_slug in segments.items():
                paths[facility_id] = FacilityPath(region_key, city_slug, facility_slug)
        return paths

    def canonical_path(self, facility: Facility, siblings: Sequence[Facility]) -> FacilityPath | None:
        facilities = list(siblings)
        if all(sibling.id != facility.id for sibling in facilities):
            facilities.append(facility)
        return self.canonical_paths(facilities).get(facility.id)

    def resolve_slug(self, segments: Sequence[str], siblings: Sequence[Facility]) -> Facility | None:
        if len(segments) == 1:
            (slug,) = segments
            if not slug or is_reserved_segment(slug):
                return None
            table = self.slug_table(siblings)
            for facility in siblings:
                if table.get(facility.id) == slug:
                    return facility
            return None

        if len(segments) == 3:
            region_key, city_slug, facility_slug = segments
            members = self.city_members(siblings, region_key, city_slug)
            if not members:
                return None
            in_city = _claim_unique({facility.id: _base_slug(facility) for facility in members})
            for facility in members:
                if in_city[facility.id] == facility_slug:
                    return facility
            return None

        raise ValueError(f"expected 1 or 3 path segments, got {len(segments)}")
