from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from directory_engine.models import Facility
from directory_engine.region_table import REGIONS, RegionEntry
from directory_engine.slugs import slugify

_REGION_KEY = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class RegionMappingError(ValueError):
    pass


@dataclass(frozen=True)
class RegionDefinition:
    key: str
    name: str
    country: str
    counties: tuple[str, ...]


class RegionMapping:
    """Read-only lookup between region keys and the raw county strings they cover.

    Raw strings are matched exactly (case-sensitive). A county that is not in
    the table still gets a key, ``slugify(county)``, so it can be linked to;
    such keys simply have no region page.
    """

    def __init__(self, entries: Iterable[RegionEntry]) -> None:
        self._regions: dict[str, RegionDefinition] = {}
        self._region_by_county: dict[str, str] = {}
        for key, name, country, counties in entries:
            if not _REGION_KEY.match(key):
                raise RegionMappingError(f"invalid region key: {key!r}")
            if key in self._regions:
                raise RegionMappingError(f"duplicate region key: {key!r}")
            for county in counties:
                owner = self._region_by_county.get(county)
                if owner is not None:
                    raise RegionMappingError(f"county {county!r} is mapped to both {owner!r} and {key!r}")
                self._region_by_county[county] = key
            self._regions[key] = RegionDefinition(key=key, name=name, country=country, counties=tuple(counties))

    def __len__(self) -> int:
        return len(self._regions)

    def __contains__(self, key: object) -> bool:
        return key in self._regions

    def region_key_for_county(self, raw_county: str) -> str | None:
        key = self._region_by_county.get(raw_county)
        if key is not None:
            return key
        return slugify(raw_county) or None

    def counties_for_region_key(self, key: str) -> tuple[str, ...] | None:
        region = self._regions.get(key)
        return region.counties if region is not None else None

    def is_mapped(self, raw_county: str) -> bool:
        return raw_county in self._region_by_county

    def region(self, key: str) -> RegionDefinition | None:
        return self._regions.get(key)

    def regions(self) -> list[RegionDefinition]:
        return list(self._regions.values())

    def list_facilities_in_region(self, facilities: Sequence[Facility], key: str) -> list[Facility]:
        counties = self.counties_for_region_key(key)
        if not counties:
            return []
        members = set(counties)
        return [facility for facility in facilities if facility.county in members]


# Built at import so a broken table fails the process on startup.
_DEFAULT_MAPPING = RegionMapping(REGIONS)


def default_region_mapping() -> RegionMapping:
    return _DEFAULT_MAPPING
