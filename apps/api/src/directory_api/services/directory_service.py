from __future__ import annotations

import logging
from typing import Any

from devkit.timezone import now_uk_iso
from directory_engine.listings import average_rating, group_by_city, sort_by_rating, summarize_regions, top_rated
from directory_engine.models import Facility, FacilityCategory
from directory_engine.seo import city_metadata, facility_metadata, index_metadata, region_metadata
from directory_engine.sitemap import SitemapEntry, build_sitemap
from directory_engine.slug_router import FacilityPath, SlugRouter

from directory_api.cache import FacilityCache
from directory_api.repositories.base import FacilityRepository
from directory_api.schemas.facility import CitySummary, FacilityItem, RegionItem

logger = logging.getLogger(__name__)

NEARBY_LIMIT = 3


class DirectoryService:
    """Builds the JSON page data for the category -> region -> city -> facility pages.

    Every page reads its category once through the cache and derives the rest
    (region membership, slugs, listings) from that one list.
    """

    def __init__(
        self,
        repository: FacilityRepository,
        cache: FacilityCache,
        *,
        router: SlugRouter | None = None,
        base_url: str = "https://saunaandcold.co.uk",
    ) -> None:
        self._repository = repository
        self._cache = cache
        self._router = router or SlugRouter()
        self._base_url = base_url

    @property
    def router(self) -> SlugRouter:
        return self._router

    async def _fetch(self, category: FacilityCategory) -> list[Facility]:
        try:
            rows = await self._cache.get_rows(category)
        except Exception:
            logger.warning("facility_cache_read_failed", extra={"component": "directory", "category": category.value})
            rows = None
        if rows is not None:
            return [Facility.from_row(row) for row in rows]

        facilities = await self._repository.list_by_category(category)
        try:
            await self._cache.set_rows(category, [facility.to_dict() for facility in facilities])
        except Exception:
            logger.warning("facility_cache_write_failed", extra={"component": "directory", "category": category.value})
        return facilities

    async def facilities_for(self, category: FacilityCategory) -> list[Facility]:
        """Category facilities, or ``[]`` when the store fails (not cached)."""
        try:
            return await self._fetch(category)
        except Exception:
            logger.exception("facility_fetch_failed", extra={"component": "directory", "category": category.value})
            return []

    async def nearby(self, facility: Facility, limit: int = NEARBY_LIMIT) -> list[Facility]:
        try:
            return await self._repository.list_nearby(
                category=facility.category,
                county=facility.county,
                exclude_id=facility.id,
                limit=limit,
            )
        except Exception:
            logger.exception("nearby_fetch_failed", extra={"component": "directory", "facility_id": facility.id})
            return []

    def _items(self, facilities: list[Facility], paths: dict[str, FacilityPath]) -> list[dict[str, Any]]:
        items = []
        for facility in facilities:
            path = paths.get(facility.id)
            url = path.url(facility.category.path) if path is not None else None
            items.append(FacilityItem.from_facility(facility, url=url).model_dump())
        return items

    async def index_page(self, category: FacilityCategory) -> dict[str, Any]:
        facilities = await self.facilities_for(category)
        paths = self._router.canonical_paths(facilities)
        regions = summarize_regions(facilities, self._router.mapping)
        return {
            "category": category.value,
            "total": len(facilities),
            "featured": self._items(top_rated(facilities), paths),
            "regions": {
                country: [
                    RegionItem(
                        key=region.key,
                        name=region.name,
                        facility_count=region.facility_count,
                        city_count=region.city_count,
                        url=f"/{category.path}/{region.key}",
                    ).model_dump()
                    for region in items
                ]
                for country, items in regions.items()
            },
            "seo": index_metadata(category, len(facilities), self._base_url).to_dict(),
        }

    async def region_page(self, category: FacilityCategory, region_key: str) -> dict[str, Any] | None:
        region = self._router.mapping.region(region_key)
        if region is None:
            return None
        facilities = await self.facilities_for(category)
        members = self._router.mapping.list_facilities_in_region(facilities, region_key)
        if not members:
            return None
        paths = self._router.canonical_paths(facilities)
        cities = group_by_city(members)
        return {
            "category": category.value,
            "region": {"key": region.key, "name": region.name, "country": region.country},
            "total": len(members),
            "average_rating": round(average_rating(members), 2),
            "cities": [
                CitySummary(
                    name=city.name,
                    slug=city.slug,
                    count=city.count,
                    url=f"/{category.path}/{region_key}/{city.slug}",
                ).model_dump()
                for city in cities
            ],
            "featured": self._items(top_rated(members), paths),
            "facilities": self._items(sort_by_rating(members), paths),
            "seo": region_metadata(
                category,
                region_key=region_key,
                region_name=region.name,
                total=len(members),
                city_names=[city.name for city in cities],
                base_url=self._base_url,
            ).to_dict(),
        }

    async def city_page(self, category: FacilityCategory, region_key: str, city_slug: str) -> dict[str, Any] | None:
        region = self._router.mapping.region(region_key)
        if region is None:
            return None
        facilities = await self.facilities_for(category)
        members = self._router.city_members(facilities, region_key, city_slug)
        if not members:
            return None
        paths = self._router.canonical_paths(facilities)
        city_name = members[0].city
        return {
            "category": category.value,
            "region": {"key": region.key, "name": region.name, "country": region.country},
            "city": {"name": city_name, "slug": city_slug},
            "total": len(members),
            "average_rating": round(average_rating(members), 2),
            "facilities": self._items(sort_by_rating(members), paths),
            "seo": city_metadata(
                category,
                region_key=region_key,
                region_name=region.name,
                city_slug=city_slug,
                city_name=city_name,
                total=len(members),
                base_url=self._base_url,
            ).to_dict(),
        }

    async def facility_page(
        self,
        category: FacilityCategory,
        region_key: str,
        city_slug: str,
        facility_slug: str,
    ) -> dict[str, Any] | None:
        facilities = await self.facilities_for(category)
        facility = self._router.resolve_slug([region_key, city_slug, facility_slug], facilities)
        if facility is None:
            return None
        region = self._router.mapping.region(region_key)
        region_name = region.name if region is not None else facility.county
        paths = self._router.canonical_paths(facilities)
        path = paths.get(facility.id) or FacilityPath(region_key, city_slug, facility_slug)
        nearby = await self.nearby(facility)
        return {
            "category": category.value,
            "facility": FacilityItem.from_facility(facility, url=path.url(category.path)).model_dump(),
            "region": {"key": region_key, "name": region_name},
            "city": {"name": facility.city, "slug": city_slug},
            "nearby": self._items(nearby, paths),
            "seo": facility_metadata(facility, path, region_name=region_name, base_url=self._base_url).to_dict(),
        }

    async def legacy_redirect(self, category: FacilityCategory, slug: str) -> str | None:
        """Canonical URL for a flat ``/<legacy>/<slug>`` link, or ``None``."""
        facilities = await self.facilities_for(category)
        facility = self._router.resolve_slug([slug], facilities)
        if facility is None:
            return None
        if not self._router.mapping.is_mapped(facility.county):
            # The slug-fallback region has no members, so its path never resolves.
            logger.warning(
                "legacy_redirect_unmapped_county",
                extra={"component": "directory", "facility_id": facility.id, "county": facility.county},
            )
            return None
        path = self._router.canonical_path(facility, facilities)
        if path is None:
            return None
        return path.url(category.path)

    async def sitemap(self, now: str | None = None) -> list[SitemapEntry]:
        timestamp = now or now_uk_iso()
        try:
            by_category = {category: await self._fetch(category) for category in FacilityCategory}
        except Exception:
            logger.exception("sitemap_fetch_failed", extra={"component": "directory"})
            return build_sitemap(None, now=timestamp, router=self._router, base_url=self._base_url)
        return build_sitemap(by_category, now=timestamp, router=self._router, base_url=self._base_url)

    async def invalidate(self, category: FacilityCategory | None = None) -> int:
        if category is None:
            return await self._cache.invalidate_facilities()
        return await self._cache.invalidate_category(category)