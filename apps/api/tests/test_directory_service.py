import pytest

from directory_api.cache import CacheStore, FacilityCache, InMemoryCacheStore
from directory_api.repositories.memory import InMemoryFacilityRepository
from directory_api.services.directory_service import DirectoryService
from directory_engine.models import Facility, FacilityCategory


class CountingRepository(InMemoryFacilityRepository):
    def __init__(self, facilities=None, failures: int = 0) -> None:
        super().__init__(facilities)
        self.calls = 0
        self.failures = failures

    async def list_by_category(self, category):
        self.calls += 1
        if self.failures:
            self.failures -= 1
            raise RuntimeError("store down")
        return await super().list_by_category(category)


class BrokenCacheStore(CacheStore):
    async def get(self, key):
        raise ConnectionError("redis down")

    async def set(self, key, value, ttl_seconds):
        raise ConnectionError("redis down")

    async def invalidate_prefix(self, prefix):
        raise ConnectionError("redis down")


def _service(repository, store: CacheStore | None = None) -> DirectoryService:
    return DirectoryService(repository, FacilityCache(store=store or InMemoryCacheStore(), ttl_seconds=300))


@pytest.mark.asyncio
async def test_category_is_fetched_once_through_cache() -> None:
    repository = CountingRepository()
    service = _service(repository)

    first = await service.facilities_for(FacilityCategory.SAUNA)
    second = await service.facilities_for(FacilityCategory.SAUNA)

    assert repository.calls == 1
    assert [item.id for item in first] == [item.id for item in second]
    assert isinstance(second[0], Facility)


@pytest.mark.asyncio
async def test_failed_fetch_is_not_cached() -> None:
    repository = CountingRepository(failures=1)
    service = _service(repository)

    assert await service.facilities_for(FacilityCategory.SAUNA) == []
    assert len(await service.facilities_for(FacilityCategory.SAUNA)) == 11
    assert repository.calls == 2


@pytest.mark.asyncio
async def test_cache_outage_falls_back_to_store() -> None:
    repository = CountingRepository()
    service = _service(repository, store=BrokenCacheStore())

    facilities = await service.facilities_for(FacilityCategory.COLD_PLUNGE)

    assert [item.id for item in facilities] == ["fac-012", "fac-013"]


@pytest.mark.asyncio
async def test_invalidate_forces_refetch() -> None:
    repository = CountingRepository()
    service = _service(repository)

    await service.facilities_for(FacilityCategory.SAUNA)
    removed = await service.invalidate(FacilityCategory.SAUNA)
    await service.facilities_for(FacilityCategory.SAUNA)

    assert removed == 1
    assert repository.calls == 2


@pytest.mark.asyncio
async def test_region_page_counts_only_region_members() -> None:
    service = _service(InMemoryFacilityRepository())

    page = await service.region_page(FacilityCategory.SAUNA, "east-sussex")

    assert page is not None
    assert page["total"] == 1
    assert page["facilities"][0]["url"] == "/saunas/east-sussex/brighton/brighton-beach-sauna"


@pytest.mark.asyncio
async def test_sitemap_uses_supplied_timestamp() -> None:
    service = _service(InMemoryFacilityRepository())

    entries = await service.sitemap(now="2026-02-01T00:00:00+00:00")

    assert entries[0].last_modified == "2026-02-01T00:00:00+00:00"
    facility_entry = next(entry for entry in entries if entry.url.endswith("/beyond-sauna"))
    assert facility_entry.last_modified == "2025-05-01T09:00:00+01:00"
