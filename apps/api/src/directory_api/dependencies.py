from __future__ import annotations

import logging
from dataclasses import dataclass

from devkit.config import ServiceSettings, load_settings
from devkit.db import AsyncDatabaseManager
from devkit.redis import create_redis_client

from directory_api.cache import CacheStore, FacilityCache, InMemoryCacheStore, RedisCacheStore
from directory_api.repositories.base import FacilityRepository, WaitlistRepository
from directory_api.repositories.memory import InMemoryFacilityRepository
from directory_api.services.directory_service import DirectoryService
from directory_api.services.waitlist_service import WaitlistService

logger = logging.getLogger(__name__)

SERVICE_NAME = "directory-api"
_BACKENDS = {"auto", "memory", "postgres", "supabase"}


@dataclass
class StoreBackends:
    name: str
    facilities: FacilityRepository
    waitlist: WaitlistRepository | None


def resolve_backend_name(settings: ServiceSettings) -> str:
    requested = settings.DIRECTORY_STORE_BACKEND.lower()
    if requested not in _BACKENDS:
        raise RuntimeError(f"unsupported DIRECTORY_STORE_BACKEND '{requested}', supported: {', '.join(sorted(_BACKENDS))}")
    if requested != "auto":
        return requested
    if settings.SUPABASE_URL and settings.SUPABASE_SERVICE_ROLE_KEY:
        return "supabase"
    if settings.DATABASE_URL:
        return "postgres"
    return "memory"


def build_backends(settings: ServiceSettings) -> StoreBackends:
    name = resolve_backend_name(settings)
    if name == "supabase":
        if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
            raise RuntimeError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are required for the supabase backend")
        from directory_api.repositories.supabase import (
            SupabaseFacilityRepository,
            SupabaseWaitlistRepository,
            create_supabase_client,
        )

        client = create_supabase_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
        return StoreBackends(name, SupabaseFacilityRepository(client), SupabaseWaitlistRepository(client))
    if name == "postgres":
        from directory_api.repositories.postgres import PostgresFacilityRepository, PostgresWaitlistRepository

        db = AsyncDatabaseManager.from_settings(settings)
        return StoreBackends(name, PostgresFacilityRepository(db), PostgresWaitlistRepository(db))
    # Sample facilities only; signups need a real store.
    return StoreBackends(name, InMemoryFacilityRepository(), None)


def build_cache_store(settings: ServiceSettings) -> CacheStore:
    redis_client = create_redis_client(settings.REDIS_URL)
    if redis_client is None:
        return InMemoryCacheStore()
    return RedisCacheStore(redis_client)


_settings = load_settings(SERVICE_NAME)
_backends = build_backends(_settings)
_facility_cache = FacilityCache(store=build_cache_store(_settings), ttl_seconds=_settings.FACILITY_CACHE_TTL_SECONDS)
_directory_service = DirectoryService(_backends.facilities, _facility_cache, base_url=_settings.SITE_BASE_URL)
_waitlist_service = WaitlistService(_backends.waitlist)
logger.info("store_backend_selected", extra={"component": "api", "backend": _backends.name})


def get_settings() -> ServiceSettings:
    return _settings


def get_facility_cache() -> FacilityCache:
    return _facility_cache


def get_directory_service() -> DirectoryService:
    return _directory_service


def get_waitlist_service() -> WaitlistService:
    return _waitlist_service


async def close_backends() -> None:
    await _backends.facilities.close()
    if _backends.waitlist is not None:
        await _backends.waitlist.close()
    await _facility_cache.store.close()


def describe_backends() -> dict[str, str]:
    return {
        "store": _backends.name,
        "waitlist": "enabled" if _backends.waitlist is not None else "disabled",
        "cache": "redis" if isinstance(_facility_cache.store, RedisCacheStore) else "memory",
    }
