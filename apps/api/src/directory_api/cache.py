from __future__ import annotations

import json
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from directory_engine.models import FacilityCategory

FACILITIES_PREFIX = "facilities:"
DELETE_BATCH_SIZE = 500


def category_cache_key(category: FacilityCategory) -> str:
    return f"{FACILITIES_PREFIX}category:{category.value}"


class CacheStore(ABC):
    @abstractmethod
    async def get(self, key: str) -> dict[str, Any] | None:
        raise NotImplementedError

    @abstractmethod
    async def set(self, key: str, value: dict[str, Any], ttl_seconds: int) -> None:
        raise NotImplementedError

    @abstractmethod
    async def invalidate_prefix(self, prefix: str) -> int:
        raise NotImplementedError

    async def close(self) -> None:
        return None


class RedisLikeCacheClient(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def setex(self, key: str, seconds: int, value: str) -> bool: ...

    async def scan_keys(self, match: str) -> list[str]: ...

    async def delete(self, *keys: str) -> int: ...

    async def close(self) -> None: ...


class InMemoryCacheStore(CacheStore):
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._items: dict[str, tuple[float, dict[str, Any]]] = {}

    async def get(self, key: str) -> dict[str, Any] | None:
        item = self._items.get(key)
        if not item:
            return None
        expires_at, value = item
        if expires_at <= self._clock():
            self._items.pop(key, None)
            return None
        return value

    async def set(self, key: str, value: dict[str, Any], ttl_seconds: int) -> None:
        self._items[key] = (self._clock() + ttl_seconds, value)

    async def invalidate_prefix(self, prefix: str) -> int:
        keys = [key for key in self._items if key.startswith(prefix)]
        for key in keys:
            self._items.pop(key, None)
        return len(keys)


class RedisCacheStore(CacheStore):
    def __init__(self, client: RedisLikeCacheClient) -> None:
        self._client = client

    async def get(self, key: str) -> dict[str, Any] | None:
        raw = await self._client.get(key)
        if not raw:
            return None
        return json.loads(raw)

    async def set(self, key: str, value: dict[str, Any], ttl_seconds: int) -> None:
        payload = json.dumps(value, ensure_ascii=False, default=str)
        await self._client.setex(key, ttl_seconds, payload)

    async def invalidate_prefix(self, prefix: str) -> int:
        keys = await self._client.scan_keys(f"{prefix}*")
        removed = 0
        for start in range(0, len(keys), DELETE_BATCH_SIZE):
            removed += await self._client.delete(*keys[start : start + DELETE_BATCH_SIZE])
        return removed

    async def close(self) -> None:
        await self._client.close()


@dataclass
class FacilityCache:
    """Read-through cache for a category's facility rows.

    Entries are ``{"rows": [...]}`` under ``facilities:category:<category>``
    and live for ``ttl_seconds``. Nothing invalidates them automatically.
    """

    store: CacheStore
    ttl_seconds: int = 300

    async def get(self, key: str) -> dict[str, Any] | None:
        return await self.store.get(key)

    async def set(self, key: str, value: dict[str, Any]) -> None:
        await self.store.set(key, value, self.ttl_seconds)

    async def get_rows(self, category: FacilityCategory) -> list[dict[str, Any]] | None:
        cached = await self.get(category_cache_key(category))
        if cached is None:
            return None
        return list(cached.get("rows", []))

    async def set_rows(self, category: FacilityCategory, rows: list[dict[str, Any]]) -> None:
        await self.set(category_cache_key(category), {"rows": rows})

    async def invalidate_category(self, category: FacilityCategory) -> int:
        return await self.store.invalidate_prefix(category_cache_key(category))

    async def invalidate_facilities(self) -> int:
        return await self.store.invalidate_prefix(FACILITIES_PREFIX)
