from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncRedisManager:
    """Lazily connected ``redis.asyncio`` client for the cache commands we use.

    Each command pings on first use, and on failure drops the client, waits
    with exponential backoff and retries on a fresh connection.
    """

    def __init__(
        self,
        url: str,
        *,
        max_retries: int = 3,
        base_delay_seconds: float = 0.2,
        client_factory: Callable[[str], Any] | None = None,
    ) -> None:
        self._url = url
        self._max_retries = max_retries
        self._base_delay_seconds = base_delay_seconds
        self._client_factory = client_factory or _redis_from_url
        self._client: Any | None = None
        self._lock = asyncio.Lock()

    async def _connected_client(self) -> Any:
        async with self._lock:
            if self._client is None:
                client = self._client_factory(self._url)
                await client.ping()
                self._client = client
            return self._client

    async def _drop_client(self) -> None:
        async with self._lock:
            client, self._client = self._client, None
        if client is None:
            return
        try:
            await client.close()
        except Exception:
            logger.debug("redis_close_failed", extra={"component": "redis"}, exc_info=True)

    async def _execute(self, operation: str, call: Callable[[Any], Awaitable[T]]) -> T:
        attempt = 0
        while True:
            try:
                client = await self._connected_client()
                return await call(client)
            except Exception:
                attempt += 1
                if attempt >= self._max_retries:
                    raise
                logger.warning(
                    "redis_command_retry",
                    extra={"component": "redis", "operation": operation, "attempt": attempt},
                )
                await self._drop_client()
                await asyncio.sleep(self._base_delay_seconds * (2 ** (attempt - 1)))

    async def get(self, key: str) -> str | None:
        return await self._execute("get", lambda client: client.get(key))

    async def setex(self, key: str, seconds: int, value: str) -> bool:
        return await self._execute("setex", lambda client: client.setex(key, seconds, value))

    async def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        return await self._execute("delete", lambda client: client.delete(*keys))

    async def scan_keys(self, match: str) -> list[str]:
        """All keys matching ``match``, collected with SCAN rather than KEYS."""

        async def _scan(client: Any) -> list[str]:
            return [key async for key in client.scan_iter(match=match, count=500)]

        return await self._execute("scan", _scan)

    async def close(self) -> None:
        await self._drop_client()


def _redis_from_url(url: str) -> Any:
    import redis.asyncio as redis

    return redis.from_url(
        url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
        health_check_interval=30,
    )


def create_redis_client(url: str | None) -> AsyncRedisManager | None:
    if not url:
        return None
    return AsyncRedisManager(url)
