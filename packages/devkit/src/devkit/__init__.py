"""Common runtime devkit for service infrastructure concerns."""

from devkit.config import ServiceSettings, load_settings
from devkit.db import (
    AsyncDatabaseManager,
    Base,
    create_all_tables,
    create_async_engine,
    is_transient_db_error,
    is_unique_violation,
    normalize_postgres_dsn,
)
from devkit.observability import configure_logging, configure_otel, configure_probe_access_log_filter
from devkit.redis import AsyncRedisManager, create_redis_client
from devkit.timezone import configure_uk_timezone, now_uk, now_uk_iso

__all__ = [
    "AsyncDatabaseManager",
    "AsyncRedisManager",
    "Base",
    "ServiceSettings",
    "configure_logging",
    "configure_otel",
    "configure_probe_access_log_filter",
    "configure_uk_timezone",
    "create_all_tables",
    "create_async_engine",
    "create_redis_client",
    "is_transient_db_error",
    "is_unique_violation",
    "load_settings",
    "normalize_postgres_dsn",
    "now_uk",
    "now_uk_iso",
]
