import pytest

from devkit.config import ServiceSettings
from directory_api.cache import InMemoryCacheStore, RedisCacheStore
from directory_api.dependencies import build_backends, build_cache_store, resolve_backend_name
from directory_api.repositories.memory import InMemoryFacilityRepository
from directory_api.repositories.postgres import PostgresFacilityRepository, PostgresWaitlistRepository


def _settings(**values) -> ServiceSettings:
    defaults = {
        "DATABASE_URL": None,
        "REDIS_URL": None,
        "SUPABASE_URL": None,
        "SUPABASE_SERVICE_ROLE_KEY": None,
        "DIRECTORY_STORE_BACKEND": "auto",
    }
    defaults.update(values)
    return ServiceSettings(**defaults)


def test_auto_backend_selection_order() -> None:
    assert resolve_backend_name(_settings()) == "memory"
    assert resolve_backend_name(_settings(DATABASE_URL="postgresql://db/directory")) == "postgres"
    assert (
        resolve_backend_name(
            _settings(
                DATABASE_URL="postgresql://db/directory",
                SUPABASE_URL="https://project.supabase.co",
                SUPABASE_SERVICE_ROLE_KEY="service-key",
            )
        )
        == "supabase"
    )
    assert resolve_backend_name(_settings(SUPABASE_URL="https://project.supabase.co")) == "memory"


def test_explicit_backend_and_unknown_backend() -> None:
    assert resolve_backend_name(_settings(DIRECTORY_STORE_BACKEND="Memory")) == "memory"
    with pytest.raises(RuntimeError):
        resolve_backend_name(_settings(DIRECTORY_STORE_BACKEND="mongo"))


def test_memory_backend_has_no_waitlist_store() -> None:
    backends = build_backends(_settings())

    assert isinstance(backends.facilities, InMemoryFacilityRepository)
    assert backends.waitlist is None


def test_postgres_backend_is_built_lazily() -> None:
    backends = build_backends(_settings(DATABASE_URL="postgresql://user:pw@localhost/directory"))

    assert backends.name == "postgres"
    assert isinstance(backends.facilities, PostgresFacilityRepository)
    assert isinstance(backends.waitlist, PostgresWaitlistRepository)


def test_explicit_postgres_without_dsn_fails() -> None:
    with pytest.raises(RuntimeError):
        build_backends(_settings(DIRECTORY_STORE_BACKEND="postgres"))


def test_cache_store_follows_redis_url() -> None:
    assert isinstance(build_cache_store(_settings()), InMemoryCacheStore)
    assert isinstance(build_cache_store(_settings(REDIS_URL="redis://localhost:6379/0")), RedisCacheStore)
