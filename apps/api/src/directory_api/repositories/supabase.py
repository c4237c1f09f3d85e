from __future__ import annotations

import asyncio
from typing import Any

from devkit.db import UNIQUE_VIOLATION_SQLSTATE
from directory_engine.listings import sort_by_rating
from directory_engine.models import Facility, FacilityCategory
from postgrest.exceptions import APIError
from supabase import Client, create_client

from directory_api.repositories.base import DuplicateSignupError

_PAGE_SIZE = 1000


def create_supabase_client(url: str, service_role_key: str) -> Client:
    return create_client(url, service_role_key)


class SupabaseFacilityRepository:
    """Reads the ``facilities`` table through the Supabase REST API.

    supabase-py's client is synchronous, so calls run in a worker thread.
    """

    def __init__(self, client: Client, page_size: int = _PAGE_SIZE) -> None:
        self._client = client
        self._page_size = page_size

    def _fetch_category(self, category: FacilityCategory) -> list[dict[str, Any]]:
        rows: list[dict[str, Any]] = []
        start = 0
        while True:
            result = (
                self._client.table("facilities")
                .select("*")
                .eq("facility_type", category.value)
                .order("id")
                .range(start, start + self._page_size - 1)
                .execute()
            )
            batch = result.data or []
            rows.extend(batch)
            if len(batch) < self._page_size:
                return rows
            start += self._page_size

    def _fetch_county(self, category: FacilityCategory, county: str, exclude_id: str) -> list[dict[str, Any]]:
        result = (
            self._client.table("facilities")
            .select("*")
            .eq("facility_type", category.value)
            .eq("county", county)
            .neq("id", exclude_id)
            .execute()
        )
        return result.data or []

    async def list_by_category(self, category: FacilityCategory) -> list[Facility]:
        rows = await asyncio.to_thread(self._fetch_category, category)
        return [Facility.from_row(row) for row in rows]

    async def list_nearby(
        self,
        *,
        category: FacilityCategory,
        county: str,
        exclude_id: str,
        limit: int = 3,
    ) -> list[Facility]:
        # Sorted here so unrated rows go last; PostgREST puts NULLs first on desc.
        rows = await asyncio.to_thread(self._fetch_county, category, county, exclude_id)
        return sort_by_rating([Facility.from_row(row) for row in rows])[:limit]

    async def close(self) -> None:
        return None


class SupabaseWaitlistRepository:
    def __init__(self, client: Client) -> None:
        self._client = client

    def _insert(self, row: dict[str, Any]) -> dict[str, Any]:
        result = self._client.table("waitlist").insert(row).execute()
        return result.data[0] if result.data else dict(row)

    async def add_signup(self, *, email: str, source: str, metadata: dict[str, Any]) -> dict[str, Any]:
        row = {"email": email, "source": source, "metadata": metadata}
        try:
            return await asyncio.to_thread(self._insert, row)
        except APIError as exc:
            if exc.code == UNIQUE_VIOLATION_SQLSTATE:
                raise DuplicateSignupError(email) from exc
            raise

    async def close(self) -> None:
        return None
