from __future__ import annotations

from typing import Any, Protocol

from directory_engine.models import Facility, FacilityCategory


class DuplicateSignupError(Exception):
    """The email is already on the waitlist (unique violation ``23505``)."""


class FacilityRepository(Protocol):
    async def list_by_category(self, category: FacilityCategory) -> list[Facility]: ...

    async def list_nearby(
        self,
        *,
        category: FacilityCategory,
        county: str,
        exclude_id: str,
        limit: int = 3,
    ) -> list[Facility]: ...

    async def close(self) -> None: ...


class WaitlistRepository(Protocol):
    async def add_signup(self, *, email: str, source: str, metadata: dict[str, Any]) -> dict[str, Any]: ...

    async def close(self) -> None: ...
