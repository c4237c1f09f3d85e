from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import uuid4

from devkit.db import AsyncDatabaseManager, Base, create_all_tables, is_unique_violation
from devkit.timezone import now_uk
from directory_engine.models import Facility, FacilityCategory
from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text, func, select
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Mapped, mapped_column

from directory_api.repositories.base import DuplicateSignupError


class FacilityORM(Base):
    __tablename__ = "facilities"

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True, default=lambda: str(uuid4()))
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    facility_type: Mapped[str] = mapped_column(String(32), index=True, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False, default="")
    city: Mapped[str] = mapped_column(String(128), nullable=False)
    county: Mapped[str] = mapped_column(String(128), index=True, nullable=False)
    postcode: Mapped[str] = mapped_column(String(16), nullable=False, default="")
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    website: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    opening_hours: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)
    amenities: Mapped[list[str]] = mapped_column(ARRAY(Text), nullable=False, default=list)
    images: Mapped[list[str]] = mapped_column(ARRAY(Text), nullable=False, default=list)
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    price_range: Mapped[str | None] = mapped_column(String(16), nullable=True)
    verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())


class WaitlistORM(Base):
    __tablename__ = "waitlist"

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True, default=lambda: str(uuid4()))
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    source: Mapped[str] = mapped_column(String(64), nullable=False)
    # "metadata" is reserved on declarative classes.
    metadata_json: Mapped[dict[str, Any]] = mapped_column("metadata", JSONB, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=now_uk)


def _facility_from_orm(row: FacilityORM) -> Facility:
    return Facility.from_row(
        {
            "id": row.id,
            "name": row.name,
            "facility_type": row.facility_type,
            "city": row.city,
            "county": row.county,
            "address": row.address,
            "postcode": row.postcode,
            "description": row.description,
            "phone": row.phone,
            "email": row.email,
            "website": row.website,
            "latitude": row.latitude,
            "longitude": row.longitude,
            "opening_hours": row.opening_hours,
            "amenities": row.amenities,
            "images": row.images,
            "rating": row.rating,
            "review_count": row.review_count,
            "price_range": row.price_range,
            "verified": row.verified,
            "featured": row.featured,
            "updated_at": row.updated_at,
        }
    )


class _OrmStore:
    def __init__(self, db: AsyncDatabaseManager) -> None:
        self._db = db
        self._orm_ready = False

    async def _ensure_orm_ready(self) -> None:
        if self._orm_ready:
            return
        await self._db.connect()
        await create_all_tables(self._db.engine, Base.metadata)
        self._orm_ready = True

    async def close(self) -> None:
        await self._db.disconnect()


class PostgresFacilityRepository(_OrmStore):
    async def list_by_category(self, category: FacilityCategory) -> list[Facility]:
        await self._ensure_orm_ready()

        async def _run(session):
            query = (
                select(FacilityORM)
                .where(FacilityORM.facility_type == category.value)
                .order_by(FacilityORM.name, FacilityORM.id)
            )
            return [_facility_from_orm(row) for row in (await session.scalars(query)).all()]

        return await self._db.run_with_session(_run)

    async def list_nearby(
        self,
        *,
        category: FacilityCategory,
        county: str,
        exclude_id: str,
        limit: int = 3,
    ) -> list[Facility]:
        await self._ensure_orm_ready()

        async def _run(session):
            query = (
                select(FacilityORM)
                .where(
                    FacilityORM.facility_type == category.value,
                    FacilityORM.county == county,
                    FacilityORM.id != exclude_id,
                )
                .order_by(FacilityORM.rating.desc().nulls_last(), FacilityORM.id)
                .limit(limit)
            )
            return [_facility_from_orm(row) for row in (await session.scalars(query)).all()]

        return await self._db.run_with_session(_run)


class PostgresWaitlistRepository(_OrmStore):
    async def add_signup(self, *, email: str, source: str, metadata: dict[str, Any]) -> dict[str, Any]:
        await self._ensure_orm_ready()

        async def _run(session):
            row = WaitlistORM(email=email, source=source, metadata_json=dict(metadata))
            session.add(row)
            await session.flush()
            return {
                "id": row.id,
                "email": row.email,
                "source": row.source,
                "metadata": row.metadata_json,
                "created_at": row.created_at.isoformat(),
            }

        try:
            return await self._db.run_with_session(_run)
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise DuplicateSignupError(email) from exc
            raise
