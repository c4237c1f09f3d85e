from __future__ import annotations

from directory_engine.models import FacilityCategory
from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from directory_api.dependencies import get_directory_service
from directory_api.errors import ApiError
from directory_api.response import success_response
from directory_api.services.directory_service import DirectoryService


def _add_category_routes(router: APIRouter, category: FacilityCategory) -> None:
    prefix = f"/{category.path}"
    label = category.label

    async def index_page(service: DirectoryService = Depends(get_directory_service)) -> dict:
        return success_response(await service.index_page(category), meta={})

    async def region_page(region: str, service: DirectoryService = Depends(get_directory_service)) -> dict:
        page = await service.region_page(category, region)
        if page is None:
            raise ApiError.not_found(f"No {category.plural_label.lower()} found in '{region}'")
        return success_response(page, meta={"total": page["total"]})

    async def city_page(region: str, city: str, service: DirectoryService = Depends(get_directory_service)) -> dict:
        page = await service.city_page(category, region, city)
        if page is None:
            raise ApiError.not_found(f"No {category.plural_label.lower()} found in '{city}'")
        return success_response(page, meta={"total": page["total"]})

    async def facility_page(
        region: str,
        city: str,
        facility: str,
        service: DirectoryService = Depends(get_directory_service),
    ) -> dict:
        page = await service.facility_page(category, region, city, facility)
        if page is None:
            raise ApiError.not_found(f"{label} not found")
        return success_response(page, meta={})

    async def legacy_redirect(slug: str, service: DirectoryService = Depends(get_directory_service)) -> RedirectResponse:
        target = await service.legacy_redirect(category, slug)
        if target is None:
            raise ApiError.not_found(f"{label} not found")
        return RedirectResponse(url=target, status_code=301)

    name = category.value
    router.add_api_route(prefix, index_page, methods=["GET"], name=f"{name}_index")
    router.add_api_route(f"{prefix}/{{region}}", region_page, methods=["GET"], name=f"{name}_region")
    router.add_api_route(f"{prefix}/{{region}}/{{city}}", city_page, methods=["GET"], name=f"{name}_city")
    router.add_api_route(
        f"{prefix}/{{region}}/{{city}}/{{facility}}",
        facility_page,
        methods=["GET"],
        name=f"{name}_detail",
    )
    router.add_api_route(
        f"/{category.legacy_path}/{{slug}}",
        legacy_redirect,
        methods=["GET"],
        name=f"{name}_legacy_redirect",
        response_class=RedirectResponse,
    )


def build_directory_router(categories: tuple[FacilityCategory, ...] = tuple(FacilityCategory)) -> APIRouter:
    router = APIRouter(tags=["directory"])
    for category in categories:
        _add_category_routes(router, category)
    return router


router = build_directory_router()
