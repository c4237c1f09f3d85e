from __future__ import annotations

from directory_engine.sitemap import render_sitemap_xml
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from directory_api.dependencies import get_directory_service
from directory_api.services.directory_service import DirectoryService

router = APIRouter(tags=["sitemap"])


@router.get("/sitemap.xml", response_class=Response)
async def sitemap_xml(service: DirectoryService = Depends(get_directory_service)) -> Response:
    entries = await service.sitemap()
    return Response(content=render_sitemap_xml(entries), media_type="application/xml")
