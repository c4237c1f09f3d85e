from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from directory_api.dependencies import SERVICE_NAME, close_backends, describe_backends, get_settings
from directory_api.errors import ApiError
from directory_api.middleware import ObservabilityMiddleware
from directory_api.observability import RequestMetrics
from directory_api.response import error_response, success_response
from directory_api.routers.directory import router as directory_router
from directory_api.routers.sitemap import router as sitemap_router
from directory_api.routers.waitlist import router as waitlist_router
from directory_api.telemetry import configure_telemetry


def create_app() -> FastAPI:
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await close_backends()

    app = FastAPI(title="Sauna & Cold Directory API", version="0.1.0", lifespan=lifespan)
    configure_telemetry(service_name=SERVICE_NAME, log_level=settings.LOG_LEVEL)
    app.state.request_metrics = RequestMetrics()
    app.add_middleware(ObservabilityMiddleware, metrics=app.state.request_metrics, service_name=SERVICE_NAME)

    @app.get("/healthz")
    async def healthz() -> dict:
        return success_response({"status": "ok"}, meta={})

    @app.get("/readyz")
    async def readyz() -> dict:
        return success_response({"status": "ready", **describe_backends()}, meta={})

    @app.get("/metrics")
    async def metrics() -> Response:
        payload = app.state.request_metrics.render()
        return Response(content=payload, media_type="text/plain; version=0.0.4")

    app.include_router(waitlist_router)
    app.include_router(sitemap_router)
    app.include_router(directory_router)

    @app.exception_handler(ApiError)
    async def handle_api_error(_: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=error_response(exc.code, exc.message))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        message = "; ".join(err["msg"] for err in exc.errors())
        return JSONResponse(
            status_code=422,
            content=error_response("VALIDATION_ERROR", message),
        )

    return app


app = create_app()
