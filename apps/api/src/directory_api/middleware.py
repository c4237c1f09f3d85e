from __future__ import annotations

import logging
from time import perf_counter
from uuid import uuid4

from opentelemetry import trace
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from directory_api.observability import RequestMetrics, RequestSample

logger = logging.getLogger(__name__)

UNMATCHED_ROUTE = "<unmatched>"


def route_template(request: Request) -> str:
    # Label by template so slugs do not explode metric cardinality.
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path if isinstance(path, str) else UNMATCHED_ROUTE


class ObservabilityMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, metrics: RequestMetrics, service_name: str = "directory-api") -> None:
        super().__init__(app)
        self._metrics = metrics
        self._tracer = trace.get_tracer(service_name)

    def _observe(self, request: Request, status_code: int, started: float, trace_id: str) -> None:
        self._metrics.observe(
            RequestSample(
                method=request.method,
                route=route_template(request),
                status_code=status_code,
                duration_ms=(perf_counter() - started) * 1000.0,
                trace_id=trace_id,
            )
        )

    async def dispatch(self, request: Request, call_next) -> Response:
        trace_id = request.headers.get("x-trace-id") or str(uuid4())
        started = perf_counter()
        with self._tracer.start_as_current_span("http.request") as span:
            span.set_attribute("http.method", request.method)
            span.set_attribute("http.target", request.url.path)
            span.set_attribute("trace.id", trace_id)
            try:
                response = await call_next(request)
            except Exception:
                logger.exception(
                    "request_failed",
                    extra={"component": "api", "path": request.url.path, "trace_id": trace_id},
                )
                self._observe(request, 500, started, trace_id)
                span.set_attribute("http.status_code", 500)
                raise
            span.set_attribute("http.route", route_template(request))
            span.set_attribute("http.status_code", response.status_code)

        response.headers["x-trace-id"] = trace_id
        self._observe(request, response.status_code, started, trace_id)
        return response
