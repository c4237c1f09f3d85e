from __future__ import annotations

from collections import deque
from dataclasses import asdict, dataclass

from directory_engine.models import FacilityCategory
from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

LATENCY_BUCKETS_MS = (5, 10, 25, 50, 100, 250, 500, 1000, 3000)


@dataclass(frozen=True)
class RequestSample:
    method: str
    route: str
    status_code: int
    duration_ms: float
    trace_id: str

    @property
    def page(self) -> str:
        """Directory section the route belongs to, e.g. ``saunas`` or ``api``."""
        first = self.route.strip("/").split("/", 1)[0]
        if FacilityCategory.from_path(first) is not None:
            return first
        if any(category.legacy_path == first for category in FacilityCategory):
            return "legacy"
        return first or "root"


class RequestMetrics:
    """Recent request samples for debugging plus the prometheus series.

    Routes are always templates (``/saunas/{region}``), never concrete slugs.
    """

    def __init__(self, max_samples: int = 1000) -> None:
        self._samples: deque[RequestSample] = deque(maxlen=max_samples)
        self._registry = CollectorRegistry()
        self._requests = Counter(
            "directory_http_requests_total",
            "Directory API HTTP requests",
            labelnames=("method", "route", "page", "status_code"),
            registry=self._registry,
        )
        self._latency = Histogram(
            "directory_http_request_duration_ms",
            "Directory API HTTP request latency in milliseconds",
            labelnames=("method", "page"),
            buckets=LATENCY_BUCKETS_MS,
            registry=self._registry,
        )

    def observe(self, sample: RequestSample) -> None:
        self._samples.append(sample)
        self._requests.labels(sample.method, sample.route, sample.page, str(sample.status_code)).inc()
        self._latency.labels(sample.method, sample.page).observe(sample.duration_ms)

    def recent(self, route: str | None = None) -> list[dict]:
        return [
            {**asdict(sample), "page": sample.page}
            for sample in self._samples
            if route is None or sample.route == route
        ]

    def render(self) -> str:
        return generate_latest(self._registry).decode("utf-8")
