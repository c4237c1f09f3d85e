from __future__ import annotations

import logging

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider

DEFAULT_PROBE_PATHS: tuple[str, ...] = ("/healthz", "/readyz", "/metrics")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_RECORD_ATTRIBUTES = frozenset(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {"message", "asctime"}
_configured: set[str] = set()


class EventFieldsFormatter(logging.Formatter):
    """Appends ``extra={...}`` fields as sorted ``key=value`` pairs.

    Messages are event names (``facility_fetch_failed``) and the context lives
    in the extras, so the plain format alone would drop it.
    """

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = {key: value for key, value in record.__dict__.items() if key not in _RECORD_ATTRIBUTES}
        if not fields:
            return line
        return line + " " + " ".join(f"{key}={fields[key]}" for key in sorted(fields))


class ProbeAccessLogFilter(logging.Filter):
    """Drops successful uvicorn access-log lines for probe and scrape endpoints."""

    def __init__(self, ignored_paths: tuple[str, ...] = DEFAULT_PROBE_PATHS) -> None:
        super().__init__()
        self._ignored_paths = frozenset(_strip_path(path) for path in ignored_paths)

    def filter(self, record: logging.LogRecord) -> bool:
        # uvicorn access args: (client_addr, method, full_path, http_version, status_code)
        args = record.args
        if not isinstance(args, tuple) or len(args) < 5 or not isinstance(args[2], str):
            return True
        if str(args[4]) != "200":
            return True
        return _strip_path(args[2]) not in self._ignored_paths


def _strip_path(path: str) -> str:
    base = path.split("?", 1)[0]
    return base.rstrip("/") or "/"


def configure_logging(level: str = "INFO") -> None:
    if "logging" in _configured:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(EventFieldsFormatter(LOG_FORMAT))
    logging.basicConfig(level=level.upper(), handlers=[handler])
    _configured.add("logging")


def configure_otel(service_name: str) -> None:
    if "otel" in _configured:
        return
    trace.set_tracer_provider(TracerProvider(resource=Resource.create({"service.name": service_name})))
    _configured.add("otel")


def configure_probe_access_log_filter(ignored_paths: tuple[str, ...] = DEFAULT_PROBE_PATHS) -> None:
    if "probe_filter" in _configured:
        return
    logging.getLogger("uvicorn.access").addFilter(ProbeAccessLogFilter(ignored_paths))
    _configured.add("probe_filter")
