from __future__ import annotations


def configure_telemetry(service_name: str, log_level: str = "INFO") -> None:
    from devkit.observability import configure_logging, configure_otel, configure_probe_access_log_filter

    configure_logging(log_level)
    configure_otel(service_name)
    configure_probe_access_log_filter()
