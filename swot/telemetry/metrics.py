"""Prometheus metrics definitions."""

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest

http_request_duration = Histogram(
    "http_request_duration_seconds",
    "Duration of HTTP requests in seconds",
    labelnames=["method", "endpoint", "status_code"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_requests_total = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    labelnames=["method", "endpoint", "status_code"],
)

store_errors = Counter(
    "swot_store_errors_total",
    "Key-value store failures recovered by the repository",
    labelnames=["operation"],
)

imports_total = Counter(
    "swot_imports_total",
    "Import attempts by outcome",
    labelnames=["outcome"],
)

exports_total = Counter(
    "swot_exports_total",
    "Export attempts by format and outcome",
    labelnames=["format", "outcome"],
)

items_recorded = Gauge(
    "swot_items",
    "Items currently recorded, per category",
    labelnames=["category"],
)

analysis_findings = Gauge(
    "swot_analysis_findings",
    "Findings in the displayed analysis; 0 while it is hidden",
)


def get_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST
