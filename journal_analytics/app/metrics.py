from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "journal_analytics_requests_total",
    "Total HTTP requests processed by the analytics service",
    ("method", "path", "status"),
)

REQUEST_LATENCY = Histogram(
    "journal_analytics_request_latency_seconds",
    "HTTP request latency in seconds",
    ("method", "path"),
)

REQUEST_ERRORS = Counter(
    "journal_analytics_request_errors_total",
    "HTTP requests resulting in server errors",
    ("method", "path", "status"),
)

REPORTS_COMPUTED = Counter(
    "journal_analytics_reports_total",
    "Analytics reports computed",
    ("window",),
)

REPORT_ENTRIES = Histogram(
    "journal_analytics_report_entries",
    "Entries inside the analytics window per computed report",
    buckets=(0, 1, 7, 30, 90, 365, 1000, 5000, 10000),
)

__all__ = [
    "REPORTS_COMPUTED",
    "REPORT_ENTRIES",
    "REQUEST_COUNT",
    "REQUEST_ERRORS",
    "REQUEST_LATENCY",
]
