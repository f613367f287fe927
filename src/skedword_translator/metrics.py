from __future__ import annotations

from prometheus_client import Counter, Histogram, start_http_server

server_requests_total = Counter(
    "skedword_server_requests_total",
    "Total HTTP requests handled by server",
    labelnames=["path", "status"],
)

translation_requests_total = Counter(
    "skedword_translation_requests_total",
    "Translation calls by outcome",
    labelnames=["outcome"],
)

translation_request_latency_seconds = Histogram(
    "skedword_translation_request_latency_seconds",
    "End-to-end latency of a translation call",
    buckets=[0.1, 0.3, 0.5, 1, 2, 5, 10, 30, 60],
)

upstream_requests_total = Counter(
    "skedword_upstream_requests_total",
    "Completion endpoint round-trips by HTTP status",
    labelnames=["status"],
)


def maybe_start_metrics(*, enable: bool, bind: str, port: int) -> None:
    if not enable:
        return
    start_http_server(port, addr=bind)
