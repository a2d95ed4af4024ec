"""Prometheus metrics."""

from prometheus_client import Counter, Histogram

queries_total = Counter(
    "prometheus_queries_total",
    "Total number of requests issued to the Prometheus HTTP API",
    ["endpoint", "outcome"],
)

query_duration_seconds = Histogram(
    "prometheus_query_duration_seconds",
    "Duration of Prometheus HTTP API requests in seconds",
    ["endpoint"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30],
)

fetch_cycles_total = Counter(
    "fetch_cycles_total",
    "Total number of fetch-all cycles completed",
)

failed_entries_total = Counter(
    "fetch_cycle_failed_entries_total",
    "Total number of catalogue queries that resolved as failed",
    ["error_code"],
)
