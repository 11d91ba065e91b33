"""Prometheus metrics for Scorekeeper.

Tracks record store operations: outcomes, latencies and retries.
"""

from prometheus_client import Counter, Histogram

STORE_OPERATIONS = Counter(
    "scorekeeper_store_operations_total",
    "Total number of record store operations",
    labelnames=["backend", "operation", "outcome"],
)

STORE_OPERATION_LATENCY = Histogram(
    "scorekeeper_store_operation_latency_seconds",
    "Record store operation latency in seconds",
    labelnames=["backend", "operation"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

STORE_RETRIES = Counter(
    "scorekeeper_store_retries_total",
    "Total number of read retries after transient backend errors",
    labelnames=["backend", "operation"],
)
