"""Prometheus metrics for the Reputation Gateway service.

Metrics are organized into two categories:

Business Metrics (for Product/Finance):
- reputation_loan_quote_total: Quotes by outcome
- reputation_quote_amount_dollars: Quoted purchase amounts
- reputation_tier_total: Snapshots served by tier

Technical Metrics (for Engineering/SRE):
- reputation_lookup_total: Reputation reads by the layer that answered
- reputation_cache_write_failures_total: Failed hot/warm cache writes
- reputation_read_path_failures_total: Read path errors absorbed by fallback
- reputation_oracle_fetch_latency_seconds: Oracle call latency
- reputation_oracle_fetch_failures_total: Oracle failures
- reputation_oracle_coalesced_total: Oracle calls shared by concurrent readers
- reputation_quote_latency_seconds: Quote computation latency
- reputation_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product/Finance dashboards)
# =============================================================================

loan_quote_total = Counter(
    "reputation_loan_quote_total",
    "Total number of loan quotes requested",
    ["outcome"],  # quoted, exceeds_credit, merchant_not_found, merchant_inactive
)

quote_amount = Histogram(
    "reputation_quote_amount_dollars",
    "Purchase amount of successful quotes in dollars",
    buckets=[50, 100, 250, 500, 1000, 1500, 3000, 5000, 10000],
)

tier_total = Counter(
    "reputation_tier_total",
    "Reputation snapshots served by tier",
    ["tier"],
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

lookup_total = Counter(
    "reputation_lookup_total",
    "Reputation reads by the layer that answered",
    ["source"],  # hot, warm, oracle, fallback
)

cache_write_failures = Counter(
    "reputation_cache_write_failures_total",
    "Failed reputation cache writes",
    ["layer"],  # hot, warm
)

read_path_failures = Counter(
    "reputation_read_path_failures_total",
    "Unexpected read path errors absorbed by the oracle fallback",
)

oracle_fetch_latency = Histogram(
    "reputation_oracle_fetch_latency_seconds",
    "Scoring oracle fetch latency in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

oracle_fetch_failures = Counter(
    "reputation_oracle_fetch_failures_total",
    "Total number of scoring oracle failures",
    ["error_type"],  # timeout, error, invalid_response
)

oracle_fetch_total = Counter(
    "reputation_oracle_fetch_total",
    "Total number of scoring oracle requests",
    ["status"],  # success, failure
)

oracle_coalesced = Counter(
    "reputation_oracle_coalesced_total",
    "Reads that awaited an oracle call already in flight for the same wallet",
)

quote_latency = Histogram(
    "reputation_quote_latency_seconds",
    "Loan quote request latency in seconds",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

http_requests_total = Counter(
    "reputation_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "reputation_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_lookup(source: str, tier: str) -> None:
    """Record which layer answered a reputation read."""
    lookup_total.labels(source=source).inc()
    tier_total.labels(tier=tier).inc()


def record_cache_write_failure(layer: str) -> None:
    """Record a failed hot or warm cache write."""
    cache_write_failures.labels(layer=layer).inc()


def record_read_path_failure() -> None:
    """Record a read path error that forced the oracle fallback."""
    read_path_failures.inc()


def record_oracle_fetch_success() -> None:
    """Record a successful oracle fetch."""
    oracle_fetch_total.labels(status="success").inc()


def record_oracle_fetch_failure(error_type: str) -> None:
    """Record an oracle fetch failure."""
    oracle_fetch_total.labels(status="failure").inc()
    oracle_fetch_failures.labels(error_type=error_type).inc()


def record_oracle_coalesced() -> None:
    """Record a read that joined an in-flight oracle call."""
    oracle_coalesced.inc()


def record_quote(outcome: str, amount: float | None = None) -> None:
    """Record a loan quote outcome."""
    loan_quote_total.labels(outcome=outcome).inc()
    if amount is not None:
        quote_amount.observe(amount)


@contextmanager
def track_oracle_fetch_latency() -> Generator[None, None, None]:
    """Context manager to track oracle fetch latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        oracle_fetch_latency.observe(duration)


@contextmanager
def track_quote_latency() -> Generator[None, None, None]:
    """Context manager to track loan quote latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        quote_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
