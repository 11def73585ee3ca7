# src/libs/price-common/price_common/monitoring.py
from prometheus_client import Counter, Histogram

# --------------------------------------------------------------------------------------
# DB metrics (used by price_common.utils.async_timed)
# --------------------------------------------------------------------------------------
DB_OPERATION_LATENCY_SECONDS = Histogram(
    "db_operation_latency_seconds",
    "Latency of database operations in seconds",
    labelnames=("repository", "method"),
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)

# --------------------------------------------------------------------------------------
# HTTP metrics
# --------------------------------------------------------------------------------------
HTTP_REQUESTS_TOTAL = Counter(
    "price_http_requests_total",
    "HTTP requests total",
    labelnames=("service", "method", "path", "status"),
)

HTTP_REQUEST_LATENCY_SECONDS = Histogram(
    "price_http_request_latency_seconds",
    "HTTP request latency in seconds",
    labelnames=("service", "method", "path"),
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)

# --------------------------------------------------------------------------------------
# Price resolution metrics
# --------------------------------------------------------------------------------------
PRICE_RESOLUTIONS_TOTAL = Counter(
    "price_resolutions_total",
    "Number of price resolutions, by outcome (found / not_found).",
    labelnames=("outcome",),
)

def observe_price_resolution(outcome: str) -> None:
    PRICE_RESOLUTIONS_TOTAL.labels(outcome).inc()
