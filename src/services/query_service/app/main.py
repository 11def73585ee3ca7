# src/services/query_service/app/main.py
import logging
import time
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from price_common.config import SERVICE_NAME, log_database_credentials_source
from price_common.db import async_engine
from price_common.health import create_health_router
from price_common.logging_utils import (
    NOT_SET,
    correlation_id_var,
    generate_correlation_id,
    request_id_var,
    setup_logging,
    trace_id_var,
)
from price_common.monitoring import HTTP_REQUEST_LATENCY_SECONDS, HTTP_REQUESTS_TOTAL
from price_resolution_engine import (
    InvalidPriceQueryError,
    PriceServiceError,
    PriceSourceUnavailableError,
)
from .dtos.price_dto import build_error_body
from .routers import prices

SERVICE_PREFIX = "PRC"
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events for graceful operation.
    """
    logger.info("Price Query Service starting up...")
    log_database_credentials_source()
    yield
    logger.info("Price Query Service shutting down...")
    await async_engine.dispose()
    logger.info("Price Query Service has shut down gracefully.")


app = FastAPI(
    title="Price Query Service",
    description=(
        "Returns the applicable price of a product for a brand at a given instant, "
        "selecting the highest-priority price whose validity window contains it."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

# --- Prometheus Metrics ---
Instrumentator().instrument(app).expose(app)
logger.info("Prometheus metrics exposed at /metrics")


@app.middleware("http")
async def emit_http_observability(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - start

    labels = {
        "service": SERVICE_NAME,
        "method": request.method,
        "path": request.url.path,
    }
    HTTP_REQUEST_LATENCY_SECONDS.labels(**labels).observe(elapsed)
    HTTP_REQUESTS_TOTAL.labels(status=str(response.status_code), **labels).inc()

    logger.info(
        "http_request_completed",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(elapsed * 1000, 2),
        },
    )
    return response


# Correlation ID Middleware (registered last so it wraps the observability log line)
@app.middleware("http")
async def add_correlation_id_middleware(request: Request, call_next):
    correlation_id = request.headers.get("X-Correlation-ID") or generate_correlation_id(SERVICE_PREFIX)
    request_id = request.headers.get("X-Request-Id") or generate_correlation_id("REQ")
    trace_id = request.headers.get("X-Trace-Id") or uuid4().hex

    correlation_token = correlation_id_var.set(correlation_id)
    request_token = request_id_var.set(request_id)
    trace_token = trace_id_var.set(trace_id)
    try:
        response = await call_next(request)
    finally:
        correlation_id_var.reset(correlation_token)
        request_id_var.reset(request_token)
        trace_id_var.reset(trace_token)

    response.headers["X-Correlation-ID"] = correlation_id
    response.headers["X-Request-Id"] = request_id
    response.headers["X-Trace-Id"] = trace_id
    return response


@app.exception_handler(InvalidPriceQueryError)
async def invalid_price_query_handler(request: Request, exc: InvalidPriceQueryError):
    logger.warning(f"Invalid price query: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=build_error_body(
            status.HTTP_400_BAD_REQUEST,
            "Invalid Request",
            exc.message,
            field=exc.field,
            value=exc.value,
        ),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """
    Maps FastAPI parameter validation failures to the 400 error contract.
    Only the first error is reported.
    """
    error = exc.errors()[0] if exc.errors() else {}
    name = str(error.get("loc", ("", "unknown"))[-1])

    if error.get("type") == "missing":
        logger.warning(f"Missing request parameter: {name}")
        body = build_error_body(
            status.HTTP_400_BAD_REQUEST,
            "Missing request parameter",
            f"Required parameter '{name}' is missing",
        )
    else:
        value = error.get("input")
        logger.warning(f"Method argument type mismatch: {name}={value}")
        body = build_error_body(
            status.HTTP_400_BAD_REQUEST,
            "Invalid parameter type",
            f"Parameter '{name}' has invalid value: {value}",
        )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


@app.exception_handler(PriceSourceUnavailableError)
async def price_source_unavailable_handler(request: Request, exc: PriceSourceUnavailableError):
    logger.error(f"Price source unavailable: {exc.message}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=build_error_body(
            status.HTTP_503_SERVICE_UNAVAILABLE, "Service Unavailable", exc.message
        ),
    )


@app.exception_handler(PriceServiceError)
async def price_service_error_handler(request: Request, exc: PriceServiceError):
    logger.error(f"Price service error: {exc.message}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=build_error_body(
            status.HTTP_422_UNPROCESSABLE_ENTITY, "Business Logic Error", exc.message
        ),
    )


# Global Exception Handler
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Catches any unhandled exceptions and returns a standardized 500 error response.
    """
    correlation_id = request.headers.get("X-Correlation-ID") or correlation_id_var.get()
    if correlation_id == NOT_SET:
        correlation_id = generate_correlation_id(SERVICE_PREFIX)
    logger.critical(
        f"Unhandled exception for request {request.method} {request.url}",
        exc_info=exc,
        extra={"correlation_id": correlation_id},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=build_error_body(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            "An unexpected error occurred",
            correlation_id=correlation_id,
        ),
    )


# Create and include the standardized health router.
# This service depends on the database.
health_router = create_health_router("db")
app.include_router(health_router)

app.include_router(prices.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("src.services.query_service.app.main:app", host="0.0.0.0", port=8080)
