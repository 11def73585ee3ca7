# src/libs/price-common/price_common/health.py
import logging
import asyncio
from typing import Awaitable, Callable, Dict, Tuple

from fastapi import APIRouter, status, HTTPException
from sqlalchemy import text

from .db import AsyncSessionLocal

logger = logging.getLogger(__name__)

DependencyCheck = Callable[[], Awaitable[bool]]

async def check_db_health() -> bool:
    """Checks if a valid async connection can be established with the database."""
    try:
        async with AsyncSessionLocal() as session:
            async with session.begin():
                await session.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Health Check: Database connection failed: {e}", exc_info=False)
        return False

DEPENDENCY_CHECKS: Dict[str, Tuple[str, DependencyCheck]] = {
    'db': ('database', check_db_health),
}

def create_health_router(*dependencies: str) -> APIRouter:
    """
    Creates a standardized health check router.

    Args:
        *dependencies: Keys of DEPENDENCY_CHECKS (e.g. 'db') to run for the
                       readiness probe.

    Returns:
        A FastAPI APIRouter with /health/live and /health/ready endpoints.
    """
    router = APIRouter(tags=["Health"])
    selected = [dep for dep in dependencies if dep in DEPENDENCY_CHECKS]

    @router.get("/health/live", status_code=status.HTTP_200_OK)
    async def liveness_probe():
        return {"status": "alive"}

    @router.get("/health/ready", status_code=status.HTTP_200_OK)
    async def readiness_probe():
        # Looked up at call time so entries in DEPENDENCY_CHECKS can be swapped.
        results = await asyncio.gather(
            *[DEPENDENCY_CHECKS[dep][1]() for dep in selected]
        )

        dep_status = {
            DEPENDENCY_CHECKS[dep][0]: "ok" if ok else "unavailable"
            for dep, ok in zip(selected, results)
        }

        if all(results):
            return {"status": "ready", "dependencies": dep_status}

        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"status": "not_ready", "dependencies": dep_status},
        )

    return router
