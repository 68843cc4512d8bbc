"""Health check utilities."""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from ..database import Database
from .logging_config import get_logger

logger = get_logger(__name__)


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


@dataclass
class ComponentHealth:
    status: HealthStatus
    message: Optional[str] = None
    latency_ms: Optional[float] = None


def check_database_health(database: Database) -> ComponentHealth:
    """Check database connectivity with a trivial query."""
    start = time.time()
    try:
        database.ping()
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}", exc_info=True)
        return ComponentHealth(
            status=HealthStatus.UNHEALTHY,
            message="Database unreachable",
        )

    return ComponentHealth(
        status=HealthStatus.HEALTHY,
        message="Database connection OK",
        latency_ms=round((time.time() - start) * 1000, 2),
    )
