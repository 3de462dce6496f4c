"""
Health checks for the document store backing the API.
"""

import time
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

logger = structlog.get_logger()

HEALTHY = "healthy"
UNHEALTHY = "unhealthy"

Check = Callable[[], Awaitable[Dict[str, Any]]]


class HealthChecker:
    """Runs named component checks and folds them into one status."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.checks: Dict[str, Check] = {"database": self._check_database}

    async def run_health_checks(self) -> Dict[str, Dict[str, Any]]:
        results = {}
        for name, check in self.checks.items():
            try:
                results[name] = await check()
            except PyMongoError as e:
                logger.error("Health check failed", check_name=name, error=str(e))
                results[name] = {"status": "error", "error": str(e)}
        return results

    async def _check_database(self) -> Dict[str, Any]:
        """Round-trip a ``ping`` command."""
        started = time.perf_counter()
        await self.db.command("ping")
        return {
            "status": HEALTHY,
            "response_time_ms": round((time.perf_counter() - started) * 1000, 2),
            "database": self.db.name,
        }

    async def get_overall_health(self) -> Dict[str, Any]:
        services = await self.run_health_checks()
        healthy = all(result.get("status") == HEALTHY for result in services.values())
        return {
            "status": HEALTHY if healthy else UNHEALTHY,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": services,
        }

    async def check_readiness(self) -> bool:
        """Ready once every component check passes."""
        health = await self.get_overall_health()
        return health["status"] == HEALTHY
