"""
Unit tests for HealthChecker.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from skillswap.infrastructure.monitoring.health_checks import HealthChecker


@pytest.fixture
def db():
    mock_db = MagicMock()
    mock_db.name = "SkillSwapTestDB"
    mock_db.command = AsyncMock(return_value={"ok": 1.0})
    return mock_db


class TestHealthChecker:
    """Test cases for HealthChecker."""

    @pytest.mark.asyncio
    async def test_healthy(self, db):
        health = await HealthChecker(db).get_overall_health()

        assert health["status"] == "healthy"
        assert health["services"]["database"]["database"] == "SkillSwapTestDB"
        db.command.assert_awaited_once_with("ping")

    @pytest.mark.asyncio
    async def test_unreachable_store(self, db):
        db.command.side_effect = ServerSelectionTimeoutError("no servers")
        checker = HealthChecker(db)

        health = await checker.get_overall_health()

        assert health["status"] == "unhealthy"
        assert health["services"]["database"]["status"] == "error"
        assert await checker.check_readiness() is False
