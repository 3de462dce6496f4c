"""
Pytest configuration and fixtures.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import OperationFailure, PyMongoError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from skillswap.application.interfaces.repositories import (
    CategoryRepositoryInterface,
    ExchangeRepositoryInterface,
    FeedbackRepositoryInterface,
    SavedSkillRepositoryInterface,
    SkillRepositoryInterface,
    UserRepositoryInterface,
)
from skillswap.application.interfaces.services import TransactionServiceInterface
from skillswap.config.settings import Settings
from skillswap.domain.value_objects.feedback_kind import FeedbackKind


@pytest.fixture(scope="session")
def test_settings():
    """Test settings configuration."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        MONGO_URI="mongodb://localhost:27017/?appName=SkillSwapTest",
        MONGO_DB_NAME="SkillSwapTestDB",
        MONGO_CREATE_INDEXES=False,
    )


def insert_result(inserted_id=None) -> InsertOneResult:
    return InsertOneResult(inserted_id or ObjectId(), acknowledged=True)


def update_result(matched: int = 1, modified: int = 1) -> UpdateResult:
    return UpdateResult(
        {"n": matched, "nModified": modified, "ok": 1.0, "updatedExisting": matched > 0},
        acknowledged=True,
    )


def delete_result(deleted: int = 1) -> DeleteResult:
    return DeleteResult({"n": deleted, "ok": 1.0}, acknowledged=True)


@pytest.fixture
def mock_skill_repository():
    """Mock skill repository."""
    mock_repo = AsyncMock(spec=SkillRepositoryInterface)

    # Mock methods
    mock_repo.create = AsyncMock(return_value=insert_result())
    mock_repo.get_by_id = AsyncMock(return_value=None)
    mock_repo.find_by_creator = AsyncMock(return_value=[])
    mock_repo.find_page = AsyncMock(return_value=([], 0))
    mock_repo.mark_unavailable = AsyncMock(return_value=update_result())
    mock_repo.trending_categories = AsyncMock(return_value=[])

    return mock_repo


@pytest.fixture
def mock_category_repository():
    """Mock category repository."""
    mock_repo = AsyncMock(spec=CategoryRepositoryInterface)
    mock_repo.find_all = AsyncMock(return_value=[])

    return mock_repo


@pytest.fixture
def mock_exchange_repository():
    """Mock exchange repository."""
    mock_repo = AsyncMock(spec=ExchangeRepositoryInterface)

    # Mock methods
    mock_repo.create = AsyncMock(return_value=insert_result())
    mock_repo.get_by_id = AsyncMock(return_value=None)
    mock_repo.find_page = AsyncMock(return_value=([], 0))
    mock_repo.find_accepted_for = AsyncMock(return_value=[])
    mock_repo.update_status = AsyncMock(return_value=update_result())

    return mock_repo


@pytest.fixture
def mock_saved_skill_repository():
    """Mock saved skill repository."""
    mock_repo = AsyncMock(spec=SavedSkillRepositoryInterface)

    # Mock methods
    mock_repo.create = AsyncMock(return_value=insert_result())
    mock_repo.find_page = AsyncMock(return_value=([], 0))
    mock_repo.delete_by_skill_id = AsyncMock(return_value=delete_result())

    return mock_repo


def _feedback_repository(kind: FeedbackKind):
    mock_repo = AsyncMock(spec=FeedbackRepositoryInterface)
    mock_repo.kind = kind

    # Mock methods
    mock_repo.find_by_owner_and_skill = AsyncMock(return_value=None)
    mock_repo.create = AsyncMock(return_value=insert_result())
    mock_repo.find_by_skill = AsyncMock(return_value=[])
    mock_repo.find_all = AsyncMock(return_value=[])
    mock_repo.delete_by_id = AsyncMock(return_value=delete_result())

    return mock_repo


@pytest.fixture
def mock_review_repository():
    """Mock review repository."""
    return _feedback_repository(FeedbackKind.REVIEW)


@pytest.fixture
def mock_report_repository():
    """Mock report repository."""
    return _feedback_repository(FeedbackKind.REPORT)


@pytest.fixture
def mock_user_repository():
    """Mock user repository."""
    mock_repo = AsyncMock(spec=UserRepositoryInterface)

    # Mock methods
    mock_repo.get_by_email = AsyncMock(return_value=None)
    mock_repo.create = AsyncMock()
    mock_repo.find_page = AsyncMock(return_value=([], 0))
    mock_repo.update_role = AsyncMock(return_value=update_result())
    mock_repo.update_profile = AsyncMock(return_value=update_result())
    mock_repo.delete_by_id = AsyncMock(return_value=delete_result())

    return mock_repo


def _async_context(value):
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=value)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


@pytest.fixture
def mongo_session():
    """Client session whose ``with_transaction`` reruns the callback on transient errors."""
    session = _async_context(None)
    session.__aenter__.return_value = session

    async def with_transaction(callback, max_attempts=3):
        for attempt in range(1, max_attempts + 1):
            try:
                return await callback(session)
            except PyMongoError as exc:
                if attempt == max_attempts or not exc.has_error_label(
                    "TransientTransactionError"
                ):
                    raise

    session.with_transaction = AsyncMock(side_effect=with_transaction)
    return session


@pytest.fixture
def mongo_client(mongo_session):
    """Motor client mock handing out ``mongo_session``."""
    client = MagicMock()
    client.start_session = AsyncMock(return_value=mongo_session)
    return client


@pytest.fixture
def write_conflict():
    """Write conflict the driver labels as a transient transaction error."""
    return OperationFailure(
        "WriteConflict error: this operation conflicted with another operation",
        code=112,
        details={"errorLabels": ["TransientTransactionError"]},
    )


@pytest.fixture
def mock_transaction_service():
    """Mock transaction service that runs the operation without a session."""
    mock_service = AsyncMock(spec=TransactionServiceInterface)

    async def run(operation):
        return await operation(None)

    mock_service.execute_in_transaction = AsyncMock(side_effect=run)
    return mock_service


@pytest.fixture
def mock_health_checker():
    """Mock health checker."""
    mock_checker = MagicMock()
    mock_checker.get_overall_health = AsyncMock(
        return_value={"status": "healthy", "timestamp": "now", "services": {}}
    )
    mock_checker.check_readiness = AsyncMock(return_value=True)

    return mock_checker


@pytest.fixture
def app(
    mock_skill_repository,
    mock_category_repository,
    mock_exchange_repository,
    mock_saved_skill_repository,
    mock_review_repository,
    mock_report_repository,
    mock_user_repository,
    mock_transaction_service,
    mock_health_checker,
):
    """Application with every store-backed dependency replaced by a mock."""
    from skillswap.api import dependencies
    from skillswap.api.app import create_app

    app = create_app()
    app.dependency_overrides.update(
        {
            dependencies.get_skill_repository: lambda: mock_skill_repository,
            dependencies.get_category_repository: lambda: mock_category_repository,
            dependencies.get_exchange_repository: lambda: mock_exchange_repository,
            dependencies.get_saved_skill_repository: lambda: mock_saved_skill_repository,
            dependencies.get_review_repository: lambda: mock_review_repository,
            dependencies.get_report_repository: lambda: mock_report_repository,
            dependencies.get_user_repository: lambda: mock_user_repository,
            dependencies.get_transaction_service: lambda: mock_transaction_service,
            dependencies.get_health_checker: lambda: mock_health_checker,
        }
    )
    return app


@pytest.fixture
def client(app):
    """Create test FastAPI client."""
    from fastapi.testclient import TestClient

    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def sample_skill():
    """Sample skill document as stored."""
    return {
        "_id": ObjectId("64b7f0c2a1b2c3d4e5f60718"),
        "title": "Guitar lessons",
        "category": "Music",
        "creatorEmail": "ana@example.com",
        "available": True,
    }


@pytest.fixture
def sample_exchange():
    """Sample pending exchange document as stored."""
    return {
        "_id": ObjectId("64b7f0c2a1b2c3d4e5f60719"),
        "title": "Guitar for Spanish",
        "creatorEmail": "ana@example.com",
        "applicationUserEmail": "ben@example.com",
        "creatorSkillId": "64b7f0c2a1b2c3d4e5f60718",
        "applicationSkillId": "64b7f0c2a1b2c3d4e5f6071a",
        "status": "Pending",
    }


@pytest.fixture
def store_db():
    """In-memory database shared by every repository within one test."""
    from mongomock_motor import AsyncMongoMockClient

    return AsyncMongoMockClient()["SkillSwapTestDB"]


@pytest.fixture
def store_app(store_db, mock_transaction_service, mock_health_checker):
    """Application whose repositories run against ``store_db``.

    The in-memory store has no sessions, so transactions run the operation
    directly.
    """
    from skillswap.api import dependencies
    from skillswap.api.app import create_app
    from skillswap.config.database import get_database

    app = create_app()
    app.dependency_overrides.update(
        {
            get_database: lambda: store_db,
            dependencies.get_transaction_service: lambda: mock_transaction_service,
            dependencies.get_health_checker: lambda: mock_health_checker,
        }
    )
    return app


@pytest.fixture
def store_client(store_app):
    """Test client for ``store_app``."""
    from fastapi.testclient import TestClient

    return TestClient(store_app, raise_server_exceptions=False)
