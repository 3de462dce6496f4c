"""
Unit tests for index creation and category seeding.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from skillswap.infrastructure.database.collections import INDEXES, ensure_indexes
from skillswap.infrastructure.database.seed import DEFAULT_CATEGORIES, seed_categories


@pytest.fixture
def categories():
    mock_collection = MagicMock()
    mock_collection.count_documents = AsyncMock(return_value=0)
    mock_collection.insert_many = AsyncMock(
        side_effect=lambda docs: MagicMock(inserted_ids=list(range(len(docs))))
    )
    return mock_collection


@pytest.fixture
def db(categories):
    mock_db = MagicMock()
    mock_db.__getitem__.return_value = categories
    return mock_db


class TestSeedCategories:
    """Test cases for seed_categories."""

    @pytest.mark.asyncio
    async def test_seeds_empty_collection(self, db, categories):
        inserted = await seed_categories(db)

        assert inserted == len(DEFAULT_CATEGORIES)
        documents = categories.insert_many.await_args.args[0]
        assert documents[0] == {"name": DEFAULT_CATEGORIES[0]}

    @pytest.mark.asyncio
    async def test_skips_populated_collection(self, db, categories):
        categories.count_documents.return_value = 3

        assert await seed_categories(db) == 0
        categories.insert_many.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_custom_names(self, db, categories):
        assert await seed_categories(db, ["Chess"]) == 1


class TestEnsureIndexes:
    """Test cases for ensure_indexes."""

    @pytest.mark.asyncio
    async def test_creates_every_index_group(self, db, categories):
        categories.create_indexes = AsyncMock(return_value=["idx"])

        await ensure_indexes(db)

        assert categories.create_indexes.await_count == len(INDEXES)

    def test_feedback_uniqueness(self):
        """Reviews and reports are unique per author and skill."""
        review_index = INDEXES["reviews"][0].document
        report_index = INDEXES["reports"][0].document
        assert review_index["unique"] is True
        assert list(review_index["key"].keys()) == ["reviewerEmail", "skillId"]
        assert report_index["unique"] is True
        assert list(report_index["key"].keys()) == ["reporterEmail", "skillId"]
