"""
Database infrastructure package.
"""

from .collections import ensure_indexes
from .documents import (
    delete_ack,
    insert_ack,
    parse_object_id,
    serialize_document,
    serialize_documents,
    update_ack,
)
from .repositories import *
from .seed import seed_categories

__all__ = [
    "ensure_indexes",
    "seed_categories",
    "delete_ack",
    "insert_ack",
    "parse_object_id",
    "serialize_document",
    "serialize_documents",
    "update_ack",

    # Repositories
    "CategoryRepository",
    "ExchangeRepository",
    "FeedbackRepository",
    "ReportRepository",
    "ReviewRepository",
    "SavedSkillRepository",
    "SkillRepository",
    "TransactionService",
    "UserRepository",
]
