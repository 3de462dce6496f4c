"""
Infrastructure package.
"""

from .database import *
from .monitoring import *

__all__ = [
    # Database
    "ensure_indexes",
    "seed_categories",
    "parse_object_id",
    "serialize_document",
    "serialize_documents",
    "insert_ack",
    "update_ack",
    "delete_ack",
    "CategoryRepository",
    "ExchangeRepository",
    "FeedbackRepository",
    "ReportRepository",
    "ReviewRepository",
    "SavedSkillRepository",
    "SkillRepository",
    "TransactionService",
    "UserRepository",
    # Monitoring
    "HealthChecker",
    "get_metrics",
    "get_metrics_content_type",
    "record_api_request",
    "record_duplicate_feedback",
    "record_error",
    "record_exchange_transition",
]
