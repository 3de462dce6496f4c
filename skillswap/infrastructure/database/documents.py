"""
Conversion helpers between driver values and JSON-ready payloads.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from skillswap.domain.exceptions.validation_error import InvalidIdentifierError


def parse_object_id(value: str, field_name: str = "id") -> ObjectId:
    """Parse a hex identifier, raising ``InvalidIdentifierError`` when malformed."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdentifierError(field_name, str(value))
    return ObjectId(value)


def serialize_value(value: Any) -> Any:
    """Recursively render ObjectIds and datetimes as strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if document is None:
        return None
    return serialize_value(document)


def serialize_documents(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_value(document) for document in documents]


def insert_ack(result: InsertOneResult) -> Dict[str, Any]:
    """Acknowledgment payload for a single insert."""
    return {
        "acknowledged": result.acknowledged,
        "insertedId": serialize_value(result.inserted_id),
    }


def update_ack(result: UpdateResult) -> Dict[str, Any]:
    """Acknowledgment payload for a single update."""
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 1 if result.upserted_id is not None else 0,
        "upsertedId": serialize_value(result.upserted_id),
    }


def delete_ack(result: DeleteResult) -> Dict[str, Any]:
    """Acknowledgment payload for a delete."""
    return {
        "acknowledged": result.acknowledged,
        "deletedCount": result.deleted_count,
    }
