"""
Common API schemas.
"""

from typing import Optional

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain message response, used for both outcomes and errors."""

    message: str


class InsertAcknowledgment(BaseModel):
    """Acknowledgment for a single inserted document."""

    acknowledged: bool
    insertedId: Optional[str] = None


class UpdateAcknowledgment(BaseModel):
    """Acknowledgment for a single update."""

    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedCount: int = 0
    upsertedId: Optional[str] = None


class DeleteAcknowledgment(BaseModel):
    """Acknowledgment for a delete."""

    acknowledged: bool
    deletedCount: int
