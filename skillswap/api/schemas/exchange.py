"""
Exchange-related API schemas.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from skillswap.domain.value_objects.exchange_status import ExchangeStatus


class ExchangeCreateRequest(BaseModel):
    """Exchange request payload. Unknown fields are stored as sent.

    New exchanges always start ``Pending``; any ``status`` in the payload is
    replaced by the route.
    """

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    creatorEmail: Optional[str] = None
    applicationUserEmail: Optional[str] = None
    creatorSkillId: Optional[str] = None
    applicationSkillId: Optional[str] = None
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ExchangeStatusUpdateRequest(BaseModel):
    """Requested exchange transition."""

    status: ExchangeStatus
    creatorSkillId: Optional[str] = None
    applicationSkillId: Optional[str] = None


class ExchangePageResponse(BaseModel):
    """One page of exchange requests and the total match count."""

    total: int
    requests: List[Dict[str, Any]]
