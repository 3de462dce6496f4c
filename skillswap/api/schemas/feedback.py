"""
Review and report API schemas.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ReviewCreateRequest(BaseModel):
    """Review payload. Rating, comment and other fields are stored as sent."""

    model_config = ConfigDict(extra="allow")

    reviewerEmail: str = Field(..., min_length=1)
    skillId: str = Field(..., min_length=1)


class ReportCreateRequest(BaseModel):
    """Report payload. Reason and other fields are stored as sent."""

    model_config = ConfigDict(extra="allow")

    reporterEmail: str = Field(..., min_length=1)
    skillId: str = Field(..., min_length=1)


class ReviewsAndReportsResponse(BaseModel):
    """All feedback left for one skill."""

    reviews: List[Dict[str, Any]]
    reports: List[Dict[str, Any]]
