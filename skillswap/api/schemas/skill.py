"""
Skill-related API schemas.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SkillCreateRequest(BaseModel):
    """Skill listing payload. Unknown fields are stored as sent."""

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    category: Optional[str] = None
    creatorEmail: Optional[str] = None
    available: bool = True
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class SkillPageResponse(BaseModel):
    """One page of skills and the total match count."""

    skills: List[Dict[str, Any]]
    count: int


class TrendingCategory(BaseModel):
    """Category with its number of listed skills."""

    category: Optional[str] = None
    count: int = Field(..., ge=0)


class SavedSkillCreateRequest(BaseModel):
    """Saved skill payload."""

    model_config = ConfigDict(extra="allow")

    skillId: str = Field(..., min_length=1)
    savedUserEmail: str = Field(..., min_length=1)
    skillTitle: Optional[str] = None


class SavedSkillPageResponse(BaseModel):
    """One page of saved skills and the total match count."""

    total: int
    skills: List[Dict[str, Any]]
