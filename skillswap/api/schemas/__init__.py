"""
API schemas package.
"""

from .common import (
    DeleteAcknowledgment,
    InsertAcknowledgment,
    MessageResponse,
    UpdateAcknowledgment,
)
from .exchange import (
    ExchangeCreateRequest,
    ExchangePageResponse,
    ExchangeStatusUpdateRequest,
)
from .feedback import ReportCreateRequest, ReviewCreateRequest, ReviewsAndReportsResponse
from .skill import (
    SavedSkillCreateRequest,
    SavedSkillPageResponse,
    SkillCreateRequest,
    SkillPageResponse,
    TrendingCategory,
)
from .user import RoleResponse, RoleUpdateRequest, UserProfileRequest

__all__ = [
    "DeleteAcknowledgment",
    "InsertAcknowledgment",
    "MessageResponse",
    "UpdateAcknowledgment",
    "ExchangeCreateRequest",
    "ExchangePageResponse",
    "ExchangeStatusUpdateRequest",
    "ReportCreateRequest",
    "ReviewCreateRequest",
    "ReviewsAndReportsResponse",
    "SavedSkillCreateRequest",
    "SavedSkillPageResponse",
    "SkillCreateRequest",
    "SkillPageResponse",
    "TrendingCategory",
    "RoleResponse",
    "RoleUpdateRequest",
    "UserProfileRequest",
]
