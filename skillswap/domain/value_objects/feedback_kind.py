"""
Feedback kind value object.
"""

from enum import Enum


class FeedbackKind(str, Enum):
    """Kinds of per-skill feedback guarded by a uniqueness check."""

    REVIEW = "review"
    REPORT = "report"

    @property
    def owner_field(self) -> str:
        """Document field holding the author's email."""
        return "reviewerEmail" if self == FeedbackKind.REVIEW else "reporterEmail"

    @property
    def duplicate_message(self) -> str:
        """Message returned when the author already left this kind of feedback."""
        if self == FeedbackKind.REVIEW:
            return "You have already reviewed this skill"
        return "You have already reported this skill"
