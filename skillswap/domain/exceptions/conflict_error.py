"""
Conflict-related domain exceptions.
"""


class ConflictError(Exception):
    """Base exception for writes rejected by the current stored state."""

    pass


class DuplicateEntryError(ConflictError):
    """Raised when a uniqueness guard finds an existing entry."""

    def __init__(self, kind: str, owner_email: str, skill_id: str, message: str):
        self.kind = kind
        self.owner_email = owner_email
        self.skill_id = skill_id
        super().__init__(message)


class ExchangeAlreadyAcceptedError(ConflictError):
    """Raised when a status change is requested for an accepted exchange."""

    def __init__(self, exchange_id: str):
        self.exchange_id = exchange_id
        super().__init__("Exchange already accepted")
