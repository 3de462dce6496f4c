"""
Domain package.
"""

from .exceptions import *
from .value_objects import *

__all__ = [
    # Exceptions
    "ConflictError",
    "DuplicateEntryError",
    "ExchangeAlreadyAcceptedError",
    "InvalidIdentifierError",
    "NotFoundError",
    "RequiredFieldError",
    "StoreError",
    "ValidationError",

    # Value Objects
    "ExchangeStatus",
    "FeedbackKind",
    "UserRole",
]
