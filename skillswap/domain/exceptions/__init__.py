"""
Domain exceptions package.
"""

from .conflict_error import ConflictError, DuplicateEntryError, ExchangeAlreadyAcceptedError
from .not_found_error import NotFoundError
from .store_error import StoreError
from .validation_error import InvalidIdentifierError, RequiredFieldError, ValidationError

__all__ = [
    "ConflictError",
    "DuplicateEntryError",
    "ExchangeAlreadyAcceptedError",
    "InvalidIdentifierError",
    "NotFoundError",
    "RequiredFieldError",
    "StoreError",
    "ValidationError",
]
