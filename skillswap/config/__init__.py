"""
Configuration package.
"""

from .database import *
from .logging import *
from .settings import settings

__all__ = [
    "settings",

    # Database
    "get_database_url",
    "create_client",
    "get_client",
    "get_database",
    "close_database",

    # Logging
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
    "get_logger",
]
