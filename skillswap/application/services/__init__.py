"""
Application services package.
"""

from .query_builder import (
    ListQuery,
    PageWindow,
    build_exchanges_query,
    build_saved_skills_query,
    build_skills_query,
    build_users_query,
)

__all__ = [
    "ListQuery",
    "PageWindow",
    "build_exchanges_query",
    "build_saved_skills_query",
    "build_skills_query",
    "build_users_query",
]
