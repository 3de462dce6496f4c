"""
Translation of raw listing parameters into document store queries.

Every listing endpoint receives its pagination and search parameters as
untyped query-string values.  The builders in this module turn them into a
``ListQuery``: a filter document, an optional sort specification and a
skip/limit pair that repositories can hand straight to the driver.

Page numbering differs per endpoint and clients depend on it:

* ``/get-skills`` counts pages from 0 with a default page size of 5.
* ``/get-saved-skills``, ``/exchanges/{email}`` and ``/allUsers`` count
  pages from 1 with a default page size of 10.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from skillswap.domain.exceptions.validation_error import RequiredFieldError

DESCENDING = -1

SKILLS_DEFAULT_PAGE = 0
SKILLS_DEFAULT_SIZE = 5
LISTING_DEFAULT_PAGE = 1
LISTING_DEFAULT_LIMIT = 10

# Keeps skip and limit inside the store's 64-bit integer range
MAX_PAGE = 1_000_000
MAX_PAGE_SIZE = 1000

TRUTHY_FLAGS = {"true", "1", "yes"}


@dataclass(frozen=True)
class PageWindow:
    """Resolved pagination window."""

    page: int
    size: int
    first_page: int

    @property
    def skip(self) -> int:
        return (self.page - self.first_page) * self.size

    @property
    def limit(self) -> int:
        return self.size


@dataclass(frozen=True)
class ListQuery:
    """Filter, sort and paging for a single listing request."""

    filter: Dict[str, Any] = field(default_factory=dict)
    sort: Optional[List[Tuple[str, int]]] = None
    skip: int = 0
    limit: int = 0


def parse_int(value: Optional[str], default: int) -> int:
    """Parse a query-string integer, falling back to ``default``."""
    if value is None:
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def parse_flag(value: Optional[str]) -> bool:
    """Parse a query-string boolean toggle such as ``sortByDate=true``."""
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY_FLAGS


def resolve_page(
    page: Optional[str],
    size: Optional[str],
    default_page: int,
    default_size: int,
) -> PageWindow:
    """Resolve raw page/size values into a window starting at ``default_page``.

    Pages before the first page are clamped to it, and non-positive sizes
    fall back to the default since a driver limit of 0 means "no limit".
    Oversized values are capped at ``MAX_PAGE`` and ``MAX_PAGE_SIZE``.
    """
    page_number = min(max(parse_int(page, default_page), default_page), MAX_PAGE)
    page_size = parse_int(size, default_size)
    if page_size <= 0:
        page_size = default_size
    page_size = min(page_size, MAX_PAGE_SIZE)
    return PageWindow(page=page_number, size=page_size, first_page=default_page)


def contains_ignore_case(term: Optional[str]) -> Optional[Dict[str, str]]:
    """Case-insensitive substring condition for ``term``, or None if blank."""
    if term is None or not str(term).strip():
        return None
    return {"$regex": re.escape(str(term).strip()), "$options": "i"}


def _with_search(base: Dict[str, Any], field_name: str, term: Optional[str]) -> Dict[str, Any]:
    condition = contains_ignore_case(term)
    if condition is not None:
        base[field_name] = condition
    return base


def build_skills_query(
    search: Optional[str] = None,
    page: Optional[str] = None,
    size: Optional[str] = None,
    sort_by_date: Optional[str] = None,
) -> ListQuery:
    """Query for ``GET /get-skills``: category search, zero-based pages."""
    window = resolve_page(page, size, SKILLS_DEFAULT_PAGE, SKILLS_DEFAULT_SIZE)
    sort = [("createdAt", DESCENDING)] if parse_flag(sort_by_date) else None

    return ListQuery(
        filter=_with_search({}, "category", search),
        sort=sort,
        skip=window.skip,
        limit=window.limit,
    )


def build_saved_skills_query(
    email: Optional[str],
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> ListQuery:
    """Query for ``GET /get-saved-skills``: owner scope plus skill title search."""
    if not email:
        raise RequiredFieldError("email")

    window = resolve_page(page, limit, LISTING_DEFAULT_PAGE, LISTING_DEFAULT_LIMIT)
    return ListQuery(
        filter=_with_search({"savedUserEmail": email}, "skillTitle", search),
        skip=window.skip,
        limit=window.limit,
    )


def build_exchanges_query(
    email: Optional[str],
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> ListQuery:
    """Query for ``GET /exchanges/{email}``: creator scope plus title search."""
    if not email:
        raise RequiredFieldError("email")

    window = resolve_page(page, limit, LISTING_DEFAULT_PAGE, LISTING_DEFAULT_LIMIT)
    return ListQuery(
        filter=_with_search({"creatorEmail": email}, "title", search),
        skip=window.skip,
        limit=window.limit,
    )


def build_users_query(
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> ListQuery:
    """Query for ``GET /allUsers``: name search."""
    window = resolve_page(page, limit, LISTING_DEFAULT_PAGE, LISTING_DEFAULT_LIMIT)
    return ListQuery(
        filter=_with_search({}, "name", search),
        skip=window.skip,
        limit=window.limit,
    )
