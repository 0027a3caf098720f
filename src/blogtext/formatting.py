"""Formatting helpers for post listings: dates, pagination, excerpts, initials."""

from __future__ import annotations

import logging
from datetime import date, datetime

from dateutil import parser as date_parser

from blogtext.config import (
    BLOGTEXT_CUSTOMER_STORIES_PER_PAGE,
    BLOGTEXT_DEFAULT_POST_DATE,
    BLOGTEXT_POSTS_PER_PAGE,
    BLOGTEXT_TRIM_LENGTH,
    DEFAULT_POST_DATE,
)

logger = logging.getLogger(__name__)

ELLIPSIS = "..."

_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_post_date(value: str | date | None = None) -> str:
    """Format a post date as ``"Mon D, YYYY"`` (e.g. ``"Dec 27, 2022"``).

    Accepts ``date``/``datetime`` objects and any date string ``dateutil``
    understands, such as ISO-8601, ``"Dec 27, 2022"``, ``"2023/01/05"``,
    ``"5 Jan 2023"`` or an RFC 2822 feed date. The calendar date written in
    the string is kept and timezones are not converted. Missing or
    unparseable values fall back to ``BLOGTEXT_DEFAULT_POST_DATE``.
    """
    parsed = _parse_date(value)
    if parsed is None:
        if value:
            logger.debug("Unparseable post date %r, using default", value)
        parsed = _parse_date(BLOGTEXT_DEFAULT_POST_DATE) or _parse_date(DEFAULT_POST_DATE)
    return f"{_MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def _parse_date(value: str | date | None) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        return None

    try:
        return date_parser.parse(value.strip()).date()
    except (ValueError, OverflowError):
        return None


def posts_per_page() -> int:
    return BLOGTEXT_POSTS_PER_PAGE


def customer_stories_per_page() -> int:
    return BLOGTEXT_CUSTOMER_STORIES_PER_PAGE


def trim_text(text: str, max_length: int | None = None) -> str:
    """Trim *text* to *max_length* characters, ending with an ellipsis.

    Text that already fits is returned unchanged.
    """
    limit = BLOGTEXT_TRIM_LENGTH if max_length is None else max_length
    if len(text) > limit:
        return text[: max(limit - len(ELLIPSIS), 0)] + ELLIPSIS
    return text


def get_initials(full_name: str) -> str:
    """Initials from the first and last space-separated names."""
    names = full_name.split(" ")
    initials = names[0][:1].upper()
    if len(names) > 1:
        initials += names[-1][:1].upper()
    return initials
