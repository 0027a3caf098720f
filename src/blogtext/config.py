"""Local configuration for blogtext."""

from __future__ import annotations

import os


DEFAULT_POST_DATE = "Dec 27, 2022"
DEFAULT_POSTS_PER_PAGE = 12
DEFAULT_CUSTOMER_STORIES_PER_PAGE = 9
DEFAULT_TRIM_LENGTH = 160

# Origin that relative paths are resolved against when building canonical URLs.
BLOGTEXT_SITE_ORIGIN = os.getenv("BLOGTEXT_SITE_ORIGIN") or os.getenv("NEXT_PUBLIC_SITE")
BLOGTEXT_DEFAULT_POST_DATE = os.getenv("BLOGTEXT_DEFAULT_POST_DATE", DEFAULT_POST_DATE)
BLOGTEXT_POSTS_PER_PAGE = int(os.getenv("BLOGTEXT_POSTS_PER_PAGE", str(DEFAULT_POSTS_PER_PAGE)))
BLOGTEXT_CUSTOMER_STORIES_PER_PAGE = int(
    os.getenv("BLOGTEXT_CUSTOMER_STORIES_PER_PAGE", str(DEFAULT_CUSTOMER_STORIES_PER_PAGE))
)
BLOGTEXT_TRIM_LENGTH = int(os.getenv("BLOGTEXT_TRIM_LENGTH", str(DEFAULT_TRIM_LENGTH)))
