"""blogtext: text and Markdown helpers for rendering blog posts."""

from blogtext.cta import inject_call_to_action
from blogtext.exceptions import BlogtextError, InvalidURL, RewriteError
from blogtext.formatting import (
    customer_stories_per_page,
    format_post_date,
    get_initials,
    posts_per_page,
    trim_text,
)
from blogtext.headings import count_headings, demote_headings, extract_headings, render_toc
from blogtext.schemas import Heading, StripOptions, StripResult
from blogtext.slugs import slugify
from blogtext.stripper import strip_markdown, strip_markdown_result
from blogtext.urls import (
    canonical_url,
    customer_story_slug_path,
    is_valid_url,
    post_slug_path,
)

__all__ = [
    "BlogtextError",
    "Heading",
    "InvalidURL",
    "RewriteError",
    "StripOptions",
    "StripResult",
    "canonical_url",
    "count_headings",
    "customer_stories_per_page",
    "customer_story_slug_path",
    "demote_headings",
    "extract_headings",
    "format_post_date",
    "get_initials",
    "inject_call_to_action",
    "is_valid_url",
    "post_slug_path",
    "posts_per_page",
    "render_toc",
    "slugify",
    "strip_markdown",
    "strip_markdown_result",
    "trim_text",
]
