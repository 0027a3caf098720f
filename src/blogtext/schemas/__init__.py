"""Shared schemas for blogtext."""

from blogtext.schemas.headings import Heading
from blogtext.schemas.stripping import DEFAULT_LIST_BULLET, StripOptions, StripResult

__all__ = ["DEFAULT_LIST_BULLET", "Heading", "StripOptions", "StripResult"]
