"""Custom exceptions for blogtext."""


class BlogtextError(Exception):
    """Base exception for blogtext operations."""


class InvalidURL(BlogtextError, ValueError):
    """A path or site origin could not be turned into an absolute URL."""


class RewriteError(BlogtextError):
    """A Markdown rewrite rule failed while stripping text."""

    def __init__(self, rule: str, cause: Exception) -> None:
        super().__init__(f"Rewrite rule {rule!r} failed: {cause!r}")
        self.rule = rule
        self.cause = cause
