"""URL validation and site path helpers."""

from __future__ import annotations

import logging
import re
from typing import Final

import httpx

from blogtext.config import BLOGTEXT_SITE_ORIGIN
from blogtext.exceptions import InvalidURL

logger = logging.getLogger(__name__)

WEB_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https"})

POST_PATH_PREFIX: Final[str] = "/blog/"
CUSTOMER_STORY_PATH_PREFIX: Final[str] = "/customers/"
MAX_PORT: Final[int] = 65535

# Code points a URL host may never contain. httpx percent-encodes some of
# them (a space becomes "%20"), so "%" is rejected too.
_FORBIDDEN_HOST_RE = re.compile(r"[\s#%/<>?@\\^|\[\]]")


def is_valid_url(value: str) -> bool:
    """Return True if *value* is an absolute http(s) URL with a host."""
    try:
        url = httpx.URL(value)
        port = url.port
        host = url.raw_host.decode("ascii")
    except (httpx.InvalidURL, TypeError, ValueError):
        return False
    if url.scheme.lower() not in WEB_SCHEMES or not host:
        return False
    if _FORBIDDEN_HOST_RE.search(host):
        return False
    return port is None or 0 <= port <= MAX_PORT


def canonical_url(path: str, site_origin: str | None = None) -> str:
    """Resolve *path* against the site origin and return an absolute URL.

    Args:
        path: Absolute or relative path (or a full URL, which wins over the
            origin as in any RFC 3986 join).
        site_origin: Origin to resolve against. Defaults to
            ``BLOGTEXT_SITE_ORIGIN``.

    Returns:
        The absolute URL as a string.

    Raises:
        InvalidURL: If no origin is configured, the origin is not absolute,
            or either value cannot be parsed.
    """
    origin = site_origin if site_origin is not None else BLOGTEXT_SITE_ORIGIN
    if not origin:
        raise InvalidURL("No site origin configured (set BLOGTEXT_SITE_ORIGIN).")

    try:
        base = httpx.URL(origin)
    except (httpx.InvalidURL, TypeError) as exc:
        logger.debug("Rejected site origin %r: %s", origin, exc)
        raise InvalidURL(f"Invalid site origin {origin!r}: {exc}") from exc

    if not base.scheme or not base.host:
        logger.debug("Rejected relative site origin %r", origin)
        raise InvalidURL(f"Site origin must be an absolute URL, got {origin!r}.")

    try:
        resolved = base.join(path)
        # An origin with no path resolves to "/" rather than an empty path.
        resolved = resolved.copy_with(raw_path=resolved.raw_path)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidURL(f"Cannot resolve {path!r} against {origin!r}: {exc}") from exc
    return str(resolved)


def post_slug_path(slug: str) -> str:
    return f"{POST_PATH_PREFIX}{slug}"


def customer_story_slug_path(slug: str) -> str:
    return f"{CUSTOMER_STORY_PATH_PREFIX}{slug}"
