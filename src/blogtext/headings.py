"""Heading extraction, nesting, and demotion for Markdown posts."""

from __future__ import annotations

import re
from typing import Iterable

from blogtext.schemas import Heading
from blogtext.slugs import slugify

MAX_OUTLINE_LEVEL = 3

# Titles stop at any line terminator so CRLF input does not leak "\r".
_HEADING_LINE_RE = re.compile(r"^(#{1,3})\s([^\r\u2028\u2029]*)")
_H1_RE = re.compile(r"^#\s", re.MULTILINE)
_DEMOTABLE_RE = re.compile(r"^#{1,5}\s", re.MULTILINE)


def extract_headings(markdown: str = "") -> list[Heading]:
    """Parse level 1-3 ATX headings into a nested outline.

    Level-1 and level-2 headings become top-level entries. Each level-3
    heading is attached to the closest preceding top-level entry, or wrapped
    in a container when none exists yet. Source order is preserved and
    duplicate titles are kept.
    """
    outline: list[Heading] = []
    parent: Heading | None = None

    for line in markdown.split("\n"):
        match = _HEADING_LINE_RE.match(line)
        if not match:
            continue
        hashes, title = match.groups()
        heading = Heading(level=len(hashes), id=slugify(title), title=title)

        if heading.level < MAX_OUTLINE_LEVEL:
            heading.children = []
            parent = heading
            outline.append(heading)
        elif parent is None:
            parent = Heading(children=[heading])
            outline.append(parent)
        else:
            parent.children.append(heading)

    return outline


def demote_headings(markdown: str = "") -> str:
    """Push every heading down one level if the text has a level-1 heading.

    Headings of level 1 to 5 gain one ``#``. Text without a ``# `` line is
    returned unchanged.
    """
    if not _H1_RE.search(markdown):
        return markdown
    return _DEMOTABLE_RE.sub(lambda match: "#" + match.group(0), markdown)


def count_headings(headings: Iterable[Heading]) -> int:
    """Count headings in the outline, not counting containers."""
    total = 0
    for heading in headings:
        if not heading.is_container:
            total += 1
        total += count_headings(heading.children or [])
    return total


def render_toc(headings: Iterable[Heading], indent: int = 0) -> str:
    """Render the outline as a nested Markdown list of anchor links."""
    lines: list[str] = []
    for heading in headings:
        if heading.is_container:
            nested = render_toc(heading.children or [], indent)
        else:
            lines.append("  " * indent + f"- [{heading.title}](#{heading.id})")
            nested = render_toc(heading.children or [], indent + 1)
        if nested:
            lines.append(nested)
    return "\n".join(lines)
