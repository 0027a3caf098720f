"""Call-to-action placeholder injection for post Markdown."""

from __future__ import annotations

from typing import Final

CTA_1_PLACEHOLDER: Final[str] = "<!-- cta-1 -->"
CTA_2_PLACEHOLDER: Final[str] = "<!-- cta-2 -->"
CTA_1_TAG: Final[str] = "<amplicationcta1></amplicationcta1>"
CTA_2_TAG: Final[str] = "<amplicationcta2></amplicationcta2>"

_SECTION_PREFIX: Final[str] = "## "


def inject_call_to_action(markdown: str = "") -> str:
    """Replace CTA placeholders with their render tags.

    The first ``<!-- cta-1 -->`` and ``<!-- cta-2 -->`` lines are swapped for
    the CTA tags. When the post has neither placeholder, the first CTA is
    placed right before the second ``## `` section; posts with fewer than two
    sections are returned unchanged.
    """
    lines = markdown.split("\n")

    cta1_index = _find_line(lines, CTA_1_PLACEHOLDER)
    if cta1_index is not None:
        lines[cta1_index] = CTA_1_TAG

    cta2_index = _find_line(lines, CTA_2_PLACEHOLDER)
    if cta2_index is not None:
        lines[cta2_index] = CTA_2_TAG

    if cta1_index is None and cta2_index is None:
        section_index = _second_section_index(lines)
        if section_index is not None:
            lines.insert(section_index, CTA_1_TAG)

    return "\n".join(lines)


def _find_line(lines: list[str], target: str) -> int | None:
    try:
        return lines.index(target)
    except ValueError:
        return None


def _second_section_index(lines: list[str]) -> int | None:
    sections = [index for index, line in enumerate(lines) if line.startswith(_SECTION_PREFIX)]
    if len(sections) < 2:
        return None
    return sections[1]
