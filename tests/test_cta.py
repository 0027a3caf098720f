"""Tests for call-to-action injection."""

from __future__ import annotations

from blogtext.cta import (
    CTA_1_PLACEHOLDER,
    CTA_1_TAG,
    CTA_2_PLACEHOLDER,
    CTA_2_TAG,
    inject_call_to_action,
)


class TestPlaceholders:
    """Explicit placeholders are swapped for tags in place."""

    def test_replaces_first_placeholder(self) -> None:
        markdown = f"intro\n{CTA_1_PLACEHOLDER}\nmore"

        assert inject_call_to_action(markdown) == f"intro\n{CTA_1_TAG}\nmore"

    def test_replaces_both_placeholders(self) -> None:
        markdown = f"a\n{CTA_1_PLACEHOLDER}\nb\n{CTA_2_PLACEHOLDER}\nc"

        assert inject_call_to_action(markdown) == f"a\n{CTA_1_TAG}\nb\n{CTA_2_TAG}\nc"

    def test_second_placeholder_alone_skips_fallback(self) -> None:
        markdown = f"## One\n{CTA_2_PLACEHOLDER}\n## Two"

        result = inject_call_to_action(markdown)

        assert result == f"## One\n{CTA_2_TAG}\n## Two"
        assert CTA_1_TAG not in result

    def test_only_first_occurrence_is_replaced(self) -> None:
        markdown = f"{CTA_1_PLACEHOLDER}\n{CTA_1_PLACEHOLDER}"

        result = inject_call_to_action(markdown)

        assert result == f"{CTA_1_TAG}\n{CTA_1_PLACEHOLDER}"
        assert result.count(CTA_1_TAG) == 1

    def test_placeholder_must_fill_the_whole_line(self) -> None:
        markdown = f"text {CTA_1_PLACEHOLDER}\n## One\n## Two"

        result = inject_call_to_action(markdown)

        assert result == f"text {CTA_1_PLACEHOLDER}\n## One\n{CTA_1_TAG}\n## Two"

    def test_already_injected_markdown_is_stable(self) -> None:
        markdown = f"## One\n{CTA_1_PLACEHOLDER}\n## Two"

        once = inject_call_to_action(markdown)

        assert once.count(CTA_1_TAG) == 1
        assert CTA_1_PLACEHOLDER not in once


class TestFallbackInsertion:
    """Without placeholders, CTA 1 goes before the second section."""

    def test_inserts_before_second_section(self) -> None:
        markdown = "## One\ntext\n## Two\nmore"

        assert inject_call_to_action(markdown) == f"## One\ntext\n{CTA_1_TAG}\n## Two\nmore"

    def test_deeper_headings_do_not_count(self) -> None:
        markdown = "## One\n### Sub\n## Two"

        assert inject_call_to_action(markdown) == f"## One\n### Sub\n{CTA_1_TAG}\n## Two"

    def test_single_section_is_a_no_op(self) -> None:
        markdown = "## Only\ntext"

        assert inject_call_to_action(markdown) == markdown

    def test_no_sections_is_a_no_op(self) -> None:
        assert inject_call_to_action("plain text") == "plain text"

    def test_empty_input(self) -> None:
        assert inject_call_to_action() == ""
