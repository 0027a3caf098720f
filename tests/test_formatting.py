"""Tests for formatting helpers."""

from __future__ import annotations

import logging
from datetime import date, datetime
from unittest.mock import patch

import pytest

from blogtext.formatting import (
    customer_stories_per_page,
    format_post_date,
    get_initials,
    posts_per_page,
    trim_text,
)


class TestFormatPostDate:
    """Tests for format_post_date function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2023-03-05", "Mar 5, 2023"),
            ("2023-03-05T10:00:00Z", "Mar 5, 2023"),
            ("2023-11-30T23:59:59+02:00", "Nov 30, 2023"),
            ("Jan 1, 2020", "Jan 1, 2020"),
            ("September 9, 2021", "Sep 9, 2021"),
            ("2023/01/05", "Jan 5, 2023"),
            ("Tue Mar 07 2023", "Mar 7, 2023"),
            ("5 Jan 2023", "Jan 5, 2023"),
            ("Tue, 07 Mar 2023 10:00:00 +0000", "Mar 7, 2023"),
            (date(2024, 2, 29), "Feb 29, 2024"),
            (datetime(2019, 7, 4, 12, 30), "Jul 4, 2019"),
        ],
    )
    def test_formats_known_inputs(self, value: str | date, expected: str) -> None:
        assert format_post_date(value) == expected

    @pytest.mark.parametrize("value", [None, "", "not a date"])
    def test_falls_back_to_default_date(self, value: str | None) -> None:
        assert format_post_date(value) == "Dec 27, 2022"

    def test_no_argument_uses_default(self) -> None:
        assert format_post_date() == "Dec 27, 2022"

    def test_configured_default(self) -> None:
        with patch("blogtext.formatting.BLOGTEXT_DEFAULT_POST_DATE", "2020-01-15"):
            assert format_post_date() == "Jan 15, 2020"

    def test_broken_configured_default_uses_builtin(self) -> None:
        with patch("blogtext.formatting.BLOGTEXT_DEFAULT_POST_DATE", "garbage"):
            assert format_post_date() == "Dec 27, 2022"

    def test_logs_fallback(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="blogtext.formatting"):
            format_post_date("yesterday-ish")

        assert "yesterday-ish" in caplog.text


class TestPagination:
    """Tests for page size helpers."""

    def test_posts_per_page(self) -> None:
        assert posts_per_page() == 12

    def test_customer_stories_per_page(self) -> None:
        assert customer_stories_per_page() == 9

    def test_configured_page_size(self) -> None:
        with patch("blogtext.formatting.BLOGTEXT_POSTS_PER_PAGE", 24):
            assert posts_per_page() == 24


class TestTrimText:
    """Tests for trim_text function."""

    def test_trims_long_text(self) -> None:
        result = trim_text("a" * 200, 160)

        assert result == "a" * 157 + "..."
        assert len(result) == 160

    def test_default_length_is_160(self) -> None:
        assert len(trim_text("b" * 161)) == 160

    def test_text_at_limit_is_unchanged(self) -> None:
        text = "c" * 160
        assert trim_text(text) == text

    def test_short_text_is_unchanged(self) -> None:
        assert trim_text("short", 10) == "short"

    def test_tiny_limit_yields_only_ellipsis(self) -> None:
        assert trim_text("abcdef", 2) == "..."


class TestGetInitials:
    """Tests for get_initials function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("John Smith", "JS"),
            ("Prince", "P"),
            ("mary jane watson", "MW"),
            ("Ada ", "A"),
            ("", ""),
        ],
    )
    def test_initials(self, name: str, expected: str) -> None:
        assert get_initials(name) == expected
