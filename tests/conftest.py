"""Test setup for blogtext."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sample_post() -> str:
    """A small post with headings, emphasis, links, and a list."""
    return (
        "# Shipping Faster\n"
        "\n"
        "Teams that **ship often** learn _faster_.\n"
        "\n"
        "## Why it matters\n"
        "\n"
        "Read [the guide](https://example.com/guide) first.\n"
        "\n"
        "### Feedback loops\n"
        "\n"
        "- short cycles\n"
        "- small diffs\n"
        "\n"
        "## How to start\n"
        "\n"
        "Start `today`."
    )
