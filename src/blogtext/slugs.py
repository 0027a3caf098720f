"""Slug generation for headings and post URLs."""

from __future__ import annotations

import re

from text_unidecode import unidecode

SEPARATOR = "-"

# Symbols that transliteration would otherwise drop or abbreviate.
_CHARMAP = {
    "&": "and",
    "%": "percent",
    "$": "dollar",
    "€": "euro",
    "£": "pound",
    "¥": "yen",
    "<": "less",
    ">": "greater",
    "|": "or",
    "♥": "love",
    "∞": "infinity",
}

_STRICT_RE = re.compile(r"[^A-Za-z0-9\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def slugify(text: str) -> str:
    """Convert *text* to a lowercase, hyphen-separated URL slug.

    Letters from any script are transliterated to ASCII first. Anything that
    is then not an ASCII letter, digit or whitespace is removed, and
    whitespace runs become a single hyphen.

    >>> slugify("Q&A: Déjà Vu, Part 2")
    'qanda-deja-vu-part-2'
    >>> slugify("Привет мир")
    'privet-mir'
    """
    mapped = "".join(_CHARMAP.get(char, char) for char in text)
    ascii_text = unidecode(mapped).replace(SEPARATOR, " ")
    slug = _STRICT_RE.sub("", ascii_text).strip()
    return _WHITESPACE_RE.sub(SEPARATOR, slug).lower()
