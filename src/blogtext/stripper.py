"""Strip Markdown formatting down to plain text.

The stripper is an ordered pipeline of named regex rewrites. Order matters:
each rule sees the output of the previous one. Rules compiled without
``re.MULTILINE`` anchor to the whole input rather than to each line.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable

from blogtext.exceptions import RewriteError
from blogtext.schemas import StripOptions, StripResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RewriteRule:
    """A single named ``str -> str`` rewrite step."""

    name: str
    pattern: re.Pattern[str]
    replacement: str | Callable[[re.Match[str]], str]

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


_HORIZONTAL_RULE_RE = re.compile(r"^(-\s*?|\*\s*?|_\s*?){3,}\s*$", re.MULTILINE)
_LIST_LEADER_RE = re.compile(r"^([\s\t]*)([*\-+]|\d+\.)\s+", re.MULTILINE)

_GFM_RULES = (
    RewriteRule("gfm_setext_headers", re.compile(r"\n={2,}"), "\n"),
    RewriteRule("gfm_tilde_fences", re.compile(r"~{3}.*\n"), ""),
    RewriteRule("gfm_strikethrough", re.compile(r"~~"), ""),
    RewriteRule("gfm_backtick_fences", re.compile(r"`{3}.*\n"), ""),
)

_HEADER_HASHES = RewriteRule("headers_hashes", re.compile(r"#"), "")
_HTML_TAGS = RewriteRule("html_tags", re.compile(r"<[^>]*>"), "")
_SETEXT_HEADERS = RewriteRule("setext_headers", re.compile(r"^[=\-]{2,}\s*\Z"), "")
_FOOTNOTES = RewriteRule("footnotes", re.compile(r"\[\^.+?\](?:: .*?\Z)?"), "")
_FOOTNOTE_DEFINITIONS = RewriteRule(
    "footnote_definitions", re.compile(r"\s{0,2}\[.*?\]: .*?\Z"), ""
)
_IMAGE_RE = re.compile(r"!\[(.*?)\][\[(].*?[\])]")
_INLINE_LINKS = RewriteRule("inline_links", re.compile(r"\[(.*?)\][\[(].*?[\])]"), r"\1")
_BLOCKQUOTES = RewriteRule("blockquotes", re.compile(r"^\s{0,3}>\s?"), "")
_REFERENCE_LINKS = RewriteRule(
    "reference_links", re.compile(r"^\s{1,2}\[(.*?)\]: (\S+)( \".*?\")?\s*\Z"), ""
)
_ATX_HEADERS = RewriteRule(
    "atx_headers",
    re.compile(
        r"^(\n)?\s{0,}#{1,6}\s+| {0,}(\n)?\s{0,}#{0,} {0,}(\n)?\s{0,}$", re.MULTILINE
    ),
    r"\1\2\3",
)
_EMPHASIS_RE = re.compile(r"([*_]{1,3})(\S.*?\S{0,1})\1")
_CODE_BLOCKS = RewriteRule("code_blocks", re.compile(r"(`{3,})(.*?)\1", re.MULTILINE), r"\2")
_INLINE_CODE = RewriteRule("inline_code", re.compile(r"`(.+?)`"), r"\1")
_NEWLINES = RewriteRule("newlines", re.compile(r"\n{2,}"), "\n\n")
_WHITESPACE = RewriteRule("whitespace", re.compile(r"\s+"), " ")


def build_rules(options: StripOptions | None = None) -> list[RewriteRule]:
    """Build the ordered rewrite pipeline for *options*."""
    opts = options or StripOptions()
    rules = [RewriteRule("horizontal_rules", _HORIZONTAL_RULE_RE, "")]

    if opts.strip_list_leaders:
        bullet = opts.list_bullet
        if bullet:
            rules.append(
                RewriteRule(
                    "list_leaders",
                    _LIST_LEADER_RE,
                    lambda match: f"{bullet} {match.group(1)}",
                )
            )
        else:
            rules.append(RewriteRule("list_leaders", _LIST_LEADER_RE, r"\1"))

    if opts.gfm:
        rules.extend(_GFM_RULES)

    rules.extend(
        [
            _HEADER_HASHES,
            _HTML_TAGS,
            _SETEXT_HEADERS,
            _FOOTNOTES,
            _FOOTNOTE_DEFINITIONS,
            RewriteRule("images", _IMAGE_RE, r"\1" if opts.use_img_alt_text else ""),
            _INLINE_LINKS,
            _BLOCKQUOTES,
            _REFERENCE_LINKS,
            _ATX_HEADERS,
            # Applied twice so "***a***"-style nesting unwraps fully.
            RewriteRule("emphasis", _EMPHASIS_RE, r"\2"),
            RewriteRule("emphasis_nested", _EMPHASIS_RE, r"\2"),
            _CODE_BLOCKS,
            _INLINE_CODE,
            _NEWLINES,
            _WHITESPACE,
        ]
    )
    return rules


def apply_rules(text: str, rules: Iterable[RewriteRule]) -> StripResult:
    """Run *rules* over *text* in order, stopping at the first failure.

    A failing rule is logged and the text produced by the rules before it is
    returned with ``complete=False``. Input that is not a string cannot be
    partially rewritten, so its result text is empty.
    """
    for rule in rules:
        try:
            text = rule.apply(text)
        except Exception as exc:
            error = RewriteError(rule.name, exc)
            logger.exception("%s", error)
            return StripResult(
                text=text if isinstance(text, str) else "",
                complete=False,
                failed_rule=rule.name,
                error=str(error),
            )
    return StripResult(text=text)


def strip_markdown_result(text: str, options: StripOptions | None = None) -> StripResult:
    """Strip Markdown from *text* and report whether every rule ran."""
    return apply_rules(text, build_rules(options))


def strip_markdown(text: str, options: StripOptions | None = None) -> str:
    """Convert Markdown-formatted *text* to plain text.

    Never raises: if a rule fails, the error is logged and the partially
    stripped text is returned. Use :func:`strip_markdown_result` to tell the
    two outcomes apart.

    >>> strip_markdown("# Title\\n\\nSome **bold** text.")
    ' Title Some bold text.'
    """
    return strip_markdown_result(text, options).text
