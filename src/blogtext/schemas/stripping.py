"""Options and result types for Markdown stripping."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LIST_BULLET = "•"


@dataclass
class StripOptions:
    """Options for Markdown stripping.

    Attributes:
        strip_list_leaders: If True, remove leading list markers.
        list_unicode_char: Bullet that replaces a removed list marker. True
            selects the default bullet; False or "" drops the marker entirely.
        gfm: If True, also handle GitHub-flavored constructs (fenced code,
            strikethrough, setext underlines).
        use_img_alt_text: If True, images are replaced by their alt text,
            otherwise they are removed.
    """

    strip_list_leaders: bool = True
    list_unicode_char: bool | str = True
    gfm: bool = True
    use_img_alt_text: bool = True

    @property
    def list_bullet(self) -> str:
        if self.list_unicode_char is True:
            return DEFAULT_LIST_BULLET
        return self.list_unicode_char or ""


@dataclass(frozen=True)
class StripResult:
    """Outcome of running the stripping pipeline.

    Attributes:
        text: Stripped text. When a rule failed, the text as it was before
            that rule ran.
        complete: True when every rule ran.
        failed_rule: Name of the rule that raised, if any.
        error: Description of the error raised by ``failed_rule``.
    """

    text: str
    complete: bool = True
    failed_rule: str | None = None
    error: str | None = None
