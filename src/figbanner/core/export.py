"""Comment styles applied when a rendered banner is exported."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from figbanner.fonts.renderer import RawRendering


__all__ = ["CommentStyle", "format_banner"]


class CommentStyle(str, Enum):
    """Closed set of comment wrappers for exported banners."""

    NONE = "none"
    SLASH = "slash"
    HASH = "hash"
    BLOCK = "block"
    HTML = "html"

    @property
    def label(self) -> str:
        return _STYLES[self][0]

    @property
    def line_prefix(self) -> str:
        return _STYLES[self][1]

    @property
    def block_prefix(self) -> str:
        return _STYLES[self][2]

    @property
    def block_suffix(self) -> str:
        return _STYLES[self][3]

    @property
    def is_line_style(self) -> bool:
        return bool(self.line_prefix)

    @classmethod
    def parse(cls, value: str | CommentStyle) -> CommentStyle:
        """Return the style named by ``value`` (case-insensitive)."""
        if isinstance(value, CommentStyle):
            return value
        key = str(value).strip().casefold()
        for style in cls:
            if style.value == key:
                return style
        choices = ", ".join(style.value for style in cls)
        raise ValueError(f"Unknown comment style '{value}' (expected one of: {choices})")


# label, line prefix, block prefix, block suffix
_STYLES: dict[CommentStyle, tuple[str, str, str, str]] = {
    CommentStyle.NONE: ("No Comment", "", "", ""),
    CommentStyle.SLASH: ("// (JS, C++, etc.)", "// ", "", ""),
    CommentStyle.HASH: ("# (Bash, Py, etc.)", "# ", "", ""),
    CommentStyle.BLOCK: ("/* */ (CSS, JS)", "", "/*\n", "\n*/"),
    CommentStyle.HTML: ("<!-- --> (HTML)", "", "<!--\n", "\n-->"),
}


def format_banner(raw: RawRendering | str, style: CommentStyle | str) -> str:
    """Return ``raw`` wrapped in the requested comment style.

    Line styles prefix every line independently, block styles wrap the whole
    banner once and leave interior lines untouched.
    """
    text = raw if isinstance(raw, str) else raw.text
    resolved = CommentStyle.parse(style)
    if resolved.is_line_style:
        return "\n".join(f"{resolved.line_prefix}{line}" for line in text.split("\n"))
    return f"{resolved.block_prefix}{text}{resolved.block_suffix}"
