"""Lay out text with a single FIGlet font.

Every call reads and parses its own descriptor into a private
:class:`ParsedFont`, so concurrent renders never share font state.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

import pyfiglet

from figbanner.core.exceptions import FontLoadError, RenderError
from figbanner.fonts.catalog import FontCatalog, FontSource


logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 1000


@dataclass(frozen=True, slots=True)
class RawRendering:
    """Literal ASCII output of one font."""

    font: str
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def width(self) -> int:
        return max((len(line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        return len(self.lines)


class ParsedFont(pyfiglet.FigletFont):
    """FIGlet font built from descriptor text instead of the pyfiglet registry."""

    def __init__(self, name: str, data: str) -> None:
        self.font = name
        self.comment = ""
        self.chars = {}
        self.width = {}
        self.data = data
        self.loadFont()

    def supports(self, char: str) -> bool:
        # Zero-width FIGcharacters stand for missing glyphs.
        code = ord(char)
        return code in self.chars and self.width.get(code, 0) > 0


class _FontLayout(pyfiglet.Figlet):
    """Figlet engine bound to an already parsed font."""

    def __init__(self, font: ParsedFont, *, width: int) -> None:
        self._parsed = font
        super().__init__(font=font.font, width=width)

    def setFont(self, **kwargs: object) -> None:  # noqa: N802 - pyfiglet API
        self.Font = self._parsed


def parse_font(font: str, descriptor: str) -> ParsedFont:
    """Parse ``descriptor`` into a fresh font object."""
    try:
        return ParsedFont(font, descriptor)
    except pyfiglet.FontError as exc:
        raise FontLoadError(font, f"Invalid font descriptor for {font}: {exc}") from exc
    except (IndexError, KeyError, ValueError) as exc:
        raise FontLoadError(font, f"Corrupt font descriptor for {font}: {exc}") from exc


def _trim_lines(output: str) -> tuple[str, ...]:
    lines = output.split("\n")
    while lines and not lines[-1].strip():
        lines.pop()
    return tuple(lines)


class GlyphRenderer:
    """Render text with fonts read from a catalog."""

    def __init__(self, catalog: FontCatalog | FontSource, *, width: int = DEFAULT_WIDTH) -> None:
        self.catalog = catalog if isinstance(catalog, FontCatalog) else FontCatalog(catalog)
        self.width = width

    def load(self, font: str) -> ParsedFont:
        """Read and parse the descriptor of ``font``."""
        descriptor = self.catalog.read_descriptor(font)
        return parse_font(font, descriptor)

    def render(self, text: str, font: str) -> RawRendering:
        """Return the banner for ``text`` drawn with ``font``."""
        parsed = self.load(font)
        missing = sorted({char for char in text if char != "\n" and not parsed.supports(char)})
        if missing:
            listed = ", ".join(repr(char) for char in missing)
            raise RenderError(font, f"Font {font} has no glyph for {listed}")
        try:
            output = _FontLayout(parsed, width=self.width).renderText(text)
        except Exception as exc:
            raise RenderError(font, f"Failed to render text with {font}: {exc}") from exc
        lines = _trim_lines(str(output))
        if not lines:
            raise RenderError(font, f"Font {font} produced no output")
        logger.debug("Rendered %d lines with %s", len(lines), font)
        return RawRendering(font=font, lines=lines)


__all__ = ["DEFAULT_WIDTH", "GlyphRenderer", "ParsedFont", "RawRendering", "parse_font"]
