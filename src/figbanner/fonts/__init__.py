"""Font toolchain façade used to turn text into raw ASCII banners.

Architecture
: `FontSource` implementations expose FIGlet descriptors either from a
  directory of `.flf`/`.tlf` files or from the fonts bundled with pyfiglet.
: `FontCatalog` wraps a source and never raises while listing, so a broken
  asset location degrades to an empty catalog plus a warning.
: `GlyphRenderer` parses the descriptor of each requested font on every call
  and lays out text with it, raising `FontLoadError` or `RenderError` for
  that font only.
"""

from figbanner.fonts.catalog import (
    BundledFontSource,
    DirectoryFontSource,
    FontCatalog,
    FontSource,
    resolve_font_source,
)
from figbanner.fonts.renderer import GlyphRenderer, ParsedFont, RawRendering, parse_font


__all__ = [
    "BundledFontSource",
    "DirectoryFontSource",
    "FontCatalog",
    "FontSource",
    "GlyphRenderer",
    "ParsedFont",
    "RawRendering",
    "parse_font",
    "resolve_font_source",
]
