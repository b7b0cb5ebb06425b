"""Enumerate FIGlet font descriptors available to the renderer."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

import pyfiglet

from figbanner.core.diagnostics import DiagnosticEmitter, NullEmitter
from figbanner.core.exceptions import CatalogReadError, FontLoadError


logger = logging.getLogger(__name__)

FONT_SUFFIXES = (".flf", ".tlf")


@runtime_checkable
class FontSource(Protocol):
    """Asset storage holding font descriptors."""

    def list_fonts(self) -> Sequence[str]: ...

    def read_descriptor(self, font: str) -> str: ...


class DirectoryFontSource:
    """Fonts stored as ``<name>.flf`` or ``<name>.tlf`` files in one directory."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"DirectoryFontSource({str(self.root)!r})"

    def _candidates(self, font: str) -> list[Path]:
        return [self.root / f"{font}{suffix}" for suffix in FONT_SUFFIXES]

    def list_fonts(self) -> list[str]:
        names = {
            path.stem
            for path in self.root.iterdir()
            if path.is_file() and path.suffix.lower() in FONT_SUFFIXES
        }
        return sorted(names)

    def read_descriptor(self, font: str) -> str:
        if not font or Path(font).name != font:
            raise FontLoadError(font, f"Invalid font name '{font}'")
        for candidate in self._candidates(font):
            if not candidate.is_file():
                continue
            payload = candidate.read_bytes()
            try:
                return payload.decode("utf-8")
            except UnicodeDecodeError:
                # Legacy fonts are frequently Latin-1 encoded.
                return payload.decode("latin-1")
        raise FontLoadError(font, f"Font '{font}' not found in {self.root}")


class BundledFontSource:
    """Fonts shipped with the pyfiglet distribution."""

    def __repr__(self) -> str:
        return "BundledFontSource()"

    def list_fonts(self) -> list[str]:
        return sorted(set(pyfiglet.FigletFont.getFonts()))

    def read_descriptor(self, font: str) -> str:
        try:
            return pyfiglet.FigletFont.preloadFont(font)
        except pyfiglet.FontNotFound as exc:
            raise FontLoadError(font, f"Font '{font}' is not bundled with pyfiglet") from exc


def resolve_font_source(fonts_dir: Path | None = None) -> FontSource:
    """Return the directory source when configured, the bundled fonts otherwise."""
    if fonts_dir is not None:
        return DirectoryFontSource(fonts_dir)
    return BundledFontSource()


class FontCatalog:
    """Soft-failing view over a :class:`FontSource`.

    Listing never raises: a broken source degrades to an empty catalog and
    a warning routed through the diagnostic emitter.
    """

    def __init__(self, source: FontSource, *, emitter: DiagnosticEmitter | None = None) -> None:
        self.source = source
        self._emitter = emitter or NullEmitter()

    def list_fonts(self) -> tuple[str, ...]:
        """Return the unique font identifiers in source order."""
        try:
            fonts = tuple(dict.fromkeys(str(font) for font in self.source.list_fonts()))
        except Exception as exc:
            error = CatalogReadError(f"Unable to list fonts from {self.source!r}: {exc}")
            error.__cause__ = exc
            logger.info("%s", error)
            self._emitter.warning(str(error), error)
            return ()
        if not fonts:
            self._emitter.event("catalog_empty", {"location": repr(self.source)})
        logger.debug("Catalog %r lists %d fonts", self.source, len(fonts))
        return fonts

    def read_descriptor(self, font: str) -> str:
        """Return the descriptor text of ``font``, raising :class:`FontLoadError`."""
        try:
            return self.source.read_descriptor(font)
        except FontLoadError:
            raise
        except Exception as exc:
            raise FontLoadError(font, f"Failed to load font {font}: {exc}") from exc


__all__ = [
    "BundledFontSource",
    "DirectoryFontSource",
    "FontCatalog",
    "FontSource",
    "resolve_font_source",
]
