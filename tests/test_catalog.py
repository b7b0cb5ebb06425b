from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest

from figbanner.core.exceptions import CatalogReadError, FontLoadError
from figbanner.fonts.catalog import (
    BundledFontSource,
    DirectoryFontSource,
    FontCatalog,
    FontSource,
    resolve_font_source,
)


class RecordingEmitter:
    debug_enabled = False

    def __init__(self) -> None:
        self.warnings: list[tuple[str, BaseException | None]] = []
        self.events: list[tuple[str, dict[str, Any]]] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append((message, exc))

    def error(self, message: str, exc: BaseException | None = None) -> None:
        raise AssertionError(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


class ExplodingSource:
    def list_fonts(self) -> list[str]:
        raise OSError("disk unavailable")

    def read_descriptor(self, font: str) -> str:
        raise OSError("disk unavailable")


def test_directory_source_lists_sorted_stems(fonts_dir: Path) -> None:
    (fonts_dir / "notes.txt").write_text("ignored", encoding="utf-8")
    (fonts_dir / "slim.tlf").write_text("tlf2a", encoding="utf-8")
    source = DirectoryFontSource(fonts_dir)
    assert isinstance(source, FontSource)
    assert source.list_fonts() == ["ansi", "block", "broken", "slim"]


def test_directory_source_reads_latin1(tmp_path: Path) -> None:
    (tmp_path / "legacy.flf").write_bytes("flf2a caf\xe9".encode("latin-1"))
    assert DirectoryFontSource(tmp_path).read_descriptor("legacy") == "flf2a café"


def test_directory_source_rejects_paths(fonts_dir: Path) -> None:
    with pytest.raises(FontLoadError, match="Invalid font name"):
        DirectoryFontSource(fonts_dir).read_descriptor("../block")


def test_missing_font_raises_font_load_error(fonts_dir: Path) -> None:
    catalog = FontCatalog(DirectoryFontSource(fonts_dir))
    with pytest.raises(FontLoadError) as excinfo:
        catalog.read_descriptor("missing")
    assert excinfo.value.font == "missing"


def test_catalog_read_failure_degrades_to_empty() -> None:
    emitter = RecordingEmitter()
    catalog = FontCatalog(ExplodingSource(), emitter=emitter)

    assert catalog.list_fonts() == ()
    assert len(emitter.warnings) == 1
    message, exc = emitter.warnings[0]
    assert "disk unavailable" in message
    assert isinstance(exc, CatalogReadError)


def test_descriptor_failures_are_wrapped() -> None:
    catalog = FontCatalog(ExplodingSource())
    with pytest.raises(FontLoadError, match="Failed to load font block"):
        catalog.read_descriptor("block")


def test_empty_catalog_emits_event(tmp_path: Path) -> None:
    emitter = RecordingEmitter()
    catalog = FontCatalog(DirectoryFontSource(tmp_path), emitter=emitter)
    assert catalog.list_fonts() == ()
    assert [name for name, _ in emitter.events] == ["catalog_empty"]
    assert emitter.warnings == []


def test_catalog_deduplicates_preserving_order() -> None:
    class ListSource:
        def list_fonts(self) -> list[str]:
            return ["slant", "block", "slant"]

        def read_descriptor(self, font: str) -> str:
            return ""

    assert FontCatalog(ListSource()).list_fonts() == ("slant", "block")


def test_bundled_source_exposes_pyfiglet_fonts() -> None:
    source = BundledFontSource()
    fonts = source.list_fonts()
    assert "standard" in fonts
    assert source.read_descriptor("standard").startswith("flf2a")
    with pytest.raises(FontLoadError):
        source.read_descriptor("definitely-not-a-font")


def test_resolve_font_source(fonts_dir: Path) -> None:
    assert isinstance(resolve_font_source(None), BundledFontSource)
    resolved = resolve_font_source(fonts_dir)
    assert isinstance(resolved, DirectoryFontSource)
    assert resolved.root == fonts_dir
