from __future__ import annotations

from pathlib import Path

from figbanner.fonts.renderer import RawRendering
from figbanner.preview.encoder import encode
from figbanner.preview.gallery import GalleryWriter
from figbanner.preview.snapshot import PreviewEntry, PreviewSnapshot, merge_snapshot


def _snapshot() -> PreviewSnapshot:
    entries = []
    for font, line in (("pinned", "<P>"), ("plain", "P&P")):
        raw = RawRendering(font=font, lines=(line,))
        images = encode(raw)
        entries.append(
            PreviewEntry(font=font, raw=raw, light_image=images.light, dark_image=images.dark)
        )
    return merge_snapshot(PreviewSnapshot.empty(1), entries, {"broken": "bad header"}, settled=True)


def test_gallery_lists_entries_and_failures() -> None:
    html = GalleryWriter().render(_snapshot(), text="Hi", pins=["pinned"])

    assert "Total Fonts: 2 (1 skipped)" in html
    assert 'class="font-card pinned" id="font-pinned"' in html
    assert 'class="font-card" id="font-plain"' in html
    assert "broken: bad header" in html
    assert html.count("data:image/svg+xml;base64,") == 2


def test_gallery_escapes_raw_banners() -> None:
    html = GalleryWriter().render(_snapshot(), text="<b>")

    assert "&lt;P&gt;" in html
    assert "P&amp;P" in html
    assert "<code>&lt;b&gt;</code>" in html


def test_gallery_write_creates_parents(tmp_path: Path) -> None:
    destination = tmp_path / "site" / "index.html"

    written = GalleryWriter().write(_snapshot(), destination, text="Hi", title="Fonts")

    assert written == destination
    assert "<title>Fonts</title>" in destination.read_text(encoding="utf-8")
