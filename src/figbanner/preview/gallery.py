"""Render a settled preview snapshot as a standalone HTML page."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from figbanner.preview.snapshot import PreviewSnapshot


TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
GALLERY_TEMPLATE = "gallery.html"


class GalleryWriter:
    """Render gallery pages with Jinja2."""

    def __init__(self, template_dir: Path = TEMPLATE_DIR) -> None:
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html"]),
            keep_trailing_newline=True,
        )

    def render(
        self,
        snapshot: PreviewSnapshot,
        *,
        text: str,
        pins: Iterable[str] = (),
        title: str = "ASCII Art Font Previews",
    ) -> str:
        """Return the HTML document for ``snapshot``."""
        pinned = set(pins)
        entries = [
            {
                "font": entry.font,
                "pinned": entry.font in pinned,
                "image": entry.light_image.data_uri,
                "raw": entry.raw.text,
            }
            for entry in snapshot.entries.values()
        ]
        template = self.env.get_template(GALLERY_TEMPLATE)
        return template.render(
            title=title,
            text=text,
            entries=entries,
            failures=sorted(snapshot.failures.items()),
        )

    def write(self, snapshot: PreviewSnapshot, destination: Path, **kwargs: object) -> Path:
        """Render ``snapshot`` into ``destination`` and return the path."""
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(self.render(snapshot, **kwargs), encoding="utf-8")  # type: ignore[arg-type]
        return destination


__all__ = ["GALLERY_TEMPLATE", "TEMPLATE_DIR", "GalleryWriter"]
