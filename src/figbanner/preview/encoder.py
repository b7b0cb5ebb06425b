"""Turn raw banners into themed SVG previews."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from xml.sax.saxutils import escape

from figbanner.core.config import ImageMetrics
from figbanner.core.exceptions import EncodeError
from figbanner.fonts.renderer import RawRendering


SVG_KIND = "image/svg+xml"

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}

# First baseline and left margin inside the canvas.
_ORIGIN_X = 10
_ORIGIN_Y = 20


@dataclass(frozen=True, slots=True)
class ImagePayload:
    """Self-describing embeddable image."""

    kind: str
    data: bytes

    @property
    def data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.kind};base64,{encoded}"

    def decode(self) -> str:
        return self.data.decode("utf-8")


@dataclass(frozen=True, slots=True)
class ThemedImages:
    """Light and dark variants of the same preview."""

    light: ImagePayload
    dark: ImagePayload


class ImageEncoder:
    """Render :class:`RawRendering` objects as monospace SVG documents."""

    def __init__(self, metrics: ImageMetrics | None = None) -> None:
        self.metrics = metrics or ImageMetrics()

    def dimensions(self, raw: RawRendering) -> tuple[int, int]:
        """Return the canvas ``(width, height)`` for ``raw``."""
        metrics = self.metrics
        width = raw.width * metrics.char_width + metrics.padding
        height = raw.height * metrics.line_height + metrics.padding
        return width, height

    def _svg(self, raw: RawRendering, color: str) -> str:
        width, height = self.dimensions(raw)
        metrics = self.metrics
        spans = []
        for index, line in enumerate(raw.lines):
            dy = 0 if index == 0 else metrics.line_height
            spans.append(
                f'<tspan x="{_ORIGIN_X}" dy="{dy}">{escape(line, _XML_ENTITIES)}</tspan>'
            )
        return "\n".join(
            [
                f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
                f'viewBox="0 0 {width} {height}">',
                "  <style>",
                "    text {",
                "      font-family: monospace;",
                f"      font-size: {metrics.font_size}px;",
                "      white-space: pre;",
                f"      fill: {color};",
                "    }",
                "  </style>",
                f'  <text x="{_ORIGIN_X}" y="{_ORIGIN_Y}" xml:space="preserve">'
                + "".join(spans)
                + "</text>",
                "</svg>",
            ]
        )

    def encode(self, raw: RawRendering) -> ThemedImages:
        """Return the light and dark previews of ``raw``."""
        if not raw.lines:
            raise EncodeError(raw.font, f"Rendering of {raw.font} has no lines to encode")
        try:
            light = self._svg(raw, self.metrics.light_color).encode("utf-8")
            dark = self._svg(raw, self.metrics.dark_color).encode("utf-8")
        except UnicodeEncodeError as exc:
            raise EncodeError(raw.font, f"Cannot encode rendering of {raw.font}: {exc}") from exc
        return ThemedImages(
            light=ImagePayload(kind=SVG_KIND, data=light),
            dark=ImagePayload(kind=SVG_KIND, data=dark),
        )


def encode(raw: RawRendering) -> ThemedImages:
    """Encode ``raw`` with the default metrics."""
    return ImageEncoder().encode(raw)


__all__ = ["SVG_KIND", "ImageEncoder", "ImagePayload", "ThemedImages", "encode"]
