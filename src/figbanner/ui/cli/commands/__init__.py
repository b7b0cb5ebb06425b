"""CLI command implementations exposed via `figbanner.ui.cli`."""

from __future__ import annotations

from .fonts import list_fonts, pin, unpin
from .gallery import gallery
from .render import render
from .style import style


__all__ = ["gallery", "list_fonts", "pin", "render", "style", "unpin"]
