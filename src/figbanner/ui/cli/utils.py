"""Helpers wiring CLI options to the rendering collaborators."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import typer

from figbanner.core.config import RenderSettings, load_settings
from figbanner.core.exceptions import ConfigError
from figbanner.core.preferences import JsonPreferenceStore, PreferenceStore
from figbanner.fonts.catalog import FontCatalog, resolve_font_source
from figbanner.fonts.renderer import GlyphRenderer
from figbanner.preview.snapshot import order_fonts

from .diagnostics import CliEmitter
from .state import emit_error, get_cli_state


DEFAULT_FONT = "standard"


@dataclass(slots=True)
class CliEnvironment:
    """Collaborators shared by every command."""

    settings: RenderSettings
    catalog: FontCatalog
    renderer: GlyphRenderer
    store: PreferenceStore
    emitter: CliEmitter

    def fonts(self) -> tuple[str, ...]:
        return self.catalog.list_fonts()

    def ordered_fonts(self) -> tuple[str, ...]:
        return order_fonts(self.fonts(), self.store.get_pinned_fonts())


def build_environment(
    *,
    fonts_dir: Path | None = None,
    config: Path | None = None,
    store: PreferenceStore | None = None,
) -> CliEnvironment:
    """Resolve settings, catalog, renderer and preference store for a command."""
    try:
        settings = load_settings(config, fonts_dir=fonts_dir)
    except ConfigError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    emitter = CliEmitter(get_cli_state())
    catalog = FontCatalog(resolve_font_source(settings.fonts_dir), emitter=emitter)
    return CliEnvironment(
        settings=settings,
        catalog=catalog,
        renderer=GlyphRenderer(catalog, width=settings.width),
        store=store or JsonPreferenceStore(),
        emitter=emitter,
    )


def pick_default_font(fonts: Sequence[str], pinned: Sequence[str]) -> str | None:
    """Return the first pinned font, ``standard`` or the first catalog font."""
    ordered = order_fonts(fonts, pinned)
    if not ordered:
        return None
    if ordered[0] in pinned:
        return ordered[0]
    if DEFAULT_FONT in ordered:
        return DEFAULT_FONT
    return ordered[0]


def require_font(fonts: Sequence[str], font: str) -> None:
    """Exit with an error when ``font`` is not part of ``fonts``."""
    if font not in fonts:
        emit_error(f"Unknown font '{font}'.")
        raise typer.Exit(code=1)


__all__ = [
    "DEFAULT_FONT",
    "CliEnvironment",
    "build_environment",
    "pick_default_font",
    "require_font",
]
