"""Implementation of the ``figbanner render`` command."""

from __future__ import annotations

import typer

from figbanner.core.exceptions import FontError
from figbanner.core.export import format_banner
from figbanner.preview.snapshot import normalize_text

from .._options import CommentStyleOption, ConfigOption, FontOption, FontsDirOption, TextArgument
from ..state import emit_error
from ..utils import build_environment, pick_default_font, require_font


def render(
    text: TextArgument = "",
    font: FontOption = None,
    comment_style: CommentStyleOption = None,
    fonts_dir: FontsDirOption = None,
    config: ConfigOption = None,
) -> None:
    """Render TEXT with one font and print the banner."""
    env = build_environment(fonts_dir=fonts_dir, config=config)
    fonts = env.fonts()
    pinned = env.store.get_pinned_fonts()

    chosen = font or pick_default_font(fonts, pinned)
    if chosen is None:
        emit_error("No fonts available.")
        raise typer.Exit(code=1)
    require_font(fonts, chosen)

    try:
        raw = env.renderer.render(normalize_text(text, env.settings.placeholder), chosen)
    except FontError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    style = comment_style or env.store.get_comment_style()
    typer.echo(format_banner(raw, style))


__all__ = ["render"]
