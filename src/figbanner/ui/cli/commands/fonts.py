"""Commands listing fonts and managing the pinned set."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich import box
from rich.table import Table
import typer

from figbanner.core.preferences import toggle_pin

from .._options import ConfigOption, FontsDirOption
from ..state import emit_warning, get_cli_state
from ..utils import build_environment, require_font


FontArgument = Annotated[str, typer.Argument(metavar="FONT", help="Font identifier.")]


def list_fonts(
    fonts_dir: FontsDirOption = None,
    config: ConfigOption = None,
) -> None:
    """Print the catalog in render order, pinned fonts first."""
    env = build_environment(fonts_dir=fonts_dir, config=config)
    pinned = set(env.store.get_pinned_fonts())
    ordered = env.ordered_fonts()

    table = Table(
        title="Available Fonts",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("#", justify="right")
    table.add_column("Font", style="magenta")
    table.add_column("Pinned", style="green")
    if not ordered:
        table.add_row("-", "No fonts found", "-")
    for index, font in enumerate(ordered, start=1):
        table.add_row(str(index), font, "yes" if font in pinned else "")

    get_cli_state().console.print(table)


def _set_pin(font: str, wanted: bool, fonts_dir: Path | None, config: Path | None) -> None:
    env = build_environment(fonts_dir=fonts_dir, config=config)
    require_font(env.fonts(), font)
    is_pinned = font in env.store.get_pinned_fonts()
    if is_pinned == wanted:
        state = "already pinned" if wanted else "not pinned"
        emit_warning(f"Font '{font}' is {state}.")
        return
    toggle_pin(env.store, font)
    action = "Pinned" if wanted else "Unpinned"
    typer.echo(f"{action} {font}")


def pin(
    font: FontArgument,
    fonts_dir: FontsDirOption = None,
    config: ConfigOption = None,
) -> None:
    """Pin FONT so it renders and lists before the others."""
    _set_pin(font, True, fonts_dir, config)


def unpin(
    font: FontArgument,
    fonts_dir: FontsDirOption = None,
    config: ConfigOption = None,
) -> None:
    """Remove FONT from the pinned set."""
    _set_pin(font, False, fonts_dir, config)


__all__ = ["list_fonts", "pin", "unpin"]
