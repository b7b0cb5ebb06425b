"""Command showing or persisting the export comment style."""

from __future__ import annotations

from typing import Annotated

from rich import box
from rich.table import Table
import typer

from figbanner.core.export import CommentStyle
from figbanner.core.preferences import JsonPreferenceStore

from ..state import get_cli_state


StyleArgument = Annotated[
    CommentStyle | None,
    typer.Argument(
        metavar="STYLE",
        case_sensitive=False,
        help="Comment style to store. Omit to list the styles.",
        show_default=False,
    ),
]


def style(value: StyleArgument = None) -> None:
    """Show the comment styles or store STYLE as the default."""
    store = JsonPreferenceStore()
    if value is not None:
        store.set_comment_style(value)
        typer.echo(f"Comment style set to {value.value}")
        return

    current = store.get_comment_style()
    table = Table(title="Comment Styles", box=box.SQUARE, header_style="bold cyan")
    table.add_column("Style", style="magenta")
    table.add_column("Description")
    table.add_column("Active", style="green")
    for candidate in CommentStyle:
        table.add_row(candidate.value, candidate.label, "*" if candidate is current else "")
    get_cli_state().console.print(table)


__all__ = ["style"]
