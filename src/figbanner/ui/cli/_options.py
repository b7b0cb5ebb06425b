"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from figbanner.core.export import CommentStyle


INPUTS_PANEL = "Input Handling"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

TextArgument = Annotated[
    str,
    typer.Argument(
        metavar="TEXT",
        help="Text to turn into a banner. Empty text renders the placeholder.",
        show_default=False,
    ),
]

FontOption = Annotated[
    str | None,
    typer.Option(
        "--font",
        "-f",
        help="Font to render with. Defaults to the first pinned font.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

FontsDirOption = Annotated[
    Path | None,
    typer.Option(
        "--fonts-dir",
        help="Directory of .flf/.tlf font files. Defaults to the fonts bundled with pyfiglet.",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="YAML settings file (chunk size, placeholder, preview metrics, ...).",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

CommentStyleOption = Annotated[
    CommentStyle | None,
    typer.Option(
        "--comment-style",
        "-c",
        case_sensitive=False,
        help="Wrap the banner in a comment. Defaults to the stored preference.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

GalleryOutputOption = Annotated[
    Path,
    typer.Option(
        "--output",
        "-o",
        help="HTML file receiving the previews.",
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
