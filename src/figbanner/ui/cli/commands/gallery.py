"""Render every font of the catalog into an HTML gallery."""

from __future__ import annotations

import asyncio

from rich import box
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table
import typer

from figbanner.preview.gallery import GalleryWriter
from figbanner.preview.orchestrator import RenderSession
from figbanner.preview.snapshot import PreviewSnapshot, normalize_text

from .._options import ConfigOption, FontsDirOption, GalleryOutputOption, TextArgument
from ..state import CLIState, emit_error, get_cli_state
from ..utils import build_environment


def _report_skipped(state: CLIState) -> None:
    failures = state.consume_events("font_failed")
    # With --verbose every failure was already reported as it happened.
    if not failures or state.verbosity >= 1:
        return
    table = Table(title="Skipped Fonts", box=box.SQUARE, header_style="bold yellow")
    table.add_column("Font", style="magenta")
    table.add_column("Reason")
    for payload in failures:
        table.add_row(str(payload.get("font", "")), str(payload.get("reason", "")))
    state.err_console.print(table)


def gallery(
    output: GalleryOutputOption,
    text: TextArgument = "",
    fonts_dir: FontsDirOption = None,
    config: ConfigOption = None,
) -> None:
    """Render TEXT with every font and write an HTML preview page."""
    state = get_cli_state()
    env = build_environment(fonts_dir=fonts_dir, config=config)
    fonts = env.fonts()
    if not fonts:
        emit_error("No fonts available.")
        raise typer.Exit(code=1)
    pinned = env.store.get_pinned_fonts()

    session = RenderSession(
        env.renderer,
        settings=env.settings,
        emitter=env.emitter,
        catalog=fonts,
        pins=pinned,
    )
    with Progress(
        SpinnerColumn(),
        TextColumn("[bold cyan]Rendering fonts"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
        TimeElapsedColumn(),
        console=state.err_console,
        transient=state.verbosity < 1,
    ) as progress:
        task_id = progress.add_task("render", total=len(fonts))

        def _advance(snapshot: PreviewSnapshot) -> None:
            done = len(snapshot.entries) + len(snapshot.failures)
            progress.update(task_id, completed=done)

        session.subscribe(on_snapshot=_advance)
        snapshot = asyncio.run(session.render(text))

    GalleryWriter().write(
        snapshot,
        output,
        text=normalize_text(text, env.settings.placeholder),
        pins=pinned,
    )
    _report_skipped(state)
    skipped = f" ({len(snapshot.failures)} skipped)" if snapshot.failures else ""
    typer.echo(f"Wrote {len(snapshot)} previews to {output}{skipped}")


__all__ = ["gallery"]
