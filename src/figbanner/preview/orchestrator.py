"""Debounced, chunked and cancellable rendering across a whole font catalog.

Architecture
: Every text change, catalog change or pin change supersedes the running
  *generation* by bumping a monotonic counter. Coroutines belonging to an
  older generation notice the mismatch at their next suspension point and
  stop without touching the published snapshot.
: A pending debounce timer is cancelled outright. A generation that already
  started rendering is never preempted mid-chunk; its in-flight renders
  finish in their worker threads and their results are dropped.
: Fonts are rendered in chunks. All fonts of a chunk run concurrently in
  worker threads, the chunk is joined, the successful entries are merged into
  the snapshot and the snapshot is published. A short sleep between chunks
  keeps the event loop responsive.
: The snapshot is only written by the session coroutine once a chunk has
  joined, so render workers never share mutable state.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine, Iterable, Sequence
import logging
from typing import Any

from figbanner.core.config import RenderSettings
from figbanner.core.diagnostics import DiagnosticEmitter, NullEmitter
from figbanner.core.exceptions import EncodeError, exception_hint
from figbanner.fonts.renderer import GlyphRenderer
from figbanner.preview.encoder import ImageEncoder
from figbanner.preview.snapshot import (
    GenerationState,
    PreviewEntry,
    PreviewSnapshot,
    RenderRequest,
    RenderStatus,
    iter_chunks,
    merge_snapshot,
    normalize_text,
    order_fonts,
)


logger = logging.getLogger(__name__)

SnapshotListener = Callable[[PreviewSnapshot], None]
StatusListener = Callable[[RenderStatus], None]


def _loop_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class RenderSession:
    """Render the current text against every font, pinned fonts first."""

    def __init__(
        self,
        renderer: GlyphRenderer,
        encoder: ImageEncoder | None = None,
        *,
        settings: RenderSettings | None = None,
        emitter: DiagnosticEmitter | None = None,
        catalog: Sequence[str] = (),
        pins: Iterable[str] = (),
    ) -> None:
        self.settings = settings or RenderSettings()
        self.renderer = renderer
        self.encoder = encoder or ImageEncoder(self.settings.images)
        self._emitter = emitter or NullEmitter()
        self._catalog: tuple[str, ...] = tuple(dict.fromkeys(catalog))
        self._pins: frozenset[str] = frozenset(pins)
        self._font_order = order_fonts(self._catalog, self._pins)
        self._text = ""
        self._generation = 0
        self._snapshot = PreviewSnapshot.empty()
        self._status = RenderStatus(0, GenerationState.IDLE)
        self._snapshot_listeners: list[SnapshotListener] = []
        self._status_listeners: list[StatusListener] = []
        self._timer: asyncio.Task[None] | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    # ------------------------------------------------------------------
    # Read-only state

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def snapshot(self) -> PreviewSnapshot:
        """Last published snapshot.

        A new generation publishes nothing until its first chunk joins, so
        until then this still returns the previous generation's snapshot.
        """
        return self._snapshot

    @property
    def status(self) -> RenderStatus:
        return self._status

    @property
    def text(self) -> str:
        return self._text

    @property
    def catalog(self) -> tuple[str, ...]:
        return self._catalog

    @property
    def pins(self) -> frozenset[str]:
        return self._pins

    @property
    def font_order(self) -> tuple[str, ...]:
        return self._font_order

    # ------------------------------------------------------------------
    # Subscriptions

    def subscribe(
        self,
        on_snapshot: SnapshotListener | None = None,
        on_status: StatusListener | None = None,
    ) -> Callable[[], None]:
        """Register listeners and return a callable removing them again."""
        if on_snapshot is not None:
            self._snapshot_listeners.append(on_snapshot)
        if on_status is not None:
            self._status_listeners.append(on_status)

        def _unsubscribe() -> None:
            if on_snapshot is not None and on_snapshot in self._snapshot_listeners:
                self._snapshot_listeners.remove(on_snapshot)
            if on_status is not None and on_status in self._status_listeners:
                self._status_listeners.remove(on_status)

        return _unsubscribe

    def _publish(self, snapshot: PreviewSnapshot) -> None:
        self._snapshot = snapshot
        for listener in list(self._snapshot_listeners):
            listener(snapshot)

    def _set_status(self, generation: int, state: GenerationState) -> None:
        self._status = RenderStatus(generation, state)
        for listener in list(self._status_listeners):
            listener(self._status)

    # ------------------------------------------------------------------
    # Inputs

    def update_text(self, text: str) -> None:
        """Record a raw text change and restart the debounce timer.

        Must be called from a running event loop.
        """
        self._text = text
        self._schedule()

    def set_catalog(self, fonts: Sequence[str]) -> None:
        """Replace the known font set.

        An active session renders again when called from a running loop;
        otherwise only the font order is updated.
        """
        self._catalog = tuple(dict.fromkeys(fonts))
        self._font_order = order_fonts(self._catalog, self._pins)
        if self._generation and _loop_running():
            self._schedule()

    def set_pins(self, pins: Iterable[str]) -> None:
        """Replace the pinned set, rendering again like :meth:`set_catalog`."""
        self._pins = frozenset(pins)
        self._font_order = order_fonts(self._catalog, self._pins)
        if self._generation and _loop_running():
            self._schedule()

    async def render(self, text: str) -> PreviewSnapshot:
        """Render ``text`` right away and return the generation's snapshot.

        The returned snapshot has ``settled`` unset when a newer generation
        superseded this one before every chunk completed.
        """
        self._text = text
        generation = self._supersede()
        return await self._run(self._build_request(generation))

    async def wait_idle(self) -> None:
        """Wait until no debounce timer or render is pending."""
        while self._tasks:
            results = await asyncio.gather(*list(self._tasks), return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    raise result

    def close(self) -> None:
        """Cancel every pending timer and render."""
        self._supersede()
        for task in list(self._tasks):
            task.cancel()

    # ------------------------------------------------------------------
    # Generation handling

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _supersede(self) -> int:
        previous = self._generation
        self._generation += 1
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None
        if self._status.generation == previous and self._status.state.loading:
            self._set_status(previous, GenerationState.CANCELLED)
        return self._generation

    def _spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _schedule(self) -> None:
        # Fail before touching the generation when no loop can run the timer.
        asyncio.get_running_loop()
        generation = self._supersede()
        self._set_status(generation, GenerationState.DEBOUNCING)
        self._timer = self._spawn(self._debounce(generation))

    async def _debounce(self, generation: int) -> None:
        await asyncio.sleep(self.settings.debounce)
        if not self._is_current(generation):
            return
        # Past this point the generation is only stopped cooperatively.
        self._timer = None
        await self._run(self._build_request(generation))

    def _build_request(self, generation: int) -> RenderRequest:
        return RenderRequest(
            generation=generation,
            text=normalize_text(self._text, self.settings.placeholder),
            font_order=self._font_order,
        )

    async def _run(self, request: RenderRequest) -> PreviewSnapshot:
        generation = request.generation
        self._set_status(generation, GenerationState.RENDERING)
        snapshot = PreviewSnapshot.empty(generation)
        logger.debug(
            "Generation %d: rendering %r with %d fonts",
            generation,
            request.text,
            len(request.font_order),
        )

        for index, chunk in enumerate(iter_chunks(request.font_order, self.settings.chunk_size)):
            if index:
                await asyncio.sleep(self.settings.yield_delay)
            if not self._is_current(generation):
                logger.debug("Generation %d cancelled before chunk %d", generation, index)
                return snapshot

            results = await asyncio.gather(
                *(self._render_font(request.text, font) for font in chunk),
                return_exceptions=True,
            )
            if not self._is_current(generation):
                logger.debug("Generation %d cancelled during chunk %d", generation, index)
                return snapshot

            entries: list[PreviewEntry] = []
            failures: dict[str, str] = {}
            for font, result in zip(chunk, results):
                if isinstance(result, PreviewEntry):
                    entries.append(result)
                elif isinstance(result, Exception):
                    failures[font] = self._report_failure(font, result)
                else:
                    raise result
            snapshot = merge_snapshot(snapshot, entries, failures)
            self._publish(snapshot)

        return self._settle(snapshot)

    def _settle(self, snapshot: PreviewSnapshot) -> PreviewSnapshot:
        snapshot = merge_snapshot(snapshot, settled=True)
        self._publish(snapshot)
        self._set_status(snapshot.generation, GenerationState.SETTLED)
        self._emitter.event(
            "generation_settled",
            {
                "generation": snapshot.generation,
                "rendered": len(snapshot.entries),
                "failed": len(snapshot.failures),
            },
        )
        return snapshot

    # ------------------------------------------------------------------
    # Per-font work

    async def _render_font(self, text: str, font: str) -> PreviewEntry:
        call = asyncio.to_thread(self._build_entry, text, font)
        if self.settings.font_timeout is None:
            return await call
        return await asyncio.wait_for(call, self.settings.font_timeout)

    def _build_entry(self, text: str, font: str) -> PreviewEntry:
        raw = self.renderer.render(text, font)
        try:
            images = self.encoder.encode(raw)
        except EncodeError:
            raise
        except Exception as exc:
            raise EncodeError(font, f"Failed to encode preview for {font}: {exc}") from exc
        return PreviewEntry(font=font, raw=raw, light_image=images.light, dark_image=images.dark)

    def _report_failure(self, font: str, exc: Exception) -> str:
        if isinstance(exc, asyncio.TimeoutError):
            reason = f"timed out after {self.settings.font_timeout}s"
        else:
            reason = exception_hint(exc) or type(exc).__name__
        logger.info("Failed to render font %s: %s", font, reason)
        self._emitter.event("font_failed", {"font": font, "reason": reason})
        return reason


__all__ = ["RenderSession", "SnapshotListener", "StatusListener"]
