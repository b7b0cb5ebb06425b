"""Incremental multi-font previews.

`RenderSession` drives debounced, chunked and cancellable renders and
publishes immutable `PreviewSnapshot` objects; `ImageEncoder` converts raw
banners into themed SVG payloads; `GalleryWriter` exports a settled snapshot
as HTML.
"""

from figbanner.preview.encoder import ImageEncoder, ImagePayload, ThemedImages, encode
from figbanner.preview.gallery import GalleryWriter
from figbanner.preview.orchestrator import RenderSession
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


__all__ = [
    "GalleryWriter",
    "GenerationState",
    "ImageEncoder",
    "ImagePayload",
    "PreviewEntry",
    "PreviewSnapshot",
    "RenderRequest",
    "RenderSession",
    "RenderStatus",
    "ThemedImages",
    "encode",
    "iter_chunks",
    "merge_snapshot",
    "normalize_text",
    "order_fonts",
]
