"""Primary public API for figbanner."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from figbanner.core.config import ImageMetrics, RenderSettings, load_settings
from figbanner.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from figbanner.core.exceptions import (
    CatalogReadError,
    ConfigError,
    EncodeError,
    FigbannerError,
    FontError,
    FontLoadError,
    RenderError,
)
from figbanner.core.export import CommentStyle, format_banner
from figbanner.core.preferences import (
    JsonPreferenceStore,
    MemoryPreferenceStore,
    PreferenceStore,
    toggle_pin,
)
from figbanner.core.user_dir import (
    FigbannerUserDir,
    configure_user_dir,
    get_user_dir,
    user_dir_context,
)
from figbanner.fonts import (
    BundledFontSource,
    DirectoryFontSource,
    FontCatalog,
    FontSource,
    GlyphRenderer,
    RawRendering,
    resolve_font_source,
)
from figbanner.preview import (
    GalleryWriter,
    GenerationState,
    ImageEncoder,
    ImagePayload,
    PreviewEntry,
    PreviewSnapshot,
    RenderRequest,
    RenderSession,
    RenderStatus,
    ThemedImages,
    normalize_text,
    order_fonts,
)


try:
    __version__ = _pkg_version("figbanner")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "BundledFontSource",
    "CatalogReadError",
    "CommentStyle",
    "ConfigError",
    "DiagnosticEmitter",
    "DirectoryFontSource",
    "EncodeError",
    "FigbannerError",
    "FigbannerUserDir",
    "FontCatalog",
    "FontError",
    "FontLoadError",
    "FontSource",
    "GalleryWriter",
    "GenerationState",
    "GlyphRenderer",
    "ImageEncoder",
    "ImageMetrics",
    "ImagePayload",
    "JsonPreferenceStore",
    "LoggingEmitter",
    "MemoryPreferenceStore",
    "NullEmitter",
    "PreferenceStore",
    "PreviewEntry",
    "PreviewSnapshot",
    "RawRendering",
    "RenderError",
    "RenderRequest",
    "RenderSession",
    "RenderSettings",
    "RenderStatus",
    "ThemedImages",
    "__version__",
    "configure_user_dir",
    "format_banner",
    "get_user_dir",
    "load_settings",
    "normalize_text",
    "order_fonts",
    "resolve_font_source",
    "toggle_pin",
    "user_dir_context",
]
