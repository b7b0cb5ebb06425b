"""Custom exception hierarchy for the banner rendering pipeline."""

from __future__ import annotations


__all__ = [
    "CatalogReadError",
    "ConfigError",
    "EncodeError",
    "FigbannerError",
    "FontError",
    "FontLoadError",
    "RenderError",
    "exception_hint",
    "exception_messages",
]


class FigbannerError(RuntimeError):
    """Base exception for banner rendering failures."""


class ConfigError(FigbannerError):
    """Raised when a settings file cannot be read or validated."""


class CatalogReadError(FigbannerError):
    """Raised when the font catalog cannot be enumerated."""


class FontError(FigbannerError):
    """Failure scoped to a single font of the catalog."""

    def __init__(self, font: str, message: str) -> None:
        super().__init__(message)
        self.font = font


class FontLoadError(FontError):
    """Raised when a font descriptor is missing or cannot be parsed."""


class RenderError(FontError):
    """Raised when text cannot be laid out with a font's glyph table."""


class EncodeError(FontError):
    """Raised when a rendering cannot be turned into an image payload."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None
