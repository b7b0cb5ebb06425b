"""Persistence of the comment style and pinned fonts across sessions."""

from __future__ import annotations

from collections.abc import Iterable
import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from figbanner.core.export import CommentStyle
from figbanner.core.user_dir import get_user_dir


logger = logging.getLogger(__name__)

PREFERENCES_FILENAME = "preferences.json"


@runtime_checkable
class PreferenceStore(Protocol):
    """Key-value collaborator holding user choices."""

    def get_comment_style(self) -> CommentStyle: ...

    def set_comment_style(self, style: CommentStyle) -> None: ...

    def get_pinned_fonts(self) -> tuple[str, ...]: ...

    def set_pinned_fonts(self, fonts: Iterable[str]) -> None: ...


def _unique(fonts: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(str(font) for font in fonts))


class MemoryPreferenceStore:
    """In-process store used when nothing should touch the disk."""

    def __init__(
        self,
        *,
        comment_style: CommentStyle = CommentStyle.NONE,
        pinned: Iterable[str] = (),
    ) -> None:
        self._style = comment_style
        self._pinned = _unique(pinned)

    def get_comment_style(self) -> CommentStyle:
        return self._style

    def set_comment_style(self, style: CommentStyle) -> None:
        self._style = CommentStyle.parse(style)

    def get_pinned_fonts(self) -> tuple[str, ...]:
        return self._pinned

    def set_pinned_fonts(self, fonts: Iterable[str]) -> None:
        self._pinned = _unique(fonts)


class JsonPreferenceStore:
    """Store preferences in a small JSON document under the user directory."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or get_user_dir().data_path(PREFERENCES_FILENAME)

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Failed to parse preferences at %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _store(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")

    def get_comment_style(self) -> CommentStyle:
        value = self._load().get("comment_style")
        if value is None:
            return CommentStyle.NONE
        try:
            return CommentStyle.parse(value)
        except ValueError:
            logger.warning("Ignoring unknown stored comment style %r", value)
            return CommentStyle.NONE

    def set_comment_style(self, style: CommentStyle) -> None:
        self._store("comment_style", CommentStyle.parse(style).value)

    def get_pinned_fonts(self) -> tuple[str, ...]:
        value = self._load().get("pinned_fonts")
        if value is None:
            return ()
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            logger.warning("Failed to parse pinned fonts in %s", self.path)
            return ()
        return _unique(value)

    def set_pinned_fonts(self, fonts: Iterable[str]) -> None:
        self._store("pinned_fonts", list(_unique(fonts)))


def toggle_pin(store: PreferenceStore, font: str) -> bool:
    """Flip the pinned state of ``font`` and return the new state."""
    pinned = list(store.get_pinned_fonts())
    if font in pinned:
        pinned.remove(font)
        store.set_pinned_fonts(pinned)
        return False
    pinned.append(font)
    store.set_pinned_fonts(pinned)
    return True


__all__ = [
    "JsonPreferenceStore",
    "MemoryPreferenceStore",
    "PreferenceStore",
    "toggle_pin",
]
