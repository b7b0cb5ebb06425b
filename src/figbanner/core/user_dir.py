"""Centralised resolution of the figbanner user directory."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
import os
from pathlib import Path
from threading import RLock


__all__ = [
    "FigbannerUserDir",
    "configure_user_dir",
    "get_user_dir",
    "user_dir_context",
]

HOME_ENV = "FIGBANNER_HOME"

_USER_DIR: FigbannerUserDir | None = None
_LOCK: RLock = RLock()


def _resolve_root(root: str | Path | None) -> Path:
    if root is not None:
        return Path(root).expanduser()
    env_root = os.environ.get(HOME_ENV)
    if env_root:
        return Path(env_root).expanduser()
    return Path.home() / ".figbanner"


@dataclass(frozen=True, slots=True)
class FigbannerUserDir:
    """Root holding the files figbanner keeps between runs."""

    root: Path

    def data_path(self, *parts: str | Path) -> Path:
        """Return a path below the root; callers create parents on write."""
        return self.root.joinpath(*parts)


def configure_user_dir(*, root: str | Path | None = None) -> FigbannerUserDir:
    """Resolve the user dir again and install it as the global singleton.

    ``root`` wins over ``$FIGBANNER_HOME``, which wins over ``~/.figbanner``.
    """
    global _USER_DIR
    user_dir = FigbannerUserDir(root=_resolve_root(root))
    with _LOCK:
        _USER_DIR = user_dir
    return user_dir


def get_user_dir() -> FigbannerUserDir:
    """Return the lazily created user dir singleton."""
    with _LOCK:
        if _USER_DIR is None:
            return configure_user_dir()
        return _USER_DIR


@contextmanager
def user_dir_context(*, root: str | Path | None = None) -> Iterator[FigbannerUserDir]:
    """Temporarily override the global user dir singleton."""
    global _USER_DIR
    with _LOCK:
        previous = _USER_DIR
    current = configure_user_dir(root=root)
    try:
        yield current
    finally:
        with _LOCK:
            _USER_DIR = previous
