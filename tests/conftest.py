from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest


def _make_font_descriptor(
    *,
    height: int = 2,
    skip: Iterable[str] = (),
    comment: str = "generated test font",
) -> str:
    """Return a minimal FIGlet font drawing ``c`` as ``[c]`` over ``+-+`` rows."""
    skipped = set(skip)
    lines = [f"flf2a$ {height} 1 6 -1 1", comment]
    for code in range(32, 127):
        char = chr(code)
        rows = [f"[{char}]"] + ["+-+"] * (height - 1)
        if char in skipped:
            # Zero-width glyphs mark missing characters.
            rows = [""] * height
        for index, row in enumerate(rows):
            lines.append(row + ("@@" if index == height - 1 else "@"))
    return "\n".join(lines) + "\n"


@pytest.fixture
def font_descriptor():
    return _make_font_descriptor


@pytest.fixture
def fonts_dir(tmp_path: Path) -> Path:
    root = tmp_path / "fonts"
    root.mkdir()
    (root / "block.flf").write_text(_make_font_descriptor(), encoding="utf-8")
    (root / "ansi.flf").write_text(_make_font_descriptor(height=3), encoding="utf-8")
    (root / "broken.flf").write_text("this is not a figlet font\n", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    from figbanner.core.user_dir import configure_user_dir

    home = tmp_path / "home"
    monkeypatch.setenv("FIGBANNER_HOME", str(home))
    configure_user_dir()
    return home
