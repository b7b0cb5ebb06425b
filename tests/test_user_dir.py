from __future__ import annotations

from pathlib import Path

import pytest

from figbanner.core.preferences import JsonPreferenceStore
from figbanner.core.user_dir import configure_user_dir, get_user_dir, user_dir_context


def test_env_var_selects_root(isolated_home: Path) -> None:
    assert get_user_dir().root == isolated_home


def test_explicit_root_wins_over_env(tmp_path: Path) -> None:
    assert configure_user_dir(root=tmp_path / "explicit").root == tmp_path / "explicit"


def test_default_root_lives_in_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FIGBANNER_HOME", raising=False)
    assert configure_user_dir().root == Path.home() / ".figbanner"


def test_context_restores_previous(tmp_path: Path, isolated_home: Path) -> None:
    override = tmp_path / "override"
    with user_dir_context(root=override) as current:
        assert get_user_dir() is current
        assert current.data_path("prefs.json") == override / "prefs.json"
        assert not override.exists()
    assert get_user_dir().root == isolated_home


def test_preferences_follow_the_active_user_dir(tmp_path: Path) -> None:
    with user_dir_context(root=tmp_path / "profile"):
        JsonPreferenceStore().set_pinned_fonts(["slant"])
    assert (tmp_path / "profile" / "preferences.json").is_file()
    assert JsonPreferenceStore().get_pinned_fonts() == ()
