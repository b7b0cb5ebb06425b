from __future__ import annotations

import logging

import pytest

from figbanner.core.diagnostics import LoggingEmitter, NullEmitter, format_event_message
from figbanner.ui.cli.diagnostics import CliEmitter
from figbanner.ui.cli.state import CLIState


def test_null_emitter_is_noop(caplog: pytest.LogCaptureFixture) -> None:
    emitter = NullEmitter()
    with caplog.at_level(logging.DEBUG):
        emitter.warning("nothing to see")
        emitter.error("still quiet")
        emitter.event("font_failed", {"font": "x"})
    assert not caplog.records
    assert emitter.debug_enabled is False


def test_logging_emitter_logs_messages(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(debug_enabled=True)
    with caplog.at_level(logging.INFO):
        emitter.error("boom")
        emitter.event("font_failed", {"font": "slant", "reason": "timed out"})
    messages = [record.message for record in caplog.records]
    assert "boom" in messages
    assert "Skipped font 'slant': timed out" in messages


def test_format_event_message() -> None:
    assert format_event_message("catalog_empty", {}) == "No fonts found"
    assert (
        format_event_message("generation_settled", {"generation": 2, "rendered": 5, "failed": 1})
        == "Generation 2: rendered 5 fonts (1 failed)"
    )
    assert format_event_message("unknown", {"a": 1}) is None


def test_cli_emitter_bridges_state(capsys: pytest.CaptureFixture[str]) -> None:
    state = CLIState(verbosity=1)
    emitter = CliEmitter(state=state)

    emitter.warning("Heads up", exc=None)
    emitter.error("Boom", exc=None)
    emitter.event("font_failed", {"font": "slant", "reason": "bad header"})

    captured = capsys.readouterr()
    combined = f"{captured.out}\n{captured.err}"
    assert "Heads up" in combined
    assert "Boom" in combined
    assert "Skipped font 'slant'" in combined
    assert state.consume_events("font_failed") == [{"font": "slant", "reason": "bad header"}]


def test_cli_emitter_hides_font_events_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    state = CLIState()
    emitter = CliEmitter(state=state)

    emitter.event("font_failed", {"font": "slant"})
    emitter.event("catalog_empty", {"location": "fonts"})

    captured = capsys.readouterr()
    combined = f"{captured.out}\n{captured.err}"
    assert "slant" not in combined
    assert "No fonts found in fonts" in combined
    assert state.consume_events("font_failed") == [{"font": "slant"}]


def test_cli_emitter_records_only_font_failures() -> None:
    state = CLIState()
    emitter = CliEmitter(state=state)

    emitter.event("generation_settled", {"generation": 1, "rendered": 2, "failed": 1})
    emitter.event("font_failed", {"font": "broken", "reason": "bad header"})

    assert list(state.events) == ["font_failed"]
    assert state.consume_events("font_failed") == [{"font": "broken", "reason": "bad header"}]
    assert state.consume_events("font_failed") == []
