"""Tests for console logging helpers and level filtering."""

from __future__ import annotations

import pytest

from sokoverse.config import Config
from sokoverse.logging_utils import (
    Color,
    colored,
    is_enabled,
    log_blocked,
    log_error,
    log_info,
    log_move,
    log_success,
)


@pytest.fixture
def plain_output(monkeypatch):
    monkeypatch.setenv("SOKOVERSE_NO_COLOR", "1")


def test_colored_wraps_with_ansi_codes(monkeypatch):
    monkeypatch.delenv("SOKOVERSE_NO_COLOR", raising=False)
    text = colored("moved", Color.BLUE, bold=True)
    assert text.startswith(Color.BOLD.value + Color.BLUE.value)
    assert text.endswith(Color.RESET.value)


def test_colored_respects_no_color(plain_output):
    assert colored("moved", Color.BLUE) == "moved"


def test_debug_messages_hidden_at_info(plain_output, monkeypatch, capsys):
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    log_move("right: (1, 1) -> (2, 1)")
    log_info("Loaded 2 level(s)")
    out = capsys.readouterr().out
    assert "right" not in out
    assert "[i] Loaded 2 level(s)" in out


def test_all_markers_at_debug(plain_output, monkeypatch, capsys):
    monkeypatch.setattr(Config, "LOG_LEVEL", "debug")
    log_move("moved")
    log_blocked("blocked")
    log_success("solved")
    log_error("broken")
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["[•] moved", "[x] blocked", "[✓] solved", "[!] broken"]


def test_error_level_only_shows_errors(plain_output, monkeypatch, capsys):
    monkeypatch.setattr(Config, "LOG_LEVEL", "ERROR")
    log_blocked("blocked")
    log_success("solved")
    log_error("broken")
    assert capsys.readouterr().out.splitlines() == ["[!] broken"]


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "chatty")
    assert is_enabled("INFO") is True
    assert is_enabled("DEBUG") is False
