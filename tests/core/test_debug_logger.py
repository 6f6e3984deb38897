"""
test_debug_logger.py
--------------------
Tests for level and category filtering of the console logger.
"""

import pytest

from cosmic_defender.core.debug.debug_logger import DebugLogger, LoggerConfig


@pytest.fixture(autouse=True)
def logger_config(monkeypatch):
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", True)
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(LoggerConfig, "SHOW_TIMESTAMP", False)
    monkeypatch.setattr(LoggerConfig, "CATEGORIES", {"system": True, "input": False})


class Reporter:
    def report(self):
        DebugLogger.system("ready")


def test_line_names_calling_class_and_tag(capsys):
    Reporter().report()
    out = capsys.readouterr().out
    assert "[Reporter][SYSTEM] ready" in out


def test_muted_category_is_silent(capsys):
    DebugLogger.warn("dropped", category="input")
    assert capsys.readouterr().out == ""


def test_fail_ignores_category_switches(capsys):
    DebugLogger.fail("broken", category="input")
    assert "[FAIL] broken" in capsys.readouterr().out


def test_trace_needs_verbose(capsys, monkeypatch):
    DebugLogger.trace("hidden", category="system")
    assert capsys.readouterr().out == ""

    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", "VERBOSE")
    DebugLogger.trace("shown", category="system")
    assert "shown" in capsys.readouterr().out


def test_level_none_silences_failures(capsys, monkeypatch):
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", "NONE")
    DebugLogger.fail("quiet")
    assert capsys.readouterr().out == ""


def test_disabled_logging_skips_reports(capsys, monkeypatch):
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)
    DebugLogger.section("Startup")
    DebugLogger.init_entry("World")
    DebugLogger.init_sub("detail")
    assert capsys.readouterr().out == ""


def test_init_entry_is_aligned(capsys):
    DebugLogger.init_entry("World")
    DebugLogger.init_entry("InputManager")
    first, second = capsys.readouterr().out.splitlines()
    assert first.index("[OK]") == second.index("[OK]")
