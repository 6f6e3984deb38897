"""
debug_logger.py
---------------
Console logger for Cosmic Defender.

Every line is tagged with a level and a subsystem category. Categories can
be muted individually in LoggerConfig; failures are always printed as long
as logging is enabled and the level allows errors.

Line format:
    [12:00:01] [World][STATE] Session started
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Verbosity and per-category switches. Mutated by main.py from the CLI."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE
    SHOW_TIMESTAMP = True

    CATEGORIES = {
        # Startup and services
        "loading": True,
        "system": True,
        "display": True,
        "input": False,
        "event_manager": False,

        # Session
        "game_state": True,
        "timing": False,

        # Simulation
        "entity_spawn": False,
        "entity_cleanup": False,
        "collision": True,
        "particles": False,

        # Presentation
        "render": True,
        "ui": True,
    }


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


LEVELS = ("NONE", "ERROR", "WARN", "INFO", "VERBOSE")


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; call the level methods directly on the class."""

    LINE_LENGTH = 59
    ENTRY_COLUMN = 30

    # tag -> (color, level)
    TAGS = {
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
        "FAIL": (Colors.RED, "ERROR"),
    }

    # ===========================================================
    # Filtering
    # ===========================================================

    @staticmethod
    def enabled(category: str, level: str) -> bool:
        """Return True if a message of this level and category would print."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        threshold = LEVELS.index(LoggerConfig.LOG_LEVEL) if LoggerConfig.LOG_LEVEL in LEVELS else 3
        if LEVELS.index(level) > threshold:
            return False
        if level == "ERROR":
            return True
        return LoggerConfig.CATEGORIES.get(category, False)

    @staticmethod
    def _source() -> str:
        """Name of the class (or module) that called the public log method."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"
        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1][:-3]
        return "".join(part.capitalize() for part in module.split("_"))

    @staticmethod
    def _emit(tag: str, message: str, category: str):
        color, level = DebugLogger.TAGS[tag]
        if not DebugLogger.enabled(category, level):
            return
        stamp = f"[{datetime.now():%H:%M:%S}] " if LoggerConfig.SHOW_TIMESTAMP else ""
        print(f"{color}{stamp}[{DebugLogger._source()}][{tag}] {message}{Colors.RESET}")

    # ===========================================================
    # Level Methods
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "game_state"):
        """Session and screen transitions."""
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        """Per-tick detail, printed only at VERBOSE."""
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._emit("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        """Errors ignore the category switches."""
        DebugLogger._emit("FAIL", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Print '> Module ...... [OK]' aligned to the report width."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        label = f"> {module}"
        badge = f"[{status}]"
        pad = max(DebugLogger.ENTRY_COLUMN - len(label), 1)
        dots = max(DebugLogger.LINE_LENGTH - len(label) - pad - len(badge) - 1, 1)
        color = Colors.GREEN if status == "OK" else Colors.RED
        print(f"{Colors.WHITE}{label}{' ' * pad}{'.' * dots} {color}{badge}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{' ' * (level * 4)}• {Colors.WHITE}{detail}{Colors.RESET}")
