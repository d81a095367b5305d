"""
debug_logger.py
---------------
Console logger for the game, filtered by category and verbosity.

Every subsystem logs through the static DebugLogger. Lines look like:

    [12:04:31] [GameSession][STATE] Phase PLAYING -> BOSS

Per-tick chatter (collisions, spawns, input) is off by default; flip a
category on with DebugLogger.enable_category() or raise the level with
--log-level VERBOSE.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Global switches read on every log call."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"
    SHOW_TIMESTAMP = True

    CATEGORIES = {
        # Startup and host loop
        "system": True,
        "loading": True,
        "display": True,
        "input": False,

        # Simulation
        "session": True,
        "entity_spawn": False,
        "boss": True,
        "collision": False,

        # Output
        "render": True,
        "ui": True,
        "performance": False,
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


# tag -> (color, minimum level needed to print it)
_TAGS = {
    "INIT": (Colors.WHITE, "INFO"),
    "SYSTEM": (Colors.MAGENTA, "INFO"),
    "STATE": (Colors.CYAN, "INFO"),
    "ACTION": (Colors.GREEN, "INFO"),
    "TRACE": (Colors.BLUE, "VERBOSE"),
    "WARN": (Colors.YELLOW, "WARN"),
    "FAIL": (Colors.RED, "ERROR"),
}

_STATUS_COLORS = {
    "OK": Colors.GREEN,
    "LOADING": Colors.CYAN,
    "FAIL": Colors.RED,
}


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static, category-filtered logger with colored output."""

    LINE_LENGTH = 59
    LEVEL_VALUES = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

    # ===========================================================
    # Configuration
    # ===========================================================

    @staticmethod
    def set_level(level: str):
        """Set global verbosity. Unknown names raise ValueError."""
        level = level.upper()
        if level not in DebugLogger.LEVEL_VALUES:
            raise ValueError(f"Unknown log level: {level}")
        LoggerConfig.LOG_LEVEL = level

    @staticmethod
    def enable_category(category: str, enabled: bool = True):
        LoggerConfig.CATEGORIES[category] = enabled

    @staticmethod
    def is_enabled(category: str, level: str = "INFO") -> bool:
        """True if a message of this category and level would print."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        threshold = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return DebugLogger.LEVEL_VALUES[level] <= threshold

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Startup log. An empty message prints a spacer line."""
        if not msg.strip():
            if LoggerConfig.ENABLE_LOGGING:
                print()
            return
        DebugLogger._emit("INIT", msg, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "session"):
        """Phase and lifecycle changes."""
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "input"):
        """Player or window actions."""
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
        DebugLogger._emit("FAIL", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Boxed header separating startup stages."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """'> Module ........ [OK]' line."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        label = f"> {module}".ljust(30)
        badge = f"[{status}]"
        dots = "." * max(DebugLogger.LINE_LENGTH - len(label) - len(badge) - 1, 1)
        color = _STATUS_COLORS.get(status.upper(), Colors.WHITE)
        print(f"{Colors.WHITE}{label}{dots} {color}{badge}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Indented bullet under the last init_entry()."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{'    ' * level}• {Colors.WHITE}{detail}{Colors.RESET}")

    # ===========================================================
    # Internals
    # ===========================================================

    @staticmethod
    def _emit(tag: str, message: str, category: str):
        color, level = _TAGS[tag]
        if not DebugLogger.is_enabled(category, level):
            return

        stamp = f"[{datetime.now():%H:%M:%S}] " if LoggerConfig.SHOW_TIMESTAMP else ""
        print(f"{color}{stamp}[{DebugLogger._caller()}][{tag}] {message}{Colors.RESET}")

    @staticmethod
    def _caller() -> str:
        """Class of the first frame outside this module, else its module name."""
        frame = sys._getframe(1)
        while frame is not None and frame.f_code.co_filename == __file__:
            frame = frame.f_back
        if frame is None:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        owner = frame.f_locals.get("cls")
        if isinstance(owner, type):
            return owner.__name__

        stem = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1].removesuffix(".py")
        return "".join(part.capitalize() for part in stem.split("_"))
