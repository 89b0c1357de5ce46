# mycontext/core/logging.py
"""
Console logging for the MyContext CLI.

Two layers:
- log(scope, ...)  scoped developer traces, hidden unless debug/verbose
- logger.*         user-facing lines (info, success, error, progress, step)
"""
import os
import sys
from datetime import datetime
from enum import IntEnum
from typing import Any, Optional

from mycontext.core.config import settings


class LogLevel(IntEnum):
    ERROR = 0
    WARN = 1
    INFO = 2
    VERBOSE = 3
    DEBUG = 4


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() == "true"


class Logger:
    """
    User-facing console logger.

    Errors and warnings go to stderr, everything else to stdout.
    Quiet mode drops everything except errors.
    """

    def __init__(self, debug: bool = False) -> None:
        self.level = LogLevel.INFO
        self.quiet = False

        if debug:
            self.level = LogLevel.DEBUG
        elif _env_flag("MYCONTEXT_VERBOSE"):
            self.level = LogLevel.VERBOSE
        elif _env_flag("MYCONTEXT_QUIET"):
            self.set_quiet(True)

    def set_level(self, level: LogLevel) -> None:
        self.level = level

    def set_quiet(self, quiet: bool) -> None:
        self.quiet = quiet
        if quiet:
            self.level = LogLevel.ERROR

    def should_log(self, level: LogLevel) -> bool:
        if self.quiet and level > LogLevel.ERROR:
            return False
        return level <= self.level

    def _emit(self, text: str, stream=None) -> None:
        stream = stream or sys.stdout
        print(text, file=stream)
        stream.flush()

    def error(self, message: str) -> None:
        if self.should_log(LogLevel.ERROR):
            self._emit(f"❌ {message}", sys.stderr)

    def warn(self, message: str) -> None:
        if self.should_log(LogLevel.WARN):
            self._emit(f"⚠️  {message}", sys.stderr)

    def info(self, message: str) -> None:
        if self.should_log(LogLevel.INFO):
            self._emit(f"ℹ️  {message}")

    def success(self, message: str) -> None:
        if self.should_log(LogLevel.INFO):
            self._emit(f"✅ {message}")

    def verbose(self, message: str) -> None:
        if self.should_log(LogLevel.VERBOSE):
            self._emit(f"🔍 {message}")

    def debug(self, message: str) -> None:
        if self.should_log(LogLevel.DEBUG):
            self._emit(f"🐛 {message}")

    # Progress lines are shown at every level except quiet
    def progress(self, message: str) -> None:
        if not self.quiet:
            self._emit(f"⏳ {message}")

    def step(self, message: str) -> None:
        if not self.quiet:
            self._emit(f"➡️  {message}")

    def plain(self, message: str = "") -> None:
        if not self.quiet:
            self._emit(message)


# Singleton instance
logger = Logger(debug=settings.debug)


def log(scope: str, message: str, data: Any = None, project: Optional[str] = None) -> None:
    """
    Scoped trace line, e.g. ``[12:01:33] [SCAFFOLD] wrote package.json``.

    Only shown when the logger is at VERBOSE or above.
    """
    if not logger.should_log(LogLevel.VERBOSE):
        return

    timestamp = datetime.now().strftime("%H:%M:%S")
    prefix = f"[{timestamp}] [{scope}]"
    if project:
        prefix += f" [{project}]"

    print(f"{prefix} {message}")
    if data:
        print(f"  Data: {data}")

    sys.stdout.flush()


def log_section(scope: str, title: str) -> None:
    """Section header with a visual separator."""
    if logger.quiet:
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"\n{'='*60}")
    print(f"[{timestamp}] [{scope}] {title}")
    print(f"{'='*60}")
    sys.stdout.flush()
