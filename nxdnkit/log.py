"""Levelled logging to a daily log file and to standard output."""

from __future__ import annotations

import os
import sys
from datetime import date, datetime, timezone
from enum import IntEnum
from typing import IO

LEVEL_CHARS = " DMIWEF"


class LogLevel(IntEnum):
    """Severity of a log line; NONE as a threshold disables that output."""

    NONE = 0
    DEBUG = 1
    MESSAGE = 2
    INFO = 3
    WARNING = 4
    ERROR = 5
    FATAL = 6


class _LogState:
    def __init__(self) -> None:
        self.file_level = int(LogLevel.MESSAGE)
        self.display_level = int(LogLevel.MESSAGE)
        self.file_path = ""
        self.file_root = ""
        self.file: IO[str] | None = None
        self.date: date | None = None

    def open(self) -> bool:
        """Make sure today's log file is open; rotate when the UTC day changes."""
        if self.file_level == 0:
            return True

        today = datetime.now(timezone.utc).date()
        if today == self.date:
            if self.file is not None:
                return True
        elif self.file is not None:
            self.file.close()
            self.file = None

        name = os.path.join(self.file_path, f"{self.file_root}-{today:%Y-%m-%d}.log")
        self.date = today
        try:
            self.file = open(name, "a", encoding="utf-8")
        except OSError:
            self.file = None
            return False
        return True

    def close(self) -> None:
        if self.file is not None:
            self.file.close()
        self.file = None
        self.date = None


_state = _LogState()


def initialise(file_path: str, file_root: str, file_level: int, display_level: int) -> None:
    """Configure logging; raise OSError if the log file cannot be opened."""
    _state.close()
    _state.file_path = str(file_path)
    _state.file_root = file_root
    _state.file_level = int(file_level)
    _state.display_level = int(display_level)
    if not _state.open():
        name = os.path.join(_state.file_path, f"{file_root}-*.log")
        raise OSError(f"unable to open the log file {name}")


def finalise() -> None:
    """Close the log file, if one is open."""
    _state.close()


def format_line(level: int, message: str, when: datetime) -> str:
    """Render one log line with its level letter and a millisecond timestamp."""
    stamp = f"{when:%Y-%m-%d %H:%M:%S}.{when.microsecond // 1000:03d}"
    return f"{LEVEL_CHARS[int(level)]}: {stamp} {message}"


def log(level: int, message: str) -> None:
    """Write a message at ``level``; a FATAL message ends the program."""
    level = int(level)
    line = format_line(level, message, datetime.now(timezone.utc))

    if _state.file_level != 0 and level >= _state.file_level:
        if not _state.open():
            return
        assert _state.file is not None
        _state.file.write(line + "\n")
        _state.file.flush()

    if _state.display_level != 0 and level >= _state.display_level:
        sys.stdout.write(line + "\n")
        sys.stdout.flush()

    if level == LogLevel.FATAL:
        _state.close()
        raise SystemExit(1)