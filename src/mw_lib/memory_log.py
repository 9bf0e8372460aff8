"""Leveled, append-only, in-memory log.

MemoryLog keeps the messages whose level is at least the configured
threshold so they can be inspected or rendered later, for example in a
debug panel or a test assertion. It is independent of the standard
``logging`` machinery, which the toolkit itself uses for diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from mw_lib.utils import remove_line_breaks

__all__ = [
    "LogEntry",
    "LogLevel",
    "MemoryLog",
]


class LogLevel(IntEnum):
    NOLOG = 0
    DEBUG = 10
    INFO = 20
    NOTICE = 30
    WARNING = 40
    ERROR = 50
    CRITICAL = 60
    ALERT = 70
    EMERGENCY = 80

    @classmethod
    def is_valid(cls, level: Any) -> bool:
        """Check if level is one of the defined log levels.

        Integral floats such as ``40.0`` count as the matching level.
        """
        if isinstance(level, bool):
            return False
        if isinstance(level, float) and level.is_integer():
            level = int(level)
        if not isinstance(level, int):
            return False
        return level in cls._value2member_map_

    @classmethod
    def coerce(cls, level: Any) -> LogLevel:
        """Convert a valid level (see is_valid) to its LogLevel member."""
        return cls(int(level))

    @classmethod
    def from_name(cls, name: str) -> LogLevel:
        """Get the level for a case-insensitive name, NOLOG if unknown."""
        return cls.__members__.get(name.upper(), cls.NOLOG)

    @classmethod
    def name_for(cls, level: Any) -> str:
        """Get the name of a level, or "" if it is not a defined level."""
        if not cls.is_valid(level):
            return ""
        return cls.coerce(level).name


@dataclass(frozen=True, slots=True)
class LogEntry:
    """A single log message with its level."""

    message: str
    level: LogLevel

    @classmethod
    def create(cls, message: str, level: Any = LogLevel.INFO) -> LogEntry:
        """Create an entry, stripping line breaks and defaulting invalid levels to INFO."""
        valid_level = (
            LogLevel.coerce(level) if LogLevel.is_valid(level) else LogLevel.INFO
        )
        return cls(remove_line_breaks(message), valid_level)

    def __str__(self) -> str:
        return f"{self.level.name}: {self.message}"


class MemoryLog:
    """Collects log entries at or above a threshold level.

    A threshold of NOLOG disables logging entirely. Entries with an
    undefined level are dropped.
    """

    DEFAULT_LEVEL = LogLevel.WARNING

    def __init__(self, level: Any = DEFAULT_LEVEL) -> None:
        self._entries: list[LogEntry] = []
        self._level = self.DEFAULT_LEVEL
        self.set_level(level)

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def level_name(self) -> str:
        return self._level.name

    def set_level(self, level: Any) -> None:
        """Set the threshold level; undefined levels are ignored."""
        if LogLevel.is_valid(level):
            self._level = LogLevel.coerce(level)

    def log(self, message: str, level: Any) -> None:
        """Append an entry if level passes the threshold."""
        if (
            self._level != LogLevel.NOLOG
            and LogLevel.is_valid(level)
            and level >= self._level
        ):
            self._entries.append(LogEntry.create(message, level))

    def debug(self, message: str) -> None:
        self.log(message, LogLevel.DEBUG)

    def info(self, message: str) -> None:
        self.log(message, LogLevel.INFO)

    def notice(self, message: str) -> None:
        self.log(message, LogLevel.NOTICE)

    def warning(self, message: str) -> None:
        self.log(message, LogLevel.WARNING)

    def error(self, message: str) -> None:
        self.log(message, LogLevel.ERROR)

    def critical(self, message: str) -> None:
        self.log(message, LogLevel.CRITICAL)

    def alert(self, message: str) -> None:
        self.log(message, LogLevel.ALERT)

    def emergency(self, message: str) -> None:
        self.log(message, LogLevel.EMERGENCY)

    def entries(self) -> list[str]:
        """Get the logged entries formatted as ``LEVEL: message``."""
        return [str(entry) for entry in self._entries]

    @property
    def records(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return "".join(f"{entry}\n" for entry in self.entries())
