"""Tests for mw_lib.memory_log module."""

import pytest

from mw_lib.memory_log import LogEntry, LogLevel, MemoryLog


class TestLogLevel:
    """Tests for LogLevel helpers."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("debug", LogLevel.DEBUG),
            ("Warning", LogLevel.WARNING),
            ("EMERGENCY", LogLevel.EMERGENCY),
            ("nolog", LogLevel.NOLOG),
            ("unknown", LogLevel.NOLOG),
        ],
    )
    def test_from_name(self, name: str, expected: LogLevel) -> None:
        assert LogLevel.from_name(name) is expected

    def test_name_for(self) -> None:
        assert LogLevel.name_for(30) == "NOTICE"
        assert LogLevel.name_for(LogLevel.ALERT) == "ALERT"
        assert LogLevel.name_for(31) == ""

    @pytest.mark.parametrize("level", [0, 10, 80, LogLevel.CRITICAL, 40.0])
    def test_valid_levels(self, level: int) -> None:
        assert LogLevel.is_valid(level)

    @pytest.mark.parametrize("level", [5, 90, -10, "DEBUG", None, True, 40.5])
    def test_invalid_levels(self, level: object) -> None:
        assert not LogLevel.is_valid(level)


class TestLogEntry:
    """Tests for LogEntry."""

    def test_default_level_is_info(self) -> None:
        entry = LogEntry.create("message")

        assert entry.level is LogLevel.INFO

    def test_custom_level(self) -> None:
        entry = LogEntry.create("message", LogLevel.ERROR)

        assert entry.level is LogLevel.ERROR

    def test_invalid_level_falls_back_to_info(self) -> None:
        entry = LogEntry.create("message", 33)

        assert entry.level is LogLevel.INFO

    def test_line_breaks_removed_and_formatted(self) -> None:
        entry = LogEntry.create("multi\nline\r\nmessage", LogLevel.WARNING)

        assert str(entry) == "WARNING: multilinemessage"


class TestMemoryLog:
    """Tests for MemoryLog."""

    def test_default_level_is_warning(self) -> None:
        log = MemoryLog()

        assert log.level is LogLevel.WARNING
        assert log.level_name == "WARNING"

    def test_custom_level(self) -> None:
        assert MemoryLog(LogLevel.DEBUG).level is LogLevel.DEBUG

    def test_invalid_level_keeps_default(self) -> None:
        assert MemoryLog(15).level is LogLevel.WARNING

    def test_log_with_higher_level_is_kept(self) -> None:
        log = MemoryLog(LogLevel.WARNING)

        log.log("disk almost full", LogLevel.ERROR)

        assert log.entries() == ["ERROR: disk almost full"]

    def test_log_with_equal_level_is_kept(self) -> None:
        log = MemoryLog(LogLevel.WARNING)

        log.log("careful", LogLevel.WARNING)

        assert log.entries() == ["WARNING: careful"]

    def test_log_with_lower_level_is_dropped(self) -> None:
        log = MemoryLog(LogLevel.WARNING)

        log.log("chatter", LogLevel.INFO)

        assert log.entries() == []

    def test_log_with_integral_float_level_is_kept(self) -> None:
        """A level given as 40.0 is treated as WARNING."""
        log = MemoryLog(40.0)

        log.log("float level", 50.0)

        assert log.level is LogLevel.WARNING
        assert log.records[0].level is LogLevel.ERROR
        assert log.entries() == ["ERROR: float level"]

    def test_log_with_invalid_level_is_dropped(self) -> None:
        log = MemoryLog(LogLevel.DEBUG)

        log.log("odd", 55)

        assert len(log) == 0

    def test_nolog_threshold_disables_logging(self) -> None:
        log = MemoryLog(LogLevel.NOLOG)

        log.log("even emergencies", LogLevel.EMERGENCY)

        assert log.entries() == []

    def test_message_line_breaks_removed(self) -> None:
        log = MemoryLog(LogLevel.DEBUG)

        log.debug("a\nb")

        assert log.entries() == ["DEBUG: ab"]

    def test_convenience_methods_use_their_level(self) -> None:
        log = MemoryLog(LogLevel.DEBUG)

        log.debug("1")
        log.info("2")
        log.notice("3")
        log.warning("4")
        log.error("5")
        log.critical("6")
        log.alert("7")
        log.emergency("8")

        assert [entry.level for entry in log.records] == [
            LogLevel.DEBUG,
            LogLevel.INFO,
            LogLevel.NOTICE,
            LogLevel.WARNING,
            LogLevel.ERROR,
            LogLevel.CRITICAL,
            LogLevel.ALERT,
            LogLevel.EMERGENCY,
        ]

    def test_str_joins_entries_with_trailing_newlines(self) -> None:
        log = MemoryLog(LogLevel.INFO)
        log.info("first")
        log.error("second")

        assert str(log) == "INFO: first\nERROR: second\n"

    def test_set_level(self) -> None:
        log = MemoryLog()

        log.set_level(LogLevel.CRITICAL)
        assert log.level is LogLevel.CRITICAL

        log.set_level(12345)
        assert log.level is LogLevel.CRITICAL

        log.set_level(LogLevel.from_name("debug"))
        assert log.level_name == "DEBUG"
