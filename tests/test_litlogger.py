"""Tests for the bundled logger."""

import io

import pytest

from bigtext.litlogger import ConsoleHandler, FileHandler, LogFormat, Logger, LogLevel


def make_logger(level=LogLevel.INFO, fmt=LogFormat.SIMPLE):
    stream = io.StringIO()
    logger = Logger(name="test", level=level, handlers=[ConsoleHandler(stream=stream)], fmt=fmt)
    return logger, stream


def test_messages_below_level_are_dropped() -> None:
    logger, stream = make_logger(LogLevel.INFO)

    logger.debug("hidden")
    logger.info("shown")
    logger.error("also shown")

    assert stream.getvalue() == "INFO: shown\nERROR: also shown\n"


def test_set_level() -> None:
    logger, stream = make_logger(LogLevel.WARNING)
    logger.set_level(LogLevel.TRACE)

    logger.trace("deep")

    assert stream.getvalue() == "TRACE: deep\n"


def test_default_format_includes_name() -> None:
    logger, stream = make_logger(fmt=LogFormat.DEFAULT)

    logger.warning("careful")

    assert "| WARNING | test | careful" in stream.getvalue()


def test_context_is_appended_when_format_lacks_placeholders() -> None:
    logger, stream = make_logger()
    logger.set_format(LogFormat.SIMPLE, include_context=True)

    logger.info("ctx")

    assert stream.getvalue().startswith("INFO: ctx | Thread: ")


def test_console_handler_without_tty_has_no_color() -> None:
    stream = io.StringIO()
    ConsoleHandler(stream=stream).emit("plain", LogLevel.ERROR)

    assert stream.getvalue() == "plain\n"


def test_console_handler_forced_color() -> None:
    stream = io.StringIO()
    ConsoleHandler(stream=stream, color=True).emit("red", LogLevel.ERROR)

    assert stream.getvalue() == "\033[31mred\033[0m\n"


def test_exception_logs_traceback() -> None:
    logger, stream = make_logger()

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("failed")

    output = stream.getvalue()
    assert output.startswith("ERROR: failed\n")
    assert "RuntimeError: boom" in output


def test_file_handler(tmp_path) -> None:
    path = tmp_path / "logs" / "bigtext.log"
    handler = FileHandler(str(path), level=LogLevel.INFO)
    logger = Logger(name="file", handlers=[handler], fmt=LogFormat.SIMPLE)

    logger.info("to disk")
    logger.debug("not to disk")
    handler.close()

    assert path.read_text(encoding="utf-8") == "INFO: to disk\n"


def test_file_handler_rotation(tmp_path) -> None:
    path = tmp_path / "bigtext.log"
    handler = FileHandler(str(path), max_bytes=10, backups=1)

    handler.emit("0123456789", LogLevel.INFO)
    handler.emit("next", LogLevel.INFO)
    handler.close()

    assert path.with_suffix(".1").read_text(encoding="utf-8") == "0123456789\n"
    assert path.read_text(encoding="utf-8") == "next\n"


@pytest.mark.parametrize(
    "name, level",
    [("debug", LogLevel.DEBUG), ("WARN", LogLevel.WARNING), (" Error ", LogLevel.ERROR)],
)
def test_level_from_name(name, level) -> None:
    assert LogLevel.from_name(name) is level


def test_level_from_unknown_name() -> None:
    with pytest.raises(ValueError):
        LogLevel.from_name("verbose")
