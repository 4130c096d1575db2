import logging

import pytest

from jsl_fingerspelling.utils.logging_utils import (
    ColoredFormatter, log_execution_time, parse_log_level, setup_logging,
)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


class TestLogExecutionTime:
    def test_returns_result(self, caplog):
        caplog.set_level(logging.DEBUG)

        @log_execution_time()
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        assert "add completed in" in caplog.text

    def test_reraises_and_logs(self, caplog):
        @log_execution_time(logging.getLogger("timing"))
        def broken():
            raise ValueError("bad frame")

        with pytest.raises(ValueError, match="bad frame"):
            broken()

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.name == "timing"
        assert "broken failed after" in record.getMessage()


class TestParseLogLevel:
    @pytest.mark.parametrize("name, level", [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        ("Warning", logging.WARNING),
        (logging.ERROR, logging.ERROR),
    ])
    def test_known(self, name, level):
        assert parse_log_level(name) == level

    def test_unknown(self):
        with pytest.raises(ValueError):
            parse_log_level("chatty")


def test_colored_formatter_leaves_record_untouched():
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    output = ColoredFormatter("%(levelname)s %(message)s").format(record)
    assert "\033[33mWARNING\033[0m careful" == output
    assert record.levelname == "WARNING"


def test_console_only(restore_logging):
    assert setup_logging("WARNING") is None
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ColoredFormatter)


def test_session_log_file(tmp_path, restore_logging):
    log_file = setup_logging("DEBUG", tmp_path / "logs")
    logging.getLogger("jsl_fingerspelling.demo").info("recognized sa")

    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_file.parent == tmp_path / "logs"
    assert log_file.name.startswith("fingerspelling_")
    content = log_file.read_text(encoding="utf-8")
    assert "recognized sa" in content
    assert "\033[" not in content
