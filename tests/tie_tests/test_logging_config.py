import logging

import pytest

from tie.common import logging_config
from tie.common.logging_config import (
    TieFormatter,
    abbreviate_logger_name,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_tie_logger():
    tie_logger = logging.getLogger("tie")
    handlers, level = list(tie_logger.handlers), tie_logger.level
    yield
    tie_logger.handlers[:] = handlers
    tie_logger.setLevel(level)


def _record(name: str, message: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, message, None, None)


def test_abbreviate_logger_name() -> None:
    assert abbreviate_logger_name("tie.domain.feedback_details") == "t.d.feedback_details"
    assert abbreviate_logger_name("tie.config") == "t.config"


def test_formatter_aligns_continuation_lines() -> None:
    formatter = TieFormatter(use_colors=False)

    output = formatter.format(_record("tie.config", "first\nsecond"))
    first, second = output.split("\n")

    assert "| INFO  | t.config" in first
    assert first.endswith("| first")
    assert second == TieFormatter.CONTINUATION_PREFIX + "second"
    assert len(first) - len("first") == len(TieFormatter.CONTINUATION_PREFIX)


def test_formatter_colors_levels() -> None:
    output = TieFormatter().format(_record("tie", "boom", logging.ERROR))
    assert TieFormatter.COLORS["ERROR"] in output


def test_setup_logging_uses_given_level() -> None:
    setup_logging("debug")

    tie_logger = logging.getLogger("tie")
    assert tie_logger.level == logging.DEBUG
    assert len(tie_logger.handlers) == 1
    assert isinstance(tie_logger.handlers[0].formatter, TieFormatter)


def test_setup_logging_defaults_to_configured_level(monkeypatch) -> None:
    monkeypatch.setattr(logging_config.settings, "log_level", "WARNING")

    setup_logging()

    assert logging.getLogger("tie").level == logging.WARNING
