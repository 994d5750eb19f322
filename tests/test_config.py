import logging

import pytest

from charming import config
from charming.log import PACKAGE_LOGGER, ColorFormatter, configure_logging


def test_log_level_defaults_to_warning(monkeypatch):
    monkeypatch.delenv(config.LOG_LEVEL_ENV, raising=False)
    assert config.get_log_level() == "WARNING"


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "debug")
    assert config.get_log_level() == "DEBUG"


def test_unknown_log_level_falls_back_with_a_warning(monkeypatch, caplog):
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "loud")
    config_logger = logging.getLogger(config.__name__)
    config_logger.addHandler(caplog.handler)
    try:
        assert config.get_log_level() == config.DEFAULT_LOG_LEVEL
    finally:
        config_logger.removeHandler(caplog.handler)
    assert any("LOUD" in r.getMessage() and r.levelno == logging.WARNING for r in caplog.records)


@pytest.mark.parametrize("raw, expected", [(None, 2), ("4", 4), ("0", None), ("-1", None), ("none", None), ("", None)])
def test_json_indent(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv(config.JSON_INDENT_ENV, raising=False)
    else:
        monkeypatch.setenv(config.JSON_INDENT_ENV, raw)
    assert config.get_json_indent() == expected


def test_json_indent_must_be_an_integer(monkeypatch):
    monkeypatch.setenv(config.JSON_INDENT_ENV, "wide")
    with pytest.raises(ValueError):
        config.get_json_indent()


def test_configure_logging_is_idempotent():
    configure_logging("INFO")
    logger = configure_logging("DEBUG")
    try:
        colored = [h for h in logger.handlers if isinstance(h.formatter, ColorFormatter)]
        assert len(colored) == 1
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.DEBUG
        assert not logger.propagate
    finally:
        configure_logging(config.DEFAULT_LOG_LEVEL)


def test_empty_log_level_falls_back_to_default(monkeypatch):
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "  ")
    assert config.get_log_level() == config.DEFAULT_LOG_LEVEL


def test_color_formatter_leaves_record_untouched():
    record = logging.LogRecord("charming.chart", logging.INFO, "/tmp/chart.py", 12, "built %s", ("chart",), None)
    text = ColorFormatter("%(levelname)s %(name)s [%(link)s] %(message)s").format(record)

    assert "built chart" in text
    assert "/tmp/chart.py:12" in text
    assert record.levelname == "INFO"
    assert record.name == "charming.chart"
