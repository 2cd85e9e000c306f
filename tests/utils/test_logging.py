import json
import logging
import sys

import pytest

from vecmath.utils import JsonFormatter, configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_library_logger():
    logger = logging.getLogger("vecmath")
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


def test_get_logger_is_namespaced() -> None:
    assert get_logger("rng").name == "vecmath.rng"
    assert get_logger("vecmath.config").name == "vecmath.config"


def test_configure_logging_level_from_env(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    configure_logging()
    assert logging.getLogger("vecmath").level == logging.WARNING
    configure_logging(level="DEBUG")
    assert logging.getLogger("vecmath").level == logging.DEBUG


def test_configure_logging_replaces_handlers(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    configure_logging()
    configure_logging()
    assert len(logging.getLogger("vecmath").handlers) == 1


def test_configure_logging_tees_to_file(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    log_file = tmp_path / "vecmath.log"
    configure_logging(json_output=True, log_file=str(log_file))
    get_logger("test").info("hello")
    for handler in logging.getLogger("vecmath").handlers:
        handler.flush()
    record = json.loads(log_file.read_text().strip().splitlines()[-1])
    assert record["message"] == "hello"
    assert record["level"] == "INFO"
    assert record["name"] == "vecmath.test"


def test_json_formatter_includes_exception() -> None:
    try:
        raise ZeroDivisionError("boom")
    except ZeroDivisionError:
        record = logging.LogRecord("vecmath", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "failed"
    assert "ZeroDivisionError" in payload["exc_info"]
