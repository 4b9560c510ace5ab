from __future__ import annotations

import io
import json
import logging
from typing import Iterator

import pytest

import cliwarn
from cliwarn import RegistrySettings, WarningRegistry
from cliwarn.logging_config import (
    LIBRARY_LOGGER,
    HumanReadableFormatter,
    JSONFormatter,
    get_log_format_from_env,
    setup_logging,
)
from tests.conftest import RecordingSink


@pytest.fixture(autouse=True)
def reset_library_logger() -> Iterator[None]:
    """Leave the cliwarn logger the way each test found it."""
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    handlers = list(library_logger.handlers)
    level = library_logger.level
    yield
    library_logger.handlers[:] = handlers
    library_logger.setLevel(level)


def test_setup_logging_json_records_dispatch() -> None:
    """A DEBUG json trail shows registry decisions without touching the sink."""
    stream = io.StringIO()
    setup_logging(level=logging.DEBUG, format_type="json", stream=stream)

    sink = RecordingSink()
    warn = WarningRegistry("tool", sink=sink, settings=RegistrySettings())
    warn.register("topic", {"message": "m", "conditional": "x"})
    warn.about("topic", "y")
    warn.about("topic", "x")

    records = [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]
    messages = [record["message"] for record in records]
    assert "Registered warning tool.topic" in messages
    assert "Conditional for tool.topic not met" in messages
    assert "Writing warning tool.topic" in messages
    assert all(record["logger"] == "cliwarn.registry" for record in records)
    assert len(sink.messages) == 1


def test_setup_logging_exported_from_package() -> None:
    assert cliwarn.setup_logging is setup_logging
    assert "setup_logging" in cliwarn.__all__

    stream = io.StringIO()
    cliwarn.setup_logging(level=logging.DEBUG, format_type="simple", stream=stream)
    WarningRegistry("tool", sink=RecordingSink(), settings=RegistrySettings()).register("topic", "m")
    assert "DEBUG: Registered warning tool.topic" in stream.getvalue()


def test_setup_logging_does_not_touch_root() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    setup_logging(level=logging.INFO, format_type="simple", stream=io.StringIO())
    assert root.handlers == before


def test_setup_logging_replaces_handlers() -> None:
    setup_logging(stream=io.StringIO())
    library_logger = setup_logging(stream=io.StringIO())
    assert len(library_logger.handlers) == 1


def test_setup_logging_uses_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIWARN_LOG_LEVEL", "error")
    library_logger = setup_logging(stream=io.StringIO())
    assert library_logger.level == logging.ERROR


def test_log_format_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_log_format_from_env() == "human"
    monkeypatch.setenv("CLIWARN_LOG_FORMAT", "JSON")
    assert get_log_format_from_env() == "json"


def test_json_formatter_includes_extra() -> None:
    formatter = JSONFormatter(include_context=True)
    record = logging.LogRecord("test", logging.INFO, __file__, 10, "message", args=(), exc_info=None)
    record.custom = "value"
    payload = json.loads(formatter.format(record))
    assert payload["level"] == "INFO"
    assert payload["custom"] == "value"
    assert payload["line"] == 10


def test_human_readable_formatter_plain_stream() -> None:
    formatter = HumanReadableFormatter(use_colors=True, include_context=True, stream=io.StringIO())
    record = logging.LogRecord("test", logging.ERROR, __file__, 5, "boom", args=(), exc_info=None)
    output = formatter.format(record)
    assert "[ERROR]" in output
    assert "test_logging_config" in output
    assert "\033[" not in output


def test_human_readable_formatter_terminal() -> None:
    formatter = HumanReadableFormatter(use_colors=True, stream=RecordingSink(tty=True))
    record = logging.LogRecord("test", logging.WARNING, __file__, 5, "careful", args=(), exc_info=None)
    output = formatter.format(record)
    assert output.startswith("\033[33m")
    assert output.endswith("\033[0m")
