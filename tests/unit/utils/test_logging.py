"""Unit tests for the structured logging setup."""

import json
import logging
import sys

import pytest

from awto.utils.logging import bind_context, configure_logging, get_logger


@pytest.mark.unit
def test_get_logger_returns_bound_logger() -> None:
    logger = get_logger("test_module")

    assert hasattr(logger, "bind")
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")


@pytest.mark.unit
def test_events_are_rendered_as_json(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("awto.tests.json").info("compile.completed", package="database")

    log_data = json.loads(caplog.records[-1].getMessage())
    assert log_data["event"] == "compile.completed"
    assert log_data["package"] == "database"
    assert log_data["logger"] == "awto.tests.json"
    assert log_data["level"] == "info"
    assert "timestamp" in log_data


@pytest.mark.unit
def test_bind_context_adds_fields(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    bind_context(package="database", stage="trigger_build").info("build.checked")

    log_data = json.loads(caplog.records[-1].getMessage())
    assert log_data["package"] == "database"
    assert log_data["stage"] == "trigger_build"


@pytest.mark.unit
def test_configure_logging_verbose_enables_debug() -> None:
    try:
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG
    finally:
        configure_logging(verbose=False)


@pytest.mark.unit
def test_configure_logging_does_not_stack_handlers() -> None:
    configure_logging()
    before = len(logging.getLogger().handlers)
    configure_logging()
    configure_logging()
    assert len(logging.getLogger().handlers) == before


@pytest.mark.unit
def test_console_handler_writes_to_stderr() -> None:
    configure_logging()

    handlers = [
        h
        for h in logging.getLogger().handlers
        if getattr(h, "_awto_handler", False)
        and not isinstance(h, logging.FileHandler)
    ]
    assert [h.stream for h in handlers] == [sys.stderr]
