"""Tests for ContextualLogger."""

import logging

from tracklane.core.logging import ContextualLogger, LoggerConfigurator, logger


def test_with_context_merges_dimensions():
    base = ContextualLogger(logging.getLogger("tracklane.test"), {"a": 1})
    bound = base.with_context(b=2)

    assert bound.dimensions == {"a": 1, "b": 2}
    assert base.dimensions == {"a": 1}


def test_dimensions_rendered_and_attached(caplog):
    log = ContextualLogger(logging.getLogger("tracklane.test"), {"provider": "mixpanel"})

    with caplog.at_level("INFO", logger="tracklane.test"):
        log.info("sent %s", "UserSignup")

    record = caplog.records[-1]
    assert record.getMessage() == "sent UserSignup [provider=mixpanel]"
    assert record.provider == "mixpanel"


def test_configure_logger_adds_no_handler():
    first = LoggerConfigurator.configure_logger("tracklane.configured")
    second = LoggerConfigurator.configure_logger("tracklane.configured")

    assert first.logger is second.logger
    assert first.logger.handlers == []


def test_package_logger_has_no_handler_after_import():
    assert logger.logger.name == "tracklane"
    assert not any(isinstance(h, logging.StreamHandler) for h in logger.logger.handlers)
    assert logger.logger.propagate is True


def test_add_console_handler_attaches_once_and_stops_propagation():
    name = "tracklane.console_test"
    try:
        base = LoggerConfigurator.add_console_handler(name)
        LoggerConfigurator.add_console_handler(name)

        assert len(base.handlers) == 1
        assert isinstance(base.handlers[0], logging.StreamHandler)
        assert base.propagate is False
    finally:
        base = logging.getLogger(name)
        for handler in list(base.handlers):
            base.removeHandler(handler)
        base.propagate = True


def test_package_logger_carries_environment():
    assert logger.dimensions["environment"] == "test"
