import subprocess
import sys
import textwrap

import pytest
from loguru import logger

from fifo_semaphore.observability.logger_adaptor import (
    SemaphoreLoggerAdapter,
    configure_logging,
    get_logger,
)


def test_get_logger_is_cached():
    """Test that the same adapter is returned for the same name."""
    first = get_logger("test_logger")
    second = get_logger("test_logger")
    assert first is second
    assert isinstance(first, SemaphoreLoggerAdapter)


def test_get_logger_default_name():
    """Test that a default name is used when none is given."""
    adapter = get_logger()
    assert adapter.logger_name == "fifo_semaphore.observability.logger_adaptor"


def test_logger_name_is_bound(log_messages):
    """Test that records carry the bound logger name."""
    get_logger("test_logger").info("Test message")

    assert len(log_messages) == 1
    record = log_messages[0].record
    assert record["message"] == "Test message"
    assert record["extra"]["logger_name"] == "test_logger"
    assert record["level"].name == "INFO"


def test_levels_are_forwarded(log_messages):
    """Test that each adapter method logs at its own level."""
    adapter = get_logger("test_levels")
    adapter.debug("debug message")
    adapter.warning("warning message")
    adapter.error("error message")

    levels = [message.record["level"].name for message in log_messages]
    assert levels == ["DEBUG", "WARNING", "ERROR"]


def test_import_keeps_host_sinks():
    """Test that importing the package leaves sinks added beforehand working."""
    script = textwrap.dedent(
        """
        from loguru import logger

        received = []
        logger.remove()
        logger.add(received.append, format="{message}")

        import fifo_semaphore
        from fifo_semaphore.observability.logger_adaptor import get_logger

        fifo_semaphore.InMemorySemaphore(1)
        get_logger("late_logger")
        logger.info("host message")
        assert len(received) == 1, received
        assert received[0].record["message"] == "host message"
        """
    )
    result = subprocess.run(
        [sys.executable, "-c", script], capture_output=True, text=True
    )
    assert result.returncode == 0, result.stderr
    assert "KeyError" not in result.stderr


def test_configure_logging_keeps_existing_sinks(log_messages):
    """Test that the package sink is added next to, not instead of, host sinks."""
    handler_id = configure_logging(level="DEBUG")
    try:
        logger.info("host message")
        get_logger("test_logger").info("semaphore message")
    finally:
        logger.remove(handler_id)

    assert [message.record["message"] for message in log_messages] == [
        "host message",
        "semaphore message",
    ]


def test_configure_logging_replaces_previous_sink():
    """Test that calling configure_logging twice keeps a single package sink."""
    first = configure_logging()
    second = configure_logging()
    try:
        assert first != second
        with pytest.raises(ValueError):
            logger.remove(first)
    finally:
        logger.remove(second)


def test_configure_logging_after_host_removed_sinks():
    """Test that configure_logging copes with its sink being removed elsewhere."""
    first = configure_logging()
    logger.remove(first)

    second = configure_logging()
    logger.remove(second)
