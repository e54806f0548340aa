"""Loguru-backed logger used for the semaphore diagnostic trace.

Importing this module never touches the handlers of the global loguru logger,
so sinks set up by the host application keep working. Applications that want
the package's own stderr sink call :func:`configure_logging` once.
"""

import sys
from typing import Any, Dict, Optional

from loguru import logger as _loguru_logger

from fifo_semaphore.constants import LOG_FORMAT, LOG_LEVEL, SERVICE_NAME

_logger_instances: Dict[str, "SemaphoreLoggerAdapter"] = {}
_sink_id: Optional[int] = None


def _is_semaphore_record(record: Dict[str, Any]) -> bool:
    return "logger_name" in record["extra"]


def configure_logging(level: str = LOG_LEVEL) -> int:
    """Add a stderr sink for records emitted through :func:`get_logger`.

    Existing sinks are left in place and records from other loggers are not
    routed to this sink. Calling it again replaces the sink added earlier.

    Args:
        level (str): Minimum level of the sink. Defaults to ``LOG_LEVEL``.

    Returns:
        int: The loguru handler id of the sink.
    """
    global _sink_id
    if _sink_id is not None:
        try:
            _loguru_logger.remove(_sink_id)
        except ValueError:
            # the host already removed it, e.g. with logger.remove()
            pass
    _sink_id = _loguru_logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level,
        colorize=True,
        filter=_is_semaphore_record,
    )
    return _sink_id


class SemaphoreLoggerAdapter:
    """Minimal logger that forwards to loguru. Same .info/.error/.warning/.debug/.exception API."""

    def __init__(self, logger_name: str) -> None:
        self.logger_name = logger_name
        self._log = _loguru_logger.bind(logger_name=logger_name, service=SERVICE_NAME)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.opt(depth=1).info(msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.opt(depth=1).error(msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.opt(depth=1).warning(msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.opt(depth=1).debug(msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.opt(depth=1).exception(msg, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> SemaphoreLoggerAdapter:
    """Get or create an instance of SemaphoreLoggerAdapter.

    Args:
        name (str, optional): Logger name. Defaults to this module's name.

    Returns:
        SemaphoreLoggerAdapter: Logger instance for the specified name
    """
    if name is None:
        name = __name__
    if name not in _logger_instances:
        _logger_instances[name] = SemaphoreLoggerAdapter(name)
    return _logger_instances[name]
