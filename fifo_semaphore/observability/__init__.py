from fifo_semaphore.observability.logger_adaptor import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
