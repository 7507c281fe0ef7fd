import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter

_SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configures structured JSON logging for the relay.

    Every record is written to stdout as one JSON object carrying the
    timestamp, level, logger name, message and the Datadog trace/span ids
    injected by ddtrace. Uvicorn's loggers are routed through the same
    handler so request logs share the format. Calling this repeatedly is
    safe: handlers are replaced, not stacked.

    Args:
        level: Log level name. Defaults to the LOG_LEVEL env var, then INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level_name)
    root_logger.handlers = [handler]

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.setLevel(level_name)
        server_logger.handlers = [handler]
        server_logger.propagate = False

    return root_logger
