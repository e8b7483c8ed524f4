import logging
import os
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "file-directory"

_handler: logging.Handler | None = None


def setup_logging():
    """
    Configures structured JSON logging for the file directory service.

    Every record is rendered as one JSON object carrying timestamp, level,
    logger name, message, the Datadog trace_id/span_id and a static
    ``service`` field, plus whatever the caller passes through ``extra``
    (entry ids, bucket and object keys, backend error codes). The root
    logger and the Uvicorn loggers share the same stdout handler.

    Safe to call from every module: the handler is installed once and later
    calls only return the root logger. The level comes from ``LOG_LEVEL``
    (default INFO).

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _handler

    root_logger = logging.getLogger()
    if _handler is not None:
        return root_logger

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
        static_fields={"service": SERVICE_NAME},
    )
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(formatter)

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    root_logger.setLevel(level)
    root_logger.handlers = [_handler]

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [_handler]
        u_logger.propagate = False

    return root_logger
