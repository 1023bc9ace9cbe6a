import logging
import os
import sys

from pythonjsonlogger import jsonlogger


def setup_logging(level: str | None = None):
    """
    Configures structured JSON logging for the application.

    Installs one stdout handler with a JSON formatter (timestamp, level,
    logger name, message, trace_id, span_id) on the root logger and on the
    Uvicorn loggers, so request logs and application logs share one format.
    The level defaults to the LOG_LEVEL environment variable, then INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [stream_handler]

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [stream_handler]
        u_logger.propagate = False

    return root_logger
