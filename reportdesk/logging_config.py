"""Log output for the app: stdlib loggers rendered by structlog."""

import logging
import sys

import structlog

# Loggers that report every request at INFO.
CHATTY_LOGGERS = ("httpx", "uvicorn.access")


def configure_logging(log_level: str = "info", json_output: bool = False) -> None:
    """
    Install one stdout handler on the root logger. Records from
    ``logging.getLogger(__name__)`` get a level, logger name and timestamp and
    are printed as JSON lines or as readable console lines.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ],
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level.upper())

    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
