import logging
import sys

from pythonjsonlogger.json import JsonFormatter

UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")

# The SDK logs every request and retry at DEBUG/INFO.
SDK_LOGGERS = ("boto3", "botocore", "s3transfer", "urllib3")


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Sends all gateway, Uvicorn and SDK logs to stdout as JSON lines.

    Every record carries ``timestamp``, ``level``, ``logger`` and ``message``
    plus whatever was passed through ``extra``. Uvicorn loggers get the same
    handler and stop propagating so access lines are not written twice. SDK
    loggers are held at WARNING or above.

    Args:
        level: Level name or number for the root and Uvicorn loggers.

    Returns:
        The configured root logger.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={
                "asctime": "timestamp",
                "levelname": "level",
                "name": "logger",
            },
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.setLevel(level)
        uvicorn_logger.handlers = [handler]
        uvicorn_logger.propagate = False

    sdk_level = max(root_logger.level, logging.WARNING)
    for name in SDK_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)

    return root_logger
