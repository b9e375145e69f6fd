import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from pythonjsonlogger.json import JsonFormatter

from cti.config import Settings

logger = logging.getLogger(__name__)

PLAIN_FORMAT = "%(levelname).1s [%(asctime)s] %(levelname)-5s : %(message)s"


class LogOpenError(OSError):
    """The log file could not be created or opened for appending."""


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: str = "cti.log",
    log_dir: str = "log",
    stderr: bool = False,
) -> list[logging.Handler]:
    """Attach the session handlers to the root logger and return them.

    The root level is only changed once the log file is open.
    """
    path = os.path.join(log_dir, log_file)
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError as e:
        raise LogOpenError(f"cannot open log file {path}: {e}") from e

    handlers: list[logging.Handler] = [file_handler]
    if stderr:
        handlers.append(logging.StreamHandler(sys.stderr))

    formatter: logging.Formatter
    if json_format:
        formatter = JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        )
    else:
        formatter = logging.Formatter(PLAIN_FORMAT, datefmt="%Y-%b-%d %H:%M:%S")

    root = logging.getLogger()
    root.setLevel(level.upper())
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return handlers


@contextmanager
def log_session(settings: Settings) -> Iterator[list[logging.Handler] | None]:
    """Keep the log file open for the lifetime of one console session.

    Yields ``None`` when logging is disabled; records are then swallowed by a
    NullHandler instead of reaching stderr. The handlers are detached and
    closed, and the root level restored, however the block exits.
    """
    root = logging.getLogger()

    if not settings.logging_enabled:
        null_handler = logging.NullHandler()
        root.addHandler(null_handler)
        try:
            yield None
        finally:
            root.removeHandler(null_handler)
        return

    previous_level = root.level
    handlers = configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        stderr=settings.log_stderr,
    )
    logger.info("Initialized")
    try:
        yield handlers
    finally:
        logger.info("Closed")
        for handler in handlers:
            root.removeHandler(handler)
            handler.close()
        root.setLevel(previous_level)
