import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from summarize_ai.core.config import settings

LOG_FILE_NAME = "summarize_ai.log"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d - %(message)s"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 5


def _console_handler(formatter: logging.Formatter, level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def _file_handler(log_dir: Path, formatter: logging.Formatter, level: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def configure_logging(level: Optional[int] = None) -> None:
    """
    Send summarizer and uvicorn logs to the console and to
    ``<LOG_DIR>/summarize_ai.log``.

    ``level`` defaults to DEBUG when ``settings.DEBUG`` is on, INFO otherwise.
    Safe to call more than once: each handler kind is attached only once.
    """
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level or (logging.DEBUG if settings.DEBUG else logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT)

    # RotatingFileHandler is itself a StreamHandler subclass
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        root.addHandler(_console_handler(formatter, root.level))
    if not any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers):
        root.addHandler(_file_handler(log_dir, formatter, root.level))

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        server_logger = logging.getLogger(name)
        server_logger.handlers = root.handlers
        server_logger.setLevel(root.level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
