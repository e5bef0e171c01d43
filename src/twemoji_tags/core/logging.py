"""Centralized logging setup for twemoji-tags.

All package loggers feed one queue listener so file and console sinks are
shared, whichever module configured logging first.
"""

import atexit
import logging
import os
import sys
import threading
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import SimpleQueue

_LISTENER_LOCK = threading.Lock()
_LOG_QUEUE: SimpleQueue | None = None
_LOG_LISTENER: QueueListener | None = None

LOG_FILENAME = "twemoji-tags.log"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3


def _is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes"}


def _stop_listener() -> None:
    global _LOG_LISTENER
    if _LOG_LISTENER is not None:
        _LOG_LISTENER.stop()
        _LOG_LISTENER = None


def _resolve_logs_dir() -> Path | None:
    env_dir = os.environ.get("TWEMOJI_LOG_DIR")
    logs_dir = Path(env_dir) if env_dir else Path.home() / ".twemoji" / "logs"

    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return logs_dir


def _ensure_listener(log_level: int, include_console: bool, include_file: bool) -> QueueListener | None:
    global _LOG_QUEUE, _LOG_LISTENER
    with _LISTENER_LOCK:
        if _LOG_LISTENER is not None and _LOG_QUEUE is not None:
            return _LOG_LISTENER

        handlers: list[logging.Handler] = []
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        if include_file:
            logs_dir = _resolve_logs_dir()
            if logs_dir is not None:
                try:
                    file_handler = RotatingFileHandler(
                        logs_dir / LOG_FILENAME, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
                    )
                except OSError:
                    file_handler = None
                if file_handler is not None:
                    file_handler.setLevel(log_level)
                    file_handler.setFormatter(formatter)
                    handlers.append(file_handler)

        if include_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(log_level)
            console_handler.setFormatter(formatter)
            handlers.append(console_handler)

        if not handlers:
            return None

        _LOG_QUEUE = SimpleQueue()
        _LOG_LISTENER = QueueListener(_LOG_QUEUE, *handlers, respect_handler_level=True)
        _LOG_LISTENER.start()
        atexit.register(_stop_listener)
        return _LOG_LISTENER


def setup_logging(
    module_name: str,
    log_level: str = "INFO",
    include_console: bool | None = None,
    include_file: bool | None = None,
) -> logging.Logger:
    """Setup standardized logging for twemoji-tags modules.

    Args:
        module_name: Name of the module (usually __name__)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        include_console: Whether to log to stderr. If None, uses
            TWEMOJI_CONSOLE_LOGS ("1"/"true"/"yes" enables).
        include_file: Whether to log to a rotating file. If None, uses
            TWEMOJI_FILE_LOGS.

    Returns:
        Configured logger instance

    """
    logger = logging.getLogger(module_name)

    # Avoid duplicate handlers if already configured
    if logger.handlers:
        return logger

    level = getattr(logging, log_level.upper())
    logger.setLevel(level)
    if include_console is None:
        include_console = _is_truthy(os.environ.get("TWEMOJI_CONSOLE_LOGS"))
    if include_file is None:
        include_file = _is_truthy(os.environ.get("TWEMOJI_FILE_LOGS"))

    listener = _ensure_listener(level, include_console, include_file)
    if listener is None or _LOG_QUEUE is None:
        # Nothing configured: defer to whatever the host application set up.
        logger.addHandler(logging.NullHandler())
        return logger

    logger.propagate = False
    queue_handler = QueueHandler(_LOG_QUEUE)
    queue_handler.setLevel(level)
    logger.addHandler(queue_handler)

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger for a module with default settings.

    The level comes from TWEMOJI_LOG_LEVEL, else from the `log_level` key of
    the global config.
    """
    log_level = os.environ.get("TWEMOJI_LOG_LEVEL")
    if not log_level:
        from .config import get_config

        log_level = get_config().log_level
    return setup_logging(module_name, log_level=log_level)


__all__ = ["setup_logging", "get_logger"]
