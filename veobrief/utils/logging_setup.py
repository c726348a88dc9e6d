from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(session_id)s | %(action)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_SESSION_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("log_session_id", default=None)
LOG_ACTION: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("log_action", default=None)


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = LOG_SESSION_ID.get() or "-"
        record.action = LOG_ACTION.get() or "-"
        return True


@contextmanager
def log_context(session_id: Optional[str] = None, action: Optional[str] = None) -> Iterator[None]:
    tokens = []
    if session_id is not None:
        tokens.append((LOG_SESSION_ID, LOG_SESSION_ID.set(session_id)))
    if action is not None:
        tokens.append((LOG_ACTION, LOG_ACTION.set(action)))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


def configure_logging(
    log_file: Optional[str] = "logs/veobrief.log",
    level: Union[int, str] = logging.INFO,
    enable_console: bool = False,
    force: bool = False,
) -> logging.Logger:
    root = logging.getLogger()
    if getattr(root, "_veobrief_logging_configured", False) and not force:
        return root

    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for log_filter in list(root.filters):
            root.removeFilter(log_filter)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = []

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    if enable_console:
        handlers.append(logging.StreamHandler())

    # Filters on the root logger skip records propagated from child loggers,
    # so the context fields are attached per handler.
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(ContextFilter())
        root.addHandler(handler)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root.setLevel(level)
    logging.captureWarnings(True)
    root._veobrief_logging_configured = True
    return root
