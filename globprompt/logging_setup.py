# globprompt/logging_setup.py
import logging
from logging import StreamHandler
from typing import Optional

from globprompt.settings import settings

NOISY_LOGGERS = [
    "asyncio",
    "prompt_toolkit",
]


def configure_logging(
    log_file: Optional[str] = None,
    level: int = logging.INFO,
) -> logging.Handler:
    """
    Configure a single file-only logging sink and prevent console pollution.

    The prompt owns the terminal while it is running, so any StreamHandler
    writing to stdout/stderr would tear the rendered output.
    """
    root = logging.getLogger()

    # 1) Remove ALL existing handlers (including basicConfig and any stream handlers)
    for h in list(root.handlers):
        root.removeHandler(h)

    # 2) Install a single FileHandler
    file_handler = logging.FileHandler(log_file or settings.LOG_FILE)
    file_handler.setLevel(logging.DEBUG)

    fmt = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    file_handler.setFormatter(fmt)

    root.addHandler(file_handler)
    root.setLevel(level)

    # 3) Route known library loggers to the file handler only
    for name in NOISY_LOGGERS:
        l = logging.getLogger(name)
        for h in list(l.handlers):
            l.removeHandler(h)
        l.addHandler(file_handler)
        l.propagate = False
        l.setLevel(logging.WARNING)

    _strip_console_handlers_globally()

    logging.raiseExceptions = False

    return file_handler


def _strip_console_handlers_globally():
    """Remove ANY StreamHandler attached to root or the known libraries."""
    root = logging.getLogger()
    for h in list(root.handlers):
        if isinstance(h, StreamHandler) and not isinstance(h, logging.FileHandler):
            root.removeHandler(h)

    for name in NOISY_LOGGERS:
        l = logging.getLogger(name)
        for h in list(l.handlers):
            if isinstance(h, StreamHandler) and not isinstance(h, logging.FileHandler):
                l.removeHandler(h)
