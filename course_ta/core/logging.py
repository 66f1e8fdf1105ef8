"""
Logging setup with Rich console support.

Call setup_logging() once at startup; modules log through
logging.getLogger(__name__).
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

_logging_configured = False
_console = Console(stderr=True)

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO", use_rich: bool = True) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_rich: Use a RichHandler instead of a plain stream handler

    Subsequent calls are ignored so handlers are never duplicated.
    """
    global _logging_configured

    if _logging_configured:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if use_rich:
        handler = RichHandler(
            console=_console,
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    handler.setLevel(numeric_level)
    root_logger.addHandler(handler)

    # Third-party clients are chatty at INFO
    for noisy in ("httpx", "httpcore", "openai", "chromadb"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    _logging_configured = True
