# folio/diagnostics.py
"""
Package logger for folio.

Debug output is opt-in: set FOLIO_DEBUG=1 to get a rotating file log under
`logs/folio_debug.log` (override the directory with FOLIO_LOG_DIR). Without it
the logger only carries a NullHandler, so library users decide where records go.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

_LOGGER: logging.Logger | None = None

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_DATEFMT = "(%Y-%m-%d %H:%M:%S)"


def debug_enabled() -> bool:
    return os.getenv("FOLIO_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}


def get_logger() -> logging.Logger:
    """Create/reuse the `folio` logger."""
    global _LOGGER
    if _LOGGER is not None:
        return _LOGGER

    logger = logging.getLogger("folio")

    # Avoid duplicate handlers if reloaded in REPL/tests
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
        if debug_enabled():
            logger.setLevel(logging.DEBUG)
            log_path = os.path.join(os.getenv("FOLIO_LOG_DIR", "logs"), "folio_debug.log")
            try:
                os.makedirs(os.path.dirname(log_path), exist_ok=True)
                handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
                handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
                logger.addHandler(handler)
            except OSError:
                # an unwritable log dir must not take the site build down with it
                pass

    _LOGGER = logger
    return logger


def attach_console(level: int = logging.INFO) -> None:
    """Mirror `folio` records to stderr (used by the CLI's --verbose)."""
    logger = get_logger()
    if any(getattr(h, "_folio_console", False) for h in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt="%(levelname)s %(message)s"))
    handler._folio_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)


__all__ = ["get_logger", "debug_enabled", "attach_console"]
