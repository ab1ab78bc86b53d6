"""
Centralized logging configuration for gedcom-chart.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Diagnostics go to stderr as LaTeX comments (``% DEBUG: ...``) so they can
  never be mistaken for chart output, which is written to stdout.
* A record may carry ``extra={"indent": n}``; the line is then prefixed with
  ``n`` tabs to mirror the traversal depth.
* Optional log file (plus rotation) controlled by ``config/gedcom_chart.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path

from gedcom_chart.config import get_config
from gedcom_chart.utils.pathing import resolve_project_path

BASE_LOGGER_NAME = "gedcom_chart"
CONSOLE_FORMAT = "%(indent_prefix)s%% %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_base_configured: bool = False


class IndentFilter(logging.Filter):
    """Turn an optional ``indent`` attribute into a tab prefix."""

    def filter(self, record: logging.LogRecord) -> bool:
        depth = getattr(record, "indent", 0) or 0
        record.indent_prefix = "\t" * int(depth)
        return True


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _build_file_handler(path: Path, level: int, rotate: bool) -> logging.Handler:
    """Create a file handler with optional rotation."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    effective_level = logging.DEBUG if cfg.debug else base_level

    base_logger.setLevel(effective_level)
    base_logger.propagate = False

    console = StreamHandler()
    console.setLevel(effective_level)
    console.addFilter(IndentFilter())
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    base_logger.addHandler(console)

    log_file = cfg.logging.get("file")
    if log_file:
        log_dir = resolve_project_path(cfg.logging.get("dir") or "logs")
        base_logger.addHandler(
            _build_file_handler(
                log_dir / log_file,
                effective_level,
                bool(cfg.logging.get("rotate", False)),
            )
        )

    _base_configured = True
    return base_logger


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger that shares the project-wide handlers.

    Names outside the ``gedcom_chart`` hierarchy are nested under it, so
    ``get_logger("traversal")`` yields ``gedcom_chart.traversal``.
    """
    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    return base_logger if logger_name == BASE_LOGGER_NAME else logging.getLogger(logger_name)


def set_debug(enabled: bool) -> None:
    """Switch the whole hierarchy to DEBUG (or back to the configured level)."""
    base_logger = _configure_base_logger()
    if enabled:
        level = logging.DEBUG
    else:
        level_name = str(get_config().logging.get("level", "INFO")).upper()
        level = getattr(logging, level_name, logging.INFO)

    base_logger.setLevel(level)
    for handler in base_logger.handlers:
        handler.setLevel(level)


def reconfigure() -> Logger:
    """Drop the base handlers and rebuild them from the current config."""
    global _base_configured

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    for handler in list(base_logger.handlers):
        base_logger.removeHandler(handler)
        handler.close()
    _base_configured = False
    return _configure_base_logger()
