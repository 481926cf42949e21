"""
Logging configuration for coinunits.

The library itself only emits through named loggers under ``coinunits``
(``coinunits.parse`` logs rejected amount strings at DEBUG,
``coinunits.config`` reports which config file was loaded).  Applications
call :func:`setup_logging` once to attach handlers.

Two output formats:
  - **human** – coloured, single-line, readable
  - **json**  – newline-delimited JSON for log aggregators

Usage:
    from coinunits_core.logging_config import setup_logging
    setup_logging(level="DEBUG", fmt="json")
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from coinunits_core.config import LoggingConfig

LOGGER_NAME = "coinunits"


class _JSONFormatter(logging.Formatter):
    """Emit each log record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, default=str)


class _HumanFormatter(logging.Formatter):
    """Coloured, concise single-line format."""

    COLOURS = {
        "DEBUG": "\033[36m",     # cyan
        "INFO": "\033[32m",      # green
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        colour = self.COLOURS.get(record.levelname, "")
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        return (
            f"{colour}{ts} [{record.levelname:<7}]{self.RESET} "
            f"{record.name}: {record.getMessage()}"
        )


def setup_logging(
    level: str = "INFO",
    fmt: str = "human",
    log_file: Optional[str] = None,
    logger_name: str = LOGGER_NAME,
) -> logging.Logger:
    """
    Configure the ``coinunits`` logger tree and return its root.

    Parameters
    ----------
    level : str
        One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
    fmt : str
        ``"human"`` for coloured single-line output, ``"json"`` for
        newline-delimited JSON.
    log_file : str, optional
        If provided, logs are *also* written to this file (always JSON).
    logger_name : str
        Logger to configure; pass ``""`` for the process root logger.
    """
    if fmt not in ("human", "json"):
        raise ValueError(f"log format must be 'human' or 'json', got {fmt!r}")

    log = logging.getLogger(logger_name)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove any existing handlers (avoid duplicates on reload)
    log.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_JSONFormatter() if fmt == "json" else _HumanFormatter())
    log.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path))
        fh.setFormatter(_JSONFormatter())
        log.addHandler(fh)
    return log


def setup_logging_from_config(cfg: LoggingConfig) -> logging.Logger:
    """Apply the ``[logging]`` section of a loaded config."""
    return setup_logging(level=cfg.level, fmt=cfg.format, log_file=cfg.file)
